from enum import Enum

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherType(str, Enum):
    """Supported cipher types."""

    TRANSPOSITION = "transposition"
    SUBSTITUTION = "substitution"


class PaddingScheme(str, Enum):
    """Supported block padding schemes."""

    PKCS7 = "pkcs7"


class TextEncoding(str, Enum):
    """How ciphertext bytes are carried as text."""

    BASE64 = "base64"
    RAW = "raw"  # UTF-8 bytes, as typed


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(min_length=1, max_length=100_000)
    cipher_type: CipherType
    key: str | None = None
    padding: PaddingScheme = PaddingScheme.PKCS7
    encoding: TextEncoding = TextEncoding.BASE64


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(min_length=1, max_length=200_000)
    cipher_type: CipherType
    key: str = Field(min_length=1)
    padding: PaddingScheme = PaddingScheme.PKCS7
    encoding: TextEncoding = TextEncoding.BASE64


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: str
    encoding: TextEncoding


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str | None
    plaintext_hex: str
    cipher_type: CipherType


class CipherInfo(BaseModel):
    """Description of a registered cipher."""

    cipher_type: CipherType
    name: str
    description: str
    uses_padding: bool


class CipherListResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    ciphers: list[CipherInfo]


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
