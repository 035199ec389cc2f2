import base64
import binascii

from cipher_tools.core.exceptions import InvalidCiphertextError
from cipher_tools.models.schemas import TextEncoding


def encode_base64(data: bytes) -> str:
    """Render bytes as standard base64 text."""
    return base64.b64encode(data).decode("ascii")


def decode_base64(text: str) -> bytes:
    """Parse standard base64 text, rejecting anything malformed."""
    try:
        return base64.b64decode(text.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidCiphertextError(
            f"Ciphertext is not valid base64: {e}",
            {"encoding": TextEncoding.BASE64.value},
        ) from e


def to_hex(data: bytes) -> str:
    """Render bytes as lowercase hex pairs."""
    return data.hex()


def encode_text(data: bytes, encoding: TextEncoding) -> str:
    """Turn ciphertext bytes into transportable text."""
    if encoding == TextEncoding.BASE64:
        return encode_base64(data)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidCiphertextError(
            "Ciphertext is not valid UTF-8, use base64 encoding",
            {"encoding": TextEncoding.RAW.value},
        ) from e


def decode_text(text: str, encoding: TextEncoding) -> bytes:
    """Recover ciphertext bytes from transported text."""
    if encoding == TextEncoding.BASE64:
        return decode_base64(text)
    return text.encode("utf-8")
