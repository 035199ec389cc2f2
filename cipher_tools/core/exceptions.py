from typing import Any


class CipherToolsError(Exception):
    """Base exception for all cipher tool errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherToolsError):
    """Raised when input validation fails."""

    pass


class TextTooLongError(ValidationError):
    """Raised when input text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Input length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class InvalidCiphertextError(ValidationError):
    """Raised when ciphertext format is invalid."""

    pass


# ============================================================================
# Padding
# ============================================================================


class PaddingValidationError(CipherToolsError):
    """Base exception for padding errors."""

    pass


class ParameterError(PaddingValidationError):
    """Raised when padding is called with unusable arguments."""

    pass


class InvalidBlockLengthError(ParameterError):
    """Raised when the block length is outside 1..255."""

    def __init__(self, block_length: int):
        super().__init__(
            "Block size must be greater than 0 and smaller than 256",
            {"block_length": block_length},
        )


class InvalidMessageLengthError(ParameterError):
    """Raised when padded data is not a whole number of blocks."""

    def __init__(self, length: int, block_length: int):
        super().__init__(
            "Data length must be a multiple of block size",
            {"length": length, "block_length": block_length},
        )


class PaddingError(PaddingValidationError):
    """Raised when the padding bytes themselves are malformed."""

    pass


class PaddingSchemeNotFoundError(PaddingValidationError):
    """Raised when requested padding scheme is not known."""

    def __init__(self, scheme: str):
        super().__init__(
            f"Padding scheme '{scheme}' not found",
            {"scheme": scheme},
        )


# ============================================================================
# Cipher operations
# ============================================================================


class CipherOperationError(CipherToolsError):
    """Base exception for encrypt/decrypt failures."""

    pass


class InvalidKeySizeError(CipherOperationError):
    """Raised when the key length is unacceptable for the cipher."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Key size is invalid: {size}", {"size": size})


class InvalidKeyError(CipherOperationError):
    """Raised when the key has the right size but unusable content."""

    pass


class InvalidEncryptedMessageLengthError(CipherOperationError):
    """Raised when ciphertext length does not fit the key."""

    def __init__(self, length: int, key_length: int):
        super().__init__(
            "Encrypted message has an invalid length",
            {"length": length, "key_length": key_length},
        )


class CipherPaddingError(CipherOperationError, PaddingValidationError):
    """Raised when padding fails inside a cipher operation."""

    def __init__(self, cause: PaddingValidationError):
        self.cause = cause
        super().__init__(
            f"Padding validation failed: {cause.message}",
            {"cause": type(cause).__name__, **cause.details},
        )


class EngineNotFoundError(CipherToolsError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
