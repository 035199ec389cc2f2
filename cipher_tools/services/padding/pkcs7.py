import logging

from cipher_tools.core.exceptions import (
    InvalidBlockLengthError,
    InvalidMessageLengthError,
    PaddingError,
    ParameterError,
)
from cipher_tools.services.padding.base import PaddingStrategy

logger = logging.getLogger(__name__)

MAX_BLOCK_LENGTH = 255


class Pkcs7Padding(PaddingStrategy):
    """
    PKCS#7 block padding.

    N bytes of value N are appended, where N is the distance to the next
    block boundary. Aligned input receives a full extra block, so N is
    always in 1..block_length and the padding can be removed unambiguously.

    Example with block length 4:

        01 02 03       ->  01 02 03 01
        01 02 03 04    ->  01 02 03 04 04 04 04 04
    """

    name = "pkcs7"

    def apply_padding(self, data: bytes, block_length: int) -> bytes:
        """Append PKCS#7 padding to data."""
        self._check_parameters(data, block_length)

        padding_value = block_length - len(data) % block_length
        return bytes(data) + bytes([padding_value]) * padding_value

    def strip_padding(self, data: bytes, block_length: int) -> bytes:
        """Remove PKCS#7 padding from data."""
        self._check_parameters(data, block_length)

        if len(data) % block_length != 0:
            raise InvalidMessageLengthError(len(data), block_length)

        self.validate_padding(data, block_length)

        padding_value = data[-1]
        return bytes(data[: len(data) - padding_value])

    def validate_padding(self, data: bytes, block_length: int) -> None:
        """Check that the last byte names a padding run that is really there."""
        padding_value = data[-1]

        if padding_value == 0 or padding_value > block_length:
            logger.debug("Rejected padding value %d for block length %d", padding_value, block_length)
            raise PaddingError(
                "Padding value must be greater than 0 and not greater than "
                f"block size. Found: {padding_value}",
                {"padding_value": padding_value, "block_length": block_length},
            )

        if any(byte != padding_value for byte in data[-padding_value:]):
            raise PaddingError(
                "Padding content is invalid",
                {"padding_value": padding_value},
            )

    def _check_parameters(self, data: bytes, block_length: int) -> None:
        if not data:
            raise ParameterError("Data must not be empty")
        if block_length <= 0 or block_length > MAX_BLOCK_LENGTH:
            raise InvalidBlockLengthError(block_length)
