import logging
import random
import string
from typing import ClassVar

from cipher_tools.core.exceptions import (
    CipherPaddingError,
    InvalidEncryptedMessageLengthError,
    PaddingValidationError,
)
from cipher_tools.models.schemas import CipherType
from cipher_tools.services.engines.base import CipherEngine
from cipher_tools.services.engines.registry import EngineRegistry
from cipher_tools.services.padding import PaddingStrategy, Pkcs7Padding

logger = logging.getLogger(__name__)


@EngineRegistry.register
class TranspositionEngine(CipherEngine):
    """
    Keyed columnar transposition cipher engine.

    The padded plaintext is written into a grid row by row, one column per
    key byte, then the columns are read out in ascending order of their key
    byte. Equal key bytes keep their original left-to-right order.

    Example with key b"ZEBRA" (column order: A=4, B=2, E=1, R=3, Z=0):

    Key:    Z E B R A
            ─────────
            H E L L O
            W O R L D
            ! 04 04 04 04  (PKCS#7 padded)

    Read columns 4, 2, 1, 3, 0 top to bottom.
    """

    name = "Columnar Transposition Cipher"
    cipher_type = CipherType.TRANSPOSITION
    description = (
        "A transposition cipher where padded plaintext is written into a grid "
        "by rows, then read out by columns in an order determined by sorting "
        "the key bytes. Ciphertext is exactly as long as the padded plaintext."
    )
    uses_padding = True

    ALPHABET: ClassVar[str] = string.ascii_uppercase

    def __init__(self, padding_strategy: PaddingStrategy | None = None):
        self.padding_strategy = padding_strategy or Pkcs7Padding()

    def encrypt(self, plain: bytes, key: bytes) -> bytes:
        """Pad, fill rows, read columns in key order."""
        self.ensure_valid_key(key)

        try:
            padded = self.padding_strategy.apply_padding(plain, len(key))
        except PaddingValidationError as e:
            raise CipherPaddingError(e) from e

        grid = self._build_grid(padded, len(key))
        positions = self._key_to_positions(key)
        logger.debug("Encrypting %d rows x %d columns", len(grid), len(key))

        result = bytearray()
        for col_pos in positions:
            for row in grid:
                result.append(row[col_pos])

        return bytes(result)

    def decrypt(self, encrypted: bytes, key: bytes) -> bytes:
        """Refill columns in key order, read rows, strip padding."""
        self.ensure_valid_key(key)

        key_length = len(key)
        if len(encrypted) % key_length != 0:
            raise InvalidEncryptedMessageLengthError(len(encrypted), key_length)

        num_rows = len(encrypted) // key_length
        positions = self._key_to_positions(key)
        logger.debug("Decrypting %d rows x %d columns", num_rows, key_length)

        grid = [[0] * key_length for _ in range(num_rows)]
        idx = 0
        for col_pos in positions:
            for row in grid:
                row[col_pos] = encrypted[idx]
                idx += 1

        flattened = bytes(byte for row in grid for byte in row)

        try:
            return self.padding_strategy.strip_padding(flattened, key_length)
        except PaddingValidationError as e:
            raise CipherPaddingError(e) from e

    def generate_random_key(self) -> bytes:
        """Generate a random keyword."""
        length = random.randint(4, 8)
        return "".join(random.choice(self.ALPHABET) for _ in range(length)).encode("ascii")

    def _key_to_positions(self, key: bytes) -> list[int]:
        """Column indices in reading order: ascending key byte, stable on ties."""
        return sorted(range(len(key)), key=lambda i: key[i])

    def _build_grid(self, data: bytes, num_columns: int) -> list[list[int]]:
        """Lay data out row by row, zero-filling an incomplete last row."""
        grid = []
        for start in range(0, len(data), num_columns):
            row = list(data[start:start + num_columns])
            row.extend([0] * (num_columns - len(row)))
            grid.append(row)
        return grid
