import logging
import random
import string
from typing import ClassVar

from cipher_tools.core.exceptions import InvalidKeyError, InvalidKeySizeError
from cipher_tools.models.schemas import CipherType
from cipher_tools.services.engines.base import CipherEngine
from cipher_tools.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@EngineRegistry.register
class SubstitutionEngine(CipherEngine):
    """
    Simple Substitution cipher engine.

    Each byte of the alphabet (A-Z, a-z, 0-9) is replaced with the byte at
    the same position in the key, which must be a permutation of the
    alphabet. Any other byte (spaces, punctuation, non-ASCII) passes through
    unchanged. No padding is involved.
    """

    name = "Simple Substitution Cipher"
    cipher_type = CipherType.SUBSTITUTION
    description = (
        "Each letter or digit is mapped to another letter or digit using a "
        "permutation of the 62-symbol alphabet. Other characters are left "
        "unchanged."
    )

    ALPHABET: ClassVar[bytes] = (
        string.ascii_uppercase + string.ascii_lowercase + string.digits
    ).encode("ascii")

    def encrypt(self, plain: bytes, key: bytes) -> bytes:
        """Encrypt using the substitution key."""
        self._check_key(key)
        return self._substitute(plain, key)

    def decrypt(self, encrypted: bytes, key: bytes) -> bytes:
        """Decrypt by substituting with the inverted key."""
        self._check_key(key)

        # Inverse mapping: key[i] -> ALPHABET[i]
        reverse_key = bytearray(len(self.ALPHABET))
        for i, byte in enumerate(key):
            reverse_key[self.ALPHABET.index(byte)] = self.ALPHABET[i]

        return self._substitute(encrypted, bytes(reverse_key))

    def generate_random_key(self) -> bytes:
        """Generate a random permutation of the alphabet."""
        symbols = list(self.ALPHABET)
        random.shuffle(symbols)
        return bytes(symbols)

    def validate_key(self, key: bytes) -> bool:
        """Validate that key is a permutation of the alphabet."""
        return len(key) == len(self.ALPHABET) and set(key) == set(self.ALPHABET)

    def _check_key(self, key: bytes) -> None:
        if len(key) != len(self.ALPHABET):
            raise InvalidKeySizeError(len(key))
        if not self.validate_key(key):
            raise InvalidKeyError(
                "Key must be a permutation of A-Z, a-z and 0-9",
                {"missing": bytes(sorted(set(self.ALPHABET) - set(key))).decode("ascii")},
            )

    def _substitute(self, text: bytes, key: bytes) -> bytes:
        # Create mapping: ALPHABET[i] -> key[i]
        mapping = dict(zip(self.ALPHABET, key))

        result = bytearray()
        passed_through = 0
        for byte in text:
            if byte in mapping:
                result.append(mapping[byte])
            else:
                result.append(byte)
                passed_through += 1

        if passed_through:
            logger.debug("%d bytes outside the alphabet left unchanged", passed_through)
        return bytes(result)
