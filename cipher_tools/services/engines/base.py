from abc import ABC, abstractmethod
from typing import ClassVar

from cipher_tools.core.exceptions import InvalidKeySizeError
from cipher_tools.models.schemas import CipherType
from cipher_tools.services.encoding import encode_base64


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Each cipher implementation must provide:
    - encrypt(): Encrypt plaintext bytes with a key
    - decrypt(): Decrypt ciphertext bytes with the same key

    Engines hold only fixed configuration, so one instance can be shared
    between callers and threads.
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    description: str
    uses_padding: ClassVar[bool] = False

    @abstractmethod
    def encrypt(self, plain: bytes, key: bytes) -> bytes:
        """
        Encrypt plaintext with the given key.

        Args:
            plain: The plaintext to encrypt
            key: The encryption key

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt(self, encrypted: bytes, key: bytes) -> bytes:
        """
        Decrypt ciphertext with the given key.

        Args:
            encrypted: The ciphertext to decrypt
            key: The decryption key

        Returns:
            Plaintext
        """
        pass

    @abstractmethod
    def generate_random_key(self) -> bytes:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key
        """
        pass

    def encrypt_and_base64(self, plain: bytes, key: bytes) -> str:
        """Encrypt and render the ciphertext as standard base64."""
        return encode_base64(self.encrypt(plain, key))

    def ensure_valid_key(self, key: bytes) -> None:
        """Reject an empty key."""
        if not key:
            raise InvalidKeySizeError(0)
