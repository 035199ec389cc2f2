from abc import ABC, abstractmethod


class PaddingStrategy(ABC):
    """
    Abstract base class for block padding schemes.

    Each padding implementation must provide:
    - apply_padding(): Extend data to a whole number of blocks
    - strip_padding(): Remove padding added by apply_padding()
    - validate_padding(): Check that trailing padding bytes are well formed
    """

    name: str

    @abstractmethod
    def apply_padding(self, data: bytes, block_length: int) -> bytes:
        """
        Apply padding to the data to match the block size.

        Args:
            data: The input data to pad
            block_length: The size of the blocks

        Returns:
            The padded data
        """
        pass

    @abstractmethod
    def strip_padding(self, data: bytes, block_length: int) -> bytes:
        """
        Strip padding from the data.

        Args:
            data: The padded data
            block_length: The block size used to pad the data

        Returns:
            The unpadded data
        """
        pass

    @abstractmethod
    def validate_padding(self, data: bytes, block_length: int) -> None:
        """
        Check the trailing padding of non-empty data.

        Args:
            data: The padded data
            block_length: The block size used to pad the data

        Raises:
            PaddingError: If the padding is malformed
        """
        pass
