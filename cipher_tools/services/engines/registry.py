from typing import Type

from cipher_tools.core.exceptions import EngineNotFoundError
from cipher_tools.models.schemas import CipherType, PaddingScheme
from cipher_tools.services.engines.base import CipherEngine
from cipher_tools.services.padding import get_padding_strategy


class EngineRegistry:
    """
    Registry for cipher engines.

    Manages available cipher engines and builds them with the requested
    padding scheme.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}
    _instances: dict[tuple[CipherType, PaddingScheme | None], CipherEngine] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class TranspositionEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine(
        self,
        cipher_type: CipherType,
        padding: PaddingScheme = PaddingScheme.PKCS7,
    ) -> CipherEngine:
        """
        Get an engine instance for the specified cipher type.

        Args:
            cipher_type: The type of cipher
            padding: Padding scheme, used only by engines that pad

        Returns:
            Engine instance

        Raises:
            EngineNotFoundError: If no engine is registered for the type
        """
        if cipher_type not in self._engines:
            raise EngineNotFoundError(str(getattr(cipher_type, "value", cipher_type)))

        engine_class = self._engines[cipher_type]
        cache_key = (cipher_type, padding if engine_class.uses_padding else None)

        # Lazy instantiation with caching
        if cache_key not in self._instances:
            if engine_class.uses_padding:
                engine = engine_class(get_padding_strategy(padding))
            else:
                engine = engine_class()
            self._instances[cache_key] = engine

        return self._instances[cache_key]

    def get_all_engines(self) -> list[CipherEngine]:
        """
        Get all registered engines with default padding.

        Returns:
            List of all engine instances
        """
        return [self.get_engine(cipher_type) for cipher_type in self._engines]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from cipher_tools.services.engines.monoalphabetic import simple_substitution  # noqa: F401
    from cipher_tools.services.engines.transposition import columnar  # noqa: F401


# Load engines when module is imported
_load_engines()
