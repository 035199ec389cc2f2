"""Block padding strategies."""

from cipher_tools.core.exceptions import PaddingSchemeNotFoundError
from cipher_tools.models.schemas import PaddingScheme
from cipher_tools.services.padding.base import PaddingStrategy
from cipher_tools.services.padding.pkcs7 import Pkcs7Padding

_STRATEGIES: dict[PaddingScheme, type[PaddingStrategy]] = {
    PaddingScheme.PKCS7: Pkcs7Padding,
}


def get_padding_strategy(scheme: PaddingScheme | str) -> PaddingStrategy:
    """
    Get a padding strategy instance by scheme name.

    Args:
        scheme: Padding scheme, as enum member or its value

    Returns:
        A new strategy instance
    """
    try:
        strategy_class = _STRATEGIES[PaddingScheme(scheme)]
    except (KeyError, ValueError):
        raise PaddingSchemeNotFoundError(str(scheme)) from None
    return strategy_class()


__all__ = [
    "PaddingStrategy",
    "Pkcs7Padding",
    "get_padding_strategy",
]
