"""Transposition cipher engines."""

from cipher_tools.services.engines.transposition.columnar import TranspositionEngine

__all__ = [
    "TranspositionEngine",
]
