"""Monoalphabetic cipher engines."""

from cipher_tools.services.engines.monoalphabetic.simple_substitution import SubstitutionEngine

__all__ = [
    "SubstitutionEngine",
]
