"""Keyed transposition and substitution ciphers with PKCS#7 padding."""

__version__ = "0.1.0"
