"""Enumerations for LSysEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["SymbolKind"]


class SymbolKind(StrEnum):
    """Role of a symbol within a grammar alphabet.

    StrEnum provides automatic string conversion: str(SymbolKind.VARIABLE) == "variable"
    """

    VARIABLE = "variable"
    """Rewritable symbol: replaced by its production each generation"""

    CONSTANT = "constant"
    """Terminal symbol: copied unchanged each generation"""
