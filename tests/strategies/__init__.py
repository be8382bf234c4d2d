"""Hypothesis strategies for LSysEngine property-based testing.

Usage:
    from tests.strategies import grammars, symbol_names
    from tests.strategies.grammar import constant_only_grammars

Event-Emitting Strategies (HypoFuzz-Optimized):
    - grammars: Emits ``strategy=grammar_{shape}``

Python 3.13+.
"""

from .grammar import (
    SYMBOL_ALPHABET,
    constant_only_grammars,
    grammars,
    iteration_counts,
    symbol_names,
)

__all__ = [
    "SYMBOL_ALPHABET",
    "constant_only_grammars",
    "grammars",
    "iteration_counts",
    "symbol_names",
]
