"""Grammar model and structural validation.

Exports:
    Grammar: Immutable, validated L-system grammar
    Symbol: Type alias for grammar tokens (any hashable value)
    require_grammar: Type check used at operation boundaries
    validate_grammar: Non-raising validation of grammar parts

Python 3.13+.
"""

from .model import Grammar, Symbol, require_grammar
from .validator import validate_grammar

__all__ = ["Grammar", "Symbol", "require_grammar", "validate_grammar"]
