"""Shared constants for LSysEngine.

Centralized configuration constants used across the grammar, analysis and
runtime packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Expansion limits: Resource bounds for untrusted iteration counts
- Validation codes: Stable string codes for ValidationError/ValidationWarning

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Expansion limits
    "MAX_ITERATIONS",
    "DEFAULT_MAX_EXPANSION_SIZE",
    # Validation codes
    "CODE_NOT_ITERABLE",
    "CODE_INVALID_RULES",
    "CODE_INVALID_REPLACEMENT",
    "CODE_ALPHABET_OVERLAP",
    "CODE_RULE_KEY_NOT_VARIABLE",
    "CODE_SYMBOL_NOT_IN_ALPHABET",
    "CODE_UNHASHABLE_SYMBOL",
    "CODE_VARIABLE_WITHOUT_RULE",
    "CODE_UNREACHABLE_RULE",
]

# ============================================================================
# EXPANSION LIMITS
# ============================================================================
#
# Expansion is unbounded unless the caller passes ExpansionLimits. These are
# the defaults ExpansionLimits() uses when constructed without arguments.
#
# Growth is exponential for most interesting grammars: the Fibonacci grammar
# (A -> AB, B -> A) reaches ~10^13 symbols at 64 generations. The iteration
# ceiling rejects absurd requests cheaply; the symbol budget is the real
# bound and is checked against the predicted length before any allocation.
#
# ============================================================================

# Maximum number of rewrite passes accepted by ExpansionLimits().
MAX_ITERATIONS: int = 64

# Maximum number of symbols in an expansion result (10 million).
# A tuple of 10M interned string references is ~80 MB on 64-bit CPython.
DEFAULT_MAX_EXPANSION_SIZE: int = 10_000_000

# ============================================================================
# VALIDATION CODES
# ============================================================================

# Errors: malformed grammar parts (wrong container types)
CODE_NOT_ITERABLE: str = "not-iterable"
CODE_INVALID_RULES: str = "invalid-rules"
CODE_INVALID_REPLACEMENT: str = "invalid-replacement"

# Errors: grammar invariant violations
CODE_ALPHABET_OVERLAP: str = "alphabet-overlap"
CODE_RULE_KEY_NOT_VARIABLE: str = "rule-key-not-variable"
CODE_SYMBOL_NOT_IN_ALPHABET: str = "symbol-not-in-alphabet"
CODE_UNHASHABLE_SYMBOL: str = "unhashable-symbol"

# Warnings: valid but probably unintended grammar shapes
CODE_VARIABLE_WITHOUT_RULE: str = "variable-without-rule"
CODE_UNREACHABLE_RULE: str = "unreachable-rule"
