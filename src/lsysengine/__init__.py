"""LSysEngine - L-system (Lindenmayer system) grammar expansion.

Rewrites an axiom under a context-free production grammar for N
generations. Grammars are immutable, validated values; expansion is a pure
function with optional resource limits for untrusted iteration counts.

Public API:
    Grammar - Immutable, validated grammar (alphabet, axiom, rules)
    SymbolKind - Variable/constant classification of a symbol
    expand - Expand the axiom for N generations
    iter_generations - Iterate over generations 0..N
    rewrite_one_pass - Apply one generation to a sequence
    ExpansionLimits - Iteration and output-size bounds
    expansion_length - Exact output length without expanding
    generation_lengths - Lengths of generations 0..N
    reachable_symbols - Symbols that can appear during expansion
    validate_grammar - Non-raising validation of grammar parts

Exceptions:
    LSystemError - Base exception class
    InvalidGrammarError - Grammar invariant violations
    InvalidArgumentError - Invalid iteration counts, limits or sequences
    ResourceLimitExceededError - ExpansionLimits bound exceeded

Submodules:
    lsysengine.diagnostics - Error types, diagnostics and validation results
    lsysengine.analysis - Rule graphs and length prediction
    lsysengine.constants - Default limits and validation codes
"""

from .analysis import expansion_length, generation_lengths, reachable_symbols
from .diagnostics import (
    InvalidArgumentError,
    InvalidGrammarError,
    LSystemError,
    ResourceLimitExceededError,
)
from .enums import SymbolKind
from .grammar import Grammar, Symbol, validate_grammar
from .runtime import ExpansionLimits, expand, iter_generations, rewrite_one_pass

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("lsysengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ExpansionLimits",
    "Grammar",
    "InvalidArgumentError",
    "InvalidGrammarError",
    "LSystemError",
    "ResourceLimitExceededError",
    "Symbol",
    "SymbolKind",
    "__version__",
    "expand",
    "expansion_length",
    "generation_lengths",
    "iter_generations",
    "reachable_symbols",
    "rewrite_one_pass",
    "validate_grammar",
]
