"""Exact generation-length prediction.

Computes how long an expansion will be without building it. The length of
a symbol after k generations is the sum of the k-1 lengths of the symbols
in its replacement, so one length table per generation over the alphabet
is enough; the sequence itself is never materialized.

Used by the runtime to enforce symbol budgets before allocating anything.

Complexity:
    Time: O(iterations x total replacement size) integer additions
    Space: O(alphabet size)

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from typing import TYPE_CHECKING

from lsysengine.core import require_iterations

from .graph import build_rule_graph, reachable_from

if TYPE_CHECKING:
    from lsysengine.grammar import Grammar, Symbol

__all__ = [
    "expansion_length",
    "generation_lengths",
    "reachable_symbols",
]

logger = logging.getLogger(__name__)


def _require_grammar(grammar: object) -> Grammar:
    # grammar.validator imports this package; resolve at call time
    from lsysengine.grammar import require_grammar  # noqa: PLC0415 - circular

    return require_grammar(grammar)


def _iter_lengths(grammar: Grammar, iterations: int) -> Iterator[int]:
    """Yield the total length of generations 0..iterations.

    Stops early once the per-symbol table reaches a fixed point: every
    later generation then has the same length as the last one yielded.
    """
    table: dict[Symbol, int] = dict.fromkeys(grammar.alphabet, 1)
    yield len(grammar.start)

    for generation in range(1, iterations + 1):
        next_table = {
            symbol: sum(table[s] for s in grammar.rule_for(symbol))
            for symbol in table
        }
        if next_table == table:
            logger.debug("Length table stable from generation %d", generation - 1)
            return
        table = next_table
        yield sum(table[s] for s in grammar.start)


def expansion_length(grammar: Grammar, iterations: int) -> int:
    """Exact length of expand(grammar, iterations).

    Args:
        grammar: Validated grammar
        iterations: Number of rewrite passes (>= 0)

    Returns:
        Number of symbols the expansion produces

    Raises:
        InvalidGrammarError: If grammar is not a Grammar instance
        InvalidArgumentError: If iterations is negative or not an int

    Example:
        >>> g = Grammar.from_rules("A", {"A": "AB", "B": "A"})
        >>> [expansion_length(g, n) for n in range(6)]
        [1, 2, 3, 5, 8, 13]
    """
    grammar = _require_grammar(grammar)
    iterations = require_iterations(iterations)

    return deque(_iter_lengths(grammar, iterations), maxlen=1)[0]


def generation_lengths(grammar: Grammar, iterations: int) -> tuple[int, ...]:
    """Lengths of generations 0..iterations (iterations + 1 entries).

    Args:
        grammar: Validated grammar
        iterations: Number of rewrite passes (>= 0)

    Returns:
        Tuple of lengths, index k holding len(expand(grammar, k))

    Raises:
        InvalidGrammarError: If grammar is not a Grammar instance
        InvalidArgumentError: If iterations is negative or not an int
    """
    grammar = _require_grammar(grammar)
    iterations = require_iterations(iterations)
    lengths = list(_iter_lengths(grammar, iterations))
    # Pad past the fixed point of the length table
    lengths.extend([lengths[-1]] * (iterations + 1 - len(lengths)))
    return tuple(lengths)


def reachable_symbols(grammar: Grammar) -> frozenset[Symbol]:
    """Every symbol that appears in some generation of the expansion.

    Args:
        grammar: Validated grammar

    Returns:
        Frozen set of symbols reachable from the axiom through the rules

    Raises:
        InvalidGrammarError: If grammar is not a Grammar instance
    """
    grammar = _require_grammar(grammar)
    return reachable_from(grammar.start, build_rule_graph(grammar.rules))
