"""Grammar expansion: parallel rewriting of an axiom for N generations.

Each generation replaces every symbol of the previous one by its
production (identity for constants and rule-less variables), reading only
the previous generation. Generations are built with an explicit loop, so
large iteration counts never grow the call stack.

Once a generation equals its predecessor it is a fixed point of the
grammar and every later generation is identical; the loop stops there.

Thread Safety:
    Pure functions over immutable Grammar values. No shared state.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from lsysengine.core import require_iterations
from lsysengine.diagnostics import ErrorTemplate, InvalidArgumentError
from lsysengine.grammar import Grammar, Symbol, require_grammar
from lsysengine.grammar.validator import is_hashable

from .limits import ExpansionLimits

__all__ = ["expand", "iter_generations", "rewrite_one_pass"]

logger = logging.getLogger(__name__)


def _rewrite(
    rules: Mapping[Symbol, tuple[Symbol, ...]],
    sequence: tuple[Symbol, ...],
) -> tuple[Symbol, ...]:
    """Apply one generation of rules to an already-validated sequence."""
    result: list[Symbol] = []
    for symbol in sequence:
        replacement = rules.get(symbol)
        if replacement is None:
            result.append(symbol)
        else:
            result.extend(replacement)
    return tuple(result)


def rewrite_one_pass(grammar: Grammar, sequence: Iterable[Symbol]) -> tuple[Symbol, ...]:
    """Rewrite every symbol of a sequence once.

    All symbols are rewritten against the same input snapshot and the
    replacements are concatenated in positional order.

    Args:
        grammar: Validated grammar
        sequence: Symbols to rewrite; every symbol must be in the alphabet

    Returns:
        The next generation as a new tuple

    Raises:
        InvalidGrammarError: If grammar is not a Grammar instance
        InvalidArgumentError: If sequence contains a symbol outside the alphabet

    Example:
        >>> g = Grammar.from_rules("A", {"A": "A+B", "B": "A"})
        >>> rewrite_one_pass(g, ("A", "+", "B"))
        ('A', '+', 'B', '+', 'A')
    """
    grammar = require_grammar(grammar)
    items = tuple(sequence)

    alphabet = grammar.alphabet
    for position, symbol in enumerate(items):
        if not is_hashable(symbol) or symbol not in alphabet:
            raise InvalidArgumentError(ErrorTemplate.unknown_symbol(symbol, position))

    return _rewrite(grammar.rules, items)


def _prepare(
    grammar: object,
    iterations: object,
    limits: ExpansionLimits | None,
) -> tuple[Grammar, int]:
    """Validate arguments and enforce limits before any rewriting."""
    checked_grammar = require_grammar(grammar)
    checked_iterations = require_iterations(iterations)
    if limits is not None:
        limits.check(checked_grammar, checked_iterations)
    return checked_grammar, checked_iterations


def _generations(grammar: Grammar, iterations: int) -> Iterator[tuple[Symbol, ...]]:
    current = grammar.start
    yield current

    for generation in range(1, iterations + 1):
        following = _rewrite(grammar.rules, current)
        if following == current:
            logger.debug("Fixed point reached at generation %d", generation - 1)
            for _ in range(generation, iterations + 1):
                yield current
            return
        current = following
        yield current


def iter_generations(
    grammar: Grammar,
    iterations: int,
    *,
    limits: ExpansionLimits | None = None,
) -> Iterator[tuple[Symbol, ...]]:
    """Iterate over generations 0..iterations of an expansion.

    Arguments and limits are checked when this function is called, not on
    the first ``next()``.

    Args:
        grammar: Validated grammar
        iterations: Number of rewrite passes (>= 0)
        limits: Optional resource bounds (None means unbounded)

    Returns:
        Iterator yielding iterations + 1 tuples, the axiom first

    Raises:
        InvalidGrammarError: If grammar is not a Grammar instance
        InvalidArgumentError: If iterations is negative or not an int
        ResourceLimitExceededError: If limits would be exceeded
    """
    checked_grammar, checked_iterations = _prepare(grammar, iterations, limits)
    return _generations(checked_grammar, checked_iterations)


def expand(
    grammar: Grammar,
    iterations: int,
    *,
    limits: ExpansionLimits | None = None,
) -> tuple[Symbol, ...]:
    """Expand the axiom of a grammar for a number of generations.

    ``expand(g, 0)`` is the axiom; ``expand(g, n)`` is
    ``rewrite_one_pass(g, expand(g, n - 1))``. Output length usually grows
    exponentially with ``iterations``; pass ``limits`` to bound it.

    Args:
        grammar: Validated grammar
        iterations: Number of rewrite passes (>= 0)
        limits: Optional resource bounds (None means unbounded)

    Returns:
        The expanded symbol sequence

    Raises:
        InvalidGrammarError: If grammar is not a Grammar instance
        InvalidArgumentError: If iterations is negative or not an int
        ResourceLimitExceededError: If limits would be exceeded

    Example:
        >>> g = Grammar(
        ...     variables={"A", "B"},
        ...     constants={"+"},
        ...     start=["A"],
        ...     rules={"A": ["A", "+", "B"], "B": ["A"]},
        ... )
        >>> "".join(expand(g, 3))
        'A+B+A+A+B'
    """
    checked_grammar, checked_iterations = _prepare(grammar, iterations, limits)
    logger.debug(
        "Expanding %d iterations from axiom of %d symbols",
        checked_iterations,
        len(checked_grammar.start),
    )

    result = checked_grammar.start
    for generation in range(checked_iterations):
        following = _rewrite(checked_grammar.rules, result)
        if following == result:
            logger.debug("Fixed point reached at generation %d", generation)
            break
        result = following

    logger.debug("Expansion produced %d symbols", len(result))
    return result
