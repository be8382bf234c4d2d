"""Tests for analysis.growth length prediction.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from lsysengine import (
    Grammar,
    InvalidArgumentError,
    InvalidGrammarError,
    expand,
    expansion_length,
    generation_lengths,
)
from tests.strategies import grammars, iteration_counts


class TestExpansionLength:
    """Exact length without materialization."""

    def test_fibonacci_lengths(self, fibonacci: Grammar) -> None:
        """A -> AB, B -> A grows along the Fibonacci sequence."""
        assert [expansion_length(fibonacci, n) for n in range(8)] == [1, 2, 3, 5, 8, 13, 21, 34]

    def test_worked_example(self, algae: Grammar) -> None:
        """Generation 3 of A -> A+B, B -> A has nine symbols."""
        assert expansion_length(algae, 3) == 9

    def test_huge_iteration_count_without_expanding(self) -> None:
        """Lengths far beyond memory are computed arithmetically."""
        grammar = Grammar.from_rules("A", {"A": "AA"})

        assert expansion_length(grammar, 200) == 2**200

    def test_stable_table_short_circuits(self) -> None:
        """Length-preserving grammars answer large counts immediately."""
        grammar = Grammar.from_rules("AB", {"A": "B", "B": "A"})

        assert expansion_length(grammar, 10**9) == 2

    def test_empty_axiom(self, fibonacci: Grammar) -> None:
        """Empty axiom has length zero forever."""
        grammar = Grammar.from_rules((), fibonacci.rules)

        assert expansion_length(grammar, 10) == 0

    def test_rejects_negative_iterations(self, fibonacci: Grammar) -> None:
        """Same argument domain as expand()."""
        with pytest.raises(InvalidArgumentError):
            expansion_length(fibonacci, -3)

    def test_rejects_non_grammar(self) -> None:
        """Same grammar check as expand()."""
        with pytest.raises(InvalidGrammarError):
            expansion_length(None, 1)  # type: ignore[arg-type]


class TestGenerationLengths:
    """Per-generation lengths."""

    def test_includes_generation_zero(self, algae: Grammar) -> None:
        """iterations + 1 entries, the axiom first."""
        assert generation_lengths(algae, 3) == (1, 3, 5, 9)

    def test_zero_iterations(self, algae: Grammar) -> None:
        """Zero iterations gives only the axiom length."""
        assert generation_lengths(algae, 0) == (1,)

    def test_erasing_grammar_reaches_zero(self) -> None:
        """A rule that erases everything drops the length to zero."""
        grammar = Grammar.from_rules("AA", {"A": []})

        assert generation_lengths(grammar, 3) == (2, 0, 0, 0)


class TestLengthProperties:
    """Property: prediction agrees with actual expansion."""

    @given(grammar=grammars(), iterations=iteration_counts)
    def test_prediction_matches_expansion(self, grammar: Grammar, iterations: int) -> None:
        """expansion_length(g, n) == len(expand(g, n))."""
        predicted = expansion_length(grammar, iterations)
        event(f"iterations={iterations}")

        assert predicted == len(expand(grammar, iterations))

    @given(grammar=grammars(), iterations=st.integers(min_value=0, max_value=4))
    def test_generation_lengths_consistent(self, grammar: Grammar, iterations: int) -> None:
        """Every entry of generation_lengths matches expansion_length."""
        lengths = generation_lengths(grammar, iterations)

        assert len(lengths) == iterations + 1
        assert lengths == tuple(expansion_length(grammar, n) for n in range(iterations + 1))
