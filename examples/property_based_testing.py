"""Property-Based Testing Examples for LSysEngine.

This example demonstrates how to use Hypothesis to check universal
properties of grammar expansion over randomly generated grammars.

Learn more about property-based testing:
- Hypothesis documentation: https://hypothesis.readthedocs.io/

Run this example:
    python examples/property_based_testing.py

Python 3.13+.
"""

# pylint: disable=no-value-for-parameter
# Hypothesis's @given decorator injects test parameters at runtime.

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from lsysengine import Grammar, expand, expansion_length, rewrite_one_pass

SYMBOLS = "ABCF+-[]"


@st.composite
def grammars(draw: st.DrawFn) -> Grammar:
    """Random grammar over a small character alphabet."""
    variables = draw(st.sets(st.sampled_from("ABCF"), min_size=1))
    constants = draw(st.sets(st.sampled_from("+-[]")))
    alphabet = sorted(variables | constants)
    replacement = st.lists(st.sampled_from(alphabet), max_size=4)
    rules = draw(st.dictionaries(st.sampled_from(sorted(variables)), replacement))
    start = draw(st.lists(st.sampled_from(alphabet), max_size=4))
    return Grammar(variables, constants, start, rules)


# ==============================================================================
# Example 1: Zero Iterations Is the Axiom
# ==============================================================================


def example_1_zero_iterations() -> None:
    """Property: expand(g, 0) returns the axiom unchanged."""
    print("=" * 70)
    print("Example 1: Zero-Iteration Identity")
    print("=" * 70)

    @given(grammar=grammars())
    @settings(max_examples=100)
    def test_zero_iterations(grammar: Grammar) -> None:
        assert expand(grammar, 0) == grammar.start

    test_zero_iterations()
    print("Property verified: expand(g, 0) == g.start\n")


# ==============================================================================
# Example 2: Compositionality
# ==============================================================================


def example_2_compositionality() -> None:
    """Property: m passes followed by n passes equals m + n passes."""
    print("=" * 70)
    print("Example 2: Compositionality")
    print("=" * 70)

    @given(grammar=grammars(), m=st.integers(0, 3), n=st.integers(0, 3))
    @settings(max_examples=100)
    def test_compositional(grammar: Grammar, m: int, n: int) -> None:
        sequence = expand(grammar, m)
        for _ in range(n):
            sequence = rewrite_one_pass(grammar, sequence)
        assert sequence == expand(grammar, m + n)

    test_compositional()
    print("Property verified: expand(g, m + n) == rewrite^n(expand(g, m))\n")


# ==============================================================================
# Example 3: Length Prediction
# ==============================================================================


def example_3_length_prediction() -> None:
    """Property: predicted length matches the materialized expansion."""
    print("=" * 70)
    print("Example 3: Length Prediction")
    print("=" * 70)

    @given(grammar=grammars(), n=st.integers(0, 5))
    @settings(max_examples=100)
    def test_length(grammar: Grammar, n: int) -> None:
        assert expansion_length(grammar, n) == len(expand(grammar, n))

    test_length()
    print("Property verified: expansion_length(g, n) == len(expand(g, n))\n")


if __name__ == "__main__":
    example_1_zero_iterations()
    example_2_compositionality()
    example_3_length_prediction()
    print("All properties verified.")
