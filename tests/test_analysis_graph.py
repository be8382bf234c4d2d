"""Tests for analysis.graph rule graphs and reachability.

Python 3.13+.
"""

from hypothesis import given

from lsysengine import Grammar, expand, reachable_symbols
from lsysengine.analysis.graph import build_rule_graph, reachable_from
from tests.strategies import grammars

# ============================================================================
# UNIT TESTS - RULE GRAPH
# ============================================================================


class TestBuildRuleGraph:
    """Successor sets per rule key."""

    def test_empty_rules(self) -> None:
        """No rules, no edges."""
        assert build_rule_graph({}) == {}

    def test_deduplicates_successors(self) -> None:
        """Repeated symbols in a replacement collapse to one edge."""
        assert build_rule_graph({"A": ("A", "+", "A")}) == {"A": {"A", "+"}}

    def test_erasing_rule_has_no_successors(self) -> None:
        """An empty replacement has an empty successor set."""
        assert build_rule_graph({"A": ()}) == {"A": set()}


# ============================================================================
# UNIT TESTS - REACHABILITY
# ============================================================================


class TestReachableFrom:
    """Iterative worklist search."""

    def test_axiom_always_reachable(self) -> None:
        """Axiom symbols are reachable even without rules."""
        assert reachable_from(["X", "Y"], {}) == frozenset({"X", "Y"})

    def test_transitive(self) -> None:
        """Follows chains of rules."""
        graph = {"A": {"B"}, "B": {"C"}, "C": {"D"}}

        assert reachable_from(["A"], graph) == frozenset("ABCD")

    def test_cycle_terminates(self) -> None:
        """Cycles do not loop forever."""
        graph = {"A": {"B"}, "B": {"A"}}

        assert reachable_from(["A"], graph) == frozenset({"A", "B"})

    def test_deep_chain_no_recursion_error(self) -> None:
        """A 10,000-long chain is handled without recursion."""
        graph = {i: {i + 1} for i in range(10_000)}

        assert len(reachable_from([0], graph)) == 10_001

    def test_reachable_symbols_on_grammar(self) -> None:
        """reachable_symbols applies the search to a Grammar."""
        grammar = Grammar(
            variables={"A", "B", "C"},
            constants={"+", "-"},
            start=["A"],
            rules={"A": ["A", "+"], "C": ["B", "-"]},
        )

        assert reachable_symbols(grammar) == frozenset({"A", "+"})


# ============================================================================
# PROPERTY TESTS
# ============================================================================


class TestReachabilityProperties:
    """Reachability over-approximates every generation."""

    @given(grammar=grammars())
    def test_every_generated_symbol_is_reachable(self, grammar: Grammar) -> None:
        """No generation contains an unreachable symbol."""
        reachable = reachable_symbols(grammar)

        for n in range(4):
            assert set(expand(grammar, n)) <= reachable
