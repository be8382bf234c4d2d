"""Graph algorithms for rule dependency analysis.

Provides the rule dependency graph and reachability search used to find
which symbols can ever appear when expanding a grammar from its axiom.

Operates on plain mappings so the grammar validator can use it before a
Grammar instance exists.

Python 3.13+.
"""

from collections.abc import Hashable, Iterable, Mapping

__all__ = [
    "build_rule_graph",
    "reachable_from",
]


def build_rule_graph(
    rules: Mapping[Hashable, Iterable[Hashable]],
) -> dict[Hashable, set[Hashable]]:
    """Build the successor graph of a production rule set.

    Each rule key maps to the set of distinct symbols in its replacement.
    Symbols without a rule do not appear as keys: under the identity policy
    they only ever produce themselves.

    Args:
        rules: Mapping from variable to replacement sequence.

    Returns:
        Mapping from rule key to the set of symbols it produces.

    Example:
        >>> build_rule_graph({"B": ("A", "A")})
        {'B': {'A'}}
    """
    return {key: set(replacement) for key, replacement in rules.items()}


def reachable_from(
    start: Iterable[Hashable],
    graph: Mapping[Hashable, set[Hashable]],
) -> frozenset[Hashable]:
    """Collect every symbol reachable from the axiom.

    A symbol is reachable if it appears in some generation of the
    expansion. Uses an explicit worklist instead of recursion so long rule
    chains cannot exhaust the call stack.

    Args:
        start: Axiom symbols.
        graph: Successor graph from build_rule_graph().

    Returns:
        Frozen set of reachable symbols (always includes every axiom symbol).

    Complexity:
        Time: O(V + E) where V = symbols, E = rule graph edges
        Space: O(V)
    """
    visited: set[Hashable] = set()
    stack: list[Hashable] = list(start)

    while stack:
        symbol = stack.pop()
        if symbol in visited:
            continue
        visited.add(symbol)
        stack.extend(
            successor
            for successor in graph.get(symbol, ())
            if successor not in visited
        )

    return frozenset(visited)
