"""Static analysis of L-system grammars.

Provides rule dependency graphs, symbol reachability, and exact
generation-length prediction (no expansion required).

Python 3.13+.
"""

from .graph import build_rule_graph, reachable_from
from .growth import expansion_length, generation_lengths, reachable_symbols

__all__ = [
    "build_rule_graph",
    "expansion_length",
    "generation_lengths",
    "reachable_from",
    "reachable_symbols",
]
