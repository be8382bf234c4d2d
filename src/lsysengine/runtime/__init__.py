"""Runtime expansion of L-system grammars.

Exports:
    expand: Expand the axiom for N generations
    iter_generations: Iterate over every generation up to N
    rewrite_one_pass: Apply a single generation to any sequence
    ExpansionLimits: Iteration and output-size bounds

Python 3.13+.
"""

from .expander import expand, iter_generations, rewrite_one_pass
from .limits import ExpansionLimits

__all__ = ["ExpansionLimits", "expand", "iter_generations", "rewrite_one_pass"]
