"""Core utilities shared across analysis and runtime layers.

By isolating these utilities here, we maintain a clean dependency graph:

    diagnostics <- core <- grammar/analysis <- runtime

Exports:
    require_iterations: Validate an iteration count
    require_positive_limit: Validate an expansion limit

Python 3.13+.
"""

from .arguments import require_iterations, require_positive_limit

__all__ = ["require_iterations", "require_positive_limit"]
