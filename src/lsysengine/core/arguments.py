"""Argument validation shared by the analysis and runtime layers.

Every public operation that takes an iteration count funnels it through
require_iterations(), so the accepted domain and the error raised for
out-of-domain values are identical everywhere.

Python 3.13+.
"""

from lsysengine.diagnostics import ErrorTemplate, InvalidArgumentError

__all__ = ["require_iterations", "require_positive_limit"]


def require_iterations(iterations: object) -> int:
    """Validate an iteration count.

    Args:
        iterations: Requested number of rewrite passes

    Returns:
        The iteration count, unchanged

    Raises:
        InvalidArgumentError: If iterations is not an int (bool is rejected
            explicitly despite being an int subclass) or is negative
    """
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise InvalidArgumentError(ErrorTemplate.invalid_iterations_type(iterations))
    if iterations < 0:
        raise InvalidArgumentError(ErrorTemplate.negative_iterations(iterations))
    return iterations


def require_positive_limit(name: str, value: object) -> int:
    """Validate an expansion limit field.

    Args:
        name: Field name, reported in the diagnostic
        value: Configured limit

    Returns:
        The limit, unchanged

    Raises:
        InvalidArgumentError: If value is not a positive int
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(ErrorTemplate.invalid_limit(name, value))
    return value
