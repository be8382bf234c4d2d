"""L-system exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object and
keep the Diagnostic for programmatic inspection.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic
from .validation import ValidationError

__all__ = [
    "InvalidArgumentError",
    "InvalidGrammarError",
    "LSystemError",
    "ResourceLimitExceededError",
]


class LSystemError(Exception):
    """Base exception for all LSysEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LSystemError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidGrammarError(LSystemError):
    """Grammar violates the data-model invariants.

    Raised at Grammar construction, so an existing Grammar instance is always
    valid. Every detected problem is kept in ``errors``; the diagnostic
    describes the whole failure.

    Attributes:
        errors: Structured validation errors, one per violated invariant
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        errors: tuple[ValidationError, ...] = (),
    ) -> None:
        """Initialize InvalidGrammarError.

        Args:
            message: Error message string OR Diagnostic object
            errors: Validation errors that caused the rejection
        """
        super().__init__(message)
        self.errors = errors


class InvalidArgumentError(LSystemError):
    """Invalid argument passed to an expansion operation.

    Examples:
    - Negative iteration count
    - Non-integer iteration count
    - Non-positive expansion limit
    - Symbol outside the grammar alphabet passed to rewrite_one_pass()
    """


class ResourceLimitExceededError(LSystemError):
    """Expansion would exceed a configured ExpansionLimits bound.

    Raised before any symbols are materialized; no partial result exists.

    Attributes:
        limit: The configured bound that was exceeded
        requested: The value that exceeded it (iterations or symbol count)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        limit: int,
        requested: int,
    ) -> None:
        """Initialize ResourceLimitExceededError.

        Args:
            message: Error message string OR Diagnostic object
            limit: The configured bound
            requested: The value that exceeded the bound
        """
        super().__init__(message)
        self.limit = limit
        self.requested = requested
