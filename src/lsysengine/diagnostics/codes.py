"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Grammar errors (the detailed violations travel as
                   ValidationError entries on InvalidGrammarError.errors)
        2000-2999: Argument errors (invalid values passed to operations)
        3000-3999: Resource limit errors (expansion ceilings)
    """

    # Grammar errors (1000-1999)
    INVALID_GRAMMAR = 1001
    NOT_A_GRAMMAR = 1002

    # Argument errors (2000-2999)
    NEGATIVE_ITERATIONS = 2001
    INVALID_ITERATIONS_TYPE = 2002
    INVALID_LIMIT = 2003
    UNKNOWN_SYMBOL = 2004

    # Resource limit errors (3000-3999)
    ITERATION_LIMIT_EXCEEDED = 3001
    EXPANSION_BUDGET_EXCEEDED = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        symbol: repr() of the offending symbol (grammar errors)
        argument_name: Argument name that caused error (argument errors)
        expected: Description of the accepted values (argument errors)
        received: Description of the received value (argument errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    symbol: str | None = None
    argument_name: str | None = None
    expected: str | None = None
    received: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[NEGATIVE_ITERATIONS]: Iteration count must be non-negative, got -1
              = argument: iterations
              = expected: int >= 0
              = received: -1
              = help: Pass 0 to get the axiom unchanged

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
