"""Diagnostic system for L-system errors.

Provides structured error diagnostics with codes, hints, and context fields.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidArgumentError,
    InvalidGrammarError,
    LSystemError,
    ResourceLimitExceededError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidArgumentError",
    "InvalidGrammarError",
    "LSystemError",
    "OutputFormat",
    "ResourceLimitExceededError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
