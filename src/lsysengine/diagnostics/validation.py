"""Unified validation result for grammar validation.

Consolidates all validation feedback from the grammar checks:
- Errors: Invariant violations that make a grammar unusable
- Warnings: Valid grammars with probably unintended shapes

Python 3.13+.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


# ============================================================================
# VALIDATION ERROR & WARNING TYPES
# ============================================================================


# Maximum symbol repr length before truncation when sanitizing
_SANITIZE_MAX_CONTENT_LENGTH: int = 100


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured error from grammar validation.

    Attributes:
        code: Error code (e.g., "alphabet-overlap", "rule-key-not-variable")
        message: Human-readable error message
        symbol: repr() of the offending symbol
        location: Where the symbol was found (e.g., "start[2]", "rules['A'][0]")
    """

    code: str
    message: str
    symbol: str
    location: str | None = None

    def format(self, *, sanitize: bool = False) -> str:
        """Format error as human-readable string.

        Args:
            sanitize: If True, truncate the symbol repr. Symbols are opaque
                      hashable values and their repr may be arbitrarily long.

        Returns:
            Formatted error string with optional truncation.

        Examples:
            >>> error = ValidationError("alphabet-overlap", "Overlap", "'A'")
            >>> error.format()
            "[alphabet-overlap]: Overlap (symbol: 'A')"
        """
        symbol_display = self.symbol
        if sanitize and len(symbol_display) > _SANITIZE_MAX_CONTENT_LENGTH:
            symbol_display = symbol_display[:_SANITIZE_MAX_CONTENT_LENGTH] + "..."

        location = f" at {self.location}" if self.location is not None else ""
        return f"[{self.code}]{location}: {self.message} (symbol: {symbol_display})"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured warning from grammar validation.

    Attributes:
        code: Warning code (e.g., "variable-without-rule", "unreachable-rule")
        message: Human-readable warning message
        context: Additional context (e.g., the symbol repr)
    """

    code: str
    message: str
    context: str | None = None

    def format(self) -> str:
        """Format warning as human-readable string."""
        context = f" ({self.context})" if self.context else ""
        return f"[{self.code}]: {self.message}{context}"


# ============================================================================
# UNIFIED VALIDATION RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Unified validation result for a grammar.

    Immutable result object for thread-safe validation feedback.

    Attributes:
        errors: Invariant violations
        warnings: Informational findings that do not affect validity

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Warnings do not affect validity - they're informational.
        """
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Get number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Get number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid(warnings: tuple[ValidationWarning, ...] = ()) -> "ValidationResult":
        """Create a valid result, optionally carrying warnings.

        Args:
            warnings: Tuple of validation warnings (default: empty)

        Returns:
            ValidationResult with no errors
        """
        return ValidationResult(errors=(), warnings=warnings)

    @staticmethod
    def invalid(
        errors: tuple[ValidationError, ...],
        warnings: tuple[ValidationWarning, ...] = (),
    ) -> "ValidationResult":
        """Create an invalid result.

        Args:
            errors: Tuple of validation errors
            warnings: Tuple of validation warnings (default: empty)

        Returns:
            ValidationResult with provided errors/warnings
        """
        return ValidationResult(errors=errors, warnings=warnings)

    def format(
        self,
        *,
        sanitize: bool = False,
        include_warnings: bool = True,
    ) -> str:
        """Format validation result as human-readable string.

        Args:
            sanitize: If True, truncate long symbol reprs in errors.
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format(sanitize=sanitize)}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                lines.append(f"  {warning.format()}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
