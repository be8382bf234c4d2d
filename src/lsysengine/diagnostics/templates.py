"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .validation import ValidationError

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Grammar errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_grammar(errors: tuple[ValidationError, ...]) -> Diagnostic:
        """Grammar rejected at construction.

        Args:
            errors: Every invariant violation found by validation

        Returns:
            Diagnostic for INVALID_GRAMMAR
        """
        msg = f"Invalid grammar: {len(errors)} error(s)"
        details = "; ".join(error.format(sanitize=True) for error in errors)
        return Diagnostic(
            code=DiagnosticCode.INVALID_GRAMMAR,
            message=f"{msg}: {details}" if details else msg,
            hint=(
                "Variables and constants must be disjoint, rule keys must be "
                "variables, and every symbol must belong to the alphabet"
            ),
        )

    @staticmethod
    def not_a_grammar(received: object) -> Diagnostic:
        """Value passed where a Grammar is required.

        Args:
            received: The value that was passed

        Returns:
            Diagnostic for NOT_A_GRAMMAR
        """
        type_name = type(received).__name__
        msg = f"Expected a Grammar instance, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_GRAMMAR,
            message=msg,
            hint="Construct the grammar with Grammar(...) or Grammar.from_rules(...)",
            argument_name="grammar",
            expected="Grammar",
            received=type_name,
        )

    # ------------------------------------------------------------------
    # Argument errors
    # ------------------------------------------------------------------

    @staticmethod
    def negative_iterations(iterations: int) -> Diagnostic:
        """Iteration count below zero.

        Args:
            iterations: The rejected iteration count

        Returns:
            Diagnostic for NEGATIVE_ITERATIONS
        """
        msg = f"Iteration count must be non-negative, got {iterations}"
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_ITERATIONS,
            message=msg,
            hint="Pass 0 to get the axiom unchanged",
            argument_name="iterations",
            expected="int >= 0",
            received=str(iterations),
        )

    @staticmethod
    def invalid_iterations_type(iterations: object) -> Diagnostic:
        """Iteration count is not an int.

        Args:
            iterations: The rejected value

        Returns:
            Diagnostic for INVALID_ITERATIONS_TYPE
        """
        type_name = type(iterations).__name__
        msg = f"Iteration count must be an int, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ITERATIONS_TYPE,
            message=msg,
            hint="bool and float values are rejected; convert explicitly with int()",
            argument_name="iterations",
            expected="int",
            received=type_name,
        )

    @staticmethod
    def invalid_limit(name: str, value: object) -> Diagnostic:
        """Expansion limit is not a positive int.

        Args:
            name: Limit field name
            value: The rejected value

        Returns:
            Diagnostic for INVALID_LIMIT
        """
        msg = f"Expansion limit '{name}' must be a positive int, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LIMIT,
            message=msg,
            hint="Pass limits=None to expand without bounds",
            argument_name=name,
            expected="int > 0",
            received=repr(value),
        )

    @staticmethod
    def unknown_symbol(symbol: object, position: int) -> Diagnostic:
        """Symbol outside the grammar alphabet in a sequence to rewrite.

        Args:
            symbol: The unknown symbol
            position: Index of the symbol in the sequence

        Returns:
            Diagnostic for UNKNOWN_SYMBOL
        """
        msg = f"Symbol {symbol!r} at position {position} is not in the grammar alphabet"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_SYMBOL,
            message=msg,
            hint="Only sequences produced by this grammar can be rewritten",
            symbol=repr(symbol),
            argument_name="sequence",
        )

    # ------------------------------------------------------------------
    # Resource limit errors
    # ------------------------------------------------------------------

    @staticmethod
    def iteration_limit_exceeded(requested: int, limit: int) -> Diagnostic:
        """Iteration count above the configured ceiling.

        Args:
            requested: Requested iteration count
            limit: Configured maximum

        Returns:
            Diagnostic for ITERATION_LIMIT_EXCEEDED
        """
        msg = f"Requested {requested} iterations exceeds limit of {limit}"
        return Diagnostic(
            code=DiagnosticCode.ITERATION_LIMIT_EXCEEDED,
            message=msg,
            hint="Lower the iteration count or raise ExpansionLimits.max_iterations",
        )

    @staticmethod
    def expansion_budget_exceeded(requested: int, limit: int) -> Diagnostic:
        """Predicted output length above the configured symbol budget.

        Args:
            requested: Exact length the expansion would produce
            limit: Configured maximum symbol count

        Returns:
            Diagnostic for EXPANSION_BUDGET_EXCEEDED
        """
        msg = f"Expansion would produce {requested} symbols, exceeding budget of {limit}"
        return Diagnostic(
            code=DiagnosticCode.EXPANSION_BUDGET_EXCEEDED,
            message=msg,
            hint="Lower the iteration count or raise ExpansionLimits.max_symbols",
        )
