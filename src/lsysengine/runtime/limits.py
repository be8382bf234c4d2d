"""Resource limits for grammar expansion.

Expansion output grows exponentially for most grammars, so callers that
accept iteration counts from untrusted sources pass ExpansionLimits to
fail fast instead of exhausting memory. Both bounds are checked before
any symbol is produced: the symbol budget is compared with the exact
predicted length, so there is never a partial result.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lsysengine.analysis import expansion_length
from lsysengine.constants import DEFAULT_MAX_EXPANSION_SIZE, MAX_ITERATIONS
from lsysengine.core import require_positive_limit
from lsysengine.diagnostics import ErrorTemplate, ResourceLimitExceededError

if TYPE_CHECKING:
    from lsysengine.grammar import Grammar

__all__ = ["ExpansionLimits"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExpansionLimits:
    """Upper bounds for a single expansion.

    Attributes:
        max_iterations: Maximum number of rewrite passes
        max_symbols: Maximum number of symbols in the result

    Raises:
        InvalidArgumentError: If either bound is not a positive int

    Example:
        >>> from lsysengine import Grammar, expand
        >>> fibonacci = Grammar.from_rules("A", {"A": "AB", "B": "A"})
        >>> limits = ExpansionLimits(max_symbols=1_000)
        >>> expand(fibonacci, 30, limits=limits)
        Traceback (most recent call last):
        ...
        ResourceLimitExceededError: error[EXPANSION_BUDGET_EXCEEDED]: ...
    """

    max_iterations: int = MAX_ITERATIONS
    max_symbols: int = DEFAULT_MAX_EXPANSION_SIZE

    def __post_init__(self) -> None:
        """Reject non-positive bounds."""
        require_positive_limit("max_iterations", self.max_iterations)
        require_positive_limit("max_symbols", self.max_symbols)

    def check(self, grammar: Grammar, iterations: int) -> int:
        """Verify an expansion fits within both bounds.

        The iteration ceiling is checked first so that the length
        prediction never runs for absurd iteration counts.

        Args:
            grammar: Validated grammar
            iterations: Validated, non-negative iteration count

        Returns:
            Exact length the expansion will produce

        Raises:
            ResourceLimitExceededError: If either bound would be exceeded
        """
        if iterations > self.max_iterations:
            raise ResourceLimitExceededError(
                ErrorTemplate.iteration_limit_exceeded(iterations, self.max_iterations),
                limit=self.max_iterations,
                requested=iterations,
            )

        predicted = expansion_length(grammar, iterations)
        if predicted > self.max_symbols:
            raise ResourceLimitExceededError(
                ErrorTemplate.expansion_budget_exceeded(predicted, self.max_symbols),
                limit=self.max_symbols,
                requested=predicted,
            )

        logger.debug(
            "Expansion within limits: %d iterations, %d symbols predicted",
            iterations,
            predicted,
        )
        return predicted
