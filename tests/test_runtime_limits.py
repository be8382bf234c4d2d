"""Tests for runtime/limits.py ExpansionLimits.

Limits are checked before any symbol is produced; exceeding them raises
ResourceLimitExceededError and never yields a partial result.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lsysengine import (
    ExpansionLimits,
    Grammar,
    InvalidArgumentError,
    ResourceLimitExceededError,
    expand,
    expansion_length,
    iter_generations,
)
from lsysengine.constants import DEFAULT_MAX_EXPANSION_SIZE, MAX_ITERATIONS
from lsysengine.diagnostics import DiagnosticCode


class TestExpansionLimitsConstruction:
    """Defaults and validation of limit values."""

    def test_defaults(self) -> None:
        """Defaults come from constants."""
        limits = ExpansionLimits()

        assert limits.max_iterations == MAX_ITERATIONS
        assert limits.max_symbols == DEFAULT_MAX_EXPANSION_SIZE

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_iterations": 0},
            {"max_iterations": -1},
            {"max_symbols": 0},
            {"max_symbols": 2.5},
            {"max_iterations": True},
        ],
    )
    def test_rejects_non_positive(self, kwargs: dict[str, object]) -> None:
        """Zero, negative, float and bool bounds are rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            ExpansionLimits(**kwargs)  # type: ignore[arg-type]

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_LIMIT

    def test_frozen(self) -> None:
        """Limits cannot be modified after construction."""
        limits = ExpansionLimits()

        with pytest.raises(dataclasses.FrozenInstanceError):
            limits.max_symbols = 1  # type: ignore[misc]


class TestExpansionLimitsEnforcement:
    """expand() and iter_generations() honor limits."""

    def test_iteration_ceiling(self, fibonacci: Grammar) -> None:
        """More iterations than allowed raises before expanding."""
        limits = ExpansionLimits(max_iterations=5)

        with pytest.raises(ResourceLimitExceededError) as exc_info:
            expand(fibonacci, 6, limits=limits)

        assert exc_info.value.limit == 5
        assert exc_info.value.requested == 6
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.ITERATION_LIMIT_EXCEEDED

    def test_iteration_ceiling_inclusive(self, fibonacci: Grammar) -> None:
        """Exactly max_iterations is allowed."""
        assert len(expand(fibonacci, 5, limits=ExpansionLimits(max_iterations=5))) == 13

    def test_symbol_budget(self, fibonacci: Grammar) -> None:
        """Predicted length above budget raises with the exact prediction."""
        limits = ExpansionLimits(max_symbols=20)

        with pytest.raises(ResourceLimitExceededError) as exc_info:
            expand(fibonacci, 7, limits=limits)

        assert exc_info.value.requested == 34
        assert exc_info.value.limit == 20
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.EXPANSION_BUDGET_EXCEEDED

    def test_deep_fibonacci_over_small_budget(self, fibonacci: Grammar) -> None:
        """Thirty generations of A -> AB, B -> A do not fit in 1000 symbols."""
        with pytest.raises(ResourceLimitExceededError) as exc_info:
            expand(fibonacci, 30, limits=ExpansionLimits(max_symbols=1_000))

        assert exc_info.value.requested == 2_178_309
        assert str(exc_info.value).startswith("error[EXPANSION_BUDGET_EXCEEDED]")

    def test_symbol_budget_inclusive(self, fibonacci: Grammar) -> None:
        """A result exactly at the budget is returned."""
        assert len(expand(fibonacci, 6, limits=ExpansionLimits(max_symbols=21))) == 21

    def test_iter_generations_checks_up_front(self, fibonacci: Grammar) -> None:
        """Generators fail at call time, before yielding anything."""
        with pytest.raises(ResourceLimitExceededError):
            iter_generations(fibonacci, 40, limits=ExpansionLimits())

    def test_exponential_request_rejected_cheaply(self) -> None:
        """A doubling grammar at 60 iterations is refused, not attempted."""
        grammar = Grammar.from_rules("A", {"A": "AA"})

        with pytest.raises(ResourceLimitExceededError) as exc_info:
            expand(grammar, 60, limits=ExpansionLimits())

        assert exc_info.value.requested == 2**60

    def test_within_limits_logged(
        self, fibonacci: Grammar, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Successful checks log the predicted size at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="lsysengine.runtime.limits"):
            ExpansionLimits().check(fibonacci, 4)

        assert "4 iterations, 8 symbols predicted" in caplog.text

    @given(
        iterations=st.integers(min_value=0, max_value=12),
        budget=st.integers(min_value=1, max_value=300),
    )
    def test_all_or_nothing(self, iterations: int, budget: int) -> None:
        """Either the full expansion is returned or the call raises."""
        grammar = Grammar.from_rules("A", {"A": "AB", "B": "A"})
        limits = ExpansionLimits(max_symbols=budget)
        expected_length = expansion_length(grammar, iterations)

        if expected_length > budget:
            with pytest.raises(ResourceLimitExceededError):
                expand(grammar, iterations, limits=limits)
        else:
            assert expand(grammar, iterations, limits=limits) == expand(grammar, iterations)
