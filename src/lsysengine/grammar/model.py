"""L-system grammar data model.

A Grammar is an immutable value: alphabet (variables and constants), axiom,
and production rules. Construction validates every invariant, so an
existing Grammar instance is always valid and expansion never re-checks it.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeAlias, cast

from lsysengine.diagnostics import ErrorTemplate, InvalidGrammarError, ValidationResult
from lsysengine.enums import SymbolKind

if TYPE_CHECKING:
    from typing_extensions import TypeIs

from .validator import (
    GrammarParts,
    is_hashable,
    normalize_grammar_parts,
    validate_grammar_parts,
)

__all__ = ["Grammar", "Symbol", "require_grammar"]

# Opaque token compared by equality only (typically a short str or an enum member)
Symbol: TypeAlias = Hashable


@dataclass(frozen=True, slots=True, init=False)
class Grammar:
    """Context-free L-system grammar.

    Inputs are normalized on construction: alphabets become frozensets,
    the axiom and every replacement become tuples, and the rule mapping is
    copied into a read-only proxy. Later mutation of caller-owned inputs
    cannot affect the grammar. A str axiom or replacement is read character
    by character, so single-character grammars can be written compactly.

    Variables without a rule rewrite to themselves (identity policy).

    Examples:
        >>> g = Grammar(
        ...     variables={"A", "B"},
        ...     constants={"+"},
        ...     start=["A"],
        ...     rules={"A": ["A", "+", "B"], "B": ["A"]},
        ... )
        >>> g.rule_for("B")
        ('A',)
        >>> Grammar.from_rules("A", {"A": "A+B", "B": "A"}) == g
        True

    Attributes:
        variables: Rewritable symbols
        constants: Symbols never rewritten
        start: Axiom sequence
        rules: Read-only mapping from variable to replacement tuple

    Raises:
        InvalidGrammarError: If any data-model invariant is violated
    """

    variables: frozenset[Symbol]
    constants: frozenset[Symbol]
    start: tuple[Symbol, ...]
    rules: Mapping[Symbol, tuple[Symbol, ...]]

    def __init__(
        self,
        variables: Iterable[Symbol],
        constants: Iterable[Symbol],
        start: Iterable[Symbol],
        rules: Mapping[Symbol, Iterable[Symbol]],
    ) -> None:
        """Validate and normalize grammar parts.

        Args:
            variables: Rewritable symbols
            constants: Symbols that are never rewritten
            start: Axiom sequence
            rules: Mapping from variable to replacement sequence

        Raises:
            InvalidGrammarError: If validation reports any error, including
                arguments of the wrong container type
        """
        parts, errors = normalize_grammar_parts(variables, constants, start, rules)
        if parts is None:
            raise InvalidGrammarError(ErrorTemplate.invalid_grammar(errors), errors=errors)
        self._init_from_parts(parts)

    def _init_from_parts(self, parts: GrammarParts) -> None:
        result = validate_grammar_parts(parts)
        if not result.is_valid:
            raise InvalidGrammarError(
                ErrorTemplate.invalid_grammar(result.errors), errors=result.errors
            )

        # Validation passed: every symbol and rule key is hashable
        variables = cast(tuple[Symbol, ...], parts.variables)
        constants = cast(tuple[Symbol, ...], parts.constants)
        start = cast(tuple[Symbol, ...], parts.start)
        rule_items = cast(dict[Symbol, tuple[Symbol, ...]], dict(parts.rules))

        # Frozen dataclass: bypass __setattr__ for one-time initialization
        object.__setattr__(self, "variables", frozenset(variables))
        object.__setattr__(self, "constants", frozenset(constants))
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "rules", MappingProxyType(rule_items))

    @classmethod
    def from_rules(
        cls,
        start: Iterable[Symbol],
        rules: Mapping[Symbol, Iterable[Symbol]],
        constants: Iterable[Symbol] = (),
    ) -> Grammar:
        """Build a grammar, inferring the alphabet from the rules.

        Rule keys become the variables. Every other symbol seen in the axiom
        or in a replacement becomes a constant, together with any explicit
        ``constants``. Variables without a rule must therefore be declared
        through the main constructor.

        Args:
            start: Axiom sequence
            rules: Mapping from variable to replacement sequence
            constants: Extra constants not mentioned anywhere else

        Returns:
            Validated Grammar

        Raises:
            InvalidGrammarError: If an explicit constant is also a rule key,
                a symbol is unhashable, or an argument has the wrong
                container type
        """
        parts, errors = normalize_grammar_parts((), constants, start, rules)
        if parts is None:
            raise InvalidGrammarError(ErrorTemplate.invalid_grammar(errors), errors=errors)

        rule_keys = [key for key, _ in parts.rules]
        seen: dict[Symbol, None] = {}
        for symbol in (*parts.start, *(s for _, r in parts.rules for s in r)):
            if is_hashable(symbol):
                seen.setdefault(cast(Symbol, symbol))
        inferred = [symbol for symbol in seen if symbol not in rule_keys]

        grammar = cls.__new__(cls)
        grammar._init_from_parts(
            GrammarParts(
                variables=tuple(rule_keys),
                constants=(*inferred, *parts.constants),
                start=parts.start,
                rules=parts.rules,
            )
        )
        return grammar

    def __hash__(self) -> int:
        """Hash by value; the rule proxy itself is unhashable."""
        return hash(
            (self.variables, self.constants, self.start, frozenset(self.rules.items()))
        )

    @property
    def alphabet(self) -> frozenset[Symbol]:
        """All declared symbols (variables and constants)."""
        return self.variables | self.constants

    def is_variable(self, symbol: Symbol) -> bool:
        """Check whether a symbol is a declared variable."""
        return symbol in self.variables

    def is_constant(self, symbol: Symbol) -> bool:
        """Check whether a symbol is a declared constant."""
        return symbol in self.constants

    def kind_of(self, symbol: Symbol) -> SymbolKind | None:
        """Classify a symbol, or None if it is outside the alphabet."""
        if symbol in self.variables:
            return SymbolKind.VARIABLE
        if symbol in self.constants:
            return SymbolKind.CONSTANT
        return None

    def rule_for(self, symbol: Symbol) -> tuple[Symbol, ...]:
        """One-step replacement for a symbol under the identity policy.

        Constants and variables without a rule map to ``(symbol,)``.
        """
        return self.rules.get(symbol, (symbol,))

    def validate(self) -> ValidationResult:
        """Re-run validation to collect informational warnings.

        The result is always valid (construction already rejected errors);
        its warnings list identity variables and unreachable rules. The
        alphabet is stored as frozensets, so variables are visited in repr
        order to keep the warning order independent of hash seeding.
        """
        return validate_grammar_parts(
            GrammarParts(
                variables=tuple(sorted(self.variables, key=repr)),
                constants=tuple(sorted(self.constants, key=repr)),
                start=self.start,
                rules=tuple(self.rules.items()),
            )
        )

    @staticmethod
    def guard(value: object) -> TypeIs[Grammar]:
        """Type guard for Grammar."""
        return isinstance(value, Grammar)


def require_grammar(value: object) -> Grammar:
    """Return value if it is a Grammar, else raise InvalidGrammarError.

    Grammar instances are valid by construction, so the type check is the
    only check operations need.
    """
    if not Grammar.guard(value):
        raise InvalidGrammarError(ErrorTemplate.not_a_grammar(value))
    return value
