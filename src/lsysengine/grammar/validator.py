"""Structural validation for L-system grammars.

Checks the grammar data-model invariants without raising, so tooling can
report every problem at once:

Errors (grammar unusable):
    - not-iterable: variables, constants or start is not an iterable
    - invalid-rules: rules is not a mapping
    - invalid-replacement: a rule replacement is not an iterable
    - unhashable-symbol: symbol cannot be compared by identity
    - alphabet-overlap: symbol declared both variable and constant
    - rule-key-not-variable: rule defined for an undeclared variable
    - symbol-not-in-alphabet: axiom or replacement uses an undeclared symbol

Warnings (grammar valid, shape probably unintended):
    - variable-without-rule: variable rewrites to itself (identity policy)
    - unreachable-rule: rule whose variable never appears during expansion

Architecture:
    - validate_grammar(): Main entry point, orchestrates validation passes
    - normalize_grammar_parts(): Pass 0 - Container types, parts to tuples
    - validate_grammar_parts(): Passes 1-3 over normalized parts
    - _check_hashable(): Pass 1 - Every symbol must be hashable
    - _check_alphabet(): Pass 2 - Disjointness, rule keys, closed alphabet
    - _collect_warnings(): Pass 3 - Identity variables and unreachable rules

Python 3.13+.
"""

import logging
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from typing import cast

from lsysengine.analysis.graph import build_rule_graph, reachable_from
from lsysengine.constants import (
    CODE_ALPHABET_OVERLAP,
    CODE_INVALID_REPLACEMENT,
    CODE_INVALID_RULES,
    CODE_NOT_ITERABLE,
    CODE_RULE_KEY_NOT_VARIABLE,
    CODE_SYMBOL_NOT_IN_ALPHABET,
    CODE_UNHASHABLE_SYMBOL,
    CODE_UNREACHABLE_RULE,
    CODE_VARIABLE_WITHOUT_RULE,
)
from lsysengine.diagnostics import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "GrammarParts",
    "is_hashable",
    "normalize_grammar_parts",
    "validate_grammar",
    "validate_grammar_parts",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GrammarParts:
    """Grammar inputs materialized as tuples, not yet checked for invariants.

    Rules are kept as (key, replacement) pairs because keys are only known
    to be hashable after validation.
    """

    variables: tuple[object, ...]
    constants: tuple[object, ...]
    start: tuple[object, ...]
    rules: tuple[tuple[object, tuple[object, ...]], ...]


def is_hashable(symbol: object) -> bool:
    """Check whether a symbol can be used as a set member or dict key."""
    try:
        hash(symbol)
    except TypeError:
        return False
    return True


def _wrong_type(code: str, value: object, location: str, message: str) -> ValidationError:
    return ValidationError(
        code=code,
        message=f"{message}, got {type(value).__name__}",
        symbol=repr(value),
        location=location,
    )


def normalize_grammar_parts(
    variables: object,
    constants: object,
    start: object,
    rules: object,
) -> tuple[GrammarParts | None, tuple[ValidationError, ...]]:
    """Materialize grammar inputs as tuples, reporting wrong container types.

    Every iterable is consumed exactly once. A str is iterable and is read
    character by character.

    Args:
        variables: Rewritable symbols
        constants: Symbols that are never rewritten
        start: Axiom sequence
        rules: Mapping from variable to replacement sequence

    Returns:
        (parts, errors): parts is None exactly when errors is non-empty

    Example:
        >>> parts, errors = normalize_grammar_parts({"A"}, (), "A", {"A": None})
        >>> parts is None, errors[0].code
        (True, 'invalid-replacement')
    """
    errors: list[ValidationError] = []
    sequences: dict[str, tuple[object, ...]] = {}
    for location, value in (("variables", variables), ("constants", constants), ("start", start)):
        if isinstance(value, Iterable):
            sequences[location] = tuple(value)
        else:
            errors.append(
                _wrong_type(CODE_NOT_ITERABLE, value, location, "Expected an iterable of symbols")
            )

    rule_pairs: list[tuple[object, tuple[object, ...]]] = []
    if isinstance(rules, Mapping):
        for key, replacement in rules.items():
            if isinstance(replacement, Iterable):
                rule_pairs.append((key, tuple(replacement)))
            else:
                errors.append(
                    _wrong_type(
                        CODE_INVALID_REPLACEMENT,
                        replacement,
                        f"rules[{key!r}]",
                        "Replacement must be an iterable of symbols",
                    )
                )
    else:
        errors.append(
            _wrong_type(CODE_INVALID_RULES, rules, "rules", "Rules must be a mapping")
        )

    if errors:
        return None, tuple(errors)
    parts = GrammarParts(
        variables=sequences["variables"],
        constants=sequences["constants"],
        start=sequences["start"],
        rules=tuple(rule_pairs),
    )
    return parts, ()


def _check_hashable(parts: GrammarParts) -> list[ValidationError]:
    """Report every unhashable symbol with its location."""
    located: list[tuple[str, object]] = [
        *((f"variables[{i}]", s) for i, s in enumerate(parts.variables)),
        *((f"constants[{i}]", s) for i, s in enumerate(parts.constants)),
        *((f"start[{i}]", s) for i, s in enumerate(parts.start)),
    ]
    for key, replacement in parts.rules:
        # Custom Mapping types may yield unhashable keys
        located.append(("rules", key))
        located.extend(
            (f"rules[{key!r}][{i}]", s) for i, s in enumerate(replacement)
        )

    return [
        ValidationError(
            code=CODE_UNHASHABLE_SYMBOL,
            message=f"Symbol of type {type(symbol).__name__} is not hashable",
            symbol=repr(symbol),
            location=location,
        )
        for location, symbol in located
        if not is_hashable(symbol)
    ]


def _check_alphabet(
    variables: tuple[Hashable, ...],
    constants: tuple[Hashable, ...],
    start: tuple[Hashable, ...],
    rules: Mapping[Hashable, tuple[Hashable, ...]],
) -> list[ValidationError]:
    """Check disjointness, rule keys and the closed-alphabet invariant."""
    errors: list[ValidationError] = []
    variable_set = set(variables)
    constant_set = set(constants)
    alphabet = variable_set | constant_set

    reported: set[Hashable] = set()
    for symbol in variables:
        if symbol in constant_set and symbol not in reported:
            reported.add(symbol)
            errors.append(
                ValidationError(
                    code=CODE_ALPHABET_OVERLAP,
                    message="Symbol is declared both as variable and as constant",
                    symbol=repr(symbol),
                )
            )

    for key in rules:
        if key not in variable_set:
            errors.append(
                ValidationError(
                    code=CODE_RULE_KEY_NOT_VARIABLE,
                    message="Rule is defined for a symbol that is not a declared variable",
                    symbol=repr(key),
                    location=f"rules[{key!r}]",
                )
            )

    for i, symbol in enumerate(start):
        if symbol not in alphabet:
            errors.append(
                ValidationError(
                    code=CODE_SYMBOL_NOT_IN_ALPHABET,
                    message="Axiom symbol is neither a variable nor a constant",
                    symbol=repr(symbol),
                    location=f"start[{i}]",
                )
            )

    for key, replacement in rules.items():
        for i, symbol in enumerate(replacement):
            if symbol not in alphabet:
                errors.append(
                    ValidationError(
                        code=CODE_SYMBOL_NOT_IN_ALPHABET,
                        message="Replacement symbol is neither a variable nor a constant",
                        symbol=repr(symbol),
                        location=f"rules[{key!r}][{i}]",
                    )
                )

    return errors


def _collect_warnings(
    variables: tuple[Hashable, ...],
    start: tuple[Hashable, ...],
    rules: Mapping[Hashable, tuple[Hashable, ...]],
) -> list[ValidationWarning]:
    """Report identity variables and rules that can never fire."""
    warnings: list[ValidationWarning] = [
        ValidationWarning(
            code=CODE_VARIABLE_WITHOUT_RULE,
            message="Variable has no rule and rewrites to itself",
            context=repr(symbol),
        )
        for symbol in dict.fromkeys(variables)
        if symbol not in rules
    ]

    reachable = reachable_from(start, build_rule_graph(rules))
    warnings.extend(
        ValidationWarning(
            code=CODE_UNREACHABLE_RULE,
            message="Rule variable never appears when expanding from the axiom",
            context=repr(key),
        )
        for key in rules
        if key not in reachable
    )
    return warnings


def validate_grammar_parts(parts: GrammarParts) -> ValidationResult:
    """Run the invariant and warning passes over normalized parts.

    Warnings follow the order of parts.variables and parts.rules, so callers
    that want reproducible output pass them in a stable order.

    Args:
        parts: Output of normalize_grammar_parts()

    Returns:
        ValidationResult with invariant errors and informational warnings
    """
    errors = _check_hashable(parts)
    if errors:
        logger.debug("Validated grammar: %d errors (unhashable symbols)", len(errors))
        return ValidationResult.invalid(tuple(errors))

    # Every symbol is hashable from here on
    hashable_variables = cast(tuple[Hashable, ...], parts.variables)
    hashable_start = cast(tuple[Hashable, ...], parts.start)
    rule_map = cast(dict[Hashable, tuple[Hashable, ...]], dict(parts.rules))

    errors = _check_alphabet(
        hashable_variables,
        cast(tuple[Hashable, ...], parts.constants),
        hashable_start,
        rule_map,
    )
    if errors:
        logger.debug("Validated grammar: %d errors", len(errors))
        return ValidationResult.invalid(tuple(errors))

    warnings = _collect_warnings(hashable_variables, hashable_start, rule_map)
    logger.debug("Validated grammar: 0 errors, %d warnings", len(warnings))
    return ValidationResult.valid(tuple(warnings))


def validate_grammar(
    variables: Iterable[object],
    constants: Iterable[object],
    start: Iterable[object],
    rules: Mapping[object, Iterable[object]],
) -> ValidationResult:
    """Validate grammar parts without constructing a Grammar.

    Standalone validation for tooling that wants every problem reported
    instead of the exception Grammar raises. Malformed inputs (a non-mapping
    rules argument, a replacement that is not iterable) are reported as
    errors too, never raised. Replacement sequences are iterated once; a str
    replacement is read character by character.

    Validation passes:
    0. Containers: iterable alphabets and axiom, mapping of iterables
    1. Hashability: every symbol must be hashable
    2. Alphabet: disjoint variables/constants, rule keys are variables,
       axiom and replacements only use declared symbols
    3. Warnings: variables without rules, unreachable rules
       (only computed when there are no errors)

    Args:
        variables: Rewritable symbols
        constants: Symbols that are never rewritten
        start: Axiom sequence
        rules: Mapping from variable to replacement sequence

    Returns:
        ValidationResult with invariant errors and informational warnings

    Example:
        >>> result = validate_grammar({"A"}, set(), ["A"], {"B": ["A"]})
        >>> result.is_valid
        False
        >>> result.errors[0].code
        'rule-key-not-variable'
    """
    parts, errors = normalize_grammar_parts(variables, constants, start, rules)
    if parts is None:
        logger.debug("Validated grammar: %d errors (malformed parts)", len(errors))
        return ValidationResult.invalid(errors)
    return validate_grammar_parts(parts)
