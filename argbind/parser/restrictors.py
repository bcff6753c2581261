# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Restrictors: post-conversion validation predicates for value bindings.

A `Restrictor` wraps a pure predicate over an already converted value together
with the set of `ValueType`s it can be applied to. `CLI.register_value()` checks
that set against the target cell, so a regex restrictor can never end up on an
integer binding.

Included Restrictors:
- unrestricted: Accepts every value (the default).
- in_range: Half-open numeric range, `low <= value < high`.
- one_of: Membership in a fixed collection (equality comparison).
- pattern: Full-string regular expression match.
- email: `pattern` specialized to a simple address grammar.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from argbind.parser.value_type import ValueType
from argbind.signals import UsageError

EMAIL_PATTERN = r"^\w+([-+.]\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*$"


@dataclass(frozen=True)
class Restrictor:
    """
    A named predicate applied to a converted value.

    Attributes:
        predicate (Callable[[Any], bool]): Returns True if the value is allowed.
        description (str): Human-readable rule, used in `InvalidValueError`.
        value_types (frozenset[ValueType] | None): Value types this restrictor
            supports, or None if it applies to every type.
    """

    predicate: Callable[[Any], bool]
    description: str = ""
    value_types: frozenset[ValueType] | None = field(default=None)

    def __call__(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def supports(self, value_type: ValueType) -> bool:
        """Return True if this restrictor can validate values of `value_type`."""
        return self.value_types is None or value_type in self.value_types


def unrestricted() -> Restrictor:
    """Restrictor that accepts every value."""
    return Restrictor(lambda _: True)


def in_range(low: Any, high: Any) -> Restrictor:
    """Restrictor for the half-open range `[low, high)`."""

    def validate(value: Any) -> bool:
        return low <= value < high

    return Restrictor(
        validate,
        description=f"a value in [{low}, {high})",
        value_types=ValueType.ordered(),
    )


def one_of(choices: Iterable[Any]) -> Restrictor:
    """Restrictor for membership in a fixed collection."""
    allowed = tuple(choices)

    def validate(value: Any) -> bool:
        return any(value == choice for choice in allowed)

    return Restrictor(
        validate,
        description=f"one of {{{', '.join(str(choice) for choice in allowed)}}}",
    )


def pattern(expression: str) -> Restrictor:
    """Restrictor for strings that fully match a regular expression."""
    try:
        compiled = re.compile(expression)
    except re.error as error:
        raise UsageError(f"Invalid pattern '{expression}': {error}") from error

    def validate(value: str) -> bool:
        return compiled.fullmatch(value) is not None

    return Restrictor(
        validate,
        description=f"a match for /{expression}/",
        value_types=frozenset({ValueType.STRING}),
    )


def email() -> Restrictor:
    """Restrictor for e-mail addresses."""
    restrictor = pattern(EMAIL_PATTERN)
    return Restrictor(
        restrictor.predicate,
        description="an e-mail address",
        value_types=restrictor.value_types,
    )
