"""Fluent rule declaration.

Field reads like the chained builder calls it stands in for:

    >>> self.ensure(Field("value").is_less_than_or_equal_to(4))
    >>> self.ensure(Field("email").matches(r"@", "{val} must be an email address"))

Each builder method returns a RuleBinding ready to pass to Validator.ensure().
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from ryandata_validation.conditions import (
    Condition,
    StringComparison,
    has_maximum_length,
    has_minimum_length,
    is_between,
    is_equal_to,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_less_than,
    is_less_than_or_equal_to,
    is_not_null,
    is_not_null_or_empty,
    is_null,
    is_null_or_is_empty,
    matches,
    satisfies,
)
from ryandata_validation.rules.binding import Accessor, RuleBinding, resolve_property


class Field:
    """A named property reference that builds rule bindings.

    The name is resolved when the Field is created, so an unresolvable
    reference fails before any condition is attached.

    Args:
        target: Dotted attribute path or accessor callable.
        name: Display name (required with a callable target).
    """

    def __init__(self, target: str | Accessor, name: str | None = None) -> None:
        self.property_name, self._accessor = resolve_property(target, name)

    def __repr__(self) -> str:
        return f"Field({self.property_name!r})"

    def check(self, condition: Condition[Any]) -> RuleBinding[Any, Any]:
        """Bind any condition to this property."""
        return RuleBinding.declare(self._accessor, condition, name=self.property_name)

    def satisfies(self, predicate: Callable[[Any], bool], message: str) -> RuleBinding[Any, Any]:
        """Bind a custom predicate."""
        return self.check(satisfies(predicate, message))

    def is_equal_to(
        self,
        value: Any,
        comparison: StringComparison = StringComparison.ORDINAL,
        message: str | None = None,
    ) -> RuleBinding[Any, Any]:
        return self.check(is_equal_to(value, comparison, message))

    def is_not_null(self, message: str | None = None) -> RuleBinding[Any, Any]:
        return self.check(is_not_null(message))

    def is_null(self, message: str | None = None) -> RuleBinding[Any, Any]:
        return self.check(is_null(message))

    def is_not_null_or_empty(self, message: str | None = None) -> RuleBinding[Any, Any]:
        return self.check(is_not_null_or_empty(message))

    def is_null_or_is_empty(self, message: str | None = None) -> RuleBinding[Any, Any]:
        return self.check(is_null_or_is_empty(message))

    def has_maximum_length(
        self, max_length: int, message: str | None = None
    ) -> RuleBinding[Any, Any]:
        return self.check(has_maximum_length(max_length, message))

    def has_minimum_length(
        self, min_length: int, message: str | None = None
    ) -> RuleBinding[Any, Any]:
        return self.check(has_minimum_length(min_length, message))

    def matches(
        self, pattern: str | re.Pattern[str], message: str, flags: int = 0
    ) -> RuleBinding[Any, Any]:
        return self.check(matches(pattern, message, flags))

    def is_less_than_or_equal_to(
        self, bound: Any, message: str | None = None
    ) -> RuleBinding[Any, Any]:
        return self.check(is_less_than_or_equal_to(bound, message))

    def is_less_than(self, bound: Any, message: str | None = None) -> RuleBinding[Any, Any]:
        return self.check(is_less_than(bound, message))

    def is_greater_than(self, bound: Any, message: str | None = None) -> RuleBinding[Any, Any]:
        return self.check(is_greater_than(bound, message))

    def is_greater_than_or_equal_to(
        self, bound: Any, message: str | None = None
    ) -> RuleBinding[Any, Any]:
        return self.check(is_greater_than_or_equal_to(bound, message))

    def is_between(
        self, lower: Any, upper: Any, message: str | None = None
    ) -> RuleBinding[Any, Any]:
        return self.check(is_between(lower, upper, message))
