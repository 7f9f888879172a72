"""Condition: a reusable predicate paired with an error-message template.

Conditions hold no reference to any subject. The same instance can be
bound to many properties across many validators.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from ryandata_validation.core.errors import RyanDataConfigurationError
from ryandata_validation.core.templating import (
    build_placeholders,
    format_message,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Condition(Generic[T]):
    """A predicate over a value plus the message used when it fails.

    Attributes:
        predicate: Pure function returning True when the value is acceptable.
        template: Error message template. ``{val}`` resolves to the property
            name, ``{arg1}``.. to ``args`` in order.
        args: The builder arguments captured for the template.

    Example:
        >>> cond = Condition(lambda v: v <= 4, "{val} must be less than or equal to {arg1}", (4,))
        >>> cond.is_satisfied(8)
        False
        >>> cond.resolve_message("value")
        'value must be less than or equal to 4'
    """

    predicate: Callable[[T], bool]
    template: str
    args: tuple[Any, ...] = field(default=())

    def __post_init__(self) -> None:
        if not callable(self.predicate):
            raise RyanDataConfigurationError.invalid_argument(
                "condition", "predicate must be callable", self.predicate
            )
        if not isinstance(self.template, str):
            raise RyanDataConfigurationError.invalid_argument(
                "condition", "message template must be a string", self.template
            )

    def is_satisfied(self, value: T) -> bool:
        """Evaluate the predicate against a value."""
        return bool(self.predicate(value))

    def resolve_message(self, property_name: str, value: Any = None) -> str:
        """Resolve the template for a failing property.

        Args:
            property_name: Name substituted for ``{val}``.
            value: The value that failed. Unused here; composite conditions
                use it to report only the children that failed.

        Returns:
            The error message with all known placeholders substituted.
        """
        return format_message(self.template, build_placeholders(property_name, self.args))

    def __and__(self, other: Condition[T]) -> AllOf[T]:
        return all_of(self, other)

    def __or__(self, other: Condition[T]) -> AnyOf[T]:
        return any_of(self, other)


@dataclass(frozen=True)
class AllOf(Condition[T]):
    """Satisfied when every child condition is satisfied.

    With no explicit message, the failure message lists the messages of the
    children that returned False, joined with "; ". Children whose predicate
    raised are listed only when no child returned False.
    """

    conditions: tuple[Condition[T], ...] = field(default=())

    def resolve_message(self, property_name: str, value: Any = None) -> str:
        if self.template:
            return super().resolve_message(property_name, value)
        outcomes = [(c, _outcome(c, value)) for c in self.conditions]
        failing = [c for c, result in outcomes if result is False]
        if not failing:
            failing = [c for c, result in outcomes if result is None]
        return "; ".join(c.resolve_message(property_name, value) for c in failing)


@dataclass(frozen=True)
class AnyOf(Condition[T]):
    """Satisfied when at least one child condition is satisfied.

    With no explicit message, the failure message lists every child's
    message, joined with " or ".
    """

    conditions: tuple[Condition[T], ...] = field(default=())

    def resolve_message(self, property_name: str, value: Any = None) -> str:
        if self.template:
            return super().resolve_message(property_name, value)
        return " or ".join(c.resolve_message(property_name, value) for c in self.conditions)


def _outcome(condition: Condition[Any], value: Any) -> bool | None:
    # None when the predicate raised
    try:
        return condition.is_satisfied(value)
    except Exception:
        return None


def _check_children(builder: str, conditions: tuple[Condition[Any], ...]) -> None:
    if not conditions:
        raise RyanDataConfigurationError.invalid_argument(
            builder, "at least one condition is required"
        )
    for condition in conditions:
        if not isinstance(condition, Condition):
            raise RyanDataConfigurationError.invalid_argument(
                builder, "arguments must be Condition instances", condition
            )


def all_of(*conditions: Condition[T], message: str | None = None) -> AllOf[T]:
    """Combine conditions so that all of them must hold.

    Args:
        *conditions: Conditions to combine, evaluated in order.
        message: Optional message replacing the combined child messages.
            Only ``{val}`` is resolved in it.

    Returns:
        AllOf condition.
    """
    _check_children("all_of", conditions)
    children = tuple(conditions)
    return AllOf(
        predicate=lambda v: all(c.is_satisfied(v) for c in children),
        template=message or "",
        conditions=children,
    )


def any_of(*conditions: Condition[T], message: str | None = None) -> AnyOf[T]:
    """Combine conditions so that at least one of them must hold.

    Args:
        *conditions: Conditions to combine, evaluated in order.
        message: Optional message replacing the combined child messages.
            Only ``{val}`` is resolved in it.

    Returns:
        AnyOf condition.
    """
    _check_children("any_of", conditions)
    children = tuple(conditions)
    return AnyOf(
        predicate=lambda v: any(c.is_satisfied(v) for c in children),
        template=message or "",
        conditions=children,
    )


def negate(condition: Condition[T], message: str) -> Condition[T]:
    """Invert a condition.

    The inverted condition keeps the wrapped condition's arguments, so ``message``
    may refer to them as ``{arg1}``...

    Args:
        condition: Condition to invert.
        message: Error message template (required, no sensible default).

    Returns:
        Condition satisfied exactly when ``condition`` is not.
    """
    _check_children("negate", (condition,))
    if not message:
        raise RyanDataConfigurationError.invalid_argument(
            "negate", "an error message is required", message
        )
    return Condition(
        predicate=lambda v: not condition.is_satisfied(v),
        template=message,
        args=condition.args,
    )


__all__ = [
    "AllOf",
    "AnyOf",
    "Condition",
    "all_of",
    "any_of",
    "negate",
]
