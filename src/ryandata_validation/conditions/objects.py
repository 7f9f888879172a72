"""Condition builders that apply to any value."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from ryandata_validation.conditions.base import Condition
from ryandata_validation.core.errors import RyanDataConfigurationError

T = TypeVar("T")

DEFAULT_EQUAL_MESSAGE = "{val} must be the same as {arg1}"
DEFAULT_REQUIRED_MESSAGE = "{val} is required"
DEFAULT_ABSENT_MESSAGE = "{val} must not have a value"


class StringComparison(str, Enum):
    """How two strings are compared by is_equal_to()."""

    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal_ignore_case"
    NORMALIZED = "normalized"
    NORMALIZED_IGNORE_CASE = "normalized_ignore_case"

    def normalize(self, text: str) -> str:
        """Reduce a string to the form compared under this mode."""
        if self in (StringComparison.NORMALIZED, StringComparison.NORMALIZED_IGNORE_CASE):
            text = unicodedata.normalize("NFC", text)
        if self in (StringComparison.ORDINAL_IGNORE_CASE, StringComparison.NORMALIZED_IGNORE_CASE):
            text = text.casefold()
        return text

    def equals(self, left: str, right: str) -> bool:
        """Compare two strings under this mode."""
        return self.normalize(left) == self.normalize(right)


def satisfies(predicate: Callable[[T], bool], message: str) -> Condition[T]:
    """Build a condition from a custom predicate.

    This is the escape hatch every other builder is expressed with.

    Args:
        predicate: Pure function returning True when the value is acceptable.
            It must handle None itself.
        message: Error message template (required).

    Returns:
        Condition wrapping the predicate.

    Raises:
        RyanDataConfigurationError: If the predicate is not callable or the
            message is empty.
    """
    if not callable(predicate):
        raise RyanDataConfigurationError.invalid_argument(
            "satisfies", "predicate must be callable", predicate
        )
    if not message:
        raise RyanDataConfigurationError.invalid_argument(
            "satisfies", "an error message is required", message
        )
    return Condition(predicate=predicate, template=message)


def is_equal_to(
    value: Any,
    comparison: StringComparison = StringComparison.ORDINAL,
    message: str | None = None,
) -> Condition[Any]:
    """Ensure the property equals a value.

    None equals None. When both sides are strings they are compared under
    ``comparison``; anything else is compared with ``==``.

    Args:
        value: The value to be equal to.
        comparison: The string comparison mode.
        message: Optional error message replacing the default.

    Returns:
        Condition with ``{arg1}`` bound to ``value``.

    Raises:
        RyanDataConfigurationError: If ``comparison`` is not a StringComparison.
    """
    try:
        mode = StringComparison(comparison)
    except ValueError as e:
        raise RyanDataConfigurationError.invalid_argument(
            "is_equal_to", "comparison must be a StringComparison", comparison
        ) from e

    def _equals(candidate: Any) -> bool:
        if candidate is None or value is None:
            return candidate is None and value is None
        if isinstance(candidate, str) and isinstance(value, str):
            return mode.equals(candidate, value)
        return bool(candidate == value)

    return Condition(predicate=_equals, template=message or DEFAULT_EQUAL_MESSAGE, args=(value,))


def is_not_null(message: str | None = None) -> Condition[Any]:
    """Ensure the property has a value."""
    return Condition(
        predicate=lambda v: v is not None,
        template=message or DEFAULT_REQUIRED_MESSAGE,
    )


def is_null(message: str | None = None) -> Condition[Any]:
    """Ensure the property has no value."""
    return Condition(
        predicate=lambda v: v is None,
        template=message or DEFAULT_ABSENT_MESSAGE,
    )
