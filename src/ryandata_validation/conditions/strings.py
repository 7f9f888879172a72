"""Condition builders for strings and other sized values.

All of these treat a missing value (None) explicitly: emptiness checks
count it as empty, length checks count it as length 0 and pattern checks
never match it.
"""

from __future__ import annotations

import re
from collections.abc import Sized
from typing import Any

from ryandata_validation.conditions.base import Condition
from ryandata_validation.conditions.objects import (
    DEFAULT_ABSENT_MESSAGE,
    DEFAULT_REQUIRED_MESSAGE,
)
from ryandata_validation.core.errors import RyanDataConfigurationError

DEFAULT_MAX_LENGTH_MESSAGE = "{val} must be at most {arg1} characters"
DEFAULT_MIN_LENGTH_MESSAGE = "{val} must be at least {arg1} characters"


def _length(value: Sized | None) -> int:
    return 0 if value is None else len(value)


def _check_length_bound(builder: str, length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise RyanDataConfigurationError.invalid_argument(
            builder, "length must be an integer", length
        )
    if length < 0:
        raise RyanDataConfigurationError.invalid_argument(
            builder, "length must not be negative", length
        )


def is_not_null_or_empty(message: str | None = None) -> Condition[Sized | None]:
    """Ensure the property is neither None nor empty.

    Args:
        message: Optional error message replacing ``"{val} is required"``.

    Returns:
        Condition over strings (or any sized value).
    """
    return Condition(
        predicate=lambda v: _length(v) > 0,
        template=message or DEFAULT_REQUIRED_MESSAGE,
    )


def is_null_or_is_empty(message: str | None = None) -> Condition[Sized | None]:
    """Ensure the property is None or empty.

    Exact negation of is_not_null_or_empty().
    """
    return Condition(
        predicate=lambda v: _length(v) == 0,
        template=message or DEFAULT_ABSENT_MESSAGE,
    )


def has_maximum_length(max_length: int, message: str | None = None) -> Condition[Sized | None]:
    """Ensure the property has at most ``max_length`` characters.

    Args:
        max_length: The maximum character length.
        message: Optional error message replacing the default.

    Returns:
        Condition with ``{arg1}`` bound to ``max_length``.

    Raises:
        RyanDataConfigurationError: If ``max_length`` is not a non-negative int.
    """
    _check_length_bound("has_maximum_length", max_length)
    return Condition(
        predicate=lambda v: _length(v) <= max_length,
        template=message or DEFAULT_MAX_LENGTH_MESSAGE,
        args=(max_length,),
    )


def has_minimum_length(min_length: int, message: str | None = None) -> Condition[Sized | None]:
    """Ensure the property has at least ``min_length`` characters.

    Args:
        min_length: The minimum character length.
        message: Optional error message replacing the default.

    Returns:
        Condition with ``{arg1}`` bound to ``min_length``.

    Raises:
        RyanDataConfigurationError: If ``min_length`` is not a non-negative int.
    """
    _check_length_bound("has_minimum_length", min_length)
    return Condition(
        predicate=lambda v: _length(v) >= min_length,
        template=message or DEFAULT_MIN_LENGTH_MESSAGE,
        args=(min_length,),
    )


def compile_pattern(pattern: str | re.Pattern[str], flags: int = 0) -> re.Pattern[str]:
    """Compile a pattern, turning re.error into a configuration error.

    Args:
        pattern: Pattern string or an already compiled pattern.
        flags: ``re`` flags; only allowed with a pattern string.

    Returns:
        Compiled pattern.
    """
    if isinstance(pattern, re.Pattern):
        if flags:
            raise RyanDataConfigurationError.invalid_argument(
                "matches", "flags cannot be combined with a compiled pattern", flags
            )
        return pattern
    if not isinstance(pattern, str):
        raise RyanDataConfigurationError.invalid_argument(
            "matches", "pattern must be a string or compiled pattern", pattern
        )
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise RyanDataConfigurationError.from_regex_error(pattern, e) from e


def matches(
    pattern: str | re.Pattern[str], message: str, flags: int = 0
) -> Condition[str | None]:
    """Ensure the property matches a regular expression anywhere in the value.

    The pattern is compiled here, so a malformed pattern fails at
    declaration time rather than on every validation.

    Args:
        pattern: The matching regex (string or compiled).
        message: The associated error message (required).
        flags: ``re`` flags for a pattern string.

    Returns:
        Condition with ``{arg1}`` bound to the pattern text.
    """
    if not message:
        raise RyanDataConfigurationError.invalid_argument(
            "matches", "an error message is required", message
        )
    compiled = compile_pattern(pattern, flags)

    def _matches(value: Any) -> bool:
        if value is None:
            return False
        return compiled.search(str(value)) is not None

    return Condition(predicate=_matches, template=message, args=(compiled.pattern,))
