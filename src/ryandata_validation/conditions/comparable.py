"""Condition builders for values with a natural ordering.

None, and values that cannot be ordered against the bound, fail the
condition instead of raising.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from ryandata_validation.conditions.base import Condition
from ryandata_validation.core.errors import RyanDataConfigurationError


def _compare(op: Callable[[Any, Any], Any], bound: Any) -> Callable[[Any], bool]:
    def _predicate(value: Any) -> bool:
        if value is None:
            return False
        try:
            return bool(op(value, bound))
        except TypeError:
            return False

    return _predicate


def _check_bound(builder: str, bound: Any) -> None:
    if bound is None:
        raise RyanDataConfigurationError.invalid_argument(builder, "bound must not be None")


def is_less_than_or_equal_to(bound: Any, message: str | None = None) -> Condition[Any]:
    """Ensure the property is less than or equal to ``bound``.

    Args:
        bound: Inclusive upper bound.
        message: Optional error message replacing the default.

    Returns:
        Condition with ``{arg1}`` bound to ``bound``.
    """
    _check_bound("is_less_than_or_equal_to", bound)
    return Condition(
        predicate=_compare(operator.le, bound),
        template=message or "{val} must be less than or equal to {arg1}",
        args=(bound,),
    )


def is_less_than(bound: Any, message: str | None = None) -> Condition[Any]:
    """Ensure the property is strictly less than ``bound``."""
    _check_bound("is_less_than", bound)
    return Condition(
        predicate=_compare(operator.lt, bound),
        template=message or "{val} must be less than {arg1}",
        args=(bound,),
    )


def is_greater_than(bound: Any, message: str | None = None) -> Condition[Any]:
    """Ensure the property is strictly greater than ``bound``."""
    _check_bound("is_greater_than", bound)
    return Condition(
        predicate=_compare(operator.gt, bound),
        template=message or "{val} must be greater than {arg1}",
        args=(bound,),
    )


def is_greater_than_or_equal_to(bound: Any, message: str | None = None) -> Condition[Any]:
    """Ensure the property is greater than or equal to ``bound``."""
    _check_bound("is_greater_than_or_equal_to", bound)
    return Condition(
        predicate=_compare(operator.ge, bound),
        template=message or "{val} must be greater than or equal to {arg1}",
        args=(bound,),
    )


def is_between(lower: Any, upper: Any, message: str | None = None) -> Condition[Any]:
    """Ensure ``lower <= value <= upper``.

    Args:
        lower: Inclusive lower bound.
        upper: Inclusive upper bound.
        message: Optional error message replacing the default.

    Returns:
        Condition with ``{arg1}``/``{arg2}`` bound to ``lower``/``upper``.

    Raises:
        RyanDataConfigurationError: If a bound is None, the bounds cannot be
            compared, or ``lower > upper``.
    """
    _check_bound("is_between", lower)
    _check_bound("is_between", upper)
    try:
        inverted = lower > upper
    except TypeError as e:
        raise RyanDataConfigurationError.invalid_argument(
            "is_between", f"bounds are not comparable ({e})", (lower, upper)
        ) from e
    if inverted:
        raise RyanDataConfigurationError.invalid_argument(
            "is_between", "lower bound must not exceed upper bound", (lower, upper)
        )

    above = _compare(operator.ge, lower)
    below = _compare(operator.le, upper)
    return Condition(
        predicate=lambda v: above(v) and below(v),
        template=message or "{val} must be between {arg1} and {arg2}",
        args=(lower, upper),
    )
