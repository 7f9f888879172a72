"""Condition and the builder functions that create conditions.

Builders are grouped by the kind of value they check:
objects (any value), strings (sized values) and comparable (ordered values).
"""

from ryandata_validation.conditions.base import (
    AllOf,
    AnyOf,
    Condition,
    all_of,
    any_of,
    negate,
)
from ryandata_validation.conditions.comparable import (
    is_between,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_less_than,
    is_less_than_or_equal_to,
)
from ryandata_validation.conditions.objects import (
    StringComparison,
    is_equal_to,
    is_not_null,
    is_null,
    satisfies,
)
from ryandata_validation.conditions.strings import (
    has_maximum_length,
    has_minimum_length,
    is_not_null_or_empty,
    is_null_or_is_empty,
    matches,
)

__all__ = [
    "Condition",
    "AllOf",
    "AnyOf",
    "all_of",
    "any_of",
    "negate",
    # Any value
    "StringComparison",
    "satisfies",
    "is_equal_to",
    "is_not_null",
    "is_null",
    # Strings
    "is_not_null_or_empty",
    "is_null_or_is_empty",
    "has_maximum_length",
    "has_minimum_length",
    "matches",
    # Comparable
    "is_less_than_or_equal_to",
    "is_less_than",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_between",
]
