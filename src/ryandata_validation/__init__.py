"""ryandata-validation: declarative, reusable validation rules for Python objects.

Declare invariants once, as conditions bound to properties, and get an
ordered report of every rule a subject breaks.

Quick Start:
    >>> from ryandata_validation import Field, Validator, is_less_than_or_equal_to
    >>> class ItemValidator(Validator["Item"]):
    ...     def rules(self) -> None:
    ...         self.ensure("value", is_less_than_or_equal_to(4))
    ...         self.ensure(Field("name").is_not_null_or_empty())
    >>> report = ItemValidator().validate(item)
    >>> report.is_valid
    False
    >>> [v.error_message for v in report.violations]
    ['value must be less than or equal to 4']

    # Custom checks
    >>> from ryandata_validation import satisfies
    >>> is_even = satisfies(lambda v: v % 2 == 0, "{val} must be even")

    # Turn a failed report into an exception
    >>> report.raise_if_invalid()  # raises RyanDataValidationError
"""

from __future__ import annotations  # noqa: I001

from ryandata_validation.core import (
    PACKAGE_NAME,
    RyanDataConfigurationError,
    RyanDataValidationError,
    ValidatorConfig,
    build_placeholders,
    format_message,
)
from ryandata_validation.models import ValidationReport, Violation
from ryandata_validation.conditions import (
    AllOf,
    AnyOf,
    Condition,
    StringComparison,
    all_of,
    any_of,
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
    negate,
    satisfies,
)
from ryandata_validation.rules import Field, RuleBinding
from ryandata_validation.validation import BaseValidator, CompositeValidator, Validator
from ryandata_validation.protocols import ValidatorProtocol

__version__ = "0.1.0"

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "RyanDataConfigurationError",
    "RyanDataValidationError",
    # Configuration
    "ValidatorConfig",
    # Templating
    "format_message",
    "build_placeholders",
    # Results
    "ValidationReport",
    "Violation",
    # Conditions
    "Condition",
    "AllOf",
    "AnyOf",
    "all_of",
    "any_of",
    "negate",
    "StringComparison",
    "satisfies",
    "is_equal_to",
    "is_not_null",
    "is_null",
    "is_not_null_or_empty",
    "is_null_or_is_empty",
    "has_maximum_length",
    "has_minimum_length",
    "matches",
    "is_less_than_or_equal_to",
    "is_less_than",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_between",
    # Rules
    "Field",
    "RuleBinding",
    # Validators
    "BaseValidator",
    "Validator",
    "CompositeValidator",
    "ValidatorProtocol",
]
