"""Result models for validation runs.

Both models are frozen: a report is built once per validate() call and
handed to the caller as is.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, computed_field

from ryandata_validation.core.errors import RyanDataValidationError


class Violation(BaseModel):
    """One failed rule, with its message fully resolved."""

    model_config = ConfigDict(frozen=True)

    property_name: str
    error_message: str

    def __str__(self) -> str:
        return f"{self.property_name}: {self.error_message}"


class ValidationReport(BaseModel):
    """Ordered outcome of evaluating all of a validator's rules on one subject.

    Example:
        >>> report = validator.validate(subject)
        >>> if not report.is_valid:
        ...     for violation in report:
        ...         print(violation.property_name, violation.error_message)
    """

    model_config = ConfigDict(frozen=True)

    violations: tuple[Violation, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        """True if no rule failed."""
        return not self.violations

    @classmethod
    def valid(cls) -> ValidationReport:
        """Create a report with no violations."""
        return cls()

    @property
    def property_names(self) -> list[str]:
        """Names of the properties with at least one violation, in order."""
        return list(dict.fromkeys(v.property_name for v in self.violations))

    def errors_for(self, property_name: str) -> list[str]:
        """Get the error messages recorded for one property.

        Args:
            property_name: Name as it appears in the violations.

        Returns:
            Messages in declaration order (empty if the property passed).
        """
        return [v.error_message for v in self.violations if v.property_name == property_name]

    def merge(self, other: ValidationReport) -> ValidationReport:
        """Combine two reports into a new one, this report's violations first."""
        return ValidationReport(violations=self.violations + other.violations)

    def to_records(self) -> list[dict[str, Any]]:
        """Export violations as dicts.

        Returns:
            List of dicts suitable for pd.DataFrame(), in report order.
        """
        return [v.model_dump() for v in self.violations]

    def raise_if_invalid(self) -> None:
        """Raise RyanDataValidationError if any rule failed."""
        if not self.is_valid:
            raise RyanDataValidationError(self)

    def __iter__(self) -> Iterator[Violation]:  # type: ignore[override]
        return iter(self.violations)
