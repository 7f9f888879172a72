"""Abstract base validator class.

Provides the generic interface shared by the declarative Validator and
the CompositeValidator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ryandata_validation.models.results import ValidationReport

T = TypeVar("T")


class BaseValidator(ABC, Generic[T]):
    """Abstract base class for validators.

    Generic over T, the type of object being validated.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this validator for error reporting."""
        ...

    @abstractmethod
    def validate(self, subject: T) -> ValidationReport:
        """Validate a subject.

        Args:
            subject: Object to validate.

        Returns:
            ValidationReport containing every violation found.
        """
        ...

    def is_valid(self, subject: T) -> bool:
        """Check whether a subject passes every rule."""
        return self.validate(subject).is_valid

    def assert_valid(self, subject: T) -> ValidationReport:
        """Validate a subject and raise if any rule failed.

        Returns:
            The (valid) report.

        Raises:
            RyanDataValidationError: If the report has violations.
        """
        report = self.validate(subject)
        report.raise_if_invalid()
        return report
