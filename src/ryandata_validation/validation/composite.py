"""Composite validator for combining multiple validators.

Provides a generic composite validator that runs multiple validators
over the same subject and aggregates their reports.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from ryandata_validation.models.results import ValidationReport
from ryandata_validation.validation.base import BaseValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CompositeValidator(BaseValidator[T], Generic[T]):
    """Validator that combines multiple validators.

    Runs all validators and merges their reports in order.
    """

    def __init__(self, validators: list[BaseValidator[T]], name: str = "composite") -> None:
        """Initialize composite validator.

        Args:
            validators: List of validators to run.
            name: Name reported for this composite.
        """
        self._validators = list(validators)
        self._name = name

    @property
    def name(self) -> str:
        """Name of this validator."""
        return self._name

    def validate(self, subject: T) -> ValidationReport:
        """Run all validators and combine results."""
        report = ValidationReport.valid()

        for validator in self._validators:
            report = report.merge(validator.validate(subject))

        logger.debug(
            "%s ran %d validators, %d violations",
            self._name,
            len(self._validators),
            len(report.violations),
        )
        return report

    def add_validator(self, validator: BaseValidator[T]) -> None:
        """Add a validator to the composite."""
        self._validators.append(validator)

    def remove_validator(self, name: str) -> bool:
        """Remove a validator by name. Returns True if removed."""
        for i, v in enumerate(self._validators):
            if v.name == name:
                self._validators.pop(i)
                return True
        return False

    @property
    def validators(self) -> list[BaseValidator[T]]:
        """Get copy of validators list."""
        return self._validators.copy()
