from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ryandata_validation.models import ValidationReport


@runtime_checkable
class ValidatorProtocol(Protocol):
    """Protocol for validator implementations.

    Anything with a name and a validate() returning a ValidationReport can
    be combined with the package's validators, e.g. in a CompositeValidator.
    """

    def validate(self, subject: Any) -> ValidationReport:
        """Validate a subject.

        Args:
            subject: Object to validate.

        Returns:
            ValidationReport containing validation status and any violations.
        """
        ...

    @property
    def name(self) -> str:
        """Name of this validator for error reporting."""
        ...
