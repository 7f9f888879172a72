"""Error classes with package identification.

Two taxonomies are kept apart:

- RyanDataConfigurationError: a programmer error found while declaring rules
  (bad builder arguments, malformed pattern, unresolvable property accessor).
  Raised immediately, never reported as a violation.
- RyanDataValidationError: raised only on request, when a caller asks for an
  invalid report to be turned into an exception.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic_core import PydanticCustomError

if TYPE_CHECKING:
    from ryandata_validation.models.results import ValidationReport

# Package identifier for error context
PACKAGE_NAME = "ryandata_validation"


class RyanDataConfigurationError(PydanticCustomError):
    """Raised when a rule or condition is declared incorrectly.

    Inherits from PydanticCustomError so it carries an error type and a
    context dict, and still is a ValueError for callers that only care
    about that.

    Error types used by this package:
        invalid_argument, invalid_pattern, unresolved_property,
        rule_declaration, binding_access
    """

    @classmethod
    def create(
        cls,
        error_type: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> RyanDataConfigurationError:
        """Build an error with the package name merged into its context.

        Args:
            error_type: Type/category of the error.
            message: Error message describing the issue.
            context: Additional context dict (optional).

        Returns:
            RyanDataConfigurationError instance.
        """
        return cls(
            error_type,
            message,
            {"package": PACKAGE_NAME, **(context or {})},
        )

    @classmethod
    def invalid_argument(
        cls, builder: str, message: str, value: Any = None
    ) -> RyanDataConfigurationError:
        """Error for a builder given an argument it cannot work with."""
        return cls.create(
            "invalid_argument",
            f"{builder}: {message}",
            {"builder": builder, "value": repr(value)},
        )

    @classmethod
    def from_regex_error(cls, pattern: str, error: Exception) -> RyanDataConfigurationError:
        """Wrap a re.error raised while compiling a pattern."""
        return cls.create(
            "invalid_pattern",
            f"Invalid regular expression: {error}",
            {"pattern": pattern},
        )


class RyanDataValidationError(Exception):
    """Exception carrying a failed ValidationReport.

    Provides access to the report while exposing an errors() list shaped
    like the package's other validation errors.
    """

    def __init__(self, report: ValidationReport, context: dict | None = None):
        """Initialize RyanDataValidationError.

        Args:
            report: The invalid report being raised.
            context: Optional additional context to include.
        """
        self.report = report
        self.context = {"package": PACKAGE_NAME, **(context or {})}
        super().__init__("; ".join(v.error_message for v in report.violations))

    def errors(self) -> list[dict[str, Any]]:
        """Get the violations as a list of dicts.

        Returns:
            List of {"property_name", "error_message"} dicts in report order.
        """
        return self.report.to_records()

    def __repr__(self) -> str:
        return f"RyanDataValidationError({self.report!r}, context={self.context})"
