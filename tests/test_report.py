import pytest
from pydantic import ValidationError

from ryandata_validation import RyanDataValidationError, ValidationReport, Violation


def make_report() -> ValidationReport:
    return ValidationReport(
        violations=(
            Violation(property_name="name", error_message="name is required"),
            Violation(property_name="email", error_message="email must be an email address"),
            Violation(property_name="name", error_message="name must be at least 2 characters"),
        )
    )


def test_empty_report_is_valid() -> None:
    report = ValidationReport.valid()
    assert report.is_valid
    assert report.violations == ()
    assert report.property_names == []


def test_report_with_violations_is_invalid() -> None:
    assert make_report().is_valid is False


def test_errors_for_keeps_order() -> None:
    assert make_report().errors_for("name") == [
        "name is required",
        "name must be at least 2 characters",
    ]
    assert make_report().errors_for("missing") == []


def test_property_names_are_unique_and_ordered() -> None:
    assert make_report().property_names == ["name", "email"]


def test_iterating_yields_violations() -> None:
    report = make_report()
    assert list(report) == list(report.violations)


def test_merge_returns_new_report() -> None:
    first = ValidationReport(violations=(Violation(property_name="a", error_message="a bad"),))
    second = ValidationReport(violations=(Violation(property_name="b", error_message="b bad"),))

    merged = first.merge(second)

    assert [v.property_name for v in merged.violations] == ["a", "b"]
    assert len(first.violations) == 1


def test_to_records() -> None:
    records = make_report().to_records()
    assert records[1] == {
        "property_name": "email",
        "error_message": "email must be an email address",
    }


def test_model_dump_includes_validity() -> None:
    dumped = ValidationReport.valid().model_dump()
    assert dumped == {"violations": (), "is_valid": True}


def test_report_is_frozen() -> None:
    report = make_report()
    with pytest.raises(ValidationError):
        report.violations = ()  # type: ignore[misc]


def test_violation_str() -> None:
    violation = Violation(property_name="name", error_message="name is required")
    assert str(violation) == "name: name is required"


def test_raise_if_invalid() -> None:
    ValidationReport.valid().raise_if_invalid()

    with pytest.raises(RyanDataValidationError) as exc_info:
        make_report().raise_if_invalid()

    error = exc_info.value
    assert error.report == make_report()
    assert error.context["package"] == "ryandata_validation"
    assert len(error.errors()) == 3
