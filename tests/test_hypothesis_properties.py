"""Property-based tests using Hypothesis for conditions and validators.

This module contains property tests that verify invariants of the
condition builders and the validator engine using Hypothesis strategies.
"""

from __future__ import annotations

from dataclasses import dataclass

from hypothesis import given
from hypothesis import strategies as st

from ryandata_validation import (
    Validator,
    has_maximum_length,
    has_minimum_length,
    is_equal_to,
    is_less_than_or_equal_to,
    is_not_null_or_empty,
    is_null_or_is_empty,
    satisfies,
)
from tests.strategies import (
    length_bound_strategy,
    number_strategy,
    optional_text_strategy,
    plain_message_strategy,
    property_name_strategy,
)

# =============================================================================
# Condition Properties
# =============================================================================


class TestComparableProperties:
    @given(value=number_strategy(), bound=number_strategy())
    def test_less_than_or_equal_matches_operator(self, value: float, bound: float) -> None:
        assert is_less_than_or_equal_to(bound).is_satisfied(value) == (value <= bound)

    @given(bound=number_strategy())
    def test_bound_itself_satisfies(self, bound: float) -> None:
        assert is_less_than_or_equal_to(bound).is_satisfied(bound)


class TestStringProperties:
    @given(optional_text_strategy())
    def test_null_or_empty_checks_are_negations(self, value: str | None) -> None:
        assert is_not_null_or_empty().is_satisfied(value) != is_null_or_is_empty().is_satisfied(
            value
        )
        assert is_not_null_or_empty().is_satisfied(value) == (value is not None and value != "")

    @given(value=optional_text_strategy(), bound=length_bound_strategy())
    def test_length_checks_treat_none_as_empty(self, value: str | None, bound: int) -> None:
        length = len(value or "")
        assert has_maximum_length(bound).is_satisfied(value) == (length <= bound)
        assert has_minimum_length(bound).is_satisfied(value) == (length >= bound)

    @given(left=optional_text_strategy(), right=optional_text_strategy())
    def test_ordinal_equality(self, left: str | None, right: str | None) -> None:
        assert is_equal_to(right).is_satisfied(left) == (left == right)


class TestMessageProperties:
    @given(
        message=plain_message_strategy(),
        name=property_name_strategy(),
        bound=number_strategy(),
    )
    def test_custom_message_without_placeholders_is_verbatim(
        self, message: str, name: str, bound: float
    ) -> None:
        assert is_less_than_or_equal_to(bound, message).resolve_message(name) == message

    @given(name=property_name_strategy(), bound=st.integers(min_value=0, max_value=100))
    def test_default_message_resolves_name_and_argument(self, name: str, bound: int) -> None:
        message = has_maximum_length(bound).resolve_message(name)
        assert message == f"{name} must be at most {bound} characters"


# =============================================================================
# Validator Properties
# =============================================================================


@dataclass
class Sample:
    value: float
    name: str | None


class SampleValidator(Validator[Sample]):
    def rules(self) -> None:
        self.ensure("value", is_less_than_or_equal_to(4))
        self.ensure("name", is_not_null_or_empty())
        self.ensure("name", has_maximum_length(5))
        self.ensure("value", satisfies(lambda v: v >= -4, "{val} must be at least -4"))


VALIDATOR = SampleValidator()


class TestValidatorProperties:
    @given(value=number_strategy(), name=optional_text_strategy(max_size=10))
    def test_one_violation_per_failing_rule(self, value: float, name: str | None) -> None:
        subject = Sample(value=value, name=name)
        report = VALIDATOR.validate(subject)

        expected = [
            binding.property_name
            for binding in VALIDATOR.bindings
            if not binding.condition.is_satisfied(binding.read(subject))
        ]
        assert [v.property_name for v in report.violations] == expected
        assert report.is_valid == (not expected)

    @given(value=number_strategy(), name=optional_text_strategy(max_size=10))
    def test_validation_is_deterministic(self, value: float, name: str | None) -> None:
        subject = Sample(value=value, name=name)
        assert VALIDATOR.validate(subject) == VALIDATOR.validate(subject)
