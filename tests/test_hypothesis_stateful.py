"""Stateful property-based tests using Hypothesis for workflow testing.

This module uses Hypothesis's RuleBasedStateMachine to declare rules in
arbitrary order, mutate the subject and check that every report matches
the rules one by one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import hypothesis.strategies as st
from hypothesis import HealthCheck, settings
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from ryandata_validation import (
    Condition,
    Validator,
    has_maximum_length,
    has_minimum_length,
    is_less_than_or_equal_to,
    is_not_null_or_empty,
)
from tests.strategies import length_bound_strategy, optional_text_strategy


@dataclass
class Record:
    name: str | None = None
    quantity: int = 0


def build_validator(declared: list[tuple[str, Condition[Any]]]) -> Validator[Record]:
    """Create a validator declaring the given rules in order."""

    class RecordValidator(Validator[Record]):
        def rules(self) -> None:
            for path, condition in declared:
                self.ensure(path, condition)

    return RecordValidator()


# =============================================================================
# Validator State Machine
# =============================================================================


class ValidatorStateMachine(RuleBasedStateMachine):
    """State machine for declaring rules and validating a changing subject.

    Checks that the report always holds exactly one violation per failing
    rule, in declaration order.
    """

    def __init__(self) -> None:
        super().__init__()
        self.declared: list[tuple[str, Condition[Any]]] = []
        self.subject = Record()

    # =========================================================================
    # Rules for declaring validation rules
    # =========================================================================

    @rule(bound=length_bound_strategy())
    def declare_maximum_length(self, bound: int) -> None:
        self.declared.append(("name", has_maximum_length(bound)))

    @rule(bound=length_bound_strategy())
    def declare_minimum_length(self, bound: int) -> None:
        self.declared.append(("name", has_minimum_length(bound)))

    @rule()
    def declare_not_empty(self) -> None:
        self.declared.append(("name", is_not_null_or_empty()))

    @rule(bound=st.integers(min_value=-50, max_value=50))
    def declare_quantity_bound(self, bound: int) -> None:
        self.declared.append(("quantity", is_less_than_or_equal_to(bound)))

    # =========================================================================
    # Rules for changing the subject
    # =========================================================================

    @rule(name=optional_text_strategy(max_size=20))
    def set_name(self, name: str | None) -> None:
        self.subject.name = name

    @rule(quantity=st.integers(min_value=-100, max_value=100))
    def set_quantity(self, quantity: int) -> None:
        self.subject.quantity = quantity

    # =========================================================================
    # Validation
    # =========================================================================

    @rule()
    def validate_and_verify(self) -> None:
        validator = build_validator(self.declared)
        report = validator.validate(self.subject)

        expected = []
        for path, condition in self.declared:
            value = getattr(self.subject, path)
            if not condition.is_satisfied(value):
                expected.append((path, condition.resolve_message(path, value)))

        actual = [(v.property_name, v.error_message) for v in report.violations]
        assert actual == expected
        assert report.is_valid == (not expected)

    @rule()
    def reset_rules(self) -> None:
        self.declared.clear()

    # =========================================================================
    # Invariants
    # =========================================================================

    @invariant()
    def bindings_match_declarations(self) -> None:
        validator = build_validator(self.declared)
        assert [b.property_name for b in validator.bindings] == [p for p, _ in self.declared]


# Create pytest test case
TestValidatorStateMachine = ValidatorStateMachine.TestCase
TestValidatorStateMachine.settings = settings(
    max_examples=50,
    stateful_step_count=20,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
