from dataclasses import dataclass

from ryandata_validation import (
    CompositeValidator,
    Validator,
    ValidatorProtocol,
    has_maximum_length,
    is_less_than_or_equal_to,
    is_not_null_or_empty,
)


@dataclass
class Order:
    reference: str | None
    quantity: int


class ReferenceValidator(Validator[Order]):
    def rules(self) -> None:
        self.ensure("reference", is_not_null_or_empty())
        self.ensure("reference", has_maximum_length(8))


class QuantityValidator(Validator[Order]):
    def rules(self) -> None:
        self.ensure("quantity", is_less_than_or_equal_to(10))


def test_composite_merges_reports_in_order() -> None:
    composite = CompositeValidator([QuantityValidator(), ReferenceValidator()])

    report = composite.validate(Order(reference=None, quantity=11))

    assert [v.error_message for v in report.violations] == [
        "quantity must be less than or equal to 10",
        "reference is required",
    ]


def test_composite_valid_when_all_pass() -> None:
    composite = CompositeValidator([QuantityValidator(), ReferenceValidator()])
    assert composite.is_valid(Order(reference="A-1", quantity=3))


def test_empty_composite_is_valid() -> None:
    assert CompositeValidator([]).validate(Order(reference=None, quantity=99)).is_valid


def test_add_and_remove_validators() -> None:
    composite: CompositeValidator[Order] = CompositeValidator([QuantityValidator()])
    composite.add_validator(ReferenceValidator())

    assert [v.name for v in composite.validators] == ["QuantityValidator", "ReferenceValidator"]
    assert composite.remove_validator("QuantityValidator")
    assert not composite.remove_validator("QuantityValidator")
    assert [v.name for v in composite.validators] == ["ReferenceValidator"]


def test_validators_returns_copy() -> None:
    composite = CompositeValidator([QuantityValidator()], name="orders")
    composite.validators.clear()

    assert len(composite.validators) == 1
    assert composite.name == "orders"


def test_validators_satisfy_protocol() -> None:
    assert isinstance(QuantityValidator(), ValidatorProtocol)
    assert isinstance(CompositeValidator([]), ValidatorProtocol)
