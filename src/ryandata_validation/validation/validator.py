"""Declarative validator.

Subclass Validator, declare rules in rules() with ensure(), and call
validate(). Rules are collected once, in the constructor, and never change
afterwards, so one validator instance can be shared freely.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ryandata_validation.conditions.base import Condition
from ryandata_validation.core.config import ValidatorConfig
from ryandata_validation.core.errors import RyanDataConfigurationError
from ryandata_validation.models.results import ValidationReport, Violation
from ryandata_validation.rules.binding import RuleBinding
from ryandata_validation.validation.base import BaseValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Validator(BaseValidator[T], Generic[T]):
    """Base class for validators that declare their rules.

    Example:
        class OrderValidator(Validator[Order]):
            def rules(self) -> None:
                self.ensure("quantity", is_less_than_or_equal_to(4))
                self.ensure(Field("reference").is_not_null_or_empty())
                self.ensure(lambda o: o.customer.email, is_not_null(), name="email")

        report = OrderValidator().validate(order)

    Subclasses that define __init__ must set their own attributes before
    calling super().__init__(), since that is where rules() runs.
    """

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        """Initialize the validator and collect its rules.

        Args:
            config: Runtime behavior. Defaults to ValidatorConfig().

        Raises:
            RyanDataConfigurationError: If any rule is declared incorrectly.
        """
        self._config = config or ValidatorConfig()
        self._collecting: list[RuleBinding[T, Any]] | None = []
        try:
            self.rules()
            collected = self._collecting
        finally:
            self._collecting = None
        self._bindings: tuple[RuleBinding[T, Any], ...] = tuple(collected)
        logger.debug("Collected %d rules for %s", len(self._bindings), self.name)

    @abstractmethod
    def rules(self) -> None:
        """Declare this validator's rules by calling ensure()."""
        ...

    @property
    def name(self) -> str:
        """Name of this validator (the class name by default)."""
        return type(self).__name__

    @property
    def config(self) -> ValidatorConfig:
        """Settings this validator runs with."""
        return self._config

    @property
    def bindings(self) -> tuple[RuleBinding[T, Any], ...]:
        """The collected rules, in declaration order."""
        return self._bindings

    def ensure(
        self,
        target: str | Callable[[T], Any] | RuleBinding[T, Any],
        condition: Condition[Any] | None = None,
        *,
        name: str | None = None,
    ) -> RuleBinding[T, Any]:
        """Declare one rule. Only valid inside rules().

        Args:
            target: Dotted attribute path, accessor callable, or a
                RuleBinding built with Field.
            condition: Condition for the property (omit with a RuleBinding).
            name: Display name, required with an accessor callable.

        Returns:
            The declared RuleBinding.

        Raises:
            RyanDataConfigurationError: If called outside rules() or the
                rule cannot be resolved.
        """
        if self._collecting is None:
            raise RyanDataConfigurationError.create(
                "rule_declaration",
                f"ensure() can only be called from {self.name}.rules()",
                {"validator": self.name},
            )

        if isinstance(target, RuleBinding):
            if condition is not None or name is not None:
                raise RyanDataConfigurationError.create(
                    "rule_declaration",
                    "A RuleBinding already carries its condition and name",
                    {"validator": self.name, "property": target.property_name},
                )
            binding = target
        else:
            if condition is None:
                raise RyanDataConfigurationError.create(
                    "rule_declaration",
                    "A rule needs a Condition to evaluate",
                    {"validator": self.name},
                )
            binding = RuleBinding.declare(target, condition, name=name)

        self._collecting.append(binding)
        return binding

    def validate(self, subject: T) -> ValidationReport:
        """Evaluate every rule against a subject.

        All rules run, in declaration order; a failing rule never hides
        another.

        Args:
            subject: Object to validate.

        Returns:
            New ValidationReport with one violation per failing rule.

        Raises:
            RyanDataConfigurationError: If a rule cannot read its property
                from the subject.
        """
        violations: list[Violation] = []
        for binding in self._bindings:
            violation = binding.evaluate(subject, strict=self._config.strict)
            if violation is None:
                continue
            if self._config.log_violations:
                logger.info("%s: %s", self.name, violation)
            violations.append(violation)

        logger.debug(
            "%s evaluated %d rules, %d violations",
            self.name,
            len(self._bindings),
            len(violations),
        )
        return ValidationReport(violations=tuple(violations))
