"""Rule bindings: a condition attached to a named property of a subject.

The property name is taken from how the accessor is described, never from
running it. A dotted attribute path names itself; a callable accessor must
come with an explicit name.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ryandata_validation.conditions.base import Condition
from ryandata_validation.core.errors import RyanDataConfigurationError
from ryandata_validation.models.results import Violation

logger = logging.getLogger(__name__)

S = TypeVar("S")
P = TypeVar("P")

Accessor = Callable[[Any], Any]

_PATH_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*$")

# Raised by accessors reading something the subject does not have
_ACCESS_ERRORS = (AttributeError, KeyError, IndexError, TypeError)


def attribute_accessor(path: str) -> Accessor:
    """Build an accessor that walks a dotted attribute path.

    Mapping subjects are read by key. An intermediate None ends the walk and
    yields None, so conditions see a missing nested value as absent.
    """
    parts = tuple(path.split("."))

    def _access(subject: Any) -> Any:
        current = subject
        for part in parts:
            if current is None:
                return None
            if isinstance(current, Mapping):
                current = current[part]
            else:
                current = getattr(current, part)
        return current

    return _access


def resolve_property(target: str | Accessor, name: str | None = None) -> tuple[str, Accessor]:
    """Work out the display name and accessor for a property reference.

    Args:
        target: Dotted attribute path (e.g. "address.city") or a callable
            taking the subject.
        name: Display name. Optional for a path (defaults to the path),
            required for a callable.

    Returns:
        Tuple of (property_name, accessor).

    Raises:
        RyanDataConfigurationError: If the reference cannot be resolved to a
            single named property.
    """
    if name is not None and (not isinstance(name, str) or not name.strip()):
        raise RyanDataConfigurationError.create(
            "unresolved_property",
            "Property name must be a non-empty string",
            {"name": repr(name)},
        )

    if isinstance(target, str):
        if not _PATH_RE.match(target):
            raise RyanDataConfigurationError.create(
                "unresolved_property",
                f"Not an attribute path: {target!r}",
                {"target": target},
            )
        return name or target, attribute_accessor(target)

    if callable(target):
        if name is None:
            raise RyanDataConfigurationError.create(
                "unresolved_property",
                "A callable accessor needs an explicit property name",
                {"target": repr(target)},
            )
        return name, target

    raise RyanDataConfigurationError.create(
        "unresolved_property",
        f"Cannot resolve a property from {type(target).__name__}",
        {"target": repr(target)},
    )


@dataclass(frozen=True)
class RuleBinding(Generic[S, P]):
    """A condition bound to one property of a subject type.

    Attributes:
        property_name: Name substituted for ``{val}`` in messages.
        accessor: Reads the property from a subject.
        condition: Condition evaluated against the property value.
    """

    property_name: str
    accessor: Callable[[S], P]
    condition: Condition[P]

    @classmethod
    def declare(
        cls,
        target: str | Callable[[S], P],
        condition: Condition[P],
        name: str | None = None,
    ) -> RuleBinding[S, P]:
        """Create a binding from a property reference and a condition.

        Args:
            target: Dotted attribute path or accessor callable.
            condition: Condition to evaluate on the property.
            name: Display name (required with a callable target).

        Returns:
            New RuleBinding.

        Raises:
            RyanDataConfigurationError: If the target cannot be resolved or
                ``condition`` is not a Condition.
        """
        if not isinstance(condition, Condition):
            raise RyanDataConfigurationError.create(
                "rule_declaration",
                "A rule needs a Condition to evaluate",
                {"condition": repr(condition)},
            )
        property_name, accessor = resolve_property(target, name)
        return cls(property_name=property_name, accessor=accessor, condition=condition)

    def read(self, subject: S) -> P:
        """Read the bound property from a subject.

        Raises:
            RyanDataConfigurationError: If the subject has no such property.
        """
        try:
            return self.accessor(subject)
        except _ACCESS_ERRORS as e:
            raise RyanDataConfigurationError.create(
                "binding_access",
                f"Cannot read {self.property_name} from {type(subject).__name__}: {e}",
                {"property": self.property_name},
            ) from e

    def violation(self, value: P) -> Violation:
        """Build the violation for a failing value."""
        return Violation(
            property_name=self.property_name,
            error_message=self.condition.resolve_message(self.property_name, value),
        )

    def evaluate(self, subject: S, *, strict: bool = True) -> Violation | None:
        """Evaluate the rule against a subject.

        Args:
            subject: Object to read the property from.
            strict: Let an exception raised by the predicate propagate. When
                False it is logged and the rule is recorded as failed.

        Returns:
            Violation if the condition fails, None if it holds.

        Raises:
            RyanDataConfigurationError: If the subject has no such property.
        """
        value = self.read(subject)
        try:
            if self.condition.is_satisfied(value):
                return None
        except Exception as e:
            if strict:
                raise
            logger.warning(
                "Rule on %s raised %s: %s; recording it as a violation",
                self.property_name,
                type(e).__name__,
                e,
            )
        return self.violation(value)
