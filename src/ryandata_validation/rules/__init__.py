"""Rule declaration: binding conditions to named properties."""

from ryandata_validation.rules.binding import (
    RuleBinding,
    attribute_accessor,
    resolve_property,
)
from ryandata_validation.rules.field import Field

__all__ = ["Field", "RuleBinding", "attribute_accessor", "resolve_property"]
