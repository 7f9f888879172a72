"""Error-message template resolution.

Templates are plain strings with ``{name}`` placeholders. Conditions use
``{val}`` for the property's display name and ``{arg1}``, ``{arg2}``, ...
for the arguments given to the builder that created them.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

PROPERTY_PLACEHOLDER = "val"

_PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def format_message(template: str, values: Mapping[str, str]) -> str:
    """Substitute ``{name}`` placeholders in a single pass.

    Placeholders with no entry in ``values`` are left as they are, and text
    coming from ``values`` is never scanned again, so a value that itself
    looks like a placeholder is inserted literally.

    Args:
        template: Message template.
        values: Mapping of placeholder name to resolved text.

    Returns:
        The resolved message.

    Example:
        >>> format_message("{val} must be at most {arg1} characters", {"val": "name", "arg1": "5"})
        'name must be at most 5 characters'
    """

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in values:
            return values[key]
        return match.group(0)

    return _PLACEHOLDER_RE.sub(_replace, template)


def argument_placeholders(args: Sequence[Any]) -> dict[str, str]:
    """Map builder arguments to ``arg1``..``argN`` in declaration order."""
    return {f"arg{i}": str(arg) for i, arg in enumerate(args, start=1)}


def build_placeholders(property_name: str, args: Sequence[Any] = ()) -> dict[str, str]:
    """Build the full placeholder mapping for one failing rule.

    Args:
        property_name: Display name bound to ``{val}``.
        args: Builder arguments bound to ``{arg1}``, ``{arg2}``, ...

    Returns:
        Dict suitable for format_message().
    """
    return {PROPERTY_PLACEHOLDER: property_name, **argument_placeholders(args)}
