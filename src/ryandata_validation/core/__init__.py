"""RyanData Validation Core - errors, configuration and message templating.

Usage:
    from ryandata_validation.core import (
        PACKAGE_NAME,
        RyanDataConfigurationError,
        RyanDataValidationError,
        ValidatorConfig,
        build_placeholders,
        format_message,
    )
"""

from __future__ import annotations

from ryandata_validation.core.config import ValidatorConfig
from ryandata_validation.core.errors import (
    PACKAGE_NAME,
    RyanDataConfigurationError,
    RyanDataValidationError,
)
from ryandata_validation.core.templating import (
    argument_placeholders,
    build_placeholders,
    format_message,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "RyanDataConfigurationError",
    "RyanDataValidationError",
    # Configuration
    "ValidatorConfig",
    # Templating
    "argument_placeholders",
    "build_placeholders",
    "format_message",
]
