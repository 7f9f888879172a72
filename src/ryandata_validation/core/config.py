from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: str = "0") -> bool:
    value = os.getenv(name, default)
    return value.lower() not in {"0", "false", "no"}


@dataclass(frozen=True)
class ValidatorConfig:
    """Runtime behavior of a Validator.

    Attributes:
        strict: If True, an exception raised by a predicate propagates out of
            validate() instead of being recorded as a violation.
        log_violations: If True, every violation is logged at INFO level.
    """

    strict: bool = field(default_factory=lambda: _env_flag("RYANDATA_VALIDATION_STRICT"))
    log_violations: bool = field(
        default_factory=lambda: _env_flag("RYANDATA_VALIDATION_LOG_VIOLATIONS")
    )
