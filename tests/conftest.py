"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture(autouse=True)
def _clear_validation_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ValidatorConfig defaults independent of the developer's shell."""
    monkeypatch.delenv("RYANDATA_VALIDATION_STRICT", raising=False)
    monkeypatch.delenv("RYANDATA_VALIDATION_LOG_VIOLATIONS", raising=False)
