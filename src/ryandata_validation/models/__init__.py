"""Validation result models."""

from __future__ import annotations

from ryandata_validation.models.results import ValidationReport, Violation

__all__ = ["ValidationReport", "Violation"]
