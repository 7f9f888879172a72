"""Validator implementations.

This module provides the declarative Validator base class and
the CompositeValidator for running several validators together.
"""

from ryandata_validation.validation.base import BaseValidator
from ryandata_validation.validation.composite import CompositeValidator
from ryandata_validation.validation.validator import Validator

__all__ = [
    "BaseValidator",
    "CompositeValidator",
    "Validator",
]
