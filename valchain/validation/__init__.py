"""Validation framework.

This module provides a composable validation system: validators are
independent units chained with combinators, and their violations are
collected into one ordered ValidationResults aggregate.
"""

from valchain.validation.results import (
    ValidationResult,
    ValidationResults,
    ValidationResultStep,
)
from valchain.validation.service import ValidationService
from valchain.validation.severity import Severity
from valchain.validation.validators import (
    AbstractValidator,
    FunctionValidator,
    Validator,
    validator,
)

__all__ = [
    "AbstractValidator",
    "FunctionValidator",
    "Severity",
    "ValidationResult",
    "ValidationResultStep",
    "ValidationResults",
    "ValidationService",
    "Validator",
    "validator",
]
