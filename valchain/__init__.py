"""valchain - composable validators with aggregated, translatable results.

Usage:
    from valchain import CoreMessage, ValidationResults, validator

    class Message(CoreMessage):
        NOT_NULL = "Field %s must not be empty"

    @validator
    def name_present(user) -> ValidationResults:
        results = ValidationResults()
        if not user.name:
            results.add(Message.NOT_NULL, "name").with_params("name")
        return results

    name_present.validate_and_throw_if_invalid(user)
"""

from valchain.exceptions import ValidationException
from valchain.i18n import CoreMessage, MessageCode
from valchain.validation import (
    AbstractValidator,
    FunctionValidator,
    Severity,
    ValidationResult,
    ValidationResults,
    ValidationService,
    Validator,
    validator,
)

__all__ = [
    "AbstractValidator",
    "CoreMessage",
    "FunctionValidator",
    "MessageCode",
    "Severity",
    "ValidationException",
    "ValidationResult",
    "ValidationResults",
    "ValidationService",
    "Validator",
    "validator",
]
