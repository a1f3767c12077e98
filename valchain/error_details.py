"""Error message formatting for user-friendly exception handling."""

from valchain.exceptions import ValidationException


def _format_validation_exception(error: ValidationException) -> str:
    """Format every violation of a ValidationException."""
    lines = [f"Validation failed ({int(error.status_code)} {error.status_code.phrase}):"]
    lines.extend(f"- {message}" for message in error.messages)
    return "\n".join(lines)


ERROR_TYPES = {
    ValidationException: _format_validation_exception,
    ValueError: lambda e: str(e),
    KeyError: lambda e: f"Missing required field '{str(e).strip(chr(39))}'.",
    TypeError: lambda e: f"Invalid value: {e!s}",
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
