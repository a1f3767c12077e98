"""Validation result types.

ValidationResult is one recorded violation; ValidationResults is the ordered
aggregate a validator returns. Violations are registered through a two-step
fluent builder:

    results = (
        ValidationResults()
        .add(AccountMessage.NOT_AUTHORIZED, "owner").with_params("alice")
        .add(AccountMessage.DATA_NOT_FOUND)
        .end()
    )

Step 1 (ValidationResults.add) registers a violation and returns a step 2
handle (ValidationResultStep) bound to the new entry, which can attach
parameters to it, keep adding, finish, or raise.
"""

from collections.abc import Iterable, Iterator
from http import HTTPStatus
from typing import Any

from valchain.config import get_settings
from valchain.exceptions import ValidationException
from valchain.i18n.message_code import MessageCode, message_key
from valchain.i18n.translate_format import (
    CacheTranslateFormat,
    TranslateFormat,
    get_default_translate_format,
)
from valchain.utils.logging import get_logger
from valchain.validation.severity import Severity

logger = get_logger(__name__)


class ValidationResult:
    """A single violation.

    The message text is rendered on first access to ``message`` and frozen
    afterwards; parameters attached later do not change it.
    """

    def __init__(
        self,
        message_code: MessageCode,
        *fields: str,
        severity: Severity = Severity.ERROR,
        bean: Any = None,
        translate_format: TranslateFormat | None = None,
    ):
        if message_code is None:
            raise ValueError("ValidationResult requires a message code")
        self._message_code = message_code
        self._fields = tuple(fields)
        self._severity = Severity(severity)
        self.bean = object() if bean is None else bean
        self._message_parameters: tuple[Any, ...] = ()
        self._cached_translate_format = CacheTranslateFormat(
            translate_format or get_default_translate_format()
        )

    @property
    def message_code(self) -> MessageCode:
        return self._message_code

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    @property
    def severity(self) -> Severity:
        return self._severity

    def _set_severity(self, severity: Severity) -> None:
        """Change the severity; reserved for subclasses."""
        self._severity = Severity(severity)

    @property
    def message_parameters(self) -> tuple[Any, ...]:
        return self._message_parameters

    def with_message_parameters(self, *params: Any) -> "ValidationResult":
        """Set the values substituted into the message template.

        Returns:
            Self for method chaining
        """
        if len(params) == 1 and params[0] is None:
            params = ()
        self._message_parameters = tuple(params)
        return self

    @property
    def message(self) -> str:
        """Translated and formatted message text."""
        return self._cached_translate_format.translate_and_format(self)

    @property
    def key(self) -> str:
        return message_key(self._message_code) or str(self._message_code)

    def __str__(self) -> str:
        return f"{self.key} [{'; '.join(self._fields)}]"

    def __repr__(self) -> str:
        return (
            f"ValidationResult({self.key}, fields={list(self._fields)}, "
            f"severity={self._severity.value}, params={list(self._message_parameters)})"
        )


class ValidationResultStep:
    """Step 2 of the builder, bound to the most recently added violation."""

    def __init__(self, results: "ValidationResults", last: ValidationResult | None = None):
        self._results = results
        self._last = last

    @property
    def last_result(self) -> ValidationResult | None:
        return self._last

    def add(self, message_code, *fields: str, **kwargs) -> "ValidationResultStep":
        """Register another violation on the same aggregate."""
        return self._results.add(message_code, *fields, **kwargs)

    def with_params(self, *params: Any) -> "ValidationResults":
        """Attach message parameters to the last added violation only."""
        if self._last is not None:
            self._last.with_message_parameters(*params)
        return self._results

    def end(self) -> "ValidationResults":
        return self._results

    def throw_if_invalid(self, status_code: HTTPStatus | int | None = None) -> None:
        self._results.throw_if_invalid(status_code)


class ValidationResults:
    """Ordered collection of violations. Empty means valid.

    Not safe for concurrent mutation; keep one aggregate per validation flow.
    """

    def __init__(self, results: Iterable[ValidationResult] | None = None):
        self._results: list[ValidationResult] = list(results or [])

    def add(
        self,
        message_code: MessageCode | ValidationResult,
        *fields: str,
        severity: Severity = Severity.ERROR,
        bean: Any = None,
    ) -> ValidationResultStep:
        """Register a violation.

        Args:
            message_code: Message code, or a ready-made ValidationResult
            fields: Names of the offending fields
            severity: Violation severity
            bean: The validated object

        Returns:
            Step 2 handle bound to the new violation
        """
        if isinstance(message_code, ValidationResult):
            result = message_code
        else:
            result = ValidationResult(message_code, *fields, severity=severity, bean=bean)
        self._results.append(result)
        return ValidationResultStep(self, result)

    def join(self, other: "ValidationResults | None") -> "ValidationResults":
        """Append every violation of ``other`` to this aggregate.

        Returns:
            Self, not a copy
        """
        if other is not None:
            self._results.extend(list(other._results))
        return self

    def is_valid(self) -> bool:
        return not self._results

    def is_invalid(self) -> bool:
        return not self.is_valid()

    def clear_validation_result(self) -> None:
        self._results.clear()

    def stream(self) -> Iterator[ValidationResult]:
        """Iterate over a snapshot of the violations in insertion order."""
        return iter(tuple(self._results))

    def message_codes(self) -> list[MessageCode]:
        return [result.message_code for result in self._results]

    def throw_if_invalid(self, status_code: HTTPStatus | int | None = None) -> None:
        """Raise ValidationException if any violation was recorded.

        Every violation is logged once right before raising.

        Args:
            status_code: Status carried by the exception, defaults to the
                configured default status (400 Bad Request)
        """
        if self.is_valid():
            return
        if status_code is None:
            status_code = get_settings().validation.default_status
        raise self._to_exception(status_code)

    def _to_exception(self, status_code: HTTPStatus | int) -> ValidationException:
        self._log_validation_results()
        return ValidationException(self, status_code)

    def _log_validation_results(self) -> None:
        for result in self._results:
            logger.error(
                "validation_result",
                message_code=result.key,
                error_message=result.message,
                severity=result.severity.value,
                message_parameters=list(result.message_parameters),
                fields=list(result.fields),
            )

    def __iter__(self) -> Iterator[ValidationResult]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __repr__(self) -> str:
        return f"ValidationResults({self._results!r})"
