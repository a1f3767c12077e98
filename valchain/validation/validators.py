"""Validator abstraction and its combinators.

A validator turns a value into a ValidationResults aggregate and never raises
for invalid data. Validators are composed into new validators:

    check_account = (
        AuthorizationValidator()
        .and_then_if_valid(ExistenceValidator())
        .and_then_for_each(EmailValidator(), lambda account: account.emails)
    )
    check_account.validate_and_throw_if_invalid(account)

Combinators never modify their operands, they return FunctionValidator
instances closing over them.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from http import HTTPStatus
from typing import Any, Generic, TypeVar

from valchain.validation.results import ValidationResults

T = TypeVar("T")
D = TypeVar("D")


class Validator(ABC, Generic[T]):
    """Base class for all validators.

    Contract:
        - validate() is total over its input type
        - validate() returns a fresh ValidationResults (empty = valid)
        - validation failures are data, never exceptions
    """

    @abstractmethod
    def validate(self, data: T) -> ValidationResults:
        """Validate a single value."""
        ...

    def validate_each(self, data: Iterable[T] | None) -> ValidationResults:
        """Validate every element in order and join all violations.

        A missing or empty iterable yields an empty aggregate.
        """
        results = ValidationResults()
        if data is None:
            return results
        for item in data:
            results.join(self.validate(item))
        return results

    def validate_and_join(
        self, data: T, previous: ValidationResults | None
    ) -> ValidationResults:
        """Validate and append the violations to ``previous``."""
        results = self.validate(data)
        if previous is None:
            return results
        return previous.join(results)

    def validate_each_and_join(
        self, data: Iterable[T] | None, previous: ValidationResults | None
    ) -> ValidationResults:
        """validate_each() and append the violations to ``previous``."""
        results = self.validate_each(data)
        if previous is None:
            return results
        return previous.join(results)

    def validate_and_throw_if_invalid(
        self, data: T, status_code: HTTPStatus | int | None = None
    ) -> None:
        """Validate and raise ValidationException on any violation."""
        self.validate(data).throw_if_invalid(status_code)

    def repack(self, supplier: Callable[[], ValidationResults]) -> "Validator[T]":
        """Replace the violations of an invalid result with ``supplier()``.

        Used to hide internal validation detail behind a generic message.
        """

        def _validate(data: T) -> ValidationResults:
            results = self.validate(data)
            if results.is_invalid():
                return supplier()
            return results

        return FunctionValidator(_validate)

    def and_then(
        self, validator: "Validator[Any]", convert: Callable[[T], Any] | None = None
    ) -> "Validator[T]":
        """Run both validators and join their violations, self's first.

        Args:
            validator: Validator to chain
            convert: Maps the data to the chained validator's input type
        """
        convert = convert or _identity
        return FunctionValidator(
            lambda data: self.validate(data).join(validator.validate(convert(data)))
        )

    def and_then_for_each(
        self, validator: "Validator[D]", convert: Callable[[T], Iterable[D] | None]
    ) -> "Validator[T]":
        """Run ``validator`` on every element of ``convert(data)``."""
        return FunctionValidator(
            lambda data: self.validate(data).join(validator.validate_each(convert(data)))
        )

    def and_then_if_valid(
        self, validator: "Validator[Any]", convert: Callable[[T], Any] | None = None
    ) -> "Validator[T]":
        """Run ``validator`` only when self reported no violation."""
        convert = convert or _identity

        def _validate(data: T) -> ValidationResults:
            results = self.validate(data)
            if results.is_valid():
                results.join(validator.validate(convert(data)))
            return results

        return FunctionValidator(_validate)

    def and_then_for_each_if_valid(
        self, validator: "Validator[D]", convert: Callable[[T], Iterable[D] | None]
    ) -> "Validator[T]":
        """and_then_for_each() gated on self being valid."""

        def _validate(data: T) -> ValidationResults:
            results = self.validate(data)
            if results.is_valid():
                results.join(validator.validate_each(convert(data)))
            return results

        return FunctionValidator(_validate)


def _identity(data):
    return data


class FunctionValidator(Validator[T]):
    """Validator backed by a plain callable."""

    def __init__(self, func: Callable[[T], ValidationResults]):
        self.func = func

    def validate(self, data: T) -> ValidationResults:
        return self.func(data)

    def __repr__(self) -> str:
        return f"FunctionValidator({getattr(self.func, '__qualname__', self.func)!r})"


def validator(func: Callable[[T], ValidationResults]) -> FunctionValidator[T]:
    """Decorator turning a function into a validator.

    Example:
        @validator
        def not_empty(value: str) -> ValidationResults:
            results = ValidationResults()
            if not value:
                results.add(Message.NOT_NULL)
            return results
    """
    return FunctionValidator(func)


class AbstractValidator(Validator[T]):
    """Template-method base: subclasses fill a fresh aggregate."""

    def validate(self, data: T) -> ValidationResults:
        return self.do_validate(data, ValidationResults())

    @abstractmethod
    def do_validate(self, data: T, results: ValidationResults) -> ValidationResults:
        """Record violations of ``data`` into ``results`` and return it."""
        ...
