"""Translatable contract and its plain implementation."""

from typing import Any, Protocol, runtime_checkable

from valchain.i18n.message_code import MessageCode


@runtime_checkable
class Translatable(Protocol):
    """Anything that carries a message code and its parameters.

    ValidationResult is the main implementation; DefaultTranslatable covers
    ad-hoc messages that do not come from a validator.
    """

    @property
    def message_code(self) -> MessageCode | None: ...

    @property
    def message_parameters(self) -> tuple[Any, ...]: ...


class DefaultTranslatable:
    """Immutable message code + parameters pair."""

    def __init__(self, message_code: MessageCode | None, *message_parameters: Any):
        self._message_code = message_code
        self._message_parameters = tuple(message_parameters)

    @property
    def message_code(self) -> MessageCode | None:
        return self._message_code

    @property
    def message_parameters(self) -> tuple[Any, ...]:
        return self._message_parameters

    def __repr__(self) -> str:
        return f"DefaultTranslatable({self._message_code!r}, {list(self._message_parameters)!r})"
