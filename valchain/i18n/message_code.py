"""Message code contract.

A message code identifies one kind of violation and carries its canonical
message template. Catalogues of codes are defined by the calling application,
usually as ``CoreMessage`` enums:

    class AccountMessage(CoreMessage):
        NOT_AUTHORIZED = "User %s is not authorized"
        DATA_NOT_FOUND = "Account %s does not exist"
"""

from enum import Enum
from typing import Protocol, runtime_checkable

# Rendered when no template can be resolved for a violation
NO_CODE = "_NO_CODE_"


@runtime_checkable
class MessageCode(Protocol):
    """Common interface for all message codes."""

    @property
    def message(self) -> str:
        """Canonical message template."""
        ...


def message_key(code: object) -> str | None:
    """Get the stable lookup key of a message code.

    Returns the member name for enum codes, the ``key`` attribute for other
    codes that define one, otherwise None.
    """
    if isinstance(code, Enum):
        return code.name
    return getattr(code, "key", None)


class CoreMessage(Enum):
    """Base class for message code catalogues.

    Members are declared as ``NAME = "template"``. Each member gets its own
    ordinal value, so two codes sharing a template stay distinct members.
    """

    def __new__(cls, message: str):
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__) + 1
        obj._message = message
        return obj

    @property
    def key(self) -> str:
        return self.name

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self.name
