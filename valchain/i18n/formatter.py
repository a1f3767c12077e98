"""Message formatters.

A formatter substitutes message parameters into a template:

    percent_format("Value %s is too long", "abc")  ->  "Value abc is too long"
    brace_format("Value {0} is too long", "abc")   ->  "Value abc is too long"

Raw formatters raise on malformed input; NoExceptionStringFormatter wraps one
and degrades to a diagnostic rendering instead.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from valchain.utils.logging import get_logger

logger = get_logger(__name__)

FORMAT_ERRORS = (TypeError, ValueError, KeyError, IndexError)


@runtime_checkable
class Formatter(Protocol):
    def format(self, template: str, *params: Any) -> str: ...


def percent_format(template: str, *params: Any) -> str:
    """printf-style substitution (``%s``, ``%d``, ...)."""
    return template % params


def brace_format(template: str, *params: Any) -> str:
    """str.format positional substitution (``{0}``, ``{}``)."""
    return template.format(*params)


class NoExceptionStringFormatter:
    """Formatter that never raises.

    On a placeholder/parameter mismatch the anomaly is logged and the raw
    template is returned together with the parameter list.
    """

    def __init__(self, formatter: Callable[..., str] = percent_format):
        self.formatter = formatter

    def format(self, template: str, *params: Any) -> str:
        try:
            return self.formatter(template, *params)
        except FORMAT_ERRORS as e:
            logger.error(
                "message_format_failed",
                template=template,
                params=list(params),
                error=str(e),
            )
            return f"{template}; args: {list(params)}"


FORMATTERS: dict[str, Callable[..., str]] = {
    "percent": percent_format,
    "brace": brace_format,
}
