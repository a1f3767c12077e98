"""Translate-and-format pipeline.

Turns a Translatable into its final text:

1. translate the message code (falling back to the code's canonical message),
2. substitute the message parameters,
3. degrade to NO_CODE when no template could be resolved at all.

CacheTranslateFormat memoizes the outcome so a violation is rendered once,
however many times its message is read.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from valchain.config import get_settings
from valchain.i18n.formatter import FORMATTERS, Formatter, NoExceptionStringFormatter
from valchain.i18n.message_code import NO_CODE, message_key
from valchain.i18n.translatable import Translatable
from valchain.i18n.translator import DefaultTranslator, Translator
from valchain.utils.logging import get_logger

logger = get_logger(__name__)

_UNSET = object()


@runtime_checkable
class TranslateFormat(Protocol):
    def translate_and_format(self, translatable: Translatable) -> str: ...


class DefaultTranslateFormat:
    """Translator + formatter composition.

    ``formatter`` is either an object with a ``format(template, *params)``
    method or a plain callable such as ``brace_format``; plain callables are
    wrapped in NoExceptionStringFormatter.
    """

    def __init__(
        self,
        formatter: Formatter | Callable[..., str] | None = None,
        translator: Translator | None = None,
        locale: str | None = None,
    ):
        if formatter is None:
            formatter = NoExceptionStringFormatter()
        elif not hasattr(formatter, "format") and callable(formatter):
            formatter = NoExceptionStringFormatter(formatter)
        self.formatter = formatter
        self.translator = translator or DefaultTranslator()
        self.locale = locale

    @classmethod
    def from_settings(cls) -> "DefaultTranslateFormat":
        """Build the pipeline described by ValidationSettings."""
        settings = get_settings().validation
        return cls(
            formatter=NoExceptionStringFormatter(FORMATTERS[settings.formatter]),
            locale=settings.locale,
        )

    def _resolve_template(self, translatable: Translatable) -> str | None:
        code = translatable.message_code
        if code is None:
            return None
        template = self.translator.translate(code, self.locale)
        if template is None:
            template = getattr(code, "message", None)
        return template

    def translate_and_format(self, translatable: Translatable) -> str:
        template = self._resolve_template(translatable)
        message = None
        if template is not None:
            message = self.formatter.format(template, *translatable.message_parameters)
        if message is None:
            message = template

        if message is None:
            logger.error(
                "no_code_definition",
                message_code=message_key(translatable.message_code),
                stack_info=True,
            )
            message = NO_CODE

        return message


class CacheTranslateFormat:
    """Translate and format once, then keep returning the first value."""

    def __init__(self, translate_format: TranslateFormat):
        self.translate_format = translate_format
        self._value = _UNSET

    @property
    def is_cached(self) -> bool:
        return self._value is not _UNSET

    def translate_and_format(self, translatable: Translatable) -> str:
        if self._value is _UNSET:
            self._value = self.translate_format.translate_and_format(translatable)
        return self._value


# Process-wide pipeline used by new ValidationResults
_default_translate_format: TranslateFormat | None = None


def get_default_translate_format() -> TranslateFormat:
    """Get or create the default translate format from settings."""
    global _default_translate_format
    if _default_translate_format is None:
        _default_translate_format = DefaultTranslateFormat.from_settings()
    return _default_translate_format


def set_default_translate_format(translate_format: TranslateFormat) -> None:
    """Plug in an application translator/formatter for all new results."""
    global _default_translate_format
    _default_translate_format = translate_format


def reset_default_translate_format() -> None:
    """Drop the default pipeline (useful for testing)."""
    global _default_translate_format
    _default_translate_format = None
