"""Message codes and the translation pipeline that renders them."""

from valchain.i18n.formatter import (
    Formatter,
    NoExceptionStringFormatter,
    brace_format,
    percent_format,
)
from valchain.i18n.message_code import NO_CODE, CoreMessage, MessageCode, message_key
from valchain.i18n.translatable import DefaultTranslatable, Translatable
from valchain.i18n.translate_format import (
    CacheTranslateFormat,
    DefaultTranslateFormat,
    TranslateFormat,
    get_default_translate_format,
    reset_default_translate_format,
    set_default_translate_format,
)
from valchain.i18n.translator import DefaultTranslator, Translator

__all__ = [
    "NO_CODE",
    "CacheTranslateFormat",
    "CoreMessage",
    "DefaultTranslatable",
    "DefaultTranslateFormat",
    "DefaultTranslator",
    "Formatter",
    "MessageCode",
    "NoExceptionStringFormatter",
    "Translatable",
    "TranslateFormat",
    "Translator",
    "brace_format",
    "get_default_translate_format",
    "message_key",
    "percent_format",
    "reset_default_translate_format",
    "set_default_translate_format",
]
