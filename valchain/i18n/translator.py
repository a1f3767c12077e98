"""Translator contract.

Translators map a message code to a template in a given locale. Lookup
against a real catalogue belongs to the embedding application; the default
translator hands back the code's canonical message.
"""

from typing import Protocol, runtime_checkable

from valchain.i18n.message_code import MessageCode


@runtime_checkable
class Translator(Protocol):
    def translate(self, message_code: MessageCode, locale: str | None) -> str | None:
        """Translate a message code into a template for the given locale.

        Args:
            message_code: Message to translate
            locale: Target locale, None for the default language

        Returns:
            Template string, or None when the code has no translation
        """
        ...


class DefaultTranslator:
    """Pass-through translator returning the canonical message."""

    def translate(self, message_code: MessageCode, locale: str | None) -> str | None:
        return getattr(message_code, "message", None)
