"""Tests for the translate-and-format pipeline."""

from unittest.mock import Mock

from structlog.testing import capture_logs

from conftest import GlobalMessageCode
from valchain.i18n import (
    NO_CODE,
    CacheTranslateFormat,
    DefaultTranslatable,
    DefaultTranslateFormat,
    DefaultTranslator,
    NoExceptionStringFormatter,
    brace_format,
    get_default_translate_format,
    set_default_translate_format,
)
from valchain.validation import ValidationResult


class CodeWithoutMessage:
    """Message code with no canonical template."""

    key = "BROKEN"
    message = None


class TestDefaultTranslator:
    def test_returns_canonical_message(self):
        assert DefaultTranslator().translate(GlobalMessageCode.NOT_NULL, "hr") == "Field %s must not be null"


class TestDefaultTranslateFormat:
    """Tests for translation + formatting."""

    def test_translates_and_formats(self):
        translate_format = DefaultTranslateFormat()

        message = translate_format.translate_and_format(
            DefaultTranslatable(GlobalMessageCode.NOT_AUTHORIZED, "alice")
        )

        assert message == "User alice is not authorized"

    def test_uses_translator_template_and_locale(self):
        translator = Mock()
        translator.translate.return_value = "Korisnik %s nije autoriziran"
        translate_format = DefaultTranslateFormat(translator=translator, locale="hr")

        message = translate_format.translate_and_format(
            DefaultTranslatable(GlobalMessageCode.NOT_AUTHORIZED, "ana")
        )

        assert message == "Korisnik ana nije autoriziran"
        translator.translate.assert_called_once_with(GlobalMessageCode.NOT_AUTHORIZED, "hr")

    def test_falls_back_to_canonical_message(self):
        translator = Mock()
        translator.translate.return_value = None
        translate_format = DefaultTranslateFormat(translator=translator)

        message = translate_format.translate_and_format(
            DefaultTranslatable(GlobalMessageCode.INVALID_PARAMETER, "id")
        )

        assert message == "Invalid parameter id"

    def test_formatter_none_falls_back_to_template(self):
        formatter = Mock()
        formatter.format.return_value = None
        translate_format = DefaultTranslateFormat(formatter=formatter)

        message = translate_format.translate_and_format(
            DefaultTranslatable(GlobalMessageCode.NOT_NULL, "name")
        )

        assert message == "Field %s must not be null"

    def test_format_mismatch_degrades(self):
        translate_format = DefaultTranslateFormat()

        with capture_logs() as logs:
            message = translate_format.translate_and_format(
                DefaultTranslatable(GlobalMessageCode.NOT_NULL)
            )

        assert message == "Field %s must not be null; args: []"
        assert [log["event"] for log in logs] == ["message_format_failed"]

    def test_no_template_renders_no_code(self):
        translate_format = DefaultTranslateFormat()

        with capture_logs() as logs:
            message = translate_format.translate_and_format(
                DefaultTranslatable(CodeWithoutMessage())
            )

        assert message == NO_CODE
        assert logs[0]["event"] == "no_code_definition"
        assert logs[0]["log_level"] == "error"
        assert logs[0]["message_code"] == "BROKEN"

    def test_missing_code_renders_no_code(self):
        assert DefaultTranslateFormat().translate_and_format(DefaultTranslatable(None)) == NO_CODE

    def test_from_settings(self, monkeypatch):
        monkeypatch.setenv("VALIDATION_LOCALE", "de")
        monkeypatch.setenv("VALIDATION_FORMATTER", "brace")

        translate_format = DefaultTranslateFormat.from_settings()

        assert translate_format.locale == "de"
        assert translate_format.formatter.formatter is brace_format

    def test_plain_callable_formatter(self):
        translator = Mock()
        translator.translate.return_value = "User {0} is not authorized"
        translate_format = DefaultTranslateFormat(formatter=brace_format, translator=translator)

        message = translate_format.translate_and_format(
            DefaultTranslatable(GlobalMessageCode.NOT_AUTHORIZED, "alice")
        )

        assert message == "User alice is not authorized"
        assert isinstance(translate_format.formatter, NoExceptionStringFormatter)

    def test_plain_callable_formatter_mismatch_degrades(self):
        translator = Mock()
        translator.translate.return_value = "User {0} is not authorized"
        translate_format = DefaultTranslateFormat(formatter=brace_format, translator=translator)

        with capture_logs() as logs:
            message = translate_format.translate_and_format(
                DefaultTranslatable(GlobalMessageCode.NOT_AUTHORIZED)
            )

        assert message == "User {0} is not authorized; args: []"
        assert [log["event"] for log in logs] == ["message_format_failed"]


class TestCacheTranslateFormat:
    """Tests for memoized rendering."""

    def test_computes_once(self):
        inner = Mock()
        inner.translate_and_format.side_effect = ["first", "second"]
        cache = CacheTranslateFormat(inner)
        translatable = DefaultTranslatable(GlobalMessageCode.NOT_NULL)

        assert not cache.is_cached
        assert cache.translate_and_format(translatable) == "first"
        assert cache.translate_and_format(translatable) == "first"
        assert cache.is_cached
        inner.translate_and_format.assert_called_once_with(translatable)

    def test_caches_none(self):
        inner = Mock()
        inner.translate_and_format.return_value = None
        cache = CacheTranslateFormat(inner)
        translatable = DefaultTranslatable(GlobalMessageCode.NOT_NULL)

        cache.translate_and_format(translatable)
        cache.translate_and_format(translatable)

        inner.translate_and_format.assert_called_once()

    def test_translator_and_formatter_invoked_once_per_violation(self):
        translator = Mock(wraps=DefaultTranslator())
        formatter = Mock(wraps=NoExceptionStringFormatter())
        translate_format = DefaultTranslateFormat(formatter=formatter, translator=translator)
        result = ValidationResult(
            GlobalMessageCode.NOT_AUTHORIZED, translate_format=translate_format
        ).with_message_parameters("bob")

        assert result.message == result.message == "User bob is not authorized"
        assert translator.translate.call_count == 1
        assert formatter.format.call_count == 1


class TestDefaultTranslateFormatRegistry:
    """Tests for the process-wide default pipeline."""

    def test_default_is_singleton(self):
        assert get_default_translate_format() is get_default_translate_format()

    def test_set_default_used_by_new_results(self):
        custom = Mock()
        custom.translate_and_format.return_value = "custom text"
        set_default_translate_format(custom)

        result = ValidationResult(GlobalMessageCode.NOT_NULL)

        assert result.message == "custom text"

    def test_brace_templates_via_settings(self, monkeypatch):
        monkeypatch.setenv("VALIDATION_FORMATTER", "brace")
        translate_format = get_default_translate_format()

        message = translate_format.translate_and_format(
            DefaultTranslatable(GlobalMessageCode.DATA_NOT_FOUND)
        )

        assert message == "Data not found"
