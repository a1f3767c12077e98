"""Pytest configuration and shared fixtures."""

import pytest

from valchain.config import reset_settings
from valchain.i18n import CoreMessage, reset_default_translate_format
from valchain.validation import ValidationResults, Validator


class GlobalMessageCode(CoreMessage):
    """Message catalogue shared by the test suite."""

    NOT_AUTHORIZED = "User %s is not authorized"
    DATA_NOT_FOUND = "Data not found"
    INVALID_PARAMETER = "Invalid parameter %s"
    NOT_NULL = "Field %s must not be null"
    SAME_TEMPLATE = "Data not found"


class Subject:
    """Dummy object to validate."""

    def __init__(self, value="Test Value", values=None):
        self.value = value
        self.values = ["Test Value 1", "Test Value 2"] if values is None else values


class FixedValidator(Validator):
    """Validator that always reports the given code and counts its calls."""

    def __init__(self, *codes):
        self.codes = codes
        self.calls = []

    def validate(self, data):
        self.calls.append(data)
        results = ValidationResults()
        for code in self.codes:
            results.add(code, bean=data)
        return results


@pytest.fixture(autouse=True)
def reset_config_settings():
    """Reset the settings singleton and the default translate format.

    pydantic-settings reads env vars at instantiation time and the default
    translate format is built from settings, so both must be rebuilt for
    monkeypatched environments to take effect.
    """
    reset_settings()
    reset_default_translate_format()
    yield
    reset_settings()
    reset_default_translate_format()
