import pytest
from pydantic import ValidationError

from input_validation.validators import (
    Configuration,
    CustomInputValidationError,
    ErrorKind,
    InputValidationError,
    describe_errors,
)


@pytest.mark.parametrize(
    "kind, expected",
    [
        (InputValidationError.NO_INPUT, "Password is empty"),
        (CustomInputValidationError.NOT_EQUAL, "Password has incorrect value"),
        (CustomInputValidationError.NO_COMPARING_INPUT, "Password has no comparing input"),
        (CustomInputValidationError.FAILED_COMPARISON, "Password failed comparison"),
        (CustomInputValidationError.INVALID_LENGTH, "Password has invalid length"),
        (CustomInputValidationError.NO_ALPHA_CHARACTERS, "Password does not contain alpha characters"),
        (CustomInputValidationError.NO_NUMERIC_CHARACTERS, "Password does not contain numeric characters"),
        (CustomInputValidationError.NO_SPECIAL_CHARACTERS, "Password does not contain any special characters"),
    ],
)
def test_describe_messages(kind, expected):
    assert kind.describe("Password") == expected


def test_builtin_kinds_satisfy_protocol():
    assert isinstance(InputValidationError.NO_INPUT, ErrorKind)
    assert isinstance(CustomInputValidationError.INVALID_LENGTH, ErrorKind)


def test_describe_errors_skips_unrecognized_kinds():
    class Silent:
        def describe(self, field_name):
            return None

    errors = [CustomInputValidationError.INVALID_LENGTH, Silent(), InputValidationError.NO_INPUT]
    assert describe_errors(errors, "Name") == ["Name has invalid length", "Name is empty"]


def test_describe_errors_accepts_none():
    assert describe_errors(None, "Name") == []


def test_configuration_is_frozen():
    config = Configuration()
    assert config.treat_absent_input_as_error is True
    with pytest.raises(ValidationError):
        config.treat_absent_input_as_error = False


def test_configuration_from_settings(monkeypatch):
    monkeypatch.setenv("INPUT_VALIDATION_TREAT_ABSENT_INPUT_AS_ERROR", "0")
    assert Configuration.from_settings().treat_absent_input_as_error is False
