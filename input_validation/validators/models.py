"""Validation models: error kinds, their messages, and validator configuration.

Error kinds are values, not exceptions. Any object exposing
``describe(field_name)`` is an error kind, so new rule families add their own
enum without touching the ones below.
"""

from enum import Enum
from typing import Iterable, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from input_validation.config import get_settings


@runtime_checkable
class ErrorKind(Protocol):
    """Capability shared by every validation error kind."""

    def describe(self, field_name: str) -> Optional[str]:
        """Human-readable sentence for this kind, or None if it has no message."""
        ...


class InputValidationError(str, Enum):
    """Structural errors raised by the validator itself, not by rules."""

    NO_INPUT = "NO_INPUT"

    def describe(self, field_name: str) -> Optional[str]:
        template = _INPUT_MESSAGES.get(self)
        return template.format(field=field_name) if template else None


class CustomInputValidationError(str, Enum):
    """Failure kinds produced by the built-in rule library.

    Naming convention: WHAT_WENT_WRONG
    """

    NOT_EQUAL = "NOT_EQUAL"
    NO_COMPARING_INPUT = "NO_COMPARING_INPUT"
    FAILED_COMPARISON = "FAILED_COMPARISON"
    INVALID_LENGTH = "INVALID_LENGTH"
    NO_ALPHA_CHARACTERS = "NO_ALPHA_CHARACTERS"
    NO_NUMERIC_CHARACTERS = "NO_NUMERIC_CHARACTERS"
    NO_SPECIAL_CHARACTERS = "NO_SPECIAL_CHARACTERS"

    def describe(self, field_name: str) -> Optional[str]:
        template = _CUSTOM_MESSAGES.get(self)
        return template.format(field=field_name) if template else None


_INPUT_MESSAGES = {
    InputValidationError.NO_INPUT: "{field} is empty",
}

_CUSTOM_MESSAGES = {
    CustomInputValidationError.NOT_EQUAL: "{field} has incorrect value",
    CustomInputValidationError.NO_COMPARING_INPUT: "{field} has no comparing input",
    CustomInputValidationError.FAILED_COMPARISON: "{field} failed comparison",
    CustomInputValidationError.INVALID_LENGTH: "{field} has invalid length",
    CustomInputValidationError.NO_ALPHA_CHARACTERS: "{field} does not contain alpha characters",
    CustomInputValidationError.NO_NUMERIC_CHARACTERS: "{field} does not contain numeric characters",
    CustomInputValidationError.NO_SPECIAL_CHARACTERS: "{field} does not contain any special characters",
}


def describe_errors(errors: Optional[Iterable[ErrorKind]], field_name: str) -> list[str]:
    """Describe each error for a field, skipping kinds without a message."""
    messages = []
    for error in errors or []:
        message = error.describe(field_name)
        if message is not None:
            messages.append(message)
    return messages


class Configuration(BaseModel):
    """Validator-level options, fixed at construction."""

    model_config = ConfigDict(frozen=True)

    treat_absent_input_as_error: bool = True

    @classmethod
    def from_settings(cls) -> "Configuration":
        """Build the default configuration from environment settings."""
        settings = get_settings()
        return cls(treat_absent_input_as_error=settings.TREAT_ABSENT_INPUT_AS_ERROR)
