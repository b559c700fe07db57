"""Input validators: ordered, aggregating rule chains for user input.

Usage:
    from input_validation.validators import InputValidator

    errors = InputValidator[str]().has_numeric_characters().validate("abc")
    # [CustomInputValidationError.NO_NUMERIC_CHARACTERS]
"""

from input_validation.validators.base import BaseRule
from input_validation.validators.characters import (
    AlphaCharacterRule,
    NumericCharacterRule,
    SpecialCharacterRule,
)
from input_validation.validators.comparison import ConditionRule
from input_validation.validators.engine import InputValidator
from input_validation.validators.equality import EqualityRule, StringEqualityRule
from input_validation.validators.length import LengthRule
from input_validation.validators.models import (
    Configuration,
    CustomInputValidationError,
    ErrorKind,
    InputValidationError,
    describe_errors,
)

__all__ = [
    "InputValidator",
    "Configuration",
    "BaseRule",
    "EqualityRule",
    "StringEqualityRule",
    "ConditionRule",
    "LengthRule",
    "AlphaCharacterRule",
    "NumericCharacterRule",
    "SpecialCharacterRule",
    "ErrorKind",
    "InputValidationError",
    "CustomInputValidationError",
    "describe_errors",
]
