"""Input Validation: composable, aggregating validation chains for user input."""

from input_validation.logging_config import configure_logging
from input_validation.summary import Summary, summarize
from input_validation.validators import (
    BaseRule,
    Configuration,
    CustomInputValidationError,
    ErrorKind,
    InputValidationError,
    InputValidator,
    describe_errors,
)

__all__ = [
    "InputValidator",
    "Configuration",
    "BaseRule",
    "ErrorKind",
    "InputValidationError",
    "CustomInputValidationError",
    "describe_errors",
    "Summary",
    "summarize",
    "configure_logging",
]
