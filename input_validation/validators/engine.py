"""Input Validator: runs an ordered chain of rules and aggregates every failure.

This is the only component callers interact with directly.

Usage:
    password = (
        InputValidator[str]()
        .is_equal_to(lambda: confirm_field.text)
        .is_valid_length(lambda n: n >= 8)
        .has_alpha_characters()
        .has_numeric_characters()
    )

    errors = password.validate(password_field.text)
    if errors:
        # Render with describe_errors(errors, "Password")
"""

import time
from typing import Callable, Generic, Iterable, Optional

import structlog

from input_validation.validators.base import BaseRule, Supplier, T
from input_validation.validators.characters import (
    AlphaCharacterRule,
    NumericCharacterRule,
    SpecialCharacterRule,
)
from input_validation.validators.comparison import ConditionRule
from input_validation.validators.equality import EqualityRule, StringEqualityRule
from input_validation.validators.length import LengthRule
from input_validation.validators.models import Configuration, ErrorKind, InputValidationError

logger = structlog.get_logger()


class InputValidator(Generic[T]):
    """Holds a chain of rules and validates inputs against all of them.

    Design principles:
        - Aggregating: every rule runs, failures never short-circuit the chain
        - Ordered: errors come back in the order rules were added
        - Deterministic: same input and supplier state → same output
        - Observable: logs every validation run with timing
    """

    def __init__(self, configuration: Optional[Configuration] = None):
        """Initialize with an empty chain.

        Args:
            configuration: Validator options. If None, built from settings.
        """
        self.configuration = configuration if configuration is not None else Configuration.from_settings()
        self._rules: list[BaseRule[T]] = []

    @property
    def rules(self) -> tuple[BaseRule[T], ...]:
        """The chain in execution order."""
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def add(self, rule: BaseRule[T]) -> "InputValidator[T]":
        """Append a rule to the tail of the chain and return the validator."""
        if not isinstance(rule, BaseRule):
            raise TypeError(f"Expected a BaseRule, got {type(rule).__name__}")
        if any(existing is rule for existing in self._rules):
            raise ValueError(f"Rule {rule!r} is already part of this chain")

        self._rules.append(rule)
        logger.debug("rule_added", rule=rule.name, position=len(self._rules))
        return self

    def validate(self, value: Optional[T]) -> Optional[list[ErrorKind]]:
        """Run every rule against the input.

        Args:
            value: The input, or None when nothing was supplied

        Returns:
            None if the input is valid (or absent under the lenient policy),
            otherwise a non-empty list of error kinds in rule order
        """
        if value is None:
            logger.debug(
                "validation_no_input",
                treat_absent_input_as_error=self.configuration.treat_absent_input_as_error,
            )
            if self.configuration.treat_absent_input_as_error:
                return [InputValidationError.NO_INPUT]
            return None

        start_time = time.perf_counter()

        all_errors: list[ErrorKind] = []
        for rule in self._rules:
            all_errors.extend(rule.evaluate(value))

        duration = (time.perf_counter() - start_time) * 1000

        logger.debug(
            "validation_complete",
            rules=len(self._rules),
            total_errors=len(all_errors),
            errors=[getattr(e, "value", repr(e)) for e in all_errors],
            duration_ms=round(duration, 3),
        )

        return all_errors or None

    # Fluent builders

    def is_equal_to(self, comparing_input: Supplier[T], *, case_sensitive: bool = True) -> "InputValidator[T]":
        """Require the input to equal the supplier's current value.

        ``case_sensitive=False`` compares strings with Unicode case folding.
        """
        if case_sensitive:
            return self.add(EqualityRule(comparing_input))
        return self.add(StringEqualityRule(comparing_input, case_sensitive=False))

    def meets_condition(self, condition: Callable[[T], bool]) -> "InputValidator[T]":
        """Require ``condition(input)`` to hold."""
        return self.add(ConditionRule(condition))

    def is_valid_length(self, condition: Callable[[int], bool]) -> "InputValidator[T]":
        """Require ``condition(character count)`` to hold, counting user-visible characters."""
        return self.add(LengthRule(condition))

    def has_alpha_characters(self) -> "InputValidator[T]":
        return self.add(AlphaCharacterRule())

    def has_numeric_characters(self) -> "InputValidator[T]":
        return self.add(NumericCharacterRule())

    def has_special_characters(self, excluded_characters: Optional[Iterable[str]] = None) -> "InputValidator[T]":
        """Require a character outside letters, digits and ``excluded_characters``."""
        return self.add(SpecialCharacterRule(excluded_characters))
