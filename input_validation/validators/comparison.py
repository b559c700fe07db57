"""Comparison rule: caller-supplied predicate over an orderable input."""

from typing import Callable

from input_validation.validators.base import BaseRule, T
from input_validation.validators.models import CustomInputValidationError, ErrorKind


class ConditionRule(BaseRule[T]):
    """Fails when ``condition(value)`` is falsy."""

    def __init__(self, condition: Callable[[T], bool]):
        self._require_callable(condition, "condition")
        self.condition = condition

    def evaluate(self, value: T) -> list[ErrorKind]:
        if not self.condition(value):
            return [CustomInputValidationError.FAILED_COMPARISON]
        return []
