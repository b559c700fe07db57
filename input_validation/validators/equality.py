"""Equality rules: compare the input against a live reference value."""

import unicodedata
from typing import Optional

from input_validation.validators.base import BaseRule, Supplier, T
from input_validation.validators.models import CustomInputValidationError, ErrorKind


def canonical(text: str) -> str:
    """NFC form, so composed and decomposed accents compare equal."""
    return unicodedata.normalize("NFC", text)


class EqualityRule(BaseRule[T]):
    """Fails unless the input equals the value currently returned by the supplier.

    The supplier is called on every evaluation, so it can read a sibling
    field's current value (e.g. a confirmation box).
    """

    def __init__(self, comparing_input: Supplier[T]):
        self._require_callable(comparing_input, "comparing_input")
        self.comparing_input = comparing_input

    def evaluate(self, value: T) -> list[ErrorKind]:
        return self._errors(self._check(value))

    def _check(self, value: T) -> Optional[ErrorKind]:
        expected = self.comparing_input()
        if expected is None:
            return CustomInputValidationError.NO_COMPARING_INPUT
        if not self._matches(value, expected):
            return CustomInputValidationError.NOT_EQUAL
        return None

    def _matches(self, value: T, expected: T) -> bool:
        if isinstance(value, str) and isinstance(expected, str):
            return canonical(value) == canonical(expected)
        return value == expected


class StringEqualityRule(EqualityRule[str]):
    """String equality with an optional case-insensitive mode."""

    def __init__(self, comparing_input: Supplier[str], case_sensitive: bool = True):
        super().__init__(comparing_input)
        self.case_sensitive = case_sensitive

    def _matches(self, value: str, expected: str) -> bool:
        if self.case_sensitive:
            return canonical(value) == canonical(expected)
        return canonical(canonical(value).casefold()) == canonical(canonical(expected).casefold())

    def __repr__(self) -> str:
        return f"{self.name}(case_sensitive={self.case_sensitive})"
