"""Character-class rules: require at least one character of a given class.

All three test for presence, so an empty string fails every one of them.
Classes follow Unicode general categories rather than ASCII ranges.
"""

import unicodedata
from abc import abstractmethod
from typing import Iterable, Optional

from input_validation.validators.base import BaseRule
from input_validation.validators.models import CustomInputValidationError, ErrorKind

# Upper, lower and title case letters
ALPHA_CATEGORIES = frozenset({"Lu", "Ll", "Lt"})

# Letters, marks and numbers count as alphanumeric
ALPHANUMERIC_MAJOR_CATEGORIES = frozenset({"L", "M", "N"})


class CharacterClassRule(BaseRule[str]):
    """Fails with ``missing_error`` unless some character satisfies ``_qualifies``."""

    missing_error: ErrorKind

    def evaluate(self, value: str) -> list[ErrorKind]:
        if any(self._qualifies(char) for char in value):
            return []
        return [self.missing_error]

    @abstractmethod
    def _qualifies(self, char: str) -> bool:
        raise NotImplementedError("Validation not implemented")


class AlphaCharacterRule(CharacterClassRule):
    missing_error = CustomInputValidationError.NO_ALPHA_CHARACTERS

    def _qualifies(self, char: str) -> bool:
        return unicodedata.category(char) in ALPHA_CATEGORIES


class NumericCharacterRule(CharacterClassRule):
    missing_error = CustomInputValidationError.NO_NUMERIC_CHARACTERS

    def _qualifies(self, char: str) -> bool:
        return unicodedata.category(char) == "Nd"


class SpecialCharacterRule(CharacterClassRule):
    """Requires a character that is neither alphanumeric nor excluded.

    Args:
        excluded_characters: Characters that never count as special,
            e.g. ``" "`` to ignore spaces. Multi-character items
            contribute each of their characters.
    """

    missing_error = CustomInputValidationError.NO_SPECIAL_CHARACTERS

    def __init__(self, excluded_characters: Optional[Iterable[str]] = None):
        self.excluded_characters = frozenset("".join(excluded_characters or ()))

    def _qualifies(self, char: str) -> bool:
        if char in self.excluded_characters:
            return False
        return unicodedata.category(char)[0] not in ALPHANUMERIC_MAJOR_CATEGORIES

    def __repr__(self) -> str:
        excluded = "".join(sorted(self.excluded_characters))
        return f"{self.name}(excluded_characters={excluded!r})"
