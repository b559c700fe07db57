"""Length rule: predicate over the character count of a string."""

from typing import Callable

import regex

from input_validation.validators.base import BaseRule
from input_validation.validators.models import CustomInputValidationError, ErrorKind

# One extended grapheme cluster, i.e. one user-visible character
GRAPHEME_PATTERN = regex.compile(r"\X")


def character_count(value: str) -> int:
    """Number of user-visible characters, so "café" counts as 4."""
    return len(GRAPHEME_PATTERN.findall(value))


class LengthRule(BaseRule[str]):
    """Fails when ``condition(character_count(value))`` is falsy.

    Length is counted in extended grapheme clusters, not code points.
    """

    def __init__(self, condition: Callable[[int], bool]):
        self._require_callable(condition, "condition")
        self.condition = condition

    def evaluate(self, value: str) -> list[ErrorKind]:
        if not self.condition(character_count(value)):
            return [CustomInputValidationError.INVALID_LENGTH]
        return []
