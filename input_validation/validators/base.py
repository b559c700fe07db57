"""Base rule: abstract class implementing the Strategy Pattern.

Each rule is a standalone, independently testable check.
New rules are added without modifying the validator.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar, Union

from input_validation.validators.models import ErrorKind

T = TypeVar("T")

# A zero-argument accessor re-invoked on every validation, never cached
Supplier = Callable[[], Optional[T]]

CheckResult = Union[ErrorKind, list[ErrorKind], None]


class BaseRule(ABC, Generic[T]):
    """Abstract base for all input rules.

    Contract:
        - evaluate() is pure: same input and supplier state → same output
        - evaluate() returns a list of error kinds (empty = no issues)
        - No I/O, no shared mutable state
    """

    @property
    def name(self) -> str:
        """Human-readable name for logging."""
        return type(self).__name__

    @abstractmethod
    def evaluate(self, value: T) -> list[ErrorKind]:
        """Run this rule's check against a present input value.

        Args:
            value: The caller's input, never None

        Returns:
            Error kinds found (empty if the value passes)
        """
        raise NotImplementedError("Validation not implemented")

    # Helper methods

    def _errors(self, result: CheckResult) -> list[ErrorKind]:
        """Normalize a single- or multi-error check result into a list."""
        if result is None:
            return []
        if isinstance(result, list):
            return list(result)
        return [result]

    @staticmethod
    def _require_callable(value, label: str) -> None:
        if not callable(value):
            raise TypeError(f"{label} must be callable, got {type(value).__name__}")

    def __repr__(self) -> str:
        return f"{self.name}()"
