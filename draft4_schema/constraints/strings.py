"""
String constraint implementation.
"""

import re
from typing import Any, List, Optional, Pattern

from .base import Constraint, ValidationContext
from ..api import (
    Comparison,
    InvalidRegexError,
    ItemType,
    LengthError,
    UnmatchingRegexError,
    ValidationResult,
)


def compile_pattern(pattern: str) -> Optional[Pattern]:
    """Compile a schema regex, returning None when it is malformed."""
    try:
        return re.compile(pattern)
    except re.error:
        return None


class StringConstraint(Constraint):
    """
    Constraint for the string keywords: maxLength, minLength and pattern.

    Values that are not strings pass untouched. Patterns are searched for
    anywhere in the string; they are not anchored.
    """

    def __init__(self,
                 max_length: Optional[int] = None,
                 min_length: Optional[int] = None,
                 pattern: Optional[str] = None):
        """
        Initialize a new string constraint.

        Args:
            max_length: Maximum string length
            min_length: Minimum string length
            pattern: Regular expression pattern
        """
        self.max_length = max_length
        self.min_length = min_length
        self.pattern = pattern
        self._compiled_pattern = compile_pattern(pattern) if pattern is not None else None

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        if not isinstance(value, str):
            return ValidationResult()

        results: List[ValidationResult] = []

        if self.max_length is not None and len(value) > self.max_length:
            results.append(context.fail(LengthError, value,
                                        length=self.max_length,
                                        item_type=ItemType.STRING,
                                        comparison=Comparison.TOO_LARGE))

        if self.min_length is not None and len(value) < self.min_length:
            results.append(context.fail(LengthError, value,
                                        length=self.min_length,
                                        item_type=ItemType.STRING,
                                        comparison=Comparison.TOO_SMALL))

        if self.pattern is not None:
            if self._compiled_pattern is None:
                results.append(context.fail(InvalidRegexError, value, pattern=self.pattern))
            elif not self._compiled_pattern.search(value):
                results.append(context.fail(UnmatchingRegexError, value, pattern=self.pattern))

        return ValidationResult.merge(results)

    def __str__(self) -> str:
        """String representation of the constraint."""
        parts = []
        if self.max_length is not None:
            parts.append(f"maxLength={self.max_length}")
        if self.min_length is not None:
            parts.append(f"minLength={self.min_length}")
        if self.pattern is not None:
            parts.append(f"pattern={self.pattern}")

        return f"StringConstraint({', '.join(parts)})"
