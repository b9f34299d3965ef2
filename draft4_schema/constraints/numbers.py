"""
Number constraint implementation.
"""

from typing import Any, List, Optional

from .base import Constraint, ValidationContext
from ..api import Comparison, MultipleOfError, ValidationResult, ValueBoundsError
from ..utils import TypeUtils


class NumberConstraint(Constraint):
    """
    Constraint for the numeric keywords: multipleOf, minimum and maximum.

    Booleans and other non-numbers pass untouched.
    """

    def __init__(self,
                 multiple_of: Optional[float] = None,
                 minimum: Optional[float] = None,
                 maximum: Optional[float] = None,
                 exclusive_minimum: bool = False,
                 exclusive_maximum: bool = False):
        """
        Initialize a new number constraint.

        Args:
            multiple_of: Value must be a multiple of this
            minimum: Minimum value
            maximum: Maximum value
            exclusive_minimum: Whether minimum is exclusive
            exclusive_maximum: Whether maximum is exclusive
        """
        self.multiple_of = multiple_of
        self.minimum = minimum
        self.maximum = maximum
        self.exclusive_minimum = exclusive_minimum
        self.exclusive_maximum = exclusive_maximum

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        if not TypeUtils.is_number(value):
            return ValidationResult()

        results: List[ValidationResult] = []

        # Non-positive divisors are skipped rather than rejected.
        if self.multiple_of is not None and self.multiple_of > 0:
            if not self._is_multiple(value):
                results.append(context.fail(MultipleOfError, value, divisor=self.multiple_of))

        if self.minimum is not None:
            too_small = value <= self.minimum if self.exclusive_minimum else value < self.minimum
            if too_small:
                results.append(context.fail(ValueBoundsError, value,
                                            bounds=self.minimum,
                                            comparison=Comparison.TOO_SMALL,
                                            exclusive=self.exclusive_minimum))

        if self.maximum is not None:
            too_large = value >= self.maximum if self.exclusive_maximum else value > self.maximum
            if too_large:
                results.append(context.fail(ValueBoundsError, value,
                                            bounds=self.maximum,
                                            comparison=Comparison.TOO_LARGE,
                                            exclusive=self.exclusive_maximum))

        return ValidationResult.merge(results)

    def _is_multiple(self, value) -> bool:
        if isinstance(value, int) and isinstance(self.multiple_of, int):
            return value % self.multiple_of == 0
        try:
            return float(value / self.multiple_of).is_integer()
        except OverflowError:
            return False

    def __str__(self) -> str:
        """String representation of the constraint."""
        parts = []
        if self.multiple_of is not None:
            parts.append(f"multipleOf={self.multiple_of}")
        if self.minimum is not None:
            parts.append(f"minimum={self.minimum}")
            if self.exclusive_minimum:
                parts.append("exclusiveMinimum=True")
        if self.maximum is not None:
            parts.append(f"maximum={self.maximum}")
            if self.exclusive_maximum:
                parts.append("exclusiveMaximum=True")

        return f"NumberConstraint({', '.join(parts)})"
