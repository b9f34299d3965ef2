"""
Enum constraint implementation.
"""

from typing import Any, List

from .base import Constraint, ValidationContext
from ..api import EnumError, ValidationResult, valid_result
from ..utils import TypeUtils


class EnumConstraint(Constraint):
    """
    Constraint that validates a value against an enumeration.
    """

    def __init__(self, values: List[Any]):
        """
        Initialize a new enum constraint.

        Args:
            values: List of allowed values
        """
        self.values = tuple(values)

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        if any(TypeUtils.json_equal(value, allowed) for allowed in self.values):
            return valid_result()
        return context.fail(EnumError, value, values=self.values)

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"EnumConstraint(values={list(self.values)})"
