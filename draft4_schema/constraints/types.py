"""
Type constraint implementation.
"""

from typing import Any

from .base import Constraint, ValidationContext
from ..api import UnmatchingTypeError, ValidationResult, valid_result
from ..utils import TypeUtils


class TypeConstraint(Constraint):
    """
    Constraint that validates a value against a single JSON Schema type name.

    A list of type names is compiled into an AnyOfConstraint over several of
    these.
    """

    def __init__(self, type_name: str):
        """
        Initialize a new type constraint.

        Args:
            type_name: JSON Schema type name
        """
        self.type_name = type_name

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        if TypeUtils.matches_type(value, self.type_name):
            return valid_result()
        return context.fail(UnmatchingTypeError, value, expected_type=self.type_name)

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"TypeConstraint(type={self.type_name})"
