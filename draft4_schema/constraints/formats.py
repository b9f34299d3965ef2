"""
Format constraint implementation.
"""

from typing import Any

from .base import Constraint, ValidationContext
from ..api import InvalidFormatError, ValidationResult, valid_result
from ..formats import FormatChecker


class FormatConstraint(Constraint):
    """
    Constraint that applies a named checker from the schema's format registry.

    Unknown format names never reach this class; the compiler turns them
    into an always-invalid FormatUnsupportedError rule.
    """

    def __init__(self, format_name: str, checker: FormatChecker):
        self.format_name = format_name
        self.checker = checker

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        if self.checker(value):
            return valid_result()
        return context.fail(InvalidFormatError, value, format=self.format_name)

    def __str__(self) -> str:
        return f"FormatConstraint(format={self.format_name})"
