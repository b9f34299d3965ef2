"""
Validator implementation: evaluates compiled constraint trees.
"""

from typing import Any

from .api import ValidationResult
from .constraints import Constraint, DEFAULT_MAX_REFERENCE_DEPTH, ValidationContext


class Validator:
    """
    Validates data against compiled constraint trees.

    The validator owns no per-call state; each call builds a fresh
    ValidationContext, so one validator and one constraint tree can serve
    concurrent callers.
    """

    def __init__(self, verbose: bool = False,
                 max_reference_depth: int = DEFAULT_MAX_REFERENCE_DEPTH):
        """
        Initialize a new validator.

        Args:
            verbose: Whether combinator errors keep the errors of failed branches
            max_reference_depth: Maximum number of nested $ref evaluations

        Raises:
            ValueError: If max_reference_depth is not positive
        """
        if max_reference_depth < 1:
            raise ValueError(f"max_reference_depth must be positive, got {max_reference_depth}")

        self.verbose = verbose
        self.max_reference_depth = max_reference_depth

    def validate(self, data: Any, constraint: Constraint) -> ValidationResult:
        """
        Validate data against a compiled constraint.

        Args:
            data: Data to validate
            constraint: Compiled constraint to validate against

        Returns:
            ValidationResult containing validation status and errors
        """
        context = ValidationContext(verbose=self.verbose,
                                    max_reference_depth=self.max_reference_depth)
        return constraint.validate(data, context)
