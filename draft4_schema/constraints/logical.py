"""
Logical constraint implementations.
"""

from typing import Any, List, Tuple

from .base import Constraint, ValidationContext
from ..api import (
    AnyOfError,
    NotError,
    OneOfError,
    ValidationError,
    ValidationResult,
    valid_result,
)


class AllOfConstraint(Constraint):
    """
    Constraint that requires a value to satisfy all sub-constraints.

    Every sub-constraint is evaluated, even after one has failed, so that
    all violations are reported in sub-constraint order.
    """

    def __init__(self, constraints: List[Constraint]):
        """
        Initialize a new all-of constraint.

        Args:
            constraints: List of constraints that must all be satisfied
        """
        self.constraints = constraints

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        return ValidationResult.merge(
            constraint.validate(value, context) for constraint in self.constraints)

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"{self.__class__.__name__}(constraints={len(self.constraints)})"

    def __repr__(self) -> str:
        """Detailed representation of the constraint."""
        return f"{self.__class__.__name__}(constraints={[str(c) for c in self.constraints]})"


def _collect_causes(results: List[ValidationResult], context: ValidationContext) -> Tuple[ValidationError, ...]:
    if not context.verbose:
        return ()
    return tuple(error for result in results for error in result.errors)


class AnyOfConstraint(Constraint):
    """
    Constraint that requires a value to satisfy at least one sub-constraint.

    On failure the branch errors are collapsed into a single AnyOfError.
    """

    def __init__(self, constraints: List[Constraint]):
        """
        Initialize a new any-of constraint.

        Args:
            constraints: List of constraints, at least one of which must be satisfied
        """
        self.constraints = constraints

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        failures = []
        for constraint in self.constraints:
            result = constraint.validate(value, context)
            if result.valid:
                return valid_result()
            failures.append(result)

        return context.fail(AnyOfError, value, causes=_collect_causes(failures, context))

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"AnyOfConstraint(constraints={len(self.constraints)})"

    def __repr__(self) -> str:
        """Detailed representation of the any-of constraint."""
        return f"AnyOfConstraint(constraints={[str(c) for c in self.constraints]})"


class OneOfConstraint(Constraint):
    """
    Constraint that requires a value to satisfy exactly one sub-constraint.
    """

    def __init__(self, constraints: List[Constraint]):
        """
        Initialize a new one-of constraint.

        Args:
            constraints: List of constraints, exactly one of which must be satisfied
        """
        self.constraints = constraints

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        results = [constraint.validate(value, context) for constraint in self.constraints]
        passing = sum(1 for result in results if result.valid)
        if passing == 1:
            return valid_result()

        failures = [result for result in results if not result.valid]
        return context.fail(OneOfError, value,
                            passing_count=passing,
                            causes=_collect_causes(failures, context))

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"OneOfConstraint(constraints={len(self.constraints)})"

    def __repr__(self) -> str:
        """Detailed representation of the one-of constraint."""
        return f"OneOfConstraint(constraints={[str(c) for c in self.constraints]})"


class NotConstraint(Constraint):
    """
    Constraint that requires a value to not satisfy a sub-constraint.
    """

    def __init__(self, constraint: Constraint):
        """
        Initialize a new not constraint.

        Args:
            constraint: Constraint that must not be satisfied
        """
        self.constraint = constraint

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        if self.constraint.validate(value, context).valid:
            return context.fail(NotError, value)
        return valid_result()

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"NotConstraint(constraint={self.constraint})"
