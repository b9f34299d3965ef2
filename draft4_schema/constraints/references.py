"""
Reference constraint implementation.
"""

from typing import Any, Optional

from .base import Constraint, ValidationContext
from ..api import ReferenceCycleError, ReferenceDepthError, ValidationResult


class ReferenceConstraint(Constraint):
    """
    Constraint that delegates to the compiled target of a local ``$ref``.

    The compiler creates the reference node before compiling its target, so
    self-referencing schemas compile to a finite graph. Evaluation guards
    against runaway recursion in two ways: re-entering the same reference
    for the same value path is a cycle, and nesting more than the context's
    ``max_reference_depth`` references is rejected. Exhausting the
    interpreter stack below a reference is reported as the same depth error,
    with ``depth`` set to the number of references active at that point.
    """

    def __init__(self, reference: str, target: Optional[Constraint] = None):
        """
        Initialize a new reference constraint.

        Args:
            reference: The $ref string as written in the schema
            target: Compiled constraint the reference resolves to
        """
        self.reference = reference
        self.target = target

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        frame = (self.reference, tuple(context.path_parts))
        if frame in context.active_references:
            return context.fail(ReferenceCycleError, value, reference=self.reference)
        if len(context.active_references) >= context.max_reference_depth:
            return context.fail(ReferenceDepthError, value,
                                reference=self.reference,
                                depth=context.max_reference_depth)

        context.active_references.append(frame)
        try:
            return self.target.validate(value, context)
        except RecursionError:
            # The interpreter stack can run out before max_reference_depth is hit
            return context.fail(ReferenceDepthError, value,
                                reference=self.reference,
                                depth=len(context.active_references))
        finally:
            context.active_references.pop()

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"ReferenceConstraint(reference='{self.reference}')"
