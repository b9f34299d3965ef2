"""
Base constraint classes for the draft-4 schema validator.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Tuple, Type

from ..api import ValidationError, ValidationResult, invalid_result
from ..utils import JsonPointer

DEFAULT_MAX_REFERENCE_DEPTH = 64


class ValidationContext:
    """
    Context for validation operations.

    This class maintains state during a single evaluation: the path of the
    value currently being checked and the stack of ``$ref`` evaluations in
    progress. Compiled constraints never store state of their own, so one
    constraint tree can be shared between threads as long as each
    evaluation gets its own context.
    """

    def __init__(self, verbose: bool = False,
                 max_reference_depth: int = DEFAULT_MAX_REFERENCE_DEPTH):
        """
        Initialize a new validation context.

        Args:
            verbose: Whether combinators keep the errors of failed branches
            max_reference_depth: Maximum number of nested $ref evaluations
        """
        self.path_parts: List[str] = []
        self.verbose = verbose
        self.max_reference_depth = max_reference_depth
        self.active_references: List[Tuple[str, Tuple[str, ...]]] = []

    @property
    def path(self) -> str:
        """
        Get the current JSON Pointer path.

        Returns:
            JSON Pointer string for the current path
        """
        return JsonPointer.from_parts(self.path_parts)

    def push_path(self, part: Any) -> None:
        """
        Push a path part onto the current path.

        Args:
            part: Path segment to add
        """
        self.path_parts.append(str(part))

    def pop_path(self) -> None:
        """Remove the last path part from the current path."""
        if self.path_parts:
            self.path_parts.pop()

    def with_path(self, part: Any):
        """
        Context manager for adding a path part temporarily.

        Args:
            part: Path segment to add

        Returns:
            Context manager
        """
        return PathContext(self, part)

    def error(self, error_class: Type[ValidationError], value: Any, **fields) -> ValidationError:
        """
        Build an error located at the current path.

        Args:
            error_class: Concrete ValidationError subclass
            value: Value that failed validation
            **fields: Error-specific fields

        Returns:
            The error instance
        """
        return error_class(path=self.path, value=value, **fields)

    def fail(self, error_class: Type[ValidationError], value: Any, **fields) -> ValidationResult:
        """Shortcut for an invalid result holding a single error."""
        return invalid_result(self.error(error_class, value, **fields))

    def __str__(self) -> str:
        """String representation of the validation context."""
        return f"ValidationContext(path={self.path}, references={len(self.active_references)})"


class PathContext:
    """Context manager for temporarily adding a path part."""

    def __init__(self, context: ValidationContext, part: Any):
        self.context = context
        self.part = part

    def __enter__(self):
        """Add the path part when entering the context."""
        self.context.push_path(self.part)
        return self.context

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Remove the path part when exiting the context."""
        self.context.pop_path()


class Constraint(ABC):
    """
    Base class for all compiled schema constraints.

    A constraint is a pure rule: evaluating it never changes the constraint,
    and the outcome depends only on the value and the context's path.
    """

    @abstractmethod
    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        """
        Validate a value against this constraint.

        Args:
            value: Value to validate
            context: Validation context

        Returns:
            ValidationResult for this constraint alone
        """

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"{self.__class__.__name__}"

    def __repr__(self) -> str:
        """Detailed representation of the constraint."""
        return self.__str__()


class AlwaysInvalidConstraint(Constraint):
    """
    Rejects every value with a fixed kind of error.

    Used for schema problems detected at compile time: unresolvable or
    remote references, unknown formats and bad ``type`` values.
    """

    def __init__(self, error_class: Type[ValidationError], **fields):
        self.error_class = error_class
        self.fields = fields

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        return context.fail(self.error_class, value, **self.fields)

    def __str__(self) -> str:
        return f"AlwaysInvalidConstraint({self.error_class.__name__})"
