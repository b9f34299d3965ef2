"""
Array constraint implementation.
"""

from typing import Any, List, Optional, Union

from .base import Constraint, ValidationContext
from ..api import (
    AdditionalPropertiesError,
    Comparison,
    ItemType,
    LengthError,
    UniqueItemsError,
    ValidationResult,
)
from ..utils import TypeUtils


def has_unique_items(items) -> bool:
    """
    Check that no two elements of an array are equal.

    Equality is JSON value equality, under which ``1`` equals ``true`` and
    ``0`` equals ``false``.
    """
    for i, item in enumerate(items):
        for other in items[i + 1:]:
            if TypeUtils.json_equal(item, other):
                return False
    return True


class ArrayConstraint(Constraint):
    """
    Constraint for the array keywords: minItems, maxItems, uniqueItems,
    items and additionalItems.

    ``items`` is either a single constraint applied to every element, or a
    list of constraints applied positionally, in which case elements past
    the list are checked against ``additional_items``. Non-arrays pass.
    """

    def __init__(self,
                 min_items: Optional[int] = None,
                 max_items: Optional[int] = None,
                 unique_items: bool = False,
                 items: Union[None, Constraint, List[Constraint]] = None,
                 additional_items: Union[bool, Constraint] = True):
        """
        Initialize a new array constraint.

        Args:
            min_items: Minimum number of items
            max_items: Maximum number of items
            unique_items: Whether items must be unique
            items: Constraint for every item, or positional item constraints
            additional_items: Whether items past positional ``items`` are
                allowed, or the constraint they must satisfy
        """
        self.min_items = min_items
        self.max_items = max_items
        self.unique_items = unique_items
        self.items = items
        self.additional_items = additional_items

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        if not TypeUtils.is_array(value):
            return ValidationResult()

        results: List[ValidationResult] = []

        if self.min_items is not None and len(value) < self.min_items:
            results.append(context.fail(LengthError, value,
                                        length=self.min_items,
                                        item_type=ItemType.ARRAY,
                                        comparison=Comparison.TOO_SMALL))

        if self.max_items is not None and len(value) > self.max_items:
            results.append(context.fail(LengthError, value,
                                        length=self.max_items,
                                        item_type=ItemType.ARRAY,
                                        comparison=Comparison.TOO_LARGE))

        if self.unique_items and not has_unique_items(value):
            results.append(context.fail(UniqueItemsError, value))

        if isinstance(self.items, Constraint):
            for i, item in enumerate(value):
                with context.with_path(i):
                    results.append(self.items.validate(item, context))
        elif self.items is not None:
            for i, item in enumerate(value):
                with context.with_path(i):
                    results.append(self._validate_positional(i, item, context))

        return ValidationResult.merge(results)

    def _validate_positional(self, index: int, item: Any, context: ValidationContext) -> ValidationResult:
        if index < len(self.items):
            return self.items[index].validate(item, context)
        if self.additional_items is False:
            return context.fail(AdditionalPropertiesError, item,
                                item_type=ItemType.ARRAY, name=index)
        if isinstance(self.additional_items, Constraint):
            return self.additional_items.validate(item, context)
        return ValidationResult()

    def __str__(self) -> str:
        """String representation of the constraint."""
        parts = []
        if self.min_items is not None:
            parts.append(f"min_items={self.min_items}")
        if self.max_items is not None:
            parts.append(f"max_items={self.max_items}")
        if self.unique_items:
            parts.append("unique_items=True")
        if self.items is not None:
            parts.append(f"items={self.items}")
        if self.additional_items is not True:
            parts.append(f"additional_items={self.additional_items}")

        return f"ArrayConstraint({', '.join(parts)})"
