"""
Object constraint implementations.
"""

from typing import Any, Dict, List, Optional, Pattern, Set, Tuple, Union

from .base import Constraint, ValidationContext
from .strings import compile_pattern
from ..api import (
    AdditionalPropertiesError,
    Comparison,
    DependencyMissingError,
    InvalidRegexError,
    ItemType,
    LengthError,
    RequiredError,
    ValidationResult,
    valid_result,
)
from ..utils import TypeUtils


class ObjectConstraint(Constraint):
    """
    Constraint for the object keywords: maxProperties, minProperties,
    required, properties, patternProperties and additionalProperties.

    Every key named in ``properties`` and every value key matched by a
    ``patternProperties`` regex counts as declared; all other keys go to
    ``additional_properties``. Non-objects pass, except that a ``required``
    list rejects them outright.
    """

    def __init__(self,
                 max_properties: Optional[int] = None,
                 min_properties: Optional[int] = None,
                 required: Optional[List[str]] = None,
                 properties: Optional[Dict[str, Constraint]] = None,
                 pattern_properties: Optional[Dict[str, Constraint]] = None,
                 additional_properties: Union[bool, Constraint] = True):
        """
        Initialize a new object constraint.

        Args:
            max_properties: Maximum number of properties
            min_properties: Minimum number of properties
            required: List of required property names
            properties: Constraints for specific properties
            pattern_properties: Constraints for properties matching regex patterns
            additional_properties: Whether additional properties are allowed, or constraint for them
        """
        self.max_properties = max_properties
        self.min_properties = min_properties
        self.required = tuple(required) if required is not None else None
        self.properties = properties
        self.pattern_properties = pattern_properties
        self.additional_properties = additional_properties

        # Compile the pattern property regexes; malformed ones stay None
        self._compiled_patterns: List[Tuple[str, Optional[Pattern], Constraint]] = [
            (pattern, compile_pattern(pattern), constraint)
            for pattern, constraint in (pattern_properties or {}).items()
        ]

    @property
    def checks_properties(self) -> bool:
        return (self.properties is not None
                or self.pattern_properties is not None
                or self.additional_properties is not True)

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        if not TypeUtils.is_object(value):
            if self.required is not None:
                return context.fail(RequiredError, value, required=self.required)
            return valid_result()

        results: List[ValidationResult] = []

        if self.max_properties is not None and len(value) > self.max_properties:
            results.append(context.fail(LengthError, value,
                                        length=self.max_properties,
                                        item_type=ItemType.PROPERTIES,
                                        comparison=Comparison.TOO_LARGE))

        if self.min_properties is not None and len(value) < self.min_properties:
            results.append(context.fail(LengthError, value,
                                        length=self.min_properties,
                                        item_type=ItemType.PROPERTIES,
                                        comparison=Comparison.TOO_SMALL))

        if self.required is not None and any(key not in value for key in self.required):
            results.append(context.fail(RequiredError, value, required=self.required))

        if self.checks_properties:
            results.append(self._validate_properties(value, context))

        return ValidationResult.merge(results)

    def _validate_properties(self, value: Any, context: ValidationContext) -> ValidationResult:
        declared: Set[str] = set()
        results: List[ValidationResult] = []

        for prop, constraint in (self.properties or {}).items():
            declared.add(prop)
            if prop in value:
                with context.with_path(prop):
                    results.append(constraint.validate(value[prop], context))

        for pattern, compiled, constraint in self._compiled_patterns:
            if compiled is None:
                return context.fail(InvalidRegexError, value, pattern=pattern)
            for prop in value:
                if compiled.search(prop):
                    declared.add(prop)
                    with context.with_path(prop):
                        results.append(constraint.validate(value[prop], context))

        for prop in value:
            if prop in declared:
                continue
            with context.with_path(prop):
                if self.additional_properties is False:
                    results.append(context.fail(AdditionalPropertiesError, value[prop],
                                                item_type=ItemType.OBJECT, name=prop))
                elif isinstance(self.additional_properties, Constraint):
                    results.append(self.additional_properties.validate(value[prop], context))

        return ValidationResult.merge(results)

    def __str__(self) -> str:
        """String representation of the constraint."""
        parts = []
        if self.max_properties is not None:
            parts.append(f"max_properties={self.max_properties}")
        if self.min_properties is not None:
            parts.append(f"min_properties={self.min_properties}")
        if self.required is not None:
            parts.append(f"required={list(self.required)}")
        if self.properties:
            parts.append(f"properties={list(self.properties.keys())}")
        if self.pattern_properties:
            parts.append(f"pattern_properties={list(self.pattern_properties.keys())}")
        if self.additional_properties is not True:
            parts.append(f"additional_properties={self.additional_properties}")

        return f"ObjectConstraint({', '.join(parts)})"


class DependencyConstraint(Constraint):
    """
    Constraint for one entry of the ``dependencies`` keyword.

    When ``key`` is present in an object, either the whole object must
    satisfy ``schema``, or every property listed in ``names`` must be
    present as well. Values without the key, and non-objects, pass.
    """

    def __init__(self, key: str,
                 schema: Optional[Constraint] = None,
                 names: Optional[List[str]] = None):
        self.key = key
        self.schema = schema
        self.names = list(names or [])

    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        if not TypeUtils.is_object(value) or self.key not in value:
            return valid_result()

        if self.schema is not None:
            return self.schema.validate(value, context)

        return ValidationResult.merge(
            context.fail(DependencyMissingError, value, key=self.key, dependency=name)
            for name in self.names if name not in value)

    def __str__(self) -> str:
        """String representation of the constraint."""
        target = self.schema if self.schema is not None else self.names
        return f"DependencyConstraint(key={self.key}, depends_on={target})"
