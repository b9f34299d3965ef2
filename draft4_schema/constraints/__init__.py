"""
Constraint package initialization.
"""

from .base import (
    AlwaysInvalidConstraint,
    Constraint,
    DEFAULT_MAX_REFERENCE_DEPTH,
    ValidationContext,
)
from .types import TypeConstraint
from .strings import StringConstraint
from .numbers import NumberConstraint
from .arrays import ArrayConstraint
from .objects import ObjectConstraint, DependencyConstraint
from .logical import (
    AllOfConstraint,
    AnyOfConstraint,
    OneOfConstraint,
    NotConstraint
)
from .enums import EnumConstraint
from .formats import FormatConstraint
from .references import ReferenceConstraint
from .combined import CombinedConstraint

__all__ = [
    "Constraint",
    "ValidationContext",
    "DEFAULT_MAX_REFERENCE_DEPTH",
    "AlwaysInvalidConstraint",
    "TypeConstraint",
    "StringConstraint",
    "NumberConstraint",
    "ArrayConstraint",
    "ObjectConstraint",
    "DependencyConstraint",
    "AllOfConstraint",
    "AnyOfConstraint",
    "OneOfConstraint",
    "NotConstraint",
    "EnumConstraint",
    "FormatConstraint",
    "ReferenceConstraint",
    "CombinedConstraint"
]
