#!/usr/bin/env python3
"""
Draft-4 JSON Schema Validator

This package compiles JSON Schema (draft 4) documents into reusable
constraint trees and validates decoded JSON values against them, reporting
every violation as a structured error.
"""

import logging

from .api import (
    AdditionalPropertiesError,
    AnyOfError,
    Comparison,
    DependencyMissingError,
    EnumError,
    ErrorCode,
    FormatUnsupportedError,
    InvalidFormatError,
    InvalidRegexError,
    InvalidTypeError,
    ItemType,
    LengthError,
    MultipleOfError,
    NotError,
    OneOfError,
    ReferenceCycleError,
    ReferenceDepthError,
    ReferenceNotFoundError,
    RemoteReferenceUnsupportedError,
    RequiredError,
    UniqueItemsError,
    UnmatchingRegexError,
    UnmatchingTypeError,
    ValidationError,
    ValidationResult,
    ValueBoundsError,
)
from .schema import Schema, validate
from .schema_compiler import SchemaCompiler
from .utils import JsonPointer, JsonType
from .version import __version__

logger = logging.getLogger("draft4_schema")
logger.addHandler(logging.NullHandler())

# Export public classes and functions
__all__ = [
    "Schema",
    "SchemaCompiler",
    "validate",
    "ValidationResult",
    "ValidationError",
    "ErrorCode",
    "ItemType",
    "Comparison",
    "JsonPointer",
    "JsonType",
    "AdditionalPropertiesError",
    "AnyOfError",
    "DependencyMissingError",
    "EnumError",
    "FormatUnsupportedError",
    "InvalidFormatError",
    "InvalidRegexError",
    "InvalidTypeError",
    "LengthError",
    "MultipleOfError",
    "NotError",
    "OneOfError",
    "ReferenceCycleError",
    "ReferenceDepthError",
    "ReferenceNotFoundError",
    "RemoteReferenceUnsupportedError",
    "RequiredError",
    "UniqueItemsError",
    "UnmatchingRegexError",
    "UnmatchingTypeError",
    "ValueBoundsError",
    "__version__",
]
