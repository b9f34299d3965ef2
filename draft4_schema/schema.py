"""
Schema root context and the public validation entry points.
"""

import logging
from collections.abc import Mapping as MappingABC
from typing import Any, Dict, List, Mapping, Optional

from .api import ValidationResult
from .constraints import Constraint, DEFAULT_MAX_REFERENCE_DEPTH
from .formats import FormatChecker, build_format_registry
from .schema_compiler import SchemaCompiler
from .utils import SchemaKeywords, TypeUtils
from .validator import Validator

logger = logging.getLogger("draft4_schema")


class Schema:
    """
    A compiled draft-4 schema document.

    The document is compiled once, on construction, and the constraint tree
    is reused by every call to ``validate``. The schema never modifies the
    document; callers must not modify it either while the schema is in use.

    Example:
        >>> schema = Schema({"type": "object", "required": ["name"]})
        >>> schema.validate({"name": "Eggs"}).valid
        True
    """

    def __init__(self,
                 document: Mapping[str, Any],
                 formats: Optional[Mapping[str, FormatChecker]] = None,
                 verbose: bool = False,
                 max_reference_depth: int = DEFAULT_MAX_REFERENCE_DEPTH):
        """
        Initialize a new schema.

        Args:
            document: The root schema document (a JSON object)
            formats: Extra format checkers, merged over the built-in ones
            verbose: Keep branch errors inside anyOf/oneOf errors
            max_reference_depth: Maximum number of nested $ref evaluations

        Raises:
            TypeError: If the document is not a JSON object
        """
        if not isinstance(document, MappingABC):
            raise TypeError(f"Schema document must be an object, got {type(document).__name__}")

        self.document = document
        self.formats = build_format_registry(formats)
        self.validator = Validator(verbose=verbose, max_reference_depth=max_reference_depth)
        self.constraint: Constraint = SchemaCompiler(self.formats).compile(document)
        logger.debug("Schema %r compiled (verbose=%s)", self.title, verbose)

    @property
    def title(self) -> Optional[str]:
        title = self.document.get(SchemaKeywords.TITLE)
        return title if isinstance(title, str) else None

    @property
    def description(self) -> Optional[str]:
        description = self.document.get(SchemaKeywords.DESCRIPTION)
        return description if isinstance(description, str) else None

    @property
    def type(self) -> List[str]:
        """Recognised type names from the root ``type`` keyword; unknown names are dropped."""
        type_value = self.document.get(SchemaKeywords.TYPE)
        if isinstance(type_value, str):
            names = [type_value]
        elif isinstance(type_value, list):
            names = [name for name in type_value if isinstance(name, str)]
        else:
            names = []
        return [name for name in names if name in TypeUtils.TYPE_NAMES]

    @property
    def properties(self) -> Optional[Dict[str, Any]]:
        properties = self.document.get(SchemaKeywords.PROPERTIES)
        return dict(properties) if isinstance(properties, MappingABC) else None

    def validate(self, value: Any) -> ValidationResult:
        """
        Validate a decoded JSON value against this schema.

        Args:
            value: The value to validate

        Returns:
            ValidationResult with every violation found, in evaluation order
        """
        return self.validator.validate(value, self.constraint)

    def __repr__(self) -> str:
        return f"Schema(title={self.title!r})"


def validate(value: Any, schema: Mapping[str, Any], **options) -> ValidationResult:
    """
    Validate a value against a schema document in one call.

    Args:
        value: The value to validate
        schema: The schema document
        **options: Forwarded to Schema (formats, verbose, max_reference_depth)

    Returns:
        ValidationResult for the value
    """
    return Schema(schema, **options).validate(value)
