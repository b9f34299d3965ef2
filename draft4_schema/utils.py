"""
Utility classes and functions for the draft-4 schema validator.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, List, Optional
from urllib.parse import unquote


class JsonPointer:
    """
    Utility class for handling JSON Pointers (RFC 6901).

    JSON Pointers are used to reference specific locations within a JSON document.
    """

    @staticmethod
    def from_parts(parts: List[str]) -> str:
        """
        Create a JSON Pointer from path parts.

        Args:
            parts: List of path segments

        Returns:
            JSON Pointer string
        """
        if not parts:
            return ""

        return "/" + "/".join(JsonPointer.escape_part(part) for part in parts)

    @staticmethod
    def escape_part(part: str) -> str:
        """
        Escape a JSON Pointer path segment.

        Args:
            part: Path segment to escape

        Returns:
            Escaped path segment
        """
        # ~ must be escaped before /
        return str(part).replace("~", "~0").replace("/", "~1")

    @staticmethod
    def unescape_part(part: str) -> str:
        """
        Unescape a JSON Pointer path segment.

        Args:
            part: Escaped path segment

        Returns:
            Unescaped path segment
        """
        return part.replace("~1", "/").replace("~0", "~")

    @staticmethod
    def to_parts(pointer: str) -> List[str]:
        """
        Split a JSON Pointer into its component parts.

        Args:
            pointer: JSON Pointer string

        Returns:
            List of path segments

        Raises:
            ValueError: If the pointer does not start with '/'
        """
        if not pointer:
            return []

        if not pointer.startswith("/"):
            raise ValueError(f"Invalid JSON Pointer: {pointer}")

        return [JsonPointer.unescape_part(part) for part in pointer[1:].split("/")]

    @staticmethod
    def fragment_parts(reference: str) -> Optional[List[str]]:
        """
        Tokenise a document-relative reference such as ``#/definitions/a%25b``.

        The fragment is percent-decoded before it is split, and each segment
        is then JSON Pointer unescaped.

        Args:
            reference: A reference string starting with '#'

        Returns:
            List of segments, an empty list for '#', or None when the
            reference is not a local JSON Pointer
        """
        if not reference.startswith("#"):
            return None

        fragment = reference[1:]
        if fragment == "":
            return []
        if not fragment.startswith("/"):
            return None

        return JsonPointer.to_parts(unquote(fragment))


class JsonType(Enum):
    """The closed set of JSON value kinds."""
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class TypeUtils:
    """Utilities for classifying decoded JSON values."""

    TYPE_NAMES = frozenset(t.value for t in JsonType)

    @staticmethod
    def is_number(value: Any) -> bool:
        """True for ints and floats; booleans are never numbers."""
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def is_array(value: Any) -> bool:
        return isinstance(value, (list, tuple))

    @staticmethod
    def is_object(value: Any) -> bool:
        return isinstance(value, Mapping)

    @staticmethod
    def get_json_type(value: Any) -> Optional[JsonType]:
        """
        Get the JSON type of a decoded Python value.

        ``bool`` is checked before ``int`` since it is an ``int`` subclass.

        Args:
            value: Python value

        Returns:
            The JsonType, or None for values outside the JSON data model
        """
        if value is None:
            return JsonType.NULL
        elif isinstance(value, bool):
            return JsonType.BOOLEAN
        elif isinstance(value, int):
            return JsonType.INTEGER
        elif isinstance(value, float):
            return JsonType.NUMBER
        elif isinstance(value, str):
            return JsonType.STRING
        elif TypeUtils.is_array(value):
            return JsonType.ARRAY
        elif TypeUtils.is_object(value):
            return JsonType.OBJECT
        return None

    @staticmethod
    def matches_type(value: Any, type_name: str) -> bool:
        """
        Check whether a value is an instance of a JSON Schema type name.

        Integers also match "number", and a float without a fractional part
        matches "integer". Unknown type names never match.

        Args:
            value: Python value
            type_name: JSON Schema type name

        Returns:
            True if the value matches the type
        """
        if type_name == "object":
            return TypeUtils.is_object(value)
        elif type_name == "array":
            return TypeUtils.is_array(value)
        elif type_name == "string":
            return isinstance(value, str)
        elif type_name == "boolean":
            return isinstance(value, bool)
        elif type_name == "integer":
            if not TypeUtils.is_number(value):
                return False
            return isinstance(value, int) or value.is_integer()
        elif type_name == "number":
            return TypeUtils.is_number(value)
        elif type_name == "null":
            return value is None
        return False

    @staticmethod
    def json_equal(left: Any, right: Any) -> bool:
        """
        Compare two JSON values by value.

        Arrays compare element-wise and objects key-wise regardless of key
        order. Numbers compare numerically, and ``1``/``0`` compare equal to
        ``true``/``false``.
        """
        if TypeUtils.is_array(left) and TypeUtils.is_array(right):
            return len(left) == len(right) and all(
                TypeUtils.json_equal(a, b) for a, b in zip(left, right))
        if TypeUtils.is_object(left) and TypeUtils.is_object(right):
            return left.keys() == right.keys() and all(
                TypeUtils.json_equal(left[key], right[key]) for key in left)
        if TypeUtils.is_array(left) or TypeUtils.is_array(right):
            return False
        if TypeUtils.is_object(left) or TypeUtils.is_object(right):
            return False
        return left == right


class SchemaKeywords:
    """Constants for the draft-4 JSON Schema keywords."""

    # References
    REF = "$ref"

    # Type keywords
    TYPE = "type"

    # Schema composition
    ALL_OF = "allOf"
    ANY_OF = "anyOf"
    ONE_OF = "oneOf"
    NOT = "not"

    # Miscellaneous
    ENUM = "enum"
    FORMAT = "format"

    # String keywords
    MAX_LENGTH = "maxLength"
    MIN_LENGTH = "minLength"
    PATTERN = "pattern"

    # Number keywords
    MULTIPLE_OF = "multipleOf"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    EXCLUSIVE_MINIMUM = "exclusiveMinimum"
    EXCLUSIVE_MAXIMUM = "exclusiveMaximum"

    # Array keywords
    MIN_ITEMS = "minItems"
    MAX_ITEMS = "maxItems"
    UNIQUE_ITEMS = "uniqueItems"
    ITEMS = "items"
    ADDITIONAL_ITEMS = "additionalItems"

    # Object keywords
    MAX_PROPERTIES = "maxProperties"
    MIN_PROPERTIES = "minProperties"
    REQUIRED = "required"
    PROPERTIES = "properties"
    PATTERN_PROPERTIES = "patternProperties"
    ADDITIONAL_PROPERTIES = "additionalProperties"
    DEPENDENCIES = "dependencies"

    # Schema metadata
    TITLE = "title"
    DESCRIPTION = "description"
