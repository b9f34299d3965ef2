"""
Public result and error types for the draft-4 schema validator.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar, Iterable, List, Tuple


class ErrorCode(Enum):
    """Enumeration of validation error codes."""
    UNMATCHING_TYPE = auto()
    INVALID_TYPE = auto()
    ANY_OF = auto()
    ONE_OF = auto()
    NOT = auto()
    ENUM = auto()
    UNMATCHING_REGEX = auto()
    INVALID_REGEX = auto()
    MULTIPLE_OF = auto()
    UNIQUE_ITEMS = auto()
    REQUIRED = auto()
    LENGTH = auto()
    VALUE_BOUNDS = auto()
    ADDITIONAL_PROPERTIES = auto()
    DEPENDENCY_MISSING = auto()
    FORMAT_UNSUPPORTED = auto()
    INVALID_FORMAT = auto()
    REFERENCE_NOT_FOUND = auto()
    REMOTE_REFERENCE_UNSUPPORTED = auto()
    REFERENCE_CYCLE = auto()
    REFERENCE_DEPTH_EXCEEDED = auto()


class ItemType(Enum):
    """Kind of container a length or additional-items error refers to."""
    STRING = "string"
    ARRAY = "array"
    PROPERTIES = "properties"
    OBJECT = "object"


class Comparison(Enum):
    """Direction in which a bound was violated."""
    TOO_LARGE = "tooLarge"
    TOO_SMALL = "tooSmall"


@dataclass(frozen=True)
class ValidationError:
    """
    Base class of all validation errors.

    Every concrete error carries the data needed to describe the failure.
    The ``path`` and ``value`` fields are keyword-only and shared by all
    error kinds.

    Attributes:
        path: JSON Pointer to the value that failed validation
        value: The value that failed validation
    """
    code: ClassVar[ErrorCode]

    path: str = field(default="", kw_only=True)
    value: Any = field(default=None, kw_only=True, compare=False)

    @property
    def message(self) -> str:
        """Human-readable description of the error."""
        return self.code.name.lower()

    def __str__(self) -> str:
        return f"Error at '{self.path}': {self.message}"


@dataclass(frozen=True)
class UnmatchingTypeError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.UNMATCHING_TYPE
    expected_type: str

    @property
    def message(self) -> str:
        return f"'{self.value}' is not of type '{self.expected_type}'"


@dataclass(frozen=True)
class InvalidTypeError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.INVALID_TYPE
    type_value: Any

    @property
    def message(self) -> str:
        return f"'{self.type_value}' is not a valid 'type'"


@dataclass(frozen=True)
class AnyOfError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.ANY_OF
    causes: Tuple[ValidationError, ...] = ()

    @property
    def message(self) -> str:
        return f"'{self.value}' does not match any of the anyOf schemas"


@dataclass(frozen=True)
class OneOfError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.ONE_OF
    passing_count: int
    causes: Tuple[ValidationError, ...] = ()

    @property
    def message(self) -> str:
        return f"{self.passing_count} oneOf schemas matched instead of exactly 1"


@dataclass(frozen=True)
class NotError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.NOT

    @property
    def message(self) -> str:
        return f"'{self.value}' validated against a 'not' schema"


@dataclass(frozen=True)
class EnumError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.ENUM
    values: Tuple[Any, ...]

    @property
    def message(self) -> str:
        return f"'{self.value}' is not one of {list(self.values)}"


@dataclass(frozen=True)
class UnmatchingRegexError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.UNMATCHING_REGEX
    pattern: str

    @property
    def message(self) -> str:
        return f"'{self.value}' does not match pattern '{self.pattern}'"


@dataclass(frozen=True)
class InvalidRegexError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.INVALID_REGEX
    pattern: str

    @property
    def message(self) -> str:
        return f"[Schema] regex pattern '{self.pattern}' is not valid"


@dataclass(frozen=True)
class MultipleOfError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.MULTIPLE_OF
    divisor: float

    @property
    def message(self) -> str:
        return f"{self.value} is not a multiple of {self.divisor}"


@dataclass(frozen=True)
class UniqueItemsError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.UNIQUE_ITEMS

    @property
    def message(self) -> str:
        return f"{self.value} does not have unique items"


@dataclass(frozen=True)
class RequiredError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.REQUIRED
    required: Tuple[str, ...]

    @property
    def message(self) -> str:
        return f"Required properties are missing: {list(self.required)}"


@dataclass(frozen=True)
class LengthError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.LENGTH
    length: int
    item_type: ItemType
    comparison: Comparison

    @property
    def message(self) -> str:
        noun = {
            ItemType.STRING: "Length of string",
            ItemType.ARRAY: "Length of array",
        }.get(self.item_type, "Number of properties")
        if self.comparison is Comparison.TOO_LARGE:
            return f"{noun} is larger than maximum of {self.length}"
        return f"{noun} is smaller than minimum of {self.length}"


@dataclass(frozen=True)
class ValueBoundsError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.VALUE_BOUNDS
    bounds: float
    comparison: Comparison
    exclusive: bool = False

    @property
    def message(self) -> str:
        if self.comparison is Comparison.TOO_LARGE:
            relation = "less than" if self.exclusive else "less than or equal to"
        else:
            relation = "greater than" if self.exclusive else "greater than or equal to"
        return f"Value {self.value} must be {relation} {self.bounds}"


@dataclass(frozen=True)
class AdditionalPropertiesError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.ADDITIONAL_PROPERTIES
    item_type: ItemType
    name: Any = None

    @property
    def message(self) -> str:
        if self.item_type is ItemType.ARRAY:
            return f"Additional item at index {self.name} is not permitted in this array"
        return f"Additional property '{self.name}' is not permitted in this object"


@dataclass(frozen=True)
class DependencyMissingError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.DEPENDENCY_MISSING
    key: str
    dependency: str

    @property
    def message(self) -> str:
        return f"'{self.key}' is missing its dependency '{self.dependency}'"


@dataclass(frozen=True)
class FormatUnsupportedError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.FORMAT_UNSUPPORTED
    format: str

    @property
    def message(self) -> str:
        return f"'format' validation of '{self.format}' is not supported"


@dataclass(frozen=True)
class InvalidFormatError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.INVALID_FORMAT
    format: str

    @property
    def message(self) -> str:
        return f"'{self.value}' is not a valid '{self.format}'"


@dataclass(frozen=True)
class ReferenceNotFoundError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.REFERENCE_NOT_FOUND
    reference: str
    segment: str

    @property
    def message(self) -> str:
        return f"Reference not found: '{self.segment}' in '{self.reference}'"


@dataclass(frozen=True)
class RemoteReferenceUnsupportedError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.REMOTE_REFERENCE_UNSUPPORTED
    reference: str

    @property
    def message(self) -> str:
        return f"Remote $ref '{self.reference}' is not supported"


@dataclass(frozen=True)
class ReferenceCycleError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.REFERENCE_CYCLE
    reference: str

    @property
    def message(self) -> str:
        return f"$ref '{self.reference}' re-entered itself without consuming any input"


@dataclass(frozen=True)
class ReferenceDepthError(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.REFERENCE_DEPTH_EXCEEDED
    reference: str
    depth: int

    @property
    def message(self) -> str:
        return f"$ref '{self.reference}' exceeds the maximum reference depth of {self.depth}"


@dataclass
class ValidationResult:
    """
    Result of schema validation.

    Attributes:
        valid: Whether the validation was successful
        errors: List of validation errors (if any), in evaluation order
    """
    valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def merge(cls, results: Iterable["ValidationResult"]) -> "ValidationResult":
        """
        Concatenate many results into one.

        The merged result is valid iff every input is valid; otherwise it
        carries all errors in input order.
        """
        errors: List[ValidationError] = []
        valid = True
        for result in results:
            if not result.valid:
                valid = False
                errors.extend(result.errors)
        return cls(valid=valid, errors=errors)


def valid_result() -> ValidationResult:
    return ValidationResult()


def invalid_result(*errors: ValidationError) -> ValidationResult:
    return ValidationResult(valid=False, errors=list(errors))

