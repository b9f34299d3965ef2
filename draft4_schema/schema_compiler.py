"""
Schema compiler: turns a draft-4 schema document into a constraint tree.
"""

import logging
import re
from collections.abc import Mapping as MappingABC
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .api import (
    FormatUnsupportedError,
    InvalidTypeError,
    ReferenceNotFoundError,
    RemoteReferenceUnsupportedError,
)
from .constraints import (
    AllOfConstraint,
    AlwaysInvalidConstraint,
    AnyOfConstraint,
    ArrayConstraint,
    CombinedConstraint,
    Constraint,
    DependencyConstraint,
    EnumConstraint,
    FormatConstraint,
    NotConstraint,
    NumberConstraint,
    ObjectConstraint,
    OneOfConstraint,
    ReferenceConstraint,
    StringConstraint,
    TypeConstraint,
)
from .constraints.strings import compile_pattern
from .formats import DEFAULT_FORMATS, FormatChecker
from .utils import JsonPointer, SchemaKeywords, TypeUtils

logger = logging.getLogger("draft4_schema")

ARRAY_INDEX = re.compile(r"[0-9]+")


class SchemaCompiler:
    """
    Compiles schema documents into constraint trees.

    Each schema object compiles to a CombinedConstraint holding one rule per
    recognised keyword, in a fixed keyword order. Nested schemas (under
    ``allOf``, ``items``, ``properties``, ``dependencies`` and so on) are
    compiled recursively. Local ``$ref`` targets are compiled once per
    reference string and shared, which keeps self-referencing documents
    finite.

    Compilation is a pure function of the document and the format registry.
    Problems in the schema itself (bad ``type`` values, unresolvable
    references, unknown formats) are compiled into rules that always fail
    with a descriptive error instead of raising.
    """

    def __init__(self, formats: Optional[Mapping[str, FormatChecker]] = None):
        """
        Initialize a new schema compiler.

        Args:
            formats: Format registry used for the "format" keyword
        """
        self.formats = formats if formats is not None else DEFAULT_FORMATS
        self.root_schema: Optional[Mapping[str, Any]] = None
        self.ref_cache: Dict[str, Constraint] = {}

    def compile(self, schema: Mapping[str, Any]) -> Constraint:
        """
        Compile a schema document into a constraint tree.

        Args:
            schema: The root schema document

        Returns:
            Root constraint of the compiled schema
        """
        logger.debug("Compiling schema %s", schema.get(SchemaKeywords.TITLE, "<untitled>"))

        self.root_schema = schema
        self.ref_cache = {}

        # '#' must resolve to the root while the root is still being compiled
        root_reference = ReferenceConstraint("#")
        self.ref_cache["#"] = root_reference

        root = self.compile_schema(schema)
        root_reference.target = root
        return root

    def compile_schema(self, schema: Mapping[str, Any]) -> CombinedConstraint:
        """Compile one schema object into the conjunction of its rules."""
        return CombinedConstraint(self.compile_rules(schema))

    def compile_rules(self, schema: Mapping[str, Any]) -> List[Constraint]:
        """
        Compile the keywords of one schema object.

        Args:
            schema: A schema object (not necessarily the root)

        Returns:
            Ordered list of rules, one per recognised keyword group
        """
        rules: List[Constraint] = []

        ref = schema.get(SchemaKeywords.REF)
        if isinstance(ref, str):
            rules.append(self._compile_reference(ref))

        if SchemaKeywords.TYPE in schema:
            rules.append(self._compile_type(schema[SchemaKeywords.TYPE]))

        all_of = self._schema_list(schema.get(SchemaKeywords.ALL_OF))
        if all_of is not None:
            rules.append(AllOfConstraint([self.compile_schema(s) for s in all_of]))

        any_of = self._schema_list(schema.get(SchemaKeywords.ANY_OF))
        if any_of is not None:
            rules.append(AnyOfConstraint([self.compile_schema(s) for s in any_of]))

        one_of = self._schema_list(schema.get(SchemaKeywords.ONE_OF))
        if one_of is not None:
            rules.append(OneOfConstraint([self.compile_schema(s) for s in one_of]))

        not_schema = schema.get(SchemaKeywords.NOT)
        if isinstance(not_schema, MappingABC):
            rules.append(NotConstraint(self.compile_schema(not_schema)))

        enum_values = schema.get(SchemaKeywords.ENUM)
        if isinstance(enum_values, list):
            rules.append(EnumConstraint(enum_values))

        for factory in (self._create_string_constraint,
                        self._create_number_constraint,
                        self._create_array_constraint,
                        self._create_object_constraint):
            constraint = factory(schema)
            if constraint is not None:
                rules.append(constraint)

        rules.extend(self._create_dependency_constraints(schema))

        format_name = schema.get(SchemaKeywords.FORMAT)
        if isinstance(format_name, str):
            rules.append(self._compile_format(format_name))

        return rules

    def _compile_reference(self, ref: str) -> Constraint:
        """
        Compile a $ref into a rule.

        Args:
            ref: Reference string as written in the schema

        Returns:
            A ReferenceConstraint, or an always-invalid rule when the
            reference is remote or cannot be resolved
        """
        if ref in self.ref_cache:
            return self.ref_cache[ref]

        parts = JsonPointer.fragment_parts(ref)
        if parts is None:
            logger.warning("Remote reference '%s' is not supported", ref)
            constraint: Constraint = AlwaysInvalidConstraint(RemoteReferenceUnsupportedError, reference=ref)
            self.ref_cache[ref] = constraint
            return constraint

        target, failed_segment = self._resolve_pointer(parts)
        if target is None:
            logger.warning("Reference '%s' not found at '%s'", ref, failed_segment)
            constraint = AlwaysInvalidConstraint(ReferenceNotFoundError,
                                                 reference=ref, segment=failed_segment)
            self.ref_cache[ref] = constraint
            return constraint

        logger.debug("Resolved reference '%s'", ref)
        reference = ReferenceConstraint(ref)
        self.ref_cache[ref] = reference
        reference.target = self.compile_schema(target)
        return reference

    def _resolve_pointer(self, parts: List[str]) -> Tuple[Optional[Mapping[str, Any]], str]:
        """
        Walk reference segments down from the root document.

        A segment naming an array consumes the next segment as an index.

        Args:
            parts: Decoded reference segments

        Returns:
            (schema, "") on success, or (None, failing segment)
        """
        current = self.root_schema
        i = 0
        while i < len(parts):
            segment = parts[i]
            child = current.get(segment)
            if isinstance(child, MappingABC):
                current = child
                i += 1
                continue
            if isinstance(child, list) and i + 1 < len(parts) and ARRAY_INDEX.fullmatch(parts[i + 1]):
                index = int(parts[i + 1])
                if index < len(child) and isinstance(child[index], MappingABC):
                    current = child[index]
                    i += 2
                    continue
            return None, segment
        return current, ""

    def _compile_type(self, type_value: Any) -> Constraint:
        if isinstance(type_value, str):
            return TypeConstraint(type_value)
        if isinstance(type_value, list) and all(isinstance(t, str) for t in type_value):
            return AnyOfConstraint([TypeConstraint(t) for t in type_value])
        logger.warning("Invalid 'type' value: %r", type_value)
        return AlwaysInvalidConstraint(InvalidTypeError, type_value=type_value)

    def _compile_format(self, format_name: str) -> Constraint:
        checker = self.formats.get(format_name)
        if checker is None:
            logger.warning("Unsupported format '%s'", format_name)
            return AlwaysInvalidConstraint(FormatUnsupportedError, format=format_name)
        return FormatConstraint(format_name, checker)

    def _compile_additional(self, value: Any) -> Union[bool, Constraint]:
        """Compile additionalItems/additionalProperties: schema, false, or anything else as true."""
        if isinstance(value, MappingABC):
            return self.compile_schema(value)
        if value is False:
            return False
        return True

    def _compile_schema_map(self, value: Any) -> Optional[Dict[str, Constraint]]:
        if not isinstance(value, MappingABC):
            return None
        return {name: self.compile_schema(sub_schema)
                for name, sub_schema in value.items()
                if isinstance(sub_schema, MappingABC)}

    @staticmethod
    def _schema_list(value: Any) -> Optional[List[Mapping[str, Any]]]:
        if isinstance(value, list) and all(isinstance(s, MappingABC) for s in value):
            return value
        return None

    @staticmethod
    def _number(schema: Mapping[str, Any], keyword: str) -> Optional[Union[int, float]]:
        value = schema.get(keyword)
        return value if TypeUtils.is_number(value) else None

    def _create_string_constraint(self, schema: Mapping[str, Any]) -> Optional[StringConstraint]:
        max_length = self._number(schema, SchemaKeywords.MAX_LENGTH)
        min_length = self._number(schema, SchemaKeywords.MIN_LENGTH)
        pattern = schema.get(SchemaKeywords.PATTERN)
        if not isinstance(pattern, str):
            pattern = None

        if max_length is None and min_length is None and pattern is None:
            return None

        if pattern is not None and compile_pattern(pattern) is None:
            logger.warning("Invalid regex pattern '%s'", pattern)
        return StringConstraint(max_length=max_length, min_length=min_length, pattern=pattern)

    def _create_number_constraint(self, schema: Mapping[str, Any]) -> Optional[NumberConstraint]:
        multiple_of = self._number(schema, SchemaKeywords.MULTIPLE_OF)
        minimum = self._number(schema, SchemaKeywords.MINIMUM)
        maximum = self._number(schema, SchemaKeywords.MAXIMUM)

        if multiple_of is None and minimum is None and maximum is None:
            return None

        return NumberConstraint(
            multiple_of=multiple_of,
            minimum=minimum,
            maximum=maximum,
            exclusive_minimum=schema.get(SchemaKeywords.EXCLUSIVE_MINIMUM) is True,
            exclusive_maximum=schema.get(SchemaKeywords.EXCLUSIVE_MAXIMUM) is True,
        )

    def _create_array_constraint(self, schema: Mapping[str, Any]) -> Optional[ArrayConstraint]:
        min_items = self._number(schema, SchemaKeywords.MIN_ITEMS)
        max_items = self._number(schema, SchemaKeywords.MAX_ITEMS)
        unique_items = schema.get(SchemaKeywords.UNIQUE_ITEMS) is True

        items_value = schema.get(SchemaKeywords.ITEMS)
        items: Union[None, Constraint, List[Constraint]] = None
        additional_items: Union[bool, Constraint] = True
        if isinstance(items_value, MappingABC):
            items = self.compile_schema(items_value)
        elif self._schema_list(items_value) is not None:
            items = [self.compile_schema(s) for s in items_value]
            additional_items = self._compile_additional(schema.get(SchemaKeywords.ADDITIONAL_ITEMS))

        if min_items is None and max_items is None and not unique_items and items is None:
            return None

        return ArrayConstraint(
            min_items=min_items,
            max_items=max_items,
            unique_items=unique_items,
            items=items,
            additional_items=additional_items,
        )

    def _create_object_constraint(self, schema: Mapping[str, Any]) -> Optional[ObjectConstraint]:
        max_properties = self._number(schema, SchemaKeywords.MAX_PROPERTIES)
        min_properties = self._number(schema, SchemaKeywords.MIN_PROPERTIES)

        required = schema.get(SchemaKeywords.REQUIRED)
        if not (isinstance(required, list) and all(isinstance(r, str) for r in required)):
            required = None

        has_property_rules = any(keyword in schema for keyword in (
            SchemaKeywords.PROPERTIES,
            SchemaKeywords.PATTERN_PROPERTIES,
            SchemaKeywords.ADDITIONAL_PROPERTIES,
        ))

        if max_properties is None and min_properties is None and required is None and not has_property_rules:
            return None

        if not has_property_rules:
            return ObjectConstraint(
                max_properties=max_properties,
                min_properties=min_properties,
                required=required,
            )

        pattern_properties = self._compile_schema_map(schema.get(SchemaKeywords.PATTERN_PROPERTIES)) or {}
        for pattern in pattern_properties:
            if compile_pattern(pattern) is None:
                logger.warning("Invalid regex pattern '%s' in patternProperties", pattern)

        return ObjectConstraint(
            max_properties=max_properties,
            min_properties=min_properties,
            required=required,
            properties=self._compile_schema_map(schema.get(SchemaKeywords.PROPERTIES)) or {},
            pattern_properties=pattern_properties,
            additional_properties=self._compile_additional(schema.get(SchemaKeywords.ADDITIONAL_PROPERTIES)),
        )

    def _create_dependency_constraints(self, schema: Mapping[str, Any]) -> List[DependencyConstraint]:
        dependencies = schema.get(SchemaKeywords.DEPENDENCIES)
        if not isinstance(dependencies, MappingABC):
            return []

        constraints = []
        for key, dependency in dependencies.items():
            if isinstance(dependency, MappingABC):
                constraints.append(DependencyConstraint(key, schema=self.compile_schema(dependency)))
            elif isinstance(dependency, list) and all(isinstance(d, str) for d in dependency):
                constraints.append(DependencyConstraint(key, names=dependency))
        return constraints
