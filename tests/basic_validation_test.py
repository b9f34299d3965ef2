#!/usr/bin/env python3
"""
Tests for basic validation: types, enums and the public entry points.
"""
import logging

import pytest

# autopep8: off
from utils import setup
setup()
from draft4_schema import ErrorCode, Schema, UnmatchingTypeError, ValidationResult, validate
# autopep8: on


class TestTypeValidation:
    """Tests for the 'type' keyword."""

    @pytest.mark.parametrize("value,type_name,expected", [
        ({}, "object", True),
        ([], "object", False),
        ([], "array", True),
        ("a", "array", False),
        ("a", "string", True),
        (1, "string", False),
        (True, "boolean", True),
        (1, "boolean", False),
        (0, "boolean", False),
        (5, "integer", True),
        (5.0, "integer", True),
        (5.5, "integer", False),
        (True, "integer", False),
        (5, "number", True),
        (5.5, "number", True),
        (False, "number", False),
        ("5", "number", False),
        (None, "null", True),
        (0, "null", False),
        (None, "unknown", False),
        ({}, "unknown", False),
    ])
    def test_type_matching(self, value, type_name, expected):
        """Each type name matches exactly the values it describes."""
        result = validate(value, {"type": type_name})
        assert result.valid is expected

    def test_type_error_details(self):
        """A type mismatch reports the expected type."""
        result = validate("a", {"type": "integer"})
        assert not result.valid
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.code == ErrorCode.UNMATCHING_TYPE
        assert isinstance(error, UnmatchingTypeError)
        assert error.expected_type == "integer"
        assert error.value == "a"
        assert error.path == ""

    def test_type_list(self):
        """A list of types accepts a value matching any of them."""
        schema = {"type": ["string", "null"]}
        assert validate("a", schema).valid
        assert validate(None, schema).valid

        result = validate(1, schema)
        assert not result.valid
        assert [e.code for e in result.errors] == [ErrorCode.ANY_OF]

    def test_empty_type_list(self):
        """An empty list of types accepts nothing."""
        result = validate("a", {"type": []})
        assert not result.valid
        assert result.errors[0].code == ErrorCode.ANY_OF

    @pytest.mark.parametrize("type_value", [5, {"a": 1}, ["string", 1], None])
    def test_invalid_type_keyword(self, type_value):
        """A 'type' that is not a string or list of strings is a schema error."""
        result = validate("a", {"type": type_value})
        assert not result.valid
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.INVALID_TYPE
        assert result.errors[0].type_value == type_value


class TestEnumValidation:
    """Tests for the 'enum' keyword."""

    def test_enum_values(self):
        schema = {"enum": ["red", 1, None, {"a": [1, 2]}]}
        assert validate("red", schema).valid
        assert validate(1, schema).valid
        assert validate(1.0, schema).valid
        assert validate(None, schema).valid
        assert validate({"a": [1, 2]}, schema).valid

        result = validate("blue", schema)
        assert not result.valid
        assert result.errors[0].code == ErrorCode.ENUM
        assert list(result.errors[0].values) == ["red", 1, None, {"a": [1, 2]}]

    def test_enum_compares_by_value(self):
        """Arrays and objects compare structurally, ignoring key order."""
        schema = {"enum": [{"a": 1, "b": 2}]}
        assert validate({"b": 2, "a": 1}, schema).valid
        assert not validate({"a": 1}, schema).valid
        assert not validate([1], {"enum": [[1, 2]]}).valid


class TestEntryPoints:
    """Tests for Schema and the stateless validate function."""

    PRODUCT_SCHEMA = {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "price": {"type": "number"}
        },
        "required": ["name"]
    }

    def test_product_schema(self):
        assert validate({"name": "Eggs", "price": 34.99}, self.PRODUCT_SCHEMA).valid

        result = validate({"price": 34.99}, self.PRODUCT_SCHEMA)
        assert not result.valid
        assert [e.code for e in result.errors] == [ErrorCode.REQUIRED]
        assert result.errors[0].required == ("name",)

    def test_result_is_truthy_when_valid(self):
        assert validate({"name": "Eggs"}, self.PRODUCT_SCHEMA)
        assert not validate({}, self.PRODUCT_SCHEMA)

    def test_empty_schema_accepts_anything(self):
        for value in (None, True, 1, 1.5, "a", [], {}):
            assert validate(value, {}).valid

    def test_unknown_keywords_are_ignored(self):
        assert validate(5, {"x-custom": True, "const": 4}).valid

    def test_determinism(self):
        """Validating the same value twice gives equal results."""
        schema = Schema(self.PRODUCT_SCHEMA)
        value = {"name": 1, "price": "free"}
        assert schema.validate(value) == schema.validate(value)
        assert validate(value, self.PRODUCT_SCHEMA) == schema.validate(value)

    def test_schema_reuse(self):
        """One compiled schema validates many values."""
        schema = Schema(self.PRODUCT_SCHEMA)
        constraint = schema.constraint
        assert schema.validate({"name": "a"}).valid
        assert not schema.validate({"name": 1}).valid
        assert schema.constraint is constraint

    def test_non_object_document(self):
        with pytest.raises(TypeError):
            Schema(["type", "string"])

    def test_invalid_max_reference_depth(self):
        with pytest.raises(ValueError):
            Schema({}, max_reference_depth=0)

    def test_verbose_leaves_log_level_alone(self):
        package_logger = logging.getLogger("draft4_schema")
        level = package_logger.level
        Schema({"anyOf": [{"type": "string"}]}, verbose=True)
        assert package_logger.level == level

    def test_introspection(self):
        schema = Schema({
            "title": "Product",
            "description": "A product from the catalog",
            "type": ["object", "null", "widget"],
            "properties": {"name": {"type": "string"}}
        })
        assert schema.title == "Product"
        assert schema.description == "A product from the catalog"
        assert schema.type == ["object", "null"]
        assert schema.properties == {"name": {"type": "string"}}

    def test_introspection_defaults(self):
        schema = Schema({"type": "string"})
        assert schema.title is None
        assert schema.description is None
        assert schema.type == ["string"]
        assert schema.properties is None


class TestValidationResult:
    """Tests for merging results."""

    def test_merge_valid(self):
        merged = ValidationResult.merge([ValidationResult(), ValidationResult()])
        assert merged.valid
        assert merged.errors == []

    def test_merge_concatenates_errors(self):
        first = validate("a", {"type": "integer"})
        second = validate(5, {"type": "string"})
        merged = ValidationResult.merge([first, ValidationResult(), second])
        assert not merged.valid
        assert merged.errors == first.errors + second.errors

    def test_error_str(self):
        error = validate("a", {"type": "integer"}).errors[0]
        assert str(error) == "Error at '': 'a' is not of type 'integer'"


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
