#!/usr/bin/env python3
"""
Tests for the schema compiler.
"""
import logging

import pytest

# autopep8: off
from utils import setup
setup()
from draft4_schema import SchemaCompiler
from draft4_schema.constraints import (
    AllOfConstraint,
    AlwaysInvalidConstraint,
    AnyOfConstraint,
    ArrayConstraint,
    CombinedConstraint,
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
# autopep8: on


class TestSchemaCompiler:
    """Tests for SchemaCompiler."""

    def setup_method(self):
        """Set up a compiler for each test."""
        self.compiler = SchemaCompiler()

    def test_compile_returns_combined_constraint(self):
        constraint = self.compiler.compile({"type": "string"})
        assert isinstance(constraint, CombinedConstraint)
        assert [type(c) for c in constraint.constraints] == [TypeConstraint]

    def test_empty_schema_has_no_rules(self):
        assert self.compiler.compile_rules({}) == []

    def test_keyword_order(self):
        """Rules come out in a fixed keyword order, whatever the document order."""
        self.compiler.compile({})
        rules = self.compiler.compile_rules({
            "format": "ipv4",
            "dependencies": {"a": ["b"]},
            "required": ["a"],
            "minItems": 1,
            "minimum": 0,
            "pattern": "x",
            "enum": [1],
            "not": {},
            "oneOf": [{}],
            "anyOf": [{}],
            "allOf": [{}],
            "type": "object",
            "$ref": "#"
        })
        assert [type(rule) for rule in rules] == [
            ReferenceConstraint,
            TypeConstraint,
            AllOfConstraint,
            AnyOfConstraint,
            OneOfConstraint,
            NotConstraint,
            EnumConstraint,
            StringConstraint,
            NumberConstraint,
            ArrayConstraint,
            ObjectConstraint,
            DependencyConstraint,
            FormatConstraint,
        ]

    def test_keyword_groups(self):
        rules = self.compiler.compile_rules({"maxLength": 3, "minLength": 1, "pattern": "^a"})
        assert len(rules) == 1
        rule = rules[0]
        assert (rule.max_length, rule.min_length, rule.pattern) == (3, 1, "^a")

    def test_exclusive_flags(self):
        rule, = self.compiler.compile_rules({"minimum": 1, "exclusiveMinimum": True, "maximum": 2})
        assert rule.exclusive_minimum is True
        assert rule.exclusive_maximum is False

    def test_type_list_compiles_to_any_of(self):
        rule, = self.compiler.compile_rules({"type": ["string", "null"]})
        assert isinstance(rule, AnyOfConstraint)
        assert [c.type_name for c in rule.constraints] == ["string", "null"]

    def test_invalid_type_compiles_to_failing_rule(self):
        rule, = self.compiler.compile_rules({"type": 12})
        assert isinstance(rule, AlwaysInvalidConstraint)

    def test_unknown_format_compiles_to_failing_rule(self):
        rule, = self.compiler.compile_rules({"format": "uri"})
        assert isinstance(rule, AlwaysInvalidConstraint)

    def test_positional_items(self):
        rule, = self.compiler.compile_rules({"items": [{}, {}], "additionalItems": False})
        assert isinstance(rule.items, list)
        assert len(rule.items) == 2
        assert rule.additional_items is False

    def test_additional_items_needs_positional_items(self):
        assert self.compiler.compile_rules({"additionalItems": False}) == []

    def test_object_without_property_rules(self):
        rule, = self.compiler.compile_rules({"required": ["a"]})
        assert not rule.checks_properties

    def test_dependencies(self):
        rules = self.compiler.compile_rules({"dependencies": {"a": ["b"], "c": {"type": "object"}, "d": 5}})
        assert [rule.key for rule in rules] == ["a", "c"]
        assert rules[0].names == ["b"]
        assert isinstance(rules[1].schema, CombinedConstraint)

    def test_references_are_shared(self):
        """Each reference string compiles once and is reused."""
        document = {
            "definitions": {"name": {"type": "string"}},
            "properties": {
                "first": {"$ref": "#/definitions/name"},
                "last": {"$ref": "#/definitions/name"}
            }
        }
        root = self.compiler.compile(document)
        rule, = root.constraints
        first = rule.properties["first"].constraints[0]
        last = rule.properties["last"].constraints[0]
        assert first is last
        assert first is self.compiler.ref_cache["#/definitions/name"]
        assert isinstance(first.target, CombinedConstraint)

    def test_root_reference_targets_root(self):
        root = self.compiler.compile({"properties": {"child": {"$ref": "#"}}})
        reference = root.constraints[0].properties["child"].constraints[0]
        assert isinstance(reference, ReferenceConstraint)
        assert reference.target is root

    def test_compile_resets_reference_cache(self):
        self.compiler.compile({"definitions": {"a": {}}, "$ref": "#/definitions/a"})
        assert "#/definitions/a" in self.compiler.ref_cache
        self.compiler.compile({})
        assert list(self.compiler.ref_cache) == ["#"]

    def test_compile_does_not_modify_document(self):
        document = {"definitions": {"a": {"type": "string"}}, "items": {"$ref": "#/definitions/a"}}
        snapshot = repr(document)
        self.compiler.compile(document)
        assert repr(document) == snapshot

    def test_unresolved_reference_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="draft4_schema"):
            self.compiler.compile({"$ref": "#/definitions/missing"})
        assert "#/definitions/missing" in caplog.text

    def test_invalid_pattern_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="draft4_schema"):
            self.compiler.compile({"patternProperties": {"([": {}}})
        assert "([" in caplog.text


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
