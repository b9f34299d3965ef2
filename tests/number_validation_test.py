#!/usr/bin/env python3
"""
Tests for numeric validation keywords.
"""
import pytest

# autopep8: off
from utils import setup
setup()
from draft4_schema import Comparison, ErrorCode, validate
# autopep8: on


class TestNumberValidation:
    """Tests for multipleOf, minimum and maximum."""

    def test_minimum(self):
        schema = {"minimum": 5}
        assert validate(5, schema).valid
        assert validate(5.5, schema).valid

        result = validate(4, schema)
        assert not result.valid
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.code == ErrorCode.VALUE_BOUNDS
        assert error.bounds == 5
        assert error.comparison == Comparison.TOO_SMALL
        assert not error.exclusive

    def test_exclusive_minimum(self):
        schema = {"minimum": 5, "exclusiveMinimum": True}
        assert validate(5.1, schema).valid

        result = validate(5, schema)
        assert not result.valid
        assert result.errors[0].exclusive
        assert "greater than 5" in result.errors[0].message

    def test_maximum(self):
        schema = {"maximum": 10}
        assert validate(10, schema).valid
        assert validate(-3, schema).valid

        result = validate(10.5, schema)
        assert not result.valid
        assert result.errors[0].comparison == Comparison.TOO_LARGE

    def test_exclusive_maximum(self):
        schema = {"maximum": 10, "exclusiveMaximum": True}
        assert validate(9.99, schema).valid
        assert not validate(10, schema).valid

    def test_exclusive_flag_without_bound(self):
        assert validate(5, {"exclusiveMinimum": True}).valid

    def test_non_boolean_exclusive_flag_is_ignored(self):
        assert validate(5, {"minimum": 5, "exclusiveMinimum": "yes"}).valid

    def test_both_bounds_reported(self):
        result = validate(0, {"minimum": 1, "maximum": -1})
        assert [e.comparison for e in result.errors] == [Comparison.TOO_SMALL, Comparison.TOO_LARGE]

    def test_multiple_of(self):
        schema = {"multipleOf": 3}
        assert validate(9, schema).valid
        assert validate(0, schema).valid
        assert validate(-6, schema).valid
        assert validate(9.0, schema).valid

        result = validate(10, schema)
        assert not result.valid
        assert result.errors[0].code == ErrorCode.MULTIPLE_OF
        assert result.errors[0].divisor == 3

    def test_fractional_multiple_of(self):
        schema = {"multipleOf": 0.5}
        assert validate(2.5, schema).valid
        assert validate(4, schema).valid
        assert not validate(2.25, schema).valid

    def test_large_integers_multiple_of(self):
        assert validate(7 * 10 ** 30, {"multipleOf": 7}).valid
        assert not validate(7 * 10 ** 30 + 1, {"multipleOf": 7}).valid

    @pytest.mark.parametrize("divisor", [0, -2, -0.5])
    def test_non_positive_multiple_of_is_skipped(self, divisor):
        """A divisor of zero or less disables the check."""
        assert validate(7, {"multipleOf": divisor}).valid

    @pytest.mark.parametrize("value", [None, "5", True, False, [], {}])
    def test_non_numbers_are_ignored(self, value):
        schema = {"minimum": 100, "maximum": -100, "multipleOf": 7}
        assert validate(value, schema).valid

    def test_non_numeric_bound_is_ignored(self):
        assert validate(1, {"minimum": "5"}).valid

    def test_integer_type_with_bounds(self):
        schema = {"type": "integer", "minimum": 0}
        assert validate(5, schema).valid
        result = validate(-5.5, schema)
        assert [e.code for e in result.errors] == [ErrorCode.UNMATCHING_TYPE, ErrorCode.VALUE_BOUNDS]


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
