"""
Tests for the built-in parsers and the parser registry.
"""

import math
from decimal import Decimal

import pytest

from typed_prompt.errors import DuplicateParserError, ParseError
from typed_prompt.parsing.builtin import (
    BUILTIN_PARSERS,
    INT32_MAX,
    INT32_MIN,
    parse_bool,
    parse_decimal,
    parse_double,
    parse_float,
    parse_int,
    parse_text,
)
from typed_prompt.parsing.registry import ParserRegistry
from typed_prompt.parsing.types import ParseResult, ValueType, from_converter, normalize_key


class TestParseResult:
    """Test the ParseResult type."""

    def test_success(self):
        result = ParseResult.success(0)
        assert result.ok
        assert result.value == 0
        assert result.error is None

    def test_failure(self):
        error = ParseError("x", "integer")
        result = ParseResult.failure(error)
        assert not result.ok
        assert result.error is error

    def test_success_with_none_value(self):
        """Test that None is a legitimate parsed value."""
        assert ParseResult.success(None).ok


class TestBuiltinParsers:
    """Test each built-in parser."""

    def test_text_is_identity(self):
        assert parse_text("  spaced  ").value == "  spaced  "
        assert parse_text("").ok

    @pytest.mark.parametrize("raw,expected", [
        ("true", True), ("False", False), ("TRUE", True), (" false ", False),
    ])
    def test_bool_valid(self, raw, expected):
        assert parse_bool(raw).value is expected

    @pytest.mark.parametrize("raw", ["yes", "1", "t", ""])
    def test_bool_invalid(self, raw):
        result = parse_bool(raw)
        assert not result.ok
        assert str(result.error) == f"Input {raw} is not a valid boolean value."

    @pytest.mark.parametrize("raw,expected", [
        ("42", 42), ("-7", -7), ("+3", 3), (" 12 ", 12),
        ("2147483647", INT32_MAX), ("-2147483648", INT32_MIN),
    ])
    def test_int_valid(self, raw, expected):
        assert parse_int(raw).value == expected

    @pytest.mark.parametrize("raw", ["twelve", "4.0", "1_000", "", "0x10", "1e3"])
    def test_int_invalid_grammar(self, raw):
        result = parse_int(raw)
        assert not result.ok
        assert result.error.details == {"input": raw, "type": "integer"}

    @pytest.mark.parametrize("raw", [
        "2147483648", "-2147483649", "99999999999", "1" * 5000, "-" + "9" * 5000,
    ])
    def test_int_out_of_range(self, raw):
        result = parse_int(raw)
        assert not result.ok
        assert "outside the range of a 32-bit integer" in str(result.error)

    def test_int_leading_zeros(self):
        assert parse_int("0" * 5000 + "42").value == 42
        assert parse_int("-0000000000002147483648").value == INT32_MIN
        assert parse_int("-0").value == 0

    def test_float_rounds_to_single_precision(self):
        value = parse_float("0.1").value
        assert value != 0.1
        assert value == pytest.approx(0.1, rel=1e-7)

    def test_float_overflow_becomes_infinity(self):
        assert parse_float("1e39").value == math.inf
        assert parse_float("-1e39").value == -math.inf

    @pytest.mark.parametrize("raw", ["nan", "Infinity", "-inf"])
    def test_float_special_values(self, raw):
        assert parse_float(raw).ok

    @pytest.mark.parametrize("raw", ["abc", "1,5", "", "1_0"])
    def test_float_invalid(self, raw):
        assert not parse_float(raw).ok

    @pytest.mark.parametrize("raw,expected", [
        ("3.14", 3.14), ("-2.5e3", -2500.0), (".5", 0.5), ("7", 7.0), ("5.", 5.0),
    ])
    def test_double_valid(self, raw, expected):
        assert parse_double(raw).value == expected

    def test_double_keeps_precision(self):
        assert parse_double("0.1").value == 0.1

    def test_double_overflow_becomes_infinity(self):
        assert parse_double("1e400").value == math.inf

    def test_double_nan(self):
        assert math.isnan(parse_double("NaN").value)

    @pytest.mark.parametrize("raw", ["pi", "1 000", "--1", "e5"])
    def test_double_invalid(self, raw):
        result = parse_double(raw)
        assert str(result.error) == f"Input {raw} could not be parsed, expected type of double."

    def test_decimal_is_exact(self):
        assert parse_decimal("0.1").value == Decimal("0.1")
        assert parse_decimal("123456789.123456789").value == Decimal("123456789.123456789")

    def test_decimal_scientific(self):
        assert parse_decimal("1.5e2").value == Decimal("150")

    def test_decimal_range(self):
        assert parse_decimal("79228162514264337593543950335").ok
        assert not parse_decimal("79228162514264337593543950336").ok
        assert not parse_decimal("-1e30").ok
        assert parse_decimal("-79228162514264337593543950335").ok

    @pytest.mark.parametrize("raw", ["1e1000000", "-1e999999999", "9" * 5000])
    def test_decimal_huge_magnitudes_rejected(self, raw):
        result = parse_decimal(raw)
        assert not result.ok
        assert result.error.type_name == "decimal"

    def test_decimal_tiny_exponent_is_exact(self):
        assert parse_decimal("1e-1000000").value == Decimal("1e-1000000")

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "ten", ""])
    def test_decimal_invalid(self, raw):
        assert not parse_decimal(raw).ok

    def test_every_value_type_has_parser(self):
        assert set(BUILTIN_PARSERS) == set(ValueType)


class TestNormalizeKey:
    """Test type key normalization."""

    def test_value_type_is_unchanged(self):
        assert normalize_key(ValueType.DECIMAL) is ValueType.DECIMAL

    def test_builtin_names_resolve(self):
        assert normalize_key("boolean") is ValueType.BOOLEAN
        assert normalize_key(" DOUBLE ") is ValueType.DOUBLE

    def test_custom_names_are_stripped(self):
        assert normalize_key(" Color ") == "Color"

    @pytest.mark.parametrize("key", ["", "   ", None, 3, str])
    def test_invalid_keys(self, key):
        with pytest.raises(TypeError):
            normalize_key(key)


class TestFromConverter:
    """Test adapting raising converters."""

    def test_success(self):
        parser = from_converter(int, "whole")
        assert parser("5").value == 5

    def test_value_error_becomes_failure(self):
        parser = from_converter(int, "whole")
        result = parser("five")
        assert not result.ok
        assert result.error.type_name == "whole"

    def test_arithmetic_error_becomes_failure(self):
        parser = from_converter(lambda raw: 1 / int(raw), "inverse")
        assert not parser("0").ok

    def test_other_errors_propagate(self):
        def converter(raw):
            raise KeyError(raw)

        parser = from_converter(converter, "lookup")
        with pytest.raises(KeyError):
            parser("x")


class TestParserRegistry:
    """Test the ParserRegistry class."""

    @pytest.fixture
    def registry(self):
        return ParserRegistry()

    def test_builtin_parsers_loaded(self, registry):
        """Test that built-in parsers are loaded on initialization."""
        assert len(registry) == len(ValueType)
        for value_type in ValueType:
            assert value_type in registry
            assert registry.get(value_type) is BUILTIN_PARSERS[value_type]

    def test_empty_registry(self):
        registry = ParserRegistry(load_builtins=False)
        assert len(registry) == 0
        assert registry.get(ValueType.TEXT) is None

    def test_lookup_by_name(self, registry):
        assert registry.get("Integer") is parse_int
        assert "decimal" in registry

    def test_register_custom(self, registry):
        parser = from_converter(str.upper, "shout")
        registry.register("shout", parser)

        assert registry.get("shout") is parser
        assert "shout" in registry.names()

    def test_register_duplicate(self, registry):
        parser = from_converter(str.upper, "shout")
        registry.register("shout", parser)

        with pytest.raises(DuplicateParserError) as exc_info:
            registry.register("shout", from_converter(str.lower, "shout"))

        assert exc_info.value.type_name == "shout"
        assert registry.get("shout") is parser
        assert len(registry) == len(ValueType) + 1

    def test_register_non_callable(self, registry):
        with pytest.raises(TypeError):
            registry.register("broken", "not a function")
        assert "broken" not in registry

    def test_contains_invalid_key(self, registry):
        assert 42 not in registry

    def test_names_are_sorted(self, registry):
        assert registry.names() == sorted(v.value for v in ValueType)
