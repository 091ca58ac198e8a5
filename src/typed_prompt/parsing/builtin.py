"""
Built-in parsers for the ``ValueType`` tags.

Each parser turns one raw line into a ``ParseResult``. Numeric grammars are
checked with regular expressions first so that Python-only literal forms
(digit separators, non-ASCII digits) are rejected.
"""

import math
import re
import struct
from decimal import Decimal, DecimalException
from typing import Dict

from ..errors import ParseError
from .types import ParseResult, Parser, ValueType

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# Largest magnitude of a 96-bit scaled decimal.
DECIMAL_MAX = Decimal("79228162514264337593543950335")

_INTEGER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")
_DECIMAL_PATTERN = re.compile(
    r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*"
)
_FLOAT_PATTERN = re.compile(
    r"\s*[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)\s*",
    re.IGNORECASE,
)


def parse_text(raw: str) -> ParseResult:
    """Any text is valid text."""
    return ParseResult.success(raw)


def parse_bool(raw: str) -> ParseResult:
    """Parse ``true`` or ``false`` in any letter case."""
    word = raw.strip().lower()
    if word == "true":
        return ParseResult.success(True)
    if word == "false":
        return ParseResult.success(False)
    return ParseResult.failure(ParseError(
        raw,
        ValueType.BOOLEAN.value,
        message=f"Input {raw} is not a valid boolean value.",
    ))


def parse_int(raw: str) -> ParseResult:
    """Parse a base-10 integer that fits in 32 signed bits."""
    if not _INTEGER_PATTERN.fullmatch(raw):
        return ParseResult.failure(ParseError(raw, ValueType.INTEGER.value))

    literal = raw.strip()
    negative = literal.startswith("-")
    digits = literal.lstrip("+-").lstrip("0") or "0"

    # Anything longer than 10 significant digits is out of range.
    value = None
    if len(digits) <= 10:
        value = -int(digits) if negative else int(digits)

    if value is None or not INT32_MIN <= value <= INT32_MAX:
        return ParseResult.failure(ParseError(
            raw,
            ValueType.INTEGER.value,
            message=f"Input {raw} is outside the range of a 32-bit integer.",
        ))
    return ParseResult.success(value)


def parse_float(raw: str) -> ParseResult:
    """Parse a number and round it to single precision.

    Magnitudes beyond the single precision range become infinity.
    """
    if not _FLOAT_PATTERN.fullmatch(raw):
        return ParseResult.failure(ParseError(raw, ValueType.FLOAT.value))

    value = float(raw)
    try:
        value = struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        value = math.copysign(math.inf, value)
    return ParseResult.success(value)


def parse_double(raw: str) -> ParseResult:
    """Parse a double precision number."""
    if not _FLOAT_PATTERN.fullmatch(raw):
        return ParseResult.failure(ParseError(raw, ValueType.DOUBLE.value))
    return ParseResult.success(float(raw))


def parse_decimal(raw: str) -> ParseResult:
    """Parse an exact base-10 number."""
    if not _DECIMAL_PATTERN.fullmatch(raw):
        return ParseResult.failure(ParseError(raw, ValueType.DECIMAL.value))

    try:
        value = Decimal(raw.strip())
        representable = value.is_finite() and value.copy_abs() <= DECIMAL_MAX
    except (DecimalException, ValueError):
        representable = False

    if not representable:
        return ParseResult.failure(ParseError(raw, ValueType.DECIMAL.value))
    return ParseResult.success(value)


BUILTIN_PARSERS: Dict[ValueType, Parser] = {
    ValueType.TEXT: parse_text,
    ValueType.BOOLEAN: parse_bool,
    ValueType.INTEGER: parse_int,
    ValueType.FLOAT: parse_float,
    ValueType.DOUBLE: parse_double,
    ValueType.DECIMAL: parse_decimal,
}

TYPE_DESCRIPTIONS: Dict[ValueType, str] = {
    ValueType.TEXT: "Any line of text",
    ValueType.BOOLEAN: "true or false, in any letter case",
    ValueType.INTEGER: "Whole number between -2^31 and 2^31-1",
    ValueType.FLOAT: "Single precision number",
    ValueType.DOUBLE: "Double precision number",
    ValueType.DECIMAL: "Exact base-10 number",
}
