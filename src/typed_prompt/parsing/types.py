"""Type tags and parse results shared by parsers and the registry."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from ..errors import ParseError


class ValueType(Enum):
    """Built-in semantic types a prompt can request."""
    TEXT = "text"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"


# A registry key: a built-in tag or the name of a custom type.
TypeKey = Union[ValueType, str]


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one line of input."""
    value: Any = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> "ParseResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ParseError) -> "ParseResult":
        return cls(error=error)


Parser = Callable[[str], ParseResult]


def normalize_key(key: TypeKey) -> TypeKey:
    """Normalize a type key.

    Strings naming a built-in type resolve to the matching ``ValueType``
    member; other non-empty strings are returned stripped.

    Args:
        key: ValueType member or custom type name

    Returns:
        Normalized key

    Raises:
        TypeError: If the key is neither a ValueType nor a non-empty string
    """
    if isinstance(key, ValueType):
        return key
    if isinstance(key, str) and key.strip():
        name = key.strip()
        try:
            return ValueType(name.lower())
        except ValueError:
            return name
    raise TypeError(f"Type key must be a ValueType or a non-empty string, got {key!r}")


def key_name(key: TypeKey) -> str:
    """Display name for a type key."""
    return key.value if isinstance(key, ValueType) else key


def from_converter(
    converter: Callable[[str], Any],
    type_name: str,
) -> Parser:
    """Wrap a raising converter as a parser.

    ``ValueError``, ``TypeError`` and ``ArithmeticError`` raised by the
    converter become parse failures; anything else propagates.

    Args:
        converter: Callable turning raw text into a value
        type_name: Name used in failure messages

    Returns:
        Parser returning a ParseResult
    """
    def parse(raw: str) -> ParseResult:
        try:
            return ParseResult.success(converter(raw))
        except (ValueError, TypeError, ArithmeticError):
            return ParseResult.failure(ParseError(raw, type_name))

    parse.__name__ = f"parse_{type_name}"
    return parse
