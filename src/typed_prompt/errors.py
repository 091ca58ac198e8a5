"""
Structured error system for Typed Prompt.

Parse failures are expected while a user is typing, so parsers return them
inside a ``ParseResult`` instead of raising. The remaining errors are raised
to the caller.
"""

from typing import Any, Dict, Optional


class TypedPromptError(Exception):
    """Base exception for all Typed Prompt errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "message": self.message,
            "code": self.code,
            "details": self.details,
            "type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        return self.message


class ParseError(TypedPromptError):
    """Raw text does not match the grammar of the requested type."""

    def __init__(
        self,
        raw: str,
        type_name: str,
        message: Optional[str] = None,
    ):
        if message is None:
            message = f"Input {raw} could not be parsed, expected type of {type_name}."
        super().__init__(
            message,
            code="PARSE_ERROR",
            details={"input": raw, "type": type_name},
        )
        self.raw = raw
        self.type_name = type_name


class UnsupportedTypeError(TypedPromptError):
    """No parser is registered for the requested type."""

    def __init__(self, type_name: str):
        super().__init__(
            f"Input of type {type_name} is not yet supported.",
            code="UNSUPPORTED_TYPE",
            details={"type": type_name},
        )
        self.type_name = type_name


class DuplicateParserError(TypedPromptError):
    """A parser is already registered for the type."""

    def __init__(self, type_name: str):
        super().__init__(
            f"Parser for type {type_name} already exists.",
            code="DUPLICATE_PARSER",
            details={"type": type_name},
        )
        self.type_name = type_name


class InputClosedError(TypedPromptError):
    """The input stream stopped producing lines."""

    def __init__(self, empty_reads: int):
        super().__init__(
            f"No input received after {empty_reads} attempts; the input stream appears to be closed.",
            code="INPUT_CLOSED",
            details={"empty_reads": empty_reads},
        )
        self.empty_reads = empty_reads
