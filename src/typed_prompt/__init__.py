"""
Typed Prompt - console helper for requesting typed values from a user.

This package prompts a user for input, parses the reply into a typed value
and keeps asking until the reply is valid.
"""

__version__ = "0.1.0"
__author__ = "Typed Prompt Team"
__license__ = "Apache-2.0"

from typing import Final

# Package metadata
VERSION: Final[str] = __version__
PACKAGE_NAME: Final[str] = "typed-prompt"

from typed_prompt.errors import (  # noqa: E402
    TypedPromptError,
    ParseError,
    UnsupportedTypeError,
    DuplicateParserError,
    InputClosedError,
)
from typed_prompt.parsing.types import ValueType, ParseResult, Parser, from_converter  # noqa: E402
from typed_prompt.ui.typed_prompt import TypedPrompt  # noqa: E402

# Re-export commonly used items
__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "TypedPrompt",
    "ValueType",
    "ParseResult",
    "Parser",
    "from_converter",
    "TypedPromptError",
    "ParseError",
    "UnsupportedTypeError",
    "DuplicateParserError",
    "InputClosedError",
]
