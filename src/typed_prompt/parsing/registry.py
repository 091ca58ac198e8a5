"""
Parser registry for Typed Prompt.

This module maps type tags to the parsers that turn raw input into values.
"""

import logging
from typing import Dict, List, Optional

from ..errors import DuplicateParserError
from .builtin import BUILTIN_PARSERS
from .types import Parser, TypeKey, key_name, normalize_key

logger = logging.getLogger(__name__)


class ParserRegistry:
    """Registry of parsers keyed by type tag."""

    def __init__(self, load_builtins: bool = True):
        """Initialize the parser registry.

        Args:
            load_builtins: Register the built-in parsers
        """
        self._parsers: Dict[TypeKey, Parser] = {}
        if load_builtins:
            self._load_builtin_parsers()

    def register(self, key: TypeKey, parser: Parser) -> None:
        """Register a parser for a type.

        Args:
            key: ValueType member or custom type name
            parser: Callable turning raw text into a ParseResult

        Raises:
            DuplicateParserError: If the type already has a parser
            TypeError: If the key is invalid or the parser is not callable
        """
        normalized = normalize_key(key)
        if not callable(parser):
            raise TypeError(f"Parser for type {key_name(normalized)} must be callable")

        if normalized in self._parsers:
            logger.warning(f"Parser for type '{key_name(normalized)}' already registered")
            raise DuplicateParserError(key_name(normalized))

        self._parsers[normalized] = parser
        logger.debug(f"Registered parser: {key_name(normalized)}")

    def get(self, key: TypeKey) -> Optional[Parser]:
        """Get the parser for a type.

        Args:
            key: ValueType member or custom type name

        Returns:
            Parser or None if the type is not registered
        """
        return self._parsers.get(normalize_key(key))

    def names(self) -> List[str]:
        """Get all registered type names, sorted."""
        return sorted(key_name(key) for key in self._parsers)

    def __contains__(self, key: object) -> bool:
        try:
            return normalize_key(key) in self._parsers  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._parsers)

    def _load_builtin_parsers(self) -> None:
        """Load built-in parsers."""
        for value_type, parser in BUILTIN_PARSERS.items():
            self.register(value_type, parser)

        logger.debug(f"Loaded {len(BUILTIN_PARSERS)} built-in parsers")
