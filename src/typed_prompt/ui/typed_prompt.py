"""Console interface requesting strictly typed values from a user."""

import logging
import sys
from typing import Any, Callable, List, Optional, TextIO

from rich.console import Console
from rich.text import Text

from ..config.settings import TypedPromptSettings
from ..errors import InputClosedError, TypedPromptError, UnsupportedTypeError
from ..parsing.registry import ParserRegistry
from ..parsing.types import ParseResult, Parser, TypeKey, from_converter, key_name, normalize_key

logger = logging.getLogger(__name__)


class TypedPrompt:
    """Send messages to a user and request typed replies.

    Example::

        ui = TypedPrompt()
        age = ui.request(ValueType.INTEGER, "How old are you?")
        ui.send(f"Your age is {age}.")

    Supported out of the box: text, boolean, integer (32-bit), float
    (single precision), double and decimal. Further types are added with
    ``register_parser``.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
        settings: Optional[TypedPromptSettings] = None,
    ):
        self.console = console if console is not None else Console()
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.settings = settings if settings is not None else TypedPromptSettings()
        self._registry = ParserRegistry()

    def send(self, message: str) -> None:
        """Write a message to the user as a single line."""
        self._write_line(message)

    def request(self, value_type: TypeKey, message: str) -> Any:
        """Request a value of the given type from the user.

        The prompt is repeated until the reply parses. Each rejected reply
        prints the parse error followed by the retry notice.

        Args:
            value_type: ValueType member or registered custom type name
            message: Prompt shown before every attempt

        Returns:
            The parsed value

        Raises:
            UnsupportedTypeError: If no parser is registered for the type and
                the unsupported type policy is 'raise'
            InputClosedError: If the input stream keeps returning no data
                beyond ``eof_retry_limit``
        """
        key = normalize_key(value_type)
        if key not in self._registry and not self.settings.retries_unsupported_types:
            raise UnsupportedTypeError(key_name(key))

        attempt = 0
        while True:
            attempt += 1
            raw = self._read_line(message)

            parser = self._registry.get(key)
            if parser is None:
                logger.debug(f"No parser for type '{key_name(key)}' (attempt {attempt})")
                self._report_failure(UnsupportedTypeError(key_name(key)))
                continue

            result = parser(raw)
            if not isinstance(result, ParseResult):
                raise TypeError(
                    f"Parser for type {key_name(key)} returned {type(result).__name__}, expected ParseResult"
                )
            if result.ok:
                return result.value

            logger.debug(f"Rejected input for type '{key_name(key)}' (attempt {attempt})")
            self._report_failure(result.error)

    def register_parser(self, value_type: TypeKey, parser: Parser) -> None:
        """Add a parser for a new type.

        Raises:
            DuplicateParserError: If the type already has a parser
        """
        self._registry.register(value_type, parser)

    def register_converter(self, value_type: TypeKey, converter: Callable[[str], Any]) -> None:
        """Add a parser built from a converter that raises on bad input."""
        name = key_name(normalize_key(value_type))
        self._registry.register(value_type, from_converter(converter, name))

    def supports(self, value_type: TypeKey) -> bool:
        """Check whether a parser is registered for the type."""
        return value_type in self._registry

    def supported_types(self) -> List[str]:
        """Names of all types with a registered parser."""
        return self._registry.names()

    def _write_line(self, message: str) -> None:
        self.console.print(
            message,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def _read_line(self, message: str) -> str:
        """Prompt once, then read until the stream yields a line."""
        self._write_line(message)

        empty_reads = 0
        while True:
            line = self.input_stream.readline()
            if line:
                return _strip_line_terminator(line)

            empty_reads += 1
            limit = self.settings.eof_retry_limit
            if limit is not None and empty_reads >= limit:
                raise InputClosedError(empty_reads)

    def _report_failure(self, error: Optional[TypedPromptError]) -> None:
        self.console.print(Text(str(error), style="red"), soft_wrap=True)
        self.console.print(Text(self.settings.retry_message, style="dim"), soft_wrap=True)


def _strip_line_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
