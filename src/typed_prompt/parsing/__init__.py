"""
Parsing package for Typed Prompt.

This package provides the type tags, the parse result type, the built-in
parsers and the parser registry.
"""

__all__ = ["types", "builtin", "registry"]
