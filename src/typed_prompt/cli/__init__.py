"""
CLI interface package for Typed Prompt.

This package contains the Typer application and its commands.
"""

__all__ = ["app"]
