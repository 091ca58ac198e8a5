"""
Configuration package for Typed Prompt.

This package contains the settings model loaded from the environment.
"""

__all__ = ["settings"]
