"""Console interface for Typed Prompt."""

__all__ = ["typed_prompt"]
