"""
Entry point for running Typed Prompt as a module.

This allows users to run the CLI using:
    python -m typed_prompt [command] [options]
"""

from typed_prompt.cli.app import main

if __name__ == "__main__":
    main()
