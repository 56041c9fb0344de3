"""Bobozan CLI module.

Provides a Textual-based terminal interface for playing Bobozan.

Usage:
    bobozan

Or directly:
    python -m bobozan.cli.app
"""

from bobozan.cli.app import BobozanApp, main

__all__ = ["BobozanApp", "main"]
