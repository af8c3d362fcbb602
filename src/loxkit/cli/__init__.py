"""
loxkit Command-Line Interface
=============================

This package provides the command-line tools for loxkit:

- **loxscan**: scanner REPL and file tokenizer

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["loxscan"]
