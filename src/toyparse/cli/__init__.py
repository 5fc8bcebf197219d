"""
toyparse Command-Line Interface
===============================

This package provides the command-line tool for toyparse:

- **tpcheck**: scan and parse one source file, print the symbol table

The tool is a Click-based CLI application with help text and unified
error reporting.
"""

__all__ = ["tpcheck"]
