#!/usr/bin/env python3
"""
toyparse Checker Demo
=====================

This script shows how to use toyparse to:
1. Check a program held in a string
2. Inspect the symbol table
3. Handle a rejected program
4. Check a file on disk

Usage:
    python examples/check_demo.py
"""

from pathlib import Path

from toyparse import CheckerOptions, SyntaxChecker, ToyParseError
from toyparse.frontend.report import format_symbol_table


def main():
    checker = SyntaxChecker(CheckerOptions(trace=True))

    # ==========================================================================
    # 1. Check a program held in a string
    # ==========================================================================
    result = checker.check_source("x = x + 1;\ny *= (x - 2);\n", "demo")
    print(f"Accepted {result.statement_count} statements, {result.token_count} tokens")
    for line in result.trace:
        print(f"  {line}")

    # ==========================================================================
    # 2. Inspect the symbol table
    # ==========================================================================
    for occurrence in result.symbol_table.occurrences_of("x"):
        print(f"x: {occurrence.kind.display_name} on line {occurrence.line}")
    print(format_symbol_table(result.symbol_table, order="sorted"))

    # ==========================================================================
    # 3. Handle a rejected program
    # ==========================================================================
    try:
        checker.check_source("x = 1;\n= 2;\n", "broken")
    except ToyParseError as e:
        print(e)

    # ==========================================================================
    # 4. Check a file on disk (".txt" is appended to extensionless names)
    # ==========================================================================
    sample = Path(__file__).parent / "sample"
    result = checker.check_file(sample)
    print(f"{result.filename}: {result.statement_count} statements")


if __name__ == "__main__":
    main()
