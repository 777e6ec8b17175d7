"""
YDC SDK - Reversed-C to C Toolchain
===================================

This package translates programs written in YDC, a small C-like language
whose declarations and calls are written back to front, into C source
code, and builds them with an ordinary C compiler.

Main Components
---------------
- **transpiler**: YDC front end (lexer, parser/generator)
    Converts YDC source (.ydc) into C source (.c)

- **toolchain**: external C compiler driver
    Writes the C file and invokes gcc (or $CC) to build an executable

- **cli**: the `ydcc` command

Quick Start
-----------
Translate a program:
    >>> from ydc_sdk.transpiler import transpile
    >>> c_text = transpile('(n int) twice int { return n; }')

Build an executable:
    >>> from ydc_sdk.toolchain import build_executable
    >>> build_executable(c_text, "twice.c", "twice")

Or use the command-line tool:
    $ ydcc hello.ydc -o hello
"""

__version__ = "1.0.0"
__author__ = "YDC SDK Contributors"

from ydc_sdk.errors import (
    YdcError,
    ToolchainError,
    CompilerNotFoundError,
    CompilationFailedError,
)

__all__ = [
    "__version__",
    "YdcError",
    "ToolchainError",
    "CompilerNotFoundError",
    "CompilationFailedError",
]
