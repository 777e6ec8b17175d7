"""
YDC SDK Error Hierarchy
=======================

This module defines the root of the exception hierarchy for the YDC SDK.
All exceptions inherit from YdcError, allowing callers to catch every
SDK-related error with a single except clause if desired.

Exception Hierarchy
-------------------
YdcError (base)
├── TranspileError (ydc_sdk.transpiler.errors)
│   ├── LexicalAnomalyError - unrecognized character in source
│   ├── GrammarViolationError - token stream does not match the grammar
│   ├── SourceEncodingError - source file is not UTF-8
│   └── TranspileFailedError - aggregate report for a failed translation
└── ToolchainError (external C compiler)
    ├── CompilerNotFoundError - compiler executable not on PATH
    └── CompilationFailedError - compiler exited with an error

Error messages follow this format:
    error: description
    hint: suggestion for fixing (when available)
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class YdcError(Exception):
    """
    Base exception for all YDC SDK errors.

    Subclasses carry a message and an optional hint, and render
    themselves in a compiler-like format:

        try:
            transpile(source)
        except YdcError as e:
            print(e)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with its hint.

        Example output:
            error: expected ';' after variable declaration, got '}'
            hint: every statement ends with ';'
        """
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Toolchain Exceptions
# =============================================================================

class ToolchainError(YdcError):
    """
    Base exception for errors raised while driving the external C compiler.

    The translator itself never raises these; they come from
    ydc_sdk.toolchain once translated C has been handed off.
    """
    pass


class CompilerNotFoundError(ToolchainError):
    """
    The configured C compiler could not be found on PATH.
    """

    def __init__(self, cc: str):
        self.cc = cc
        super().__init__(
            f"C compiler '{cc}' not found",
            hint="install a C compiler or select one with --cc / the CC variable",
        )


class CompilationFailedError(ToolchainError):
    """
    The external C compiler ran but did not produce an executable.

    Attributes:
        command: The argument vector that was executed
        returncode: Compiler exit status (None on timeout)
        stderr: Captured compiler diagnostics
    """

    def __init__(
        self,
        message: str,
        command: Optional[list[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr

        hint = None
        if self.command:
            hint = f"command: {' '.join(self.command)}"

        super().__init__(message, hint=hint)

    def _format_message(self) -> str:
        """Append the compiler's own diagnostics after the summary line."""
        text = super()._format_message()
        if self.stderr:
            text = f"{text}\n{self.stderr.rstrip()}"
        return text
