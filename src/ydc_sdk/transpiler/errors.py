"""
YDC Transpiler Error Hierarchy
==============================

This module defines the exceptions raised while translating YDC source
into C. All exceptions inherit from TranspileError, which itself
inherits from the base YdcError for consistent handling across the SDK.

Exception Hierarchy
-------------------
TranspileError (base for all translation errors)
├── LexicalAnomalyError - unrecognized character (recorded, not raised, by the lexer)
├── GrammarViolationError - parser could not match the token stream
│   ├── MissingTokenError - a required token was not found
│   ├── UnexpectedTokenError - token not allowed in this position
│   ├── UnrecognizedStatementError - no statement form claims the token
│   └── NestingTooDeepError - blocks nested beyond the parser limit
├── SourceEncodingError - source file is not UTF-8
└── TranspileFailedError - aggregate report raised by the Transpiler

Lexical anomalies and grammar violations belong to one taxonomy. The
lexer records anomalies and keeps scanning; the parser raises grammar
violations, which abort the whole translation. The Transpiler gathers
both into a DiagnosticCollector and reports them together.

Error Message Format
--------------------
    error: expected ';' after variable declaration, got '}'
    hint: every statement ends with ';'
"""

from typing import Optional, List

from ydc_sdk.errors import YdcError


# =============================================================================
# Base Transpile Exception
# =============================================================================

class TranspileError(YdcError):
    """
    Base exception for all YDC translation errors.

    Diagnostics name the offending token rather than a source position.
    """
    pass


class TranspileFailedError(TranspileError):
    """
    Aggregate error for a failed translation.

    The message is already a formatted report from DiagnosticCollector
    and is passed through without another prefix.
    """

    def __init__(self, report: str, errors: Optional[List[TranspileError]] = None):
        self.errors = errors or []
        super().__init__(report)

    def _format_message(self) -> str:
        """Return message as-is - it's already a formatted report."""
        return self.message


class SourceEncodingError(TranspileError):
    """
    Source file is not valid UTF-8 text.
    """

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(
            f"cannot read {filename}: {reason}",
            hint="YDC source files must be encoded as UTF-8",
        )


# =============================================================================
# Lexical Anomalies
# =============================================================================

class LexicalAnomalyError(TranspileError):
    """
    Character that no lexer rule recognizes.

    The lexer does not raise this; it produces an UNKNOWN token, records
    the anomaly, and keeps scanning. Whether the anomaly is fatal is
    decided later by the parser or by strict mode.
    """

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"unknown character '{char}' (0x{ord(char):02X})")


# =============================================================================
# Grammar Violations
# =============================================================================

class GrammarViolationError(TranspileError):
    """
    The token stream does not match the YDC grammar.

    Grammar violations are fatal: parsing stops at the first one and no
    output is produced.
    """
    pass


class MissingTokenError(GrammarViolationError):
    """
    Required token is missing.

    Raised when a token of a specific kind (like ';' or a type keyword)
    is not found where the grammar requires it.
    """

    def __init__(
        self,
        expected: str,
        found: str,
        hint: Optional[str] = None,
    ):
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected}, got {found}", hint=hint)


class UnexpectedTokenError(GrammarViolationError):
    """
    Token is not allowed in this position.
    """

    def __init__(
        self,
        found: str,
        expected: Optional[str] = None,
    ):
        self.found = found
        self.expected = expected

        hint = None
        if expected:
            hint = f"expected {expected}"

        super().__init__(f"unexpected token {found}", hint=hint)


class UnrecognizedStatementError(GrammarViolationError):
    """
    No statement form matches the tokens at the cursor.

    Raised for a statement that starts with a token no dispatch rule
    accepts, or for a parenthesized group that is not followed by a
    loop keyword, a call target, or a statement body.
    """

    def __init__(self, found: str):
        self.found = found
        super().__init__(
            f"unrecognized statement starting with {found}",
            hint="statements start with a number, '(', a keyword, or an identifier",
        )


class NestingTooDeepError(GrammarViolationError):
    """
    Blocks or statement groups are nested beyond the parser's limit.
    """

    def __init__(self, limit: int, found: str):
        self.limit = limit
        self.found = found
        super().__init__(
            f"nesting too deep at {found}",
            hint=f"at most {limit} levels of blocks and statement groups are allowed",
        )


# =============================================================================
# Diagnostic Collection
# =============================================================================

class DiagnosticCollector:
    """
    Collects anomalies and the fatal error of one translation.

    Example:
        collector = DiagnosticCollector()
        for anomaly in lexer.anomalies:
            collector.add_warning(anomaly)
        try:
            parser.parse()
        except GrammarViolationError as e:
            collector.add(e)
        collector.raise_if_errors()
    """

    def __init__(self):
        self.errors: List[TranspileError] = []
        self.warnings: List[TranspileError] = []

    def add(self, error: TranspileError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def add_warning(self, error: TranspileError) -> None:
        """Add a non-fatal diagnostic."""
        self.warnings.append(error)

    def promote_warnings(self) -> None:
        """Turn every collected warning into an error (strict mode)."""
        self.errors[:0] = self.warnings
        self.warnings = []

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def warning_count(self) -> int:
        """Return the number of collected warnings."""
        return len(self.warnings)

    def report(self) -> str:
        """Format all warnings and errors for display."""
        lines = []

        for warning in self.warnings:
            lines.append(str(warning).replace("error:", "warning:", 1))

        for error in self.errors:
            lines.append(str(error))

        error_word = "error" if len(self.errors) == 1 else "errors"
        warning_word = "warning" if len(self.warnings) == 1 else "warnings"
        lines.append(f"{len(self.errors)} {error_word}, {len(self.warnings)} {warning_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected diagnostics."""
        self.errors.clear()
        self.warnings.clear()

    def raise_if_errors(self) -> None:
        """Raise a TranspileFailedError if any errors were collected."""
        if self.has_errors():
            raise TranspileFailedError(self.report(), list(self.errors))
