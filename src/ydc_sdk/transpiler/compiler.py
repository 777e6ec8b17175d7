"""
YDC Transpiler Main Module
==========================

This module provides the main interface for translating YDC to C.
It orchestrates the two stages of the front end:

    Source → Lex → Parse/Generate → C source

Usage
-----
Command line:
    $ ydcc hello.ydc -S

Programmatic:
    >>> from ydc_sdk.transpiler import transpile
    >>> print(transpile('(n int) twice int { return n; }'))
    int twice(int n) {
        return n;
    }
    <BLANKLINE>

Error Handling
--------------
Unknown characters are recorded by the lexer and reported as warnings
unless strict mode is enabled. The first grammar violation aborts the
translation; the raised TranspileFailedError carries every diagnostic
gathered up to that point, and no C text is returned.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

from ydc_sdk.transpiler.lexer import YLexer, YToken
from ydc_sdk.transpiler.parser import YParser
from ydc_sdk.transpiler.errors import (
    DiagnosticCollector,
    GrammarViolationError,
    SourceEncodingError,
    TranspileError,
)

logger = logging.getLogger(__name__)


@dataclass
class TranspilerOptions:
    """
    Transpiler configuration options.

    Attributes:
        strict: Treat unknown characters as errors instead of warnings
        indent: Indentation unit written once per block depth
    """
    strict: bool = False
    indent: str = "    "


@dataclass
class TranspileResult:
    """
    Result of a successful translation.

    Attributes:
        filename: Source filename ("<input>" for strings)
        c_source: Generated C text
        token_count: Number of tokens lexed (EOF included)
        function_names: Functions translated, in order
        warnings: Non-fatal diagnostics (unknown characters)
    """
    filename: str = "<input>"
    c_source: str = ""
    token_count: int = 0
    function_names: list[str] = field(default_factory=list)
    warnings: list[TranspileError] = field(default_factory=list)


class Transpiler:
    """
    YDC to C translator.

    Example:
        transpiler = Transpiler(TranspilerOptions(strict=True))
        result = transpiler.transpile_file("hello.ydc")
        print(result.c_source)

    Attributes:
        options: Translation options
    """

    def __init__(self, options: Optional[TranspilerOptions] = None):
        """
        Initialize the transpiler.

        Args:
            options: Configuration (uses defaults if None)
        """
        self.options = options or TranspilerOptions()
        self._diagnostics = DiagnosticCollector()

    def transpile_source(self, source: str, filename: str = "<input>") -> TranspileResult:
        """
        Translate YDC source text to C.

        Args:
            source: YDC source code
            filename: Name used in log messages

        Returns:
            TranspileResult holding the C text

        Raises:
            TranspileFailedError: If any stage failed; no output is produced
        """
        self._diagnostics.clear()

        # Stage 1: Lexical analysis
        tokens = self._lex(source)

        # Stage 2: Parsing and generation
        parser = YParser(tokens, self.options.indent)
        c_source = None
        try:
            c_source = parser.parse()
        except GrammarViolationError as e:
            self._diagnostics.add(e)

        if self.options.strict:
            self._diagnostics.promote_warnings()

        if self._diagnostics.has_errors():
            logger.info(
                f"Translation of {filename} failed with "
                f"{self._diagnostics.error_count()} error(s)"
            )
            self._diagnostics.raise_if_errors()

        logger.debug(
            f"Translated {filename}: {len(parser.function_names)} functions, "
            f"{len(c_source)} characters"
        )
        return TranspileResult(
            filename=filename,
            c_source=c_source,
            token_count=len(tokens),
            function_names=list(parser.function_names),
            warnings=list(self._diagnostics.warnings),
        )

    def transpile_file(self, filepath: str | Path) -> TranspileResult:
        """
        Translate a YDC source file.

        Raises:
            FileNotFoundError: If the source file does not exist
            SourceEncodingError: If the file is not valid UTF-8
            TranspileFailedError: If translation fails
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        try:
            source = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SourceEncodingError(str(path), str(e)) from e

        return self.transpile_source(source, str(path))

    def _lex(self, source: str) -> list[YToken]:
        """Tokenize source, recording anomalies as warnings."""
        lexer = YLexer(source)
        tokens = lexer.tokenize()
        for anomaly in lexer.anomalies:
            self._diagnostics.add_warning(anomaly)
        return tokens


# =============================================================================
# Convenience Functions
# =============================================================================

def transpile(source: str, strict: bool = False) -> str:
    """
    Translate YDC source code to C.

    Args:
        source: YDC source code
        strict: Fail on unknown characters

    Returns:
        Generated C source

    Raises:
        TranspileFailedError: If translation fails
    """
    transpiler = Transpiler(TranspilerOptions(strict=strict))
    return transpiler.transpile_source(source).c_source


def transpile_file(
    filepath: str | Path,
    output_path: Optional[str | Path] = None,
    strict: bool = False,
) -> str:
    """
    Translate a YDC file to C, optionally writing the result.

    Example:
        >>> c_text = transpile_file("hello.ydc", "hello.c")
    """
    transpiler = Transpiler(TranspilerOptions(strict=strict))
    result = transpiler.transpile_file(filepath)

    if output_path:
        Path(output_path).write_text(result.c_source, encoding="utf-8")

    return result.c_source
