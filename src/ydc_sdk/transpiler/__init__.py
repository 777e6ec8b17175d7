"""
YDC Transpiler
==============

This package translates YDC, a small C-like language whose declarations
and calls are written in reverse order, into C source code.

- A lexer (tokenizer) for YDC source
- A token cursor with balanced-parenthesis lookahead
- A single-pass recursive descent parser that writes C as it parses

Pipeline
--------
    YDC Source → Lexer → Parser/Generator → C Source

There is no syntax tree: each construct is written out as soon as it is
recognized.

Usage
-----
>>> from ydc_sdk.transpiler import transpile
>>> source = '''
... #include <stdio.h>
... () main int {
...     5 = x int;
...     ("%d", x) printf;
...     return 0;
... }
... '''
>>> print(transpile(source))  # C source text

Language Summary
----------------
    YDC                          C
    5 = x int;                   int x = 5;
    (a, b) add;                  add(a, b);
    (i < 3) while { ... }        while (i < 3) { ... }
    (c) if { ... } else { ... }  if (c) { ... } else { ... }
    (n int) sq int { ... }       int sq(int n) { ... }
"""

from ydc_sdk.transpiler.compiler import (
    Transpiler,
    TranspilerOptions,
    TranspileResult,
    transpile,
    transpile_file,
)
from ydc_sdk.transpiler.errors import (
    TranspileError,
    TranspileFailedError,
    LexicalAnomalyError,
    GrammarViolationError,
    MissingTokenError,
    UnexpectedTokenError,
    UnrecognizedStatementError,
    NestingTooDeepError,
    SourceEncodingError,
)
from ydc_sdk.transpiler.lexer import YLexer, YTokenType, YToken
from ydc_sdk.transpiler.cursor import TokenCursor
from ydc_sdk.transpiler.emitter import OutputEmitter
from ydc_sdk.transpiler.statements import StatementParser
from ydc_sdk.transpiler.parser import YParser

__all__ = [
    # Main API
    "Transpiler",
    "TranspilerOptions",
    "TranspileResult",
    "transpile",
    "transpile_file",
    # Errors
    "TranspileError",
    "TranspileFailedError",
    "LexicalAnomalyError",
    "GrammarViolationError",
    "MissingTokenError",
    "UnexpectedTokenError",
    "UnrecognizedStatementError",
    "NestingTooDeepError",
    "SourceEncodingError",
    # Lexer
    "YLexer",
    "YTokenType",
    "YToken",
    # Parser
    "TokenCursor",
    "OutputEmitter",
    "StatementParser",
    "YParser",
]
