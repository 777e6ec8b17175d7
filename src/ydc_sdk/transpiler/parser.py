"""
YDC Declaration Parser
======================

Top-level driver of the translation. It walks the token list produced
by YLexer and writes C text as it goes, handing function bodies to the
StatementParser.

Grammar (Simplified EBNF)
-------------------------
program      ::= (PREPROCESSOR | function)* EOF
function     ::= '(' params? ')' IDENTIFIER KEYWORD block
params       ::= param (',' param)*
param        ::= IDENTIFIER KEYWORD

Declarations are reversed relative to C: the parameter list comes
first, then the function name, then the return type.

    (a int, b int) add int { return a; }

becomes

    int add(int a, int b) {
        return a;
    }

Example Usage
-------------
>>> from ydc_sdk.transpiler.lexer import YLexer
>>> from ydc_sdk.transpiler.parser import YParser
>>> tokens = YLexer('#include <stdio.h>').tokenize()
>>> YParser(tokens).parse()
'#include <stdio.h>\\n'
"""

import logging

from ydc_sdk.transpiler.cursor import TokenCursor
from ydc_sdk.transpiler.emitter import OutputEmitter
from ydc_sdk.transpiler.errors import MissingTokenError, UnexpectedTokenError
from ydc_sdk.transpiler.lexer import YToken, YTokenType
from ydc_sdk.transpiler.statements import StatementParser

logger = logging.getLogger(__name__)


class YParser:
    """
    Single-pass parser and C generator for a whole YDC program.

    Parsing stops at the first grammar violation; nothing is returned
    in that case, so a partial translation can never escape.

    Attributes:
        cursor: Cursor over the token list
        out: Emitter holding the generated C text
        function_names: Names of the functions translated, in order
    """

    def __init__(self, tokens: list[YToken], indent_unit: str = "    "):
        """
        Initialize the parser.

        Args:
            tokens: Token list from the lexer, ending in EOF
            indent_unit: Indentation emitted per block depth
        """
        self.cursor = TokenCursor(tokens)
        self.out = OutputEmitter(indent_unit)
        self.statements = StatementParser(self.cursor, self.out)
        self.function_names: list[str] = []

    def parse(self) -> str:
        """
        Translate the token list into C.

        Returns:
            The generated C source

        Raises:
            GrammarViolationError: If the input does not follow the grammar
        """
        cursor = self.cursor

        while not cursor.at_end():
            if cursor.check(YTokenType.PREPROCESSOR):
                self.out.emit(f"{cursor.advance().lexeme}\n")
            elif cursor.check(YTokenType.LPAREN):
                self._parse_function_declaration()
            else:
                raise UnexpectedTokenError(
                    cursor.peek().describe(),
                    expected="a preprocessor directive or function definition at top level",
                )

        return self.out.text()

    def _parse_function_declaration(self) -> None:
        """(params) name type { body }"""
        cursor = self.cursor
        cursor.expect(YTokenType.LPAREN, "'(' before function parameters")
        params = self._parse_parameters()
        cursor.expect(YTokenType.RPAREN, "')' after function parameters")

        name = cursor.expect(YTokenType.IDENTIFIER, "function name")
        return_type = cursor.expect(
            YTokenType.KEYWORD, "function return type",
            hint="functions are written '(<params>) <name> <type> { ... }'",
        )

        self.out.emit_line(f"{return_type.lexeme} {name.lexeme}({', '.join(params)}) {{")
        self.statements.parse_block("function")
        self.out.emit("\n")

        self.function_names.append(name.lexeme)
        logger.debug(f"Translated function '{name.lexeme}' ({len(params)} parameters)")

    def _parse_parameters(self) -> list[str]:
        """
        Parse 'name type' pairs up to, not including, the closing ')'.

        Returns:
            C parameter declarations, e.g. ["int a", "char c"]
        """
        cursor = self.cursor
        params = []

        if cursor.check(YTokenType.RPAREN):
            return params

        while True:
            name = cursor.expect(YTokenType.IDENTIFIER, "parameter name")
            type_ = cursor.expect(YTokenType.KEYWORD, "parameter type")
            params.append(f"{type_.lexeme} {name.lexeme}")

            if cursor.match(YTokenType.COMMA):
                continue
            if cursor.check(YTokenType.RPAREN):
                return params
            raise MissingTokenError("',' or ')' in parameter list", cursor.peek().describe())


def parse_tokens(tokens: list[YToken]) -> str:
    """Translate a token list into C text."""
    return YParser(tokens).parse()
