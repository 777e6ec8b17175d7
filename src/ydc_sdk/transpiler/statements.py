"""
YDC Statement Parser
====================

Recursive-descent recognizer for statements inside a function body.
Each construct is translated to C as soon as it is recognized; there is
no syntax tree.

Statement Forms
---------------
    declaration  ::= NUMBER '=' IDENTIFIER KEYWORD ';'
    call         ::= '(' args ')' IDENTIFIER ';'
    for_loop     ::= '(' condition ')' 'for' block
    while_loop   ::= '(' condition ')' 'while' block
    if_stmt      ::= '(' condition ')' 'if' block ('else' block)?
    group        ::= '(' statement+ ')'
    passthrough  ::= (KEYWORD | IDENTIFIER) token* ';'
    block        ::= '{' statement* '}'

Translations
------------
    5 = x int;              →  int x = 5;
    (a, b) add;             →  add(a, b);
    (x > 0) while { ... }   →  while (x > 0) { ... }
    return x;               →  return x;

Statements that open with '(' are told apart by looking past the
balanced group: a loop keyword selects a loop or conditional, an
identifier followed by ';' selects a call, and a group holding its own
';' is a group of statements.
"""

from ydc_sdk.transpiler.cursor import TokenCursor
from ydc_sdk.transpiler.emitter import OutputEmitter
from ydc_sdk.transpiler.errors import NestingTooDeepError, UnrecognizedStatementError
from ydc_sdk.transpiler.lexer import YToken, YTokenType


# Keywords that may follow a parenthesized condition
CONTROL_KEYWORDS = ("for", "while", "if")

# Deepest nesting of blocks and statement groups the parser accepts
MAX_NESTING_DEPTH = 100


def join_lexemes(tokens: list[YToken]) -> str:
    """Join lexemes with single spaces."""
    return " ".join(token.lexeme for token in tokens)


def join_arguments(tokens: list[YToken]) -> str:
    """
    Join call arguments: one space between lexemes, none before a comma.

    (a , b)  →  "a, b"
    """
    parts = []
    for index, token in enumerate(tokens):
        parts.append(token.lexeme)
        is_last = index == len(tokens) - 1
        if not is_last and tokens[index + 1].type != YTokenType.COMMA:
            parts.append(" ")
    return "".join(parts)


class StatementParser:
    """
    Parses and translates one statement at a time.

    Attributes:
        cursor: Shared token cursor
        out: Shared output emitter
        depth: Current nesting of blocks and statement groups
    """

    def __init__(self, cursor: TokenCursor, out: OutputEmitter):
        self.cursor = cursor
        self.out = out
        self.depth = 0

    def parse_statement(self) -> None:
        """
        Translate the statement at the cursor and advance past it.

        Raises:
            GrammarViolationError: If the tokens do not form a statement
        """
        cursor = self.cursor

        if cursor.check(YTokenType.NUMBER):
            self._parse_variable_declaration()
            return

        if cursor.check(YTokenType.LPAREN):
            self._parse_parenthesized()
            return

        if cursor.check(YTokenType.KEYWORD, YTokenType.IDENTIFIER):
            self._parse_passthrough()
            return

        raise UnrecognizedStatementError(cursor.peek().describe())

    def parse_block(self, construct: str) -> None:
        """
        Translate '{' statement* '}' as the body of `construct`.

        The caller has already emitted the opening line; this emits the
        indented body and the closing brace.
        """
        cursor = self.cursor
        cursor.expect(YTokenType.LBRACE, f"'{{' before {construct} body")
        self._enter_nesting()

        self.out.indent()
        while not cursor.check(YTokenType.RBRACE) and not cursor.at_end():
            self.parse_statement()
        self.out.dedent()

        cursor.expect(YTokenType.RBRACE, f"'}}' after {construct} body")
        self.depth -= 1
        self.out.emit_line("}")

    def _enter_nesting(self) -> None:
        """Count one more level of nesting, failing past the limit."""
        if self.depth >= MAX_NESTING_DEPTH:
            raise NestingTooDeepError(MAX_NESTING_DEPTH, self.cursor.peek().describe())
        self.depth += 1

    # =========================================================================
    # Dispatch on '('
    # =========================================================================

    def _parse_parenthesized(self) -> None:
        """Select the statement form for a statement opening with '('."""
        cursor = self.cursor
        offset = cursor.offset_after_group()
        after = cursor.peek(offset)

        if after.type == YTokenType.KEYWORD and after.lexeme in CONTROL_KEYWORDS:
            if after.lexeme == "if":
                self._parse_if_statement()
            else:
                self._parse_loop(after.lexeme)
            return

        if after.type == YTokenType.IDENTIFIER:
            if cursor.peek(offset + 1).type == YTokenType.SEMICOLON:
                self._parse_reversed_call()
                return

        if cursor.group_contains(YTokenType.SEMICOLON):
            self._parse_statement_group()
            return

        raise UnrecognizedStatementError(cursor.peek().describe())

    # =========================================================================
    # Statement Forms
    # =========================================================================

    def _parse_variable_declaration(self) -> None:
        """5 = x int;  →  int x = 5;"""
        cursor = self.cursor
        value = cursor.advance()
        cursor.expect(YTokenType.EQUALS, "'=' after value in declaration")
        name = cursor.expect(YTokenType.IDENTIFIER, "variable name")
        type_ = cursor.expect(
            YTokenType.KEYWORD, "type keyword",
            hint="declarations are written '<value> = <name> <type>;'",
        )
        cursor.expect(YTokenType.SEMICOLON, "';' after variable declaration")

        self.out.emit_line(f"{type_.lexeme} {name.lexeme} = {value.lexeme};")

    def _parse_condition(self, construct: str) -> str:
        """Consume '(' condition ')' construct and return the condition text."""
        cursor = self.cursor
        cursor.expect(YTokenType.LPAREN, f"'(' before {construct} condition")
        condition = join_lexemes(cursor.collect_group())
        cursor.expect(YTokenType.RPAREN, f"')' after {construct} condition")
        cursor.expect(YTokenType.KEYWORD, f"'{construct}' after condition")
        return condition

    def _parse_loop(self, construct: str) -> None:
        """(cond) for { ... } and (cond) while { ... }"""
        condition = self._parse_condition(construct)
        self.out.emit_line(f"{construct} ({condition}) {{")
        self.parse_block(f"{construct} loop")

    def _parse_if_statement(self) -> None:
        """(cond) if { ... } [else { ... }]"""
        condition = self._parse_condition("if")
        self.out.emit_line(f"if ({condition}) {{")
        self.parse_block("if")

        if self.cursor.peek().is_keyword("else"):
            self.cursor.advance()
            self.out.emit_line("else {")
            self.parse_block("else")

    def _parse_reversed_call(self) -> None:
        """(a, b) add;  →  add(a, b);"""
        cursor = self.cursor
        cursor.expect(YTokenType.LPAREN, "'(' for function call")
        args = join_arguments(cursor.collect_group())
        cursor.expect(YTokenType.RPAREN, "')' to end function call arguments")
        name = cursor.expect(YTokenType.IDENTIFIER, "function name")
        cursor.expect(YTokenType.SEMICOLON, "';' after function call")

        self.out.emit_line(f"{name.lexeme}({args});")

    def _parse_statement_group(self) -> None:
        """(2 = r int;) - statements emitted inline, without braces."""
        cursor = self.cursor
        cursor.expect(YTokenType.LPAREN, "'(' before statement group")
        self._enter_nesting()
        while not cursor.check(YTokenType.RPAREN) and not cursor.at_end():
            self.parse_statement()
        cursor.expect(YTokenType.RPAREN, "')' after statement group")
        self.depth -= 1

    def _parse_passthrough(self) -> None:
        """Copy an ordinary C statement through, space-joined."""
        cursor = self.cursor
        tokens = []
        while not cursor.check(YTokenType.SEMICOLON) and not cursor.at_end():
            tokens.append(cursor.advance())
        cursor.expect(YTokenType.SEMICOLON, "';' after statement")

        self.out.emit_line(f"{join_lexemes(tokens)};")
