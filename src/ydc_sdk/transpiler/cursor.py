"""
Token Cursor
============

Positional access over the token list produced by YLexer: the current
token, lookahead by offset, advancing, and the balanced-parenthesis
lookahead every sub-parser depends on.

The cursor never moves past the EOF token; advancing at EOF is a no-op,
and peeking beyond the end yields EOF.
"""

from typing import Optional

from ydc_sdk.transpiler.errors import MissingTokenError
from ydc_sdk.transpiler.lexer import YToken, YTokenType


class TokenCursor:
    """
    Forward-only cursor over a token list.

    Attributes:
        tokens: Token list, terminated by exactly one EOF token
        pos: Index of the current token
    """

    def __init__(self, tokens: list[YToken]):
        if not tokens or tokens[-1].type != YTokenType.EOF:
            tokens = list(tokens) + [YToken(YTokenType.EOF, "")]
        self.tokens = tokens
        self.pos = 0

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def at_end(self) -> bool:
        """Check if we've reached the EOF token."""
        return self.peek().type == YTokenType.EOF

    @property
    def current(self) -> YToken:
        """The token under the cursor."""
        return self.tokens[self.pos]

    def peek(self, offset: int = 0) -> YToken:
        """Look at token at current position + offset."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[pos]

    def advance(self) -> YToken:
        """Consume and return the current token."""
        token = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return token

    def check(self, *types: YTokenType) -> bool:
        """Check if current token is one of the given types."""
        return self.peek().type in types

    def match(self, *types: YTokenType) -> Optional[YToken]:
        """
        Consume current token if it matches one of the types.

        Returns:
            The consumed token, or None if no match
        """
        if self.check(*types):
            return self.advance()
        return None

    def expect(
        self,
        token_type: YTokenType,
        expected: str,
        hint: Optional[str] = None,
    ) -> YToken:
        """
        Expect and consume a specific token type.

        Args:
            token_type: The expected token type
            expected: What the grammar wanted, for the diagnostic
            hint: Optional suggestion for fixing

        Returns:
            The consumed token

        Raises:
            MissingTokenError: If the expected token is not found
        """
        if self.check(token_type):
            return self.advance()
        raise MissingTokenError(expected, self.peek().describe(), hint=hint)

    # =========================================================================
    # Parenthesis Lookahead
    # =========================================================================

    def offset_after_group(self) -> int:
        """
        Find the offset just past the ')' matching the current '('.

        Nested parentheses are tracked. If the group is never closed the
        returned offset points at EOF. Returns 0 when the current token
        is not '('.
        """
        if not self.check(YTokenType.LPAREN):
            return 0

        depth = 1
        offset = 1
        while depth > 0 and self.pos + offset < len(self.tokens):
            token_type = self.peek(offset).type
            if token_type == YTokenType.LPAREN:
                depth += 1
            elif token_type == YTokenType.RPAREN:
                depth -= 1
            elif token_type == YTokenType.EOF:
                break
            offset += 1
        return offset

    def group_contains(self, token_type: YTokenType) -> bool:
        """
        Check whether the group opened by the current '(' holds a token of
        `token_type` at its own nesting level.
        """
        end = self.offset_after_group()
        depth = 0
        for offset in range(1, end):
            token = self.peek(offset)
            if token.type == YTokenType.LPAREN:
                depth += 1
            elif token.type == YTokenType.RPAREN:
                depth -= 1
            elif token.type == token_type and depth == 0:
                return True
        return False

    def collect_group(self) -> list[YToken]:
        """
        Consume tokens up to, not including, the ')' that closes a group
        whose '(' has already been consumed.

        Stops at EOF if the group is unterminated.
        """
        collected = []
        depth = 1
        while not self.at_end():
            token_type = self.peek().type
            if token_type == YTokenType.LPAREN:
                depth += 1
            elif token_type == YTokenType.RPAREN:
                depth -= 1
                if depth == 0:
                    break
            collected.append(self.advance())
        return collected
