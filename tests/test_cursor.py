"""
Tests for the Token Cursor and Output Emitter
=============================================

These tests verify positional access over the token list, the
balanced-parenthesis lookahead used by statement dispatch, and the
append-only emitter.
"""

import pytest

from ydc_sdk.transpiler.cursor import TokenCursor
from ydc_sdk.transpiler.emitter import OutputEmitter
from ydc_sdk.transpiler.errors import MissingTokenError
from ydc_sdk.transpiler.lexer import YLexer, YToken, YTokenType


def cursor_for(source: str) -> TokenCursor:
    """Build a cursor over the tokens of source."""
    return TokenCursor(YLexer(source).tokenize())


# =============================================================================
# Token Access
# =============================================================================

class TestTokenAccess:
    """Tests for current/peek/advance."""

    def test_advance_returns_consumed_token(self):
        """advance() returns the token it moves past."""
        cursor = cursor_for("a b")
        assert cursor.advance().lexeme == "a"
        assert cursor.current.lexeme == "b"

    def test_advance_at_eof_is_noop(self):
        """The cursor never moves past EOF."""
        cursor = cursor_for("a")
        cursor.advance()
        assert cursor.at_end()
        position = cursor.pos
        for _ in range(3):
            assert cursor.advance().type == YTokenType.EOF
        assert cursor.pos == position

    def test_peek_beyond_end_returns_eof(self):
        """Peeking past the end yields the EOF token."""
        cursor = cursor_for("a")
        assert cursor.peek(10).type == YTokenType.EOF

    def test_missing_eof_is_appended(self):
        """A token list without EOF gets one, so the invariant holds."""
        cursor = TokenCursor([YToken(YTokenType.IDENTIFIER, "x")])
        assert cursor.tokens[-1].type == YTokenType.EOF
        assert TokenCursor([]).at_end()

    def test_match(self):
        """match() consumes only a matching token."""
        cursor = cursor_for("; x")
        assert cursor.match(YTokenType.COMMA) is None
        assert cursor.match(YTokenType.SEMICOLON).lexeme == ";"
        assert cursor.current.lexeme == "x"

    def test_expect_raises_with_found_token(self):
        """expect() names both the expectation and the actual token."""
        cursor = cursor_for("}")
        with pytest.raises(MissingTokenError) as exc_info:
            cursor.expect(YTokenType.SEMICOLON, "';' after statement")
        assert exc_info.value.expected == "';' after statement"
        assert exc_info.value.found == "'}'"
        assert "expected ';' after statement, got '}'" in str(exc_info.value)

    def test_expect_at_eof(self):
        """At EOF the diagnostic says end of input."""
        cursor = cursor_for("")
        with pytest.raises(MissingTokenError, match="got end of input"):
            cursor.expect(YTokenType.RBRACE, "'}'")


# =============================================================================
# Parenthesis Lookahead
# =============================================================================

class TestGroupLookahead:
    """Tests for offset_after_group, group_contains, and collect_group."""

    def test_simple_group(self):
        """The offset points just past the matching ')'."""
        cursor = cursor_for("(a , b) add ;")
        offset = cursor.offset_after_group()
        assert cursor.peek(offset).lexeme == "add"

    def test_nested_group(self):
        """Inner parentheses do not end the group."""
        cursor = cursor_for("((x) > (y)) if")
        offset = cursor.offset_after_group()
        assert cursor.peek(offset).is_keyword("if")

    def test_empty_group(self):
        """'()' is a complete group."""
        cursor = cursor_for("() main")
        assert cursor.peek(cursor.offset_after_group()).lexeme == "main"

    def test_unterminated_group_points_at_eof(self):
        """A group that never closes looks ahead to EOF."""
        cursor = cursor_for("(a (b")
        assert cursor.peek(cursor.offset_after_group()).type == YTokenType.EOF

    def test_not_a_group(self):
        """Without a current '(' the offset is 0."""
        assert cursor_for("x").offset_after_group() == 0

    def test_lookahead_does_not_move(self):
        """Lookahead leaves the cursor where it was."""
        cursor = cursor_for("(a) f;")
        cursor.offset_after_group()
        cursor.group_contains(YTokenType.SEMICOLON)
        assert cursor.pos == 0

    def test_group_contains_top_level_only(self):
        """Only tokens at the group's own depth count."""
        assert cursor_for("(2 = r int;)").group_contains(YTokenType.SEMICOLON)
        assert not cursor_for("((a;) b)").group_contains(YTokenType.SEMICOLON)
        assert not cursor_for("(a) ;").group_contains(YTokenType.SEMICOLON)

    def test_collect_group(self):
        """collect_group stops at the matching ')' without consuming it."""
        cursor = cursor_for("(f (x) , y) g")
        cursor.advance()
        collected = cursor.collect_group()
        assert [t.lexeme for t in collected] == ["f", "(", "x", ")", ",", "y"]
        assert cursor.current.type == YTokenType.RPAREN

    def test_collect_unterminated_group(self):
        """An unterminated group is collected up to EOF."""
        cursor = cursor_for("(a b")
        cursor.advance()
        assert [t.lexeme for t in cursor.collect_group()] == ["a", "b"]
        assert cursor.at_end()


# =============================================================================
# Output Emitter
# =============================================================================

class TestOutputEmitter:
    """Tests for the append-only emitter."""

    def test_emission_order(self):
        """Fragments are joined in the order emitted."""
        out = OutputEmitter()
        out.emit("a")
        out.emit("b")
        out.emit_line("c")
        assert out.text() == "abc\n"
        assert len(out) == 3

    def test_indentation(self):
        """emit_line indents by depth."""
        out = OutputEmitter(indent_unit="  ")
        out.emit_line("f {")
        out.indent()
        out.emit_line("x;")
        out.dedent()
        out.emit_line("}")
        assert out.text() == "f {\n  x;\n}\n"

    def test_dedent_floor(self):
        """Depth never drops below zero."""
        out = OutputEmitter()
        out.dedent()
        assert out.depth == 0
