# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the YDC lexer/tokenizer.
#
# Test coverage includes:
#   - Whitespace, // comments, and preprocessor lines
#   - Relational operators folded into the IDENTIFIER tag
#   - Punctuation, numbers, keywords, identifiers
#   - String literals with escapes and unterminated strings
#   - Unknown characters (non-fatal anomalies)
# =============================================================================

import pytest
from ydc_sdk.transpiler.lexer import YLexer, YTokenType, YToken, KEYWORDS
from ydc_sdk.transpiler.errors import LexicalAnomalyError


# =============================================================================
# Helper Functions
# =============================================================================

def tokenize(source: str) -> list:
    """Tokenize and drop the trailing EOF token."""
    tokens = YLexer(source).tokenize()
    assert tokens[-1].type == YTokenType.EOF
    return tokens[:-1]


def types(source: str) -> list:
    """Token tags for source, EOF excluded."""
    return [t.type for t in tokenize(source)]


def lexemes(source: str) -> list:
    """Token lexemes for source, EOF excluded."""
    return [t.lexeme for t in tokenize(source)]


# =============================================================================
# Structural Tests
# =============================================================================

class TestStructure:
    """Tests for end-of-stream handling and skipped text."""

    def test_empty_source(self):
        """Empty source should produce only the EOF token."""
        tokens = YLexer("").tokenize()
        assert tokens == [YToken(YTokenType.EOF, "")]

    def test_whitespace_only(self):
        """Whitespace-only source should produce only the EOF token."""
        tokens = YLexer("   \n\t  \r\n  ").tokenize()
        assert len(tokens) == 1
        assert tokens[0].type == YTokenType.EOF

    def test_exactly_one_eof(self):
        """The token list ends with exactly one EOF token."""
        tokens = YLexer("5 = x int;").tokenize()
        eofs = [t for t in tokens if t.type == YTokenType.EOF]
        assert len(eofs) == 1
        assert tokens[-1].type == YTokenType.EOF

    def test_line_comment_skipped(self):
        """// comments run to end of line and are skipped."""
        assert lexemes("// comment\n42") == ["42"]

    def test_comment_at_end_of_input(self):
        """A comment without a trailing newline is skipped."""
        assert lexemes("x // trailing") == ["x"]

    def test_single_slash_is_unknown(self):
        """A lone '/' is not a comment."""
        assert types("/") == [YTokenType.UNKNOWN]


# =============================================================================
# Preprocessor Lines
# =============================================================================

class TestPreprocessor:
    """Tests for '#' lines."""

    def test_preprocessor_line_verbatim(self):
        """The whole line, '#' included, is one token."""
        tokens = tokenize("#include <stdio.h>\n")
        assert len(tokens) == 1
        assert tokens[0].type == YTokenType.PREPROCESSOR
        assert tokens[0].lexeme == "#include <stdio.h>"

    def test_preprocessor_line_at_end_of_input(self):
        """A directive without a trailing newline is captured."""
        assert lexemes("#define N 10") == ["#define N 10"]

    def test_comment_then_preprocessor(self):
        """A comment line must not swallow the directive on the next line."""
        tokens = tokenize("// header\n#include <stdlib.h>\n")
        assert [t.type for t in tokens] == [YTokenType.PREPROCESSOR]
        assert tokens[0].lexeme == "#include <stdlib.h>"

    def test_consecutive_directives(self):
        """Each directive line becomes its own token."""
        assert lexemes("#include <a.h>\n#include <b.h>") == [
            "#include <a.h>",
            "#include <b.h>",
        ]


# =============================================================================
# Operators and Punctuation
# =============================================================================

class TestOperators:
    """Tests for relational operators and punctuation."""

    @pytest.mark.parametrize("op", ["==", "!=", "<=", ">=", "<", ">"])
    def test_relational_is_identifier(self, op):
        """Relational operators are IDENTIFIER-class tokens."""
        tokens = tokenize(f"a {op} b")
        assert [t.type for t in tokens] == [YTokenType.IDENTIFIER] * 3
        assert tokens[1].lexeme == op

    def test_lone_equals_is_punctuation(self):
        """A single '=' is assignment punctuation."""
        assert types("=") == [YTokenType.EQUALS]

    def test_triple_equals(self):
        """'===' splits into '==' then '='."""
        tokens = tokenize("===")
        assert [(t.type, t.lexeme) for t in tokens] == [
            (YTokenType.IDENTIFIER, "=="),
            (YTokenType.EQUALS, "="),
        ]

    def test_operators_without_spaces(self):
        """Operators do not need surrounding whitespace."""
        assert lexemes("i<=10") == ["i", "<=", "10"]

    def test_punctuation(self):
        """Each punctuation character has its own tag."""
        assert types("(){}=;,") == [
            YTokenType.LPAREN,
            YTokenType.RPAREN,
            YTokenType.LBRACE,
            YTokenType.RBRACE,
            YTokenType.EQUALS,
            YTokenType.SEMICOLON,
            YTokenType.COMMA,
        ]


# =============================================================================
# Numbers, Keywords, Identifiers
# =============================================================================

class TestWords:
    """Tests for numbers, keywords, and identifiers."""

    def test_number(self):
        """A run of digits is one NUMBER token."""
        tokens = tokenize("12345")
        assert tokens == [YToken(YTokenType.NUMBER, "12345")]

    def test_number_then_identifier(self):
        """Identifiers cannot start with a digit."""
        assert types("123abc") == [YTokenType.NUMBER, YTokenType.IDENTIFIER]

    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_keywords(self, word):
        """Every reserved word is a KEYWORD."""
        assert tokenize(word) == [YToken(YTokenType.KEYWORD, word)]

    def test_keyword_prefix_is_identifier(self):
        """Maximal munch: 'integer' is not the keyword 'int'."""
        assert tokenize("integer") == [YToken(YTokenType.IDENTIFIER, "integer")]

    def test_identifiers(self):
        """Identifiers may use letters, digits, and underscores."""
        for name in ["main", "_tmp", "x1", "snake_case_2"]:
            assert tokenize(name) == [YToken(YTokenType.IDENTIFIER, name)]

    def test_reversed_declaration(self):
        """A reversed declaration lexes into its five tokens."""
        assert types("5 = x int;") == [
            YTokenType.NUMBER,
            YTokenType.EQUALS,
            YTokenType.IDENTIFIER,
            YTokenType.KEYWORD,
            YTokenType.SEMICOLON,
        ]


# =============================================================================
# String Literals
# =============================================================================

class TestStrings:
    """Tests for double-quoted string literals."""

    def test_string_keeps_quotes(self):
        """The literal is one IDENTIFIER token, quotes included."""
        assert tokenize('"hello"') == [YToken(YTokenType.IDENTIFIER, '"hello"')]

    def test_string_with_punctuation(self):
        """Punctuation inside a string does not split it."""
        assert lexemes('"a, (b); {c}"') == ['"a, (b); {c}"']

    def test_escaped_quote(self):
        """A backslash-escaped quote does not end the literal."""
        source = '"say \\"hi\\"" x'
        assert lexemes(source) == ['"say \\"hi\\""', "x"]

    def test_escaped_backslash(self):
        """An escaped backslash before the closing quote ends the literal."""
        assert lexemes('"dir\\\\" y') == ['"dir\\\\"', "y"]

    def test_unterminated_string(self):
        """An unterminated literal consumes to end of input."""
        tokens = YLexer('"never closed ; }').tokenize()
        assert tokens[0].lexeme == '"never closed ; }'
        assert tokens[1].type == YTokenType.EOF


# =============================================================================
# Unknown Characters
# =============================================================================

class TestUnknownCharacters:
    """Unrecognized characters are recorded and scanning continues."""

    def test_unknown_character(self):
        """'@' produces an UNKNOWN token and one anomaly."""
        lexer = YLexer("a @ b")
        tokens = lexer.tokenize()
        assert [t.type for t in tokens] == [
            YTokenType.IDENTIFIER,
            YTokenType.UNKNOWN,
            YTokenType.IDENTIFIER,
            YTokenType.EOF,
        ]
        assert len(lexer.anomalies) == 1
        assert isinstance(lexer.anomalies[0], LexicalAnomalyError)
        assert lexer.anomalies[0].char == "@"

    def test_lone_bang_is_unknown(self):
        """'!' without '=' is not an operator."""
        lexer = YLexer("!x")
        tokens = lexer.tokenize()
        assert tokens[0] == YToken(YTokenType.UNKNOWN, "!")
        assert tokens[1] == YToken(YTokenType.IDENTIFIER, "x")

    def test_arithmetic_is_unknown(self):
        """Arithmetic operators have no rule and become UNKNOWN tokens."""
        lexer = YLexer("i + 1")
        assert types("i + 1") == [
            YTokenType.IDENTIFIER,
            YTokenType.UNKNOWN,
            YTokenType.NUMBER,
        ]
        lexer.tokenize()
        assert len(lexer.anomalies) == 1

    def test_anomalies_reset_between_runs(self):
        """Calling tokenize() again does not duplicate anomalies."""
        lexer = YLexer("$")
        lexer.tokenize()
        lexer.tokenize()
        assert len(lexer.anomalies) == 1

    def test_non_ascii_space_is_unknown(self):
        """Only ASCII whitespace separates tokens; U+00A0 is a character."""
        lexer = YLexer("a\u00a0b")
        tokens = lexer.tokenize()
        assert tokens[1] == YToken(YTokenType.UNKNOWN, "\u00a0")
        assert lexer.anomalies[0].char == "\u00a0"

    def test_anomaly_message(self):
        """The diagnostic names the character."""
        assert "unknown character '$'" in str(LexicalAnomalyError("$"))


# =============================================================================
# Token Helpers
# =============================================================================

class TestToken:
    """Tests for YToken helpers."""

    def test_describe(self):
        """Tokens describe themselves by lexeme; EOF as end of input."""
        assert YToken(YTokenType.SEMICOLON, ";").describe() == "';'"
        assert YToken(YTokenType.EOF, "").describe() == "end of input"

    def test_is_keyword(self):
        """is_keyword checks both tag and lexeme."""
        assert YToken(YTokenType.KEYWORD, "else").is_keyword("else")
        assert not YToken(YTokenType.IDENTIFIER, "else").is_keyword("else")

    def test_tokens_are_immutable(self):
        """Tokens are frozen."""
        token = YToken(YTokenType.NUMBER, "1")
        with pytest.raises(AttributeError):
            token.lexeme = "2"
