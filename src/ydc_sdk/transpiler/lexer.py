"""
YDC Lexer (Tokenizer)
=====================

This module implements the lexer for YDC, the reversed C-like surface
syntax. It converts source text into the complete token list consumed
by the parser.

Token Categories
----------------
- Keywords: int, void, char, for, while, if, else, return
- Identifiers: names, string literals, and relational operators
- Numbers: runs of decimal digits
- Punctuation: ( ) { } = ; ,
- Preprocessor lines: '#' through end of line, kept verbatim
- Unknown: any other single character

Relational operators (==, !=, <=, >=, <, >) and string literals are
folded into the IDENTIFIER tag. The parser never needs to tell them
apart structurally; they only appear inside text that is copied through
to the C output.

Comments
--------
- Single-line: // comment

Example Usage
-------------
>>> from ydc_sdk.transpiler.lexer import YLexer
>>> for token in YLexer('5 = x int;').tokenize():
...     print(token)
Token(NUMBER, '5')
Token(EQUALS, '=')
Token(IDENTIFIER, 'x')
Token(KEYWORD, 'int')
Token(SEMICOLON, ';')
Token(EOF)
"""

from dataclasses import dataclass
from enum import Enum, auto
import logging
import string

from ydc_sdk.transpiler.errors import LexicalAnomalyError

logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class YTokenType(Enum):
    """
    Token tags for the YDC language.

    Keywords share a single tag; the parser inspects the lexeme when it
    needs to know which keyword it has.
    """

    # === Words and Literals ===
    KEYWORD = auto()        # reserved word
    IDENTIFIER = auto()     # name, string literal, or relational operator
    NUMBER = auto()         # decimal digits

    # === Punctuation ===
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }
    EQUALS = auto()         # =
    SEMICOLON = auto()      # ;
    COMMA = auto()          # ,

    # === Special ===
    PREPROCESSOR = auto()   # '#' line, verbatim
    EOF = auto()            # end of input
    UNKNOWN = auto()        # unrecognized character


# =============================================================================
# Keyword Table
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    # Types
    "int",
    "void",
    "char",

    # Control flow
    "for",
    "while",
    "if",
    "else",
    "return",
})

# Single-character punctuation
PUNCTUATION: dict[str, YTokenType] = {
    "(": YTokenType.LPAREN,
    ")": YTokenType.RPAREN,
    "{": YTokenType.LBRACE,
    "}": YTokenType.RBRACE,
    "=": YTokenType.EQUALS,
    ";": YTokenType.SEMICOLON,
    ",": YTokenType.COMMA,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class YToken:
    """
    A single token: its tag and the exact lexeme matched.

    Attributes:
        type: The YTokenType classification
        lexeme: The source text of the token ("" for EOF)
    """
    type: YTokenType
    lexeme: str

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.type == YTokenType.EOF:
            return "Token(EOF)"
        return f"Token({self.type.name}, {self.lexeme!r})"

    def describe(self) -> str:
        """Name this token for a diagnostic."""
        if self.type == YTokenType.EOF:
            return "end of input"
        return f"'{self.lexeme}'"

    def is_keyword(self, word: str) -> bool:
        """Return True if this token is the given keyword."""
        return self.type == YTokenType.KEYWORD and self.lexeme == word


# =============================================================================
# Lexer Implementation
# =============================================================================

class YLexer:
    """
    Tokenizes YDC source code.

    The lexer never raises on malformed input. A character that no rule
    recognizes becomes an UNKNOWN token and a LexicalAnomalyError is
    appended to `anomalies`; scanning then continues.

    Usage:
        lexer = YLexer(source_text)
        tokens = lexer.tokenize()

    Attributes:
        source: The source code being tokenized
        anomalies: Unrecognized characters seen during the last tokenize()
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    # Characters that can begin a relational operator
    RELATIONAL_START = "><=!"

    def __init__(self, source: str):
        """
        Initialize the lexer with source code.

        Args:
            source: The YDC source code to tokenize
        """
        self.source = source
        self.anomalies: list[LexicalAnomalyError] = []

        # Current position in source
        self._pos = 0

    def tokenize(self) -> list[YToken]:
        """
        Scan the whole source.

        Returns:
            The token list, always terminated by exactly one EOF token
        """
        self._pos = 0
        self.anomalies = []
        tokens: list[YToken] = []

        while not self._at_end():
            self._skip_whitespace_and_comments()

            if self._at_end():
                break

            tokens.append(self._scan_token())

        tokens.append(YToken(YTokenType.EOF, ""))
        logger.debug(f"Tokenized {len(tokens)} tokens ({len(self.anomalies)} anomalies)")
        return tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character."""
        if self._at_end():
            return ""
        char = self.source[self._pos]
        self._pos += 1
        return char

    def _take_while(self, allowed: str) -> str:
        """Consume a maximal run of characters from `allowed`."""
        start = self._pos
        while self._peek() and self._peek() in allowed:
            self._pos += 1
        return self.source[start:self._pos]

    def _take_line(self) -> str:
        """Consume up to, but not including, the next newline."""
        end = self.source.find("\n", self._pos)
        if end == -1:
            end = len(self.source)
        text = self.source[self._pos:end]
        self._pos = end
        return text

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> None:
        """Skip ASCII whitespace and // comments."""
        while not self._at_end():
            char = self._peek()

            if char in string.whitespace:
                self._advance()
                continue

            # The newline is left in place so a '#' on the next line still
            # starts a preprocessor token.
            if char == "/" and self._peek(1) == "/":
                self._take_line()
                continue

            break

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> YToken:
        """Scan the next token from source."""
        char = self._peek()

        # Preprocessor line
        if char == "#":
            return YToken(YTokenType.PREPROCESSOR, self._take_line())

        # Relational operators: ==, !=, >=, <=, >, <
        if char in self.RELATIONAL_START:
            token = self._scan_relational()
            if token is not None:
                return token

        # Punctuation
        if char in PUNCTUATION:
            self._advance()
            return YToken(PUNCTUATION[char], char)

        # Numbers
        if char in string.digits:
            return YToken(YTokenType.NUMBER, self._take_while(string.digits))

        # Identifiers and keywords
        if char in self.IDENT_START:
            name = self._take_while(self.IDENT_CHARS)
            if name in KEYWORDS:
                return YToken(YTokenType.KEYWORD, name)
            return YToken(YTokenType.IDENTIFIER, name)

        # String literal
        if char == '"':
            return self._scan_string()

        return self._scan_unknown()

    def _scan_relational(self) -> YToken | None:
        """
        Scan a relational or equality operator.

        Returns None for a lone '=' (assignment punctuation) or a lone '!'
        (unrecognized), leaving the character for the later rules.
        """
        char = self._peek()

        if self._peek(1) == "=":
            self._pos += 2
            return YToken(YTokenType.IDENTIFIER, char + "=")

        if char in "<>":
            self._advance()
            return YToken(YTokenType.IDENTIFIER, char)

        return None

    def _scan_string(self) -> YToken:
        """
        Scan a double-quoted string literal, quotes and escapes included.

        A backslash escapes the following character. An unterminated
        literal runs to the end of the source.
        """
        start = self._pos
        self._advance()  # consume opening "

        while not self._at_end() and self._peek() != '"':
            if self._peek() == "\\" and self._peek(1):
                self._advance()
            self._advance()

        if self._peek() == '"':
            self._advance()  # consume closing "

        return YToken(YTokenType.IDENTIFIER, self.source[start:self._pos])

    def _scan_unknown(self) -> YToken:
        """Record an unrecognized character and return its UNKNOWN token."""
        char = self._advance()
        anomaly = LexicalAnomalyError(char)
        self.anomalies.append(anomaly)
        logger.warning(f"Unknown character {char!r}")
        return YToken(YTokenType.UNKNOWN, char)


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str) -> list[YToken]:
    """Tokenize source, discarding anomaly diagnostics (they are still logged)."""
    return YLexer(source).tokenize()
