"""
cskel Lexer (Tokenizer)
=======================

This module implements the lexer for the C subset understood by cskel.
It converts source text into a flat list of tokens for the parser.

Token Categories
----------------
- Keywords: int, float, double, char, void, bool, long, short,
  if, else, while, for, return, include, main, printf, scanf
- Identifiers: variable and function names
- Numbers: digit runs with at most one decimal point, kept verbatim
- Strings: "double quoted" (quotes are not part of the lexeme)
- Operators: + - * / % = < > ! & | and == != <= >= ++ -- && ||
- Delimiters: ( ) { } [ ] ; , #
- Newlines: kept in the stream as their own token

Leniency
--------
The lexer never fails. Characters outside the categories above (for
example '.', '\\'', or non-ASCII text) are skipped without a token, and an
unterminated string runs to the end of the input.

Example Usage
-------------
>>> from cskel.lexer import tokenize
>>> for token in tokenize('int x = 5;'):
...     print(token)
Token(KEYWORD, 'int')
Token(IDENTIFIER, 'x')
Token(OPERATOR, '=')
Token(NUMBER, '5')
Token(DELIMITER, ';')
Token(EOF)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging
import string

logger = logging.getLogger(__name__)


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Lexical categories produced by the lexer."""

    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING = "STRING"
    OPERATOR = "OPERATOR"
    DELIMITER = "DELIMITER"
    NEWLINE = "NEWLINE"
    EOF = "EOF"


# =============================================================================
# Character Classes and Keyword Table
# =============================================================================

# Primitive type names, in the order they appear in declarations
TYPE_KEYWORDS: frozenset[str] = frozenset({
    "int", "float", "double", "char", "void", "bool", "long", "short",
})

CONTROL_KEYWORDS: frozenset[str] = frozenset({
    "if", "else", "while", "for", "return",
})

# Recognized as keywords so they stand out in the token stream
RECOGNITION_KEYWORDS: frozenset[str] = frozenset({
    "include", "main", "printf", "scanf",
})

KEYWORDS: frozenset[str] = TYPE_KEYWORDS | CONTROL_KEYWORDS | RECOGNITION_KEYWORDS

IDENT_START = string.ascii_letters + "_"
IDENT_CHARS = string.ascii_letters + string.digits + "_"

OPERATOR_CHARS = "+-*/%=<>!&|"
DELIMITER_CHARS = "(){}[];,#"

# Every operator is one or two characters long
COMPOUND_OPERATORS: frozenset[str] = frozenset({
    "==", "!=", "<=", ">=", "++", "--", "&&", "||",
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        kind: The TokenKind classification
        lexeme: The matched source text (None for EOF)
    """
    kind: TokenKind
    lexeme: Optional[str] = None

    def __repr__(self) -> str:
        if self.lexeme is None:
            return f"Token({self.kind.name})"
        return f"Token({self.kind.name}, {self.lexeme!r})"

    def is_type_keyword(self) -> bool:
        """Return True if this token names a primitive type."""
        return self.kind is TokenKind.KEYWORD and self.lexeme in TYPE_KEYWORDS

    def is_delimiter(self, text: str) -> bool:
        return self.kind is TokenKind.DELIMITER and self.lexeme == text

    def is_operator(self, text: str) -> bool:
        return self.kind is TokenKind.OPERATOR and self.lexeme == text


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes source text in a single left-to-right pass.

    The lexer only holds the (immutable) source text. The scan position
    is passed into each scanning method and the method returns the
    position just past what it consumed, so a Lexer can be reused and
    never carries state between calls.

    Usage:
        tokens = Lexer(source_text).tokenize()

    Attributes:
        source: The source code being tokenized
    """

    def __init__(self, source: str):
        self.source = source

    def tokenize(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            Tokens in source order, always terminated by exactly one EOF
        """
        tokens: list[Token] = []
        pos = 0
        end = len(self.source)

        while pos < end:
            pos = self._skip_whitespace(pos)
            if pos >= end:
                break

            token, pos = self._scan_token(pos)
            if token is not None:
                tokens.append(token)

        tokens.append(Token(TokenKind.EOF))
        return tokens

    # =========================================================================
    # Character Access
    # =========================================================================

    def _peek(self, pos: int) -> str:
        """Return the character at pos, or empty string past the end."""
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _skip_whitespace(self, pos: int) -> int:
        """Skip whitespace other than newlines, which are significant."""
        while pos < len(self.source):
            char = self.source[pos]
            if char == "\n" or not char.isspace():
                break
            pos += 1
        return pos

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self, pos: int) -> tuple[Optional[Token], int]:
        """
        Scan one token starting at pos.

        Returns:
            (token, next_pos); token is None when the character is skipped
        """
        char = self.source[pos]

        if char in IDENT_START:
            return self._scan_identifier(pos)

        if char in string.digits:
            return self._scan_number(pos)

        if char == '"':
            return self._scan_string(pos)

        if char in OPERATOR_CHARS:
            return self._scan_operator(pos)

        if char in DELIMITER_CHARS:
            return Token(TokenKind.DELIMITER, char), pos + 1

        if char == "\n":
            return Token(TokenKind.NEWLINE, "\n"), pos + 1

        # Unrecognized character: dropped without a token
        return None, pos + 1

    def _scan_identifier(self, pos: int) -> tuple[Token, int]:
        """Scan an identifier or keyword."""
        start = pos
        while self._peek(pos) and self._peek(pos) in IDENT_CHARS:
            pos += 1

        name = self.source[start:pos]
        if name in KEYWORDS:
            return Token(TokenKind.KEYWORD, name), pos
        return Token(TokenKind.IDENTIFIER, name), pos

    def _scan_number(self, pos: int) -> tuple[Token, int]:
        """Scan a digit run that may contain a single decimal point."""
        start = pos
        seen_decimal = False
        while True:
            char = self._peek(pos)
            if char and char in string.digits:
                pos += 1
            elif char == "." and not seen_decimal:
                seen_decimal = True
                pos += 1
            else:
                break

        return Token(TokenKind.NUMBER, self.source[start:pos]), pos

    def _scan_string(self, pos: int) -> tuple[Token, int]:
        """
        Scan a double-quoted string literal.

        No escape processing is done. A missing closing quote consumes the
        rest of the input.
        """
        start = pos + 1  # skip opening "
        close = self.source.find('"', start)
        if close == -1:
            return Token(TokenKind.STRING, self.source[start:]), len(self.source)
        return Token(TokenKind.STRING, self.source[start:close]), close + 1

    def _scan_operator(self, pos: int) -> tuple[Token, int]:
        """Scan a one- or two-character operator (maximal munch)."""
        pair = self.source[pos:pos + 2]
        if pair in COMPOUND_OPERATORS:
            return Token(TokenKind.OPERATOR, pair), pos + 2
        return Token(TokenKind.OPERATOR, self.source[pos]), pos + 1


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str) -> list[Token]:
    """
    Tokenize source text.

    Args:
        source: Source code in the supported C subset

    Returns:
        Tokens in source order ending with a single EOF token
    """
    tokens = Lexer(source).tokenize()
    logger.debug(f"Tokenized {len(source)} characters into {len(tokens)} tokens")
    return tokens
