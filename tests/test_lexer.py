# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the cskel tokenizer.
#
# Test coverage includes:
#   - Keyword / identifier classification
#   - Numbers with at most one decimal point
#   - String literals, including unterminated ones
#   - Maximal munch on two-character operators
#   - Delimiters and significant newlines
#   - Silent skipping of unrecognized characters
#   - EOF termination
# =============================================================================

import pytest
from cskel.lexer import Lexer, Token, TokenKind, KEYWORDS, tokenize


# =============================================================================
# Helper Functions
# =============================================================================

def lex(source: str) -> list:
    """Tokenize and drop the trailing EOF token."""
    tokens = tokenize(source)
    assert tokens[-1].kind == TokenKind.EOF
    return tokens[:-1]


def lexemes(source: str) -> list:
    return [t.lexeme for t in lex(source)]


# =============================================================================
# EOF Termination Tests
# =============================================================================

class TestEndOfInput:
    """The token list always ends with exactly one EOF token."""

    @pytest.mark.parametrize("source", [
        "",
        "   \t  ",
        "\n\n",
        "int x = 5;",
        '"never closed',
        "@@@ $$$ ```",
        "1.2.3.4",
        "é ü 中文",
    ])
    def test_single_trailing_eof(self, source):
        tokens = tokenize(source)
        assert tokens[-1] == Token(TokenKind.EOF)
        assert [t.kind for t in tokens].count(TokenKind.EOF) == 1

    def test_empty_source(self):
        """Empty source produces only the EOF token."""
        assert tokenize("") == [Token(TokenKind.EOF, None)]

    def test_eof_has_no_lexeme(self):
        assert tokenize("x")[-1].lexeme is None

    def test_lexer_class_matches_function(self):
        source = "int add(int a, int b);"
        assert Lexer(source).tokenize() == tokenize(source)

    def test_lexer_can_be_reused(self):
        """Repeated calls on one Lexer give identical, independent results."""
        lexer = Lexer("int x;")
        first = lexer.tokenize()
        second = lexer.tokenize()
        assert first == second
        assert first is not second


# =============================================================================
# Keyword and Identifier Tests
# =============================================================================

class TestWords:
    """Keyword versus identifier classification."""

    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_keywords(self, word):
        tokens = lex(word)
        assert tokens == [Token(TokenKind.KEYWORD, word)]

    @pytest.mark.parametrize("word", ["x", "counter", "_tmp", "int2", "Int", "mainly", "a_b_c"])
    def test_identifiers(self, word):
        tokens = lex(word)
        assert tokens == [Token(TokenKind.IDENTIFIER, word)]

    def test_identifier_stops_at_non_word_char(self):
        assert lexemes("abc+def") == ["abc", "+", "def"]

    def test_recognition_keywords(self):
        """include, main, printf and scanf are classified as keywords."""
        kinds = [t.kind for t in lex("include main printf scanf")]
        assert kinds == [TokenKind.KEYWORD] * 4

    def test_digits_cannot_start_identifier(self):
        tokens = lex("9lives")
        assert tokens[0] == Token(TokenKind.NUMBER, "9")
        assert tokens[1] == Token(TokenKind.IDENTIFIER, "lives")


# =============================================================================
# Number Tests
# =============================================================================

class TestNumbers:
    """Number literals are kept verbatim."""

    def test_integer(self):
        assert lex("42") == [Token(TokenKind.NUMBER, "42")]

    def test_decimal(self):
        assert lex("3.14") == [Token(TokenKind.NUMBER, "3.14")]

    def test_trailing_point(self):
        assert lex("5.") == [Token(TokenKind.NUMBER, "5.")]

    def test_leading_zeros_kept(self):
        assert lex("007") == [Token(TokenKind.NUMBER, "007")]

    def test_only_one_decimal_point(self):
        """A second '.' ends the number and is then skipped."""
        tokens = lex("1.2.3")
        assert tokens == [
            Token(TokenKind.NUMBER, "1.2"),
            Token(TokenKind.NUMBER, "3"),
        ]

    def test_no_range_check(self):
        big = "123456789012345678901234567890"
        assert lex(big) == [Token(TokenKind.NUMBER, big)]


# =============================================================================
# String Tests
# =============================================================================

class TestStrings:
    """String literals drop their quotes."""

    def test_simple_string(self):
        assert lex('"hello"') == [Token(TokenKind.STRING, "hello")]

    def test_empty_string(self):
        assert lex('""') == [Token(TokenKind.STRING, "")]

    def test_string_keeps_inner_text_verbatim(self):
        assert lex('"Result: %d\\n"') == [Token(TokenKind.STRING, "Result: %d\\n")]

    def test_string_may_span_lines(self):
        assert lex('"a\nb"') == [Token(TokenKind.STRING, "a\nb")]

    def test_unterminated_string_runs_to_end(self):
        tokens = tokenize('x = "open ended; int y;')
        assert tokens[-2] == Token(TokenKind.STRING, "open ended; int y;")
        assert tokens[-1].kind == TokenKind.EOF

    def test_tokens_after_string(self):
        assert lexemes('printf("hi");') == ["printf", "(", "hi", ")", ";"]


# =============================================================================
# Operator Tests
# =============================================================================

class TestOperators:
    """Operator recognition with maximal munch."""

    @pytest.mark.parametrize("op", list("+-*/%=<>!&|"))
    def test_single_char_operators(self, op):
        assert lex(op) == [Token(TokenKind.OPERATOR, op)]

    @pytest.mark.parametrize("op", ["==", "!=", "<=", ">=", "++", "--", "&&", "||"])
    def test_compound_operators(self, op):
        assert lex(op) == [Token(TokenKind.OPERATOR, op)]

    def test_equality_is_one_token(self):
        """'==' is one operator, not two '='."""
        assert lex("a==b") == [
            Token(TokenKind.IDENTIFIER, "a"),
            Token(TokenKind.OPERATOR, "=="),
            Token(TokenKind.IDENTIFIER, "b"),
        ]

    def test_no_three_char_operators(self):
        assert lexemes("===") == ["==", "="]
        assert lexemes("+++") == ["++", "+"]
        assert lexemes("<<=") == ["<", "<="]

    def test_unlisted_pairs_split(self):
        assert lexemes("+=") == ["+", "="]
        assert lexemes("<<") == ["<", "<"]
        assert lexemes("->") == ["-", ">"]


# =============================================================================
# Delimiter and Newline Tests
# =============================================================================

class TestDelimiters:
    """Delimiters and newlines."""

    @pytest.mark.parametrize("delim", list("(){}[];,#"))
    def test_delimiters(self, delim):
        assert lex(delim) == [Token(TokenKind.DELIMITER, delim)]

    def test_newline_token(self):
        assert lex("a\nb") == [
            Token(TokenKind.IDENTIFIER, "a"),
            Token(TokenKind.NEWLINE, "\n"),
            Token(TokenKind.IDENTIFIER, "b"),
        ]

    def test_other_whitespace_skipped(self):
        assert lexemes(" \t\r\f\va \t b") == ["a", "b"]

    def test_crlf_keeps_newline(self):
        kinds = [t.kind for t in lex("a\r\nb")]
        assert kinds == [TokenKind.IDENTIFIER, TokenKind.NEWLINE, TokenKind.IDENTIFIER]


# =============================================================================
# Leniency Tests
# =============================================================================

class TestUnrecognizedCharacters:
    """Unknown characters are dropped without a token or an error."""

    @pytest.mark.parametrize("char", list(".'@$`?:~^\\") + ["é", "中"])
    def test_skipped(self, char):
        assert lex(char) == []

    def test_header_name_loses_its_dot(self):
        assert lex("stdio.h") == [
            Token(TokenKind.IDENTIFIER, "stdio"),
            Token(TokenKind.IDENTIFIER, "h"),
        ]

    def test_char_literal_quotes_dropped(self):
        assert lexemes("'a'") == ["a"]


# =============================================================================
# Full Source Tests
# =============================================================================

class TestSourcePrograms:

    def test_include_directive(self):
        tokens = lex("#include <stdio.h>")
        assert tokens == [
            Token(TokenKind.DELIMITER, "#"),
            Token(TokenKind.KEYWORD, "include"),
            Token(TokenKind.OPERATOR, "<"),
            Token(TokenKind.IDENTIFIER, "stdio"),
            Token(TokenKind.IDENTIFIER, "h"),
            Token(TokenKind.OPERATOR, ">"),
        ]

    def test_function_signature(self):
        assert lexemes("int add(int a, int b)") == [
            "int", "add", "(", "int", "a", ",", "int", "b", ")",
        ]

    def test_token_repr(self):
        assert repr(Token(TokenKind.KEYWORD, "int")) == "Token(KEYWORD, 'int')"
        assert repr(Token(TokenKind.EOF)) == "Token(EOF)"

    def test_tokens_are_immutable(self):
        token = Token(TokenKind.IDENTIFIER, "x")
        with pytest.raises(AttributeError):
            token.lexeme = "y"
