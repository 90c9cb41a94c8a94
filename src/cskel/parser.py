"""
cskel Declaration Parser
========================

This module implements a recursive descent parser that turns the lexer's
token list into a shallow declaration tree.

Grammar (Simplified EBNF)
-------------------------
program      ::= (include | declaration | NEWLINE | <any other token>)* EOF
include      ::= '#' 'include' '<' TOKEN TOKEN
declaration  ::= type_keyword name (function_rest | variable_rest)
function_rest::= '(' (type_keyword IDENTIFIER)? (',' type_keyword IDENTIFIER)* ')'
variable_rest::= ('=' TOKEN)?
type_keyword ::= 'int' | 'float' | 'double' | 'char' | 'void'

Recovery
--------
The parser never raises. A token that starts nothing it recognizes is
dropped and parsing resumes at the next token; a directive or declaration
that goes off the expected shape yields no node.

Braces are not tracked. Once a function's ')' has been read, the tokens
of its body go back to the top-level loop, so a body line shaped like a
declaration (``int x = 5;``) becomes an independent top-level Variable.

Example Usage
-------------
>>> from cskel.lexer import tokenize
>>> from cskel.parser import parse
>>> program = parse(tokenize('int add(int a, int b) { return a + b; }'))
>>> program.declarations[0].name
'add'
"""

from typing import Optional, Sequence
import logging

from cskel.lexer import Token, TokenKind
from cskel.ast import (
    Declaration,
    Function,
    Include,
    Parameter,
    Program,
    Variable,
)

logger = logging.getLogger(__name__)

# Type keywords that may open a top-level declaration
DECLARATION_TYPES: frozenset[str] = frozenset({
    "int", "float", "double", "char", "void",
})

# Keywords accepted where a declaration name is expected
NAME_KEYWORDS: frozenset[str] = frozenset({"main"})


class Parser:
    """
    Recursive descent parser over a single forward cursor.

    The parser holds only the token sequence. Every parsing method takes
    the current position and returns ``(result, next_position)``, so no
    cursor state is stored on the object and parsing never backtracks.

    Usage:
        program = Parser(tokens).parse()

    Attributes:
        tokens: The token sequence being parsed
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tuple(tokens)

    def parse(self) -> Program:
        """
        Parse all top-level declarations.

        Returns:
            Program holding the recognized declarations in source order
        """
        declarations: list[Declaration] = []
        pos = 0

        while not self._at_end(pos):
            node, pos = self._parse_top_level(pos)
            if node is not None:
                declarations.append(node)

        return Program(declarations=tuple(declarations))

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _peek(self, pos: int) -> Optional[Token]:
        """Return the token at pos, or None past the end of the sequence."""
        if pos < len(self.tokens):
            return self.tokens[pos]
        return None

    def _at_end(self, pos: int) -> bool:
        token = self._peek(pos)
        return token is None or token.kind is TokenKind.EOF

    def _lexeme(self, pos: int) -> Optional[str]:
        token = self._peek(pos)
        return token.lexeme if token is not None else None

    # =========================================================================
    # Top-Level Dispatch
    # =========================================================================

    def _parse_top_level(self, pos: int) -> tuple[Optional[Declaration], int]:
        """
        Parse one top-level construct.

        Always returns a position past pos.
        """
        token = self._peek(pos)

        if token.is_delimiter("#"):
            return self._parse_include(pos)

        if token.kind is TokenKind.KEYWORD and token.lexeme in DECLARATION_TYPES:
            return self._parse_declaration(pos)

        # Newlines and anything unrecognized are dropped
        return None, pos + 1

    def _parse_include(self, pos: int) -> tuple[Optional[Include], int]:
        """
        Parse ``# include < name >``.

        The token after '<' is taken as the library name and the token
        after that is skipped as the closing '>'.
        """
        pos += 1  # consume #

        token = self._peek(pos)
        if token is None or token.kind is not TokenKind.KEYWORD or token.lexeme != "include":
            return None, pos
        pos += 1

        if self._lexeme(pos) != "<":
            return None, pos
        pos += 1

        library = self._lexeme(pos) or ""
        pos += 2  # library name, then '>'

        return Include(library=library), pos

    def _parse_declaration(self, pos: int) -> tuple[Optional[Declaration], int]:
        """Parse a function or variable declaration after its type keyword."""
        type_name = self._lexeme(pos)
        pos += 1

        name_token = self._peek(pos)
        if not self._is_name(name_token):
            logger.debug(f"Declaration of type '{type_name}' has no name; skipped")
            return None, pos
        pos += 1

        next_token = self._peek(pos)
        if next_token is not None and next_token.is_delimiter("("):
            return self._parse_function(pos, type_name, name_token.lexeme)
        return self._parse_variable(pos, type_name, name_token.lexeme)

    @staticmethod
    def _is_name(token: Optional[Token]) -> bool:
        if token is None:
            return False
        if token.kind is TokenKind.IDENTIFIER:
            return True
        return token.kind is TokenKind.KEYWORD and token.lexeme in NAME_KEYWORDS

    # =========================================================================
    # Declaration Bodies
    # =========================================================================

    def _parse_function(
        self, pos: int, return_type: str, name: str
    ) -> tuple[Function, int]:
        """
        Parse a parameter list; pos is at '('.

        Reads ``type name`` pairs separated by commas until ')' or the
        end of the tokens. Anything else is consumed and ignored.
        """
        pos += 1  # consume (
        parameters: list[Parameter] = []

        while not self._at_end(pos):
            token = self._peek(pos)
            if token.is_delimiter(")"):
                pos += 1
                break

            start = pos
            if token.is_type_keyword():
                pos += 1
                param_name = self._peek(pos)
                if param_name is not None and param_name.kind is TokenKind.IDENTIFIER:
                    parameters.append(Parameter(token.lexeme, param_name.lexeme))
                    pos += 1

            next_token = self._peek(pos)
            if next_token is not None and next_token.is_delimiter(","):
                pos += 1

            if pos == start:
                pos += 1

        return Function(
            return_type=return_type,
            name=name,
            parameters=tuple(parameters),
        ), pos

    def _parse_variable(
        self, pos: int, data_type: str, name: str
    ) -> tuple[Variable, int]:
        """Parse an optional ``= token`` initializer; pos is after the name."""
        initializer = None

        token = self._peek(pos)
        if token is not None and token.is_operator("="):
            pos += 1
            if not self._at_end(pos):
                initializer = self._lexeme(pos)
                pos += 1

        return Variable(data_type=data_type, name=name, initializer=initializer), pos


# =============================================================================
# Convenience Functions
# =============================================================================

def parse(tokens: Sequence[Token]) -> Program:
    """
    Parse a token sequence into a declaration tree.

    Args:
        tokens: Output of cskel.lexer.tokenize

    Returns:
        Program; possibly empty, never an exception
    """
    program = Parser(tokens).parse()
    logger.debug(f"Parsed {len(program.declarations)} declarations from {len(tokens)} tokens")
    return program
