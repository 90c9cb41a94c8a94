"""
cskel - C Subset to Skeleton Translator
=======================================

This package converts source text written in a small subset of C into
skeleton source for Java or Python: the declarations and signatures are
translated, the bodies are left as placeholders.

Pipeline
--------
The translation runs three stages in sequence:

    C Source → Lexer → Tokens → Parser → Declaration Tree → Code Generator → Skeleton

- **lexer**: classifies characters into keywords, identifiers, numbers,
  strings, operators, delimiters and newlines
- **parser**: recognizes ``#include <name>``, top-level variables and
  top-level function signatures
- **codegen**: renders the tree through fixed type and default-value tables

Usage
-----
>>> from cskel import tokenize, parse, generate, Target
>>> program = parse(tokenize('int add(int a, int b) { return a + b; }'))
>>> generate(program, Target.PYTHON)
'def add(a, b):\n    # Function implementation\n    pass\n\n'

Or in one call:
    >>> from cskel import translate
    >>> code = translate(source, "java")

Or from the command line:
    $ cskel hello.c -t python -o hello.py

Language Subset
---------------
Supported:
- ``#include <name>`` directives
- Variables of type int, float, double, char, void with an optional
  single-token initializer
- Functions with a primitive return type and typed parameters

Not supported:
- Statements, expressions and anything inside braces
- Type checking, scopes, multiple files
"""

# =============================================================================
# Version Information
# =============================================================================

__version__ = "1.0.0"

# =============================================================================
# Public API Imports
# =============================================================================

from cskel.lexer import Lexer, Token, TokenKind, KEYWORDS, tokenize
from cskel.parser import Parser, parse
from cskel.codegen import CodeGenerator, generate
from cskel.targets import Target
from cskel.ast import (
    Program,
    Declaration,
    Include,
    Function,
    Parameter,
    Variable,
    DeclarationVisitor,
)
from cskel.compiler import (
    SkeletonCompiler,
    CompilerOptions,
    CompilerResult,
    translate,
    compile_file,
)
from cskel.errors import CSkelError, UnknownTargetError, CompilationError

__all__ = [
    # Version
    "__version__",
    # Pipeline stages
    "tokenize",
    "parse",
    "generate",
    # Main API
    "SkeletonCompiler",
    "CompilerOptions",
    "CompilerResult",
    "translate",
    "compile_file",
    "Target",
    # Lexer
    "Lexer",
    "Token",
    "TokenKind",
    "KEYWORDS",
    # Parser
    "Parser",
    # Code Generator
    "CodeGenerator",
    # Tree nodes
    "Program",
    "Declaration",
    "Include",
    "Function",
    "Parameter",
    "Variable",
    "DeclarationVisitor",
    # Errors
    "CSkelError",
    "UnknownTargetError",
    "CompilationError",
]
