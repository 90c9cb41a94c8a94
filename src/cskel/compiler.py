"""
cskel Compiler Driver
=====================

This module provides the main translator interface. It runs the complete
pipeline on one source text:

    Source → Lexer → Parser → Declaration Tree → Code Generator → Skeleton

Each stage runs to completion before the next begins and works on the
finished output of the previous one. Every call builds new tokens and a
new tree; nothing from an earlier call is reused.

Usage
-----
Command line:
    $ cskel hello.c -t python

Programmatic:
    >>> from cskel import translate
    >>> print(translate('int main() { }', "python"))

Error Handling
--------------
The stages never raise for source text. SkeletonCompiler is the defensive
boundary for anything unexpected: such a fault is logged and re-raised as
CompilationError carrying a generic "Compilation Error: ..." message.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union
import logging
import os

from cskel import __version__
from cskel.lexer import Token, tokenize
from cskel.parser import parse
from cskel.codegen import CodeGenerator
from cskel.ast import Program
from cskel.targets import Target
from cskel.errors import CompilationError, CSkelError

logger = logging.getLogger(__name__)

# Environment variable consulted by CompilerOptions.from_env()
TARGET_ENV_VAR = "CSKEL_TARGET"


@dataclass
class CompilerOptions:
    """
    Translator configuration options.

    Attributes:
        target: Output language (default: Java)
        output_comments: Put a "generated by" comment on the first line
    """
    target: Target = Target.JAVA
    output_comments: bool = False

    def __post_init__(self):
        self.target = Target.from_name(self.target)

    @classmethod
    def from_env(cls) -> "CompilerOptions":
        """
        Create options from environment variables.

        Environment variables (all optional):
            CSKEL_TARGET: Output language ("java" or "python")

        Invalid values are ignored.
        """
        options = cls()

        if target := os.environ.get(TARGET_ENV_VAR):
            try:
                options.target = Target.from_name(target)
            except CSkelError:
                logger.warning(f"Ignoring invalid {TARGET_ENV_VAR}={target!r}")

        return options


@dataclass
class CompilerResult:
    """
    Result of one pipeline run.

    Attributes:
        filename: Source filename
        target: Output language
        success: True if every stage completed
        tokens: Lexer output
        program: Parser output
        output: Generated skeleton text
    """
    filename: str = "<input>"
    target: Target = Target.JAVA
    success: bool = False
    tokens: list[Token] = field(default_factory=list)
    program: Optional[Program] = None
    output: str = ""

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    @property
    def declaration_count(self) -> int:
        if self.program is None:
            return 0
        return len(self.program.declarations)


class SkeletonCompiler:
    """
    Runs the tokenize → parse → generate pipeline.

    Example:
        compiler = SkeletonCompiler(CompilerOptions(target=Target.PYTHON))
        result = compiler.compile_source(source)
        print(result.output)

    Attributes:
        options: Translator configuration
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(self, source: str, filename: str = "<input>") -> CompilerResult:
        """
        Translate source text.

        Args:
            source: Source code in the supported C subset
            filename: Source name, used in messages and the header comment

        Returns:
            CompilerResult with the intermediate artifacts and the output

        Raises:
            CompilationError: If a stage fails unexpectedly
        """
        result = CompilerResult(filename=filename, target=self.options.target)

        try:
            # Stage 1: Lexical analysis
            result.tokens = tokenize(source)

            # Stage 2: Syntax analysis
            result.program = parse(result.tokens)

            # Stage 3: Code generation
            result.output = self._generate(result.program, filename)
            result.success = True

        except Exception as e:
            logger.error(f"Compilation of {filename} failed: {e}")
            raise CompilationError(str(e), filename=filename, cause=e) from e

        logger.debug(
            f"Compiled {filename}: {result.token_count} tokens, "
            f"{result.declaration_count} declarations"
        )
        return result

    def compile_file(self, filepath: Union[str, Path]) -> CompilerResult:
        """
        Translate a source file.

        Raises:
            FileNotFoundError: If the source file does not exist
            CompilationError: If a stage fails unexpectedly
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        return self.compile_source(source, str(filepath))

    def _generate(self, program: Program, filename: str) -> str:
        header = None
        if self.options.output_comments:
            header = f"Generated by cskel {__version__} from {filename}"
        generator = CodeGenerator(self.options.target, header_comment=header)
        return generator.generate(program)


# =============================================================================
# Convenience Functions
# =============================================================================

def translate(source: str, target: Union[str, Target] = Target.JAVA) -> str:
    """
    Translate source text to a skeleton in the given target language.

    Args:
        source: Source code in the supported C subset
        target: "java", "python", or a Target member

    Returns:
        Generated skeleton text

    Raises:
        UnknownTargetError: If target is not supported
        CompilationError: If a stage fails unexpectedly

    Example:
        >>> translate('int y;', "python")
        'y = 0\\n'
    """
    options = CompilerOptions(target=Target.from_name(target))
    return SkeletonCompiler(options).compile_source(source).output


def compile_file(
    filepath: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    target: Union[str, Target] = Target.JAVA,
) -> str:
    """
    Translate a source file, optionally writing the result.

    Args:
        filepath: Path to the source file
        output_path: Optional path to write the skeleton to
        target: "java", "python", or a Target member

    Returns:
        Generated skeleton text
    """
    options = CompilerOptions(target=Target.from_name(target))
    result = SkeletonCompiler(options).compile_file(filepath)

    if output_path:
        Path(output_path).write_text(result.output, encoding="utf-8")

    return result.output
