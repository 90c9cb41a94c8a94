"""
Skeleton Code Generator
=======================

This module renders a declaration tree as source text in one of the
supported target languages. The output is a skeleton: signatures and
declarations are translated, every body is a fixed placeholder.

Generation Strategy
-------------------
Each declaration is rendered to a text fragment by a target-specific
visitor. The fragments are then assembled:

- **Java**: if the program has a main() function, the fragments become
  members of ``public class Main``, preceded by any imports. Without a
  main() only the member fragments are returned.
- **Python**: fragments are module-level code. If the program has a
  main() function an ``if __name__ == "__main__":`` guard is appended.

Types and default values come from the tables in cskel.targets. Any
missing node field is rendered as an empty string.

Example output (Java)
---------------------
    import java.util.Scanner;

    public class Main {
        public static int add(int a, int b) {
            // Function implementation
        }

        public static void main(String[] args) {
            Scanner scanner = new Scanner(System.in);
            // Function body
        }

    }

Usage
-----
>>> from cskel.codegen import generate
>>> from cskel.targets import Target
>>> text = generate(program, Target.PYTHON)
"""

from typing import Any, Optional
import logging

from cskel.ast import DeclarationVisitor, Function, Include, Program, Variable
from cskel.targets import (
    JAVA_SCANNER_HEADERS,
    JAVA_SCANNER_IMPORT,
    Target,
    java_default,
    java_type,
    python_default,
)

logger = logging.getLogger(__name__)

INDENT = "    "


def _text(value: Any) -> str:
    """Render a possibly missing node field."""
    return "" if value is None else str(value)


# =============================================================================
# Java Emitter
# =============================================================================

class JavaEmitter(DeclarationVisitor):
    """Renders declarations as members of a Java class."""

    def __init__(self):
        self.imports: list[str] = []

    def visit_Include(self, node: Include) -> str:
        # One Scanner import however many I/O headers are included
        if node.library in JAVA_SCANNER_HEADERS and JAVA_SCANNER_IMPORT not in self.imports:
            self.imports.append(JAVA_SCANNER_IMPORT)
        return ""

    def visit_Function(self, node: Function) -> str:
        if node.is_entry_point:
            return (
                f"{INDENT}public static void main(String[] args) {{\n"
                f"{INDENT * 2}Scanner scanner = new Scanner(System.in);\n"
                f"{INDENT * 2}// Function body\n"
                f"{INDENT}}}\n\n"
            )

        params = ", ".join(
            f"{java_type(p.param_type)} {_text(p.name)}" for p in (node.parameters or ())
        )
        return (
            f"{INDENT}public static {java_type(node.return_type)} {_text(node.name)}({params}) {{\n"
            f"{INDENT * 2}// Function implementation\n"
            f"{INDENT}}}\n\n"
        )

    def visit_Variable(self, node: Variable) -> str:
        type_name = java_type(node.data_type)
        value = node.initializer or java_default(type_name)
        return f"{INDENT}{type_name} {_text(node.name)} = {value};\n"

    def generic_visit(self, node: Any) -> str:
        return ""

    def assemble(self, fragments: list[str], has_main: bool) -> str:
        members = "".join(fragments)
        if not has_main:
            return members

        header = ""
        if self.imports:
            header = "\n".join(self.imports) + "\n\n"
        return f"{header}public class Main {{\n{members}}}\n"


# =============================================================================
# Python Emitter
# =============================================================================

class PythonEmitter(DeclarationVisitor):
    """Renders declarations as module-level Python."""

    MAIN_GUARD = 'if __name__ == "__main__":\n' + INDENT + "main()\n"

    def visit_Include(self, node: Include) -> str:
        # Python needs no import for the covered I/O primitives
        return ""

    def visit_Function(self, node: Function) -> str:
        if node.is_entry_point:
            return (
                "def main():\n"
                f"{INDENT}# Function body\n"
                f"{INDENT}pass\n\n"
            )

        params = ", ".join(_text(p.name) for p in (node.parameters or ()))
        return (
            f"def {_text(node.name)}({params}):\n"
            f"{INDENT}# Function implementation\n"
            f"{INDENT}pass\n\n"
        )

    def visit_Variable(self, node: Variable) -> str:
        value = node.initializer or python_default(node.data_type)
        return f"{_text(node.name)} = {value}\n"

    def generic_visit(self, node: Any) -> str:
        return ""

    def assemble(self, fragments: list[str], has_main: bool) -> str:
        body = "".join(fragments)
        if not has_main:
            return body
        if body and not body.endswith("\n\n"):
            body += "\n"
        return body + self.MAIN_GUARD


EMITTERS = {
    Target.JAVA: JavaEmitter,
    Target.PYTHON: PythonEmitter,
}

COMMENT_PREFIXES = {
    Target.JAVA: "//",
    Target.PYTHON: "#",
}


# =============================================================================
# Code Generator
# =============================================================================

class CodeGenerator:
    """
    Generates skeleton source for one target language.

    Generation is pure: a fresh emitter is created on every call, so the
    same program and target always give the same text.

    Attributes:
        target: Output language
        header_comment: Optional comment placed on the first line
    """

    def __init__(self, target: Target = Target.JAVA, header_comment: Optional[str] = None):
        self.target = Target(target)
        self.header_comment = header_comment

    def generate(self, program: Program) -> str:
        """
        Render the program.

        Args:
            program: Root of the declaration tree

        Returns:
            Generated source text
        """
        emitter = EMITTERS[self.target]()
        fragments = emitter.visit(program)
        has_main = program.find_entry_point() is not None

        output = emitter.assemble(fragments, has_main)
        if self.header_comment:
            output = f"{COMMENT_PREFIXES[self.target]} {self.header_comment}\n{output}"

        logger.debug(
            f"Generated {len(output)} characters of {self.target.value} "
            f"from {len(program.declarations)} declarations"
        )
        return output


def generate(program: Program, target: Target = Target.JAVA) -> str:
    """
    Render a declaration tree as skeleton source.

    Args:
        program: Output of cskel.parser.parse
        target: Target.JAVA or Target.PYTHON

    Returns:
        Generated source text
    """
    return CodeGenerator(target).generate(program)
