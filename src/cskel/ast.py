"""
cskel Declaration Tree
======================

This module defines the node types produced by the declaration parser.
The tree is deliberately shallow: only top-level declarations are
recognized, and function bodies are never parsed into statements.

Node Hierarchy
--------------
Program - root node owning every declaration in source order
└── Declaration (closed union)
    ├── Include - #include <library>
    ├── Function - return type, name, parameters, empty body
    └── Variable - data type, name, optional single-token initializer

Design Notes
------------
- All nodes are frozen dataclasses; sequences are tuples, so a tree
  cannot be modified once the parser has built it
- Field values are the exact lexemes captured at parse time and are
  never checked against a type system
- Declarations are never shared between trees: every parse builds new nodes
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union


# =============================================================================
# Declaration Nodes
# =============================================================================

@dataclass(frozen=True)
class Include:
    """
    Include directive.

    Attributes:
        library: Text of the token that followed '<'
    """
    library: str = ""


@dataclass(frozen=True)
class Parameter:
    """
    Function parameter.

    Attributes:
        param_type: Primitive type keyword
        name: Parameter name
    """
    param_type: str = ""
    name: str = ""


@dataclass(frozen=True)
class Function:
    """
    Function declaration.

    Attributes:
        return_type: Primitive type keyword
        name: Function name
        parameters: Parameters in declaration order
        body: Always empty; bodies are not parsed
    """
    return_type: str = ""
    name: str = ""
    parameters: tuple[Parameter, ...] = ()
    body: tuple = field(default=(), init=False)

    @property
    def is_entry_point(self) -> bool:
        """Return True for the program's main() function."""
        return self.name == "main"


@dataclass(frozen=True)
class Variable:
    """
    Top-level variable declaration.

    Attributes:
        data_type: Primitive type keyword
        name: Variable name
        initializer: Text of the single token after '=', or None
    """
    data_type: str = ""
    name: str = ""
    initializer: Optional[str] = None


Declaration = Union[Include, Function, Variable]


# =============================================================================
# Program Root Node
# =============================================================================

@dataclass(frozen=True)
class Program:
    """
    Root of the declaration tree.

    Attributes:
        declarations: Top-level declarations in source order
    """
    declarations: tuple[Declaration, ...] = ()

    def functions(self) -> list[Function]:
        return [d for d in self.declarations if isinstance(d, Function)]

    def find_entry_point(self) -> Optional[Function]:
        """Return the first main() function, if any."""
        for decl in self.declarations:
            if isinstance(decl, Function) and decl.is_entry_point:
                return decl
        return None


# =============================================================================
# Visitor Pattern
# =============================================================================

class DeclarationVisitor:
    """
    Base class for declaration tree visitors.

    Subclasses override visit_Include, visit_Function and visit_Variable.
    Nodes of any other type go to generic_visit. Visiting a Program
    returns the results for its declarations in order.

    Usage:
        class NameCollector(DeclarationVisitor):
            def visit_Function(self, node):
                return node.name

        names = NameCollector().visit(program)  # one entry per declaration
    """

    def visit(self, node: Any) -> Any:
        """Dispatch to visit_<ClassName>."""
        method_name = f"visit_{node.__class__.__name__}"
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: Any) -> Any:
        """Default handling for nodes without a specific visit method."""
        return None

    def visit_Program(self, node: Program):
        return [self.visit(decl) for decl in node.declarations]
