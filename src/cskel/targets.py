"""
Target Languages and Type Tables
================================

This module defines the supported output languages and the fixed lookup
tables the generator uses to map C primitive types to each target.

Type Mapping
------------
| C type | Java    | Java default | Python default |
|--------|---------|--------------|----------------|
| int    | int     | 0            | 0              |
| float  | float   | 0.0f         | 0.0            |
| double | double  | 0.0          | 0.0            |
| char   | char    | '\\0'         | ''             |
| void   | void    | null         | None           |
| other  | Object  | null         | None           |

Java defaults are keyed on the mapped Java type; Python defaults are keyed
on the C type, since Python declarations carry no type.
"""

from enum import Enum

from cskel.errors import UnknownTargetError


# =============================================================================
# Target Enumeration
# =============================================================================

class Target(Enum):
    """Supported output languages."""

    JAVA = "java"
    PYTHON = "python"

    @property
    def file_suffix(self) -> str:
        """File extension for generated source."""
        return TARGET_SUFFIXES[self]

    @classmethod
    def names(cls) -> list[str]:
        return [target.value for target in cls]

    @classmethod
    def from_name(cls, name: "str | Target") -> "Target":
        """
        Resolve a target selector, case-insensitively.

        Args:
            name: "java", "python", or a Target member

        Returns:
            The matching Target

        Raises:
            UnknownTargetError: If name is not a supported target
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownTargetError(str(name), cls.names()) from None


TARGET_SUFFIXES: dict[Target, str] = {
    Target.JAVA: ".java",
    Target.PYTHON: ".py",
}


# =============================================================================
# Java Tables
# =============================================================================

JAVA_FALLBACK_TYPE = "Object"
JAVA_NULL = "null"

JAVA_TYPES: dict[str, str] = {
    "int": "int",
    "float": "float",
    "double": "double",
    "char": "char",
    "void": "void",
}

# Keyed on the Java type name
JAVA_DEFAULTS: dict[str, str] = {
    "int": "0",
    "float": "0.0f",
    "double": "0.0",
    "char": "'\\0'",
    "boolean": "false",
}

# Headers that pull in the Scanner import
JAVA_SCANNER_HEADERS: frozenset[str] = frozenset({"stdio.h", "stdio"})
JAVA_SCANNER_IMPORT = "import java.util.Scanner;"


# =============================================================================
# Python Tables
# =============================================================================

PYTHON_NONE = "None"

# Keyed on the C type name
PYTHON_DEFAULTS: dict[str, str] = {
    "int": "0",
    "float": "0.0",
    "double": "0.0",
    "char": "''",
    "void": "None",
}


# =============================================================================
# Lookup Functions
# =============================================================================

def java_type(c_type: str) -> str:
    """Map a C type keyword to its Java type, falling back to Object."""
    return JAVA_TYPES.get(c_type, JAVA_FALLBACK_TYPE)


def java_default(java_type_name: str) -> str:
    """Default initializer for a Java type; null for reference types."""
    return JAVA_DEFAULTS.get(java_type_name, JAVA_NULL)


def python_default(c_type: str) -> str:
    """Default initializer for a C type rendered as Python."""
    return PYTHON_DEFAULTS.get(c_type, PYTHON_NONE)
