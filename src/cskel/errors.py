"""
cskel Error Hierarchy
=====================

This module defines the exception hierarchy for the cskel translator.
All exceptions inherit from CSkelError, allowing callers to catch every
translator-related error with a single except clause.

The translation pipeline itself (tokenize, parse, generate) is total:
malformed source produces an incomplete or empty result, never an
exception. The errors below belong to the layer that calls the pipeline.

Exception Hierarchy
-------------------
CSkelError (base)
├── UnknownTargetError - target language selector is not recognized
└── CompilationError - unexpected fault caught at the compiler boundary

Error Message Format
--------------------
    error: unknown target language 'rust'
    hint: choose one of: java, python
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class CSkelError(Exception):
    """
    Base exception for all cskel errors.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with its optional hint.

        Example output:
            error: unknown target language 'rust'
            hint: choose one of: java, python
        """
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Target Selection Errors
# =============================================================================

class UnknownTargetError(CSkelError):
    """
    The requested target language is not one of the supported targets.

    Raised by the collaborator before the generator is invoked; the
    generator itself only knows the two mapping tables.
    """

    def __init__(self, name: str, choices: Optional[list[str]] = None):
        self.name = name
        self.choices = choices or []
        hint = None
        if self.choices:
            hint = f"choose one of: {', '.join(self.choices)}"
        super().__init__(f"unknown target language {name!r}", hint=hint)


# =============================================================================
# Compilation Boundary Errors
# =============================================================================

class CompilationError(CSkelError):
    """
    Unexpected fault raised while running the pipeline.

    The pipeline stages are designed never to raise, so this only wraps
    faults such as a violated shape assumption. The message is already
    presentation-ready and is not prefixed.

    Attributes:
        filename: Source the compilation was running on
        cause: The original exception
    """

    def __init__(
        self,
        message: str,
        filename: str = "<input>",
        cause: Optional[BaseException] = None,
    ):
        self.filename = filename
        self.cause = cause
        super().__init__(message)

    def _format_message(self) -> str:
        """Return the generic compilation-failure message."""
        return f"Compilation Error: {self.message}"
