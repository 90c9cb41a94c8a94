"""
cskel Command-Line Interface
============================

This package provides the ``cskel`` command, a Click-based front end that
reads a C source file, translates it with the cskel pipeline, and writes
the Java or Python skeleton.
"""

__all__ = ["cskel"]
