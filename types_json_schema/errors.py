"""
Exceptions raised while loading, compiling and checking schemas.
"""

from __future__ import annotations

from typing import Any


class SchemaCompilationError(Exception):
    """Base class for every error raised by this package."""

    pass


class UnknownPredicateError(SchemaCompilationError):
    """Raised when a predicate has no entry in the predicate table.

    Suppressed in loose mode, where the constraint is dropped from the output.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown predicate: {name}")


class UnsupportedNodeKind(SchemaCompilationError):
    """Raised when a node falls outside the closed set of AST kinds.

    Never suppressed: skipping a branch would yield a schema that looks
    valid but is incomplete.
    """

    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(f"Unsupported AST node kind: {kind!r}")


class CompilationDepthError(SchemaCompilationError):
    """Raised when the AST nests deeper than the configured ceiling."""

    def __init__(self, depth: int, max_depth: int):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(f"AST nesting depth {depth} exceeds the maximum of {max_depth}")


class AstLoadError(SchemaCompilationError):
    """Raised when a tagged AST payload is malformed."""

    pass


class InvalidSchemaError(SchemaCompilationError):
    """Raised when a compiled document fails the draft-06 meta-schema check."""

    pass
