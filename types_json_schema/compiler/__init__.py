"""
Compiler module: type AST to JSON Schema.
"""

from __future__ import annotations

from .compiler import SchemaCompiler
from .context import CompilationContext
from .merge import deep_merge, unique
from .metadata import annotations, overlay
from .tables import (
    ANNOTATION_KEYS,
    ARRAY_PREDICATE_OVERRIDE,
    PREDICATE_TABLE,
    SCHEMA_DIALECT,
    TYPE_TABLE,
    PredicateRule,
)

__all__ = [
    "SchemaCompiler",
    "CompilationContext",
    "deep_merge",
    "unique",
    "annotations",
    "overlay",
    "ANNOTATION_KEYS",
    "ARRAY_PREDICATE_OVERRIDE",
    "PREDICATE_TABLE",
    "SCHEMA_DIALECT",
    "TYPE_TABLE",
    "PredicateRule",
]
