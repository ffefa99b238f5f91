"""Types to JSON Schema

Compiles type-definition ASTs, as produced by a host type system, into
JSON Schema (draft-06) documents.
"""

__version__ = "0.1.0"

from .checker import check_schema
from .compiler import SchemaCompiler
from .config import CompilerOptions, OutputConfig, OutputMode
from .errors import (
    AstLoadError,
    CompilationDepthError,
    InvalidSchemaError,
    SchemaCompilationError,
    UnknownPredicateError,
    UnsupportedNodeKind,
)
from .extension import JsonSchemaMixin, json_schema
from .schema_ast import AstParser

__all__ = [
    "json_schema",
    "JsonSchemaMixin",
    "SchemaCompiler",
    "CompilerOptions",
    "OutputConfig",
    "OutputMode",
    "AstParser",
    "check_schema",
    "SchemaCompilationError",
    "UnknownPredicateError",
    "UnsupportedNodeKind",
    "CompilationDepthError",
    "AstLoadError",
    "InvalidSchemaError",
]
