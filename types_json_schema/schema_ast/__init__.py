"""
Schema AST (Abstract Syntax Tree) module.

Contains the AST node definitions and the parser for tagged JSON ASTs.
"""

from __future__ import annotations

from .nodes import (
    NODE_TYPES,
    Aggregate,
    ArrayType,
    Constrained,
    Constructor,
    EnumType,
    Intersection,
    Key,
    MappingType,
    Node,
    Nominal,
    Predicate,
    Primitive,
    Schema,
    Sum,
)
from .parser import AstParser

__all__ = [
    "Node",
    "Primitive",
    "Nominal",
    "Constructor",
    "Constrained",
    "Predicate",
    "Sum",
    "Intersection",
    "MappingType",
    "Aggregate",
    "ArrayType",
    "Schema",
    "Key",
    "EnumType",
    "NODE_TYPES",
    "AstParser",
]
