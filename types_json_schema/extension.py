"""
Entry points for host type systems.

A host type object only has to expose ``to_ast()``; mixing in
``JsonSchemaMixin`` gives every such type a ``json_schema()`` method.
"""

from __future__ import annotations

from typing import Any, Protocol

from .compiler import SchemaCompiler
from .config import DEFAULT_MAX_DEPTH, CompilerOptions
from .schema_ast.nodes import Node


class SupportsAst(Protocol):
    """Anything that can describe itself as a type AST."""

    def to_ast(self) -> Node: ...


def json_schema(
    type_or_ast: Node | SupportsAst,
    root: bool = False,
    loose: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[str, Any]:
    """
    Compile a declared type, or its AST, into a JSON Schema document.

    Args:
        type_or_ast: An AST node or a host type object exposing to_ast()
        root: Whether to add the "$schema" marker
        loose: Whether to drop unknown predicates instead of failing
        max_depth: Deepest AST nesting accepted

    Returns:
        The schema document
    """
    node = type_or_ast if isinstance(type_or_ast, Node) else type_or_ast.to_ast()
    options = CompilerOptions(root=root, loose=loose, max_depth=max_depth)
    return SchemaCompiler(options).compile(node)


class JsonSchemaMixin:
    """Adds ``json_schema()`` to host types that implement ``to_ast()``."""

    def to_ast(self) -> Node:
        raise NotImplementedError

    def json_schema(
        self, root: bool = False, loose: bool = False, max_depth: int = DEFAULT_MAX_DEPTH
    ) -> dict[str, Any]:
        return json_schema(self.to_ast(), root=root, loose=loose, max_depth=max_depth)
