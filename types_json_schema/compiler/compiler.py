"""
Compiler that turns a type AST into a JSON Schema document.

Every node kind has one handler returning a fresh fragment; parents fold
the fragments of their children into their own. No state is kept between
calls, so one compiler can serve any number of independent ASTs.
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import CompilerOptions
from ..errors import CompilationDepthError, UnknownPredicateError, UnsupportedNodeKind
from ..schema_ast.nodes import (
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
from .context import CompilationContext
from .merge import deep_merge, unique
from .metadata import annotations, overlay
from .tables import ARRAY_PREDICATE_OVERRIDE, PREDICATE_TABLE, SCHEMA_DIALECT, type_entry

logger = logging.getLogger(__name__)

NULL_ENTRY = {"type": "null"}

# Annotations of an array member that describe the array itself
ARRAY_HOISTED_KEYS = ("title", "description")


class SchemaCompiler:
    """Compiles type ASTs into JSON Schema (draft-06) documents."""

    def __init__(self, options: CompilerOptions | None = None):
        """
        Initialize the compiler.

        Args:
            options: Compilation options; defaults are used when omitted
        """
        self.options = options or CompilerOptions()

    def compile(self, node: Node) -> dict[str, Any]:
        """
        Compile an AST into a JSON Schema document.

        Args:
            node: Root of the type AST

        Returns:
            The schema document, carrying "$schema" when the root option is set

        Raises:
            UnknownPredicateError: If a predicate is not in the table and loose mode is off
            UnsupportedNodeKind: If the AST contains a node outside the closed kind set
            CompilationDepthError: If the AST nests deeper than max_depth
        """
        document = dict(self.visit(node, CompilationContext()))
        if self.options.root:
            document["$schema"] = SCHEMA_DIALECT
        return document

    def visit(self, node: Node, ctx: CompilationContext) -> dict[str, Any]:
        """Route a node to its handler and apply its metadata."""
        if ctx.depth > self.options.max_depth:
            raise CompilationDepthError(ctx.depth, self.options.max_depth)

        match node:
            case Nominal():
                fragment = self._compile_nominal(node, ctx)
            case Constructor():
                fragment = self._compile_constructor(node, ctx)
            case Constrained():
                fragment = self._compile_constrained(node, ctx)
            case Predicate():
                fragment = self._compile_predicate(node, ctx)
            case Sum():
                fragment = self._compile_sum(node, ctx)
            case Intersection():
                fragment = self._compile_intersection(node, ctx)
            case MappingType():
                fragment = self._compile_mapping(node, ctx)
            case Aggregate():
                fragment = self._compile_aggregate(node, ctx)
            case ArrayType():
                fragment = self._compile_array(node, ctx)
            case Schema():
                fragment = self._compile_schema(node, ctx)
            case Key():
                fragment = self._compile_key(node, ctx)
            case EnumType():
                fragment = self._compile_enum(node, ctx)
            case _:
                raise UnsupportedNodeKind(getattr(node, "kind", None) or type(node).__name__)

        return overlay(fragment, node.meta)

    # Leaves

    def _compile_nominal(self, node: Nominal, ctx: CompilationContext) -> dict[str, Any]:
        return type_entry(node.primitive) or {}

    def _compile_predicate(self, node: Predicate, ctx: CompilationContext) -> dict[str, Any]:
        """
        Compile a predicate into a single keyword.

        Length predicates are shared by strings and arrays, so when the left
        operand of the enclosing rule is an array they are renamed first.
        """
        name = node.name
        if ctx.left_type is Primitive.LIST:
            name = ARRAY_PREDICATE_OVERRIDE.get(name, name)

        rule = PREDICATE_TABLE.get(name)
        if rule is None:
            if self.options.loose:
                logger.debug("Dropping unmapped predicate %s", node.name)
                return {}
            raise UnknownPredicateError(node.name)

        value = rule.transform(node.operand)
        if value is None:
            logger.debug("Predicate %s has no schema equivalent for %r", node.name, node.operand)
            return {}

        return {rule.keyword: value}

    # Wrappers

    def _compile_constructor(self, node: Constructor, ctx: CompilationContext) -> dict[str, Any]:
        return self.visit(node.type, ctx.descend())

    def _compile_enum(self, node: EnumType, ctx: CompilationContext) -> dict[str, Any]:
        # Allowed values come from the included_in? predicate of the wrapped type
        return self.visit(node.type, ctx.descend())

    def _compile_constrained(self, node: Constrained, ctx: CompilationContext) -> dict[str, Any]:
        base = self.visit(node.type, ctx.descend())
        rule = self.visit(node.rule, ctx.descend(left_type=self._concrete_type(node.type)))
        return deep_merge(base, rule)

    # Combinators

    def _compile_sum(self, node: Sum, ctx: CompilationContext) -> dict[str, Any]:
        """
        Compile a union.

        Each disjunct is compiled in isolation; structurally equal results
        collapse. A top-level union of one type with null becomes that type
        marked nullable, anywhere else unions are spelled out with anyOf.
        """
        disjunct_ctx = ctx.descend(in_sum=True)
        results = unique(self.visit(t, disjunct_ctx) for t in self._disjuncts(node))

        if len(results) == 1:
            return results[0]

        if ctx.top_level and len(results) == 2 and NULL_ENTRY in results:
            other = next(r for r in results if r != NULL_ENTRY)
            return {**other, "nullable": True}

        return {"anyOf": results}

    def _disjuncts(self, node: Sum) -> list[Node]:
        """Flatten nested unions that carry no metadata of their own."""
        disjuncts: list[Node] = []
        for t in node.types:
            if isinstance(t, Sum) and not t.meta:
                disjuncts.extend(self._disjuncts(t))
            else:
                disjuncts.append(t)
        return disjuncts

    def _compile_intersection(self, node: Intersection, ctx: CompilationContext) -> dict[str, Any]:
        left = self.visit(node.left, ctx.descend())
        left_type = self._concrete_type(node.left) or ctx.left_type
        right = self.visit(node.right, ctx.descend(left_type=left_type))
        return deep_merge(left, right)

    def _concrete_type(self, node: Node | None) -> Primitive | None:
        """Resolve the primitive a node stands for, if it has a single one."""
        match node:
            case Nominal(primitive=primitive):
                return primitive
            case Predicate(name="type?", operand=operand):
                return Primitive.coerce(operand)
            case Constrained(type=inner) | Constructor(type=inner) | EnumType(type=inner):
                return self._concrete_type(inner)
            case Intersection(left=left):
                return self._concrete_type(left)
            case ArrayType():
                return Primitive.LIST
            case Schema() | MappingType() | Aggregate():
                return Primitive.DICT
            case _:
                return None

    # Structures

    def _reference(self, node: Node, ctx: CompilationContext) -> Any:
        """The $ref of a node, falling back to the $ref of the enclosing key."""
        return node.meta.get("$ref", ctx.key_meta.get("$ref"))

    def _object_reference(self, ref: Any, ctx: CompilationContext) -> dict[str, Any]:
        # Array items carry the bare reference
        if ctx.in_array:
            return {"$ref": ref}
        return {"type": "object", "$ref": ref}

    def _compile_mapping(self, node: MappingType, ctx: CompilationContext) -> dict[str, Any]:
        ref = self._reference(node, ctx)
        if ref is not None:
            return self._object_reference(ref, ctx)

        if node.schema is not None:
            return self.visit(node.schema, ctx.descend())
        return {"type": "object"}

    def _compile_aggregate(self, node: Aggregate, ctx: CompilationContext) -> dict[str, Any]:
        # A reference always wins over inlining the structure
        ref = self._reference(node, ctx)
        if ref is not None:
            return {"$ref": ref}

        if node.schema is None:
            return {"type": "object"}
        return self.visit(node.schema, ctx.descend())

    def _compile_array(self, node: ArrayType, ctx: CompilationContext) -> dict[str, Any]:
        items = dict(self.visit(node.member, ctx.descend(in_array=True, left_type=None)))

        hoisted = annotations(node.member.meta, ARRAY_HOISTED_KEYS)
        for key, value in hoisted.items():
            if items.get(key) == value:
                del items[key]

        return {"type": "array", "items": items, **hoisted}

    def _compile_schema(self, node: Schema, ctx: CompilationContext) -> dict[str, Any]:
        ref = self._reference(node, ctx)
        if ref is not None:
            return self._object_reference(ref, ctx)

        properties: dict[str, Any] = {}
        required: list[str] = []

        for key in node.keys:
            properties[key.name] = self.visit(key, ctx.descend())
            if key.required and key.name not in required:
                required.append(key.name)

        fragment: dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            fragment["required"] = required
        return fragment

    def _compile_key(self, node: Key, ctx: CompilationContext) -> dict[str, Any]:
        field_ctx = ctx.descend(
            key=node.name,
            key_meta=node.meta,
            in_array=False,
            in_sum=False,
            left_type=None,
        )
        return self.visit(node.type, field_ctx)
