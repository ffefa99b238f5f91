"""
Parser that builds an AST from tagged JSON data.

Each node is a JSON object with a ``kind`` tag, the payload fields of that
kind and an optional ``meta`` object::

    {"kind": "key", "name": "age", "required": true,
     "type": {"kind": "nominal", "primitive": "integer"}}
"""

from __future__ import annotations

from typing import Any

from ..errors import AstLoadError, UnsupportedNodeKind
from .nodes import (
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


class AstParser:
    """Parses tagged JSON data into AST nodes."""

    def __init__(self):
        self._parsers = {
            Nominal.kind: self._parse_nominal_node,
            Constructor.kind: self._parse_constructor_node,
            Constrained.kind: self._parse_constrained_node,
            Predicate.kind: self._parse_predicate_node,
            Sum.kind: self._parse_sum_node,
            Intersection.kind: self._parse_intersection_node,
            MappingType.kind: self._parse_mapping_node,
            Aggregate.kind: self._parse_aggregate_node,
            ArrayType.kind: self._parse_array_node,
            Schema.kind: self._parse_schema_node,
            Key.kind: self._parse_key_node,
            EnumType.kind: self._parse_enum_node,
        }

    def parse(self, data: dict[str, Any]) -> Node:
        """
        Parse tagged JSON data into an AST.

        Args:
            data: The decoded JSON object for the root node

        Returns:
            The root Node

        Raises:
            UnsupportedNodeKind: If a node carries a kind outside the closed set
            AstLoadError: If a node is malformed
        """
        return self._parse_node(data, "#")

    def _parse_node(self, data: Any, path: str) -> Node:
        if not isinstance(data, dict):
            raise AstLoadError(f"{path}: expected an object, got {type(data).__name__}")
        if "kind" not in data:
            raise AstLoadError(f"{path}: missing 'kind'")

        parser = self._parsers.get(data["kind"])
        if parser is None:
            raise UnsupportedNodeKind(data["kind"])

        meta = data.get("meta") or {}
        if not isinstance(meta, dict):
            raise AstLoadError(f"{path}/meta: expected an object")

        return parser(data, path, meta)

    def _require(self, data: dict[str, Any], name: str, path: str) -> Any:
        """Fetch a mandatory payload field."""
        if name not in data:
            raise AstLoadError(f"{path}: '{data['kind']}' node is missing '{name}'")
        return data[name]

    def _parse_primitive(self, value: Any, path: str) -> Primitive:
        primitive = Primitive.coerce(value)
        if primitive is None:
            raise AstLoadError(f"{path}: unknown primitive {value!r}")
        return primitive

    def _parse_nominal_node(self, data: dict[str, Any], path: str, meta: dict[str, Any]) -> Nominal:
        primitive = self._parse_primitive(self._require(data, "primitive", path), f"{path}/primitive")
        return Nominal(primitive, meta=meta)

    def _parse_constructor_node(self, data: dict[str, Any], path: str, meta: dict[str, Any]) -> Constructor:
        inner = self._parse_node(self._require(data, "type", path), f"{path}/type")
        return Constructor(inner, meta=meta)

    def _parse_constrained_node(self, data: dict[str, Any], path: str, meta: dict[str, Any]) -> Constrained:
        inner = self._parse_node(self._require(data, "type", path), f"{path}/type")
        rule = self._parse_node(self._require(data, "rule", path), f"{path}/rule")
        return Constrained(inner, rule, meta=meta)

    def _parse_predicate_node(self, data: dict[str, Any], path: str, meta: dict[str, Any]) -> Predicate:
        name = self._require(data, "name", path)
        operand = data.get("operand")

        # type? operands name a primitive rather than carry a value
        if name == "type?" and isinstance(operand, str):
            operand = Primitive.coerce(operand) or operand

        return Predicate(name, operand, meta=meta)

    def _parse_sum_node(self, data: dict[str, Any], path: str, meta: dict[str, Any]) -> Sum:
        types = self._require(data, "types", path)
        if not isinstance(types, list) or not types:
            raise AstLoadError(f"{path}/types: expected a non-empty array")

        disjuncts = tuple(self._parse_node(t, f"{path}/types/{i}") for i, t in enumerate(types))
        return Sum(disjuncts, meta=meta)

    def _parse_intersection_node(self, data: dict[str, Any], path: str, meta: dict[str, Any]) -> Intersection:
        left = self._parse_node(self._require(data, "left", path), f"{path}/left")
        right = self._parse_node(self._require(data, "right", path), f"{path}/right")
        return Intersection(left, right, meta=meta)

    def _parse_schema_child(self, data: Any, path: str) -> Schema:
        node = self._parse_node(data, path)
        if not isinstance(node, Schema):
            raise AstLoadError(f"{path}: expected a 'schema' node, got '{node.kind}'")
        return node

    def _parse_mapping_node(self, data: dict[str, Any], path: str, meta: dict[str, Any]) -> MappingType:
        schema = None
        if data.get("schema") is not None:
            schema = self._parse_schema_child(data["schema"], f"{path}/schema")
        return MappingType(schema, meta=meta)

    def _parse_aggregate_node(self, data: dict[str, Any], path: str, meta: dict[str, Any]) -> Aggregate:
        schema = self._parse_schema_child(self._require(data, "schema", path), f"{path}/schema")
        return Aggregate(data.get("name", ""), schema, meta=meta)

    def _parse_array_node(self, data: dict[str, Any], path: str, meta: dict[str, Any]) -> ArrayType:
        member = self._parse_node(self._require(data, "member", path), f"{path}/member")
        return ArrayType(member, meta=meta)

    def _parse_schema_node(self, data: dict[str, Any], path: str, meta: dict[str, Any]) -> Schema:
        keys_data = data.get("keys", [])
        if not isinstance(keys_data, list):
            raise AstLoadError(f"{path}/keys: expected an array")

        keys = []
        for i, key_data in enumerate(keys_data):
            key_path = f"{path}/keys/{i}"
            node = self._parse_node(key_data, key_path)
            if not isinstance(node, Key):
                raise AstLoadError(f"{key_path}: schema members must be 'key' nodes")
            keys.append(node)

        return Schema(tuple(keys), meta=meta)

    def _parse_key_node(self, data: dict[str, Any], path: str, meta: dict[str, Any]) -> Key:
        name = self._require(data, "name", path)
        inner = self._parse_node(self._require(data, "type", path), f"{path}/type")
        return Key(name, inner, bool(data.get("required", True)), meta=meta)

    def _parse_enum_node(self, data: dict[str, Any], path: str, meta: dict[str, Any]) -> EnumType:
        inner = self._parse_node(self._require(data, "type", path), f"{path}/type")
        return EnumType(inner, tuple(data.get("values", ())), meta=meta)
