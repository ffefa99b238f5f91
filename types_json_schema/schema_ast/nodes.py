"""
AST (Abstract Syntax Tree) node definitions for declared types.

These nodes describe a type definition as produced by a host type system:
primitives, constraint rules, sums, intersections and object shapes.
The set of node kinds is closed; the compiler handles every one of them.
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar


class Primitive(str, Enum):
    """Concrete type identifiers understood by the type table."""

    STRING = "string"
    INTEGER = "integer"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    DECIMAL = "decimal"
    FLOAT = "float"
    DICT = "dict"
    LIST = "list"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"

    @classmethod
    def coerce(cls, value: Any) -> Primitive | None:
        """
        Resolve a primitive from an enum member, its value or a Python class.

        Args:
            value: A Primitive, a primitive name such as "string", or a class such as str

        Returns:
            The matching Primitive, or None when the value names no known primitive
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return None
        if isinstance(value, type):
            return _PYTHON_TYPES.get(value)
        return None


_PYTHON_TYPES: dict[type, Primitive] = {
    str: Primitive.STRING,
    int: Primitive.INTEGER,
    type(None): Primitive.NULL,
    Decimal: Primitive.DECIMAL,
    float: Primitive.FLOAT,
    dict: Primitive.DICT,
    list: Primitive.LIST,
    datetime.date: Primitive.DATE,
    datetime.datetime: Primitive.DATETIME,
    datetime.time: Primitive.TIME,
}


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""

    kind: ClassVar[str] = ""

    # Annotations attached to the declared type (title, description, format, $ref, ...)
    meta: Mapping[str, Any] = field(default_factory=dict, kw_only=True)

    def with_meta(self, **meta: Any) -> Node:
        """Return a copy of this node with extra metadata merged in."""
        return replace(self, meta={**self.meta, **meta})


@dataclass(frozen=True)
class Nominal(Node):
    """A bare, unconstrained primitive type."""

    kind: ClassVar[str] = "nominal"

    primitive: Primitive = Primitive.STRING


@dataclass(frozen=True)
class Constructor(Node):
    """A type wrapped with a coercion function; the function is opaque here."""

    kind: ClassVar[str] = "constructor"

    type: Node | None = None
    fn: Any = None


@dataclass(frozen=True)
class Predicate(Node):
    """A named constraint such as ``min_size?`` with its operand."""

    kind: ClassVar[str] = "predicate"

    name: str = ""
    operand: Any = None


@dataclass(frozen=True)
class Constrained(Node):
    """A type together with the rule its values must satisfy."""

    kind: ClassVar[str] = "constrained"

    type: Node | None = None
    rule: Node | None = None


@dataclass(frozen=True)
class Sum(Node):
    """A type satisfied by any one of its disjuncts."""

    kind: ClassVar[str] = "sum"

    types: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Intersection(Node):
    """A type (or rule) satisfied by both operands at once."""

    kind: ClassVar[str] = "intersection"

    left: Node | None = None
    right: Node | None = None


@dataclass(frozen=True)
class Key(Node):
    """A named field of a schema, marked required or optional."""

    kind: ClassVar[str] = "key"

    name: str = ""
    type: Node | None = None
    required: bool = True


@dataclass(frozen=True)
class Schema(Node):
    """A field set: an object type with named members."""

    kind: ClassVar[str] = "schema"

    keys: tuple[Key, ...] = ()


@dataclass(frozen=True)
class MappingType(Node):
    """A bare object type, optionally carrying a field set."""

    kind: ClassVar[str] = "mapping"

    schema: Schema | None = None


@dataclass(frozen=True)
class Aggregate(Node):
    """A named, referenceable object type (a struct)."""

    kind: ClassVar[str] = "aggregate"

    name: str = ""
    schema: Schema | None = None


@dataclass(frozen=True)
class ArrayType(Node):
    """An array whose elements all have the member type."""

    kind: ClassVar[str] = "array"

    member: Node | None = None


@dataclass(frozen=True)
class EnumType(Node):
    """An enumeration over a wrapped type.

    The allowed values travel inside the wrapped type as an ``included_in?``
    predicate; ``values`` keeps the declared mapping for reference only.
    """

    kind: ClassVar[str] = "enum"

    type: Node | None = None
    values: tuple[Any, ...] = ()


NODE_TYPES: tuple[type[Node], ...] = (
    Nominal,
    Constructor,
    Constrained,
    Predicate,
    Sum,
    Intersection,
    MappingType,
    Aggregate,
    ArrayType,
    Schema,
    Key,
    EnumType,
)
