"""
Static lookup tables: primitive types and predicates to JSON Schema keywords.

Both tables are read-only and built once at import time.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from decimal import Decimal
from types import MappingProxyType
from typing import Any, NamedTuple

from ..schema_ast.nodes import Primitive

TYPE_TABLE: MappingProxyType[Primitive, MappingProxyType[str, str]] = MappingProxyType(
    {
        Primitive.STRING: MappingProxyType({"type": "string"}),
        Primitive.INTEGER: MappingProxyType({"type": "integer"}),
        Primitive.TRUE: MappingProxyType({"type": "boolean"}),
        Primitive.FALSE: MappingProxyType({"type": "boolean"}),
        Primitive.NULL: MappingProxyType({"type": "null"}),
        Primitive.DECIMAL: MappingProxyType({"type": "number"}),
        Primitive.FLOAT: MappingProxyType({"type": "number"}),
        Primitive.DICT: MappingProxyType({"type": "object"}),
        Primitive.LIST: MappingProxyType({"type": "array"}),
        Primitive.DATE: MappingProxyType({"type": "string", "format": "date"}),
        Primitive.DATETIME: MappingProxyType({"type": "string", "format": "date-time"}),
        Primitive.TIME: MappingProxyType({"type": "string", "format": "time"}),
    }
)


def type_entry(value: Any) -> dict[str, str] | None:
    """Return a copy of the type table entry for a primitive, class or name."""
    primitive = Primitive.coerce(value)
    if primitive is None:
        return None
    return dict(TYPE_TABLE[primitive])


# Transforms receive the predicate operand and return the keyword value.
# Returning None means there is nothing to emit.


def to_number(value: Any) -> Any:
    """Turn Decimal operands into JSON numbers; anything else passes through."""
    if isinstance(value, Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return float(value)
    return value


def to_integer(value: Any) -> int:
    return int(value)


def to_list(value: Any) -> list[Any]:
    return [to_number(item) for item in value]


_INLINE_FLAGS = ((re.IGNORECASE, "i"), (re.MULTILINE, "m"), (re.DOTALL, "s"), (re.VERBOSE, "x"))

_LEADING_FLAGS = re.compile(r"\(\?[aiLmsux]+\)")


def render_pattern(value: Any) -> str:
    """
    Render a regex constraint as its source text.

    Flags set at compile time are kept as a leading inline group, so
    ``re.compile("^a$", re.IGNORECASE)`` renders as ``(?i)^a$``.
    """
    if not isinstance(value, re.Pattern):
        return str(value)

    flags = "".join(letter for flag, letter in _INLINE_FLAGS if value.flags & flag)
    if flags and not _LEADING_FLAGS.match(value.pattern):
        return f"(?{flags}){value.pattern}"
    return value.pattern


def resolve_type(value: Any) -> str | None:
    entry = type_entry(value)
    return entry["type"] if entry else None


def exclude(value: Any) -> dict[str, list[Any]]:
    return {"enum": to_list(value)}


def constant(result: Any) -> Callable[[Any], Any]:
    """Build a transform that ignores the operand."""
    return lambda _: result


class PredicateRule(NamedTuple):
    """JSON Schema keyword produced by a predicate, and how to build its value."""

    keyword: str
    transform: Callable[[Any], Any]


PREDICATE_TABLE: MappingProxyType[str, PredicateRule] = MappingProxyType(
    {
        "type?": PredicateRule("type", resolve_type),
        "min_size?": PredicateRule("minLength", to_integer),
        "max_size?": PredicateRule("maxLength", to_integer),
        "min_items?": PredicateRule("minItems", to_integer),
        "max_items?": PredicateRule("maxItems", to_integer),
        "gt?": PredicateRule("exclusiveMinimum", to_number),
        "gteq?": PredicateRule("minimum", to_number),
        "lt?": PredicateRule("exclusiveMaximum", to_number),
        "lteq?": PredicateRule("maximum", to_number),
        "format?": PredicateRule("format", render_pattern),
        "included_in?": PredicateRule("enum", to_list),
        "excluded_from?": PredicateRule("not", exclude),
        "eql?": PredicateRule("const", to_number),
        "is?": PredicateRule("const", to_number),
        "uri?": PredicateRule("format", constant("uri")),
    }
)

# Array length shares predicate names with string length
ARRAY_PREDICATE_OVERRIDE: MappingProxyType[str, str] = MappingProxyType(
    {
        "min_size?": "min_items?",
        "max_size?": "max_items?",
    }
)

# Metadata keys copied verbatim into compiled entries
ANNOTATION_KEYS: tuple[str, ...] = ("title", "description", "format")

SCHEMA_DIALECT = "http://json-schema.org/draft-06/schema#"
