import unittest

from types_json_schema.schema_ast import Nominal, Primitive, Sum
from types_json_schema.tests.ast_builders import (
    BOOL,
    HASH,
    INTEGER,
    NIL,
    STRING,
    array_of,
    hash_schema,
    key,
    schema,
)
from types_json_schema.tests.schema_case import SchemaTestCase


class TestUnion(SchemaTestCase):
    def test_identical_disjuncts_collapse(self):
        self.assertConforms(BOOL, {"type": "boolean"})
        self.assertConforms(Sum((STRING, Nominal(Primitive.STRING))), {"type": "string"})

    def test_top_level_nullable(self):
        type_node = Sum((hash_schema(word=STRING), NIL))

        self.assertConforms(
            type_node,
            {
                "type": "object",
                "nullable": True,
                "properties": {"word": {"type": "string"}},
                "required": ["word"],
            },
        )

    def test_top_level_nullable_scalar(self):
        self.assertConforms(Sum((NIL, INTEGER)), {"type": "integer", "nullable": True})

    def test_nullable_in_field_uses_any_of(self):
        type_node = schema(key("nickname", Sum((STRING, NIL)), required=False))

        self.assertConforms(
            type_node,
            {
                "type": "object",
                "properties": {"nickname": {"anyOf": [{"type": "string"}, {"type": "null"}]}},
            },
        )

    def test_nullable_in_array_uses_any_of(self):
        self.assertConforms(
            array_of(Sum((STRING, NIL))),
            {"type": "array", "items": {"anyOf": [{"type": "string"}, {"type": "null"}]}},
        )

    def test_any_of_keeps_first_seen_order_without_duplicates(self):
        type_node = Sum((STRING, HASH, STRING, INTEGER))

        self.assertConforms(
            type_node,
            {"anyOf": [{"type": "string"}, {"type": "object"}, {"type": "integer"}]},
        )

    def test_nested_unions_are_flattened(self):
        # (true | false) | nil
        self.assertConforms(Sum((BOOL, NIL)), {"type": "boolean", "nullable": True})

    def test_nested_union_with_meta_is_not_flattened(self):
        inner = Sum((STRING, INTEGER), meta={"title": "Scalar"})

        self.assertConforms(
            Sum((inner, NIL)),
            {
                "anyOf": [{"type": "string"}, {"type": "integer"}],
                "title": "Scalar",
                "nullable": True,
            },
        )

    def test_nested_union_with_meta_in_field(self):
        inner = Sum((STRING, INTEGER), meta={"title": "Scalar"})

        self.assertConforms(
            schema(key("value", Sum((inner, NIL)))),
            {
                "type": "object",
                "properties": {
                    "value": {
                        "anyOf": [
                            {"anyOf": [{"type": "string"}, {"type": "integer"}], "title": "Scalar"},
                            {"type": "null"},
                        ]
                    }
                },
                "required": ["value"],
            },
        )

    def test_three_way_union_with_null(self):
        self.assertConforms(
            Sum((STRING, INTEGER, NIL)),
            {"anyOf": [{"type": "string"}, {"type": "integer"}, {"type": "null"}]},
        )

    def test_union_meta(self):
        type_node = Sum((STRING, INTEGER), meta={"description": "Identifier"})

        self.assertConforms(
            type_node,
            {"anyOf": [{"type": "string"}, {"type": "integer"}], "description": "Identifier"},
        )


if __name__ == "__main__":
    unittest.main()
