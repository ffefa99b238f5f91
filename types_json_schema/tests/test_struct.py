import re
import unittest

from types_json_schema.schema_ast import Intersection, Sum
from types_json_schema.tests.ast_builders import (
    BOOL,
    DATE,
    DATETIME,
    HASH,
    INTEGER,
    NIL,
    STRING,
    TIME,
    array_of,
    constrained,
    enum,
    hash_schema,
    key,
    schema,
    struct,
)
from types_json_schema.tests.schema_case import SchemaTestCase

EMAIL_PATTERN = re.compile(r"\A[\w+\-.]+@[a-z\d-]+(\.[a-z]+)*\.[a-z]+\Z", re.IGNORECASE)

AnotherStruct = struct("AnotherStruct", key("something", STRING))

VariableList = constrained(array_of(Sum((STRING, HASH))), min_size=1).with_meta(
    description="Allow an array of strings or multiple hashes"
)

EmailType = constrained(STRING, format=EMAIL_PATTERN).with_meta(description="The internally used pattern")

ArrayOfStrings = constrained(array_of(STRING), min_size=1)

NilableString = Sum((STRING, NIL))

BasicHash = hash_schema(name=STRING)

ExtendedHash = Intersection(hash_schema(age=INTEGER), BasicHash)

StructTest = struct(
    "StructTest",
    key("data", Sum((STRING, HASH))),
    key("string", constrained(STRING, min_size=1, max_size=255)),
    key("list", VariableList),
    key("basics", array_of(BasicHash), required=False),
    key("null", NilableString, required=False),
    key("email", EmailType, required=False),
    key("super", BOOL, required=False),
    key("start", DATE, required=False),
    key("end", DATETIME, required=False),
    key("epoch", TIME, required=False),
    key("meta", STRING.with_meta(format="email"), required=False),
    key("enum", enum(STRING, "draft", "published", "archived"), required=False),
    key("array", ArrayOfStrings, required=False),
    key("inter", ExtendedHash, required=False),
    key("ref", AnotherStruct.with_meta(**{"$ref": "SomeRef"}), required=False),
    key("refs", array_of(AnotherStruct.with_meta(**{"$ref": "SomeRef"})), required=False),
    key("nested", struct("Nested", key("deep", INTEGER)), required=False),
)


class TestStruct(SchemaTestCase):
    def test_struct(self):
        type_node = StructTest.with_meta(title="Title", description="description")

        self.assertConforms(
            type_node,
            {
                "title": "Title",
                "description": "description",
                "type": "object",
                "properties": {
                    "data": {"anyOf": [{"type": "string"}, {"type": "object"}]},
                    "string": {"type": "string", "minLength": 1, "maxLength": 255},
                    "list": {
                        "type": "array",
                        "description": "Allow an array of strings or multiple hashes",
                        "items": {"anyOf": [{"type": "string"}, {"type": "object"}]},
                        "minItems": 1,
                    },
                    "basics": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {"name": {"type": "string"}},
                            "required": ["name"],
                        },
                    },
                    "null": {"anyOf": [{"type": "string"}, {"type": "null"}]},
                    "email": {
                        "type": "string",
                        "format": "(?i)" + EMAIL_PATTERN.pattern,
                        "description": "The internally used pattern",
                    },
                    "super": {"type": "boolean"},
                    "start": {"type": "string", "format": "date"},
                    "end": {"type": "string", "format": "date-time"},
                    "epoch": {"type": "string", "format": "time"},
                    "meta": {"type": "string", "format": "email"},
                    "enum": {"type": "string", "enum": ["draft", "published", "archived"]},
                    "array": {"type": "array", "minItems": 1, "items": {"type": "string"}},
                    "inter": {
                        "type": "object",
                        "properties": {
                            "age": {"type": "integer"},
                            "name": {"type": "string"},
                        },
                        "required": ["age", "name"],
                    },
                    "ref": {"$ref": "SomeRef"},
                    "refs": {"type": "array", "items": {"$ref": "SomeRef"}},
                    "nested": {
                        "type": "object",
                        "properties": {"deep": {"type": "integer"}},
                        "required": ["deep"],
                    },
                },
                "required": ["data", "string", "list"],
            },
        )

    def test_key_reference_short_circuits_inlining(self):
        type_node = schema(key("owner", AnotherStruct, **{"$ref": "#/definitions/Owner"}))

        self.assertConforms(
            type_node,
            {
                "type": "object",
                "properties": {"owner": {"$ref": "#/definitions/Owner"}},
                "required": ["owner"],
            },
        )

    def test_struct_without_reference_is_inlined(self):
        self.assertConforms(
            AnotherStruct,
            {
                "type": "object",
                "properties": {"something": {"type": "string"}},
                "required": ["something"],
            },
        )


if __name__ == "__main__":
    unittest.main()
