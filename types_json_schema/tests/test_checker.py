import json
from decimal import Decimal

import pytest

from types_json_schema import InvalidSchemaError, check_schema
from types_json_schema.output import AtomicWriter


class TestCheckSchema:
    def test_valid_document(self):
        check_schema({"type": "object", "properties": {"a": {"type": "string"}}, "nullable": True})

    def test_invalid_type_name(self):
        with pytest.raises(InvalidSchemaError, match="draft-06"):
            check_schema({"type": "text"})

    def test_invalid_keyword_value(self):
        with pytest.raises(InvalidSchemaError):
            check_schema({"type": "string", "minLength": -1})

    def test_not_serializable(self):
        with pytest.raises(InvalidSchemaError, match="not JSON serializable"):
            check_schema({"type": "number", "minimum": Decimal("0.5")})


class TestAtomicWriter:
    def test_write(self, tmp_path):
        path = tmp_path / "nested" / "schema.json"

        AtomicWriter().write(path, '{"type": "string"}\n')

        assert json.loads(path.read_text()) == {"type": "string"}
        assert list(path.parent.glob("*.tmp")) == []

    def test_invalid_content_leaves_target_untouched(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("{}\n")

        with pytest.raises(InvalidSchemaError):
            AtomicWriter().write(path, '{"type": "text"}')

        assert path.read_text() == "{}\n"
        assert list(tmp_path.glob("*.tmp")) == []

    def test_not_json(self, tmp_path):
        with pytest.raises(InvalidSchemaError, match="not valid JSON"):
            AtomicWriter().write(tmp_path / "schema.json", "{type")

    def test_skip_validation(self, tmp_path):
        path = tmp_path / "schema.json"

        AtomicWriter().write(path, "{type", validate=False)

        assert path.read_text() == "{type"

    def test_custom_validator(self, tmp_path):
        seen = []

        AtomicWriter(validate_schema=seen.append).write(tmp_path / "schema.json", '{"type": "text"}')

        assert seen == [{"type": "text"}]

    def test_write_if_not_exists(self, tmp_path):
        path = tmp_path / "schema.json"

        assert AtomicWriter().write_if_not_exists(path, "{}")
        with pytest.raises(FileExistsError):
            AtomicWriter().write_if_not_exists(path, '{"type": "string"}')
        assert path.read_text() == "{}"
