"""
Check compiled documents against the draft-06 meta-schema.
"""

from __future__ import annotations

import json
from typing import Any

from jsonschema import Draft6Validator
from jsonschema.exceptions import SchemaError

from .errors import InvalidSchemaError


def check_schema(document: dict[str, Any]) -> None:
    """
    Verify that a document is a valid draft-06 JSON Schema.

    The document goes through a JSON round trip first, so values that only
    look right as Python objects (tuples, sets, Decimals) are caught too.

    Args:
        document: The compiled schema document

    Raises:
        InvalidSchemaError: If the document is not JSON serializable or not a valid schema
    """
    try:
        serialized = json.loads(json.dumps(document))
    except (TypeError, ValueError) as e:
        raise InvalidSchemaError(f"Schema is not JSON serializable: {e}") from e

    try:
        Draft6Validator.check_schema(serialized)
    except SchemaError as e:
        raise InvalidSchemaError(f"Schema is not valid draft-06: {e.message}") from e
