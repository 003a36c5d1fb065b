"""Tests for decoding raw schemas into typed nodes."""

from typing import Any

import pytest

from schemagen.config import JSON_SAFE_INTEGER, GeneratorSettings
from schemagen.exceptions import SchemaError
from schemagen.schema import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    NumberNode,
    ObjectNode,
    StringNode,
    UnknownNode,
    parse_schema,
)


class TestDefaults:
    """Tests for default bound derivation."""

    def test_integer_defaults(self) -> None:
        """Absent integer bounds use the JSON-safe range."""
        node = parse_schema({"type": "integer"})
        assert node == IntegerNode(
            minimum=-JSON_SAFE_INTEGER, maximum=JSON_SAFE_INTEGER
        )

    def test_number_defaults(self) -> None:
        """Absent number bounds are +/-1e10."""
        assert parse_schema({"type": "number"}) == NumberNode(
            minimum=-1e10, maximum=1e10
        )

    def test_string_defaults(self) -> None:
        """maxLength defaults to minLength + 20."""
        node = parse_schema({"type": "string"})
        assert node == StringNode(min_length=0, max_length=20)
        node = parse_schema({"type": "string", "minLength": 7})
        assert isinstance(node, StringNode)
        assert (node.min_length, node.max_length) == (7, 27)

    def test_array_defaults(self) -> None:
        """minItems defaults to 0 and maxItems to minItems + 10."""
        node = parse_schema({"type": "array", "items": {"type": "boolean"}})
        assert node == ArrayNode(
            items=BooleanNode(), min_items=0, max_items=10, unique_items=False
        )

    def test_defaults_follow_settings(self) -> None:
        """Default spans come from configuration."""
        config = GeneratorSettings(string_length_span=3, array_items_span=1)
        string_node = parse_schema({"type": "string", "minLength": 2}, config)
        array_node = parse_schema({"type": "array", "minItems": 4}, config)
        assert isinstance(string_node, StringNode) and string_node.max_length == 5
        assert isinstance(array_node, ArrayNode) and array_node.max_items == 5


class TestNodeKinds:
    """Tests for mapping type tags to node classes."""

    def test_nested_object(self) -> None:
        """Objects decode their properties recursively."""
        node = parse_schema(
            {
                "type": "object",
                "required": ["id"],
                "properties": {
                    "id": {"type": "integer", "minimum": 1, "maximum": 5},
                    "tags": {"type": "array", "items": {"type": "string"}},
                },
            }
        )
        assert isinstance(node, ObjectNode)
        assert node.required == frozenset({"id"})
        assert node.properties["id"] == IntegerNode(minimum=1, maximum=5)
        tags = node.properties["tags"]
        assert isinstance(tags, ArrayNode)
        assert isinstance(tags.items, StringNode)

    @pytest.mark.parametrize(
        "raw,type_name",
        [
            ({"type": "null"}, "null"),
            ({}, None),
            ({"type": ["integer", "null"]}, None),
        ],
    )
    def test_unknown_types(self, raw: dict[str, Any], type_name: str | None) -> None:
        """Unsupported types decode without error."""
        node = parse_schema(raw)
        assert node == UnknownNode(type_name=type_name)
        assert node.kind == "unknown"

    def test_missing_items(self) -> None:
        """Arrays without items get an unknown item node."""
        node = parse_schema({"type": "array", "maxItems": 1})
        assert isinstance(node, ArrayNode)
        assert node.items == UnknownNode()

    def test_enum_kept_on_typed_node(self) -> None:
        """Enum decodes to a tuple alongside the type."""
        node = parse_schema({"type": "string", "enum": ["red", "green"]})
        assert isinstance(node, StringNode)
        assert node.enum == ("red", "green")

    def test_null_enum_is_absent(self) -> None:
        """enum: null means no enum."""
        assert parse_schema({"type": "boolean", "enum": None}).enum is None

    def test_integer_bounds_rounded_inward(self) -> None:
        """Fractional integer bounds round toward the interior."""
        node = parse_schema({"type": "integer", "minimum": 1.2, "maximum": 4.8})
        assert node == IntegerNode(minimum=2, maximum=4)

    def test_integral_float_counts_accepted(self) -> None:
        """2.0 is accepted where an integer count is expected."""
        node = parse_schema({"type": "string", "minLength": 2.0, "maxLength": 3})
        assert node == StringNode(min_length=2, max_length=3)


class TestErrors:
    """Tests for SchemaError reporting."""

    @pytest.mark.parametrize(
        "raw,path",
        [
            ({"type": "string", "enum": []}, "/enum"),
            ({"enum": "red"}, "/enum"),
            ({"type": "integer", "minimum": "1"}, "/minimum"),
            ({"type": "number", "maximum": True}, "/maximum"),
            ({"type": "number", "maximum": float("inf")}, "/maximum"),
            ({"type": "string", "minLength": -1}, "/minLength"),
            ({"type": "string", "maxLength": 2.5}, "/maxLength"),
            ({"type": "array", "uniqueItems": "yes"}, "/uniqueItems"),
            ({"type": "object", "properties": []}, "/properties"),
            ({"type": "object", "required": "id"}, "/required"),
            ({"type": "object", "required": [1]}, "/required"),
        ],
    )
    def test_invalid_keyword(self, raw: dict[str, Any], path: str) -> None:
        """Malformed keywords raise SchemaError with a pointer to the keyword."""
        with pytest.raises(SchemaError) as exc_info:
            parse_schema(raw)
        assert exc_info.value.path == path

    @pytest.mark.parametrize(
        "raw",
        [
            {"type": "integer", "minimum": 5, "maximum": 1},
            {"type": "integer", "minimum": 1.2, "maximum": 1.8},
            {"type": "number", "minimum": 2.0, "maximum": 1.0},
            {"type": "string", "minLength": 5, "maxLength": 4},
            {"type": "string", "maxLength": 2, "minLength": 3},
            {"type": "array", "minItems": 3, "maxItems": 2},
        ],
    )
    def test_inverted_bounds(self, raw: dict[str, Any]) -> None:
        """Empty ranges are rejected at decode time."""
        with pytest.raises(SchemaError):
            parse_schema(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            {"type": "integer", "minimum": 5, "maximum": 1, "enum": [3]},
            {"type": "number", "minimum": 2.0, "maximum": 1.0, "enum": [1.5]},
            {"type": "string", "minLength": 5, "maxLength": 4, "enum": ["abc"]},
            {"type": "array", "minItems": 3, "maxItems": 2, "enum": [[1]]},
        ],
    )
    def test_inverted_bounds_allowed_with_enum(self, raw: dict[str, Any]) -> None:
        """An enum makes the range keywords irrelevant, so they are not checked."""
        node = parse_schema(raw)
        assert node.enum == tuple(raw["enum"])

    def test_non_mapping_root(self) -> None:
        """The root must be an object."""
        with pytest.raises(SchemaError, match="must be an object"):
            parse_schema([{"type": "integer"}])  # type: ignore[arg-type]

    def test_nested_error_path(self) -> None:
        """Errors deep in the tree report the full path."""
        raw = {
            "type": "object",
            "properties": {
                "user": {
                    "type": "array",
                    "items": {"type": "string", "enum": []},
                }
            },
        }
        with pytest.raises(SchemaError) as exc_info:
            parse_schema(raw)
        assert exc_info.value.path == "/properties/user/items/enum"
        assert "/properties/user/items/enum" in str(exc_info.value)
