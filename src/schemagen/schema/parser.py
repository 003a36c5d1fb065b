"""Decode untyped JSON schema documents into typed nodes.

All validation happens here so the generator can trust its input.
Range ordering is only enforced on nodes without an ``enum``, since an
enum replaces type-based generation entirely.
Unsupported ``type`` values are not an error: they decode to an
``UnknownNode`` which generates ``None``.
"""

import math
from collections.abc import Callable, Mapping
from typing import Any

from schemagen.config import GeneratorSettings, settings
from schemagen.exceptions import SchemaError
from schemagen.schema.types import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    NumberNode,
    ObjectNode,
    SchemaNode,
    StringNode,
    UnknownNode,
)


_NodeParser = Callable[[Mapping[str, Any], str, Any], SchemaNode]


def parse_schema(
    raw: Mapping[str, Any], config: GeneratorSettings | None = None
) -> SchemaNode:
    """Decode a schema document into a typed node tree.

    Args:
        raw: Schema as decoded from JSON or YAML
        config: Settings used to derive absent bounds (defaults to module settings)

    Returns:
        Root schema node

    Raises:
        SchemaError: If the document is malformed
    """
    return _SchemaParser(config or settings).parse(raw, "")


class _SchemaParser:
    def __init__(self, config: GeneratorSettings) -> None:
        self.config = config
        self._parsers: dict[str, _NodeParser] = {
            "integer": self._parse_integer,
            "number": self._parse_number,
            "string": self._parse_string,
            "boolean": self._parse_boolean,
            "array": self._parse_array,
            "object": self._parse_object,
        }

    def parse(self, raw: Any, path: str) -> SchemaNode:
        if not isinstance(raw, Mapping):
            raise SchemaError(
                f"schema node must be an object, got {type(raw).__name__}", path
            )

        enum = self._parse_enum(raw, path)
        type_name = raw.get("type")
        parser = self._parsers.get(type_name) if isinstance(type_name, str) else None
        if parser is None:
            return UnknownNode(
                enum=enum,
                type_name=type_name if isinstance(type_name, str) else None,
            )
        return parser(raw, path, enum)

    def _parse_enum(self, raw: Mapping[str, Any], path: str) -> tuple[Any, ...] | None:
        value = raw.get("enum")
        if value is None:
            return None
        if not isinstance(value, list):
            raise SchemaError("'enum' must be an array", f"{path}/enum")
        if not value:
            raise SchemaError("'enum' must contain at least one value", f"{path}/enum")
        return tuple(value)

    def _parse_integer(
        self, raw: Mapping[str, Any], path: str, enum: Any
    ) -> IntegerNode:
        minimum = _number(raw, "minimum", path)
        maximum = _number(raw, "maximum", path)
        low = self.config.integer_minimum if minimum is None else math.ceil(minimum)
        high = self.config.integer_maximum if maximum is None else math.floor(maximum)
        if enum is None and low > high:
            raise SchemaError(
                f"no integer between minimum {minimum} and maximum {maximum}", path
            )
        return IntegerNode(enum=enum, minimum=low, maximum=high)

    def _parse_number(self, raw: Mapping[str, Any], path: str, enum: Any) -> NumberNode:
        minimum = _number(raw, "minimum", path)
        maximum = _number(raw, "maximum", path)
        low = self.config.number_minimum if minimum is None else float(minimum)
        high = self.config.number_maximum if maximum is None else float(maximum)
        if enum is None and low > high:
            raise SchemaError(f"minimum {low} is greater than maximum {high}", path)
        return NumberNode(enum=enum, minimum=low, maximum=high)

    def _parse_string(self, raw: Mapping[str, Any], path: str, enum: Any) -> StringNode:
        min_length = _count(raw, "minLength", path)
        if min_length is None:
            min_length = 0
        max_length = _count(raw, "maxLength", path)
        if max_length is None:
            max_length = min_length + self.config.string_length_span
        if enum is None and min_length > max_length:
            raise SchemaError(
                f"minLength {min_length} is greater than maxLength {max_length}", path
            )
        return StringNode(enum=enum, min_length=min_length, max_length=max_length)

    def _parse_boolean(
        self, raw: Mapping[str, Any], path: str, enum: Any
    ) -> BooleanNode:
        return BooleanNode(enum=enum)

    def _parse_array(self, raw: Mapping[str, Any], path: str, enum: Any) -> ArrayNode:
        min_items = _count(raw, "minItems", path)
        if min_items is None:
            min_items = 0
        max_items = _count(raw, "maxItems", path)
        if max_items is None:
            max_items = min_items + self.config.array_items_span
        if enum is None and min_items > max_items:
            raise SchemaError(
                f"minItems {min_items} is greater than maxItems {max_items}", path
            )

        unique_items = raw.get("uniqueItems", False)
        if not isinstance(unique_items, bool):
            raise SchemaError("'uniqueItems' must be a boolean", f"{path}/uniqueItems")

        items_raw = raw.get("items")
        items = (
            UnknownNode()
            if items_raw is None
            else self.parse(items_raw, f"{path}/items")
        )
        return ArrayNode(
            enum=enum,
            items=items,
            min_items=min_items,
            max_items=max_items,
            unique_items=unique_items,
        )

    def _parse_object(self, raw: Mapping[str, Any], path: str, enum: Any) -> ObjectNode:
        properties_raw = raw.get("properties")
        if properties_raw is None:
            properties_raw = {}
        if not isinstance(properties_raw, Mapping):
            raise SchemaError("'properties' must be an object", f"{path}/properties")

        properties: dict[str, SchemaNode] = {}
        for name, child in properties_raw.items():
            if not isinstance(name, str):
                raise SchemaError(
                    f"property name must be a string, got {name!r}",
                    f"{path}/properties",
                )
            properties[name] = self.parse(child, f"{path}/properties/{name}")

        required_raw = raw.get("required")
        if required_raw is None:
            required_raw = []
        if not isinstance(required_raw, list) or not all(
            isinstance(name, str) for name in required_raw
        ):
            raise SchemaError(
                "'required' must be an array of strings", f"{path}/required"
            )

        return ObjectNode(
            enum=enum,
            properties=properties,
            required=frozenset(required_raw),
        )


def _number(raw: Mapping[str, Any], key: str, path: str) -> int | float | None:
    value = raw.get(key)
    if value is None:
        return None
    # bool is an int subclass but never a valid bound
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise SchemaError(f"'{key}' must be a number", f"{path}/{key}")
    if isinstance(value, float) and not math.isfinite(value):
        raise SchemaError(f"'{key}' must be finite", f"{path}/{key}")
    return value


def _count(raw: Mapping[str, Any], key: str, path: str) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SchemaError(
            f"'{key}' must be a non-negative integer", f"{path}/{key}"
        )
    return value
