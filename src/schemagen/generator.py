"""Schema-driven random data generation.

The generator walks a typed schema node and returns a JSON-compatible
value satisfying the node's constraints. Randomness comes from an
injectable ``random.Random`` so output is reproducible with a seed and
a ``Generator`` can be confined to one thread.

Usage:
    from schemagen.generator import Generator

    gen = Generator(seed=42)
    data = gen.generate({"type": "integer", "minimum": 10, "maximum": 20})
"""

import copy
import json
import math
import random
from collections.abc import Mapping
from typing import Any

import structlog

from schemagen.config import GeneratorSettings, settings
from schemagen.exceptions import ConstraintError
from schemagen.schema import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    NumberNode,
    ObjectNode,
    SchemaNode,
    StringNode,
    UnknownNode,
    parse_schema,
)

logger = structlog.get_logger(__name__)


class Generator:
    """Produces random values that conform to schema nodes."""

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        seed: int | None = None,
        config: GeneratorSettings | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            rng: Random source to draw from (mutually exclusive with seed)
            seed: Seed for a fresh random source
            config: Generation policy (defaults to module settings)
        """
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        self.rng = rng if rng is not None else random.Random(seed)
        self.config = config or settings

    def generate(self, schema: SchemaNode | Mapping[str, Any]) -> Any:
        """Generate one value for a schema.

        Args:
            schema: Decoded node, or a raw schema mapping which is decoded first

        Returns:
            Generated value; None for nodes of unknown type

        Raises:
            SchemaError: If a raw mapping cannot be decoded
            ConstraintError: If a uniqueItems array cannot be filled
        """
        if not isinstance(schema, SchemaNode):
            schema = parse_schema(schema, self.config)
        return self._generate(schema)

    def _generate(self, node: SchemaNode) -> Any:
        if node.enum is not None:
            return copy.deepcopy(self.rng.choice(node.enum))

        if isinstance(node, IntegerNode):
            return self.rng.randint(node.minimum, node.maximum)
        if isinstance(node, NumberNode):
            return self.generate_number(node)
        if isinstance(node, StringNode):
            return self.generate_string(node)
        if isinstance(node, BooleanNode):
            return self.rng.random() < 0.5
        if isinstance(node, ArrayNode):
            return self.generate_array(node)
        if isinstance(node, ObjectNode):
            return self.generate_object(node)
        if isinstance(node, UnknownNode):
            return None
        raise TypeError(f"unsupported schema node: {type(node).__name__}")

    def generate_number(self, node: NumberNode) -> float:
        # Interpolating avoids max - min overflowing to inf near +/-1e308
        r = self.rng.random()
        value = node.minimum * (1.0 - r) + node.maximum * r
        return min(max(value, node.minimum), node.maximum)

    def generate_string(self, node: StringNode) -> str:
        length = self.rng.randint(node.min_length, node.max_length)
        alphabet = self.config.string_alphabet
        return "".join(self.rng.choice(alphabet) for _ in range(length))

    def generate_array(self, node: ArrayNode) -> list[Any]:
        """Generate a list whose length lies in [min_items, max_items].

        With ``unique_items`` each candidate is compared by value against
        the items already accepted and regenerated on collision.

        The run of consecutive rejections allowed is the larger of
        ``max_unique_attempts`` and ``unique_attempts_per_item`` times the
        drawn length, so filling most of a small domain still succeeds.
        A ``max_unique_attempts`` of 0 removes the limit.

        Raises:
            ConstraintError: If the rejection limit is reached
        """
        if node.min_items == 0 and node.max_items == 0:
            return []

        length = self.rng.randint(node.min_items, node.max_items)
        result: list[Any] = []

        if not node.unique_items:
            while len(result) < length:
                result.append(self._generate(node.items))
            return result

        max_attempts = self.config.max_unique_attempts
        if max_attempts:
            max_attempts = max(
                max_attempts, self.config.unique_attempts_per_item * length
            )
        seen: set[str] = set()
        rejected = 0
        while len(result) < length:
            item = self._generate(node.items)
            key = _canonical(item)
            if key in seen:
                rejected += 1
                if max_attempts and rejected >= max_attempts:
                    logger.warning(
                        "generator.unique_exhausted",
                        accepted=len(result),
                        requested=length,
                        attempts=rejected,
                    )
                    raise ConstraintError(
                        f"could not generate {length} unique items "
                        f"(only {len(result)} distinct after {rejected} "
                        f"consecutive rejections)",
                        attempts=rejected,
                    )
                continue
            seen.add(key)
            result.append(item)
            rejected = 0
        return result

    def generate_object(self, node: ObjectNode) -> dict[str, Any]:
        """Generate a mapping with every required and some optional properties."""
        probability = self.config.optional_property_probability
        result: dict[str, Any] = {}
        for name, child in node.properties.items():
            if node.is_required(name) or self.rng.random() < probability:
                result[name] = self._generate(child)
        return result


def generate(
    schema: SchemaNode | Mapping[str, Any],
    rng: random.Random | None = None,
    *,
    seed: int | None = None,
    config: GeneratorSettings | None = None,
) -> Any:
    """Generate one value for a schema with a throwaway Generator."""
    return Generator(rng, seed=seed, config=config).generate(schema)


def _canonical(value: Any) -> str:
    # JSON text keeps True and 1 apart, unlike ==
    return json.dumps(_normalize(value), sort_keys=True, default=repr)


def _normalize(value: Any) -> Any:
    """Rewrite a value so equal JSON data has one canonical form.

    Integral floats become ints (1.0 and 1 are the same JSON number) and
    mapping keys become strings, as JSON serialization would make them.
    Booleans are left alone.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    if isinstance(value, Mapping):
        return {_normalize_key(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_normalize(item) for item in value]
    return value


def _normalize_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    return json.dumps(_normalize(key), sort_keys=True, default=repr)
