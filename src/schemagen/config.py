"""schemagen Configuration Module.

Generation policy lives here rather than as literals inside the generator.
All settings support environment variable overrides with the SCHEMAGEN_ prefix,
e.g. SCHEMAGEN_OPTIONAL_PROPERTY_PROBABILITY=0.5.

Usage:
    from schemagen.config import settings

    print(settings.optional_property_probability)
"""

import string
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "GeneratorSettings",
    "JSON_SAFE_INTEGER",
    "settings",
]

# Largest integer a JSON consumer can represent exactly (2**53 - 1)
JSON_SAFE_INTEGER = 9_007_199_254_740_991


class GeneratorSettings(BaseSettings):
    """Policy constants and default bounds for data generation.

    Defaults reproduce the historical behavior: optional properties are
    included 70% of the time and absent bounds are derived from the
    values below.
    """

    model_config = SettingsConfigDict(env_prefix="SCHEMAGEN_")

    # Object policy
    optional_property_probability: float = Field(
        default=0.7,
        description="Probability that a non-required property is emitted",
    )

    # Array policy
    max_unique_attempts: int = Field(
        default=1000,
        description=(
            "Minimum consecutive rejected candidates allowed while filling a "
            "uniqueItems array (0 disables the cap)"
        ),
    )
    unique_attempts_per_item: int = Field(
        default=20,
        description=(
            "Rejection cap grows to this many attempts per requested item "
            "when that exceeds max_unique_attempts"
        ),
    )
    array_items_span: int = Field(
        default=10,
        description="Default maxItems is minItems plus this span",
    )

    # Scalar defaults
    integer_minimum: int = Field(
        default=-JSON_SAFE_INTEGER,
        description="Lower bound for integers without a minimum",
    )
    integer_maximum: int = Field(
        default=JSON_SAFE_INTEGER,
        description="Upper bound for integers without a maximum",
    )
    number_minimum: float = Field(
        default=-1e10,
        description="Lower bound for numbers without a minimum",
    )
    number_maximum: float = Field(
        default=1e10,
        description="Upper bound for numbers without a maximum",
    )
    string_length_span: int = Field(
        default=20,
        description="Default maxLength is minLength plus this span",
    )
    string_alphabet: str = Field(
        default=string.ascii_letters + string.digits,
        description="Characters sampled when building strings",
    )

    # Logging
    log_level: str = Field(
        default="warning",
        description="Logging level (debug, info, warning, error)",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console or json)",
    )

    def model_post_init(self, context: Any) -> None:
        """Validate settings after initialization."""
        if not 0.0 <= self.optional_property_probability <= 1.0:
            raise ValueError(
                f"optional_property_probability must be between 0 and 1, "
                f"got {self.optional_property_probability}"
            )
        if self.max_unique_attempts < 0 or self.unique_attempts_per_item < 0:
            raise ValueError(
                "max_unique_attempts and unique_attempts_per_item must be >= 0"
            )
        if self.array_items_span < 0 or self.string_length_span < 0:
            raise ValueError("array_items_span and string_length_span must be >= 0")
        if self.integer_minimum > self.integer_maximum:
            raise ValueError(
                f"integer_minimum ({self.integer_minimum}) exceeds "
                f"integer_maximum ({self.integer_maximum})"
            )
        if self.number_minimum > self.number_maximum:
            raise ValueError(
                f"number_minimum ({self.number_minimum}) exceeds "
                f"number_maximum ({self.number_maximum})"
            )
        if not self.string_alphabet:
            raise ValueError("string_alphabet must not be empty")
        if self.log_format not in ("console", "json"):
            raise ValueError(
                f"log_format must be 'console' or 'json', got {self.log_format!r}"
            )


# Module-level singleton
settings = GeneratorSettings()
