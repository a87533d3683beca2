"""
Configuration model for the pattern abbreviator.
"""

import os

from pydantic import BaseModel, Field, model_validator

ENV_PREFIX = "VENDOR_REGEX_"


class AbbreviatorConfig(BaseModel):
    """Search bounds for the abbreviator and the batch resolver.

    The defaults reproduce the limits the in-game search box tolerates;
    changing them trades pattern length against search time.
    """

    model_config = {"frozen": True}

    # Main search loop
    min_length: int = Field(
        default=4,
        ge=1,
        description="Shortest total pattern length tried by the main search loop"
    )
    cross_word_max_length: int = Field(
        default=8,
        ge=0,
        description="Longest total length at which cross-word bridges are tried"
    )
    min_prefix_length: int = Field(
        default=3,
        ge=1,
        description="Fewest label characters an anchored prefix may carry"
    )

    # Long-range spans
    span_min_length: int = Field(
        default=6,
        ge=4,
        description="Shortest total length of a '.+' span pattern"
    )
    span_max_length: int = Field(
        default=14,
        ge=4,
        description="Longest total length of a '.+' span pattern"
    )
    span_right_max: int = Field(
        default=6,
        ge=2,
        description="Most characters taken from the start of the later word in a span"
    )

    # Batch repair
    max_repair_rounds: int = Field(
        default=20,
        ge=0,
        description="Soft cap on pairwise repair rounds in batch resolution"
    )
    extension_prefix_max: int = Field(
        default=12,
        ge=1,
        description="Longest anchored prefix tried when extending a colliding pattern"
    )

    @model_validator(mode="after")
    def validate_span_range(self) -> "AbbreviatorConfig":
        """Ensure the span length range is not inverted."""
        if self.span_min_length > self.span_max_length:
            raise ValueError("span_min_length must not exceed span_max_length")
        return self

    @classmethod
    def from_env(cls) -> "AbbreviatorConfig":
        """Build a config from ``VENDOR_REGEX_*`` environment variables.

        Each field maps to the upper-cased field name with the prefix, e.g.
        ``VENDOR_REGEX_MAX_REPAIR_ROUNDS=10``. Unset variables keep their
        defaults; values are validated like any other constructor input.
        """
        overrides: dict[str, str] = {}
        for name in cls.model_fields:
            value = os.getenv(ENV_PREFIX + name.upper())
            if value is not None and value.strip():
                overrides[name] = value.strip()
        return cls(**overrides)


DEFAULT_CONFIG = AbbreviatorConfig()

__all__ = ["AbbreviatorConfig", "DEFAULT_CONFIG", "ENV_PREFIX"]
