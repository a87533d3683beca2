"""
Collision pool construction.

A collision pool is the list of strings an abbreviation must not match. It
is assembled from four sources, in this order:

- sibling labels from the same catalog (other gem or item names)
- curated short text fragments known to cause false positives
- full descriptive text blocks (gem descriptions)
- base-type names (equipment base items)

The pool is an immutable value handed to the abbreviator on each call, so
abbreviation stays a pure function of its inputs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .exceptions import PoolLoadError

logger = logging.getLogger("vendor-regex.pool")

FRAGMENTS_RESOURCE = "text_fragments.yaml"


class CollisionPool(BaseModel):
    """Immutable set of collision strings, grouped by source.

    Attributes:
        labels: Sibling labels from the same catalog
        fragments: Curated short in-context text fragments
        descriptions: Longer descriptive text blocks
        base_names: Base-type name strings
    """

    model_config = {"frozen": True}

    labels: tuple[str, ...] = Field(default=(), description="Sibling catalog labels")
    fragments: tuple[str, ...] = Field(default=(), description="Curated false-positive fragments")
    descriptions: tuple[str, ...] = Field(default=(), description="Descriptive text blocks")
    base_names: tuple[str, ...] = Field(default=(), description="Base-type names")

    @field_validator("labels", "fragments", "descriptions", "base_names", mode="before")
    @classmethod
    def coerce_strings(cls, v: Any) -> tuple[str, ...]:
        """Accept any iterable of strings, or a mapping (values are used)."""
        if v is None:
            return ()
        if isinstance(v, str):
            raise ValueError("expected a list of strings, got a single string")
        if isinstance(v, dict):
            v = v.values()
        if not isinstance(v, Iterable):
            raise ValueError(f"expected a list of strings, got {type(v).__name__}")
        return tuple(str(item) for item in v if item is not None and str(item) != "")

    def entries(self) -> list[str]:
        """Flatten the pool into the order the abbreviator scans it."""
        return [*self.labels, *self.fragments, *self.descriptions, *self.base_names]

    def __len__(self) -> int:
        return len(self.labels) + len(self.fragments) + len(self.descriptions) + len(self.base_names)

    def with_labels(self, labels: Iterable[str]) -> CollisionPool:
        """Return a copy of this pool with a different sibling catalog."""
        return self.model_copy(update={"labels": tuple(labels)})

    @classmethod
    def from_yaml(cls, path: Path) -> CollisionPool:
        """Load a pool from a YAML file.

        Expected YAML format:
            labels: [Fireball, Frostbolt, ...]
            fragments: [Item Class: Rings, ...]
            descriptions:
              Fireball: Unleashes a ball of fire towards a target...
            base_names: [Iron Ring, Coral Amulet, ...]

        Every key is optional. ``descriptions`` may be a list or a mapping of
        name to text; for a mapping only the texts are used.

        Args:
            path: Path to the YAML file

        Returns:
            The loaded pool

        Raises:
            PoolLoadError: If the file is missing, malformed, not a mapping,
                or holds a key that is not a list of strings
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise PoolLoadError(f"Pool file not found: {path}", str(path)) from e
        except yaml.YAMLError as e:
            raise PoolLoadError(
                f"Pool file is not valid YAML: {path}", str(path), {"error": str(e)}
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise PoolLoadError(
                f"Pool file must contain a mapping, got {type(data).__name__}", str(path)
            )

        try:
            pool = cls(
                labels=data.get("labels"),
                fragments=data.get("fragments"),
                descriptions=data.get("descriptions"),
                base_names=data.get("base_names"),
            )
        except ValueError as e:
            raise PoolLoadError(
                f"Pool file has invalid entries: {path}", str(path), {"error": str(e)}
            ) from e

        logger.debug(
            f"Loaded collision pool from {path}: {len(pool.labels)} labels, "
            f"{len(pool.fragments)} fragments, {len(pool.descriptions)} descriptions, "
            f"{len(pool.base_names)} base names"
        )
        return pool


@lru_cache(maxsize=1)
def default_fragments() -> tuple[str, ...]:
    """Return the bundled curated fragment list.

    Fragments cover tooltip phrasing, item-class lines, stat lines and
    recurring gem-description phrases that short patterns tend to hit.
    """
    text = resources.files("vendor_regex.data").joinpath(FRAGMENTS_RESOURCE).read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return tuple(data["fragments"])


def build_pool(
    labels: Iterable[str] = (),
    descriptions: Iterable[str] = (),
    base_names: Iterable[str] = (),
    fragments: Iterable[str] | None = None,
) -> CollisionPool:
    """Assemble a pool, using the bundled fragments unless others are given."""
    return CollisionPool(
        labels=labels,
        fragments=default_fragments() if fragments is None else fragments,
        descriptions=descriptions,
        base_names=base_names,
    )


def filter_pool(label: str, pool: Sequence[str] | CollisionPool) -> list[str]:
    """Drop pool entries that contain ``label`` (case-insensitive).

    Such entries are variants of the label itself (``Iron Ring of the Lizard``
    when abbreviating ``Iron Ring``), so matching them is intended.

    Args:
        label: Label being abbreviated
        pool: Flat sequence of strings or a CollisionPool

    Returns:
        Remaining entries, in pool order
    """
    entries = pool.entries() if isinstance(pool, CollisionPool) else pool
    lower = label.lower()
    return [entry for entry in entries if lower not in entry.lower()]


__all__ = ["CollisionPool", "default_fragments", "build_pool", "filter_pool"]
