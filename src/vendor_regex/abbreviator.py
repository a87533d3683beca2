"""
Single-label abbreviation.

Finds the shortest pattern that matches a label and nothing else in a
collision pool, for use in a length-limited in-game search box.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .candidates import (
    anchored_prefix,
    full_label_pattern,
    iter_candidates,
    iter_substrings,
    normalize_label,
)
from .config import DEFAULT_CONFIG, AbbreviatorConfig
from .matcher import matches, matches_any
from .pool import CollisionPool, filter_pool

logger = logging.getLogger("vendor-regex.abbreviator")


def is_unique(pattern: str, label: str, filtered_pool: Sequence[str]) -> bool:
    """Return True if ``pattern`` matches ``label`` and no entry of the pool.

    The pool must already be filtered for ``label``; together with the label
    the pattern then matches exactly one string.
    """
    return matches(pattern, label) and not matches_any(pattern, filtered_pool)


def abbreviate(
    label: str,
    pool: Sequence[str] | CollisionPool,
    config: AbbreviatorConfig = DEFAULT_CONFIG,
) -> str:
    """Return the shortest pattern matching ``label`` and no other pool entry.

    Candidates are tried in the generator's order (shortest first; cross-word
    bridge, substring, anchored prefix at each length; ``.+`` spans last) and
    the first unique one wins. When none is unique the full lower-cased
    label, spaces as ``.``, is returned instead.

    Args:
        label: Label to abbreviate
        pool: Collision strings, flat or as a CollisionPool
        config: Search bounds

    Returns:
        A pattern in the search-box dialect, never containing a space

    Example:
        >>> abbreviate("Fireball", ["Frostbolt", "Fire Trap", "Arc"])
        'ireb'
    """
    filtered = filter_pool(label, pool)
    rejected: set[str] = set()
    for candidate in iter_candidates(label, config):
        if candidate in rejected:
            continue
        if is_unique(candidate, label, filtered):
            return candidate
        rejected.add(candidate)

    fallback = full_label_pattern(label)
    logger.debug(
        f"No unique short pattern for '{label}' among {len(filtered)} pool entries, "
        f"falling back to '{fallback}'"
    )
    return fallback


def is_fallback(label: str, pattern: str) -> bool:
    """Return True if ``pattern`` is the full-label fallback for ``label``.

    Fallback patterns are correct but not compressed; benchmarking tools
    report them as soft warnings.
    """
    return pattern == full_label_pattern(label)


def extend_abbreviation(
    label: str,
    current: str,
    pool: Sequence[str] | CollisionPool,
    exclude: Iterable[str],
    config: AbbreviatorConfig = DEFAULT_CONFIG,
) -> str:
    """Lengthen a pattern until it no longer matches any of ``exclude``.

    Tries plain substrings from ``len(current) + 1`` characters upward, then
    anchored prefixes, then the full label. Each replacement must still
    match ``label`` and stay unique against the pool.

    Args:
        label: Label the pattern belongs to
        current: Pattern currently assigned to the label
        pool: Collision strings, flat or as a CollisionPool
        exclude: Sibling labels the new pattern must not match
        config: Search bounds

    Returns:
        The extended pattern, or the full-label fallback
    """
    lower = normalize_label(label)
    filtered = filter_pool(label, pool)
    exclude = list(exclude)

    def acceptable(pattern: str) -> bool:
        if not matches(pattern, label):
            return False
        if matches_any(pattern, exclude):
            return False
        return not matches_any(pattern, filtered)

    for length in range(len(current) + 1, len(lower) + 1):
        for pattern in iter_substrings(lower, length):
            if acceptable(pattern):
                return pattern

    for length in range(config.min_prefix_length, min(len(lower), config.extension_prefix_max) + 1):
        pattern = anchored_prefix(lower, length, config)
        if pattern is not None and acceptable(pattern):
            return pattern

    return full_label_pattern(label)


__all__ = ["abbreviate", "extend_abbreviation", "is_fallback", "is_unique"]
