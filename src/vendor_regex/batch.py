"""
Batch abbreviation with mutual exclusivity.

Single-label abbreviation only guards against the static collision pool. A
caller that selects several labels at once also needs each pattern to leave
the other selected labels alone, which is only known once the whole batch is
abbreviated. The resolver therefore runs two passes: independent
abbreviation, then bounded pairwise repair.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from .abbreviator import abbreviate, extend_abbreviation
from .config import DEFAULT_CONFIG, AbbreviatorConfig
from .matcher import matches
from .pool import CollisionPool

logger = logging.getLogger("vendor-regex.batch")


def find_collisions(assignment: Mapping[str, str]) -> list[tuple[str, str]]:
    """List ordered pairs (A, B) where A's pattern also matches label B.

    Args:
        assignment: Mapping of label to pattern

    Returns:
        Colliding (owner, victim) pairs in assignment order
    """
    collisions: list[tuple[str, str]] = []
    for owner, pattern in assignment.items():
        for victim in assignment:
            if victim != owner and matches(pattern, victim):
                collisions.append((owner, victim))
    return collisions


def resolve_batch(
    labels: Iterable[str],
    pool: Sequence[str] | CollisionPool,
    config: AbbreviatorConfig = DEFAULT_CONFIG,
) -> dict[str, str]:
    """Abbreviate a set of labels so no pattern matches another label.

    Pass 1 abbreviates every label against the shared pool. Pass 2 walks all
    unordered pairs and, whenever one pattern matches the other label,
    extends the offending pattern. Rounds repeat until one makes no change
    or ``config.max_repair_rounds`` is reached; collisions left after the cap
    stay in place.

    Args:
        labels: Labels chosen together (duplicates are collapsed)
        pool: Collision strings, flat or as a CollisionPool
        config: Search bounds and round cap

    Returns:
        Mapping of label to pattern, in input order
    """
    entries = pool.entries() if isinstance(pool, CollisionPool) else list(pool)

    assignment: dict[str, str] = {}
    for label in labels:
        if label not in assignment:
            assignment[label] = abbreviate(label, entries, config)

    names = list(assignment)
    rounds = 0
    changed = True
    while changed and rounds < config.max_repair_rounds:
        changed = False
        rounds += 1
        for i, name_a in enumerate(names):
            for name_b in names[i + 1:]:
                if _repair(name_a, name_b, assignment, entries, config):
                    changed = True
                if _repair(name_b, name_a, assignment, entries, config):
                    changed = True

    residual = find_collisions(assignment)
    if residual:
        logger.warning(
            f"{len(residual)} pattern collision(s) left after {rounds} repair round(s): "
            + ", ".join(f"'{assignment[a]}' matches '{b}'" for a, b in residual)
        )
    else:
        logger.debug(f"Resolved {len(assignment)} labels in {rounds} repair round(s)")

    return assignment


def _repair(
    owner: str,
    victim: str,
    assignment: dict[str, str],
    entries: list[str],
    config: AbbreviatorConfig,
) -> bool:
    """Extend ``owner``'s pattern if it matches ``victim``; report a change."""
    current = assignment[owner]
    if not matches(current, victim):
        return False
    extended = extend_abbreviation(owner, current, entries, [victim], config)
    if extended == current:
        return False
    logger.debug(f"'{current}' for '{owner}' also matched '{victim}', extended to '{extended}'")
    assignment[owner] = extended
    return True


__all__ = ["resolve_batch", "find_collisions"]
