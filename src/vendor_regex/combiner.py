"""
Combine categorized patterns into the final search-box string.

Format: ``"!<exclusions> <inclusions>"`` where each side is a ``|``-joined
list. Either side is omitted when empty. The in-game search box accepts
about 50 characters, so redundant patterns are dropped before joining.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from shortuuid import random as shortuuid_random

SEARCH_CHAR_LIMIT = 50

# Characters outside the abbreviation dialect; patterns using them are never
# treated as subsuming or subsumed.
_COMPLEX_CHARS = frozenset("|()[]{}\\*?")


class RegexCategoryId(str, Enum):
    """Pattern categories shown in the builder."""

    GEMS = "gems"
    LINKS = "links"
    STATS = "stats"
    ITEMS = "items"
    ITEM_GAMBAS = "item_gambas"
    DONT_EVER_SHOW = "dont_ever_show"


class RegexEntry(BaseModel):
    """One pattern in a category.

    Attributes:
        id: Entry identifier
        pattern: Pattern text, emitted as-is
        source_id: Identifier of the gem or item the pattern was derived from
        source_name: Display name of that gem or item
        is_exclusion: Emit on the ``!`` side regardless of category
        enabled: Disabled entries are skipped
        is_custom: Entered by hand rather than generated
        link_size: Socket group size for link patterns
    """
    id: str = Field(default_factory=lambda: shortuuid_random(length=8), description="Entry ID")
    pattern: str = Field(..., description="Pattern text")
    source_id: str | None = Field(default=None, description="Source gem/item ID")
    source_name: str | None = Field(default=None, description="Source gem/item name")
    is_exclusion: bool = Field(default=False, description="Emit as exclusion")
    enabled: bool = Field(default=True, description="Include in combined output")
    is_custom: bool = Field(default=False, description="User-entered pattern")
    link_size: int | None = Field(default=None, ge=1, description="Socket group size")


class RegexCategory(BaseModel):
    """A named group of entries."""
    id: RegexCategoryId
    label: str
    entries: list[RegexEntry] = Field(default_factory=list)


def default_categories() -> list[RegexCategory]:
    """Return a fresh set of empty categories (plus the movement speed stat)."""
    return [
        RegexCategory(id=RegexCategoryId.GEMS, label="Gems"),
        RegexCategory(id=RegexCategoryId.LINKS, label="Links"),
        RegexCategory(
            id=RegexCategoryId.STATS,
            label="Stats",
            entries=[
                RegexEntry(
                    id="default-ms",
                    pattern="unner|rint",
                    source_name="Movement Speed",
                    is_custom=True,
                )
            ],
        ),
        RegexCategory(id=RegexCategoryId.ITEMS, label="Items"),
        RegexCategory(id=RegexCategoryId.ITEM_GAMBAS, label="Item Gambas"),
        RegexCategory(id=RegexCategoryId.DONT_EVER_SHOW, label="Don't Ever Show"),
    ]


class LinkGroup(BaseModel):
    """Socket colours of one linked gem group over the phases of a build.

    Attributes:
        label: Display name of the group (e.g. "Main 6L")
        phases: Socket colour per gem for each phase, earliest first
    """
    label: str | None = Field(default=None, description="Group display name")
    phases: list[list[str]] = Field(default_factory=list, description="Socket colours per phase")


def generate_link_patterns(link_groups: list[LinkGroup]) -> list[RegexEntry]:
    """Build socket-colour link patterns for the links category.

    Only the last phase of each group counts (the final socket layout). Its
    colours are sorted and joined with ``-``, so ``["g", "b", "b"]`` becomes
    ``"b-b-g"``. Groups with no colours and repeated colour sets are skipped.

    Args:
        link_groups: Link groups of a build

    Returns:
        One entry per distinct colour set, in group order
    """
    seen: set[str] = set()
    entries: list[RegexEntry] = []

    for group in link_groups:
        if not group.phases:
            continue
        last_phase = group.phases[-1]
        colors = "-".join(sorted(last_phase))
        if not colors or colors in seen:
            continue
        seen.add(colors)

        entries.append(
            RegexEntry(
                pattern=colors,
                source_name=group.label or f"{len(last_phase)}L",
                link_size=len(last_phase),
            )
        )

    return entries


def subsumes(shorter: str, longer: str) -> bool:
    """Return True if every text ``longer`` matches is also matched by ``shorter``.

    Only decided for plain dialect patterns: ``shorter`` must occur inside
    ``longer`` (or, when anchored, start it). Patterns with alternation,
    groups or classes never subsume. Case is ignored, as in matching.
    """
    shorter = shorter.lower()
    longer = longer.lower()
    if not shorter or shorter == longer:
        return False
    if _COMPLEX_CHARS.intersection(shorter) or _COMPLEX_CHARS.intersection(longer):
        return False
    if shorter.startswith("^"):
        return longer.startswith(shorter)
    # A leading '+' is literal on its own but part of '.+' inside longer.
    if shorter.startswith("+"):
        return False
    return shorter in longer


def remove_subsumed(patterns: list[str]) -> list[str]:
    """Drop duplicates and patterns already covered by a shorter sibling.

    Args:
        patterns: Patterns in output order

    Returns:
        Surviving patterns, first-seen order preserved
    """
    unique: list[str] = []
    seen: set[str] = set()
    for pattern in patterns:
        key = pattern.lower()
        if key not in seen:
            seen.add(key)
            unique.append(pattern)

    kept: list[str] = []
    for candidate in unique:
        covered = False
        for other in unique:
            if len(other) < len(candidate) and subsumes(other, candidate):
                covered = True
                break
        if not covered:
            kept.append(candidate)
    return kept


def combine_categories(categories: list[RegexCategory]) -> str:
    """Combine all enabled entries into the search-box one-liner.

    Entries of the ``dont_ever_show`` category, and entries flagged
    ``is_exclusion`` in any category, go to the ``!`` side.

    Example:
        >>> combine_categories([
        ...     RegexCategory(id="dont_ever_show", label="x", entries=[RegexEntry(pattern="flask")]),
        ...     RegexCategory(id="gems", label="y", entries=[RegexEntry(pattern="fire")]),
        ... ])
        '!flask fire'
    """
    exclusions: list[str] = []
    inclusions: list[str] = []

    for category in categories:
        for entry in category.entries:
            if not entry.enabled:
                continue
            if category.id == RegexCategoryId.DONT_EVER_SHOW or entry.is_exclusion:
                exclusions.append(entry.pattern)
            else:
                inclusions.append(entry.pattern)

    exclusions = remove_subsumed(exclusions)
    inclusions = remove_subsumed(inclusions)

    parts: list[str] = []
    if exclusions:
        parts.append("!" + "|".join(exclusions))
    if inclusions:
        parts.append("|".join(inclusions))
    return " ".join(parts)


def char_count(combined: str) -> int:
    """Character count of a combined search string."""
    return len(combined)


def exceeds_limit(combined: str, limit: int = SEARCH_CHAR_LIMIT) -> bool:
    """Return True if the combined string no longer fits the search box."""
    return char_count(combined) > limit


__all__ = [
    "SEARCH_CHAR_LIMIT",
    "RegexCategoryId",
    "RegexEntry",
    "RegexCategory",
    "LinkGroup",
    "default_categories",
    "generate_link_patterns",
    "subsumes",
    "remove_subsumed",
    "combine_categories",
    "char_count",
    "exceeds_limit",
]
