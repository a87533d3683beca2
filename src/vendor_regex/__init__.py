"""
vendor-regex - shortest unique search-box patterns for item and gem names.

Derives minimal wildcard patterns that match one label and nothing else in a
collision pool, resolves collisions across labels selected together, and
combines categorized patterns into a single search string.
"""

from .abbreviator import abbreviate, extend_abbreviation, is_fallback
from .batch import find_collisions, resolve_batch
from .combiner import (
    LinkGroup,
    RegexCategory,
    RegexCategoryId,
    RegexEntry,
    char_count,
    combine_categories,
    exceeds_limit,
    generate_link_patterns,
    remove_subsumed,
)
from .config import DEFAULT_CONFIG, AbbreviatorConfig
from .exceptions import PoolLoadError, VendorRegexError
from .matcher import compile_pattern, matches
from .pool import CollisionPool, build_pool, default_fragments, filter_pool

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("vendor-regex")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable

__all__ = [
    "abbreviate",
    "extend_abbreviation",
    "is_fallback",
    "resolve_batch",
    "find_collisions",
    "matches",
    "compile_pattern",
    "CollisionPool",
    "build_pool",
    "default_fragments",
    "filter_pool",
    "AbbreviatorConfig",
    "DEFAULT_CONFIG",
    "RegexCategory",
    "RegexCategoryId",
    "RegexEntry",
    "LinkGroup",
    "generate_link_patterns",
    "combine_categories",
    "remove_subsumed",
    "char_count",
    "exceeds_limit",
    "VendorRegexError",
    "PoolLoadError",
]
