"""
Pattern matcher for the search-box wildcard dialect.

The dialect is a tiny subset of regular expressions:

- a leading ``^`` anchors the pattern to the start of the text
- ``.`` matches exactly one character
- ``.+`` matches one or more characters (greedy)
- every other character is a literal, compared case-insensitively

Anything else that would be special to :mod:`re` is escaped, so a pattern
always compiles. Should compilation still fail, the matcher degrades to a
plain case-insensitive containment test on the raw pattern text.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from functools import lru_cache


class PatternMatcher(ABC):
    """A compiled test for one pattern."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern

    @abstractmethod
    def matches(self, text: str) -> bool:
        """Return True if the pattern matches somewhere in ``text``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pattern!r})"


class RegexMatcher(PatternMatcher):
    """Matcher backed by a compiled regular expression."""

    def __init__(self, pattern: str, regex: re.Pattern[str]) -> None:
        super().__init__(pattern)
        self.regex = regex

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


class SubstringMatcher(PatternMatcher):
    """Fallback matcher: raw pattern text as a case-insensitive substring."""

    def __init__(self, pattern: str) -> None:
        super().__init__(pattern)
        self.needle = pattern.lower()

    def matches(self, text: str) -> bool:
        return self.needle in text.lower()


def pattern_to_regex(pattern: str) -> str:
    """Translate a dialect pattern into a :mod:`re` expression.

    Args:
        pattern: Pattern in the search-box dialect

    Returns:
        Equivalent regular expression source (without flags)

    Example:
        >>> pattern_to_regex("^ice.+nova")
        '^ice.+nova'
        >>> pattern_to_regex("a+b(c")
        'a\\\\+b\\\\(c'
    """
    parts: list[str] = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "^" and i == 0:
            parts.append("^")
        elif ch == "." and pattern[i + 1:i + 2] == "+":
            parts.append(".+")
            i += 1  # consumed the '+'
        elif ch == ".":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
        i += 1
    return "".join(parts)


@lru_cache(maxsize=65536)
def compile_pattern(pattern: str) -> PatternMatcher:
    """Compile a pattern into a matcher.

    Results are memoized; a matcher is a pure function of its pattern.

    Args:
        pattern: Pattern in the search-box dialect

    Returns:
        A RegexMatcher, or a SubstringMatcher if the translated expression
        does not compile
    """
    try:
        regex = re.compile(pattern_to_regex(pattern), re.IGNORECASE)
    except re.error:
        return SubstringMatcher(pattern)
    return RegexMatcher(pattern, regex)


def matches(pattern: str, text: str) -> bool:
    """Return True if ``pattern`` matches ``text`` (case-insensitive)."""
    return compile_pattern(pattern).matches(text)


def count_matches(pattern: str, texts: Iterable[str]) -> int:
    """Count how many of ``texts`` the pattern matches."""
    matcher = compile_pattern(pattern)
    return sum(1 for text in texts if matcher.matches(text))


def matches_any(pattern: str, texts: Iterable[str]) -> bool:
    """Return True if the pattern matches at least one of ``texts``."""
    matcher = compile_pattern(pattern)
    return any(matcher.matches(text) for text in texts)


__all__ = [
    "PatternMatcher",
    "RegexMatcher",
    "SubstringMatcher",
    "pattern_to_regex",
    "compile_pattern",
    "matches",
    "count_matches",
    "matches_any",
]
