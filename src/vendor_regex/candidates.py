"""
Candidate generation for label abbreviation.

Every generator here is lazy and deterministic: candidates come out in the
exact order the abbreviator tries them, shortest total pattern length first.
At each length the order is cross-word bridge, plain substring, then anchored
prefix. Long-range ``.+`` spans are only reached once the main loop has run
up to the full label length.
"""

from __future__ import annotations

from collections.abc import Iterator

from .config import DEFAULT_CONFIG, AbbreviatorConfig


def normalize_label(label: str) -> str:
    """Lower-case a label for matching."""
    return label.lower()


def literalize(text: str) -> str:
    """Rewrite spaces as single-character wildcards."""
    return text.replace(" ", ".")


def split_words(lower: str) -> list[str]:
    """Split a lower-cased label on runs of whitespace."""
    return lower.split()


def iter_substrings(lower: str, length: int) -> Iterator[str]:
    """Yield every window of ``length`` characters, left to right."""
    if length <= 0:
        return
    for start in range(len(lower) - length + 1):
        yield literalize(lower[start:start + length])


def iter_cross_word(words: list[str], total_length: int) -> Iterator[str]:
    """Yield ``end(word[i]) + "." + start(word[i+1])`` bridges.

    The left part is taken from the end of one word and the right part from
    the start of the next; the ``.`` stands in for the space between them.
    Both parts are at least two characters long.

    Args:
        words: Words of the lower-cased label
        total_length: Length of the produced patterns, bridge dot included
    """
    for left_len in range(2, total_length - 1):
        right_len = total_length - left_len - 1
        if right_len < 2:
            continue
        for left_word, right_word in zip(words, words[1:]):
            if left_len > len(left_word) or right_len > len(right_word):
                continue
            yield left_word[-left_len:] + "." + right_word[:right_len]


def anchored_prefix(
    lower: str,
    prefix_length: int,
    config: AbbreviatorConfig = DEFAULT_CONFIG,
) -> str | None:
    """Return ``"^" + prefix`` or None if the prefix length is out of range."""
    if prefix_length < config.min_prefix_length or prefix_length > len(lower):
        return None
    return "^" + literalize(lower[:prefix_length])


def iter_spans(words: list[str], config: AbbreviatorConfig = DEFAULT_CONFIG) -> Iterator[str]:
    """Yield ``end(word[0]) + ".+" + start(word[k])`` spans, shortest first.

    The left part always comes from the first word; the right part from the
    start of any later word, so the span may jump over several words.
    """
    if len(words) < 2:
        return
    first = words[0]
    for total_length in range(config.span_min_length, config.span_max_length + 1):
        for left_len in range(2, min(total_length - 4, len(first)) + 1):
            right_len = total_length - left_len - 2
            if right_len < 2 or right_len > config.span_right_max:
                continue
            for word in words[1:]:
                if right_len > len(word):
                    continue
                yield first[-left_len:] + ".+" + word[:right_len]


def iter_main_candidates(
    lower: str,
    config: AbbreviatorConfig = DEFAULT_CONFIG,
) -> Iterator[str]:
    """Yield bridge, substring and prefix candidates by ascending length.

    An anchored prefix of ``length - 1`` characters has total length
    ``length`` once the ``^`` is counted, so it competes with substrings of
    the same length.
    """
    words = split_words(lower)
    multi_word = len(words) >= 2
    for length in range(config.min_length, len(lower) + 1):
        if multi_word and length <= config.cross_word_max_length:
            yield from iter_cross_word(words, length)
        yield from iter_substrings(lower, length)
        prefix = anchored_prefix(lower, length - 1, config)
        if prefix is not None:
            yield prefix


def iter_candidates(label: str, config: AbbreviatorConfig = DEFAULT_CONFIG) -> Iterator[str]:
    """Yield every candidate pattern for ``label`` in search order.

    Args:
        label: Label to abbreviate (any case)
        config: Search bounds

    Yields:
        Candidate patterns; the same pattern may appear more than once
    """
    lower = normalize_label(label)
    yield from iter_main_candidates(lower, config)
    yield from iter_spans(split_words(lower), config)


def full_label_pattern(label: str) -> str:
    """The fallback pattern: the whole lower-cased label, spaces as dots."""
    return literalize(normalize_label(label))


__all__ = [
    "normalize_label",
    "literalize",
    "split_words",
    "iter_substrings",
    "iter_cross_word",
    "anchored_prefix",
    "iter_spans",
    "iter_main_candidates",
    "iter_candidates",
    "full_label_pattern",
]
