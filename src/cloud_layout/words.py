"""Word frequency helpers feeding the tag cloud."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, List, Mapping, Tuple

DEFAULT_STOP_WORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "but", "by", "for", "from",
        "he", "her", "his", "i", "in", "is", "it", "its", "me", "my", "not",
        "of", "on", "or", "she", "so", "that", "the", "their", "them", "they",
        "this", "to", "was", "we", "were", "with", "you", "your",
    }
)

_WORD_RE = re.compile(r"[^\W_]+(?:'[^\W_]+)*")


def count_words(
    text: str,
    *,
    stop_words: Iterable[str] = DEFAULT_STOP_WORDS,
    min_length: int = 1,
) -> Counter[str]:
    """Return lowercase word counts, skipping stop words and short tokens."""

    if min_length <= 0:
        raise ValueError("min_length must be positive")
    boring = {word.lower() for word in stop_words}
    counter: Counter[str] = Counter()
    for match in _WORD_RE.finditer(text.lower()):
        word = match.group(0)
        if len(word) < min_length or word in boring:
            continue
        counter[word] += 1
    return counter


def top_words(frequencies: Mapping[str, int], limit: int | None = None) -> List[Tuple[str, int]]:
    """Most frequent words first, ties broken alphabetically."""

    if limit is not None and limit < 0:
        raise ValueError("limit must be non-negative")
    ordered = sorted(frequencies.items(), key=lambda item: (-item[1], item[0]))
    return ordered if limit is None else ordered[:limit]


def font_size_for(
    count: int,
    min_count: int,
    max_count: int,
    *,
    min_size: int = 12,
    max_size: int = 64,
) -> int:
    """Map ``count`` linearly from ``[min_count, max_count]`` onto font sizes."""

    if min_size <= 0 or max_size < min_size:
        raise ValueError("font sizes must satisfy 0 < min_size <= max_size")
    if max_count <= min_count:
        return max_size
    ratio = (count - min_count) / (max_count - min_count)
    ratio = min(max(ratio, 0.0), 1.0)
    return int(round(min_size + ratio * (max_size - min_size)))


__all__ = ["DEFAULT_STOP_WORDS", "count_words", "top_words", "font_size_for"]
