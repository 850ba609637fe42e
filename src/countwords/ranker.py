"""Frequency ranking of counted tokens."""

from collections.abc import Mapping

from .models import WordCount


def _sort_key(item: tuple[str, int], reverse: bool) -> tuple[int, str]:
    word, count = item
    return (count if reverse else -count, word)


def rank_words(counts: Mapping[str, int], reverse: bool = False) -> list[WordCount]:
    """Order counted tokens by frequency.

    Most frequent tokens come first unless ``reverse`` is set, in which case
    the least frequent come first. Tokens with equal counts are always ordered
    by their text in ascending code point order, so the result does not depend
    on the iteration order of ``counts``.

    Args:
        counts: Mapping of token to occurrence count. Not modified.
        reverse: If True, sort ascending by count.

    Returns:
        New list with one entry per token in ``counts``.
    """
    items = sorted(counts.items(), key=lambda item: _sort_key(item, reverse))
    return [WordCount(word=word, count=count) for word, count in items]
