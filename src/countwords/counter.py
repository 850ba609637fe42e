"""Whitespace tokenization and frequency counting."""

from collections import Counter
from collections.abc import Iterable, Iterator
from typing import IO, AnyStr

from .errors import ReadError


def tokenize(line: str) -> list[str]:
    """Split text into maximal runs of non-whitespace characters.

    Leading and trailing whitespace is dropped and empty tokens never occur.
    """
    return line.split()


def _decode_lines(lines: Iterable[AnyStr]) -> Iterator[str]:
    """Yield text lines, decoding bytes as UTF-8.

    Invalid bytes are kept as lone surrogates so distinct raw tokens stay
    distinct and can be written back byte for byte.
    """
    for line in lines:
        if isinstance(line, bytes):
            yield line.decode("utf-8", errors="surrogateescape")
        else:
            yield line


def count_words(stream: IO[AnyStr]) -> Counter[str]:
    """Count occurrences of every whitespace-delimited token in a stream.

    The stream is read line by line until exhausted. Tokens are kept exactly
    as they appear, with no case folding or punctuation stripping.

    Args:
        stream: Readable text or binary stream.

    Returns:
        Counter mapping each distinct token to its number of occurrences.

    Raises:
        ReadError: If the stream fails at any point. No partial counts are
            returned.
    """
    counts: Counter[str] = Counter()
    try:
        for line in _decode_lines(stream):
            counts.update(tokenize(line))
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError() from e
    return counts
