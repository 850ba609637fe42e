"""Text and JSON writers for ranked word counts."""

import re
from collections.abc import Iterable
from typing import TextIO

from pydantic_core import PydanticSerializationError

from .errors import EncodeError, WriteError
from .models import WordCount, WordCountList

# Width of the right-aligned count column in table output
COUNT_WIDTH = 16

# Lone surrogates left by decoding invalid UTF-8 input
_SURROGATES = re.compile("[\ud800-\udfff]")


def format_row(entry: WordCount) -> str:
    """Format one table line: right-aligned count, a space, the word."""
    return f"{entry.count:{COUNT_WIDTH}d} {entry.word}\n"


def write_table(entries: Iterable[WordCount], out: TextIO) -> None:
    """Write one ``count word`` line per entry, with no header or summary.

    Raises:
        WriteError: If the output stream fails.
    """
    try:
        for entry in entries:
            out.write(format_row(entry))
        out.flush()
    except (OSError, UnicodeError) as e:
        raise WriteError() from e


def _json_safe(entry: WordCount) -> WordCount:
    word = _SURROGATES.sub("\ufffd", entry.word)
    if word == entry.word:
        return entry
    return WordCount(word=word, count=entry.count)


def encode_json(entries: list[WordCount]) -> str:
    """Serialize entries as a JSON array indented by two spaces.

    Bytes that were not valid UTF-8 in the input are written as U+FFFD, one
    per byte.

    Raises:
        EncodeError: If an entry cannot be represented as JSON text.
    """
    try:
        data = WordCountList.dump_json([_json_safe(e) for e in entries], indent=2)
        return data.decode("utf-8")
    except (PydanticSerializationError, UnicodeError) as e:
        raise EncodeError() from e


def write_json(entries: list[WordCount], out: TextIO) -> None:
    """Write entries to ``out`` as a single JSON value followed by a newline.

    Raises:
        EncodeError: If serialization fails. Nothing is written in that case.
        WriteError: If the output stream fails.
    """
    text = encode_json(entries)
    try:
        out.write(text)
        out.write("\n")
        out.flush()
    except (OSError, UnicodeError) as e:
        raise WriteError() from e
