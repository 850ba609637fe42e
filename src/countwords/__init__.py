"""Count and sort words by their number of occurrences."""

from .counter import count_words, tokenize
from .errors import (
    CountWordsError,
    CreateError,
    EncodeError,
    MissingArgumentError,
    OpenError,
    ReadError,
    ProfileError,
    WriteError,
)
from .models import WordCount
from .output import write_json, write_table
from .ranker import rank_words

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "count_words",
    "tokenize",
    "rank_words",
    "WordCount",
    "write_table",
    "write_json",
    "CountWordsError",
    "MissingArgumentError",
    "OpenError",
    "CreateError",
    "ReadError",
    "EncodeError",
    "WriteError",
    "ProfileError",
]
