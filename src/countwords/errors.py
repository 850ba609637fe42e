"""Errors raised while counting and writing word frequencies."""


class CountWordsError(Exception):
    """Base class for all countwords failures.

    Every subclass carries a short ``prefix`` naming the failed stage; the CLI
    prints ``countwords: <prefix>: <cause>`` and exits non-zero.
    """

    prefix = "error"

    def __str__(self) -> str:
        cause = self.__cause__ if self.__cause__ is not None else super().__str__()
        if not str(cause):
            return self.prefix
        return f"{self.prefix}: {cause}"


class MissingArgumentError(CountWordsError):
    """No input source was given on the command line."""

    prefix = "no input file"

    def __str__(self) -> str:
        return self.prefix


class OpenError(CountWordsError):
    """The input file could not be opened."""

    prefix = "open input file"


class CreateError(CountWordsError):
    """The output file could not be created."""

    prefix = "create output file"


class ReadError(CountWordsError):
    """The input stream failed while it was being counted."""

    prefix = "can't count words"


class EncodeError(CountWordsError):
    """Ranked entries could not be serialized to JSON."""

    prefix = "json encoding failed"


class WriteError(CountWordsError):
    """Writing to the output stream failed."""

    prefix = "write output"


class ProfileError(CountWordsError):
    """The CPU profile could not be written."""

    prefix = "write cpu profile"
