"""Run options for a single countwords invocation."""

import argparse
from dataclasses import dataclass
from pathlib import Path

from .errors import MissingArgumentError

# Input path meaning "read standard input"
STDIN_MARKER = "-"


@dataclass(frozen=True)
class CountOptions:
    """Options controlling one count-and-rank run."""

    input: str
    output: Path | None = None
    reverse: bool = False
    json: bool = False
    cpu_profile: Path | None = None

    @property
    def reads_stdin(self) -> bool:
        """True if input comes from standard input rather than a file."""
        return self.input == STDIN_MARKER

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "CountOptions":
        """Create CountOptions from parsed command-line arguments.

        Raises:
            MissingArgumentError: If no input was given.
        """
        if args.input is None:
            raise MissingArgumentError()
        return cls(
            input=args.input,
            output=args.output,
            reverse=args.reverse,
            json=args.json,
            cpu_profile=args.cpuprofile,
        )
