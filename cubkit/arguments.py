"""Checking the command line of the map viewer."""

from __future__ import annotations

import os
from collections.abc import Sequence

MAP_SUFFIX = ".cub"


class ArgumentError(Exception):
    """Raised when the command line does not name a readable map file."""

    @property
    def report(self) -> str:
        """The message as shown to the user on standard error."""
        return f"Error\n{self}"


def check_argument_count(argv: Sequence[str]) -> None:
    """Require exactly one argument after the program name."""
    if len(argv) != 2:
        raise ArgumentError("Wrong number of arguments")


def check_map_path(path: str) -> None:
    """Require a ``.cub`` path that can be opened for reading."""
    if not path.endswith(MAP_SUFFIX):
        raise ArgumentError("Wrong file")
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        raise ArgumentError("Cannot read file or file does not exist") from None
    os.close(fd)


def validate_arguments(argv: Sequence[str]) -> str:
    """Check the whole command line and return the map path."""
    check_argument_count(argv)
    check_map_path(argv[1])
    return argv[1]