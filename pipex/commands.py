"""Turning command strings into runnable commands by searching PATH directories."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from pipex.args import split_args


@dataclass
class Command:
    """A command ready to run.

    ``path`` is the file to execute, ``args`` the argument vector (its first
    item is the word the user typed) and ``in_path`` tells whether ``path``
    names a file found in one of the search directories.
    """

    path: str
    args: list[str] = field(default_factory=list)
    in_path: bool = False


def resolve_command(words: Sequence[str], search_dirs: Iterable[str]) -> Command:
    """Build a command from its words, looking its name up in ``search_dirs``.

    A name holding ``/`` is used as given. Otherwise the first executable
    match is used; failing that, the last existing but non-executable match;
    failing that, the name itself.
    """
    if not words:
        raise ValueError("a command needs at least one word")
    args = list(words)
    name = args[0]
    path = None
    in_path = False
    if "/" not in name:
        for directory in search_dirs:
            candidate = os.path.join(directory, name)
            if os.access(candidate, os.X_OK):
                return Command(candidate, args, True)
            if os.access(candidate, os.F_OK):
                path = candidate
                in_path = True
    return Command(name if path is None else path, args, in_path)


def parse_commands(arguments: Iterable[str], search_dirs: Iterable[str]) -> list[Command]:
    """Split and resolve every command string.

    Raises ValueError for a string that is empty, blank or has unclosed quotes.
    """
    dirs = list(search_dirs)
    return [resolve_command(split_args(argument), dirs) for argument in arguments]