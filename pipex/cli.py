"""Command-line entry point: ``pipex infile "cmd1" "cmd2" outfile``."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from pipex.commands import parse_commands
from pipex.paths import path_dirs
from pipex.pipeline import PipexError, open_input, run_pipeline

_ARGUMENT_COUNT = 4


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run two commands from ``infile`` to ``outfile``, like ``< infile cmd1 | cmd2 > outfile``.

    ``argv`` holds the arguments without the program name. Returns the exit
    status of the last command, or 1 when the arguments are wrong or a
    command string cannot be parsed.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != _ARGUMENT_COUNT:
        return 1
    infile, *command_strings, outfile = args
    env = dict(os.environ)

    in_fd = open_input(infile)
    try:
        commands = parse_commands(command_strings, path_dirs(env))
    except ValueError:
        if in_fd is not None:
            os.close(in_fd)
        return 1

    try:
        return run_pipeline(in_fd, commands, outfile, env)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return exc.status


if __name__ == "__main__":
    sys.exit(main())