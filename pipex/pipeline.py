"""Running a chain of commands from an input file to an output file."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from typing import Mapping, Optional, Sequence, Union

from pipex.commands import Command

PathLike = Union[str, "os.PathLike[str]"]
Stage = Union[subprocess.Popen, int]


class PipexError(Exception):
    """The pipeline could not be set up or waited for."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.status = status


def _report_os_error(exc: OSError) -> None:
    print(f"pipex: {exc.strerror or exc}", file=sys.stderr)


def open_input(path: PathLike) -> Optional[int]:
    """Open ``path`` for reading; print the error and return None on failure."""
    try:
        return os.open(path, os.O_RDONLY)
    except OSError as exc:
        _report_os_error(exc)
        return None


def open_output(path: PathLike) -> Optional[int]:
    """Create or truncate ``path`` for writing; print the error and return None on failure."""
    try:
        return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        _report_os_error(exc)
        return None


def _close(fd: Optional[int]) -> None:
    if fd is None:
        return
    try:
        os.close(fd)
    except OSError as exc:
        raise PipexError(f"pipex: {exc.strerror or exc}") from exc


def _pipe() -> tuple[int, int]:
    try:
        return os.pipe()
    except OSError as exc:
        _report_os_error(exc)
        raise PipexError(f"pipex: {exc.strerror or exc}") from exc


def _exec_failure(command: Command, exc: OSError) -> int:
    if command.in_path or os.path.exists(command.path):
        _report_os_error(exc)
        return 126
    if "/" in command.path:
        print(f"pipex: no such file or directory: {command.path}", file=sys.stderr)
    else:
        print(f"pipex: command not found: {command.path}", file=sys.stderr)
    return 127


def _launch(
    command: Command,
    stdin: Optional[int],
    stdout: Optional[int],
    env: Optional[Mapping[str, str]],
) -> Stage:
    """Start ``command``, or report why it cannot run and return its exit status."""
    try:
        if not command.path:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT))
        # A bare name is executed relative to the working directory, never searched.
        executable = command.path if "/" in command.path else "./" + command.path
        return subprocess.Popen(
            command.args,
            executable=executable,
            stdin=stdin,
            stdout=stdout,
            env=None if env is None else dict(env),
        )
    except OSError as exc:
        return _exec_failure(command, exc)


def run_pipeline(
    infile: Union[PathLike, int, None],
    commands: Sequence[Command],
    outfile: PathLike,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run ``commands`` connected by pipes and return the last one's exit status.

    ``infile`` is a path to open, or a descriptor from :func:`open_input`
    (None when opening failed). Without input the first command is not run;
    without output the last one is not run, and either then ends with status 1.
    The output file is opened only after every earlier command has started.
    A command killed by a signal gives 128 plus the signal number.
    """
    commands = list(commands)
    if not commands:
        raise ValueError("no commands to run")
    if infile is None or isinstance(infile, int):
        in_fd = infile
    else:
        in_fd = open_input(infile)

    stages: list[Stage] = []
    source = in_fd
    out_fd: Optional[int] = None
    last = len(commands) - 1
    try:
        for index, command in enumerate(commands):
            if index == last:
                out_fd = open_output(outfile)
                read_end, target = None, out_fd
            else:
                read_end, target = _pipe()
            blocked = (index == 0 and in_fd is None) or (index == last and out_fd is None)
            try:
                stages.append(1 if blocked else _launch(command, source, target, env))
            finally:
                _close(source)
                source = None
                _close(target)
                source = read_end
    except BaseException:
        if source is not None:
            try:
                os.close(source)
            except OSError:
                pass
        raise

    final = stages[-1]
    if isinstance(final, int):
        status = final
    else:
        try:
            code = final.wait()
        except ChildProcessError as exc:
            raise PipexError(f"pipex: {exc.strerror or exc}") from exc
        status = code if code >= 0 else 128 - code
    for stage in stages[:-1]:
        if not isinstance(stage, int):
            stage.poll()
    return status