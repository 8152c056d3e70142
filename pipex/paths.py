"""Looking up environment variables and the directories listed in PATH."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Union

from pipex.libft.strings import split

Environment = Union[Mapping[str, str], Iterable[str]]


def env_get(env: Environment, name: str) -> Optional[str]:
    """Value of the variable ``name`` in ``env``, or None when it is not set.

    ``env`` is a mapping, or a sequence of ``NAME=value`` entries. For entries,
    the first one that begins with ``name`` is used, and its value is the text
    after the name and one separator character.
    """
    if isinstance(env, Mapping):
        return env.get(name)
    for entry in env:
        if entry.startswith(name):
            return entry[len(name) + 1:]
    return None


def path_dirs(env: Environment) -> list[str]:
    """Directories named in PATH, in order, each ending with ``/``.

    Empty entries are dropped. Without a PATH variable the list is empty and
    commands can only be run by their own path.
    """
    value = env_get(env, "PATH")
    if value is None:
        return []
    return [directory + "/" for directory in split(value, ":") or []]