# pipex

`pipex` runs two commands joined by a pipe, reading from one file and
writing to another. It behaves like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

Exactly four arguments are required. With any other number, `pipex` exits
with status 1 and does nothing.

For example:

```sh
pipex input.txt "grep -i error" "wc -l" count.txt
```

This counts the lines of `input.txt` that contain "error" and writes the
number to `count.txt`.

### How commands are found

- A command name that contains a `/` is run from that path as given.
- Any other name is looked up in each directory of `PATH`, in order. The
  first executable match is used; failing that, an existing but
  non-executable match; failing that, the name itself, which is then tried
  relative to the working directory.
- If `PATH` is not set, no directories are searched.

### Quoting

Each command string is split into words on spaces. Single and double
quotes group words together, and inside a quoted section a backslash in
front of the closing quote keeps that quote literal:

```sh
pipex in.txt "grep 'two words'" "tr a-z A-Z" out.txt
```

A command string that is empty or blank is rejected, and so is one in which
both the single quotes and the double quotes that open a quoted section
come to an odd count. When a command string is rejected, `pipex` exits with
status 1 without running anything.

### Errors and exit status

- If the input file cannot be opened, an error is printed and the first
  command does not run. The rest of the pipeline still runs.
- The output file is created or truncated with mode `0644`, after the first
  command has started. If it cannot be opened, an error is printed and the
  last command does not run; the status is then 1.
- A command that cannot be found prints `pipex: command not found: NAME`,
  or `pipex: no such file or directory: PATH` when it was given as a path,
  and counts as exiting with 127. A command that exists but cannot be run
  prints the system error and counts as exiting with 126.
- The exit status of `pipex` is the exit status of the last command. A last
  command killed by a signal gives 128 plus the signal number.

## Library use

The building blocks can also be imported:

```python
from pipex.args import split_args
from pipex.paths import path_dirs
from pipex.commands import parse_commands
from pipex.pipeline import run_pipeline

words = split_args("grep 'two words'")   # ['grep', 'two words']
commands = parse_commands(["cat", "wc -l"], path_dirs({"PATH": "/usr/bin:/bin"}))
status = run_pipeline("input.txt", commands, "count.txt")
```

- `pipex.args`: `quotes_balanced`, `count_args`, `split_args`.
- `pipex.paths`: `env_get(env, name)` and `path_dirs(env)`, where `env` is
  a mapping or a list of `NAME=value` entries.
- `pipex.commands`: the `Command` dataclass (`path`, `args`, `in_path`),
  `resolve_command(words, search_dirs)` and
  `parse_commands(arguments, search_dirs)`.
- `pipex.pipeline`: `open_input`, `open_output`,
  `run_pipeline(infile, commands, outfile, env=None)`, which runs any
  number of commands and returns the last one's status, and `PipexError`,
  raised when the pipeline cannot be set up or waited for.
- `pipex.cli`: `main(argv=None)`, the command-line entry point.

`pipex.libft` holds small general helpers:

- `charclass`: ASCII `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`.
- `strings`: `atoi`, `itoa`, `strchr`, `strrchr`, `strncmp`, `strcmp`,
  `strnstr`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`, `strarrcmp`.
- `linkedlist`: `LinkedList`, a singly linked list.
- `output`: `putchar`, `putstr`, `putendl`, `putnbr`, `putstrarr`, writing
  to a text stream.
- `color`: ANSI escape codes, `sequence` and `colorize`.
- `printf`: `format_string`, `dprintf` and `printf` for the conversions
  `c s p d i u x X %`, raising `FormatError` on bad input.
- `lines`: `LineReader`, reading a descriptor or binary stream line by line.

## Limitations

The `pipex` command takes exactly two commands; longer chains are only
available through `run_pipeline`. There is no here-document input and no
appending to the output file.

## Tests

```sh
pip install ".[test]"
pytest
```