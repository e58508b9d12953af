# ftshell

The parts of a small POSIX-style shell that work without a terminal: an
ordered store of environment variables, the session state the commands
share, and the builtin commands `echo`, `cd`, `pwd`, `env`, `export`,
`unset` and `exit`. There are also string and character helpers that
follow C-library rules.

## Modules

### `ftshell.chars`

This module classifies characters and converts integers.

- `isalpha`, `isdigit`, `isalnum`, `isascii` and `isprint` take either a
  one-character string or an integer code. They test only ASCII ranges.
- `toupper` and `tolower` change only ASCII letters. They return a value
  of the same type as their argument.
- `atoi(text)` skips leading whitespace and accepts one optional sign,
  then reads digits until the first non-digit. If it finds no digits it
  returns 0. The result wraps like a 32-bit signed integer.
- `itoa(number)` returns the decimal text of a number. It raises
  `OverflowError` when the number does not fit in 32 signed bits.

### `ftshell.strutil`

This module has string and byte helpers. Each search returns an index,
or `None` when nothing is found.

- `strchr` and `strrchr` find a character. Searching for `"\0"` returns
  `len(text)`.
- `memchr(data, byte, length)` and `memcmp(first, second, length)`
  operate on `bytes`. They raise `ValueError` when `length` exceeds the
  data.
- `strncmp(first, second, length)` returns the difference between the
  first pair of character codes that differ, or 0. A shorter string is
  compared as if it were followed by NUL.
- `strnstr(haystack, needle, length)` finds `needle` only when the whole
  match lies within the first `length` characters. An empty needle is
  found at index 0.
- `strlcpy(src, size)` and `strlcat(dest, src, size)` model a buffer of
  fixed size. Each returns a `(text, full_length)` pair.
- `substr(text, start, length)` returns part of the text. It returns an
  empty string when `start` is past the end.
- `strtrim(text, charset)` removes characters in `charset` from both ends.
- `split(text, sep)` splits on one separator character and drops empty
  fields.

Negative lengths, sizes and starts raise `ValueError`.

### `ftshell.environment`

- `Environment` stores variables in the order they were added. It
  provides:
  - `add`, `get`, `update` and `delete`;
  - `in`, iteration over names, and `len()`;
  - `update_shlvl()`;
  - `env_lines()` and `export_lines()`.

  The methods `get`, `update` and `delete` act on the first variable
  with a matching name. `update` ignores names that are not defined.
  `update_shlvl()` adds 1 to `SHLVL`, or creates `SHLVL` with the value
  1 when it is missing.
- `env_lines()` returns `KEY=value` lines and leaves out variables that
  were exported without a value. `export_lines()` returns
  `declare -x KEY="value"` lines, or `declare -x KEY` for a variable
  without a value, sorted by name.
- `NO_VALUE` is the marker value stored for a variable that was exported
  without a value.
- `is_valid_env_name(name)` checks the part of the name before the
  first `=`. That part must be non-empty, must not start with a digit,
  and may contain only letters, digits and `_`.
- `init_env(envp, cwd)` builds an `Environment` from `KEY=value`
  strings and skips entries that contain no `=`. When `envp` is empty
  it returns `minimal_env(cwd)`, which defines `PWD`, `SHLVL=1` and
  `PATH=/usr/local/bin:/usr/bin:/bin`.

### `ftshell.shell`

- `ShellState` holds the following fields:
  - `env`;
  - `cwd`;
  - `interactive`;
  - `last_exit_code`;
  - `stdio_backup`, which holds two file descriptors or `None` each.

  When a `ShellState` is used as a context manager, it closes any
  descriptors left in `stdio_backup` on exit.
- `init_shell(envp=None, cwd=None, interactive=None)` builds the
  environment and raises `SHLVL` by one. Its defaults are:
  - `envp`: the process environment;
  - `cwd`: the current directory;
  - `interactive`: whether standard input is a terminal.

  It raises `ValueError` when the given entries define no variable, for
  example when every entry lacks `=`.

### `ftshell.builtins`

Each command takes its argument list with the command name first. It
writes to the `out` and `err` text streams it is given, which default to
standard output and standard error. It returns an exit status.

- `echo(args, out)`: prints the words joined by single spaces. Leading
  `-n`, `-nn` and similar flags are skipped and suppress the newline.
- `cd(shell, args, out, err)`: changes the process working directory.
  - With no argument, `--` or `~`, it changes to `HOME`.
  - With `-`, it prints `OLDPWD` and changes to it.
  - With more than one argument it reports an error.

  On success it updates `PWD` and `OLDPWD` if they are defined, and
  updates `shell.cwd`.
- `expand_path(shell, path, err)`: replaces a leading `~` with `HOME`.
  It returns `None` when `HOME` is not set.
- `pwd(out)`: prints the current working directory.
- `env_builtin(shell, out)`: prints `shell.env.env_lines()`.
- `export(shell, args, out, err)`: without arguments, it prints
  `shell.env.export_lines()`. Otherwise it handles each argument:
  - `NAME=value` defines or updates `NAME`.
  - `NAME` alone adds `NAME` without a value if it is not defined.
  - `NAME=` or `NAME=""...` sets an empty value.

  An invalid name is reported as not a valid identifier and sets the
  status to 1. The remaining arguments are still processed.
- `unset(shell, args)`: removes each named variable.
- `exit_builtin(shell, args, out, err)`: raises `ShellExit`, which
  carries the exit status in `.code`. The status depends on the
  arguments:
  - With no argument, the status is `shell.last_exit_code`.
  - A non-numeric argument, or one with more than 19 digits, gives
    status 2.
  - With more than one argument, it prints an error, returns 1 and does
    not exit.
  - Otherwise the status is the number modulo 256.
- `is_n_flag`, `is_empty_assignment`, `is_valid_exit_arg` and `atoll`
  are the helpers these commands use. `atoll` wraps like a 64-bit signed
  integer.

## Example

```python
import io
from ftshell.shell import init_shell
from ftshell.builtins import ShellExit, env_builtin, exit_builtin, export

shell = init_shell(["HOME=/home/user", "SHLVL=1"], "/home/user", False)
out, err = io.StringIO(), io.StringIO()

export(shell, ["export", "GREETING=hello"], out, err)
env_builtin(shell, out)
print(out.getvalue(), end="")
# HOME=/home/user
# SHLVL=2
# GREETING=hello

try:
    exit_builtin(shell, ["exit", "300"], out, err)
except ShellExit as stop:
    print(stop.code)    # 44
```

## What it does not do

This package is not a shell you can run, and it has no command-line
entry point. It does not provide any of the following:

- reading input or a prompt, or keeping history;
- splitting command lines into tokens, expanding variables or handling
  quotes;
- parsing pipelines, redirections or here-documents;
- running external programs or handling signals.

`ShellState.stdio_backup` is only closed here. Nothing in the package
fills it. Calling the builtins, and acting on `ShellExit`, is left to
the caller.

## Tests

```
pip install -e .[test]
pytest
```