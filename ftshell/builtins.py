"""Commands the shell runs itself: echo, cd, pwd, env, export, unset, exit.

Each command takes its arguments with the command name first, writes to
the given text streams (standard output and error by default) and
returns its exit status. ``exit`` raises ShellExit instead of returning
when the shell is to stop.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import TextIO

from ftshell.environment import NO_VALUE, is_valid_env_name
from ftshell.shell import ShellState

_LLONG_MIN = -(2**63)
_WHITESPACE = frozenset(" \t\n\v\f\r")
_MAX_EXIT_DIGITS = 19


class ShellExit(Exception):
    """Raised when the shell is asked to terminate with ``code``."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


def _stream(stream: TextIO | None, default: TextIO) -> TextIO:
    return default if stream is None else stream


def is_n_flag(arg: str | None) -> bool:
    """True for an echo option made of '-' and one or more 'n'."""
    if not arg or arg[0] != "-":
        return False
    rest = arg[1:]
    return bool(rest) and all(char == "n" for char in rest)


def echo(args: Sequence[str], out: TextIO | None = None) -> int:
    """Print the arguments separated by spaces; leading -n flags drop the newline."""
    out = _stream(out, sys.stdout)
    words = list(args[1:])
    suppress_newline = bool(words) and is_n_flag(words[0])
    while words and is_n_flag(words[0]):
        words.pop(0)
    out.write(" ".join(words))
    if not suppress_newline:
        out.write("\n")
    return 0


def _change_directory(shell: ShellState, path: str, err: TextIO) -> int:
    try:
        os.chdir(path)
    except PermissionError:
        err.write("minishell: cd: Permission denied\n")
        return 1
    except FileNotFoundError:
        err.write("minishell: cd: No such file or directory\n")
        return 1
    except NotADirectoryError:
        err.write("minishell: cd: Not a directory\n")
        return 1
    except OSError:
        return 1
    try:
        new_path = os.getcwd()
    except OSError:
        new_path = path
    shell.env.update("OLDPWD", shell.cwd)
    shell.env.update("PWD", new_path)
    shell.cwd = new_path
    return 0


def expand_path(shell: ShellState, path: str, err: TextIO | None = None) -> str | None:
    """Replace a leading '~' with HOME; None when HOME is not set."""
    err = _stream(err, sys.stderr)
    if path.startswith("~"):
        home = shell.env.get("HOME")
        if home is None:
            err.write("minishell: cd: HOME not set\n")
            return None
        return home + path[1:]
    return path


def cd(
    shell: ShellState,
    args: Sequence[str],
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Change the working directory and keep PWD and OLDPWD in step."""
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    if len(args) > 2:
        err.write("minishell: cd: too many arguments\n")
        return 1
    target = args[1] if len(args) > 1 else None
    if target is None or target in ("--", "~"):
        home = shell.env.get("HOME")
        if home is None:
            err.write("cd: HOME not set\n")
            return 1
        return _change_directory(shell, home, err)
    if target == "-":
        previous = shell.env.get("OLDPWD")
        if previous is None:
            err.write("cd: OLDPWD not set\n")
            return 1
        out.write(previous + "\n")
        return _change_directory(shell, previous, err)
    return _change_directory(shell, target, err)


def pwd(out: TextIO | None = None) -> int:
    """Print the current working directory."""
    out = _stream(out, sys.stdout)
    out.write(os.getcwd() + "\n")
    return 0


def env_builtin(shell: ShellState, out: TextIO | None = None) -> int:
    """Print every variable that has a value as KEY=value."""
    out = _stream(out, sys.stdout)
    for line in shell.env.env_lines():
        out.write(line + "\n")
    return 0


def is_empty_assignment(arg: str) -> bool:
    """True when nothing, or a pair of double quotes, follows the first '='."""
    _, sep, rest = arg.partition("=")
    return bool(sep) and (rest == "" or rest.startswith('""'))


def _export_one(shell: ShellState, arg: str) -> None:
    key, sep, rest = arg.partition("=")
    if sep:
        value = "" if is_empty_assignment(arg) else rest
        if key in shell.env:
            shell.env.update(key, value)
        else:
            shell.env.add(key, value)
    elif key not in shell.env:
        shell.env.add(key, NO_VALUE)


def export(
    shell: ShellState,
    args: Sequence[str],
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Define or list exported variables.

    Without arguments every variable is listed in ``declare -x`` form.
    An invalid name is reported and makes the status 1, but the other
    arguments are still processed.
    """
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    if len(args) < 2:
        for line in shell.env.export_lines():
            out.write(line + "\n")
        return 0
    status = 0
    for arg in args[1:]:
        key = arg.partition("=")[0]
        if not is_valid_env_name(key):
            err.write(f"minishell: export: `{arg}': not a valid identifier\n")
            status = 1
        else:
            _export_one(shell, arg)
    return status


def unset(shell: ShellState, args: Sequence[str]) -> int:
    """Remove each named variable; unknown names are ignored."""
    for name in args[1:]:
        shell.env.delete(name)
    return 0


def is_valid_exit_arg(arg: str) -> bool:
    """True for an optional sign followed by 1 to 19 decimal digits."""
    digits = arg[1:] if arg[:1] in ("-", "+") else arg
    if not digits or len(digits) > _MAX_EXIT_DIGITS:
        return False
    return all("0" <= char <= "9" for char in digits)


def atoll(text: str) -> int:
    """Parse a leading decimal integer, wrapping like a 64-bit signed value."""
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    while position < length and "0" <= text[position] <= "9":
        result = result * 10 + (ord(text[position]) - ord("0"))
        position += 1
    return (sign * result - _LLONG_MIN) % 2**64 + _LLONG_MIN


def exit_builtin(
    shell: ShellState,
    args: Sequence[str],
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Stop the shell by raising ShellExit.

    With no argument the last exit status is used; a non-numeric argument
    gives status 2. With more than one argument nothing happens and 1 is
    returned.
    """
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    if len(args) < 2:
        raise ShellExit(shell.last_exit_code)
    arg = args[1]
    if not is_valid_exit_arg(arg):
        out.write("exit\n")
        err.write(f"minishell: exit: {arg}: numeric argument required\n")
        raise ShellExit(2)
    if len(args) > 2:
        err.write("minishell: exit: too many arguments\n")
        return 1
    code = atoll(arg) % 256
    out.write("exit\n")
    raise ShellExit(code)