"""Shell environment variables kept in definition order."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ftshell.chars import INT_MAX, INT_MIN, atoi, isalnum, isdigit, itoa

NO_VALUE = "##NO_VALUE##"
"""Marks a variable that was exported without a value."""

DEFAULT_PATH = "/usr/local/bin:/usr/bin:/bin"


@dataclass
class _Variable:
    key: str
    value: str


class Environment:
    """An ordered collection of shell variables.

    Variables keep the order in which they were added. Lookups, updates
    and deletions act on the first variable with a matching name.
    """

    def __init__(self, items: Iterable[tuple[str, str | None]] = ()) -> None:
        self._variables: list[_Variable] = []
        for key, value in items:
            self.add(key, value)

    def _find(self, key: str) -> _Variable | None:
        return next((var for var in self._variables if var.key == key), None)

    def add(self, key: str, value: str | None) -> None:
        """Append a variable; an empty name is ignored, a missing value is ''."""
        if not key:
            return
        self._variables.append(_Variable(key, "" if value is None else value))

    def get(self, key: str) -> str | None:
        """The value of the first variable named ``key``, or None."""
        var = self._find(key)
        return None if var is None else var.value

    def update(self, key: str, value: str) -> None:
        """Replace the value of an existing variable; unknown names are ignored."""
        var = self._find(key)
        if var is not None:
            var.value = value

    def delete(self, key: str) -> None:
        """Remove the first variable named ``key``, if there is one."""
        for index, var in enumerate(self._variables):
            if var.key == key:
                del self._variables[index]
                return

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __iter__(self) -> Iterator[str]:
        return (var.key for var in self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def env_lines(self) -> list[str]:
        """``KEY=value`` lines for every variable that has a value."""
        return [
            f"{var.key}={var.value}"
            for var in self._variables
            if var.value != NO_VALUE
        ]

    def export_lines(self) -> list[str]:
        """``declare -x`` lines for every variable, sorted by name."""
        lines = []
        for key in sorted(self):
            value = self.get(key)
            if value == NO_VALUE:
                lines.append(f"declare -x {key}")
            else:
                lines.append(f'declare -x {key}="{value}"')
        return lines

    def update_shlvl(self) -> None:
        """Increase SHLVL by one, creating it with 1 when it is absent."""
        current = self.get("SHLVL")
        level = 1 if current is None else atoi(current) + 1
        if level > INT_MAX:
            level = INT_MIN
        new_value = itoa(level)
        if current is None:
            self.add("SHLVL", new_value)
        else:
            self.update("SHLVL", new_value)


def is_valid_env_name(name: str | None) -> bool:
    """True when the part of ``name`` before any '=' is a valid identifier."""
    if not name or name[0] == "=":
        return False
    identifier = name.split("=", 1)[0]
    if isdigit(identifier[0]):
        return False
    return all(isalnum(char) or char == "_" for char in identifier)


def minimal_env(cwd: str | None = None) -> Environment:
    """The environment used when none is inherited."""
    if cwd is None:
        cwd = os.getcwd()
    return Environment(
        [("PWD", cwd), ("SHLVL", "1"), ("PATH", DEFAULT_PATH)]
    )


def init_env(envp: Iterable[str] | None, cwd: str | None = None) -> Environment:
    """Build an environment from ``KEY=value`` strings.

    Entries without '=' are skipped. With no entries at all the minimal
    environment is returned instead.
    """
    entries = list(envp or ())
    if not entries:
        return minimal_env(cwd)
    env = Environment()
    for entry in entries:
        key, sep, value = entry.partition("=")
        if sep:
            env.add(key, value)
    return env