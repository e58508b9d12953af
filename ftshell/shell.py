"""State shared by the shell's commands for the length of a session."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from ftshell.environment import Environment, init_env


@dataclass
class ShellState:
    """The running shell: its variables, directory and last exit status.

    ``stdio_backup`` holds duplicated descriptors of standard input and
    output while a redirection is in force, or None for each that is not
    saved. Leaving the state as a context manager closes any that remain.
    """

    env: Environment
    cwd: str
    interactive: bool
    last_exit_code: int = 0
    stdio_backup: list[int | None] = field(default_factory=lambda: [None, None])

    def __enter__(self) -> ShellState:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._close_backups()

    def _close_backups(self) -> None:
        for slot, descriptor in enumerate(self.stdio_backup):
            if descriptor is not None:
                try:
                    os.close(descriptor)
                except OSError:
                    pass
                self.stdio_backup[slot] = None


def init_shell(
    envp: Iterable[str] | None = None,
    cwd: str | None = None,
    interactive: bool | None = None,
) -> ShellState:
    """Create the state for a new shell session.

    ``envp`` holds ``KEY=value`` strings; None takes the process
    environment. SHLVL is raised by one. ``cwd`` defaults to the current
    directory and ``interactive`` to whether standard input is a terminal.

    Raises ValueError when the given entries define no variable at all,
    and OSError when the current directory cannot be determined.
    """
    if envp is None:
        envp = [f"{key}={value}" for key, value in os.environ.items()]
    env = init_env(envp, cwd)
    if not len(env):
        raise ValueError("environment initialization failed")
    env.update_shlvl()
    if cwd is None:
        cwd = os.getcwd()
    if interactive is None:
        interactive = os.isatty(0)
    return ShellState(env=env, cwd=cwd, interactive=bool(interactive))