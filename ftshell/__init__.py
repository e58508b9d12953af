"""Environment store, session state and builtin commands for a small POSIX-style shell."""

__version__ = "0.1.0"
__all__ = ["chars", "strutil", "environment", "shell", "builtins"]