"""Exception hierarchy for minish."""

from __future__ import annotations


class ShellError(Exception):
    """Base class for errors reported against a single command."""


class ShellSyntaxError(ShellError):
    """Raised when a command line cannot be parsed."""


class RedirectionError(ShellError):
    """Raised when a redirection sink cannot be opened."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class UnsupportedDescriptor(RedirectionError):
    """Raised when a descriptor other than stdout/stderr is requested."""


class CommandNotFound(ShellError):
    """Raised when a name is neither a builtin nor an indexed executable."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: command not found")
        self.name = name


class SpawnError(ShellError):
    """Raised when an external process cannot be started."""

    def __init__(self, message: str, *, exit_code: int = 126) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ShellExit(Exception):
    """Request to terminate the shell process with ``code``."""

    def __init__(self, code: int = 0) -> None:
        super().__init__(code)
        self.code = code


__all__ = [
    "ShellError",
    "ShellSyntaxError",
    "RedirectionError",
    "UnsupportedDescriptor",
    "CommandNotFound",
    "SpawnError",
    "ShellExit",
]
