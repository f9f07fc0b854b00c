"""Shared shell types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from .core import Shell

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_CANNOT_EXECUTE = 126
EXIT_NOT_FOUND = 127


@dataclass(slots=True)
class Streams:
    stdout: TextIO
    stderr: TextIO

    def out(self, text: str) -> None:
        self.stdout.write(f"{text}\n")

    def err(self, text: str) -> None:
        self.stderr.write(f"{text}\n")


ShellCommand = Callable[["Shell", list[str], Streams], int | None]


__all__ = [
    "Streams",
    "ShellCommand",
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
    "EXIT_USAGE",
    "EXIT_CANNOT_EXECUTE",
    "EXIT_NOT_FOUND",
]
