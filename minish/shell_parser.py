"""Minimal shell parser for arguments and output redirections."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from .exceptions import ShellSyntaxError
from .lexer import tokenize

STDOUT = 1
STDERR = 2


class WriteMode(str, Enum):
    TRUNCATE = "w"
    APPEND = "a"


@dataclass(frozen=True, slots=True)
class RedirectTarget:
    fd: int
    mode: WriteMode
    path: str


@dataclass
class ParsedCommand:
    argv: list[str] = field(default_factory=list)
    redirects: dict[int, RedirectTarget] = field(default_factory=dict)

    @property
    def name(self) -> str | None:
        return self.argv[0] if self.argv else None

    @property
    def args(self) -> list[str]:
        return self.argv[1:]


REDIRECT_OPERATORS: dict[str, tuple[int, WriteMode]] = {
    ">": (STDOUT, WriteMode.TRUNCATE),
    "1>": (STDOUT, WriteMode.TRUNCATE),
    ">>": (STDOUT, WriteMode.APPEND),
    "1>>": (STDOUT, WriteMode.APPEND),
    "2>": (STDERR, WriteMode.TRUNCATE),
    "2>>": (STDERR, WriteMode.APPEND),
}


def parse_command(tokens: Sequence[str]) -> ParsedCommand:
    command = ParsedCommand()
    idx = 0
    while idx < len(tokens):
        token = tokens[idx]
        operator = REDIRECT_OPERATORS.get(token)
        if operator is None:
            command.argv.append(token)
            idx += 1
            continue
        if idx + 1 >= len(tokens) or tokens[idx + 1] in REDIRECT_OPERATORS:
            raise ShellSyntaxError("redirection missing target")
        fd, mode = operator
        # Later redirections for the same descriptor replace earlier ones.
        command.redirects[fd] = RedirectTarget(fd=fd, mode=mode, path=tokens[idx + 1])
        idx += 2
    return command


def parse_line(line: str) -> ParsedCommand:
    return parse_command(tokenize(line))


__all__ = [
    "ParsedCommand",
    "RedirectTarget",
    "WriteMode",
    "REDIRECT_OPERATORS",
    "STDOUT",
    "STDERR",
    "parse_command",
    "parse_line",
]
