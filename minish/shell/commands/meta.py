"""Builtins that act on the shell itself."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...exceptions import ShellExit
from ..common import EXIT_FAILURE, EXIT_USAGE, Streams
from ..registry import BUILTINS

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell

EXIT_HINT = "exit: use 'exit 0' to leave the shell"


@BUILTINS.builtin("exit")
def exit(shell: "Shell", args: list[str], streams: Streams) -> int:  # noqa: A001
    if args == ["0"]:
        raise ShellExit(0)
    streams.err(EXIT_HINT)
    return EXIT_USAGE


@BUILTINS.builtin("type")
def type(shell: "Shell", args: list[str], streams: Streams) -> int | None:  # noqa: A001
    if len(args) != 1:
        streams.err("type: usage: type NAME")
        return EXIT_USAGE
    name = args[0]
    found = shell.describe(name)
    if found is None:
        streams.err(f"{name}: not found")
        return EXIT_FAILURE
    if found == "builtin":
        streams.out(f"{name} is a shell builtin")
    else:
        streams.out(f"{name} is {found}")
    return None
