"""Working-directory builtins."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from ..common import EXIT_FAILURE, EXIT_USAGE, Streams
from ..registry import BUILTINS

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


def expand_home(target: str | None, home: str | None) -> str:
    """Resolve ``~`` against ``home``; an unset home falls back to ``/``."""

    base = home or "/"
    if target is None or target == "~":
        return base
    if target.startswith("~/"):
        return str(Path(base) / target[2:])
    return target


@BUILTINS.builtin("pwd")
def pwd(shell: "Shell", _: list[str], streams: Streams) -> int | None:
    try:
        cwd = os.getcwd()
    except OSError as exc:
        streams.err(f"pwd: {exc.strerror or exc}")
        return EXIT_FAILURE
    streams.out(cwd)
    return None


@BUILTINS.builtin("cd")
def cd(shell: "Shell", args: list[str], streams: Streams) -> int | None:
    if len(args) > 1:
        streams.err("cd: too many arguments")
        return EXIT_USAGE
    given = args[0] if args else None
    label = given if given is not None else "~"
    try:
        resolved = Path(expand_home(given, shell.env.get("HOME"))).resolve(strict=True)
    except (OSError, RuntimeError):
        streams.err(f"cd: {label}: No such file or directory")
        return EXIT_FAILURE
    if not resolved.is_dir():
        streams.err(f"cd: {label}: Not a directory")
        return EXIT_FAILURE
    try:
        os.chdir(resolved)
    except OSError as exc:
        streams.err(f"cd: {label}: {exc.strerror or exc}")
        return EXIT_FAILURE
    return None
