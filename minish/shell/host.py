"""Helpers for running external programs on the host."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING, TextIO

from ..exceptions import SpawnError
from ..shell_parser import STDERR, STDOUT, ParsedCommand
from .common import EXIT_CANNOT_EXECUTE, EXIT_NOT_FOUND, Streams

if TYPE_CHECKING:
    from .core import Shell

logger = logging.getLogger(__name__)


def child_stream(command: ParsedCommand, fd: int, sink: TextIO) -> TextIO | None:
    """Redirected descriptors get the opened file; the rest are inherited."""

    if fd in command.redirects:
        return sink
    return None


def run_host_process(
    shell: "Shell", command: ParsedCommand, location: str, streams: Streams
) -> int:
    """Run ``command`` as a child process and wait for it to exit."""

    shell.flush()
    stdout = child_stream(command, STDOUT, streams.stdout)
    stderr = child_stream(command, STDERR, streams.stderr)
    for sink in (stdout, stderr):
        if sink is not None:
            sink.flush()
    logger.debug("spawning %s (%s)", command.argv, location)
    try:
        completed = subprocess.run(
            command.argv,
            executable=location,
            stdin=None,
            stdout=stdout,
            stderr=stderr,
            check=False,
        )
    except FileNotFoundError as exc:
        raise SpawnError(
            f"{command.name}: {exc.strerror or exc}", exit_code=EXIT_NOT_FOUND
        ) from exc
    except OSError as exc:
        raise SpawnError(
            f"{command.name}: {exc.strerror or exc}", exit_code=EXIT_CANNOT_EXECUTE
        ) from exc
    return completed.returncode


__all__ = ["run_host_process", "child_stream"]
