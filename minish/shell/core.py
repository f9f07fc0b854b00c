"""Core Shell implementation."""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from collections.abc import Mapping
from typing import TextIO

from ..exceptions import (
    CommandNotFound,
    RedirectionError,
    ShellError,
    ShellSyntaxError,
    SpawnError,
)
from ..executables import build_executable_index, find_executable
from ..lexer import tokenize
from ..redirection import redirected
from ..shell_parser import STDERR, STDOUT, ParsedCommand, parse_command
from .common import EXIT_FAILURE, EXIT_NOT_FOUND, EXIT_SUCCESS, EXIT_USAGE, Streams
from .host import run_host_process
from .registry import BUILTINS, BuiltinRegistry

logger = logging.getLogger(__name__)


class Shell:
    """Interprets command lines against builtins and indexed executables."""

    def __init__(
        self,
        *,
        env: Mapping[str, str] | None = None,
        executables: Mapping[str, str] | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.env: dict[str, str] = dict(os.environ if env is None else env)
        if executables is None:
            executables = build_executable_index(self.env.get("PATH"))
        self.executables = executables
        self._stdout = stdout
        self._stderr = stderr
        self._builtins = self._load_builtins()

    # ------------------------------------------------------------------
    # Streams and builtins
    # ------------------------------------------------------------------
    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    @property
    def builtins(self) -> frozenset[str]:
        return self._builtins.names()

    def flush(self) -> None:
        self.stdout.flush()
        self.stderr.flush()

    def _load_builtins(self) -> BuiltinRegistry:
        # Importing the command modules binds their handlers
        from . import commands  # noqa: F401

        return BUILTINS

    def describe(self, name: str) -> str | None:
        """Return ``"builtin"``, an executable path, or ``None``."""

        if name in self._builtins:
            return "builtin"
        return find_executable(name, self.executables)

    # ------------------------------------------------------------------
    # Line execution
    # ------------------------------------------------------------------
    def exec(self, text: str) -> int:
        status = EXIT_SUCCESS
        for line in text.splitlines():
            if line.strip():
                status = self.execute_line(line)
        return status

    def execute_line(self, line: str) -> int:
        tokens = tokenize(line)
        if not tokens:
            return EXIT_SUCCESS
        try:
            command = parse_command(tokens)
        except ShellSyntaxError as exc:
            self.stderr.write(f"syntax error: {exc}\n")
            return EXIT_USAGE
        return self.dispatch(command)

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------
    def dispatch(self, command: ParsedCommand) -> int:
        name = command.name
        if name is None:
            return EXIT_SUCCESS
        inherited = {"stdout": self.stdout, "stderr": self.stderr}
        report = self.stderr
        try:
            with contextlib.ExitStack() as stack:
                try:
                    stderr = stack.enter_context(redirected(command.redirects, STDERR, **inherited))
                except RedirectionError as exc:
                    self.stderr.write(f"{exc}\n")
                    return EXIT_FAILURE
                report = stderr
                try:
                    stdout = stack.enter_context(redirected(command.redirects, STDOUT, **inherited))
                except RedirectionError as exc:
                    stderr.write(f"{exc}\n")
                    return EXIT_FAILURE
                streams = Streams(stdout=stdout, stderr=stderr)
                try:
                    return self._run(name, command, streams)
                except CommandNotFound as exc:
                    streams.err(str(exc))
                    return EXIT_NOT_FOUND
                except SpawnError as exc:
                    streams.err(str(exc))
                    return exc.exit_code
                except ShellError as exc:
                    streams.err(f"{name}: {exc}")
                    return EXIT_FAILURE
                except OSError as exc:
                    self._report_os_error(name, exc, stderr)
                    return EXIT_FAILURE
        except OSError as exc:
            # Writes to a redirected file, or its flush on close, failed.
            self._report_os_error(name, exc, report)
            return EXIT_FAILURE

    def _report_os_error(self, name: str, exc: OSError, sink: TextIO) -> None:
        message = f"{name}: {exc.strerror or exc}\n"
        if not sink.closed:
            try:
                sink.write(message)
                sink.flush()
                return
            except OSError:
                logger.debug("stderr sink unusable, falling back to shell stderr")
        self.stderr.write(message)

    def _run(self, name: str, command: ParsedCommand, streams: Streams) -> int:
        handler = self._builtins.lookup(name)
        if handler is not None:
            logger.debug("builtin %s %s", name, command.args)
            status = handler(self, command.args, streams)
            return EXIT_SUCCESS if status is None else status
        location = find_executable(name, self.executables)
        if location is None:
            raise CommandNotFound(name)
        return run_host_process(self, command, location, streams)


__all__ = ["Shell"]
