"""Command-line interface for minish."""

from __future__ import annotations

import argparse
import sys

from .config import ShellConfig
from .exceptions import ShellExit
from .log import configure_logging
from .shell import Shell


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for diagnostics (default: $MINISH_LOG_LEVEL or WARNING).",
    )


def _load_config(args: argparse.Namespace) -> ShellConfig:
    config = ShellConfig.from_env().with_overrides(
        prompt=getattr(args, "prompt", None),
        log_level=args.log_level,
    )
    configure_logging(config.log_level)
    return config


def _run_exec(args: argparse.Namespace) -> int:
    _load_config(args)
    shell = Shell()
    try:
        return shell.exec(args.command)
    except ShellExit as exc:
        return exc.code


def _run_shell(args: argparse.Namespace) -> int:
    config = _load_config(args)
    shell = Shell()
    try:
        while True:
            sys.stdout.write(config.prompt)
            sys.stdout.flush()
            line = input()
            shell.execute_line(line)
    except ShellExit as exc:
        return exc.code
    except (EOFError, KeyboardInterrupt):
        return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="minish")
    subparsers = parser.add_subparsers(dest="command_name", required=True)

    exec_parser = subparsers.add_parser("exec", help="Run commands and exit")
    _add_common_flags(exec_parser)
    exec_parser.add_argument("command", help="Command line(s) to execute")
    exec_parser.set_defaults(func=_run_exec)

    shell_parser = subparsers.add_parser("shell", help="Start an interactive shell")
    _add_common_flags(shell_parser)
    shell_parser.add_argument("--prompt", default=None, help="Prompt shown before each line.")
    shell_parser.set_defaults(func=_run_shell)

    args = parser.parse_args(argv)
    exit_code = args.func(args)
    raise SystemExit(exit_code)


__all__ = ["main"]
