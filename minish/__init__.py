"""minish package: a small interactive shell with redirection support."""

from .config import ShellConfig
from .exceptions import (
    CommandNotFound,
    RedirectionError,
    ShellError,
    ShellExit,
    ShellSyntaxError,
    SpawnError,
    UnsupportedDescriptor,
)
from .executables import build_executable_index
from .lexer import tokenize
from .redirection import resolve
from .shell import Shell, Streams
from .shell_parser import ParsedCommand, RedirectTarget, WriteMode, parse_command, parse_line

__all__ = [
    "Shell",
    "Streams",
    "ShellConfig",
    "ParsedCommand",
    "RedirectTarget",
    "WriteMode",
    "tokenize",
    "parse_command",
    "parse_line",
    "resolve",
    "build_executable_index",
    "ShellError",
    "ShellSyntaxError",
    "RedirectionError",
    "UnsupportedDescriptor",
    "CommandNotFound",
    "SpawnError",
    "ShellExit",
]
