"""Turn redirection directives into writable sinks."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator, Mapping
from typing import TextIO

from .exceptions import RedirectionError, UnsupportedDescriptor
from .shell_parser import STDERR, STDOUT, RedirectTarget

logger = logging.getLogger(__name__)


def resolve(
    redirects: Mapping[int, RedirectTarget],
    fd: int,
    *,
    stdout: TextIO,
    stderr: TextIO,
) -> TextIO:
    """Return the sink for ``fd``, opening the redirection file if one is mapped.

    Files are opened relative to the current working directory. Truncate mode
    creates or empties the file; append mode creates it if needed and writes at
    the end. Missing parent directories are not created.
    """

    target = redirects.get(fd)
    if target is None:
        if fd == STDOUT:
            return stdout
        if fd == STDERR:
            return stderr
        raise UnsupportedDescriptor(f"unsupported file descriptor: {fd}")
    try:
        sink = open(target.path, target.mode.value, encoding="utf-8")
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise RedirectionError(f"{target.path}: {reason}", path=target.path) from exc
    logger.debug("fd %d -> %s (%s)", fd, target.path, target.mode.name.lower())
    return sink


@contextlib.contextmanager
def redirected(
    redirects: Mapping[int, RedirectTarget],
    fd: int,
    *,
    stdout: TextIO,
    stderr: TextIO,
) -> Iterator[TextIO]:
    """Context manager variant of :func:`resolve` that closes opened files."""

    sink = resolve(redirects, fd, stdout=stdout, stderr=stderr)
    if fd not in redirects:
        yield sink
        return
    try:
        yield sink
    finally:
        sink.close()


__all__ = ["resolve", "redirected"]
