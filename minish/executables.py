"""Index of executables reachable through ``PATH``."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

logger = logging.getLogger(__name__)


def is_executable(path: Path) -> bool:
    try:
        return path.is_file() and os.access(path, os.X_OK)
    except OSError:
        return False


def build_executable_index(search_path: str | None) -> Mapping[str, str]:
    """Map each executable name to its first location along ``search_path``."""

    index: dict[str, str] = {}
    for entry in (search_path or "").split(os.pathsep):
        if not entry:
            continue
        directory = Path(entry)
        try:
            if not directory.is_dir():
                continue
            children = sorted(directory.iterdir())
        except OSError as exc:
            logger.warning("skipping unreadable PATH entry %s: %s", entry, exc)
            continue
        for child in children:
            if child.name in index or not is_executable(child):
                continue
            index[child.name] = str(child)
    logger.debug("indexed %d executables", len(index))
    return MappingProxyType(index)


def find_executable(name: str, index: Mapping[str, str]) -> str | None:
    return index.get(name)


__all__ = ["build_executable_index", "find_executable", "is_executable"]
