"""Shell package: dispatcher, builtins and process spawning."""

from .common import Streams
from .core import Shell

__all__ = ["Shell", "Streams"]
