"""Builtin command bodies.

Each module binds its handlers into ``BUILTINS`` when imported, so loading
this package fixes the builtin set for the process.
"""

from . import meta as _meta  # noqa: F401
from . import navigation as _navigation  # noqa: F401
from . import text as _text  # noqa: F401

__all__ = []
