"""The fixed set of builtin names and their handlers."""

from __future__ import annotations

from collections.abc import Callable

from .common import ShellCommand


class BuiltinRegistry:
    """Maps reserved builtin names to handlers; each name is bound once."""

    def __init__(self) -> None:
        self._handlers: dict[str, ShellCommand] = {}

    def register(self, name: str, handler: ShellCommand) -> ShellCommand:
        if name in self._handlers:
            raise ValueError(f"builtin {name!r} is already registered")
        self._handlers[name] = handler
        return handler

    def builtin(self, name: str) -> Callable[[ShellCommand], ShellCommand]:
        """Decorator variant of :meth:`register`."""

        def decorator(func: ShellCommand) -> ShellCommand:
            return self.register(name, func)

        return decorator

    def lookup(self, name: str) -> ShellCommand | None:
        return self._handlers.get(name)

    def names(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers


BUILTINS = BuiltinRegistry()


__all__ = ["BUILTINS", "BuiltinRegistry"]
