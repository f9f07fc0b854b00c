import pytest

from minish.shell.registry import BUILTINS, BuiltinRegistry


def test_registry_rejects_duplicate_names():
    registry = BuiltinRegistry()

    @registry.builtin("hello")
    def hello(shell, args, streams):
        return None

    with pytest.raises(ValueError, match="already registered"):
        registry.register("hello", hello)
    assert registry.lookup("hello") is hello
    assert registry.lookup("missing") is None


def test_registry_names_are_frozen():
    registry = BuiltinRegistry()
    registry.register("a", lambda shell, args, streams: None)
    names = registry.names()
    assert names == frozenset({"a"})
    assert "a" in registry
    assert "b" not in registry


def test_default_builtins_loaded():
    import minish.shell.commands  # noqa: F401

    assert BUILTINS.names() == frozenset({"exit", "echo", "type", "pwd", "cd"})
