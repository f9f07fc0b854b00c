import builtins

import pytest

from minish.cli import main


def test_cli_exec_outputs(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["exec", "echo hi"])
    assert exc.value.code == 0
    captured = capsys.readouterr()
    assert captured.out == "hi\n"


def test_cli_exec_returns_last_status(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["exec", "foobarbaz"])
    assert exc.value.code == 127
    assert "foobarbaz: command not found" in capsys.readouterr().err


def test_cli_exec_exit_zero(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["exec", "exit 0\necho unreachable"])
    assert exc.value.code == 0
    assert "unreachable" not in capsys.readouterr().out


def test_cli_shell_repl(monkeypatch, capsys):
    inputs = iter(["echo hello", "exit 1", "nosuchcmd", "exit 0", "echo never"])

    def fake_input() -> str:
        return next(inputs)

    monkeypatch.setattr(builtins, "input", fake_input)
    with pytest.raises(SystemExit) as exc:
        main(["shell", "--prompt", "> "])
    assert exc.value.code == 0
    captured = capsys.readouterr()
    assert "hello" in captured.out
    assert captured.out.startswith("> ")
    assert "never" not in captured.out
    assert "nosuchcmd: command not found" in captured.err
    assert "exit 0" in captured.err


def test_cli_shell_ends_on_eof(monkeypatch, capsys):
    def fake_input() -> str:
        raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)
    monkeypatch.setenv("MINISH_PROMPT", "minish% ")
    with pytest.raises(SystemExit) as exc:
        main(["shell"])
    assert exc.value.code == 0
    assert capsys.readouterr().out == "minish% "
