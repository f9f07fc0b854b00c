import os
from pathlib import Path

from minish.executables import build_executable_index, find_executable


def make_exe(path, body="#!/bin/sh\nexit 0\n"):
    path.write_text(body)
    path.chmod(0o755)
    return path


def test_index_first_match_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    winner = make_exe(first / "tool")
    make_exe(second / "tool")
    make_exe(second / "other")
    index = build_executable_index(os.pathsep.join([str(first), str(second)]))
    assert index["tool"] == str(winner)
    assert find_executable("other", index) == str(second / "other")


def test_index_skips_non_executables_and_missing_dirs(tmp_path):
    (tmp_path / "notes.txt").write_text("plain")
    (tmp_path / "subdir").mkdir()
    make_exe(tmp_path / "run")
    search = os.pathsep.join(["", str(tmp_path / "nope"), str(tmp_path)])
    index = build_executable_index(search)
    assert set(index) == {"run"}
    assert find_executable("notes.txt", index) is None


def test_index_empty_path():
    assert dict(build_executable_index(None)) == {}
    assert dict(build_executable_index("")) == {}


def test_index_skips_unsearchable_entries(tmp_path, monkeypatch):
    blocked = tmp_path / "blocked"
    make_exe(tmp_path / "run")
    real_is_dir = Path.is_dir

    def is_dir(self, *args, **kwargs):
        if self == blocked:
            raise PermissionError(13, "Permission denied", str(self))
        return real_is_dir(self, *args, **kwargs)

    monkeypatch.setattr(Path, "is_dir", is_dir)
    index = build_executable_index(os.pathsep.join([str(blocked), str(tmp_path)]))
    assert set(index) == {"run"}
