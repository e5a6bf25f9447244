import os

import pytest

from voxelkit.files import read_file, set_current_directory


def test_read_file(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("line one\nline two\n")
    assert read_file(path) == "line one\nline two\n"
    assert read_file(str(path)) == "line one\nline two\n"


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="doesn't exist"):
        read_file(tmp_path / "missing.txt")


def test_set_current_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "bin"
    target.mkdir()
    (target / "marker.txt").write_text("inside bin")
    set_current_directory(str(target) + "/program")
    assert os.path.samefile(os.getcwd(), target)
    assert read_file("marker.txt") == "inside bin"


def test_set_current_directory_without_slash(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        set_current_directory("program")