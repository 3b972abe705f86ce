import time

import pytest

from wiieat import storage


def test_write_then_read_text(tmp_path):
    path = tmp_path / "note.txt"
    storage.write_file(str(path), "hello world")
    assert storage.read_text(str(path)) == "hello world"


def test_write_bytes_then_read_bytes(tmp_path):
    path = tmp_path / "blob.bin"
    payload = bytes(range(256))
    storage.write_file(str(path), payload)
    assert storage.read_bytes(str(path)) == payload


def test_write_overwrites_by_default(tmp_path):
    path = str(tmp_path / "f.txt")
    storage.write_file(path, "first")
    storage.write_file(path, "second")
    assert storage.read_text(path) == "second"


def test_write_append(tmp_path):
    path = str(tmp_path / "f.txt")
    storage.write_file(path, "abc")
    storage.write_file(path, "def", append=True)
    assert storage.read_text(path) == "abcdef"


def test_write_creates_parent_directory(tmp_path):
    path = tmp_path / "WiiEat" / "geohash"
    storage.write_file(str(path), "dr4e")
    assert path.parent.is_dir()
    assert storage.read_text(str(path)) == "dr4e"


def test_write_into_missing_grandparent_raises(tmp_path):
    path = tmp_path / "a" / "b" / "c.txt"
    with pytest.raises(OSError):
        storage.write_file(str(path), "x")


def test_file_exists(tmp_path):
    path = tmp_path / "present"
    assert storage.file_exists(str(path)) is False
    storage.write_file(str(path), "")
    assert storage.file_exists(str(path)) is True


def test_read_text_missing_returns_empty(tmp_path):
    assert storage.read_text(str(tmp_path / "missing")) == ""


def test_read_bytes_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        storage.read_bytes(str(tmp_path / "missing"))


def test_delete_file(tmp_path):
    path = str(tmp_path / "gone")
    storage.write_file(path, "data")
    assert storage.delete_file(path) is True
    assert storage.file_exists(path) is False
    assert storage.delete_file(path) is False


def test_create_directory(tmp_path):
    target = tmp_path / "newdir"
    assert storage.create_directory(str(target)) is True
    assert target.is_dir()
    assert storage.create_directory(str(target)) is False


def test_time_now_is_milliseconds():
    before = time.time_ns() // 1_000_000
    now = storage.time_now()
    after = time.time_ns() // 1_000_000
    assert before <= now <= after


def test_time_now_subtracts_offset():
    offset = 3_600_000
    before = time.time_ns() // 1_000_000 - offset
    now = storage.time_now(offset)
    after = time.time_ns() // 1_000_000 - offset
    assert before <= now <= after