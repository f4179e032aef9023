# tests/test_scores.py
from __future__ import annotations

from pathlib import Path

from tetris_scores import FileHighScoreStore, HighScoreStore, MemoryHighScoreStore


def test_missing_file_loads_zero(tmp_path: Path) -> None:
    assert FileHighScoreStore(tmp_path / "none").load() == 0


def test_malformed_file_loads_zero(tmp_path: Path) -> None:
    path = tmp_path / "hs"
    path.write_text("not a number", encoding="utf-8")
    assert FileHighScoreStore(path).load() == 0


def test_unreadable_store_loads_zero(tmp_path: Path) -> None:
    # a directory where the file should be
    assert FileHighScoreStore(tmp_path).load() == 0


def test_undecodable_file_loads_zero(tmp_path: Path) -> None:
    path = tmp_path / "hs"
    path.write_bytes(b"\xff\xfe")
    store = FileHighScoreStore(path)
    assert store.load() == 0
    assert store.save(250) is True
    assert store.load() == 250


def test_higher_score_overwrites(tmp_path: Path) -> None:
    path = tmp_path / "hs"
    path.write_text("500\n", encoding="utf-8")
    store = FileHighScoreStore(path)
    assert store.load() == 500
    assert store.save(800) is True
    assert store.load() == 800
    assert path.read_text(encoding="utf-8") == "800"


def test_lower_or_equal_score_keeps_stored_value(tmp_path: Path) -> None:
    path = tmp_path / "hs"
    path.write_text("500", encoding="utf-8")
    store = FileHighScoreStore(path)
    assert store.save(300) is False
    assert store.save(500) is False
    assert store.load() == 500


def test_save_creates_parent_directory(tmp_path: Path) -> None:
    store = FileHighScoreStore(tmp_path / "a" / "b" / "hs")
    assert store.save(100) is True
    assert store.load() == 100


def test_write_failure_is_not_fatal(tmp_path: Path) -> None:
    store = FileHighScoreStore(tmp_path)
    assert store.save(100) is False


def test_memory_store() -> None:
    store = MemoryHighScoreStore(200)
    assert store.load() == 200
    assert store.save(100) is False
    assert store.load() == 200
    assert store.save(300) is True
    assert store.load() == 300


def test_stores_satisfy_protocol(tmp_path: Path) -> None:
    assert isinstance(MemoryHighScoreStore(), HighScoreStore)
    assert isinstance(FileHighScoreStore(tmp_path / "hs"), HighScoreStore)
