import datetime
import pathlib

import pytest

from rotolog.errors import FileError
from rotolog.rotation.naming import ArchiveMatch
from rotolog.rotation.retention import RetentionScanner


def touch(directory: pathlib.Path, *names: str) -> None:
    for name in names:
        (directory / name).write_text("x\n", encoding="utf-8")


def names(directory: pathlib.Path) -> set[str]:
    return {p.name for p in directory.iterdir()}


def test_scan_orders_chronologically_not_lexically(tmp_path):
    # lexical order would put 01:00:00PM before 11:00:00AM
    touch(
        tmp_path,
        "2026-10-19.01:00:00PM-app.log",
        "2026-10-19.11:00:00AM-app.log",
        "2026-10-19.12:30:00AM-app.log",
        "2026-10-19.11:00:00AM.1-app.log",
        "app.log",
        "unrelated.txt",
    )
    entries = RetentionScanner().scan(tmp_path, "app.log")
    assert [e.file_name for e in entries] == [
        "2026-10-19.12:30:00AM-app.log",
        "2026-10-19.11:00:00AM-app.log",
        "2026-10-19.11:00:00AM.1-app.log",
        "2026-10-19.01:00:00PM-app.log",
    ]
    assert entries[0].parsed_timestamp == datetime.datetime(2026, 10, 19, 0, 30)


def test_prune_removes_oldest_only(tmp_path):
    touch(
        tmp_path,
        "2026-10-19.01:00:00PM-app.log",
        "2026-10-18.11:00:00PM-app.log",
        "2026-10-19.11:00:00AM-app.log",
    )
    removed = RetentionScanner().prune(tmp_path, "app.log", 1)
    assert removed == tmp_path / "2026-10-18.11:00:00PM-app.log"
    # one file per pass, even though retention is still exceeded
    assert names(tmp_path) == {"2026-10-19.01:00:00PM-app.log", "2026-10-19.11:00:00AM-app.log"}

    RetentionScanner().prune(tmp_path, "app.log", 1)
    assert names(tmp_path) == {"2026-10-19.01:00:00PM-app.log"}


def test_prune_noop_within_retention(tmp_path):
    touch(tmp_path, "2026-10-19.01:00:00PM-app.log", "2026-10-19.02:00:00PM-app.log")
    assert RetentionScanner().prune(tmp_path, "app.log", 2) is None
    assert len(names(tmp_path)) == 2


def test_unparseable_archive_is_never_pruned(tmp_path, diagnostics):
    touch(tmp_path, "notes-app.log", "2026-10-19.01:00:00PM-app.log")
    scanner = RetentionScanner()

    removed = scanner.prune(tmp_path, "app.log", 0)
    assert removed == tmp_path / "2026-10-19.01:00:00PM-app.log"
    assert names(tmp_path) == {"notes-app.log"}

    # only the unparseable one is left: nothing is deleted
    assert scanner.prune(tmp_path, "app.log", 0) is None
    assert names(tmp_path) == {"notes-app.log"}
    assert any("none has a parseable timestamp" in msg for _, msg in diagnostics)


def test_substring_mode_counts_unrelated_names_but_keeps_them(tmp_path):
    touch(tmp_path, "app.log.bak", "2026-10-19.01:00:00PM-app.log", "2026-10-19.02:00:00PM-app.log")

    strict = RetentionScanner().scan(tmp_path, "app.log")
    loose = RetentionScanner(ArchiveMatch.SUBSTRING).scan(tmp_path, "app.log")
    assert len(strict) == 2
    assert len(loose) == 3
    assert loose[-1].file_name == "app.log.bak"
    assert not loose[-1].parsed

    RetentionScanner(ArchiveMatch.SUBSTRING).prune(tmp_path, "app.log", 2)
    assert names(tmp_path) == {"app.log.bak", "2026-10-19.02:00:00PM-app.log"}


def test_scan_missing_directory_raises_file_error(tmp_path):
    with pytest.raises(FileError):
        RetentionScanner().scan(tmp_path / "missing", "app.log")


def test_prune_delete_failure_raises_file_error(tmp_path, monkeypatch):
    touch(tmp_path, "2026-10-19.01:00:00PM-app.log", "2026-10-19.02:00:00PM-app.log")

    def fail(self, missing_ok=False):
        raise PermissionError("denied")

    monkeypatch.setattr(pathlib.Path, "unlink", fail)
    with pytest.raises(FileError):
        RetentionScanner().prune(tmp_path, "app.log", 1)
