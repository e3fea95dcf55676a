import datetime
import os

import pytest

from rotolog.errors import FileError
from rotolog.rotation.rotator import Rotator


def make_rotator(tmp_path, clock, *, max_file_size=10, logs_to_keep=5):
    return Rotator(
        tmp_path,
        "app.log",
        max_file_size=max_file_size,
        logs_to_keep=logs_to_keep,
        clock=clock,
    )


def test_no_rotation_at_or_below_threshold(tmp_path, clock):
    rotator = make_rotator(tmp_path, clock)
    (tmp_path / "app.log").write_text("123456789\n")
    assert rotator.maybe_rotate(10) is None
    assert (tmp_path / "app.log").exists()


def test_rotation_renames_active_file(tmp_path, clock):
    rotator = make_rotator(tmp_path, clock)
    (tmp_path / "app.log").write_text("0123456789a\n")

    archive = rotator.maybe_rotate(12)

    assert archive == tmp_path / "2026-10-19.09:00:00AM-app.log"
    assert not (tmp_path / "app.log").exists()
    assert archive.read_text() == "0123456789a\n"


def test_same_second_rotation_does_not_overwrite(tmp_path, frozen_clock):
    rotator = make_rotator(tmp_path, frozen_clock)

    archives = []
    for content in ("first\n" * 3, "second\n" * 3, "third\n" * 3):
        (tmp_path / "app.log").write_text(content)
        archives.append(rotator.maybe_rotate(100))

    assert [a.name for a in archives] == [
        "2026-10-19.09:00:00AM-app.log",
        "2026-10-19.09:00:00AM.1-app.log",
        "2026-10-19.09:00:00AM.2-app.log",
    ]
    assert archives[0].read_text().startswith("first")
    assert archives[2].read_text().startswith("third")
    # disambiguated archives still scan in rotation order
    scanned = rotator.scanner.scan(tmp_path, "app.log")
    assert [e.path for e in scanned] == archives


def test_rotation_prunes_after_rename(tmp_path, clock):
    rotator = make_rotator(tmp_path, clock, logs_to_keep=1)
    for _ in range(3):
        (tmp_path / "app.log").write_text("0123456789abc\n")
        rotator.maybe_rotate(14)

    assert sorted(os.listdir(tmp_path)) == ["2026-10-19.09:00:02AM-app.log"]


def test_missing_active_file_raises_file_error(tmp_path, clock):
    rotator = make_rotator(tmp_path, clock)
    with pytest.raises(FileError):
        rotator.maybe_rotate(11)


def test_archive_path_for_skips_taken_names(tmp_path, clock):
    rotator = make_rotator(tmp_path, clock)
    instant = datetime.datetime(2026, 10, 19, 21, 15, 0)
    (tmp_path / "2026-10-19.09:15:00PM-app.log").write_text("")
    assert rotator.archive_path_for(instant).name == "2026-10-19.09:15:00PM.1-app.log"


def test_same_second_numbering_continues_after_pruned_archives(tmp_path, frozen_clock):
    rotator = make_rotator(tmp_path, frozen_clock, logs_to_keep=1)
    for content in ("first-rotation\n", "second-rotation\n", "third-rotation\n"):
        (tmp_path / "app.log").write_text(content)
        rotator.maybe_rotate(100)

    survivors = {p.name: p.read_text() for p in tmp_path.iterdir()}
    # the plain name was pruned earlier but must not be reused for the newest archive
    assert survivors == {"2026-10-19.09:00:00AM.2-app.log": "third-rotation\n"}
