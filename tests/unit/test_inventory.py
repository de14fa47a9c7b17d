from pathlib import Path

import pytest

from explorer.catalog import CATALOG
from explorer.inventory import (
    check_existence,
    compute_stats,
    count_directory,
    estimate_hours,
    scan_catalog,
)


def _make_tree(root: Path, lessons=(), guides=(), resources=()) -> Path:
    for directory, names in (("lessons", lessons), ("guides", guides), ("resources", resources)):
        base = root / directory
        base.mkdir()
        for name in names:
            (base / name).write_text("# stub\n", encoding="utf-8")
    return root


def test_check_existence_exact_match(tmp_path):
    (tmp_path / "Redux.md").write_text("x")

    assert check_existence(tmp_path, "Redux.md") is True
    assert check_existence(tmp_path, "redux.md") is False
    assert check_existence(tmp_path, "Redux") is False
    assert check_existence(tmp_path, "Redux.md.bak") is False


def test_check_existence_missing_directory_is_false(tmp_path):
    assert check_existence(tmp_path / "nowhere", "Redux.md") is False


def test_check_existence_ignores_directories_and_nested_files(tmp_path):
    (tmp_path / "folder.md").mkdir()
    nested = tmp_path / "sub"
    nested.mkdir()
    (nested / "Redux.md").write_text("x")

    assert check_existence(tmp_path, "folder.md") is False
    assert check_existence(tmp_path, "Redux.md") is False


@pytest.mark.parametrize(
    "lessons,guides,resources,expected",
    [(0, 0, 0, 0), (1, 0, 0, 6), (0, 1, 0, 3), (0, 0, 1, 2), (21, 12, 3, 168)],
)
def test_estimate_hours(lessons, guides, resources, expected):
    assert estimate_hours(lessons, guides, resources) == expected


def test_compute_stats_counts_directory_listing(tmp_path):
    _make_tree(
        tmp_path,
        lessons=["Lesson 00_ Computer Basics.md", "notes.txt"],
        guides=["Backend_Technologies.md"],
        resources=[],
    )
    (tmp_path / "lessons" / "drafts").mkdir()

    stats = compute_stats(tmp_path)

    assert stats.total_lessons == 3
    assert stats.total_guides == 1
    assert stats.total_resources == 0
    assert stats.total_files == 3 + 1 + 0 + 2
    assert stats.estimated_hours == 3 * 6 + 1 * 3


def test_compute_stats_empty_guides(tmp_path):
    _make_tree(tmp_path, lessons=["a.md"], resources=["b.md"])

    stats = compute_stats(tmp_path)

    assert stats.total_guides == 0
    assert stats.total_files == 4


def test_compute_stats_missing_directory_raises(tmp_path):
    (tmp_path / "guides").mkdir()
    (tmp_path / "resources").mkdir()

    with pytest.raises(FileNotFoundError):
        compute_stats(tmp_path)


def test_count_directory_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_directory(tmp_path / "lessons")


def test_scan_catalog_records_present_files(tmp_path):
    phase_one = [entry.file_name for entry in CATALOG.phases[0].entries]
    _make_tree(tmp_path, lessons=phase_one + ["extra.md"], guides=["Tools_Frameworks.md"])

    snapshot = scan_catalog(tmp_path, CATALOG)

    assert snapshot.present["lessons"] == frozenset(phase_one)
    assert snapshot.present["guides"] == frozenset({"Tools_Frameworks.md"})
    assert snapshot.present["resources"] == frozenset()
    assert snapshot.stats.total_lessons == 8
    assert snapshot.is_present("guides", "Tools_Frameworks.md")
    assert not snapshot.is_present("guides", "Backend_Technologies.md")
