from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, FrozenSet, List

from .types import Catalog, CatalogStats, InventorySnapshot

logger = logging.getLogger(__name__)

# README.md and the main guide sit at the root, outside every category.
_TOP_LEVEL_FILES = 2

_HOURS_PER_LESSON = 6
_HOURS_PER_GUIDE = 3
_HOURS_PER_RESOURCE = 2


def check_existence(base_dir: Path, file_name: str) -> bool:
    """Return True if ``file_name`` is a regular file directly inside ``base_dir``.

    The name must match a directory entry exactly, so a case-insensitive
    filesystem does not turn ``guide.md`` into a hit for ``Guide.md``. A
    missing directory simply means the file is missing.
    """

    try:
        names = os.listdir(base_dir)
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("Base directory %s not found", base_dir)
        return False
    if file_name not in names:
        return False
    return (Path(base_dir) / file_name).is_file()


def count_directory(base_dir: Path) -> int:
    """Count every entry in ``base_dir``. Raises if the directory is missing."""

    logger.debug("Listing %s", base_dir)
    return len(os.listdir(base_dir))


def estimate_hours(lessons: int, guides: int, resources: int) -> int:
    return (
        lessons * _HOURS_PER_LESSON
        + guides * _HOURS_PER_GUIDE
        + resources * _HOURS_PER_RESOURCE
    )


def compute_stats(root: Path) -> CatalogStats:
    """Count what is on disk under ``root``.

    Counts come from the directory listings, not from the catalog, so extra
    or renamed files are included and the totals can disagree with the
    checklist.
    """

    lessons = count_directory(root / "lessons")
    guides = count_directory(root / "guides")
    resources = count_directory(root / "resources")

    return CatalogStats(
        total_lessons=lessons,
        total_guides=guides,
        total_resources=resources,
        total_files=lessons + guides + resources + _TOP_LEVEL_FILES,
        estimated_hours=estimate_hours(lessons, guides, resources),
    )


def scan_catalog(root: Path, catalog: Catalog) -> InventorySnapshot:
    """Capture the stats and the present catalog files under ``root``."""

    stats = compute_stats(root)

    present: Dict[str, FrozenSet[str]] = {}
    for category in catalog.categories:
        base_dir = root / category.directory
        found: List[str] = []
        for entry in category.entries:
            if check_existence(base_dir, entry.file_name):
                found.append(entry.file_name)
            else:
                logger.debug("Missing %s/%s", category.directory, entry.file_name)
        present[category.kind] = frozenset(found)

    return InventorySnapshot(stats=stats, present=present)
