from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class CatalogEntry:
    """A single catalog item and the markdown file backing it."""

    title: str
    file_name: str


@dataclass(frozen=True)
class Phase:
    """An ordered group of lessons on the learning path."""

    name: str
    entries: Tuple[CatalogEntry, ...]


@dataclass(frozen=True)
class Category:
    """Entries that live in one base directory."""

    kind: str  # "lessons", "guides" or "resources"
    directory: str
    entries: Tuple[CatalogEntry, ...]


@dataclass(frozen=True)
class Catalog:
    """Static table of contents for the documentation tree."""

    phases: Tuple[Phase, ...]
    guides: Tuple[CatalogEntry, ...]
    resources: Tuple[CatalogEntry, ...]

    @property
    def lessons(self) -> Tuple[CatalogEntry, ...]:
        return tuple(entry for phase in self.phases for entry in phase.entries)

    @property
    def categories(self) -> Tuple[Category, ...]:
        return (
            Category(kind="lessons", directory="lessons", entries=self.lessons),
            Category(kind="guides", directory="guides", entries=self.guides),
            Category(kind="resources", directory="resources", entries=self.resources),
        )


@dataclass(frozen=True)
class CatalogStats:
    """Counts taken from the base directories."""

    total_lessons: int
    total_guides: int
    total_resources: int
    total_files: int
    estimated_hours: int


@dataclass(frozen=True)
class InventorySnapshot:
    """Filesystem state needed to render one report."""

    stats: CatalogStats
    present: Dict[str, FrozenSet[str]] = field(default_factory=dict)

    def is_present(self, kind: str, file_name: str) -> bool:
        return file_name in self.present.get(kind, frozenset())


@dataclass(frozen=True)
class ReportLine:
    """One line of output and the rich style to print it with."""

    text: str
    style: Optional[str] = None


@dataclass
class ReporterConfig:
    """Runtime configuration derived from CLI flags."""

    root: Path
    color: bool = True
    detailed_log: bool = False
