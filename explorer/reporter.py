"""Catalog reporter: checks the documentation tree and prints its table of contents.

``CatalogReporter`` ties the pieces together. Existence checks and stats
come from :mod:`explorer.inventory`, the text comes from
:mod:`explorer.report`, and :class:`explorer.tui.ReportWriter` does the
printing. A missing base directory raises ``FileNotFoundError`` before
anything is written.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .catalog import CATALOG
from .inventory import check_existence, compute_stats, scan_catalog
from .report import build_report, header_lines, menu_lines, stats_lines
from .tui import ReportWriter
from .types import Catalog, CatalogStats, InventorySnapshot, ReportLine


class CatalogReporter:
    def __init__(
        self,
        root: Path,
        *,
        catalog: Catalog = CATALOG,
        console: Optional[Console] = None,
        color: bool = True,
    ) -> None:
        self.root = Path(root)
        self.catalog = catalog
        self.writer = ReportWriter(console=console, color=color)

    def check_existence(self, kind: str, file_name: str) -> bool:
        for category in self.catalog.categories:
            if category.kind == kind:
                return check_existence(self.root / category.directory, file_name)
        raise ValueError(f"Unknown category: {kind!r}")

    def compute_stats(self) -> CatalogStats:
        return compute_stats(self.root)

    def scan(self) -> InventorySnapshot:
        """Read the base directories. Raises if one of them is missing."""

        return scan_catalog(self.root, self.catalog)

    def report_lines(self, snapshot: Optional[InventorySnapshot] = None) -> List[ReportLine]:
        if snapshot is None:
            snapshot = self.scan()
        return build_report(self.catalog, snapshot)

    def render(self, snapshot: Optional[InventorySnapshot] = None) -> None:
        """Print header, stats and the full menu."""

        if snapshot is None:
            snapshot = self.scan()
        self.writer.write(header_lines())
        self.writer.write(stats_lines(snapshot))
        self.writer.write(menu_lines(self.catalog, snapshot))

    def run(self, snapshot: Optional[InventorySnapshot] = None) -> None:
        self.writer.write(self.report_lines(snapshot))
