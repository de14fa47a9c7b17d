from __future__ import annotations

from typing import Iterable, List

from .types import Catalog, CatalogEntry, InventorySnapshot, ReportLine

PRESENT = "✅"
MISSING = "❌"

TITLE = "🚀 Ultimate Full-Stack Web Development Guide"
RULE = "=" * 47

TIPS = (
    "• Start with Lesson 0 if you're new to programming",
    "• Each lesson includes practical assignments and projects",
    "• Use the specialized guides for deep dives into specific topics",
    "• Check resources for career guidance and additional examples",
)

NEXT_STEPS = (
    "1. Choose your starting point based on your experience level",
    "2. Follow the learning path sequentially for best results",
    "3. Practice with the code examples and assignments",
    "4. Join our community for support and questions",
)

CLOSING = "Happy learning! 🚀"

_BLANK = ReportLine("")


def status_glyph(present: bool) -> str:
    return PRESENT if present else MISSING


def header_lines() -> List[ReportLine]:
    return [ReportLine(TITLE, "cyan"), ReportLine(RULE, "yellow"), _BLANK]


def stats_lines(snapshot: InventorySnapshot) -> List[ReportLine]:
    stats = snapshot.stats
    return [
        ReportLine("📊 Repository Statistics:", "green"),
        ReportLine(f"Total Lessons: {stats.total_lessons}"),
        ReportLine(f"Total Guides: {stats.total_guides}"),
        ReportLine(f"Total Resources: {stats.total_resources}"),
        ReportLine(f"Total Files: {stats.total_files}"),
        ReportLine(f"Estimated Learning Time: {stats.estimated_hours} hours"),
        _BLANK,
    ]


def _entry_lines(
    entries: Iterable[CatalogEntry], kind: str, snapshot: InventorySnapshot
) -> List[ReportLine]:
    return [
        ReportLine(f"   {status_glyph(snapshot.is_present(kind, entry.file_name))} {entry.title}")
        for entry in entries
    ]


def menu_lines(catalog: Catalog, snapshot: InventorySnapshot) -> List[ReportLine]:
    """Learning path, guides, resources, tips and next steps."""

    lines: List[ReportLine] = [ReportLine("📚 Learning Path:", "green"), _BLANK]

    for index, phase in enumerate(catalog.phases, start=1):
        lines.append(ReportLine(f"{index}. {phase.name}", "yellow"))
        lines.extend(_entry_lines(phase.entries, "lessons", snapshot))
        lines.append(_BLANK)

    lines.extend([ReportLine("📖 Specialized Guides:", "green"), _BLANK])
    lines.extend(_entry_lines(catalog.guides, "guides", snapshot))

    lines.extend([_BLANK, ReportLine("📚 Resources:", "green"), _BLANK])
    lines.extend(_entry_lines(catalog.resources, "resources", snapshot))

    lines.extend([_BLANK, ReportLine("💡 Tips:", "magenta")])
    lines.extend(ReportLine(tip) for tip in TIPS)
    lines.extend([_BLANK, ReportLine("🎯 Next Steps:", "cyan")])
    lines.extend(ReportLine(step) for step in NEXT_STEPS)
    lines.append(_BLANK)
    return lines


def closing_lines() -> List[ReportLine]:
    return [ReportLine(CLOSING, "green"), _BLANK]


def build_report(catalog: Catalog, snapshot: InventorySnapshot) -> List[ReportLine]:
    """Build the full report in print order."""

    return [
        *header_lines(),
        *stats_lines(snapshot),
        *menu_lines(catalog, snapshot),
        *closing_lines(),
    ]
