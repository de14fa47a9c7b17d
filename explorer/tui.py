from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.text import Text

from .types import ReportLine


class ReportWriter:
    """Print report lines to a rich console."""

    def __init__(self, console: Optional[Console] = None, color: bool = True) -> None:
        self.console = console or Console()
        self.color = color

    def write_line(self, line: ReportLine) -> None:
        style = line.style if self.color else None
        self.console.print(Text(line.text, style=style or ""), soft_wrap=True)

    def write(self, lines: Iterable[ReportLine]) -> None:
        for line in lines:
            self.write_line(line)
