"""Guide Explorer command line interface."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from explorer.reporter import CatalogReporter
from explorer.types import ReporterConfig

console = Console()

# lessons/, guides/ and resources/ sit next to this script.
_DEFAULT_ROOT = Path(__file__).resolve().parent


def _resolve_root(path: Optional[Path]) -> Path:
    if path is not None:
        return Path(path).expanduser().resolve()
    return _DEFAULT_ROOT


def _configure_logging(detailed_log: bool) -> None:
    if not detailed_log:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
        force=True,
    )


def _execute(root: Optional[Path], *, color: bool, detailed_log: bool) -> None:
    config = ReporterConfig(root=_resolve_root(root), color=color, detailed_log=detailed_log)
    _configure_logging(config.detailed_log)

    reporter = CatalogReporter(config.root, console=console, color=config.color)
    try:
        snapshot = reporter.scan()
    except OSError as exc:
        if config.detailed_log:
            console.print_exception()
        else:
            console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    reporter.run(snapshot)
    raise typer.Exit(0)


main = typer.Typer(add_completion=False)


@main.command()
def explore(
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        help="Directory holding lessons/, guides/ and resources/",
    ),
    color: bool = typer.Option(True, "--color/--no-color", help="Style the output"),
    detailed_log: bool = typer.Option(
        False,
        "--detailed-log/--concise-log",
        help="Print debug logs to stderr and full tracebacks on failure",
    ),
) -> None:
    """Show the learning path and which files are present."""

    _execute(root, color=color, detailed_log=detailed_log)


if __name__ == "__main__":
    main()
