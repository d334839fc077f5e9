"""Shared helpers: Rich consoles, error reporting, and file-system writes.

The file-system helpers wrap ``OSError`` into ``FileSystemError`` so callers
never have to inspect raw OS errors.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import FileSystemError

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def create_dir_all(path: str | Path) -> Path:
    """Create a directory and any missing parents.

    Raises:
        FileSystemError: If the directory cannot be created.
    """
    dir_path = Path(path)
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileSystemError("create", dir_path, exc) from exc
    return dir_path


def write_file(path: str | Path, contents: str) -> Path:
    """Write *contents* to *path*, replacing any existing file.

    The parent directory must already exist.

    Raises:
        FileSystemError: If the file cannot be written.
    """
    file_path = Path(path)
    try:
        file_path.write_text(contents, encoding="utf-8")
    except OSError as exc:
        raise FileSystemError("write to", file_path, exc) from exc
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_error(message: str) -> None:
    """Print ``error: <message>`` to stderr with a red marker."""
    err_console.print(
        f"[bold red]error[/bold red]: {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_summary_table(
    rows: list[tuple[str, ...]], columns: list[str], title: str = "Summary"
) -> None:
    """Print a table with the given column headers and rows."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*row)

    console.print(table)
    console.print()
