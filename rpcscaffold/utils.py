"""Shared utility functions for rpcscaffold.

Provides async file-system primitives that translate ``OSError`` into
``GenerationIOError``, JSON serialisation, name helpers, and Rich-based console
reporting.  The generation core never prints; only the host and the CLI
use the console helpers.
"""

from __future__ import annotations

import asyncio
import json
import re
import shutil
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from rpcscaffold.errors import GenerationIOError

console = Console()


# ---------------------------------------------------------------------------
# Async file-system primitives
# ---------------------------------------------------------------------------


async def read_text(path: str | Path) -> str:
    """Read a UTF-8 text file without blocking the event loop.

    Raises:
        GenerationIOError: If the file cannot be read.
    """
    file_path = Path(path)
    try:
        return await asyncio.to_thread(_read_file, file_path)
    except OSError as exc:
        raise GenerationIOError(file_path, "read", exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise GenerationIOError(file_path, "read", "not valid UTF-8") from exc


async def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories.

    Content is written byte-for-byte (no newline translation) so that
    patched stub files keep their original line endings.

    Raises:
        GenerationIOError: If the file cannot be written.
    """
    file_path = Path(path)
    try:
        await asyncio.to_thread(_write_file, file_path, content)
    except OSError as exc:
        raise GenerationIOError(file_path, "write", exc.strerror or str(exc)) from exc
    return file_path


async def remove_file(path: str | Path) -> None:
    """Delete a file.

    Raises:
        GenerationIOError: If the file is missing or cannot be removed.
    """
    file_path = Path(path)
    try:
        await asyncio.to_thread(file_path.unlink)
    except OSError as exc:
        raise GenerationIOError(file_path, "remove", exc.strerror or str(exc)) from exc


async def path_exists(path: str | Path) -> bool:
    """Return ``True`` if *path* exists."""
    return await asyncio.to_thread(Path(path).exists)


async def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Raises:
        GenerationIOError: If the directory cannot be created.
    """
    dir_path = Path(path)
    try:
        await asyncio.to_thread(dir_path.mkdir, parents=True, exist_ok=True)
    except OSError as exc:
        raise GenerationIOError(dir_path, "create directory", exc.strerror or str(exc)) from exc
    return dir_path


async def copy_tree(src: str | Path, dest: str | Path, *, overwrite: set[str] | None = None) -> list[Path]:
    """Copy every file under *src* into *dest*, preserving relative paths.

    Files that already exist at the destination are left alone unless their
    relative path (POSIX form) is listed in *overwrite*.

    Returns:
        The destination paths that were written.
    """
    src_dir = Path(src)
    dest_dir = Path(dest)
    overwrite = overwrite or set()
    written: list[Path] = []

    for source_file in sorted(p for p in src_dir.rglob("*") if p.is_file()):
        rel = source_file.relative_to(src_dir).as_posix()
        target = dest_dir / rel
        if target.exists() and rel not in overwrite:
            continue
        try:
            await asyncio.to_thread(_copy_file, source_file, target)
        except OSError as exc:
            raise GenerationIOError(target, "copy", exc.strerror or str(exc)) from exc
        written.append(target)

    return written


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def dump_json(data: Any) -> str:
    """Serialise *data* the way npm tooling writes ``package.json`` (2-space indent)."""
    return json.dumps(data, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_identifier(name: str) -> bool:
    """Return ``True`` if *name* is usable as a TypeScript identifier."""
    return bool(_IDENTIFIER_RE.match(name))


def to_pascal(name: str) -> str:
    """Convert ``some-thing``, ``some_thing`` or ``someThing`` to ``SomeThing``.

    Existing inner capitals are kept, so ``getBalance`` becomes
    ``GetBalance`` rather than ``Getbalance``.
    """
    parts = re.split(r"[-_\s$]+", name)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(rows: list[tuple[str, str]], title: str = "Summary") -> None:
    """Print a two-column summary table.

    Args:
        rows: ``(label, value)`` pairs, printed in order.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Artifact", style="dim", no_wrap=True)
    table.add_column("Action")

    for label, value in rows:
        table.add_row(label, value)

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _read_file(path: Path) -> str:
    """Synchronous helper: read text without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)


def _copy_file(src: Path, dest: Path) -> None:
    """Synchronous helper: create parent dirs and copy a file."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dest)
