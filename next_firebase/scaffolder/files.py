"""Filesystem operations used by the generation groups.

Every blocking call runs in a worker thread via ``asyncio.to_thread`` so the
groups can interleave on one event loop.  ``OSError`` is translated into
``FilesystemError`` carrying the offending path.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from ..errors import DirectoryExistsError, FilesystemError
from ..utils import gather_all
from .models import FileEntry


async def create_root(root: Path) -> Path:
    """Create the project root; it must not exist yet."""
    try:
        await asyncio.to_thread(root.mkdir)
    except FileExistsError as exc:
        raise DirectoryExistsError(
            f"EEXIST: file already exists, mkdir '{root}'", root
        ) from exc
    except OSError as exc:
        raise FilesystemError(f"{exc.strerror or exc}: mkdir '{root}'", root) from exc
    return root


async def make_dir(root: Path, relative_path: str) -> Path:
    """Create a single directory under *root*.  Parents must already exist."""
    target = root / relative_path
    try:
        await asyncio.to_thread(target.mkdir)
    except OSError as exc:
        raise FilesystemError(f"{exc.strerror or exc}: mkdir '{target}'", target) from exc
    return target


async def make_dirs(root: Path, *relative_paths: str) -> list[Path]:
    """Create sibling directories concurrently."""
    return await gather_all(*(make_dir(root, rel) for rel in relative_paths))


async def write_entry(root: Path, entry: FileEntry) -> Path | None:
    """Write *entry* under *root* with one trailing newline.

    Returns ``None`` without touching the filesystem when the entry has no
    content.
    """
    if entry.content is None:
        return None
    target = root / entry.relative_path
    try:
        await asyncio.to_thread(_write_file, target, f"{entry.content}\n")
    except OSError as exc:
        raise FilesystemError(f"{exc.strerror or exc}: open '{target}'", target) from exc
    return target


async def write_entries(root: Path, entries: list[FileEntry]) -> list[Path]:
    """Write all entries concurrently; return the paths actually written."""
    written = await gather_all(*(write_entry(root, e) for e in entries))
    return [p for p in written if p is not None]


async def copy_asset(source: Path, root: Path, relative_dir: str) -> Path:
    """Copy a bundled asset into ``root / relative_dir``."""
    target = root / relative_dir / source.name
    try:
        await asyncio.to_thread(shutil.copyfile, source, target)
    except OSError as exc:
        raise FilesystemError(
            f"{exc.strerror or exc}: copy '{source}' -> '{target}'", target
        ) from exc
    return target


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: write content, never creating parent directories."""
    path.write_text(content, encoding="utf-8")
