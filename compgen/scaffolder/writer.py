"""File writer that never overwrites.

Generated files are often edited by hand right after scaffolding, so an
existing file at a destination is always a :class:`CollisionError`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .errors import CollisionError, ScaffoldIOError


async def file_exists(path: str | Path) -> bool:
    """Return ``True`` if anything already occupies *path*."""
    return await asyncio.to_thread(Path(path).exists)


async def check_collision(path: str | Path) -> None:
    """Raise :class:`CollisionError` if *path* is already taken."""
    if await file_exists(path):
        raise CollisionError(path)


async def write_file(destination: str | Path, content: str) -> Path:
    """Write *content* to *destination* as UTF-8, creating parent directories.

    Args:
        destination: Fully resolved file path.
        content: Rendered text.

    Returns:
        The destination path.

    Raises:
        CollisionError: If a file already exists at *destination*.  Nothing is
            written in that case.
        ScaffoldIOError: If a directory cannot be created or the file cannot
            be written.
    """
    out = Path(destination)
    await check_collision(out)

    try:
        await asyncio.to_thread(out.parent.mkdir, parents=True, exist_ok=True)
    except OSError as exc:
        raise ScaffoldIOError(out.parent, f"Could not create directory ({exc.strerror or exc})") from exc

    await asyncio.to_thread(_write_new_file, out, content)
    return out


async def read_file(source: str | Path) -> str:
    """Read a UTF-8 template file, preserving its line endings."""
    path = Path(source)
    try:
        return await asyncio.to_thread(_read_text, path)
    except UnicodeDecodeError as exc:
        raise ScaffoldIOError(path, "Template is not valid UTF-8 text") from exc
    except OSError as exc:
        raise ScaffoldIOError(path, f"Could not read template ({exc.strerror or exc})") from exc


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _read_text(path: Path) -> str:
    """Synchronous helper: read text with line endings left untouched."""
    with path.open(encoding="utf-8", newline="") as fh:
        return fh.read()


def _write_new_file(path: Path, content: str) -> None:
    """Synchronous helper: create *path* exclusively and write content."""
    try:
        with path.open("x", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except FileExistsError as exc:
        raise CollisionError(path) from exc
    except OSError as exc:
        raise ScaffoldIOError(path, f"Could not write file ({exc.strerror or exc})") from exc
