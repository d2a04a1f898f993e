"""Template discovery.

Enumerates the files under a template root that are candidates for
rendering: every regular file, at any depth, whose name carries an extension.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .errors import ScaffoldIOError

TEMPLATE_GLOB = "*.*"


class DiscoveredFile(BaseModel):
    """A template file found under the template root."""

    model_config = ConfigDict(frozen=True)

    source: Path
    relative: Path


async def discover_templates(template_root: str | Path) -> list[DiscoveredFile]:
    """Return every template file under *template_root*, sorted by relative path.

    Directories, extensionless files and dot-files without an extension
    (``.gitkeep``) are skipped.

    Raises:
        ScaffoldIOError: If the root does not exist, is not a directory, or
            cannot be listed.
    """
    root = Path(template_root).resolve()
    return await asyncio.to_thread(_scan, root)


def _scan(root: Path) -> list[DiscoveredFile]:
    if not root.is_dir():
        raise ScaffoldIOError(root, "Template root is not a readable directory")

    try:
        candidates = [
            p for p in root.rglob(TEMPLATE_GLOB)
            if p.is_file() and p.suffix
        ]
    except OSError as exc:
        raise ScaffoldIOError(root, f"Could not list templates ({exc.strerror or exc})") from exc

    return [
        DiscoveredFile(source=p, relative=p.relative_to(root))
        for p in sorted(candidates, key=lambda p: p.relative_to(root).as_posix())
    ]
