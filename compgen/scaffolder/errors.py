"""Error types raised by the scaffolding pipeline.

Every failure surfaced to the user derives from :class:`ScaffoldError` so the
CLI can report the message without a traceback.  None of these errors are
retried.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class ArgumentError(ScaffoldError):
    """Raised when no component names were supplied."""

    def __init__(self, message: str = "Component name must be passed as an argument.") -> None:
        super().__init__(message)


class CollisionError(ScaffoldError):
    """Raised when a destination file already exists."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f'A file already exists at path "{self.path}".')


class RenderError(ScaffoldError):
    """Raised when a template cannot be rendered against the context."""

    def __init__(self, source: str | Path, message: str) -> None:
        self.source = str(source)
        super().__init__(f"Could not render {self.source}: {message}")


class ScaffoldIOError(ScaffoldError):
    """Raised when reading, globbing, creating a directory or writing fails."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")
