"""Destination path resolution.

A component named ``Bar`` nested inside ``Foo`` lives at
``components/Foo/components/Bar``; each template file keeps its position
relative to the template root beneath that directory.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .errors import ArgumentError

COMPONENTS_DIR = "components"


def component_dir(component_names: Sequence[str]) -> Path:
    """Return the nested directory for the innermost component.

    Examples::

        component_dir(["Foo"])         -> components/Foo
        component_dir(["Foo", "Bar"])  -> components/Foo/components/Bar
    """
    if not component_names:
        raise ArgumentError()
    return Path(*(part for name in component_names for part in (COMPONENTS_DIR, name)))


def resolve_destination(relative_path: str | Path, component_names: Sequence[str]) -> Path:
    """Map a template-relative path to its destination relative to the output root."""
    return component_dir(component_names) / Path(relative_path)
