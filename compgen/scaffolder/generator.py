"""Main scaffolding orchestrator.

Takes a list of component names (outermost parent first) and renders every
file of the template root into ``components/<name>/...`` beneath the output
directory, refusing to overwrite anything that already exists.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Mapping, Sequence
from enum import Enum
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from compgen.config import Config

from .discovery import DiscoveredFile, discover_templates
from .errors import ArgumentError, RenderError
from .paths import resolve_destination
from .templates import TemplateRenderer
from .writer import check_collision, read_file, write_file


# ---------------------------------------------------------------------------
# JSX import variants
# ---------------------------------------------------------------------------

REACT_IMPORT = "import React, { Component } from 'react';"
PREACT_IMPORT = "import { h, Component } from 'preact';"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class GeneratorState(str, Enum):
    """Lifecycle of a single ``generate`` call."""

    IDLE = "idle"
    DISCOVERING = "discovering"
    RENDERING = "rendering"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


class TemplateContext(BaseModel):
    """Values available to ``{{ ... }}`` placeholders.

    Field aliases are the placeholder keys used inside templates.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    component_name: str = Field(..., alias="componentName")
    component_path: str = Field(..., alias="componentNames")
    styles_dir_name: str = Field(..., alias="stylesDirName")
    jsx_import: str = Field(..., alias="jsxImport")

    def as_mapping(self) -> Mapping[str, Any]:
        """Return a read-only ``{placeholder: value}`` mapping."""
        return MappingProxyType(self.model_dump(by_alias=True))


class RenderedFile(BaseModel):
    """A template rendered against the context, ready to be written."""

    model_config = ConfigDict(frozen=True)

    source: Path
    destination: Path
    content: str


class GenerationResult(BaseModel):
    """Manifest of one successful ``generate`` call."""

    component_names: list[str]
    output_dir: Path
    written: list[Path] = Field(default_factory=list)
    dry_run: bool = False
    duration: float = 0.0

    @property
    def count(self) -> int:
        return len(self.written)

    def summary(self) -> str:
        """Human-readable report: the file count followed by one path per line."""
        verb = "would be written" if self.dry_run else "written"
        noun = "file" if self.count == 1 else "files"
        lines = [f"{self.count} {noun} {verb}:"]
        lines.extend(f"- {path.as_posix()}" for path in self.written)
        return "\n".join(lines)


def validate_component_names(component_names: Sequence[str]) -> None:
    """Raise :class:`ArgumentError` unless every name is a single path segment."""
    if not component_names:
        raise ArgumentError()
    for name in component_names:
        if not name.strip() or name in (".", "..") or "/" in name or "\\" in name:
            raise ArgumentError(f"Invalid component name: '{name}'")


def build_context(component_names: Sequence[str], *, preact: bool = False) -> TemplateContext:
    """Build the template context for a component name list.

    ``stylesDirName`` climbs one directory per ancestor component, so a
    nested component can reach files that sit beside its outermost parent.
    """
    validate_component_names(component_names)
    return TemplateContext(
        componentName=component_names[-1],
        componentNames="/".join(component_names),
        stylesDirName="../" * (len(component_names) - 1),
        jsxImport=PREACT_IMPORT if preact else REACT_IMPORT,
    )


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ComponentGenerator:
    """Scaffolds a (possibly nested) component from the template root.

    One ``generate`` call runs discovery once, then renders every template
    concurrently, then writes every rendered file concurrently.  The first
    failure aborts the call; files already written by sibling tasks stay on
    disk.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.renderer = TemplateRenderer()
        self.state = GeneratorState.IDLE

    # -- Public API --------------------------------------------------------

    async def generate(self, component_names: Sequence[str]) -> GenerationResult:
        """Render the template root for *component_names*.

        Args:
            component_names: Outermost parent first, the component to create
                last.  ``["Foo", "Bar"]`` creates ``Bar`` inside ``Foo``.

        Returns:
            The manifest of written paths, relative to the output directory.

        Raises:
            ArgumentError: If *component_names* is empty or a name is not a
                single path segment.  Raised before any filesystem access.
            CollisionError: If any destination file already exists.
            RenderError: If a template cannot be rendered.
            ScaffoldIOError: If the template root or a file cannot be read or
                written.
        """
        names = list(component_names)
        try:
            validate_component_names(names)
        except ArgumentError:
            self.state = GeneratorState.FAILED
            raise

        started = time.monotonic()
        context = build_context(names, preact=self.config.preact).as_mapping()

        try:
            self.state = GeneratorState.DISCOVERING
            templates = await discover_templates(self.config.template_root)

            self.state = GeneratorState.RENDERING
            rendered = await asyncio.gather(
                *(self._render_file(t, names, context) for t in templates)
            )

            self.state = GeneratorState.WRITING
            if self.config.dry_run:
                await asyncio.gather(
                    *(check_collision(self._absolute(r.destination)) for r in rendered)
                )
            else:
                await asyncio.gather(
                    *(write_file(self._absolute(r.destination), r.content) for r in rendered)
                )
        except Exception:
            self.state = GeneratorState.FAILED
            raise

        self.state = GeneratorState.DONE
        return GenerationResult(
            component_names=names,
            output_dir=self.config.output_dir,
            written=[r.destination for r in rendered],
            dry_run=self.config.dry_run,
            duration=time.monotonic() - started,
        )

    # -- Per-file pipeline -------------------------------------------------

    async def _render_file(
        self,
        template: DiscoveredFile,
        component_names: Sequence[str],
        context: Mapping[str, Any],
    ) -> RenderedFile:
        """Read one template, render its content and path, and resolve its destination."""
        text = await read_file(template.source)
        label = template.relative.as_posix()
        content = self.renderer.render_string(text, context, source=label)

        relative = template.relative
        if self.config.render_paths:
            relative = self._render_relative_path(label, context)

        return RenderedFile(
            source=template.source,
            destination=resolve_destination(relative, component_names),
            content=content,
        )

    def _render_relative_path(self, label: str, context: Mapping[str, Any]) -> Path:
        rendered = PurePosixPath(self.renderer.render_string(label, context, source=label))
        parts = rendered.parts
        if not parts or rendered.is_absolute() or ".." in parts or any(not p.strip() for p in parts):
            raise RenderError(label, f"rendered path '{rendered}' escapes the component directory")
        return Path(*parts)

    def _absolute(self, destination: Path) -> Path:
        return Path(self.config.output_dir) / destination
