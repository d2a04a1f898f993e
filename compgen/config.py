"""compgen configuration.

Typed configuration for a scaffolding run.  Settings use Pydantic v2 models
so they can be validated at construction time and serialised to/from JSON or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_TEMPLATE_ROOT = Path(__file__).parent / "scaffolder" / "templates" / "component"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Settings for one scaffolding invocation.

    Instances are typically created once by the CLI entry point and then
    passed to :class:`~compgen.scaffolder.generator.ComponentGenerator`.
    """

    template_root: Path = Field(
        default=DEFAULT_TEMPLATE_ROOT,
        description="Directory whose files are rendered into each component",
    )
    output_dir: Path = Field(
        default=Path("."),
        description="Directory the components/ tree is written under",
    )
    preact: bool = Field(default=False, description="Render the Preact JSX import")
    render_paths: bool = Field(
        default=True,
        description="Render placeholders in template file and directory names",
    )
    dry_run: bool = Field(default=False, description="Check and report without writing")

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            COMPGEN_TEMPLATE_ROOT, COMPGEN_OUTPUT_DIR, COMPGEN_PREACT,
            COMPGEN_RENDER_PATHS.

        Keyword arguments whose value is not ``None`` take precedence over the
        environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("COMPGEN_TEMPLATE_ROOT"):
            kwargs["template_root"] = Path(os.environ["COMPGEN_TEMPLATE_ROOT"])
        if os.environ.get("COMPGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["COMPGEN_OUTPUT_DIR"])
        if os.environ.get("COMPGEN_PREACT"):
            kwargs["preact"] = os.environ["COMPGEN_PREACT"].strip().lower() in _TRUE_VALUES
        if os.environ.get("COMPGEN_RENDER_PATHS"):
            kwargs["render_paths"] = (
                os.environ["COMPGEN_RENDER_PATHS"].strip().lower() in _TRUE_VALUES
            )

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
