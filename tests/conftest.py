"""Shared pytest fixtures for the compgen test suite.

Provides reusable fixtures for:
- A small on-disk template root
- An empty output directory
- Config instances pointing at both
"""

from __future__ import annotations

from pathlib import Path

import pytest

from compgen.config import Config


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

TEMPLATE_FILES: dict[str, str] = {
    "index.js": "export const name = '{{ componentName }}';",
    "style.css": ".{{ componentName | kebab_case }} { color: red; }\n",
    "{{ componentName }}.jsx": (
        "{{ jsxImport }}\n"
        "\n"
        "export default class {{ componentName }} extends Component {}\n"
    ),
    "assets/readme.md": "# {{ componentNames }}\n",
}


def write_templates(root: Path, files: dict[str, str]) -> Path:
    """Create *files* (relative path -> content) under *root*."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Temporary template root with a handful of component files."""
    yield write_templates(tmp_path / "templates", TEMPLATE_FILES)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty directory that generated components are written under."""
    out = tmp_path / "out"
    out.mkdir()
    yield out


@pytest.fixture
def config(template_root: Path, output_dir: Path) -> Config:
    """Config pointing at the temporary template root and output directory."""
    return Config(template_root=template_root, output_dir=output_dir)


def snapshot_tree(root: Path) -> dict[str, str]:
    """Return ``{relative_posix_path: content}`` for every file under *root*."""
    return {
        p.relative_to(root).as_posix(): p.read_text(encoding="utf-8")
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def snapshot():
    """The :func:`snapshot_tree` helper, for comparing trees before and after a run."""
    return snapshot_tree


@pytest.fixture
def make_templates(tmp_path: Path):
    """Factory that builds a custom template root under ``tmp_path``."""

    def _make(files: dict[str, str], name: str = "custom-templates") -> Path:
        return write_templates(tmp_path / name, files)

    return _make
