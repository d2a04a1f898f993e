"""Tests for the command line entry point (compgen.cli)."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from compgen import utils
from compgen.cli import build_parser, main
from compgen.config import Config

pytestmark = pytest.mark.unit


@pytest.fixture
def recorded_console(monkeypatch):
    rec = Console(record=True, width=200, color_system=None)
    monkeypatch.setattr(utils, "console", rec)
    return rec


@pytest.fixture(autouse=True)
def clean_env():
    with patch.dict(os.environ, {}, clear=True):
        yield


class TestParser:
    def test_positional_names(self):
        args = build_parser().parse_args(["Foo", "Bar"])
        assert args.components == ["Foo", "Bar"]
        assert args.preact is None
        assert args.render_paths is None
        assert args.config is None

    def test_flags(self, tmp_path: Path):
        args = build_parser().parse_args(
            ["Foo", "--preact", "-o", str(tmp_path), "--no-render-paths", "--dry-run"]
        )
        assert args.preact is True
        assert args.output == tmp_path
        assert args.render_paths is False
        assert args.dry_run is True


class TestMain:
    def test_no_names_exits_with_message(self, recorded_console, output_dir: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["-o", str(output_dir)])
        assert exc_info.value.code == 1
        assert "Component name must be passed as an argument." in recorded_console.export_text()
        assert list(output_dir.iterdir()) == []

    def test_success_lists_written_files(self, recorded_console, template_root: Path, output_dir: Path):
        main(["Foo", "Bar", "-o", str(output_dir), "--template-dir", str(template_root)])

        text = recorded_console.export_text()
        assert "4 files written:" in text
        assert "- components/Foo/components/Bar/index.js" in text
        assert (output_dir / "components/Foo/components/Bar/Bar.jsx").is_file()

    def test_collision_exits_without_traceback(
        self, recorded_console, template_root: Path, output_dir: Path
    ):
        argv = ["Foo", "-o", str(output_dir), "--template-dir", str(template_root)]
        main(argv)

        with pytest.raises(SystemExit) as exc_info:
            main(argv)

        text = recorded_console.export_text()
        assert exc_info.value.code == 1
        assert "A file already exists at path" in text
        assert "Traceback" not in text

    def test_preact_flag(self, recorded_console, template_root: Path, output_dir: Path):
        main(["Foo", "--preact", "-o", str(output_dir), "--template-dir", str(template_root)])
        jsx = (output_dir / "components/Foo/Foo.jsx").read_text(encoding="utf-8")
        assert "from 'preact'" in jsx

    def test_dry_run(self, recorded_console, template_root: Path, output_dir: Path):
        main(["Foo", "--dry-run", "-o", str(output_dir), "--template-dir", str(template_root)])
        assert "4 files would be written:" in recorded_console.export_text()
        assert list(output_dir.iterdir()) == []

    def test_empty_template_root_warns(self, recorded_console, tmp_path: Path, output_dir: Path):
        empty = tmp_path / "empty"
        empty.mkdir()
        main(["Foo", "-o", str(output_dir), "--template-dir", str(empty)])
        assert "No templates found" in recorded_console.export_text()

    def test_output_dir_from_environment(self, recorded_console, template_root: Path, output_dir: Path):
        with patch.dict(os.environ, {"COMPGEN_OUTPUT_DIR": str(output_dir)}):
            main(["Foo", "--template-dir", str(template_root)])
        assert (output_dir / "components/Foo/index.js").is_file()


class TestConfigFile:
    def test_settings_loaded_from_file(
        self, recorded_console, template_root: Path, output_dir: Path, tmp_path: Path
    ):
        cfg_path = Config(template_root=template_root, output_dir=output_dir, preact=True).save(
            tmp_path / "compgen.json"
        )
        main(["Foo", "--config", str(cfg_path)])
        jsx = (output_dir / "components/Foo/Foo.jsx").read_text(encoding="utf-8")
        assert "from 'preact'" in jsx

    def test_flags_override_file(
        self, recorded_console, template_root: Path, output_dir: Path, tmp_path: Path
    ):
        cfg_path = Config(template_root=template_root, output_dir=tmp_path / "elsewhere").save(
            tmp_path / "compgen.json"
        )
        main(["Foo", "-c", str(cfg_path), "-o", str(output_dir), "--dry-run"])
        assert "4 files would be written:" in recorded_console.export_text()
        assert list(output_dir.iterdir()) == []
        assert not (tmp_path / "elsewhere").exists()

    def test_missing_file_exits(self, recorded_console, tmp_path: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["Foo", "--config", str(tmp_path / "missing.json")])
        assert exc_info.value.code == 1
        assert "Could not load config" in recorded_console.export_text()

    def test_invalid_file_exits(self, recorded_console, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text('{"preact": "definitely"}', encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["Foo", "--config", str(bad)])
        assert exc_info.value.code == 1
