"""compgen command line.

Usage::

    compgen Foo                 # components/Foo/...
    compgen Foo Bar             # components/Foo/components/Bar/...
    compgen Foo --preact -o src
    python -m compgen Foo --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from compgen.config import Config
from compgen.scaffolder import ComponentGenerator, GenerationResult, ScaffoldError
from compgen.utils import (
    format_duration,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compgen",
        description="Scaffold a React component, optionally nested inside parent components",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  compgen Header\n"
            "  compgen Header Logo          # Logo nested inside Header\n"
            "  compgen Header --preact -o ./src\n"
        ),
    )
    parser.add_argument(
        "components",
        nargs="*",
        metavar="NAME",
        help="Component names, outermost parent first",
    )
    parser.add_argument(
        "--preact",
        action="store_true",
        default=None,
        help="Import h and Component from preact instead of React",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Directory the components/ tree is written under (default: .)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Load settings from a JSON file written by Config.save (instead of COMPGEN_* variables)",
    )
    parser.add_argument(
        "--template-dir",
        type=Path,
        default=None,
        help="Use a custom template root instead of the bundled one",
    )
    parser.add_argument(
        "--no-render-paths",
        dest="render_paths",
        action="store_false",
        default=None,
        help="Copy file and directory names verbatim instead of rendering them",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="Check for collisions and list the files without writing them",
    )
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Build the run's ``Config``; command line flags win over file or environment."""
    overrides = {
        "template_root": args.template_dir,
        "output_dir": args.output,
        "preact": args.preact,
        "render_paths": args.render_paths,
        "dry_run": args.dry_run,
    }
    if args.config is None:
        return Config.from_env(**overrides)
    return Config.load(args.config).model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )


def run(component_names: Sequence[str], config: Config) -> GenerationResult:
    """Generate the component described by *component_names* with *config*."""
    generator = ComponentGenerator(config)
    return asyncio.run(generator.generate(component_names))


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``compgen`` and ``python -m compgen``."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except (OSError, ValidationError) as exc:
        print_error(f"Could not load config {args.config}: {exc}")
        sys.exit(1)

    if args.components:
        print_summary_table(
            {
                "Component": " > ".join(args.components),
                "Template root": str(config.template_root),
                "Output directory": str(config.output_dir),
                "JSX import": "preact" if config.preact else "react",
            },
            title="compgen",
        )

    try:
        result = run(args.components, config)
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    if result.count == 0:
        print_warning(f"No templates found under {config.template_root}")
        return

    print_success(f"{result.summary()}\n({format_duration(result.duration)})")


if __name__ == "__main__":
    main()
