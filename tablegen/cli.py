"""
Command-line interface for tablegen.

Usage: tablegen model [--yaml FILE] [--output-dir DIR] [--no-format] [--dry-run]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from . import __version__
from .codegen.core.config import ConfigError, load_config
from .codegen.core.generator import GenerationResult, GeneratorError
from .codegen.registry import RegistryError
from .emitter import EmitError, FormatterError
from .introspect import SchemaLoaderError
from .logging_config import get_logger, setup_logging
from .project import Project

logger = get_logger(__name__)

DEFAULT_YAML = "init.yaml"

# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tablegen",
        description="Generate data-access model code from YAML models and database tables",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command")

    model = subparsers.add_parser(
        "model", help="Generate models code from a YAML project file"
    )
    model.add_argument(
        "--yaml",
        "-y",
        metavar="FILE",
        default=DEFAULT_YAML,
        help="YAML project file; the .yaml extension may be omitted (default: init.yaml)",
    )
    model.add_argument(
        "--output-dir",
        "-o",
        metavar="DIR",
        help="Root directory for the generated models/ tree (overrides output_dir)",
    )
    model.add_argument(
        "--no-format",
        action="store_true",
        help="Don't run the formatter after writing",
    )
    model.add_argument(
        "--dry-run",
        action="store_true",
        help="Render everything but don't write any file",
    )
    model.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )

    return parser


def resolve_yaml_path(value: str) -> Path:
    """Append the .yaml extension unless it is already there."""
    if not value:
        value = DEFAULT_YAML
    if value.endswith((".yaml", ".yml")):
        return Path(value)
    return Path(value + ".yaml")


def handle_model_command(args: argparse.Namespace) -> int:
    """
    Handle the model generation command.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    filename = resolve_yaml_path(args.yaml)

    try:
        config = load_config(filename)
        console.print(f"Using yaml config file...: {filename}")

        if args.output_dir:
            config.output_dir = args.output_dir
        if args.no_format:
            config.formatter = []

        project = Project(config)

        if args.dry_run:
            result = project.generate()
            _print_summary(result, dry_run=True)
            return 0

        result = project.gen()
        _print_summary(result)
        console.print("[green]✓ Created success![/green]")
        return 0

    except FormatterError as e:
        console.print(f"[yellow]⚠ Files written, but formatting failed:[/yellow] {e}")
        return 1
    except (
        ConfigError,
        RegistryError,
        SchemaLoaderError,
        GeneratorError,
        EmitError,
    ) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("Generation failed", exc_info=True)
        return 1


def _print_summary(result: GenerationResult, dry_run: bool = False):
    """Show the generated files as a table."""
    title = "Files to generate" if dry_run else "Generated files"
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("Model", style="cyan")
    table.add_column("Path")
    table.add_column("Bytes", justify="right")

    for name, rendered in zip(result.metadata.get("entities", []), result.files):
        table.add_row(name, rendered.path, str(len(rendered.content)))

    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]⚠ {warning}[/yellow]")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the tablegen command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "model":
        return handle_model_command(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
