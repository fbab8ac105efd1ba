"""
spdexer CLI.

Adds an SPDX license header to every Go file of a project, replacing
whatever license header was there before.
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.table import Table

from spdexer import __version__, config
from spdexer.engine import HeaderEngine
from spdexer.exceptions import SpdexerError
from spdexer.licenses import LICENSES
from spdexer.types import TemplateData

console = Console()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.command()
@click.version_option(__version__, prog_name="spdexer")
@click.option("--exclude", "excludes", multiple=True, help="Exclude paths starting with this prefix (repeatable)")
@click.option(
    "--license",
    "license_id",
    type=click.Choice(sorted(LICENSES)),
    default=config.LICENSE,
    show_default=True,
    help="License to add to files",
)
@click.option("--name", required=True, help="Name of the project")
@click.option("--author", required=True, help="Author of the project")
@click.option("--year", required=True, help="Year of the project")
@click.option(
    "--path",
    "root",
    type=click.Path(file_okay=False),
    default=config.ROOT,
    show_default=True,
    help="Project root to walk",
)
@click.option("--dry-run", is_flag=True, help="Report what would change without writing")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(excludes, license_id, name, author, year, root, dry_run, verbose) -> None:
    """spdexer: automate adding SPDX licenses to your Go project."""
    setup_logging(verbose)
    engine = HeaderEngine(
        license_id,
        TemplateData(name=name, author=author, year=year),
        excludes=excludes,
        root=root,
    )
    try:
        result = engine.apply(dry_run=dry_run)
    except SpdexerError as exc:
        console.print(f"[bold red]Error:[/] {exc}")
        sys.exit(1)

    if not result.files:
        console.print(f"[dim]No Go files found under {result.root}.[/]")
        return

    table = Table(title=f"📜 {license_id}: {name}")
    table.add_column("File", style="bold")
    table.add_column("Boundary", width=9)
    table.add_column("Status", width=12)
    for f in result.files:
        try:
            shown = f.path.relative_to(result.root)
        except ValueError:
            shown = f.path
        if not f.has_declaration:
            status = "[yellow]no package[/]"
        elif f.changed:
            status = "[green]updated[/]" if not dry_run else "[cyan]would update[/]"
        else:
            status = "[dim]unchanged[/]"
        table.add_row(str(shown), str(f.boundary), status)
    console.print(table)

    verb = "would be updated" if dry_run else "updated"
    console.print(f"\n  [green]✓[/] {result.total} files processed, {result.changed} {verb}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
