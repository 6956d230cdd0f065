"""CLI command: clyro theme -- merge the clyro theme into a stylesheet."""

from __future__ import annotations

import sys

import click

from clyro.cli import console
from clyro.theme import inject_theme


@click.command()
@click.argument("css_file", type=click.Path(dir_okay=False))
@click.option("--dry-run", is_flag=True, help="Print the merged stylesheet instead of writing it")
def theme(css_file: str, dry_run: bool) -> None:
    """Merge the clyro theme into CSS_FILE, keeping your variable overrides."""
    try:
        result = inject_theme(css_file, dry_run=dry_run)
    except OSError as exc:
        console.error(f"Could not write {css_file}: {exc}")
        sys.exit(1)

    if result.not_found:
        console.warn(f"CSS file not found: {css_file}")
        sys.exit(1)

    if dry_run:
        click.echo(result.content, nl=False)
        return

    console.success(f"✔ Merged clyro theme into {result.path.name}")
