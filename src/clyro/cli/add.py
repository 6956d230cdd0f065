"""CLI command: clyro add -- add a component from the registry."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from clyro.cli import console
from clyro.config import Settings
from clyro.errors import ClyroError
from clyro.preflight import preflight_add
from clyro.registry.client import RegistryClient
from clyro.scaffold import add_component


@click.command()
@click.argument("component")
@click.option(
    "-c", "--cwd", type=click.Path(file_okay=False), default=os.getcwd,
    help="The working directory",
)
@click.pass_obj
def add(settings: Settings | None, component: str, cwd: str) -> None:
    """Add a COMPONENT from the registry to your project."""
    root = Path(cwd)

    with RegistryClient(settings) as client:
        # Step 1: Preflight
        console.info("Fetching component registry...")
        result = preflight_add(component, root, client)
        if not result.ok:
            for err in result.errors:
                console.error(err)
            sys.exit(1)

        # Step 2: Download and record in clyro.json
        console.info(f'Downloading component "{component}"...')
        try:
            written = add_component(component, result.component, root, client)
        except ClyroError as exc:
            console.error(f'Failed to download component "{component}".')
            console.error(str(exc))
            sys.exit(1)

    for path in written:
        console.success(f"✔ Installed: {path.relative_to(root.resolve()).as_posix()}")
    console.success(f'✔ Component "{component}" successfully added to clyro.json.')
