"""CLI command: clyro init -- set up clyro in a project."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from clyro.cli import console
from clyro.config import BASE_COLORS, TEMPLATES, Settings, config_path
from clyro.errors import ClyroError
from clyro.preflight import InitIssue, preflight_add, preflight_init
from clyro.project.packages import install_packages
from clyro.registry.client import RegistryClient
from clyro.scaffold import (
    DEFAULT_CSS_FILE,
    add_component,
    build_config,
    necessary_packages,
    write_utils_file,
)
from clyro.theme import inject_theme


@click.command()
@click.argument("components", nargs=-1)
@click.option(
    "-t", "--template", type=click.Choice(TEMPLATES), default=None,
    help="The template to use",
)
@click.option(
    "-b", "--base-color", type=click.Choice(BASE_COLORS), default=None,
    help="The base color to use",
)
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation prompt")
@click.option("-d", "--defaults", is_flag=True, help="Use default configuration")
@click.option("-f", "--force", is_flag=True, help="Force overwrite of existing configuration")
@click.option(
    "-c", "--cwd", type=click.Path(file_okay=False), default=os.getcwd,
    help="The working directory",
)
@click.option("-s", "--silent", is_flag=True, help="Mute package manager output")
@click.option(
    "--src-dir/--no-src-dir", default=None,
    help="Place generated files under src/",
)
@click.option(
    "--css-variables/--no-css-variables", default=True,
    help="Use CSS variables for theming",
)
@click.pass_obj
def init(
    settings: Settings | None,
    components: tuple[str, ...],
    template: str | None,
    base_color: str | None,
    yes: bool,
    defaults: bool,
    force: bool,
    cwd: str,
    silent: bool,
    src_dir: bool | None,
    css_variables: bool,
) -> None:
    """Initialize clyro in your project.

    Checks the project, installs dependencies, merges the theme into the
    Tailwind stylesheet and writes clyro.json. Any COMPONENTS given are
    added afterwards.
    """
    root = Path(cwd)
    console.blank()
    console.info("Starting clyro init...")
    console.blank()

    # Step 1: Preflight
    result = preflight_init(root, force=force)
    if not result.ok:
        console.error("Preflight checks failed with the following issues:")
        for issue in result.issues:
            console.error(f"Error code {issue.name}: {issue.message}")
        if InitIssue.EXISTING_CONFIG in result.issues:
            console.error("Use `--force` to overwrite it.")
        framework = result.project_info.framework if result.project_info else None
        if framework and InitIssue.UNSUPPORTED_FRAMEWORK in result.issues:
            console.info(f"Visit {framework.installation} to configure your project manually.")
        if framework and InitIssue.TAILWIND_NOT_CONFIGURED in result.issues:
            console.info(f"Follow the Tailwind CSS installation guide at {framework.tailwind}")
        sys.exit(1)

    info = result.project_info
    console.info("✔ Preflight checks.")
    console.info(f"✔ Verifying framework. Found {info.framework.label}.")
    console.info(f"✔ Validating Tailwind CSS config. Found {info.tailwind_version}.")
    if info.alias_prefix:
        console.info(f"✔ Validating import alias. Found {info.alias_prefix}.")

    # Step 2: Base color
    if base_color is None:
        if yes or defaults:
            base_color = "neutral"
        else:
            base_color = click.prompt(
                "Which base color would you like to use?",
                type=click.Choice(BASE_COLORS),
                default="neutral",
            )

    # Step 3: Dependencies
    console.info("✔ Installing dependencies.")
    if not install_packages(necessary_packages(info.tailwind_version), root, silent=silent):
        console.warn("Some dependencies failed to install; continuing.")

    # Step 4: Theme
    css_file = info.tailwind_css_file or DEFAULT_CSS_FILE
    console.info(f"✔ Updating CSS variables in {css_file}")
    try:
        injected = inject_theme(root / css_file)
    except OSError as exc:
        console.error(f"Could not write {css_file}: {exc}")
        sys.exit(1)
    if injected.not_found:
        console.warn(f"CSS file not found: {css_file}")

    # Step 5: clyro.json and lib/utils
    config = build_config(
        info, base_color=base_color, css_variables=css_variables, template=template
    )
    config.save(config_path(root))
    console.info("✔ Writing clyro.json.")
    utils_path = write_utils_file(root, config, src_dir=src_dir)
    console.info(f"✔ Created {utils_path.relative_to(root).as_posix()}")

    # Step 6: Components requested on the command line
    if components:
        with RegistryClient(settings) as client:
            for name in components:
                check = preflight_add(name, root, client)
                if not check.ok:
                    for err in check.errors:
                        console.error(err)
                    continue
                try:
                    add_component(name, check.component, root, client)
                except ClyroError as exc:
                    console.error(f'Failed to add component "{name}": {exc}')
                    continue
                console.success(f'✔ Component "{name}" added.')

    console.blank()
    console.success("Success! Project initialization completed.")
    console.info("You may now add components by running `clyro add [component]`.")
    console.blank()
