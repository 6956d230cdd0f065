"""Pre-flight checks run before ``clyro init`` and ``clyro add``.

Checks report problems through their result objects instead of raising, so
the CLI can print every issue before exiting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from clyro.config import ClyroConfig, config_path
from clyro.errors import ConfigError, RegistryError
from clyro.project.info import ProjectInfo, get_project_info
from clyro.registry.client import RegistryClient
from clyro.registry.model import RegistryComponent

__all__ = [
    "InitIssue",
    "InitPreflight",
    "AddPreflight",
    "preflight_init",
    "preflight_add",
]

log = logging.getLogger(__name__)


class InitIssue(Enum):
    """Problems that block ``clyro init``."""

    MISSING_DIR_OR_EMPTY_PROJECT = "Project directory or package.json is missing or empty."
    EXISTING_CONFIG = "A clyro.json configuration file already exists."
    UNSUPPORTED_FRAMEWORK = "Unsupported framework detected."
    TAILWIND_NOT_CONFIGURED = "Tailwind CSS is not properly configured."
    IMPORT_ALIAS_MISSING = "Missing import alias in tsconfig for TypeScript projects."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class InitPreflight:
    project_info: ProjectInfo | None
    issues: tuple[InitIssue, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.issues and self.project_info is not None


@dataclass(frozen=True)
class AddPreflight:
    component: RegistryComponent | None
    errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors and self.component is not None


def _has_tailwind(info: ProjectInfo) -> bool:
    if info.tailwind_version == "v3":
        return bool(info.tailwind_config_file and info.tailwind_css_file)
    if info.tailwind_version == "v4":
        return bool(info.tailwind_css_file)
    return False


def preflight_init(cwd: str | Path, force: bool = False) -> InitPreflight:
    """Check that *cwd* holds a project clyro can be initialised in."""
    root = Path(cwd)
    if not root.is_dir() or not (root / "package.json").is_file():
        return InitPreflight(None, (InitIssue.MISSING_DIR_OR_EMPTY_PROJECT,))

    if config_path(root).exists() and not force:
        return InitPreflight(None, (InitIssue.EXISTING_CONFIG,))

    info = get_project_info(root)
    if not info.framework.is_supported:
        return InitPreflight(info, (InitIssue.UNSUPPORTED_FRAMEWORK,))

    issues: list[InitIssue] = []
    if not _has_tailwind(info):
        issues.append(InitIssue.TAILWIND_NOT_CONFIGURED)
    if info.is_tsx and not info.alias_prefix:
        issues.append(InitIssue.IMPORT_ALIAS_MISSING)

    for issue in issues:
        log.debug("init preflight: %s", issue.name)
    return InitPreflight(info, tuple(issues))


def preflight_add(
    name: str, cwd: str | Path, client: RegistryClient
) -> AddPreflight:
    """Check that component *name* can be added to the project in *cwd*."""
    try:
        config = ClyroConfig.load(config_path(cwd))
    except ConfigError as exc:
        return AddPreflight(None, (str(exc),))

    try:
        registry = client.fetch_registry()
    except RegistryError as exc:
        log.debug("registry fetch failed: %s", exc)
        return AddPreflight(None, ("Could not load the component registry.",))

    component = registry.get(name)
    if component is None:
        return AddPreflight(None, (f'Component "{name}" not found in registry.',))

    if component.is_deprecated:
        return AddPreflight(
            None, (f'Component "{name}" is deprecated and cannot be added.',)
        )

    if config.has_component(name):
        return AddPreflight(None, (f'Component "{name}" is already added.',))

    framework = "next" if config.rsc and config.tsx else "react"
    if not component.supports(framework):
        return AddPreflight(
            None,
            (f'Component "{name}" does not support the "{framework}" framework.',),
        )

    return AddPreflight(component)
