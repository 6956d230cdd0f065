"""Component download: install dependencies and write component files."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from clyro.config import ClyroConfig, config_path
from clyro.errors import InvalidComponentError
from clyro.project.packages import install_packages
from clyro.registry.client import RegistryClient
from clyro.registry.model import RegistryComponent

log = logging.getLogger(__name__)

Installer = Callable[..., bool]


def resolve_alias_path(path: str, aliases: dict[str, str]) -> str:
    """Rewrite a registry file path through the project's aliases.

    ``ui/button.tsx`` with ``{"ui": "@/components/ui"}`` becomes
    ``components/ui/button.tsx``. Paths matching no alias are unchanged.
    """
    for alias, actual in aliases.items():
        if path.startswith(f"{alias}/"):
            target = actual.removeprefix("@/").rstrip("/")
            return f"{target}/{path[len(alias) + 1:]}"
    return path


def download_component(
    name: str,
    component: RegistryComponent,
    cwd: str | Path,
    client: RegistryClient,
    installer: Installer = install_packages,
) -> list[Path]:
    """Install *component*'s dependencies and write its files under ``src/``.

    Returns the written paths. Raises ConfigError without ``clyro.json``,
    RegistryError subclasses when the download fails.
    """
    root = Path(cwd)
    config = ClyroConfig.load(config_path(root))

    if component.dependencies:
        log.info("Installing dependencies: %s", ", ".join(component.dependencies))
        installer(list(component.dependencies), root, dev=False)

    descriptor = client.fetch_component(name, tsx=config.tsx)

    src_root = (root / "src").resolve()
    written: list[Path] = []
    for file in descriptor.files:
        resolved = resolve_alias_path(file.path, config.aliases)
        target = (src_root / resolved).resolve()
        if not target.is_relative_to(src_root):
            raise InvalidComponentError(
                f"Component file escapes the project: {file.path}"
            )
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(file.content, encoding="utf-8")
        log.info("Installed %s", target.relative_to(root.resolve()))
        written.append(target)

    return written
