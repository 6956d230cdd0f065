"""Project scaffolding used by ``clyro init`` and ``clyro add``."""

from __future__ import annotations

import logging
from pathlib import Path

from clyro.config import ClyroConfig, TailwindConfig, config_path
from clyro.project.info import ProjectInfo
from clyro.project.packages import install_packages
from clyro.registry.client import RegistryClient
from clyro.registry.download import Installer, download_component
from clyro.registry.model import RegistryComponent

log = logging.getLogger(__name__)

DEFAULT_CSS_FILE = "src/index.css"

NECESSARY_PACKAGES = (
    "tailwind-merge",
    "clsx",
    "class-variance-authority",
    "tw-animate-css",
    "lucide-react",
)

UTILS_TS = """\
import { clsx, type ClassValue } from "clsx"
import { twMerge } from "tailwind-merge"

export function cn(...inputs: ClassValue[]) {
  return twMerge(clsx(inputs))
}
"""

UTILS_JS = """\
import { clsx } from "clsx"
import { twMerge } from "tailwind-merge"

/**
 * Merge Tailwind classes conditionally.
 */
export function cn(...inputs) {
  return twMerge(clsx(...inputs))
}
"""


def necessary_packages(tailwind_version: str | None) -> list[str]:
    """Packages every clyro project needs for the given Tailwind major."""
    packages = list(NECESSARY_PACKAGES)
    if tailwind_version == "v4":
        packages.append("tailwindcss-animate")
    return packages


def build_config(
    info: ProjectInfo,
    *,
    base_color: str = "neutral",
    css_variables: bool = True,
    template: str | None = None,
) -> ClyroConfig:
    """Build the initial ``clyro.json`` contents for a detected project."""
    return ClyroConfig(
        style=template or "default",
        rsc=info.is_rsc,
        tsx=info.is_tsx,
        tailwind=TailwindConfig(
            config=info.tailwind_config_file or "",
            css=info.tailwind_css_file or "app/globals.css",
            base_color=base_color,
            css_variables=css_variables,
        ),
    )


def write_utils_file(
    cwd: str | Path, config: ClyroConfig, src_dir: bool | None = None
) -> Path:
    """Write ``lib/utils.(ts|js)`` with the ``cn()`` helper.

    The file goes under ``src/lib`` when *src_dir* is set, or, when it is
    None, when the configured stylesheet lives under ``src/``.
    """
    if src_dir is None:
        src_dir = config.tailwind.css.startswith("src/")
    ext = "ts" if config.tsx else "js"
    utils_dir = Path(cwd) / ("src/lib" if src_dir else "lib")
    utils_dir.mkdir(parents=True, exist_ok=True)
    path = utils_dir / f"utils.{ext}"
    path.write_text(UTILS_TS if config.tsx else UTILS_JS, encoding="utf-8")
    return path


def add_component(
    name: str,
    component: RegistryComponent,
    cwd: str | Path,
    client: RegistryClient,
    installer: Installer = install_packages,
) -> list[Path]:
    """Download *component* and record it in ``clyro.json``."""
    written = download_component(name, component, cwd, client, installer=installer)
    path = config_path(cwd)
    config = ClyroConfig.load(path)
    if config.add_component(name):
        config.save(path)
    else:
        log.debug("%s already recorded in %s", name, path)
    return written
