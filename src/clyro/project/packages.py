"""Package manager detection and installation."""

from __future__ import annotations

import logging
import shutil
import subprocess
from enum import Enum
from pathlib import Path

from clyro.errors import PackageInstallError

__all__ = [
    "PackageManager",
    "detect_package_manager",
    "build_install_command",
    "install_packages",
]

log = logging.getLogger(__name__)


class PackageManager(Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


# Lockfile checked in order; the first one present wins.
_LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("bun.lockb", PackageManager.BUN),
)


def detect_package_manager(cwd: str | Path) -> PackageManager:
    """Infer the package manager from the lockfile in *cwd* (npm by default)."""
    root = Path(cwd)
    for lockfile, manager in _LOCKFILES:
        if (root / lockfile).exists():
            return manager
    return PackageManager.NPM


def build_install_command(
    manager: PackageManager, packages: list[str], dev: bool = False
) -> list[str]:
    """Return the argv that installs *packages* with *manager*."""
    if manager is PackageManager.NPM:
        args = ["install", *(["--save-dev"] if dev else [])]
    elif manager is PackageManager.YARN:
        args = ["add", *(["--dev"] if dev else [])]
    else:
        args = ["add", *(["-D"] if dev else [])]
    return [manager.value, *args, *packages]


def install_packages(
    packages: list[str],
    cwd: str | Path,
    *,
    dev: bool = False,
    silent: bool = False,
    check: bool = False,
) -> bool:
    """Install *packages* into the project at *cwd*.

    Returns True on success. Failures are logged and return False, unless
    *check* is set, in which case PackageInstallError is raised.
    """
    if not packages:
        return True

    manager = detect_package_manager(cwd)
    command = build_install_command(manager, packages, dev=dev)
    executable = shutil.which(command[0]) or command[0]

    log.info("Installing with %s: %s", manager.value, ", ".join(packages))
    try:
        completed = subprocess.run(
            [executable, *command[1:]],
            cwd=str(cwd),
            capture_output=silent,
            text=True,
        )
    except OSError as exc:
        log.error("Failed to run %s: %s", manager.value, exc)
        if check:
            raise PackageInstallError(
                f"Failed to run {manager.value}: {exc}", command=command, cause=exc
            ) from exc
        return False

    if completed.returncode != 0:
        log.error("Failed to install: %s", ", ".join(packages))
        if check:
            raise PackageInstallError(
                f"Failed to install: {', '.join(packages)}",
                command=command,
                returncode=completed.returncode,
            )
        return False

    return True
