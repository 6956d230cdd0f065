"""Project detection: framework, TypeScript, Tailwind and import aliases."""

from __future__ import annotations

import fnmatch
import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from clyro.project.frameworks import FRAMEWORKS, Framework

__all__ = [
    "ProjectInfo",
    "get_project_info",
    "get_package_info",
    "get_tailwind_version",
    "get_tailwind_css_file",
    "get_tailwind_config_file",
    "get_tsconfig_alias_prefix",
    "is_typescript_project",
]

log = logging.getLogger(__name__)

PROJECT_SHARED_IGNORE = ("node_modules", ".next", "public", "dist", "build")

_CONFIG_FILE_PATTERNS = (
    "next.config.*",
    "vite.config.*",
    "astro.config.*",
    "app.config.*",
    "gatsby-config.*",
    "composer.json",
    "react-router.config.*",
)

_TAILWIND_CSS_MARKERS = (
    "@tailwind base",
    '@import "tailwindcss"',
    "@import 'tailwindcss'",
)

_PREFERRED_ALIAS_TARGETS = ("*", "src/*", "app/*", "resources/js/*")

_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")
_V3_RE = re.compile(r"^[\^~>=v]*3(\.\d+)?")


@dataclass(frozen=True)
class ProjectInfo:
    """What clyro learned about the project in a directory."""

    framework: Framework
    is_src_dir: bool = False
    is_rsc: bool = False
    is_tsx: bool = False
    tailwind_version: str | None = None  # "v3", "v4" or None
    tailwind_config_file: str | None = None
    tailwind_css_file: str | None = None
    alias_prefix: str | None = None


# ---------------------------------------------------------------------------
# File discovery
# ---------------------------------------------------------------------------


def _find_files(cwd: Path, patterns: tuple[str, ...], deep: int) -> list[str]:
    """Return POSIX paths relative to *cwd* matching any of *patterns*.

    Searches at most *deep* directory levels and skips ignored directories.
    """
    found: list[str] = []
    root = str(cwd)
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = os.path.relpath(dirpath, root)
        level = 0 if rel_dir == "." else rel_dir.count(os.sep) + 1
        dirnames[:] = sorted(d for d in dirnames if d not in PROJECT_SHARED_IGNORE)
        if level + 1 >= deep:
            dirnames[:] = []
        for name in sorted(filenames):
            if any(fnmatch.fnmatch(name, pat) for pat in patterns):
                rel = name if rel_dir == "." else f"{Path(rel_dir).as_posix()}/{name}"
                found.append(rel)
    return found


def _dependency_names(package_json: dict[str, Any] | None, dev: bool = True) -> list[str]:
    if not package_json:
        return []
    names = list((package_json.get("dependencies") or {}).keys())
    if dev:
        names += list((package_json.get("devDependencies") or {}).keys())
    return names


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def get_package_info(cwd: str | Path) -> dict[str, Any] | None:
    """Load ``package.json`` from *cwd*, or None when absent or unreadable."""
    pkg_path = Path(cwd) / "package.json"
    if not pkg_path.is_file():
        return None
    try:
        data = json.loads(pkg_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        log.warning("Could not read %s: %s", pkg_path, exc)
        return None
    return data if isinstance(data, dict) else None


def get_tailwind_version(cwd: str | Path) -> str | None:
    """Return ``"v3"`` or ``"v4"`` from the tailwindcss dependency, else None."""
    pkg = get_package_info(cwd)
    if not pkg:
        return None
    spec = (pkg.get("dependencies") or {}).get("tailwindcss") or (
        pkg.get("devDependencies") or {}
    ).get("tailwindcss")
    if not spec:
        return None
    if _V3_RE.match(str(spec).strip()):
        return "v3"
    return "v4"


def get_tailwind_css_file(cwd: str | Path) -> str | None:
    """Return the first stylesheet that pulls in Tailwind."""
    root = Path(cwd)
    for rel in _find_files(root, ("*.css", "*.scss"), deep=5):
        try:
            content = (root / rel).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            continue
        if any(marker in content for marker in _TAILWIND_CSS_MARKERS):
            return rel
    return None


def get_tailwind_config_file(cwd: str | Path) -> str | None:
    files = _find_files(Path(cwd), ("tailwind.config.*",), deep=3)
    return files[0] if files else None


def is_typescript_project(cwd: str | Path) -> bool:
    return bool(_find_files(Path(cwd), ("tsconfig.*",), deep=1))


def _strip_json_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments that sit outside string literals."""
    out: list[str] = []
    i = 0
    in_string = False
    while i < len(text):
        char = text[i]
        if in_string:
            out.append(char)
            if char == "\\" and i + 1 < len(text):
                out.append(text[i + 1])
                i += 2
                continue
            if char == '"':
                in_string = False
            i += 1
            continue
        if char == '"':
            in_string = True
            out.append(char)
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = len(text) if end == -1 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = len(text) if end == -1 else end + 2
        else:
            out.append(char)
            i += 1
    return "".join(out)


def _load_tsconfig_paths(cwd: Path) -> dict[str, list[str]]:
    for name in ("tsconfig.json", "jsconfig.json"):
        path = cwd / name
        if not path.is_file():
            continue
        try:
            raw = _strip_json_comments(path.read_text(encoding="utf-8"))
            data = json.loads(_TRAILING_COMMA_RE.sub(r"\1", raw))
        except (OSError, json.JSONDecodeError) as exc:
            log.warning("Could not parse %s: %s", path, exc)
            continue
        paths = (data.get("compilerOptions") or {}).get("paths") or {}
        if paths:
            return {
                alias: targets if isinstance(targets, list) else [targets]
                for alias, targets in paths.items()
            }
    return {}


def get_tsconfig_alias_prefix(cwd: str | Path) -> str | None:
    """Return the import alias prefix (e.g. ``@``) declared in tsconfig paths."""
    paths = _load_tsconfig_paths(Path(cwd))
    if not paths:
        return None

    for alias, targets in paths.items():
        normalized = {t[2:] if t.startswith("./") else t for t in targets}
        if normalized & set(_PREFERRED_ALIAS_TARGETS):
            return alias.removesuffix("/*")

    return next(iter(paths)).removesuffix("/*")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def _detect_framework(
    cwd: Path,
    config_files: list[str],
    package_json: dict[str, Any] | None,
    is_using_app_dir: bool,
) -> tuple[Framework, bool]:
    """Pick the framework for the project; returns (framework, is_rsc)."""

    def has_config(prefix: str) -> bool:
        return any(f.startswith(prefix) for f in config_files)

    deps = (package_json or {}).get("dependencies") or {}
    dev_deps = (package_json or {}).get("devDependencies") or {}

    selected: Framework | None = None
    is_rsc = False

    if has_config("next.config."):
        selected = FRAMEWORKS["next-app"] if is_using_app_dir else FRAMEWORKS["next-pages"]
        is_rsc = is_using_app_dir
    elif has_config("astro.config."):
        selected = FRAMEWORKS["astro"]
    elif has_config("gatsby-config."):
        selected = FRAMEWORKS["gatsby"]
    elif has_config("composer.json"):
        selected = FRAMEWORKS["laravel"]
    elif any(dep.startswith("@remix-run/") for dep in deps):
        selected = FRAMEWORKS["remix"]
    elif any(
        dep.startswith("@tanstack/react-start")
        for dep in _dependency_names(package_json)
    ):
        selected = FRAMEWORKS["tanstack-start"]
    elif has_config("react-router.config."):
        selected = FRAMEWORKS["react-router"]
    elif has_config("vite.config.") or "vite" in deps or "vite" in dev_deps:
        selected = FRAMEWORKS["vite"]
    elif "react-scripts" in deps or "react-scripts" in dev_deps:
        selected = FRAMEWORKS["cra"]
    else:
        app_config = next((f for f in config_files if f.startswith("app.config")), None)
        if app_config:
            try:
                contents = (cwd / app_config).read_text(encoding="utf-8")
            except OSError:
                contents = ""
            if "defineConfig" in contents:
                selected = FRAMEWORKS["vite"]

    if "expo" in deps:
        selected = FRAMEWORKS["expo"]

    return selected or FRAMEWORKS["manual"], is_rsc


def get_project_info(cwd: str | Path) -> ProjectInfo:
    """Inspect the project in *cwd*."""
    root = Path(cwd)
    config_files = _find_files(root, _CONFIG_FILE_PATTERNS, deep=3)
    package_json = get_package_info(root)
    is_src_dir = (root / "src").exists()
    is_using_app_dir = (root / ("src/app" if is_src_dir else "app")).exists()

    framework, is_rsc = _detect_framework(root, config_files, package_json, is_using_app_dir)
    log.debug("Detected framework %s in %s", framework.name, root)

    return ProjectInfo(
        framework=framework,
        is_src_dir=is_src_dir,
        is_rsc=is_rsc,
        is_tsx=is_typescript_project(root),
        tailwind_version=get_tailwind_version(root),
        tailwind_config_file=get_tailwind_config_file(root),
        tailwind_css_file=get_tailwind_css_file(root),
        alias_prefix=get_tsconfig_alias_prefix(root),
    )
