"""Configuration: runtime settings and the ``clyro.json`` project file."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from clyro.errors import ConfigError

CONFIG_FILENAME = "clyro.json"
SCHEMA_URL = "https://ui.shadcn.com/schema.json"
BASE_COLORS = ("neutral", "gray", "zinc", "stone", "slate")
TEMPLATES = ("next", "next-monorepo")

DEFAULT_REGISTRY_URL = (
    "https://cdn.jsdelivr.net/gh/DevsToolKit/clyro_testing@main/component-registry.json"
)
DEFAULT_COMPONENT_BASE_URL = (
    "https://cdn.jsdelivr.net/gh/DevsToolKit/clyro_testing@main/component_registry"
)


@dataclass(frozen=True)
class Settings:
    registry_url: str = DEFAULT_REGISTRY_URL
    component_base_url: str = DEFAULT_COMPONENT_BASE_URL
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings, letting ``CLYRO_*`` environment variables override defaults.

        Raises ConfigError if ``CLYRO_HTTP_TIMEOUT`` is not a number.
        """
        raw_timeout = os.environ.get("CLYRO_HTTP_TIMEOUT", "30")
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigError(
                f"Invalid CLYRO_HTTP_TIMEOUT: {raw_timeout!r} is not a number", cause=exc
            ) from exc
        return cls(
            registry_url=os.environ.get("CLYRO_REGISTRY_URL", DEFAULT_REGISTRY_URL),
            component_base_url=os.environ.get(
                "CLYRO_COMPONENT_BASE_URL", DEFAULT_COMPONENT_BASE_URL
            ),
            timeout=timeout,
        )


@dataclass
class TailwindConfig:
    config: str = ""
    css: str = "app/globals.css"
    base_color: str = "neutral"
    css_variables: bool = True


def _default_aliases() -> dict[str, str]:
    return {
        "components": "@/components",
        "utils": "@/lib/utils",
        "ui": "@/components/ui",
        "lib": "@/lib",
        "hooks": "@/hooks",
    }


@dataclass
class ClyroConfig:
    """Contents of a project's ``clyro.json``."""

    style: str = "default"
    rsc: bool = False
    tsx: bool = True
    tailwind: TailwindConfig = field(default_factory=TailwindConfig)
    aliases: dict[str, str] = field(default_factory=_default_aliases)
    icon_library: str = "lucide"
    components: list[str] = field(default_factory=list)

    # --- components -----------------------------------------------------------

    def has_component(self, name: str) -> bool:
        return name in self.components

    def add_component(self, name: str) -> bool:
        """Record *name*; returns False if it was already recorded."""
        if name in self.components:
            return False
        self.components.append(name)
        return True

    # --- persistence ----------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "$schema": SCHEMA_URL,
            "style": self.style,
            "rsc": self.rsc,
            "tsx": self.tsx,
            "tailwind": {
                "config": self.tailwind.config,
                "css": self.tailwind.css,
                "baseColor": self.tailwind.base_color,
                "cssVariables": self.tailwind.css_variables,
            },
            "aliases": dict(self.aliases),
            "iconLibrary": self.icon_library,
        }
        if self.components:
            data["components"] = list(self.components)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClyroConfig:
        tw = data.get("tailwind") or {}
        return cls(
            style=data.get("style", "default"),
            rsc=bool(data.get("rsc", False)),
            tsx=bool(data.get("tsx", True)),
            tailwind=TailwindConfig(
                config=tw.get("config", ""),
                css=tw.get("css", "app/globals.css"),
                base_color=tw.get("baseColor", "neutral"),
                css_variables=bool(tw.get("cssVariables", True)),
            ),
            aliases=dict(data.get("aliases") or {}),
            icon_library=data.get("iconLibrary", "lucide"),
            components=list(data.get("components") or []),
        )

    def save(self, path: Path) -> None:
        """Serialise to JSON and write to *path*."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2) + "\n", encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> ClyroConfig:
        """Read ``clyro.json`` from *path*.

        Raises ConfigError if the file is missing, unreadable or is not a
        JSON object.
        """
        if not path.is_file():
            raise ConfigError(f"Missing {CONFIG_FILENAME}. Run `clyro init` first.")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Invalid {CONFIG_FILENAME}: {exc}", cause=exc) from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid {CONFIG_FILENAME}: expected a JSON object")
        return cls.from_dict(data)


def config_path(cwd: str | Path) -> Path:
    return Path(cwd) / CONFIG_FILENAME
