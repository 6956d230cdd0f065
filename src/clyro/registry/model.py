"""Registry model: index entries and downloadable component descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from clyro.errors import InvalidComponentError


@dataclass(frozen=True)
class RegistryComponent:
    """An entry in the component registry index."""

    name: str
    frameworks: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()
    deprecated: bool = False
    status: str = ""

    @property
    def is_deprecated(self) -> bool:
        return self.deprecated or self.status == "deprecated"

    def supports(self, framework: str) -> bool:
        return framework in self.frameworks

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> RegistryComponent:
        return cls(
            name=data.get("name") or name,
            frameworks=tuple(data.get("frameworks") or ()),
            dependencies=tuple(data.get("dependencies") or ()),
            deprecated=bool(data.get("deprecated", False)),
            status=data.get("status") or "",
        )


@dataclass(frozen=True)
class ComponentFile:
    """One source file shipped with a component."""

    path: str
    content: str


@dataclass(frozen=True)
class ComponentDescriptor:
    """The downloadable payload of a component."""

    files: tuple[ComponentFile, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Any, url: str = "") -> ComponentDescriptor:
        """Validate and build a descriptor from decoded JSON.

        Raises InvalidComponentError when ``files`` is missing or malformed.
        """
        files = data.get("files") if isinstance(data, dict) else None
        if not isinstance(files, list):
            raise InvalidComponentError(
                "Invalid component format: 'files' missing or not an array.", url=url
            )
        parsed: list[ComponentFile] = []
        for entry in files:
            if not isinstance(entry, dict) or "path" not in entry or "content" not in entry:
                raise InvalidComponentError(
                    "Invalid component format: each file needs 'path' and 'content'.",
                    url=url,
                )
            parsed.append(ComponentFile(path=str(entry["path"]), content=str(entry["content"])))
        return cls(files=tuple(parsed))
