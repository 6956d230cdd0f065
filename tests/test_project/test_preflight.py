"""Tests for init/add pre-flight checks."""
from __future__ import annotations

import json

from clyro.config import ClyroConfig, config_path
from clyro.errors import RegistryUnavailableError
from clyro.preflight import InitIssue, preflight_add, preflight_init
from clyro.registry import RegistryComponent


def _vite_project(root, tailwind: str = "^4.0.0", tsx: bool = True) -> None:
    pkg = {"devDependencies": {"vite": "^6.0.0", "tailwindcss": tailwind}}
    (root / "package.json").write_text(json.dumps(pkg), encoding="utf-8")
    (root / "src").mkdir(exist_ok=True)
    (root / "src" / "index.css").write_text('@import "tailwindcss";\n', encoding="utf-8")
    if tsx:
        (root / "tsconfig.json").write_text(
            '{"compilerOptions": {"paths": {"@/*": ["./src/*"]}}}', encoding="utf-8"
        )


class _Registry:
    def __init__(self, components=None, exc: Exception | None = None) -> None:
        self.components = components or {}
        self.exc = exc

    def fetch_registry(self):
        if self.exc:
            raise self.exc
        return self.components


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


class TestPreflightInit:
    def test_ok(self, tmp_path) -> None:
        _vite_project(tmp_path)
        result = preflight_init(tmp_path)
        assert result.ok
        assert result.issues == ()
        assert result.project_info.framework.name == "vite"

    def test_missing_directory(self, tmp_path) -> None:
        result = preflight_init(tmp_path / "nope")
        assert not result.ok
        assert result.issues == (InitIssue.MISSING_DIR_OR_EMPTY_PROJECT,)

    def test_missing_package_json(self, tmp_path) -> None:
        result = preflight_init(tmp_path)
        assert result.issues == (InitIssue.MISSING_DIR_OR_EMPTY_PROJECT,)

    def test_existing_config(self, tmp_path) -> None:
        _vite_project(tmp_path)
        ClyroConfig().save(config_path(tmp_path))
        assert preflight_init(tmp_path).issues == (InitIssue.EXISTING_CONFIG,)
        assert preflight_init(tmp_path, force=True).ok

    def test_unsupported_framework(self, tmp_path) -> None:
        (tmp_path / "package.json").write_text("{}", encoding="utf-8")
        result = preflight_init(tmp_path)
        assert result.issues == (InitIssue.UNSUPPORTED_FRAMEWORK,)

    def test_v3_needs_config_file(self, tmp_path) -> None:
        _vite_project(tmp_path, tailwind="^3.4.0")
        assert preflight_init(tmp_path).issues == (InitIssue.TAILWIND_NOT_CONFIGURED,)
        (tmp_path / "tailwind.config.js").write_text("module.exports = {}", encoding="utf-8")
        assert preflight_init(tmp_path).ok

    def test_typescript_without_alias(self, tmp_path) -> None:
        _vite_project(tmp_path)
        (tmp_path / "tsconfig.json").write_text("{}", encoding="utf-8")
        assert preflight_init(tmp_path).issues == (InitIssue.IMPORT_ALIAS_MISSING,)

    def test_javascript_project_skips_alias_check(self, tmp_path) -> None:
        _vite_project(tmp_path, tsx=False)
        assert preflight_init(tmp_path).ok

    def test_reports_every_issue(self, tmp_path) -> None:
        _vite_project(tmp_path, tailwind="")
        (tmp_path / "tsconfig.json").write_text("{}", encoding="utf-8")
        assert preflight_init(tmp_path).issues == (
            InitIssue.TAILWIND_NOT_CONFIGURED,
            InitIssue.IMPORT_ALIAS_MISSING,
        )


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------


class TestPreflightAdd:
    BUTTON = RegistryComponent("button", frameworks=("react", "next"))

    def test_ok(self, tmp_path) -> None:
        ClyroConfig().save(config_path(tmp_path))
        result = preflight_add("button", tmp_path, _Registry({"button": self.BUTTON}))
        assert result.ok
        assert result.component == self.BUTTON

    def test_missing_config(self, tmp_path) -> None:
        result = preflight_add("button", tmp_path, _Registry({"button": self.BUTTON}))
        assert not result.ok
        assert "clyro init" in result.errors[0]

    def test_registry_unavailable(self, tmp_path) -> None:
        ClyroConfig().save(config_path(tmp_path))
        registry = _Registry(exc=RegistryUnavailableError("down"))
        result = preflight_add("button", tmp_path, registry)
        assert result.errors == ("Could not load the component registry.",)

    def test_unknown_component(self, tmp_path) -> None:
        ClyroConfig().save(config_path(tmp_path))
        result = preflight_add("nope", tmp_path, _Registry({"button": self.BUTTON}))
        assert result.errors == ('Component "nope" not found in registry.',)

    def test_deprecated(self, tmp_path) -> None:
        ClyroConfig().save(config_path(tmp_path))
        old = RegistryComponent("old", frameworks=("react",), deprecated=True)
        result = preflight_add("old", tmp_path, _Registry({"old": old}))
        assert "deprecated" in result.errors[0]

    def test_already_added(self, tmp_path) -> None:
        ClyroConfig(components=["button"]).save(config_path(tmp_path))
        result = preflight_add("button", tmp_path, _Registry({"button": self.BUTTON}))
        assert result.errors == ('Component "button" is already added.',)

    def test_framework_next_for_rsc_tsx(self, tmp_path) -> None:
        ClyroConfig(rsc=True, tsx=True).save(config_path(tmp_path))
        react_only = RegistryComponent("x", frameworks=("react",))
        result = preflight_add("x", tmp_path, _Registry({"x": react_only}))
        assert result.errors == ('Component "x" does not support the "next" framework.',)

    def test_framework_react_otherwise(self, tmp_path) -> None:
        ClyroConfig(rsc=False, tsx=True).save(config_path(tmp_path))
        react_only = RegistryComponent("x", frameworks=("react",))
        assert preflight_add("x", tmp_path, _Registry({"x": react_only})).ok

    def test_undecodable_config(self, tmp_path) -> None:
        config_path(tmp_path).write_bytes(b'{"style": "\xff"}')
        result = preflight_add("button", tmp_path, _Registry({"button": self.BUTTON}))
        assert not result.ok
        assert result.errors[0].startswith("Invalid clyro.json")
