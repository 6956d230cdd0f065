"""Error hierarchy for clyro."""
from __future__ import annotations


class ClyroError(Exception):
    """Base error for all clyro errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigError(ClyroError):
    """``clyro.json`` is missing or cannot be read."""


# ---------------------------------------------------------------------------
# Registry errors
# ---------------------------------------------------------------------------


class RegistryError(ClyroError):
    """Error talking to the component registry."""

    def __init__(
        self,
        message: str,
        *,
        url: str = "",
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.url = url
        self.status_code = status_code


class RegistryUnavailableError(RegistryError):
    """The registry could not be reached or answered with an error status."""


class InvalidComponentError(RegistryError):
    """A component descriptor does not have the expected shape."""


class PackageInstallError(ClyroError):
    """The package manager exited with a failure."""

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        returncode: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.command = command or []
        self.returncode = returncode
