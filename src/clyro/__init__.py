"""clyro: scaffold UI components and theming into a project."""
from __future__ import annotations

__version__ = "0.1.0b1"

__all__ = ["__version__"]
