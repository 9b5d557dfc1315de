"""Typed errors for catalog configuration and loading."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class CatalogError(Exception):
    """Base class for catalog errors."""


class ConfigurationError(CatalogError):
    """Raised when an adapter is configured with a directory that does not exist."""

    def __init__(self, message: str, path: Optional[str | Path] = None) -> None:
        self.path = path
        super().__init__(message)


class CatalogLoadError(CatalogError):
    """Raised when a catalog file exists but cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[str | Path] = None) -> None:
        self.path = path
        super().__init__(message)
