"""Pure port definitions for catalog adapters."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, Optional, Protocol

from .types import CatalogTable, TranslationValue

CatalogReader = Callable[[Path], Mapping[str, TranslationValue]]


class CatalogAdapter(Protocol):
    def initialize(self) -> None:
        """Validate configuration before the first read."""

    def read(self, category: str, locale: str, scope: Optional[str] = None) -> CatalogTable:
        """Return a fresh table for the category, locale and scope."""
