"""In-memory catalog adapter."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from g11n_catalog.adapters.file import build_table, copy_translated
from g11n_catalog.core.ports import CatalogAdapter
from g11n_catalog.core.types import CatalogTable, merge_translated
from g11n_catalog.data.layout import normalize_scope


class MemoryAdapter(CatalogAdapter):
    """Hold raw catalog data per scope, category and locale in memory."""

    def __init__(self) -> None:
        self._data: dict[tuple[str, str, str], dict[str, Any]] = {}

    def initialize(self) -> None:
        return None

    def write(
        self,
        category: str,
        locale: str,
        scope: Optional[str],
        data: Mapping[str, Any],
    ) -> None:
        key = (normalize_scope(scope), category, locale)
        stored = self._data.setdefault(key, {})
        for raw_key, translated in data.items():
            translated = copy_translated(translated)
            if raw_key in stored:
                translated = merge_translated(stored[raw_key], translated)
            stored[raw_key] = translated

    def read(self, category: str, locale: str, scope: Optional[str] = None) -> CatalogTable:
        raw = self._data.get((normalize_scope(scope), category, locale), {})
        return build_table(raw)
