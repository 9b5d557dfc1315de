"""Resolve category/locale/scope triples to catalog file paths."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

DEFAULT_SCOPE = "default"
TEMPLATE_MARKER = "Template"


def normalize_scope(scope: Optional[str]) -> str:
    return scope or DEFAULT_SCOPE


class CatalogLayout:
    """Map catalog triples to files under a root directory.

    Per-locale catalogs live at ``<root>/<locale>/<category>/<scope><ext>``.
    Categories containing ``Template`` are flat and locale independent:
    ``<root>/<category>_<scope><ext>`` with the category cut at the marker,
    so ``validationTemplate`` reads ``validation_default.json``.
    """

    def __init__(self, root: str | Path, extension: str = ".json") -> None:
        self.root = Path(root)
        self.extension = extension

    def path_for(self, category: str, locale: str, scope: Optional[str] = None) -> Path:
        scope = normalize_scope(scope)
        pos = category.find(TEMPLATE_MARKER)
        if pos != -1:
            return self.root / f"{category[:pos]}_{scope}{self.extension}"
        return self.root / locale / category / f"{scope}{self.extension}"
