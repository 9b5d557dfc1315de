"""Command line access to file catalogs."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from g11n_catalog.adapters.file import CatalogFileAdapter
from g11n_catalog.core.errors import CatalogLoadError, ConfigurationError
from g11n_catalog.core.types import CatalogTable
from g11n_catalog.settings import configure_logging, get_settings


def _table_to_json(table: CatalogTable) -> str:
    rows = []
    for entry in table.entries():
        translated = entry.translated
        if isinstance(translated, tuple):
            translated = list(translated)
        rows.append({"id": entry.id, "context": entry.context, "translated": translated})
    return json.dumps(rows, ensure_ascii=False, indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Read a g11n catalog")
    parser.add_argument("--category", required=True)
    parser.add_argument("--locale", required=True)
    parser.add_argument("--scope", default=None)
    parser.add_argument("--path", default=None, help="catalog directory (default: G11N_CATALOG_PATH)")
    parser.add_argument("--resolve", action="store_true", help="print the resolved file path only")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings)
    path = args.path if args.path is not None else settings.catalog_path
    adapter = CatalogFileAdapter({"path": path})

    try:
        if args.resolve:
            print(adapter.resolve_file_path(args.category, args.locale, args.scope))
            return 0
        table = adapter.read(args.category, args.locale, args.scope)
    except ConfigurationError as exc:
        print(f"[FAIL] {exc}", file=sys.stderr)
        return 2
    except CatalogLoadError as exc:
        print(f"[FAIL] {exc}", file=sys.stderr)
        return 1

    print(_table_to_json(table))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
