"""Static JSON catalog files.

A catalog file holds one JSON object mapping raw keys (optionally suffixed
with ``|context``) to a translation string, a list of plural forms, or an
object of plural forms::

    {
        "greeting": "hi",
        "greeting|formal": "hello",
        "apples": ["one apple", "{:count} apples"]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import TypeAdapter, ValidationError

from g11n_catalog.core.errors import CatalogLoadError

logger = logging.getLogger(__name__)

RawCatalog = dict[str, Union[str, list[str], dict[str, str]]]

_RAW_CATALOG = TypeAdapter(RawCatalog)


def read_json_catalog(path: Path) -> RawCatalog:
    """Load and validate a JSON catalog file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogLoadError(f"Unable to read catalog file: {path}", path) from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(
            f"Catalog file {path} contains invalid JSON at line {exc.lineno}: {exc.msg}",
            path,
        ) from exc

    try:
        data = _RAW_CATALOG.validate_python(payload)
    except ValidationError as exc:
        raise CatalogLoadError(
            f"Catalog file {path} must hold an object of translations: "
            f"{exc.error_count()} invalid value(s)",
            path,
        ) from exc

    logger.debug(f"Parsed {len(data)} raw keys from {path}")
    return data
