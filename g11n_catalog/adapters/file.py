"""File-backed catalog adapter reading static catalog files from a directory.

The adapter works with the directory layout below, rooted at the configured
``path``::

    resources/g11n/json
    ├── <locale>
    |   ├── message
    |   |   ├── default.json
    |   |   └── <scope>.json
    |   ├── validation
    |   |   └── ...
    |   └── ...
    ├── message_default.json
    ├── message_<scope>.json
    ├── validation_default.json
    └── ...

Files directly under the root serve ``*Template`` categories for every locale.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from g11n_catalog.core.errors import ConfigurationError
from g11n_catalog.core.ports import CatalogAdapter, CatalogReader
from g11n_catalog.core.types import CatalogEntry, CatalogTable, split_key
from g11n_catalog.data.json_source import read_json_catalog
from g11n_catalog.data.layout import CatalogLayout

logger = logging.getLogger(__name__)


class FileAdapterConfig(BaseModel):
    """Options for :class:`CatalogFileAdapter`."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Optional[Path] = None

    @field_validator("path", mode="before")
    @classmethod
    def validate_path(cls, v: Any) -> Any:
        """Treat an empty path as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


def copy_translated(translated: Any) -> Any:
    """Detach a translated value from the caller's containers."""
    if isinstance(translated, (list, tuple)):
        return tuple(translated)
    if isinstance(translated, Mapping):
        return dict(translated)
    return translated


def build_table(data: Mapping[str, Any]) -> CatalogTable:
    """Split raw keys and merge their values into a new table, in order."""
    table = CatalogTable()
    for raw_key, translated in data.items():
        id_, context = split_key(raw_key)
        table.merge(
            CatalogEntry(id=id_, context=context, translated=copy_translated(translated))
        )
    return table


class CatalogFileAdapter(CatalogAdapter):
    """Read catalogs from ``<path>/<locale>/<category>/<scope>`` files."""

    extension = ".json"

    def __init__(
        self,
        config: FileAdapterConfig | Mapping[str, Any] | None = None,
        *,
        read_catalog: Optional[CatalogReader] = None,
    ) -> None:
        if config is None:
            config = FileAdapterConfig()
        elif not isinstance(config, FileAdapterConfig):
            config = FileAdapterConfig(**config)
        self.config = config
        self._read_catalog = read_catalog if read_catalog is not None else read_json_catalog
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Check that the configured path is an existing directory.

        Raises:
            ConfigurationError: If the directory does not exist
        """
        if self._initialized:
            return
        path = self.config.path
        if path is None or not path.is_dir():
            raise ConfigurationError(
                f"Catalog directory does not exist at path `{path}`.", path
            )
        self._layout = CatalogLayout(path, self.extension)
        self._initialized = True
        logger.info(f"Catalog adapter initialized at {path}")

    def resolve_file_path(
        self, category: str, locale: str, scope: Optional[str] = None
    ) -> Path:
        """
        Resolve the catalog file for a category, locale and scope.

        Raises:
            ConfigurationError: If no directory is configured
        """
        path = self.config.path
        if path is None:
            raise ConfigurationError(
                f"Catalog directory does not exist at path `{path}`.", path
            )
        return CatalogLayout(path, self.extension).path_for(category, locale, scope)

    def read(self, category: str, locale: str, scope: Optional[str] = None) -> CatalogTable:
        """
        Read the catalog for a category, locale and scope.

        A missing file yields an empty table.

        Raises:
            ConfigurationError: If the adapter cannot be initialized
            CatalogLoadError: If the file exists but is unreadable or malformed
        """
        self.initialize()
        path = self._layout.path_for(category, locale, scope)
        if not path.is_file():
            logger.debug(f"No catalog at {path}, returning empty table")
            return CatalogTable()

        table = build_table(self._read_catalog(path))
        logger.info(f"Loaded {len(table)} entries from {path}")
        return table


def initialize(
    config: FileAdapterConfig | Mapping[str, Any] | None = None,
    *,
    read_catalog: Optional[CatalogReader] = None,
) -> CatalogFileAdapter:
    """Build a file adapter and validate its directory."""
    adapter = CatalogFileAdapter(config, read_catalog=read_catalog)
    adapter.initialize()
    return adapter
