"""Localized message catalogs loaded from static files."""

from g11n_catalog.adapters import CatalogFileAdapter, FileAdapterConfig, MemoryAdapter, initialize
from g11n_catalog.core import (
    CatalogEntry,
    CatalogError,
    CatalogLoadError,
    CatalogTable,
    ConfigurationError,
    split_key,
)

__all__ = [
    "CatalogEntry",
    "CatalogError",
    "CatalogFileAdapter",
    "CatalogLoadError",
    "CatalogTable",
    "ConfigurationError",
    "FileAdapterConfig",
    "MemoryAdapter",
    "initialize",
    "split_key",
]
