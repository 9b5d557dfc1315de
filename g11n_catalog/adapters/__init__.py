"""Catalog adapter variants."""

from g11n_catalog.adapters.file import CatalogFileAdapter, FileAdapterConfig, initialize
from g11n_catalog.adapters.memory import MemoryAdapter

__all__ = [
    "CatalogFileAdapter",
    "FileAdapterConfig",
    "MemoryAdapter",
    "initialize",
]
