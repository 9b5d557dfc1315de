"""Pure core contracts for catalog adapters."""

from g11n_catalog.core.errors import CatalogError, CatalogLoadError, ConfigurationError
from g11n_catalog.core.types import CatalogEntry, CatalogTable, split_key

__all__ = [
    "CatalogError",
    "CatalogLoadError",
    "ConfigurationError",
    "CatalogEntry",
    "CatalogTable",
    "split_key",
]
