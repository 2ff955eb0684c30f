"""
Adapters package - External service connections.
HTTP clients for the catalog, favorites and orders endpoints.
"""

from adapters import catalog_adapter, favorites_adapter, http_adapter, orders_adapter
from adapters.catalog_adapter import CatalogClient
from adapters.favorites_adapter import FavoriteRegistryClient
from adapters.orders_adapter import OrderSubmissionClient

__all__ = [
    "catalog_adapter",
    "favorites_adapter",
    "http_adapter",
    "orders_adapter",
    "CatalogClient",
    "FavoriteRegistryClient",
    "OrderSubmissionClient",
]
