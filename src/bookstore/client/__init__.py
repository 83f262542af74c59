"""Client side of the catalog: HTTP access and list/search view logic."""

from .catalog_client import CatalogClient
from .search_controller import Notification, SearchController

__all__ = ["CatalogClient", "Notification", "SearchController"]
