"""Service layer for the BizHub listings engine."""

from .catalog import CatalogStatus, ListingCatalog

__all__ = ["CatalogStatus", "ListingCatalog"]
