"""Custom exceptions for the service catalog."""


class CatalogError(Exception):
    """Base exception for catalog errors."""


class CatalogUnavailable(CatalogError):
    """Catalog source could not be opened or fetched."""


class CatalogMalformed(CatalogError):
    """Catalog document does not have the expected shape."""
