"""Service catalog - Loads services and indexes them by repository."""

from repomigrate.catalog.exceptions import (
    CatalogError,
    CatalogMalformed,
    CatalogUnavailable,
)
from repomigrate.catalog.index import RepositoryIndex
from repomigrate.catalog.loader import (
    fetch_catalog,
    load_catalog,
    load_catalog_file,
    parse_catalog,
)
from repomigrate.catalog.models import Service, SlackChannel, Team, User

__all__ = [
    "CatalogError",
    "CatalogMalformed",
    "CatalogUnavailable",
    "RepositoryIndex",
    "Service",
    "SlackChannel",
    "Team",
    "User",
    "fetch_catalog",
    "load_catalog",
    "load_catalog_file",
    "parse_catalog",
]
