"""RepositoryIndex - Maps repository identifiers to the service owning them."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from repomigrate.catalog.models import Service

logger = logging.getLogger("repomigrate.catalog")


class RepositoryIndex:
    """Lookup from repository identifier to owning Service.

    Built once from the full catalog and read-only afterwards. When two
    services declare the same repository, the later one in catalog order
    owns it; every such collision is logged and kept in ``collisions``.
    """

    def __init__(self, services: Iterable[Service] = ()) -> None:
        """Build the index.

        Args:
            services: Catalog services, in catalog order.
        """
        self._lookup: dict[str, Service] = {}
        self.collisions: dict[str, list[str]] = {}

        for service in services:
            for repo in service.repository_urls:
                previous = self._lookup.get(repo)
                if previous is not None and previous is not service:
                    owners = self.collisions.setdefault(repo, [previous.service_id])
                    owners.append(service.service_id)
                    logger.warning(
                        "Repository %s declared by both %s and %s; using %s",
                        repo,
                        previous.service_id,
                        service.service_id,
                        service.service_id,
                    )
                self._lookup[repo] = service

        logger.debug("Indexed %d repositories", len(self._lookup))

    def __len__(self) -> int:
        return len(self._lookup)

    def __contains__(self, repo: object) -> bool:
        return repo in self._lookup

    def get(self, repo: str) -> Service | None:
        """Return the owning service, or None if the repository is unknown."""
        return self._lookup.get(repo)

    def resolve(self, repo: str) -> Service:
        """Return the owning service, or the empty placeholder if unknown."""
        service = self._lookup.get(repo)
        if service is None:
            return Service.empty()
        return service
