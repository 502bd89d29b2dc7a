"""Catalog loader - Reads the service catalog from a file or HTTP endpoint.

The catalog is a GraphQL-style document::

    {"data": {"services": {"nodes": [{"serviceId": ..., "repositoryUrls": [...], ...}]}}}

It is validated with pydantic and converted into :class:`Service` records.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from repomigrate.catalog.exceptions import CatalogMalformed, CatalogUnavailable
from repomigrate.catalog.models import Service, SlackChannel, Team, User
from repomigrate.config import CatalogConfig
from repomigrate.logging import sanitize_for_log, truncate_output

logger = logging.getLogger("repomigrate.catalog")


# Wire models


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class UserDocument(_Document):
    email: str | None = None
    slack_display_name: str | None = Field(default=None, alias="slackDisplayName")


class TeamMemberDocument(_Document):
    user: UserDocument | None = None


class TeamDocument(_Document):
    team_id: str | None = Field(default=None, alias="teamId")
    team_members: list[TeamMemberDocument] | None = Field(default=None, alias="teamMembers")


class SlackChannelDocument(_Document):
    channel_id: str | None = Field(default=None, alias="channelId")
    channel_name: str | None = Field(default=None, alias="channelName")


class ServiceDocument(_Document):
    service_id: str | None = Field(default=None, alias="serviceId")
    repository_urls: list[str] | None = Field(default=None, alias="repositoryUrls")
    issue_tracker_url: str | None = Field(default=None, alias="issueTrackerUrl")
    slack_general_channel: SlackChannelDocument | None = Field(
        default=None, alias="slackGeneralChannel"
    )
    team: TeamDocument | None = None

    def to_service(self) -> Service:
        channel = self.slack_general_channel or SlackChannelDocument()
        team = self.team or TeamDocument()
        members = [
            User(
                email=member.user.email or "",
                slack_display_name=member.user.slack_display_name or "",
            )
            for member in team.team_members or []
            if member.user is not None
        ]
        return Service(
            service_id=self.service_id or "",
            repository_urls=list(self.repository_urls or []),
            issue_tracker_url=self.issue_tracker_url or "",
            slack_channel=SlackChannel(
                channel_id=channel.channel_id or "",
                channel_name=channel.channel_name or "",
            ),
            team=Team(team_id=team.team_id or "", members=members),
        )


class ServiceNodesDocument(_Document):
    nodes: list[ServiceDocument]


class CatalogDataDocument(_Document):
    services: ServiceNodesDocument


class CatalogDocument(_Document):
    data: CatalogDataDocument


def parse_catalog(raw: str | bytes, source: str = "<catalog>") -> list[Service]:
    """Parse a catalog document into services, preserving catalog order.

    Args:
        raw: JSON text of the catalog document.
        source: Name of the source, used in error messages.

    Returns:
        List of Service records.

    Raises:
        CatalogMalformed: If the document is not JSON or has the wrong shape.
    """
    try:
        document = CatalogDocument.model_validate_json(raw)
    except ValidationError as e:
        raise CatalogMalformed(f"Malformed catalog document from {source}: {e}") from e

    return [node.to_service() for node in document.data.services.nodes]


def load_catalog_file(path: str | Path) -> list[Service]:
    """Load the catalog from a local JSON file.

    Args:
        path: Path to the catalog file.

    Returns:
        List of Service records.

    Raises:
        CatalogUnavailable: If the file cannot be read.
        CatalogMalformed: If the file content is not a valid catalog.
    """
    path = Path(path)
    logger.debug("Reading service catalog from %s", path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.error("Cannot read service catalog %s: %s", path, e)
        raise CatalogUnavailable(f"Cannot read service catalog '{path}': {e}") from e

    services = parse_catalog(raw, source=str(path))
    logger.info("Loaded %d service(s) from %s", len(services), path)
    return services


def fetch_catalog(
    url: str,
    client: httpx.Client | None = None,
    timeout: float = 30.0,
) -> list[Service]:
    """Fetch the catalog from an HTTP endpoint serving the same document.

    Args:
        url: Catalog endpoint URL.
        client: HTTP client to use (a short-lived one is created if omitted).
        timeout: Request timeout in seconds for a created client.

    Returns:
        List of Service records.

    Raises:
        CatalogUnavailable: If the request fails or returns a non-2xx status.
        CatalogMalformed: If the response is not a valid catalog.
    """
    logger.debug("Fetching service catalog from %s", url)
    owns_client = client is None
    http = client if client is not None else httpx.Client(timeout=timeout)
    try:
        response = http.get(url)
    except httpx.HTTPError as e:
        logger.error("Cannot fetch service catalog from %s: %s", url, e)
        raise CatalogUnavailable(f"Cannot fetch service catalog from '{url}': {e}") from e
    finally:
        if owns_client:
            http.close()

    if not 200 <= response.status_code < 300:
        body = truncate_output(sanitize_for_log(response.text))
        logger.error("Catalog endpoint returned %d: %s", response.status_code, body)
        raise CatalogUnavailable(
            f"Catalog endpoint '{url}' returned {response.status_code}: {body}"
        )

    services = parse_catalog(response.content, source=url)
    logger.info("Fetched %d service(s) from %s", len(services), url)
    return services


def load_catalog(config: CatalogConfig, root_path: Path | None = None) -> list[Service]:
    """Load the catalog from the source selected by configuration.

    Args:
        config: Catalog configuration; ``url`` wins over ``path``.
        root_path: Directory relative catalog paths are resolved against.

    Returns:
        List of Service records.
    """
    if config.url:
        return fetch_catalog(config.url)
    path = Path(config.path)
    if root_path is not None and not path.is_absolute():
        path = root_path / path
    return load_catalog_file(path)
