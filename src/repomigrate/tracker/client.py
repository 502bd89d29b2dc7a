"""JiraClient - Creates issues through the Jira REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from repomigrate.config import JiraConfig
from repomigrate.logging import sanitize_for_log, truncate_output
from repomigrate.tracker.exceptions import TicketCreationFailure
from repomigrate.tracker.models import TicketRequest, TicketResult

logger = logging.getLogger("repomigrate.tracker")


class JiraClient:
    """Client for the Jira REST API (v2).

    Authenticates with HTTP Basic auth using a user and API token.
    """

    def __init__(
        self,
        base_url: str,
        user: str,
        token: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Jira client.

        Args:
            base_url: Jira site URL (e.g. "https://example.atlassian.net/")
            user: Jira user (email for Jira Cloud)
            token: Jira API token or password
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.user = user
        self.token = token
        self.timeout = timeout
        self._client: httpx.Client | None = None

    @classmethod
    def from_config(cls, config: JiraConfig) -> JiraClient:
        """Create a client from the jira section of the configuration."""
        return cls(base_url=config.base_url, user=config.user, token=config.token)

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for the Jira API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                auth=(self.user, self.token),
                headers={
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def create_issue(self, request: TicketRequest) -> TicketResult:
        """Create an issue.

        Args:
            request: Summary, type, project and description of the issue

        Returns:
            TicketResult with the key assigned by Jira

        Raises:
            TicketCreationFailure: If the request fails or Jira rejects it
        """
        payload: dict[str, Any] = {
            "fields": {
                "project": {"key": request.project_key},
                "summary": request.summary,
                "description": request.description,
                "issuetype": {"name": request.issue_type},
            }
        }

        logger.debug(
            "Creating %s in project %s: %s",
            request.issue_type,
            request.project_key,
            request.summary,
        )
        try:
            response = self.client.post("/rest/api/2/issue", json=payload)
        except httpx.HTTPError as e:
            logger.error("Jira request failed: %s", e)
            raise TicketCreationFailure(f"Failed to reach Jira: {e}") from e

        if response.status_code not in (200, 201):
            body = truncate_output(sanitize_for_log(response.text))
            logger.error("Jira returned %d creating issue: %s", response.status_code, body)
            raise TicketCreationFailure(
                f"Failed to create issue '{request.summary}': {response.status_code} - {body}"
            )

        try:
            data = response.json()
            key = str(data["key"])
        except (ValueError, KeyError, TypeError) as e:
            body = truncate_output(sanitize_for_log(response.text))
            raise TicketCreationFailure(f"Unexpected Jira response: {body}") from e

        logger.info("Created issue %s", key)
        return TicketResult(
            summary=request.summary,
            issue_type=request.issue_type,
            project_key=request.project_key,
            description=request.description,
            key=key,
            id=str(data.get("id", "")),
        )
