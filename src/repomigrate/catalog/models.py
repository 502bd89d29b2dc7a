"""Data models for the service catalog."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class User:
    """A catalog user."""

    email: str = ""
    slack_display_name: str = ""


@dataclass
class Team:
    """Team owning a service."""

    team_id: str = ""
    members: list[User] = field(default_factory=list)


@dataclass
class SlackChannel:
    """General Slack channel of a service."""

    channel_id: str = ""
    channel_name: str = ""


@dataclass
class Service:
    """A deployable unit and the repositories it owns.

    Attributes:
        service_id: Catalog identifier of the service.
        repository_urls: Repository identifiers owned by the service, in catalog order.
        issue_tracker_url: Issue tracker associated with the service.
        slack_channel: The service's general Slack channel.
        team: Owning team and its members.
    """

    service_id: str = ""
    repository_urls: list[str] = field(default_factory=list)
    issue_tracker_url: str = ""
    slack_channel: SlackChannel = field(default_factory=SlackChannel)
    team: Team = field(default_factory=Team)

    @classmethod
    def empty(cls) -> Service:
        """Zero-valued placeholder for a repository missing from the catalog."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.service_id
