"""Data models for the Jira tracker client."""

from dataclasses import dataclass


@dataclass
class TicketRequest:
    """Issue to be created in Jira."""

    summary: str
    issue_type: str
    project_key: str
    description: str


@dataclass
class TicketResult:
    """Issue created in Jira.

    Attributes:
        key: Issue key assigned by Jira (e.g. "MIG-42").
        id: Jira's internal issue id.
    """

    summary: str
    issue_type: str
    project_key: str
    description: str
    key: str
    id: str = ""
