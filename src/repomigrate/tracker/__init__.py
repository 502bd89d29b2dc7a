"""Tracker - Files migration tickets in Jira."""

from repomigrate.tracker.client import JiraClient
from repomigrate.tracker.exceptions import TicketCreationFailure, TrackerError
from repomigrate.tracker.models import TicketRequest, TicketResult

__all__ = [
    "JiraClient",
    "TicketCreationFailure",
    "TicketRequest",
    "TicketResult",
    "TrackerError",
]
