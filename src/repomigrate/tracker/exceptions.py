"""Custom exceptions for the Jira tracker client."""


class TrackerError(Exception):
    """Base exception for tracker errors."""


class TicketCreationFailure(TrackerError):
    """Jira refused or failed to create an issue."""
