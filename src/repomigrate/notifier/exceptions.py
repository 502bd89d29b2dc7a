"""Custom exceptions for the Slack notifier."""


class NotifierError(Exception):
    """Base exception for notifier errors."""


class NotificationFailure(NotifierError):
    """Slack did not accept the message."""
