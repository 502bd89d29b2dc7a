"""Notifier - Posts migration notifications to Slack."""

from repomigrate.notifier.exceptions import NotificationFailure, NotifierError
from repomigrate.notifier.models import NotificationMessage, PostedMessage
from repomigrate.notifier.slack import SlackNotifier

__all__ = [
    "NotificationFailure",
    "NotificationMessage",
    "NotifierError",
    "PostedMessage",
    "SlackNotifier",
]
