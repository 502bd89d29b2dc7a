"""Data models for the Slack notifier."""

from dataclasses import dataclass


@dataclass
class NotificationMessage:
    """Text message addressed to a Slack channel."""

    channel: str
    text: str


@dataclass
class PostedMessage:
    """Slack's confirmation of a posted message."""

    channel: str
    ts: str
