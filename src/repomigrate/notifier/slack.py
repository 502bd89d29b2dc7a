"""SlackNotifier - Posts messages through the Slack Web API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from repomigrate.config import DEFAULT_SLACK_API_URL, SlackConfig
from repomigrate.logging import sanitize_for_log, truncate_output
from repomigrate.notifier.exceptions import NotificationFailure
from repomigrate.notifier.models import NotificationMessage, PostedMessage

logger = logging.getLogger("repomigrate.notifier")


class SlackNotifier:
    """Client for Slack's chat.postMessage method.

    Slack reports most failures with HTTP 200 and ``"ok": false``, so both
    the status code and the ``ok`` flag are checked.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_SLACK_API_URL,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Slack notifier.

        Args:
            token: Slack bot token (xoxb-...)
            base_url: Slack Web API URL (for testing)
            timeout: Request timeout in seconds
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.Client | None = None

    @classmethod
    def from_config(cls, config: SlackConfig) -> SlackNotifier:
        """Create a notifier from the slack section of the configuration."""
        return cls(token=config.token, base_url=config.base_url)

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for the Slack Web API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Content-Type": "application/json; charset=utf-8",
                },
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def send(self, message: NotificationMessage) -> PostedMessage:
        """Post a text message to a channel.

        Args:
            message: Destination channel and text

        Returns:
            PostedMessage with the channel id and message timestamp

        Raises:
            NotificationFailure: If the request fails or Slack rejects the message
        """
        payload: dict[str, Any] = {"channel": message.channel, "text": message.text}

        try:
            response = self.client.post("/chat.postMessage", json=payload)
        except httpx.HTTPError as e:
            logger.error("Slack request failed: %s", e)
            raise NotificationFailure(f"Failed to reach Slack: {e}") from e

        if response.status_code != 200:
            body = truncate_output(sanitize_for_log(response.text))
            raise NotificationFailure(
                f"Failed to post to {message.channel}: {response.status_code} - {body}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise NotificationFailure(f"Unexpected Slack response: {response.text}") from e
        if not isinstance(data, dict):
            body = truncate_output(sanitize_for_log(response.text))
            raise NotificationFailure(f"Unexpected Slack response: {body}")

        if not data.get("ok"):
            raise NotificationFailure(
                f"Slack rejected message to {message.channel}: {data.get('error', 'unknown_error')}"
            )

        posted = PostedMessage(channel=str(data.get("channel", "")), ts=str(data.get("ts", "")))
        logger.info("Message successfully sent to channel %s at %s", posted.channel, posted.ts)
        return posted
