"""MigrationWorkflow - Files a ticket and notifies Slack for each repository."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from repomigrate.config import NotifyTarget, UnresolvedPolicy
from repomigrate.notifier import NotificationFailure, NotificationMessage
from repomigrate.tracker import TicketCreationFailure, TicketRequest
from repomigrate.workflow.exceptions import UnresolvedRepositoryError, WorkflowAborted
from repomigrate.workflow.models import MigrationOutcome, WorkflowReport

if TYPE_CHECKING:
    from repomigrate.catalog import RepositoryIndex, Service
    from repomigrate.config import AppConfig
    from repomigrate.notifier import SlackNotifier
    from repomigrate.tracker import JiraClient, TicketResult

logger = logging.getLogger("repomigrate.workflow")

SUMMARY_PREFIX = "Migration: "
DESCRIPTION_PREFIX = "Code Repository: "


class MigrationWorkflow:
    """Drives the per-repository migration loop.

    Repositories are processed one at a time, in input order:
    - Resolve the owning service in the repository index
    - File a Jira ticket for it
    - Post a Slack notification linking the ticket

    A ticket failure stops the batch; tickets and notifications already
    sent are not rolled back. A notification failure is logged and the
    batch continues.
    """

    def __init__(
        self,
        config: AppConfig,
        index: RepositoryIndex,
        tracker: JiraClient,
        notifier: SlackNotifier,
    ) -> None:
        """Initialize the workflow.

        Args:
            config: Loaded application configuration.
            index: Repository index built from the service catalog.
            tracker: Client used to create Jira issues.
            notifier: Client used to post Slack messages.
        """
        self.config = config
        self.index = index
        self.tracker = tracker
        self.notifier = notifier

    def run(self, repositories: Iterable[str]) -> WorkflowReport:
        """Process every repository in order.

        Args:
            repositories: Repository identifiers from the input file.

        Returns:
            WorkflowReport with one outcome per processed repository.

        Raises:
            WorkflowAborted: If a ticket cannot be created, or a repository is
                unresolved under the ``fail`` policy. ``report`` holds the
                outcomes completed before the failure.
        """
        report = WorkflowReport()

        for repo in repositories:
            try:
                outcome = self.process_repository(repo)
            except (TicketCreationFailure, UnresolvedRepositoryError) as e:
                logger.error("Aborting migration batch at %s: %s", repo, e)
                raise WorkflowAborted(
                    f"Migration aborted at repository '{repo}': {e}", report
                ) from e
            report.outcomes.append(outcome)

        logger.info("Migration batch finished: %s", report.summary())
        return report

    def process_repository(self, repo: str) -> MigrationOutcome:
        """Resolve, file and notify for a single repository.

        Args:
            repo: Repository identifier.

        Returns:
            MigrationOutcome for the repository.

        Raises:
            UnresolvedRepositoryError: If unresolved and the policy is ``fail``.
            TicketCreationFailure: If Jira does not create the issue.
        """
        service = self.index.get(repo)
        if service is None:
            service = self._handle_unresolved(repo)
            if service is None:
                return MigrationOutcome(repository=repo, service_id="", skipped=True)

        ticket = self.tracker.create_issue(self.build_ticket_request(repo, service))
        logger.info("Created ticket: %s", ticket.key)

        outcome = MigrationOutcome(
            repository=repo,
            service_id=service.service_id,
            ticket_key=ticket.key,
        )

        message = self.build_notification(service, ticket)
        try:
            self.notifier.send(message)
            outcome.notified = True
        except NotificationFailure as e:
            logger.error(
                "Notification for ticket %s to %s failed: %s", ticket.key, message.channel, e
            )
            outcome.error = str(e)

        return outcome

    def _handle_unresolved(self, repo: str) -> Service | None:
        """Apply the unresolved-repository policy.

        Returns the placeholder service to continue with, or None to skip.
        """
        policy = self.config.workflow.on_unresolved
        if policy == UnresolvedPolicy.FAIL:
            raise UnresolvedRepositoryError(repo)
        if policy == UnresolvedPolicy.SKIP:
            logger.warning("Repository %r not found in service catalog; skipping", repo)
            return None
        logger.warning(
            "Repository %r not found in service catalog; filing ticket without a service", repo
        )
        return self.index.resolve(repo)

    def build_ticket_request(self, repo: str, service: Service) -> TicketRequest:
        """Build the Jira issue for a repository."""
        return TicketRequest(
            summary=f"{SUMMARY_PREFIX}{service.service_id}",
            issue_type=self.config.jira.issue_type,
            project_key=self.config.jira.project_key,
            description=f"{DESCRIPTION_PREFIX}{repo}",
        )

    def build_notification(self, service: Service, ticket: TicketResult) -> NotificationMessage:
        """Build the Slack message announcing a created ticket."""
        text = (
            f"Migration request for: {service.service_id}\n"
            f"Jira ticket: {self.config.jira.browse_url(ticket.key)}"
        )
        return NotificationMessage(channel=self.select_channel(service), text=text)

    def select_channel(self, service: Service) -> str:
        """Pick the destination channel for a service's notification."""
        default_channel = self.config.slack.default_channel
        if self.config.workflow.notify == NotifyTarget.SERVICE:
            return service.slack_channel.channel_id or default_channel
        return default_channel
