"""Data models for the migration workflow."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MigrationOutcome:
    """What happened to one repository of the input list.

    Attributes:
        repository: Repository identifier as read from the input.
        service_id: Resolved service ("" when not in the catalog).
        ticket_key: Created Jira issue key, None if no ticket was filed.
        notified: Whether the Slack notification was accepted.
        skipped: Whether the repository was skipped as unresolved.
        error: Notification error message, if any.
    """

    repository: str
    service_id: str
    ticket_key: str | None = None
    notified: bool = False
    skipped: bool = False
    error: str | None = None


@dataclass
class WorkflowReport:
    """Outcomes of a run, in input order."""

    outcomes: list[MigrationOutcome] = field(default_factory=list)

    @property
    def tickets_created(self) -> int:
        return sum(1 for o in self.outcomes if o.ticket_key is not None)

    @property
    def notifications_failed(self) -> int:
        return sum(1 for o in self.outcomes if o.ticket_key is not None and not o.notified)

    @property
    def skipped(self) -> int:
        return sum(1 for o in self.outcomes if o.skipped)

    def summary(self) -> str:
        """One-line summary of the run."""
        return (
            f"{self.tickets_created} ticket(s) created, "
            f"{self.notifications_failed} notification(s) failed, "
            f"{self.skipped} repository(ies) skipped"
        )
