"""Exceptions for the migration workflow."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from repomigrate.workflow.models import WorkflowReport


class WorkflowError(Exception):
    """Base exception for workflow errors."""


class UnresolvedRepositoryError(WorkflowError):
    """Repository is not in the catalog and the policy is to fail."""

    def __init__(self, repository: str) -> None:
        super().__init__(f"Repository '{repository}' not found in service catalog")
        self.repository = repository


class WorkflowAborted(WorkflowError):
    """The batch stopped before every repository was processed.

    Attributes:
        report: Outcomes of the repositories processed before the failure.
    """

    def __init__(self, message: str, report: WorkflowReport) -> None:
        super().__init__(message)
        self.report = report
