"""Workflow - Per-repository migration ticket and notification loop."""

from repomigrate.workflow.driver import MigrationWorkflow
from repomigrate.workflow.exceptions import (
    UnresolvedRepositoryError,
    WorkflowAborted,
    WorkflowError,
)
from repomigrate.workflow.models import MigrationOutcome, WorkflowReport

__all__ = [
    "MigrationOutcome",
    "MigrationWorkflow",
    "UnresolvedRepositoryError",
    "WorkflowAborted",
    "WorkflowError",
    "WorkflowReport",
]
