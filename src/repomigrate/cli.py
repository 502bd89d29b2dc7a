"""CLI entry point for repomigrate.

Reads a CSV list of repositories, resolves each one against the service
catalog, files a Jira migration ticket and announces it on Slack.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from repomigrate import __version__
from repomigrate.catalog import CatalogError, RepositoryIndex, load_catalog
from repomigrate.config import ConfigError, load_config
from repomigrate.logging import get_logger, setup_logging
from repomigrate.notifier import SlackNotifier
from repomigrate.repo_list import RepoListError, read_repository_file
from repomigrate.tracker import JiraClient
from repomigrate.workflow import MigrationWorkflow, WorkflowAborted

logger = get_logger("cli")


@click.command()
@click.version_option(version=__version__)
@click.option(
    "-file",
    "--file",
    "repo_file",
    required=True,
    type=click.Path(path_type=Path),
    help="CSV file listing repositories (first column only)",
)
def main(repo_file: Path) -> None:
    """File migration tickets for the repositories listed in FILE."""
    setup_logging()

    tracker: JiraClient | None = None
    notifier: SlackNotifier | None = None

    try:
        config = load_config()

        tracker = JiraClient.from_config(config.jira)
        notifier = SlackNotifier.from_config(config.slack)

        services = load_catalog(config.catalog, config.root_path)
        index = RepositoryIndex(services)
        click.echo(f"Loaded {len(services)} service(s), {len(index)} repositories indexed")

        repositories = read_repository_file(repo_file)
        click.echo(f"Processing {len(repositories)} repositories from {repo_file}")

        workflow = MigrationWorkflow(config, index, tracker, notifier)
        report = workflow.run(repositories)
        click.echo(f"Done: {report.summary()}")

    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except CatalogError as e:
        logger.error("Catalog error: %s", e)
        click.echo(f"Catalog error: {e}", err=True)
        sys.exit(1)
    except RepoListError as e:
        logger.error("Repository list error: %s", e)
        click.echo(f"Repository list error: {e}", err=True)
        sys.exit(1)
    except WorkflowAborted as e:
        logger.error("Migration aborted: %s", e)
        click.echo(f"Error: {e}", err=True)
        click.echo(f"Before aborting: {e.report.summary()}", err=True)
        sys.exit(1)
    finally:
        if tracker is not None:
            tracker.close()
        if notifier is not None:
            notifier.close()


if __name__ == "__main__":
    main()
