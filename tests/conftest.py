"""Shared pytest fixtures and configuration."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from repomigrate.config import AppConfig, JiraConfig, SlackConfig


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


def service_node(service_id: str, repos: list[str], channel_id: str = "") -> dict[str, Any]:
    """Build one catalog node in wire format."""
    return {
        "serviceId": service_id,
        "repositoryUrls": repos,
        "issueTrackerUrl": f"https://tracker.example.com/{service_id}",
        "slackGeneralChannel": {"channelId": channel_id, "channelName": f"#{service_id}"},
        "team": {
            "teamId": f"team-{service_id}",
            "teamMembers": [
                {"user": {"email": "dev@example.com", "slackDisplayName": "dev"}},
            ],
        },
    }


def catalog_document(*nodes: dict[str, Any]) -> dict[str, Any]:
    """Wrap catalog nodes in the catalog document envelope."""
    return {"data": {"services": {"nodes": list(nodes)}}}


@pytest.fixture
def make_node() -> Callable[..., dict[str, Any]]:
    """Factory for catalog nodes in wire format."""
    return service_node


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a catalog document with the given nodes."""

    def _write(*nodes: dict[str, Any], name: str = "services.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(catalog_document(*nodes)))
        return path

    return _write


@pytest.fixture
def catalog_file(write_catalog: Callable[..., Path]) -> Path:
    """Catalog file with two services."""
    return write_catalog(
        service_node("svc1", ["repoA", "repoB"], channel_id="C_SVC1"),
        service_node("svc2", ["repoC"]),
    )


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    """Application config with default workflow settings."""
    return AppConfig(
        slack=SlackConfig(token="xoxb-test", default_channel="C_DEFAULT"),
        jira=JiraConfig(
            user="bot@example.com",
            token="jira-token",
            base_url="https://jira.example.com/",
            project_key="MIG",
        ),
        root_path=tmp_path,
    )
