"""Configuration loading for repomigrate.

Configuration lives in a YAML file (``config.yaml`` in the working directory
by default) and is loaded once at startup into an :class:`AppConfig` that is
passed explicitly to the components that need it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_FILE = "config.yaml"
DEFAULT_CATALOG_FILE = "services.json"
DEFAULT_ISSUE_TYPE = "Task"
DEFAULT_SLACK_API_URL = "https://slack.com/api"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


class NotifyTarget(str, Enum):
    """Which Slack channel receives the migration notification."""

    DEFAULT = "default"
    SERVICE = "service"


class UnresolvedPolicy(str, Enum):
    """What to do with a repository that is not in the catalog."""

    PASSTHROUGH = "passthrough"
    SKIP = "skip"
    FAIL = "fail"


@dataclass
class SlackConfig:
    """Slack credentials and destinations."""

    token: str
    default_channel: str
    base_url: str = DEFAULT_SLACK_API_URL


@dataclass
class JiraConfig:
    """Jira credentials and the project tickets are filed in."""

    user: str
    token: str
    base_url: str
    project_key: str
    issue_type: str = DEFAULT_ISSUE_TYPE

    def browse_url(self, key: str) -> str:
        """Return the browsable URL of an issue."""
        return f"{self.base_url.rstrip('/')}/browse/{key}"


@dataclass
class CatalogConfig:
    """Where the service catalog is read from.

    ``url`` takes precedence over ``path`` when both are set.
    """

    path: str = DEFAULT_CATALOG_FILE
    url: str | None = None


@dataclass
class WorkflowConfig:
    """Behaviour switches for the migration workflow."""

    notify: NotifyTarget = NotifyTarget.DEFAULT
    on_unresolved: UnresolvedPolicy = UnresolvedPolicy.PASSTHROUGH


@dataclass
class AppConfig:
    """repomigrate configuration."""

    slack: SlackConfig
    jira: JiraConfig
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    workflow: WorkflowConfig = field(default_factory=WorkflowConfig)
    root_path: Path = field(default_factory=Path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], root_path: Path) -> AppConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.
            root_path: Root directory containing the config file.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If required keys are missing or values are invalid.
        """
        required = {
            "slack": ["token", "defaultChannel"],
            "jira": ["user", "token", "baseurl", "projectKey"],
        }
        missing = []
        for section, keys in required.items():
            section_data = _section(data, section)
            missing.extend(f"{section}.{key}" for key in keys if not section_data.get(key))
        if missing:
            raise ConfigError(f"Missing required keys: {', '.join(missing)}")

        slack_data = _section(data, "slack")
        slack = SlackConfig(
            token=str(slack_data["token"]),
            default_channel=str(slack_data["defaultChannel"]),
            base_url=str(slack_data.get("baseurl", DEFAULT_SLACK_API_URL)),
        )

        jira_data = _section(data, "jira")
        jira = JiraConfig(
            user=str(jira_data["user"]),
            token=str(jira_data["token"]),
            base_url=str(jira_data["baseurl"]),
            project_key=str(jira_data["projectKey"]),
            issue_type=str(jira_data.get("issueType", DEFAULT_ISSUE_TYPE)),
        )

        catalog_data = _section(data, "catalog")
        catalog = CatalogConfig(
            path=str(catalog_data.get("path", DEFAULT_CATALOG_FILE)),
            url=catalog_data.get("url") or None,
        )

        workflow_data = _section(data, "workflow")
        workflow = WorkflowConfig(
            notify=_enum_value(
                NotifyTarget, workflow_data.get("notify", "default"), "workflow.notify"
            ),
            on_unresolved=_enum_value(
                UnresolvedPolicy,
                workflow_data.get("onUnresolved", "passthrough"),
                "workflow.onUnresolved",
            ),
        )

        return cls(
            slack=slack,
            jira=jira,
            catalog=catalog,
            workflow=workflow,
            root_path=root_path,
        )


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{name}' must be a mapping, got {type(section).__name__}")
    return section


def _enum_value(enum_cls: type[Enum], value: Any, key: str) -> Any:
    try:
        return enum_cls(str(value).lower())
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ConfigError(f"Invalid value '{value}' for {key} (allowed: {allowed})") from e


def load_config(config_path: Path | str | None = None) -> AppConfig:
    """Load repomigrate configuration from a YAML file.

    Args:
        config_path: Path to the config file. Defaults to REPOMIGRATE_CONFIG
                     or 'config.yaml' in the current directory.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    if config_path is None:
        config_path = os.environ.get("REPOMIGRATE_CONFIG", DEFAULT_CONFIG_FILE)
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read configuration file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return AppConfig.from_dict(data, config_path.parent)
