"""Unit tests for repomigrate logging configuration."""

import logging
from pathlib import Path

import pytest

from repomigrate.logging import get_logger, sanitize_for_log, setup_logging, truncate_output


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging as the CLI calls it."""

    def test_component_records_reach_log_file(self, tmp_path: Path) -> None:
        """Records from component loggers land in repomigrate.log."""
        setup_logging(log_dir=tmp_path, console=False)
        logging.getLogger("repomigrate.tracker").info("Created issue MIG-7")

        content = (tmp_path / "repomigrate.log").read_text()
        assert " | INFO     | repomigrate.tracker | Created issue MIG-7" in content

    def test_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """REPOMIGRATE_LOG_DIR and REPOMIGRATE_LOG_LEVEL apply when no arguments are given."""
        monkeypatch.setenv("REPOMIGRATE_LOG_DIR", str(tmp_path))
        monkeypatch.setenv("REPOMIGRATE_LOG_LEVEL", "WARNING")

        logger = setup_logging(console=False)
        logger.info("dropped")
        logger.warning("kept")

        content = (tmp_path / "repomigrate.log").read_text()
        assert logger.level == logging.WARNING
        assert "dropped" not in content
        assert "kept" in content

    def test_repeated_setup_keeps_one_handler(self, tmp_path: Path) -> None:
        setup_logging(log_dir=tmp_path, console=False)
        setup_logging(log_dir=tmp_path, console=False)

        assert len(logging.getLogger("repomigrate").handlers) == 1


@pytest.mark.unit
def test_get_logger_prefixes_package() -> None:
    assert get_logger("cli").name == "repomigrate.cli"


@pytest.mark.unit
class TestErrorBodyScrubbing:
    """Tests for the helpers applied to HTTP error bodies before logging."""

    def test_truncates_long_body(self) -> None:
        result = truncate_output("x" * 200, max_length=100)

        assert result.startswith("x" * 100)
        assert "100 more chars" in result

    @pytest.mark.parametrize(
        ("text", "secret", "replacement"),
        [
            ('{"error": "invalid_auth", "token": "xoxb-1234-abcd"}', "xoxb-1234", "[SLACK_TOKEN]"),
            ("Authorization: Bearer abc123.def456", "abc123", "Bearer [REDACTED]"),
            ("Authorization: Basic dXNlcjpzZWNyZXQ=", "dXNlcjpzZWNyZXQ=", "Basic [REDACTED]"),
        ],
    )
    def test_redacts_credentials(self, text: str, secret: str, replacement: str) -> None:
        result = sanitize_for_log(text)

        assert secret not in result
        assert replacement in result
