"""Reads repository identifiers from a comma-separated file."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from repomigrate.repo_list.exceptions import InputMalformed, InputUnreadable

logger = logging.getLogger("repomigrate.repo_list")


def read_repository_file(path: str | Path) -> list[str]:
    """Return the first field of every row, in file order.

    There is no header row. Blank lines are skipped; a row whose first
    field is empty yields an empty string.

    Args:
        path: Path to the CSV file.

    Returns:
        Repository identifiers in row order.

    Raises:
        InputUnreadable: If the file cannot be opened or decoded.
        InputMalformed: If the file is not valid CSV (e.g. an unterminated quote).
    """
    path = Path(path)
    repositories: list[str] = []

    try:
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.reader(f, delimiter=",", strict=True)
            for row in reader:
                if not row:
                    continue
                repositories.append(row[0])
    except csv.Error as e:
        logger.error("Malformed repository list %s: %s", path, e)
        raise InputMalformed(f"Malformed repository list '{path}': {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read repository list %s: %s", path, e)
        raise InputUnreadable(f"Cannot read repository list '{path}': {e}") from e

    logger.info("Read %d repositories from %s", len(repositories), path)
    return repositories
