"""Repository list - Reads the repositories to migrate from a CSV file."""

from repomigrate.repo_list.exceptions import InputMalformed, InputUnreadable, RepoListError
from repomigrate.repo_list.reader import read_repository_file

__all__ = [
    "InputMalformed",
    "InputUnreadable",
    "RepoListError",
    "read_repository_file",
]
