"""Custom exceptions for the repository list reader."""


class RepoListError(Exception):
    """Base exception for repository list errors."""


class InputUnreadable(RepoListError):
    """Repository list file could not be opened or decoded."""


class InputMalformed(RepoListError):
    """Repository list file is not valid comma-separated data."""
