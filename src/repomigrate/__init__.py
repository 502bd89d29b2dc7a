"""repomigrate - File migration tickets for repositories listed in a CSV."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the package version."""
    return __version__
