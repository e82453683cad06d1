"""Version information for the service."""

import platform

MAJOR = "1"
MINOR = "0"
PATCH = "0"
COMMIT = "8bcf8fe7"
MILESTONE = "Alpha"

PACKAGE = "your-go-project-name"
REVISION = ""


def format_version(major, minor, patch, commit, milestone):
    """Return ``major.minor.patch.commit_milestone``."""
    return f"{major}.{minor}.{patch}.{commit}_{milestone}"


def python_version():
    """Return the running interpreter's version."""
    return platform.python_version()


VERSION = format_version(MAJOR, MINOR, PATCH, COMMIT, MILESTONE)