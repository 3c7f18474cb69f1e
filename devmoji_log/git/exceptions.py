"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NoRemoteError: Raised when the requested remote is not configured
"""

from devmoji_log.exceptions import DevmojiLogError


class GitError(DevmojiLogError):
    """Custom exception for git-related errors."""

    pass


class NoRemoteError(GitError):
    """Raised when the requested remote is not configured."""

    pass
