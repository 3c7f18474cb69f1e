"""Git commit source for devmoji-log.

This package provides modular git access with:
- exceptions: GitError, NoRemoteError
- runner: _run_git_command
- remote: get_remote_url, normalize_remote_url
- log: get_last_commits, _parse_log_output
"""

# Exceptions
from devmoji_log.git.exceptions import (
    GitError,
    NoRemoteError,
)

# Runner utilities
from devmoji_log.git.runner import (
    _run_git_command,
)

# Remote utilities
from devmoji_log.git.remote import (
    get_remote_url,
    normalize_remote_url,
)

# Commit history
from devmoji_log.git.log import (
    LOG_FORMAT,
    _parse_log_output,
    get_last_commits,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoRemoteError",
    # Runner
    "_run_git_command",
    # Remote
    "get_remote_url",
    "normalize_remote_url",
    # Log
    "LOG_FORMAT",
    "_parse_log_output",
    "get_last_commits",
]
