"""Commit history retrieval.

Contains:
- get_last_commits: Get the most recent commits as CommitRecord objects
- _parse_log_output: Parse the field-separated output of git log
"""

import logging
from datetime import datetime

from pydantic import ValidationError

from devmoji_log.git.exceptions import GitError
from devmoji_log.git.remote import get_remote_url, normalize_remote_url
from devmoji_log.git.runner import _run_git_command
from devmoji_log.models import CommitRecord


logger = logging.getLogger(__name__)

FIELD_SEP = "\x1f"
RECORD_SEP = "\x1e"

# Short hash, strict ISO committer date (with offset), raw message
LOG_FORMAT = "%h%x1f%cI%x1f%B%x1e"


def _parse_log_output(output: str, url: str) -> list[CommitRecord]:
    """Parse the output of ``git log --format=LOG_FORMAT``.

    Args:
        output: Raw git log output.
        url: Web URL of the repository for commit links.

    Returns:
        Commits in the order git printed them.
    """
    commits = []

    for record in output.split(RECORD_SEP):
        record = record.lstrip("\n")
        if not record.strip():
            continue

        fields = record.split(FIELD_SEP, 2)
        if len(fields) != 3:
            logger.debug("Skipping malformed git log record: %r", record)
            continue

        short_id, date, message = fields
        try:
            commits.append(CommitRecord(
                id=short_id,
                message=message.rstrip("\n"),
                timestamp=datetime.fromisoformat(date.strip()),
                url=url,
            ))
        except (ValueError, ValidationError) as e:
            logger.debug("Skipping commit %s: %s", short_id, e)

    return commits


def get_last_commits(n: int = 5, remote: str = "origin") -> list[CommitRecord]:
    """Get the last n commits of the current repository, most recent first.

    Any git failure (not a repository, missing remote, empty history) is
    treated as having no commits.

    Args:
        n: Number of commits to retrieve.
        remote: Remote whose URL is used to build commit links.

    Returns:
        List of commits, possibly empty.
    """
    try:
        url = normalize_remote_url(get_remote_url(remote))
        output = _run_git_command(
            ["log", f"-n{n}", f"--format={LOG_FORMAT}"], strip=False
        )
    except GitError as e:
        logger.debug("No commits available: %s", e)
        return []

    if not output.strip():
        return []
    return _parse_log_output(output, url)
