"""Data models for devmoji-log.

Contains:
- CommitRecord: Immutable pydantic model for a single commit in the activity feed
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator


class CommitRecord(BaseModel):
    """A commit as supplied by the commit source.

    Attributes:
        id: Abbreviated commit hash.
        message: Full raw commit message (may span multiple lines).
        timestamp: Commit time with its fixed UTC offset.
        url: Web URL of the repository, used to build commit links.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    message: str
    timestamp: datetime
    url: str = ""

    @field_validator("id")
    @classmethod
    def id_must_not_be_empty(cls, v: str) -> str:
        """Ensure the commit id is not empty."""
        if not v or not v.strip():
            raise ValueError("Commit id cannot be empty")
        return v.strip()

    @field_validator("timestamp")
    @classmethod
    def timestamp_must_be_aware(cls, v: datetime) -> datetime:
        """Ensure the timestamp carries a UTC offset."""
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError("Commit timestamp must carry a UTC offset")
        return v

    def commit_url(self) -> str:
        """Get the web URL of this commit.

        Returns:
            The repository URL followed by /commit/<id>.
        """
        return f"{self.url}/commit/{self.id}"
