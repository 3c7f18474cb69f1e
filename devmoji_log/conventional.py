"""Conventional Commits header parsing.

Recognizes messages of the form:

    <type>(<scope>)!: <description>

    <body>

    <footers>

Anything that does not follow the grammar is reported as "not conventional"
by returning None, never by raising.
"""

import re
from dataclasses import dataclass
from typing import Optional


HEADER_PATTERN = re.compile(
    r"^(?P<type>[a-z][a-z0-9_-]*)"
    r"(?:\((?P<scope>[^()\r\n]*)\))?"
    r"(?P<breaking>!)?"
    r": (?P<description>.*\S.*)$"
)

# "token: value" or "token #value"; BREAKING CHANGE is the only token with a space
FOOTER_PATTERN = re.compile(r"^(?:BREAKING CHANGE|[\w-]+)(?:: | #)\S")

# Footer tokens that mark a breaking change
BREAKING_FOOTER_PATTERN = re.compile(r"^BREAKING[ -]CHANGE: \S")


@dataclass(frozen=True)
class ConventionalFields:
    """Structured fields extracted from a conventional commit header."""

    type: str
    scope: Optional[str]
    breaking: bool
    description: str


def _has_breaking_footer(body: str) -> bool:
    """Check the last paragraph of the body for a BREAKING CHANGE footer.

    The paragraph only counts as footers when every line in it is one.
    """
    paragraphs = [p for p in re.split(r"\n\s*\n", body.strip()) if p.strip()]
    if not paragraphs:
        return False

    lines = paragraphs[-1].splitlines()
    if not all(FOOTER_PATTERN.match(line) for line in lines):
        return False

    return any(BREAKING_FOOTER_PATTERN.match(line) for line in lines)


def parse_conventional(message: str) -> Optional[ConventionalFields]:
    """Parse a commit message as a conventional commit.

    Args:
        message: The full raw commit message.

    Returns:
        The extracted fields, or None if the message is not conventional.
    """
    lines = message.split("\n")
    header = lines[0].rstrip("\r")

    match = HEADER_PATTERN.match(header)
    if not match:
        return None

    rest = lines[1:]
    # Body must be separated from the header by a blank line
    if rest and rest[0].strip():
        return None

    scope = match.group("scope")
    if scope is not None:
        scope = scope.strip()
        if not scope:
            return None

    breaking = match.group("breaking") is not None
    if not breaking and rest:
        breaking = _has_breaking_footer("\n".join(rest))

    return ConventionalFields(
        type=match.group("type"),
        scope=scope,
        breaking=breaking,
        description=match.group("description").strip(),
    )
