"""Commit line formatting and rendering."""

from datetime import datetime
from typing import Iterable, Iterator, Optional

import typer

from devmoji_log.conventional import ConventionalFields, parse_conventional
from devmoji_log.devmoji import ShortcodeRegistry, resolve_emoji
from devmoji_log.models import CommitRecord
from devmoji_log.timeago import time_ago_suffix


ACTIVITY_HEADING = "  ## Recent Activity"


def render_link(url: str, text: str, color: bool = True) -> str:
    """Emit an OSC-8 hyperlink escape sequence.

    Args:
        url: Link target.
        text: Visible link text.
        color: Whether to color the link text cyan.

    Returns:
        The text wrapped in a terminal hyperlink.
    """
    link = f"\x1b]8;;{url}\x1b\\{text}\x1b]8;;\x1b\\"
    if color:
        return typer.style(link, fg=typer.colors.CYAN)
    return link


def render_header(fields: ConventionalFields, color: bool = True) -> str:
    """Render the "type(scope)!:" header, with the scope emphasized."""
    header = fields.type

    if fields.scope:
        scope = typer.style(fields.scope, bold=True) if color else fields.scope
        header += f"({scope})"

    if fields.breaking:
        header += "!"

    header += ":"
    return typer.style(header, fg=typer.colors.BLUE) if color else header


def first_line(text: str) -> str:
    """Return the first line of the stripped text, itself stripped."""
    return text.strip().split("\n")[0].rstrip("\r").strip()


def format_commit_line(
    commit: CommitRecord,
    now: datetime,
    registry: Optional[ShortcodeRegistry] = None,
    color: bool = True,
) -> str:
    """Format a commit as a single activity line.

    Conventional commits with at least one emoji are rendered as
    "<header> <emoji> <description>"; all other messages are kept verbatim.
    The time suffix is appended before the text is cut to its first line.

    Args:
        commit: The commit to format.
        now: Reference instant for the relative time.
        registry: Shortcode registry for combined and free-text lookups.
        color: Whether to emit ANSI emphasis.

    Returns:
        The finished single-line string.

    Raises:
        SpanError: If the relative time cannot be computed.
    """
    formatted = commit.message

    fields = parse_conventional(commit.message)
    if fields is not None:
        emoji = resolve_emoji(
            fields.type,
            scope=fields.scope,
            breaking=fields.breaking,
            description=fields.description,
            registry=registry,
        )
        if emoji:
            formatted = f"{render_header(fields, color)} {emoji} {fields.description}"

    formatted += time_ago_suffix(commit.timestamp, now)

    return first_line(formatted)


def render_activity(
    commits: Iterable[CommitRecord],
    now: datetime,
    registry: Optional[ShortcodeRegistry] = None,
    color: bool = True,
) -> Iterator[str]:
    """Render the full "Recent Activity" block line by line.

    Args:
        commits: Commits in display order (most recent first).
        now: Reference instant for the relative times.
        registry: Shortcode registry for emoji lookups.
        color: Whether to emit ANSI emphasis.

    Yields:
        Output lines; nothing at all if there are no commits.

    Example output:

          ## Recent Activity

          * 1a2b3c4 feat(api): ✨ add pagination (2 days, 3 hours ago)
          * 5d6e7f8 Merge pull request #1 (1 month ago)

    Raises:
        SpanError: If any commit's relative time cannot be computed.
    """
    commits = list(commits)
    if not commits:
        return

    yield ""
    yield ACTIVITY_HEADING
    yield ""
    for commit in commits:
        link = render_link(commit.commit_url(), commit.id, color)
        yield f"  * {link} {format_commit_line(commit, now, registry, color)}"
    yield ""
