"""Relative time rendering for commit timestamps.

Contains:
- Span: Elapsed time broken into calendar units
- compute_span: Round the time between two instants to whole hours
- format_span: Render a span as "1 year, 4 months, 28 days, 18 hours"
- time_ago_suffix: Render the " (... ago)" suffix appended to commit lines
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from devmoji_log.exceptions import SpanError


_HOUR_US = 3_600_000_000

# Largest to smallest; weeks are folded into days
SPAN_UNITS = [
    ("years", "year"),
    ("months", "month"),
    ("days", "day"),
    ("hours", "hour"),
]


@dataclass(frozen=True)
class Span:
    """Elapsed time rounded to whole hours, balanced up to years."""

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    negative: bool = False

    def is_zero(self) -> bool:
        return not (self.years or self.months or self.days or self.hours)


def compute_span(since: datetime, now: datetime) -> Span:
    """Compute the span from ``since`` to ``now``.

    The elapsed time is rounded to the nearest hour (halves away from zero),
    then balanced into years, months and days relative to ``since`` so that
    variable month and year lengths are anchored at the commit time.

    Args:
        since: The earlier instant (the commit timestamp).
        now: The reference instant.

    Returns:
        The rounded span.

    Raises:
        SpanError: If the span cannot be represented.
    """
    try:
        now = now.astimezone(since.tzinfo)
        elapsed_us = (now - since) // timedelta(microseconds=1)
        negative = elapsed_us < 0
        hours = (abs(elapsed_us) + _HOUR_US // 2) // _HOUR_US

        step = timedelta(hours=hours)
        target = since - step if negative else since + step
        delta = relativedelta(target, since)
    except (OverflowError, ValueError) as e:
        raise SpanError(f"Cannot compute elapsed time since {since.isoformat()}: {e}") from e

    return Span(
        years=abs(delta.years),
        months=abs(delta.months),
        days=abs(delta.days),
        hours=abs(delta.hours),
        negative=negative and hours > 0,
    )


def format_span(span: Span) -> str:
    """Render a span in verbose, comma-separated form.

    Args:
        span: The span to render.

    Returns:
        A string like "1 year, 4 months, 28 days, 18 hours", or "0 hours".
    """
    if span.is_zero():
        return "0 hours"

    parts = []
    for attr, unit in SPAN_UNITS:
        value = getattr(span, attr)
        if value:
            parts.append(f"{value} {unit}" if value == 1 else f"{value} {unit}s")
    return ", ".join(parts)


def time_ago_suffix(since: datetime, now: datetime) -> str:
    """Build the relative time suffix for a commit line.

    Args:
        since: The commit timestamp.
        now: The reference instant.

    Returns:
        " (<span> ago)", or " (in <span>)" for timestamps after ``now``.

    Raises:
        SpanError: If the span cannot be computed.
    """
    span = compute_span(since, now)
    if span.negative:
        return f" (in {format_span(span)})"
    return f" ({format_span(span)} ago)"
