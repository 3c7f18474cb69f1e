"""Emoji resolution for conventional commit fields."""

from typing import Optional

from devmoji_log.devmoji.constants import BREAKING_EMOJI, commit_emoji
from devmoji_log.devmoji.registry import DEFAULT_REGISTRY, ShortcodeRegistry


def extract_shortcodes(text: str) -> list[str]:
    """Split free text on ':' and return the non-empty segments.

    Args:
        text: Free text that may carry :shortcode: annotations.

    Returns:
        Candidate shortcodes in order of appearance.
    """
    return [segment for segment in text.split(":") if segment]


def resolve_emoji(
    commit_type: str,
    scope: Optional[str] = None,
    breaking: bool = False,
    description: str = "",
    registry: Optional[ShortcodeRegistry] = None,
) -> str:
    """Compute the emoji annotation for a conventional commit.

    Combined "type-scope" codes from the registry take priority over the
    plain scope lookup. Unknown codes contribute nothing.

    Args:
        commit_type: The conventional commit type (feat, fix, ...).
        scope: Optional scope of the change.
        breaking: Whether the commit is a breaking change.
        description: The header description, scanned for :shortcodes:.
        registry: Shortcode registry to use (defaults to the emoji library).

    Returns:
        Sorted, space-joined unique glyphs; empty string if none were found.
    """
    registry = registry or DEFAULT_REGISTRY
    emojis: set[str] = set()

    if breaking:
        emojis.add(BREAKING_EMOJI)

    glyph = commit_emoji(commit_type)
    if glyph:
        emojis.add(glyph)

    if scope:
        combined = registry.get(f"{commit_type}-{scope}")
        if combined:
            emojis.add(combined)
        else:
            glyph = commit_emoji(scope)
            if glyph:
                emojis.add(glyph)

    if ":" in description:
        for code in extract_shortcodes(description):
            glyph = registry.get(code)
            if glyph:
                emojis.add(glyph)

    return " ".join(sorted(emojis))
