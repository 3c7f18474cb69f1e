"""Emoji annotation for conventional commits.

This package provides:
- constants: BREAKING_EMOJI, TYPE_EMOJI, commit_emoji
- registry: ShortcodeRegistry, EmojiShortcodes, MappingShortcodes, get_by_shortcode
- resolver: resolve_emoji, extract_shortcodes
"""

# Constants
from devmoji_log.devmoji.constants import (
    BREAKING_EMOJI,
    TYPE_EMOJI,
    commit_emoji,
)

# Registries
from devmoji_log.devmoji.registry import (
    DEFAULT_REGISTRY,
    EmojiShortcodes,
    MappingShortcodes,
    ShortcodeRegistry,
    get_by_shortcode,
)

# Resolver
from devmoji_log.devmoji.resolver import (
    extract_shortcodes,
    resolve_emoji,
)


__all__ = [
    # Constants
    "BREAKING_EMOJI",
    "TYPE_EMOJI",
    "commit_emoji",
    # Registries
    "DEFAULT_REGISTRY",
    "EmojiShortcodes",
    "MappingShortcodes",
    "ShortcodeRegistry",
    "get_by_shortcode",
    # Resolver
    "extract_shortcodes",
    "resolve_emoji",
]
