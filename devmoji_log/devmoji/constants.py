"""Constants for the devmoji-log devmoji package.

Contains:
- BREAKING_EMOJI: Glyph added for breaking changes
- TYPE_EMOJI: Read-only mapping of commit types and scopes to glyphs
- commit_emoji: Look up a type or scope in TYPE_EMOJI
"""

from types import MappingProxyType
from typing import Optional


BREAKING_EMOJI = "💥"

# Several keys alias to the same glyph (build/deps, doc/docs, ...)
TYPE_EMOJI = MappingProxyType({
    "add": "➕",
    "android": "🤖",
    "breaking": "💥",
    "build": "📦",
    "deps": "📦",
    "dep": "📦",
    "dependencies": "📦",
    "chore": "🔧",
    "maintenance": "🔧",
    "ci": "👷",
    "cd": "👷",
    "config": "⚙️",
    "doc": "📚",
    "docs": "📚",
    "documentation": "📚",
    "docker": "🐳",
    "feat": "✨",
    "feature": "✨",
    "fix": "🐛",
    "i18n": "🌐",
    "l10n": "🌐",
    "kubernetes": "☸️",
    "k8s": "☸️",
    "lint": "🚨",
    "linter": "🚨",
    "linux": "🐧",
    "macos": "🍎",
    "ios": "🍎",
    "merge": "🔀",
    "perf": "⚡️",
    "performance": "⚡️",
    "ref": "♻️",
    "refactor": "♻️",
    "release": "🚀",
    "remove": "➖",
    "revert": "⏪",
    "security": "🔒",
    "style": "🎨",
    "test": "✅",
    "tests": "✅",
    "typo": "✏️",
    "typos": "✏️",
    "ui": "💄",
    "ux": "💄",
    "windows": "🏁",
    "wip": "🚧",
})


def commit_emoji(key: str) -> Optional[str]:
    """Look up the glyph for a commit type or scope, or None if unknown."""
    return TYPE_EMOJI.get(key)
