"""Emoji shortcode registries.

A registry resolves a shortcode (e.g. "bug") to a glyph (e.g. "🐛"). The
resolver only depends on the ShortcodeRegistry interface, so tests and user
configuration can supply their own codes.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Mapping, Optional

import emoji


class ShortcodeRegistry(ABC):
    """Resolve emoji shortcodes to glyphs."""

    @abstractmethod
    def get(self, code: str) -> Optional[str]:
        """Get the glyph for a shortcode.

        Args:
            code: The shortcode without surrounding colons.

        Returns:
            The glyph, or None if the code is unknown.
        """
        pass


@lru_cache(maxsize=1024)
def get_by_shortcode(code: str) -> Optional[str]:
    """Resolve a shortcode using the emoji library's alias table.

    Args:
        code: The shortcode without surrounding colons.

    Returns:
        The glyph, or None if the library does not know the code.
    """
    if not code or code != code.strip():
        return None

    token = f":{code}:"
    glyph = emoji.emojize(token, language="alias")
    if glyph == token:
        return None
    return glyph


class EmojiShortcodes(ShortcodeRegistry):
    """Registry backed by the emoji library (gemoji aliases and CLDR names)."""

    def get(self, code: str) -> Optional[str]:
        return get_by_shortcode(code)


class MappingShortcodes(ShortcodeRegistry):
    """Registry serving user-defined codes before deferring to a fallback."""

    def __init__(
        self,
        mapping: Mapping[str, str],
        fallback: Optional[ShortcodeRegistry] = None,
    ):
        self._mapping = dict(mapping)
        self._fallback = fallback

    def get(self, code: str) -> Optional[str]:
        glyph = self._mapping.get(code)
        if glyph:
            return glyph
        if self._fallback is not None:
            return self._fallback.get(code)
        return None


DEFAULT_REGISTRY = EmojiShortcodes()
