"""Activity feed configuration for devmoji-log.

Contains:
- ActivityConfig: Configuration dataclass for rendering the activity feed
- load_activity_config_from_dict: Build an ActivityConfig from a config dictionary
- activity_config_to_dict: Convert an ActivityConfig back to a dictionary
- load_config: Load the effective configuration (global config + environment)
"""

import logging
import os
from dataclasses import dataclass, field

from devmoji_log import global_config
from devmoji_log.devmoji import EmojiShortcodes, MappingShortcodes, ShortcodeRegistry


logger = logging.getLogger(__name__)


# ============================================================
# DEFAULT VALUES
# ============================================================

DEFAULT_COUNT = 5
DEFAULT_REMOTE = "origin"
DEFAULT_COLOR = True


@dataclass
class ActivityConfig:
    """Configuration for the activity feed."""

    count: int = DEFAULT_COUNT
    remote: str = DEFAULT_REMOTE
    color: bool = DEFAULT_COLOR

    # User-defined shortcodes, e.g. {"feat-api": "🔌"}
    shortcodes: dict[str, str] = field(default_factory=dict)

    def build_registry(self) -> ShortcodeRegistry:
        """Build the shortcode registry, layering user codes over the emoji library."""
        if self.shortcodes:
            return MappingShortcodes(self.shortcodes, fallback=EmojiShortcodes())
        return EmojiShortcodes()


def load_activity_config_from_dict(config_dict: dict) -> ActivityConfig:
    """Load ActivityConfig from a configuration dictionary.

    Invalid values fall back to their defaults.

    Args:
        config_dict: Dictionary with configuration values.

    Returns:
        ActivityConfig instance.
    """
    count = config_dict.get("count", DEFAULT_COUNT)
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        logger.debug("Ignoring invalid count in config: %r", count)
        count = DEFAULT_COUNT

    remote = config_dict.get("remote", DEFAULT_REMOTE)
    if not isinstance(remote, str) or not remote.strip():
        remote = DEFAULT_REMOTE

    color = config_dict.get("color", DEFAULT_COLOR)
    if not isinstance(color, bool):
        color = DEFAULT_COLOR

    shortcodes = config_dict.get("shortcodes") or {}
    if not isinstance(shortcodes, dict):
        shortcodes = {}

    return ActivityConfig(
        count=count,
        remote=remote.strip(),
        color=color,
        shortcodes={
            str(code): str(glyph)
            for code, glyph in shortcodes.items()
            if code and glyph
        },
    )


def activity_config_to_dict(config: ActivityConfig) -> dict:
    """Convert ActivityConfig to a dictionary for saving.

    Args:
        config: ActivityConfig instance.

    Returns:
        Dictionary representation.
    """
    return {
        "count": config.count,
        "remote": config.remote,
        "color": config.color,
        "shortcodes": dict(config.shortcodes),
    }


def load_config() -> ActivityConfig:
    """Load the effective configuration.

    Reads ~/.devmoji-log/config.yaml and applies the NO_COLOR environment
    variable. An unreadable config file falls back to defaults.

    Returns:
        ActivityConfig instance.
    """
    try:
        config = load_activity_config_from_dict(global_config.load_global_config())
    except global_config.GlobalConfigError as e:
        logger.warning("%s; using defaults", e)
        config = ActivityConfig()

    if os.environ.get("NO_COLOR"):
        config.color = False

    return config
