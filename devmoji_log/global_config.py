"""Global configuration management for devmoji-log.

Handles user-level configuration stored in ~/.devmoji-log/config.yaml:
- count: Number of commits to show
- remote: Remote used to build commit links
- color: Whether to emit ANSI colors
- shortcodes: Custom emoji shortcodes (e.g. "feat-api": "🔌")
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from devmoji_log.exceptions import DevmojiLogError


class GlobalConfigError(DevmojiLogError):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".devmoji-log"


def get_global_config_dir() -> Path:
    """Get the global devmoji-log configuration directory.

    Returns:
        Path to ~/.devmoji-log/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.devmoji-log/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.devmoji-log/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.devmoji-log/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.devmoji-log/config.yaml.

    Args:
        config: Configuration dictionary to save.

    Raises:
        GlobalConfigError: If the file cannot be written.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w", encoding="utf-8") as f:
            yaml.dump(
                config,
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def set_count(count: int) -> None:
    """Set the number of commits to show in global config.

    Args:
        count: Positive number of commits.

    Raises:
        ValueError: If count is not positive.
    """
    if count < 1:
        raise ValueError("count must be a positive integer")
    config = load_global_config()
    config["count"] = count
    save_global_config(config)


def set_remote(remote: str) -> None:
    """Set the remote used for commit links in global config.

    Args:
        remote: Remote name (e.g., "origin", "upstream").
    """
    config = load_global_config()
    config["remote"] = remote
    save_global_config(config)


def set_color(enabled: bool) -> None:
    """Set the color preference in global config.

    Args:
        enabled: Whether to emit ANSI colors.
    """
    config = load_global_config()
    config["color"] = enabled
    save_global_config(config)


def get_shortcodes() -> Dict[str, str]:
    """Get custom emoji shortcodes from global config.

    Returns:
        Mapping of shortcode to glyph, empty if none configured.
    """
    config = load_global_config()
    return config.get("shortcodes") or {}


def set_shortcode(code: str, glyph: str) -> None:
    """Add or replace a custom emoji shortcode.

    Args:
        code: Shortcode without colons (e.g., "feat-api").
        glyph: Emoji glyph the code resolves to.
    """
    config = load_global_config()
    shortcodes = config.get("shortcodes") or {}
    shortcodes[code] = glyph
    config["shortcodes"] = shortcodes
    save_global_config(config)


def remove_shortcode(code: str) -> bool:
    """Remove a custom emoji shortcode.

    Args:
        code: Shortcode to remove.

    Returns:
        True if the code was removed, False if it wasn't configured.
    """
    config = load_global_config()
    shortcodes = config.get("shortcodes") or {}
    if code not in shortcodes:
        return False
    del shortcodes[code]
    config["shortcodes"] = shortcodes
    save_global_config(config)
    return True


def is_configured() -> bool:
    """Check if devmoji-log has a global config file.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
