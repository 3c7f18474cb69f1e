"""Shared utility functions for CLI commands."""

import logging
from typing import Optional

from devmoji_log.config import ActivityConfig, load_config


def configure_logging(verbose: bool) -> None:
    """Configure diagnostic logging on stderr.

    Without --verbose only warnings are shown, through logging's last-resort
    handler.

    Args:
        verbose: Enable debug output.
    """
    if not verbose:
        return

    # force=True so repeated invocations (tests) reconfigure the handlers
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(levelname)s: %(message)s",
        force=True,
    )


def get_effective_config(
    count: Optional[int] = None,
    color: Optional[bool] = None,
) -> ActivityConfig:
    """Get the effective configuration with CLI overrides applied.

    Priority: CLI flag > global config > defaults.

    Args:
        count: Commit count from the command line, if given.
        color: Color flag from the command line, if given.

    Returns:
        ActivityConfig instance.
    """
    config = load_config()
    if count is not None:
        config.count = count
    if color is not None:
        config.color = color
    return config
