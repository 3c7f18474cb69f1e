"""Shared test fixtures and configuration."""

from datetime import datetime, timedelta, timezone

import pytest

from devmoji_log.devmoji import MappingShortcodes
from devmoji_log.models import CommitRecord


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.devmoji-log directory."""
    config_dir = tmp_path / ".devmoji-log"
    monkeypatch.setattr("devmoji_log.global_config._CONFIG_DIR", config_dir)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return config_dir


@pytest.fixture
def now():
    """Fixed reference instant."""
    return datetime(2024, 5, 29, 18, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_commit(now):
    """Factory for commits made two hours before ``now``."""

    def _make(message, id="1a2b3c4", timestamp=None, url="https://github.com/acme/widgets"):
        return CommitRecord(
            id=id,
            message=message,
            timestamp=timestamp or now - timedelta(hours=2),
            url=url,
        )

    return _make


@pytest.fixture
def fake_registry():
    """Small, predictable shortcode registry."""
    return MappingShortcodes({
        "bug": "🐛",
        "rocket": "🚀",
        "feat-ui": "🔌",
        "fix-docs": "📝",
    })
