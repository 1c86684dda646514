"""Unit tests for YAML configuration loading."""

from __future__ import annotations

import pytest

from auction_closer.config import (
    CONFIG_PATH_ENV,
    get_closer_config,
    load_closer_config,
)


def test_defaults_for_empty_file(tmp_path):
    path = tmp_path / "closer.yaml"
    path.write_text("")

    config = load_closer_config(path)

    assert config.closing.threshold_days == 7
    assert config.storage.backend == "in_memory"
    assert config.notifier.backend == "log"
    assert dict(config.storage.options) == {}


def test_backend_options_are_read(tmp_path):
    path = tmp_path / "closer.yaml"
    path.write_text(
        """
closing:
  threshold_days: 14
storage:
  backend: redis
  options:
    url: redis://cache:6379/1
notifier:
  backend: webhook
  options:
    url: https://notices.test
"""
    )

    config = load_closer_config(path)

    assert config.closing.threshold_days == 14
    assert config.storage.backend == "redis"
    assert config.storage.options["url"] == "redis://cache:6379/1"
    assert config.notifier.options["url"] == "https://notices.test"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_closer_config(tmp_path / "absent.yaml")


def test_environment_overrides_default_path(tmp_path, monkeypatch):
    path = tmp_path / "closer.yaml"
    path.write_text("closing:\n  threshold_days: 3\n")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))
    get_closer_config.cache_clear()
    try:
        assert get_closer_config().closing.threshold_days == 3
    finally:
        get_closer_config.cache_clear()


def test_packaged_default_config_loads(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    get_closer_config.cache_clear()
    try:
        config = get_closer_config()
    finally:
        get_closer_config.cache_clear()
    assert config.closing.threshold_days == 7
    assert config.storage.backend == "in_memory"
