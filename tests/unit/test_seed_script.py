"""Unit tests for the auction seeding script."""

from __future__ import annotations

import importlib.util
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from auction_closer.config import CONFIG_PATH_ENV, get_closer_config
from auction_closer.storage import InMemoryAuctionRepository

_SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "seed_auctions.py"


@pytest.fixture(scope="module")
def seed_module():
    spec = importlib.util.spec_from_file_location("seed_auctions", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_load_auctions_from_yaml(seed_module, tmp_path):
    path = tmp_path / "auctions.yaml"
    path.write_text(
        """
auctions:
  - auction_id: auc_tv
    description: TV de plasma
    start_date: "1999-02-20T00:00:00Z"
  - description: Geladeira
    start_date: 2024-03-14T08:30:00+00:00
    closed: true
"""
    )

    auctions = seed_module.load_auctions(path)

    assert [auction.description for auction in auctions] == ["TV de plasma", "Geladeira"]
    assert auctions[0].auction_id == "auc_tv"
    assert auctions[0].start_date == datetime(1999, 2, 20, tzinfo=timezone.utc)
    assert auctions[1].closed is True
    assert auctions[1].auction_id.startswith("auc_")


def test_main_requires_one_argument(seed_module):
    assert seed_module.main([]) == 2


def test_bare_dates_become_midnight_utc(seed_module, tmp_path):
    path = tmp_path / "auctions.yaml"
    path.write_text("auctions:\n  - description: Geladeira\n    start_date: 1999-02-20\n")

    auctions = seed_module.load_auctions(path)

    assert auctions[0].start_date == datetime(1999, 2, 20, tzinfo=timezone.utc)
    repository = InMemoryAuctionRepository()
    repository.add(auctions[0])
    assert repository.get(auctions[0].auction_id).to_record()["start_date"] == "1999-02-20T00:00:00Z"


def test_unsupported_start_date_is_rejected(seed_module, tmp_path):
    path = tmp_path / "auctions.yaml"
    path.write_text("auctions:\n  - description: Geladeira\n    start_date: 42\n")

    with pytest.raises(ValueError, match="start_date"):
        seed_module.load_auctions(path)


def test_refuses_in_memory_backend(seed_module, tmp_path, monkeypatch, capsys):
    config_path = tmp_path / "closer.yaml"
    config_path.write_text("storage:\n  backend: in_memory\n")
    auctions_path = tmp_path / "auctions.yaml"
    auctions_path.write_text("auctions:\n  - description: Geladeira\n    start_date: 1999-02-20\n")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_path))
    get_closer_config.cache_clear()
    try:
        exit_code = seed_module.main([str(auctions_path)])
    finally:
        get_closer_config.cache_clear()

    assert exit_code == 1
    captured = capsys.readouterr()
    assert "in_memory" in captured.err
    assert "seeded" not in captured.out


def test_seeds_persistent_backend(seed_module, tmp_path, monkeypatch, capsys):
    config_path = tmp_path / "closer.yaml"
    config_path.write_text("storage:\n  backend: redis\n  options:\n    url: redis://localhost:6379/0\n")
    auctions_path = tmp_path / "auctions.yaml"
    auctions_path.write_text("auctions:\n  - description: Geladeira\n    start_date: 1999-02-20\n")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_path))
    get_closer_config.cache_clear()
    fake_redis = MagicMock()
    try:
        with patch("auction_closer.storage.redis.redis.Redis.from_url", return_value=fake_redis):
            exit_code = seed_module.main([str(auctions_path)])
    finally:
        get_closer_config.cache_clear()

    assert exit_code == 0
    assert fake_redis.set.call_count == 1
    assert "seeded 1 auction(s)" in capsys.readouterr().out
