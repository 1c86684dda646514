"""Configuration helpers for the auction closer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

_DEFAULT_CLOSER_CONFIG = Path(__file__).resolve().parent / "closer.yaml"

CONFIG_PATH_ENV = "AUCTION_CLOSER_CONFIG_PATH"


@dataclass(frozen=True)
class ClosingConfig:
    threshold_days: int


@dataclass(frozen=True)
class BackendConfig:
    backend: str
    options: Mapping[str, Any]


@dataclass(frozen=True)
class CloserConfig:
    closing: ClosingConfig
    storage: BackendConfig
    notifier: BackendConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    return yaml.safe_load(path.read_text()) or {}


def _backend(section: Mapping[str, Any], default: str) -> BackendConfig:
    return BackendConfig(
        backend=str(section.get("backend", default)),
        options=dict(section.get("options") or {}),
    )


def load_closer_config(path: Path) -> CloserConfig:
    data = _load_yaml(path)
    closing = data.get("closing") or {}
    return CloserConfig(
        closing=ClosingConfig(threshold_days=int(closing.get("threshold_days", 7))),
        storage=_backend(data.get("storage") or {}, "in_memory"),
        notifier=_backend(data.get("notifier") or {}, "log"),
    )


@lru_cache(maxsize=1)
def get_closer_config() -> CloserConfig:
    return load_closer_config(Path(os.getenv(CONFIG_PATH_ENV, _DEFAULT_CLOSER_CONFIG)))
