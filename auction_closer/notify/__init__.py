"""Notifier backend factory."""

from __future__ import annotations

from ..config import CloserConfig
from .base import NotificationError, Notifier, build_notice
from .log import LogNotifier
from .pubsub import PubSubNotifier
from .webhook import WebhookNotifier

__all__ = [
    "LogNotifier",
    "NotificationError",
    "Notifier",
    "PubSubNotifier",
    "WebhookNotifier",
    "build_notice",
    "build_notifier",
]


def build_notifier(config: CloserConfig) -> Notifier:
    backend = config.notifier.backend
    options = dict(config.notifier.options)
    if backend == "log":
        return LogNotifier()
    if backend == "webhook":
        return WebhookNotifier(**options)
    if backend == "pubsub":
        return PubSubNotifier(**options)
    raise ValueError(f"unknown notifier backend {backend}")
