"""Batch closing of stale auctions."""

__version__ = "1.0.0"
