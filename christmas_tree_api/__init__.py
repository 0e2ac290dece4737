"""
Top‑level package for the Christmas Tree message API.

The web service lives under ``app``; ``client`` provides a small HTTP
client for talking to a running instance.
"""

__all__ = []
