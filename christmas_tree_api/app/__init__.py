"""
Application package initializer.

The API is split into ``core`` (configuration, logging, database and
access policy), ``schemas``, ``repositories``, ``services`` and the
``api`` routers.
"""

from .main import app  # noqa: F401
