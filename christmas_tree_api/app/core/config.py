"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service runs out of the box against a local SQLite file and accepts
browser calls from the production frontend and from local development
servers on any port.
"""

import os
from dataclasses import dataclass
from typing import List


DEFAULT_CORS_ORIGINS = ",".join(
    [
        "https://christmas-treeee.netlify.app",
        "https://christmas-tree-esnh.onrender.com",
        "http://localhost:*",
        "http://127.0.0.1:*",
        "https://localhost:*",
        "https://127.0.0.1:*",
    ]
)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Christmas Tree Message API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database.  Relative paths are resolved against
    # the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "christmas_tree.db")

    # Comma‑separated list of allowed origin patterns.  A ``*`` in the
    # port position accepts any port, e.g. ``http://localhost:*``.
    cors_origins: str = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    cors_max_age: int = int(os.getenv("CORS_MAX_AGE", "3600"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    def cors_origin_patterns(self) -> List[str]:
        """Return the configured origin patterns as a list."""
        return [item.strip() for item in self.cors_origins.split(",") if item.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
