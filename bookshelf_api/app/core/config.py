"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so the service needs no settings library or
configuration file.  Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Bookshelf API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Address the uvicorn server started by ``run.py`` binds to.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8081"))

    # Path to the SQLite database file.  A relative path is resolved
    # relative to the project root by the ``db`` module; ``:memory:``
    # is passed through unchanged.
    database_url: str = os.getenv("DATABASE_URL", "bookshelf.db")

    # When disabled the ``Books`` table must be provisioned externally.
    create_schema: bool = os.getenv("CREATE_SCHEMA", "true").lower() in {"1", "true", "yes"}


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must therefore be set before this module is imported.
settings = Settings()
