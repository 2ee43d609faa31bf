"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service runs out of the box with a ``data.json`` file next to the
project root.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


def _resolve(value: str) -> Path:
    # Relative paths are taken from the project root.
    path = Path(value)
    if path.is_absolute():
        return path
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return (base_dir / path).resolve()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Exercise Tracker API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the JSON file holding the whole dataset.  A relative path
    # is resolved against the project root by ``resolve_data_file``.
    data_file: str = os.getenv("DATA_FILE", "data.json")

    # Comma-separated list of allowed CORS origins.  ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    def resolve_data_file(self) -> Path:
        """Return the absolute path of the backing data file."""
        return _resolve(self.data_file)

    def resolve_log_file(self) -> Optional[Path]:
        """Return the absolute path of the log file, or ``None`` if unset."""
        return _resolve(self.log_file) if self.log_file else None

    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiated once so other modules can import it without re-reading
# the environment.  Environment variables must be set before import.
settings = Settings()
