"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for every field except
``MONGO_URL``, which must be supplied before the service can connect
to its document store.  In a production deployment you should set
these via environment variables or a dedicated configuration service.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Lessons Marketplace API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    # Connection string for MongoDB.  There is no default: an empty value
    # makes ``connect_store`` fail and the process exit at startup.
    mongo_url: str = os.getenv("MONGO_URL", "")
    mongo_db: str = os.getenv("MONGO_DB", "edushop_db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "7000"))

    # Directory served under ``/images``.  Relative paths are resolved
    # against the project root by ``images_path``.
    images_dir: str = os.getenv("IMAGES_DIR", "images")

    # Comma‑separated list of allowed CORS origins.  ``*`` allows all,
    # which keeps the API usable from any storefront origin.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*"))
    )

    @property
    def images_path(self) -> Path:
        """Absolute path of the image directory."""
        path = Path(self.images_dir)
        if path.is_absolute():
            return path
        base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
        return (base_dir / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should therefore be set before importing this module.
settings = Settings()
