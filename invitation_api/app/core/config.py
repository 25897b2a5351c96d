"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first (via ``python-dotenv``) so that local development does
not require exporting variables by hand; values already present in the
environment take precedence over the file.  Defaults are provided for
every field so the application can be imported without any
configuration at all, e.g. by the test suite.
"""

import os
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from dotenv import load_dotenv

from .logging_config import parse_level_overrides

load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Invitation API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Routes are served at the root by default (``/clients``, ``/guests``)
    # because existing frontends call them without a version prefix.
    api_prefix: str = os.getenv("API_PREFIX", "")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    # Per-logger levels as ``name=LEVEL`` pairs, applied over the pymongo
    # default of WARNING.
    log_levels: str = os.getenv("LOG_LEVELS", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    mongo_uri: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    db_name: str = os.getenv("DB_NAME", "invitations")

    # Per‑call operation scopes, in seconds.  Inserts and the client
    # existence check use the shorter write timeout; reads, updates and
    # deletes use ``store_timeout_seconds``.
    store_timeout_seconds: float = float(os.getenv("STORE_TIMEOUT_SECONDS", "10"))
    store_write_timeout_seconds: float = float(os.getenv("STORE_WRITE_TIMEOUT_SECONDS", "5"))

    # Connection establishment is the only phase that retries.  Attempt
    # ``n`` waits ``n * connect_backoff_seconds`` before the next one.
    connect_retries: int = int(os.getenv("CONNECT_RETRIES", "5"))
    connect_backoff_seconds: float = float(os.getenv("CONNECT_BACKOFF_SECONDS", "2"))

    # Cross‑origin policy: the base domain and all of its subdomains are
    # allowed, plus an explicit comma‑separated list of extra origins.
    cors_base_domain: str = os.getenv("CORS_BASE_DOMAIN", "deiliinvitation.com")
    cors_extra_origins: str = os.getenv(
        "CORS_EXTRA_ORIGINS", "http://localhost:3000,https://localhost:3000"
    )

    @property
    def log_level_overrides(self) -> Dict[str, str]:
        return parse_level_overrides(self.log_levels)

    @property
    def cors_origins(self) -> List[str]:
        """Explicitly allowed origins, in addition to the base domain."""
        return _split_csv(self.cors_extra_origins)

    @property
    def cors_origin_regex(self) -> Optional[str]:
        """Regex matching the base domain and any of its subdomains.

        ``https://example.com`` and ``https://app.example.com`` match;
        ``https://notexample.com`` does not.  Returns ``None`` when no
        base domain is configured.
        """
        if not self.cors_base_domain:
            return None
        domain = re.escape(self.cors_base_domain.strip().lower())
        return rf"https://([a-z0-9-]+\.)*{domain}"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
