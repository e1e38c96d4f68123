"""SDK settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK ────────────────────────────────────────────────
#
# pydantic-settings reads configuration from TWO sources (in priority order):
#
#   1. **Environment variables** — e.g., CONTENT_SERVICE_HOST=content:10003
#      (highest priority — always wins)
#   2. **.env file** — key=value lines in the working directory .env file
#      (lower priority — used for local development)
#
# The mapping is automatic: field name `content_service_host` maps to env var
# `CONTENT_SERVICE_HOST`.  Defaults apply when neither source sets a value.
# ──────────────────────────────────────────────────────────────────────
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Content SDK settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Content service ===
    content_service_scheme: str = "https"
    content_service_host: str = "localhost:10003"
    # Sent as the Origin header; the service checks it against its allow-list.
    origin: str = "http://localhost:10001"

    # === Session propagation ===
    session_token_header: str = "X-Session-Token"
    xsrf_token_header: str = "X-Xsrf-Token"

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    @property
    def content_service_base_url(self) -> str:
        """Scheme and host joined, without a trailing slash."""
        return f"{self.content_service_scheme}://{self.content_service_host.rstrip('/')}"
