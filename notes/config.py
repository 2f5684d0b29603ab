"""Notes client configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # Supabase (PostgREST)
    supabase_url: str = ""
    supabase_key: str = ""
    notes_table: str = "notes"
    request_timeout: float = 10.0

    log_level: str = "INFO"

    # Prometheus exposition, 0 disables
    metrics_port: int = 9108

    @property
    def supabase_configured(self) -> bool:
        """Whether both the project URL and the API key are set."""
        return bool(self.supabase_url and self.supabase_key)

    @property
    def rest_url(self) -> str:
        """PostgREST endpoint for the notes table."""
        return f"{self.supabase_url.rstrip('/')}/rest/v1/{self.notes_table}"


settings = Settings()
