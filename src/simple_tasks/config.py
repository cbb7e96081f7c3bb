"""Configuration management for the task store service."""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Storage
    # Empty = use the platform default location (see store.persistence.resolve_path)
    tasks_file: str = ""
    # Used to build the app data directory on Android
    app_identifier: str = "com.simple_tasks.app"

    # Origins allowed to call the API from a browser context
    # Comma-separated list; defaults to the desktop shell's webview origins
    cors_origins: str = "tauri://localhost,http://tauri.localhost"

    # Logging
    log_level: str = "info"

    class Config:
        env_prefix = "SIMPLE_TASKS_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    def get_tasks_file(self) -> Path | None:
        """Get the configured tasks file override, if any."""
        if not self.tasks_file.strip():
            return None
        return Path(self.tasks_file.strip()).expanduser()

    def get_cors_origins(self) -> list[str]:
        """Get the list of allowed browser origins."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
