"""
app/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; Docker Compose injects these at runtime.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "Candidate Intake API"
    app_version: str = "1.0.0"
    debug: bool = False

    # ── Database (SQLAlchemy) ──────────────────────────────────────────────────
    database_url: str = "sqlite:///./data/candidates.db"

    # ── Uploads ────────────────────────────────────────────────────────────────
    upload_dir: str = "./uploads"
    upload_field_name: str = "file"
    max_upload_size_bytes: int = 10 * 1024 * 1024   # 10 MiB

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Single shared instance — import this everywhere.
settings = Settings()
