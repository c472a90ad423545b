# app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    # In-memory SQLite: state lives for the lifetime of the process only
    DATABASE_URL: str = "sqlite://"

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "0.0.0.0"
    BACKEND_PORT: int = 8080

    # ── Registration rules ────────────────────────────────────────────────
    ENFORCE_STATUS_TRANSITIONS: bool = False    # Reject backwards status moves
    DEFAULT_HOURS_APPROVED: int = 2             # Form default for new approvals

    # ── Notification feed ─────────────────────────────────────────────────
    NOTIFICATION_FEED_LIMIT: int = 50

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
