# rentaldesk/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Storage ───────────────────────────────────────────────────────────
    STORAGE_BACKEND: str = "memory"     # memory | sql
    DATABASE_URL: str = "sqlite:///./rentaldesk.db"
    SEED_DEMO_DATA: bool = True         # SQL backend seeds only when empty

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 5000
    CORS_ORIGINS: list[str] = ["*"]

    # ── Fleet defaults ────────────────────────────────────────────────────
    DEFAULT_RATE_TYPE: str = "24hr"

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    @property
    def uses_sql(self) -> bool:
        return self.STORAGE_BACKEND.lower() == "sql"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
