"""
Application Configuration — Environment & Settings
Centralizes all config from .env with Pydantic Settings for validation.
"""
from pathlib import Path
from functools import lru_cache
from pydantic_settings import BaseSettings

# Resolve paths relative to backend/ directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # --- Core ---
    APP_NAME: str = "Sistem Pembayaran Online API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    CORS_ORIGINS: list[str] = ["*"]

    # --- Payments ---
    TIMEZONE: str = "Asia/Jakarta"
    SUCCESS_PAGE_PATH: str = "/success.html"
    INSTITUTION_NAME: str = "Universitas Annuqayah"

    # --- Email (SMTP) ---
    EMAIL_HOST: str = "smtp.gmail.com"
    EMAIL_PORT: int = 587
    EMAIL_USER: str = ""
    EMAIL_PASS: str = ""
    EMAIL_FROM_NAME: str = "Sistem Pembayaran Online"
    EMAIL_FAIL_OPEN: bool = True  # transport errors fall back to mock mode

    # --- Google Sheets ---
    SPREADSHEET_ID: str = ""
    SHEET_RANGE: str = "Sheet1!A:H"
    GOOGLE_CLIENT_EMAIL: str = ""
    GOOGLE_PRIVATE_KEY: str = ""
    GOOGLE_CREDENTIALS_FILE: str = ""

    # --- Logging ---
    LOG_DIR: str = str(BASE_DIR / "logs")

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True

    @property
    def email_configured(self) -> bool:
        return bool(self.EMAIL_USER and self.EMAIL_PASS)

    @property
    def sheets_configured(self) -> bool:
        has_inline = bool(self.GOOGLE_CLIENT_EMAIL and self.GOOGLE_PRIVATE_KEY)
        return bool(self.SPREADSHEET_ID) and (has_inline or bool(self.GOOGLE_CREDENTIALS_FILE))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
