"""Application configuration via pydantic-settings."""
from typing import Dict

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from HOTEL_BOOKING_* environment variables or .env"""

    # Application
    app_name: str = "Hotel Booking API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Security
    secret_key: str = "change-me-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30
    admin_username: str = "admin"
    admin_password: str = "admin123"

    # Promo codes and their discount percentages
    discount_codes: Dict[str, float] = {
        "LOYALTY10": 10.0,
        "HOLIDAY15": 15.0,
    }

    class Config:
        env_prefix = "HOTEL_BOOKING_"
        env_file = ".env"
        extra = "ignore"


settings = Settings()
