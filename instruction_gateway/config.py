"""Configuration management using Pydantic Settings"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "instruction-gateway"
    log_level: str = "INFO"

    # Payments
    supported_currencies: List[str] = ["NGN", "USD", "GBP", "GHS"]


settings = Settings()
