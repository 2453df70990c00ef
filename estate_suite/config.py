"""
Estate Suite configuration

All settings can be overridden from the environment or a .env file.
Usage:
    from estate_suite.config import settings
    top_n = settings.DEFAULT_TOP_N
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore variables not declared here
    )

    # === Environment ===
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # === Engines ===
    DEFAULT_TOP_N: int = 3
    RANDOM_SEED: Optional[int] = None

    # === API ===
    API_TITLE: str = "Dubai Real Estate Suite"
    API_VERSION: str = "0.1.0"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # Perceived-progress delay, applied only by the HTTP layer
    SIMULATED_LATENCY_SECONDS: float = 0.0


# singleton
settings = Settings()
