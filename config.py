"""
Application configuration using environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Recipe settings
    calorie_threshold: float = Field(default=300.0, alias="CALORIE_THRESHOLD")

    # Console settings
    use_color: bool = Field(default=True, alias="USE_COLOR")

    # Development settings
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()
