"""
Configuration management using Pydantic Settings.

Environment variables are loaded from .env file or system environment.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings"""

    # Redis Configuration
    redis_host: str = Field(default="localhost", description="Redis server host")
    redis_port: int = Field(default=6379, description="Redis server port")

    # Subscription Configuration
    stream_delay_seconds: float = Field(default=3.0, ge=0, description="Delay before each allEmployee emission")

    # Seed Configuration
    seed_file: str | None = Field(default=None, description="YAML file with departments and employees to load at startup")

    # Server Configuration
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    reload: bool = Field(default=True, description="Enable auto-reload in development")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Singleton instance
settings = Settings()
