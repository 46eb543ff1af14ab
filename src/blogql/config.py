"""
Configuration management for BlogQL
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BLOGQL_",
        case_sensitive=False,
        extra="ignore",
    )

    # Data set (None uses the sample data bundled with the package)
    data_dir: str | None = None

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
