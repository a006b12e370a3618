from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API server
    host: str = "0.0.0.0"
    port: int = 3000
    app_env: str = "development"  # "production" turns off auto-reload

    # View component
    api_base_url: str = "http://localhost:3000"
    request_timeout: float = 10.0  # seconds

    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @property
    def greeting_url(self) -> str:
        """Absolute URL of the greeting endpoint."""
        return f"{self.api_base_url.rstrip('/')}/api/hello"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
