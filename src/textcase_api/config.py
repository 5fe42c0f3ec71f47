"""API configuration from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """API settings loaded from environment."""

    cors_origins: str = "http://localhost:3000"
    max_input_chars: int = 100_000
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    model_config = {"env_prefix": "TEXTCASE_API_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
