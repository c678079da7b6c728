from pathlib import Path

from pydantic_settings import BaseSettings

_PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Wormly upstream
    wormly_api_key: str | None = None
    wormly_base_url: str = "https://api.wormly.com/"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"  # "development" or "production"

    # Logging
    log_level: str = "info"

    # CORS
    cors_origins: str = "*"

    # HTTP client timeouts (seconds)
    http_connect_timeout: float = 5.0
    http_read_timeout: float = 15.0
    http_write_timeout: float = 5.0
    http_pool_timeout: float = 5.0
    http_total_timeout: float = 30.0  # overall deadline for one upstream call

    # Dashboard
    dashboard_path: str = str(_PACKAGE_DIR / "static" / "dashboard.html")

    model_config = {"env_prefix": "", "case_sensitive": False, "env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


settings = Settings()
