from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Pagescope"

    # Fetching
    user_agent: str = "Mozilla/5.0 (compatible; PagescopeBot/1.0)"
    http_timeout: float = 30
    max_redirects: int = 5

    # Probes (robots.txt / sitemap)
    probe_timeout: float = 5

    # Overall wall-clock budget for one analysis run (None = unbounded)
    analysis_timeout: float | None = 90

    # Redis / Celery
    celery_broker_url: str = "redis://localhost:6379/0"
    celery_result_backend: str = "redis://localhost:6379/1"


settings = Settings()
