from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    stats_provider: str = "gemini"
    stats_system_instruction: str | None = None

    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY", "GOOGLE_API_KEY"),
    )
    gemini_model_name: str = "gemini-2.5-flash"
    gemini_enable_search: bool = True
    gemini_thinking_budget: int | None = None

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 30
    openai_compatible_base_url: str = ""

    max_fetch_attempts: int = Field(default=3, ge=1)
    initial_backoff_seconds: float = Field(default=2.0, ge=0.0)

    tournament_name: str = "Syed Mushtaq Ali Trophy 2025-26"
    season_start_date: str = "Nov 26, 2025"
