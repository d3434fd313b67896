from typing import ClassVar

from cricket_stats.config.settings import Settings
from cricket_stats.fetching.base import BaseStatsFetcher
from cricket_stats.fetching.client_base import BaseStatsClient
from cricket_stats.fetching.example_client_adapter import ExampleClientAdapter
from cricket_stats.fetching.fetcher import StatsFetcher
from cricket_stats.fetching.gemini_client_adapter import GeminiClientAdapter
from cricket_stats.fetching.models import GenerationOptions
from cricket_stats.fetching.openai_client_adapter import OpenAIClientAdapter
from cricket_stats.fetching.retry import RetryPolicy
from cricket_stats.logging.logger import Log


class FetcherFactory:
    """Creates the configured stats fetcher."""

    SUPPORTED_PROVIDERS: ClassVar[tuple[str, ...]] = (
        "example",
        "gemini",
        "openai",
        "openai_compatible",
    )

    @classmethod
    def create(cls, settings: Settings) -> BaseStatsFetcher:
        """Create a configured fetcher from application settings.

        A missing credential does not fail here: the fetcher gets no client
        and raises ConfigurationError on its first fetch.
        """
        provider = settings.stats_provider.lower()
        if provider not in cls.SUPPORTED_PROVIDERS:
            raise ValueError(
                f"Unknown stats provider '{provider}'. "
                f"Choose from: {list(cls.SUPPORTED_PROVIDERS)}"
            )
        return StatsFetcher(
            client=cls._create_client(provider, settings),
            model=cls._resolve_model_name(provider, settings),
            options=GenerationOptions(
                enable_search=settings.gemini_enable_search,
                system_instruction=settings.stats_system_instruction,
                thinking_budget=settings.gemini_thinking_budget,
            ),
            policy=RetryPolicy(
                max_attempts=settings.max_fetch_attempts,
                initial_delay=settings.initial_backoff_seconds,
            ),
            tournament=settings.tournament_name,
            season_start=settings.season_start_date,
        )

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseStatsClient | None:
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "gemini":
            if not settings.gemini_api_key:
                Log.warning("No Gemini API key configured")
                return None
            return GeminiClientAdapter(api_key=settings.gemini_api_key)
        base_url = cls._resolve_base_url(provider, settings)
        if not settings.openai_api_key:
            Log.warning("No OpenAI API key configured")
            return None
        return OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=base_url,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        url = settings.openai_compatible_base_url.strip()
        if not url:
            raise ValueError(
                "openai_compatible_base_url is required for "
                "stats_provider=openai_compatible"
            )
        return url

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        if provider == "gemini":
            return settings.gemini_model_name
        if provider == "example":
            return "example"
        return settings.openai_model_name
