"""Search-grounded player statistics fetcher."""

from collections.abc import Callable
from pathlib import Path

from cricket_stats.fetching.base import BaseStatsFetcher
from cricket_stats.fetching.client_base import BaseStatsClient
from cricket_stats.fetching.defaults import build_role, build_stats
from cricket_stats.fetching.exceptions import ConfigurationError
from cricket_stats.fetching.json_recovery import normalize
from cricket_stats.fetching.models import GenerationOptions, Player, StatsResult
from cricket_stats.fetching.prompt_loader import load_prompt_template
from cricket_stats.fetching.retry import RetryingExecutor, RetryPolicy
from cricket_stats.logging.logger import Log


class StatsFetcher(BaseStatsFetcher):
    """Fetches player statistics from an AI provider, retrying on rate limits.

    ``client`` is ``None`` when no credential was configured; ``fetch`` then
    fails with ConfigurationError before any attempt is made.
    """

    def __init__(
        self,
        *,
        client: BaseStatsClient | None,
        model: str,
        options: GenerationOptions | None = None,
        policy: RetryPolicy | None = None,
        tournament: str = "Syed Mushtaq Ali Trophy 2025-26",
        season_start: str = "Nov 26, 2025",
        prompt_template_path: Path | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._options = options or GenerationOptions()
        self._executor = RetryingExecutor(policy, sleep=sleep)
        self._tournament = tournament
        self._season_start = season_start
        self._prompt_template = load_prompt_template(prompt_template_path)

    def fetch(self, player: Player) -> StatsResult:
        client = self._client
        if client is None:
            raise ConfigurationError("API Key not found.")

        prompt = self._build_prompt(player)
        Log.debug(f"Stats prompt:\n{prompt}")

        def attempt() -> StatsResult:
            raw = client.generate(model=self._model, prompt=prompt, options=self._options)
            Log.debug(f"AI raw response:\n{raw.text}")
            data = normalize(raw.text)
            return StatsResult(
                stats=build_stats(data),
                role=build_role(data.get("role")),
                source=raw.source_url,
            )

        result = self._executor.execute(attempt)
        Log.info(
            f"Fetched stats for {player.name}: {result.stats.matches} matches, "
            f"{len(result.stats.recent_matches)} logged"
        )
        return result

    def _build_prompt(self, player: Player) -> str:
        return self._prompt_template.format(
            player_name=player.name,
            team=player.team,
            tournament=self._tournament,
            season_start=self._season_start,
        )
