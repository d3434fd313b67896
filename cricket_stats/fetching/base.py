from abc import ABC, abstractmethod

from cricket_stats.fetching.models import Player, StatsResult


class BaseStatsFetcher(ABC):
    """Contract for all stats fetchers."""

    @abstractmethod
    def fetch(self, player: Player) -> StatsResult:
        """Fetch the latest tournament statistics for a player.

        Args:
            player: Name and team used to build the search prompt.

        Returns:
            StatsResult with fully defaulted stats, role and grounding source.

        Raises:
            ConfigurationError: no credential configured.
            QuotaExceededError: rate limited on every allowed attempt.
            ExtractionError: the reply held no parseable JSON object.
            BackendError: any other provider failure.
        """
