from abc import ABC, abstractmethod

from cricket_stats.fetching.models import GenerationOptions, RawResponse


class BaseStatsClient(ABC):
    """Contract for provider-specific generative AI clients."""

    @abstractmethod
    def generate(
        self,
        *,
        model: str,
        prompt: str,
        options: GenerationOptions,
    ) -> RawResponse:
        """Return the provider reply text and any grounding source.

        Raises:
            BackendError: when the provider call fails.
        """
