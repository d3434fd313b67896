"""Offline stats client.

Returns a canned, fenced reply so the whole recovery path runs without a
network call. Handy for local runs and as a template for new adapters:
implement BaseStatsClient and register the provider in FetcherFactory.
"""

import json
from typing import ClassVar

from cricket_stats.fetching.client_base import BaseStatsClient
from cricket_stats.fetching.models import GenerationOptions, RawResponse


class ExampleClientAdapter(BaseStatsClient):
    """Adapter that answers every prompt with the same sample statistics."""

    SOURCE_URL: ClassVar[str] = "https://www.espncricinfo.com/"
    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "role": "Batsman",
        "matches": 2,
        "innings": 2,
        "runs": 41,
        "ballsFaced": 30,
        "battingAverage": 20.5,
        "battingStrikeRate": 136.67,
        "highestScore": "40",
        "wickets": 0,
        "bestBowling": None,
        "recentMatches": [
            {"date": "Nov 26", "opponent": "vs Example XI", "performance": "40(28)"},
            {"date": "Nov 28", "opponent": "vs Sample XI", "performance": "1(2)"},
        ],
        "summary": "Sample statistics from the offline adapter.",
    }

    def generate(
        self,
        *,
        model: str,
        prompt: str,
        options: GenerationOptions,
    ) -> RawResponse:
        _ = model, prompt, options
        body = json.dumps(self.DEFAULT_RESPONSE, indent=2)
        return RawResponse(
            text=f"Here are the stats:\n```json\n{body}\n```",
            source_url=self.SOURCE_URL,
        )
