from dataclasses import dataclass, field
from enum import Enum


class PlayerRole(str, Enum):
    """Playing role reported by the model."""

    BATSMAN = "Batsman"
    BOWLER = "Bowler"
    ALL_ROUNDER = "All-Rounder"
    WICKET_KEEPER = "Wicket Keeper"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Player:
    """Player whose statistics are requested."""

    name: str
    team: str


@dataclass(frozen=True)
class MatchEntry:
    """One row of the recent match log."""

    date: str = "-"
    opponent: str = "-"
    performance: str = "-"


@dataclass(frozen=True)
class PlayerStats:
    """Tournament statistics with every field defaulted."""

    matches: int = 0
    innings: int = 0
    runs: int = 0
    balls_faced: int = 0
    batting_average: float = 0.0
    batting_strike_rate: float = 0.0
    highest_score: str = "-"

    overs: float = 0.0
    wickets: int = 0
    runs_conceded: int = 0
    economy: float = 0.0
    bowling_average: float = 0.0
    bowling_strike_rate: float = 0.0
    best_bowling: str = "-"

    recent_matches: list[MatchEntry] = field(default_factory=list)
    summary: str = ""
    last_updated: str = ""


@dataclass(frozen=True)
class GenerationOptions:
    """Backend configuration sent alongside the prompt."""

    enable_search: bool = True
    system_instruction: str | None = None
    thinking_budget: int | None = None


@dataclass(frozen=True)
class RawResponse:
    """Untrusted provider reply plus optional grounding source."""

    text: str
    source_url: str | None = None


@dataclass(frozen=True)
class StatsResult:
    """Output of one fetch."""

    stats: PlayerStats
    role: PlayerRole = PlayerRole.UNKNOWN
    source: str | None = None


def to_payload(result: StatsResult) -> dict[str, object]:
    """Render a result with the camelCase field names used in the prompt contract."""
    stats = result.stats
    return {
        "role": result.role.value,
        "source": result.source,
        "stats": {
            "matches": stats.matches,
            "innings": stats.innings,
            "runs": stats.runs,
            "ballsFaced": stats.balls_faced,
            "battingAverage": stats.batting_average,
            "battingStrikeRate": stats.batting_strike_rate,
            "highestScore": stats.highest_score,
            "overs": stats.overs,
            "wickets": stats.wickets,
            "runsConceded": stats.runs_conceded,
            "economy": stats.economy,
            "bowlingAverage": stats.bowling_average,
            "bowlingStrikeRate": stats.bowling_strike_rate,
            "bestBowling": stats.best_bowling,
            "recentMatches": [
                {
                    "date": entry.date,
                    "opponent": entry.opponent,
                    "performance": entry.performance,
                }
                for entry in stats.recent_matches
            ],
            "summary": stats.summary,
            "lastUpdated": stats.last_updated,
        },
    }
