"""Builds a fully populated PlayerStats from an untrusted parsed reply.

The backend may omit, null or mistype any field. Every field read here has a
single fallback: integer counters become 0, rates and averages 0.0, textual
figures "-", the match log an empty list.
"""

import math
from datetime import datetime, timezone
from typing import Any

from cricket_stats.fetching.models import MatchEntry, PlayerRole, PlayerStats

UNAVAILABLE = "-"

_INT_FIELDS = {
    "matches": "matches",
    "innings": "innings",
    "runs": "runs",
    "balls_faced": "ballsFaced",
    "wickets": "wickets",
    "runs_conceded": "runsConceded",
}

_FLOAT_FIELDS = {
    "batting_average": "battingAverage",
    "batting_strike_rate": "battingStrikeRate",
    "overs": "overs",
    "economy": "economy",
    "bowling_average": "bowlingAverage",
    "bowling_strike_rate": "bowlingStrikeRate",
}

_FIGURE_FIELDS = {
    "highest_score": "highestScore",
    "best_bowling": "bestBowling",
}

_ROLES_BY_VALUE = {role.value.lower(): role for role in PlayerRole}


def build_stats(data: dict[str, Any], *, now: datetime | None = None) -> PlayerStats:
    """Build PlayerStats, defaulting every absent, null or mistyped field."""
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    values: dict[str, Any] = {}
    for attr, key in _INT_FIELDS.items():
        values[attr] = _as_int(data.get(key))
    for attr, key in _FLOAT_FIELDS.items():
        values[attr] = _as_float(data.get(key))
    for attr, key in _FIGURE_FIELDS.items():
        values[attr] = _as_text(data.get(key), UNAVAILABLE)
    return PlayerStats(
        **values,
        recent_matches=_build_matches(data.get("recentMatches")),
        summary=_as_text(data.get("summary"), ""),
        last_updated=stamp,
    )


def build_role(raw: Any) -> PlayerRole:
    if not isinstance(raw, str):
        return PlayerRole.UNKNOWN
    return _ROLES_BY_VALUE.get(raw.strip().lower(), PlayerRole.UNKNOWN)


def _build_matches(raw: Any) -> list[MatchEntry]:
    if not isinstance(raw, list):
        return []
    return [
        MatchEntry(
            date=_as_text(item.get("date"), UNAVAILABLE),
            opponent=_as_text(item.get("opponent"), UNAVAILABLE),
            performance=_as_text(item.get("performance"), UNAVAILABLE),
        )
        for item in raw
        if isinstance(item, dict)
    ]


def _as_float(raw: Any) -> float:
    # bool is an int subclass; "true" is not a statistic
    if isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    return value if math.isfinite(value) else 0.0


def _as_int(raw: Any) -> int:
    return int(_as_float(raw))


def _as_text(raw: Any, default: str) -> str:
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    return default
