import argparse
import json
import sys

from cricket_stats.config.settings import Settings
from cricket_stats.fetching.exceptions import (
    BackendError,
    ConfigurationError,
    ExtractionError,
    QuotaExceededError,
    StatsFetchError,
)
from cricket_stats.fetching.factory import FetcherFactory
from cricket_stats.fetching.models import Player, to_payload
from cricket_stats.logging.logger import Log

EXIT_BACKEND_ERROR = 1
EXIT_NOT_CONFIGURED = 2
EXIT_USAGE_LIMIT = 3
EXIT_UNREADABLE_RESPONSE = 4


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch a player's latest tournament statistics."
    )
    parser.add_argument("--player", required=True, help="Player name")
    parser.add_argument("--team", required=True, help="Team the player represents")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build fetcher -> print stats as JSON."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    try:
        fetcher = FetcherFactory.create(settings)
    except (ValueError, StatsFetchError) as exc:
        print(f"Not configured: {exc}", file=sys.stderr)
        return EXIT_NOT_CONFIGURED

    try:
        result = fetcher.fetch(Player(name=args.player, team=args.team))
    except ConfigurationError as exc:
        print(f"Not configured: {exc}", file=sys.stderr)
        return EXIT_NOT_CONFIGURED
    except QuotaExceededError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_USAGE_LIMIT
    except ExtractionError as exc:
        print(f"Could not understand the AI response: {exc}", file=sys.stderr)
        return EXIT_UNREADABLE_RESPONSE
    except BackendError as exc:
        print(f"Stats request failed: {exc}", file=sys.stderr)
        return EXIT_BACKEND_ERROR

    print(json.dumps(to_payload(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
