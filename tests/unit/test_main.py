import json
from unittest.mock import MagicMock, patch

import pytest

from cricket_stats.fetching.exceptions import (
    BackendError,
    ConfigurationError,
    ExtractionError,
    QuotaExceededError,
    StatsFetchError,
)
from cricket_stats.fetching.models import Player, PlayerStats, StatsResult
from cricket_stats.main import (
    EXIT_BACKEND_ERROR,
    EXIT_NOT_CONFIGURED,
    EXIT_UNREADABLE_RESPONSE,
    EXIT_USAGE_LIMIT,
    main,
)

_ARGS = ["--player", "Rinku Singh", "--team", "Uttar Pradesh"]


def _run_with_fetch_error(error: Exception) -> int:
    fetcher = MagicMock()
    fetcher.fetch.side_effect = error
    with patch("cricket_stats.main.FetcherFactory.create", return_value=fetcher):
        return main(_ARGS)


class TestMainSuccess:
    def test_prints_payload(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("STATS_PROVIDER", "example")
        assert main(_ARGS) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["role"] == "Batsman"
        assert payload["stats"]["runs"] == 41

    def test_fetches_requested_player(self) -> None:
        fetcher = MagicMock()
        fetcher.fetch.return_value = StatsResult(stats=PlayerStats())
        with patch("cricket_stats.main.FetcherFactory.create", return_value=fetcher):
            main(_ARGS)
        fetcher.fetch.assert_called_once_with(
            Player(name="Rinku Singh", team="Uttar Pradesh")
        )


class TestMainFailures:
    def test_not_configured(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run_with_fetch_error(ConfigurationError("API Key not found."))
        assert code == EXIT_NOT_CONFIGURED
        assert "Not configured" in capsys.readouterr().err

    def test_usage_limit(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run_with_fetch_error(QuotaExceededError())
        assert code == EXIT_USAGE_LIMIT
        assert "try" in capsys.readouterr().err.lower()

    def test_unreadable_response(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run_with_fetch_error(ExtractionError("No JSON found", stage="brace_span"))
        assert code == EXIT_UNREADABLE_RESPONSE
        assert "Could not understand" in capsys.readouterr().err

    def test_backend_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run_with_fetch_error(BackendError("denied", status_code=403))
        assert code == EXIT_BACKEND_ERROR
        assert "denied" in capsys.readouterr().err

    def test_unknown_provider_is_not_configured(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("STATS_PROVIDER", "nonexistent")
        assert main(_ARGS) == EXIT_NOT_CONFIGURED
        assert "Unknown stats provider" in capsys.readouterr().err

    def test_unreadable_prompt_is_not_configured(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        error = StatsFetchError("Failed to load prompt template: missing")
        with patch("cricket_stats.main.FetcherFactory.create", side_effect=error):
            assert main(_ARGS) == EXIT_NOT_CONFIGURED
        assert "Failed to load prompt" in capsys.readouterr().err

    def test_exit_codes_are_distinct(self) -> None:
        codes = {EXIT_BACKEND_ERROR, EXIT_NOT_CONFIGURED, EXIT_USAGE_LIMIT, EXIT_UNREADABLE_RESPONSE}
        assert len(codes) == 4

    def test_missing_arguments_exit(self) -> None:
        with pytest.raises(SystemExit):
            main([])
