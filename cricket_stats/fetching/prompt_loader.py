from pathlib import Path

from cricket_stats.fetching.exceptions import StatsFetchError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the stats prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled stats_prompt.txt.

    Returns:
        The raw template string with ``{player_name}``, ``{team}``,
        ``{tournament}`` and ``{season_start}`` placeholders.

    Raises:
        StatsFetchError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "stats_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StatsFetchError(f"Failed to load prompt template: {exc}") from exc
