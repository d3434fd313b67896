class StatsFetchError(Exception):
    """Raised when fetching player statistics fails."""


class ConfigurationError(StatsFetchError):
    """Raised before any backend call when no credential is configured."""


class QuotaExceededError(StatsFetchError):
    """Raised when rate-limit failures outlast the attempt budget."""

    USER_MESSAGE = "API usage limit reached. Please wait a minute before trying again."

    def __init__(self, message: str = USER_MESSAGE) -> None:
        super().__init__(message)


class ExtractionError(StatsFetchError):
    """Raised when no JSON object can be recovered from the model reply."""

    def __init__(self, message: str, *, stage: str) -> None:
        super().__init__(f"{message} (last stage: {stage})")
        self.stage = stage


class BackendError(StatsFetchError):
    """Raised when the AI provider call fails.

    ``status_code`` keeps the HTTP-like code reported by the provider SDK, or
    ``None`` for transport failures that never produced one.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EmptyResponseError(BackendError):
    """Raised when the provider answered without any text."""
