import httpx
import openai

from cricket_stats.fetching.client_base import BaseStatsClient
from cricket_stats.fetching.exceptions import BackendError, EmptyResponseError
from cricket_stats.fetching.models import GenerationOptions, RawResponse
from cricket_stats.logging.logger import Log


class OpenAIClientAdapter(BaseStatsClient):
    """Stats client built on the OpenAI-compatible chat API.

    Chat completions have no search grounding, so replies carry no source and
    ``enable_search`` and ``thinking_budget`` are ignored.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate(
        self,
        *,
        model: str,
        prompt: str,
        options: GenerationOptions,
    ) -> RawResponse:
        if options.enable_search:
            Log.debug("Search grounding is not available for chat completions")
        messages: list[dict[str, str]] = []
        if options.system_instruction:
            messages.append({"role": "system", "content": options.system_instruction})
        messages.append({"role": "user", "content": prompt})

        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=messages,
            )
        except openai.APIStatusError as exc:
            raise BackendError(
                f"AI provider API error: {exc}", status_code=exc.status_code
            ) from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise BackendError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise BackendError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise EmptyResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise EmptyResponseError("No response from AI")
        return RawResponse(text=content)
