from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from cricket_stats.fetching.client_base import BaseStatsClient
from cricket_stats.fetching.exceptions import BackendError, EmptyResponseError
from cricket_stats.fetching.models import GenerationOptions, RawResponse


class GeminiClientAdapter(BaseStatsClient):
    """Stats client built on the google-genai SDK with Google Search grounding."""

    def __init__(self, *, api_key: str) -> None:
        self._client = genai.Client(api_key=api_key)

    def generate(
        self,
        *,
        model: str,
        prompt: str,
        options: GenerationOptions,
    ) -> RawResponse:
        try:
            response = self._client.models.generate_content(
                model=model,
                contents=prompt,
                config=self._build_config(options),
            )
        except errors.APIError as exc:
            raise BackendError(
                f"Gemini API error: {exc}", status_code=exc.code
            ) from exc
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise BackendError(f"Gemini network error: {exc}") from exc

        text = response.text
        if not text:
            raise EmptyResponseError("No response from AI")
        return RawResponse(text=text, source_url=_first_source_url(response))

    @staticmethod
    def _build_config(options: GenerationOptions) -> types.GenerateContentConfig:
        kwargs: dict[str, Any] = {}
        if options.enable_search:
            kwargs["tools"] = [types.Tool(google_search=types.GoogleSearch())]
        if options.system_instruction:
            kwargs["system_instruction"] = options.system_instruction
        if options.thinking_budget is not None:
            kwargs["thinking_config"] = types.ThinkingConfig(
                thinking_budget=options.thinking_budget
            )
        return types.GenerateContentConfig(**kwargs)


def _first_source_url(response: Any) -> str | None:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []
    if not chunks:
        return None
    web = getattr(chunks[0], "web", None)
    uri = getattr(web, "uri", None)
    return uri if isinstance(uri, str) and uri else None
