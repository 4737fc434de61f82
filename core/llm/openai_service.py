"""
OpenAI Service - LLM implementation using the OpenAI SDK.

Gemini is reached through its OpenAI-compatible endpoint, so the same client
talks to Gemini, OpenAI or a local Ollama server depending on ``base_url``.
"""
from typing import Dict, Any, Optional
import json
import logging
import re

import openai
from openai import OpenAI
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity import RetryCallState
from core.exceptions import LLMResponseError
from core.llm.interfaces import LLMProvider

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_MODEL = "gemini-2.0-flash"

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$")


# ---------------------------------------------------------------------------
# Retry helpers
# ---------------------------------------------------------------------------

def _log_retry(retry_state: RetryCallState) -> None:
    """Log a warning before each retry sleep."""
    exc = retry_state.outcome.exception()
    wait = retry_state.next_action.sleep if retry_state.next_action else 0
    if isinstance(exc, openai.RateLimitError):
        logger.warning(
            "Rate limit hit (attempt %s). Waiting %.1fs before retry. Details: %s",
            retry_state.attempt_number, wait, exc,
        )
    else:
        logger.warning(
            "Transient API error (attempt %s). Waiting %.1fs before retry. Details: %s",
            retry_state.attempt_number, wait, exc,
        )


def _wait_respecting_retry_after(retry_state: RetryCallState) -> float:
    """Return how long tenacity should sleep before the next attempt.

    For ``RateLimitError``: honours a ``retry-after`` header when present.
    For all other retryable errors: falls back to capped exponential backoff.
    """
    exc = retry_state.outcome.exception()
    if isinstance(exc, openai.RateLimitError):
        try:
            wait = float(exc.response.headers.get("retry-after", "") or 0)
        except (AttributeError, ValueError):
            wait = 0.0
        if wait > 0:
            return min(wait, 60)

    # Fallback: exponential backoff 2 → 4 → 8 … capped at 30s
    exp = wait_exponential(multiplier=1, min=2, max=30)
    return exp(retry_state)


def _llm_retry(**kwargs):
    """Return a tenacity @retry decorator for LLM API calls."""
    return retry(
        retry=retry_if_exception_type((
            openai.RateLimitError,
            openai.APITimeoutError,
            openai.APIConnectionError,
            openai.InternalServerError,
        )),
        wait=_wait_respecting_retry_after,
        stop=stop_after_attempt(4),
        before_sleep=_log_retry,
        reraise=True,
        **kwargs,
    )


def strip_code_fences(text: str) -> str:
    """Remove a surrounding Markdown code fence (```json ... ```), if any."""
    return _CODE_FENCE_RE.sub("", text.strip()).strip()


class OpenAIService(LLMProvider):
    """
    OpenAI-SDK LLM Service.

    Produces JSON objects from free-form prompts. Models are asked for JSON
    output and any Markdown fences they wrap it in are stripped before parsing.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.2,
    ):
        client_kwargs = {}
        if api_key:
            client_kwargs['api_key'] = api_key
        if base_url:
            client_kwargs['base_url'] = base_url

        self.client = OpenAI(**client_kwargs)
        self.model = model
        self.temperature = temperature

    @_llm_retry()
    def _complete(self, system_prompt: str, prompt: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            temperature=self.temperature,
            response_format={"type": "json_object"},
        )
        try:
            return response.choices[0].message.content or ""
        except (IndexError, AttributeError) as e:
            raise LLMResponseError(f"Empty completion from {self.model}: {e}") from e

    def generate_json(self, system_prompt: str, prompt: str) -> Dict[str, Any]:
        """Generate a JSON object.

        Transient API errors are retried; the final failure propagates as the
        SDK exception. Unparsable output raises LLMResponseError.
        """
        content = self._complete(system_prompt, prompt)
        cleaned = strip_code_fences(content)

        try:
            data = json.loads(cleaned)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse JSON response from {self.model}: {e}")
            raise LLMResponseError(f"Model returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise LLMResponseError(
                f"Expected a JSON object, got {type(data).__name__}"
            )

        logger.debug(f"LLM response keys ({self.model}): {list(data.keys())}")
        return data
