"""
Summarization Client for ScholarNotes
Wraps the external language-model service behind one operation:

    summarize(text, kind, metadata) -> str

ChatCompletionClient talks to any OpenAI-compatible /chat/completions endpoint
over the requests library. Each call is a single-turn request (one user
message, no system prompt, no history) and issues exactly one HTTP request.
Retry policy belongs to the caller.

Failure mapping:
- HTTP 429, or an error body with code 'rate_limit_exceeded' / type 'tokens'
  -> RateLimitError
- anything else that is not a usable completion -> ServiceError
- an empty completion is NOT a failure; it yields ""
"""

import time
from abc import ABC, abstractmethod

import requests

from ..config import (
    API_TIMEOUT_SECONDS,
    OPENAI_API_BASE,
    OPENAI_MODEL_NAME,
    SUMMARY_MAX_TOKENS,
    SUMMARY_TEMPERATURE,
    get_api_key,
    get_setting,
)
from ..errors import RateLimitError, ServiceError
from ..logging_config import debug_log, warning
from .prompts import PromptKind, build_prompt

RATE_LIMIT_CODES = {'rate_limit_exceeded'}
RATE_LIMIT_TYPES = {'tokens', 'requests'}


class SummarizationClient(ABC):
    """
    Capability interface for the summary hierarchy.

    The reducer only ever depends on this interface, so the whole reduction
    algorithm runs against StubSummarizationClient in tests.
    """

    @abstractmethod
    def summarize(self, text: str, kind: PromptKind, metadata: dict | None = None) -> str:
        """
        Summarize `text` at the level given by `kind`.

        Args:
            text: Page text or joined lower-level summaries.
            kind: Summary level (selects the prompt template).
            metadata: Optional extras; base summaries need {'page': int}.

        Returns:
            The summary text, or "" if the model produced nothing.

        Raises:
            RateLimitError: Upstream quota or rate limit hit.
            ServiceError: Any other upstream failure.
        """


class ChatCompletionClient(SummarizationClient):
    """
    requests-based client for an OpenAI-compatible chat completions API.

    Attributes:
        api_base: Base URL up to and including the version segment.
        model_name: Model identifier sent with every request.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_base: str | None = None,
        model_name: str | None = None,
        timeout: float | None = None,
    ):
        self.api_key = api_key if api_key is not None else get_api_key()
        self.api_base = (api_base or get_setting('api_base', OPENAI_API_BASE)).rstrip('/')
        self.model_name = model_name or get_setting('model', OPENAI_MODEL_NAME)
        self.timeout = timeout if timeout is not None else get_setting('timeout_seconds', API_TIMEOUT_SECONDS)

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/chat/completions"

    def summarize(self, text: str, kind: PromptKind, metadata: dict | None = None) -> str:
        prompt = build_prompt(text, kind, metadata)

        if not self.api_key:
            raise ServiceError(
                "No API key configured. Set OPENAI_API_KEY in the environment or a .env file."
            )

        payload = {
            "model": self.model_name,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": SUMMARY_TEMPERATURE,
            "max_tokens": SUMMARY_MAX_TOKENS,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        debug_log(f"[CLIENT] {kind.value}: model={self.model_name}, prompt length={len(prompt)} chars")
        debug_log("[CLIENT] ===== PROMPT START =====")
        debug_log(prompt)
        debug_log("[CLIENT] ===== PROMPT END =====")

        start_time = time.time()
        try:
            response = requests.post(self.endpoint, json=payload, headers=headers, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise ServiceError(f"Summarization request timed out after {self.timeout} seconds") from e
        except requests.exceptions.ConnectionError as e:
            raise ServiceError(f"Cannot connect to summarization service at {self.api_base}") from e
        except requests.exceptions.RequestException as e:
            raise ServiceError(f"Summarization request failed: {e}") from e

        self._raise_for_status(response)
        content = self._parse_content(response)

        debug_log(
            f"[CLIENT] {kind.value} complete in {time.time() - start_time:.2f}s, "
            f"{len(content)} chars returned"
        )
        return content

    def _raise_for_status(self, response: requests.Response) -> None:
        """Translate a non-success response into the error taxonomy."""
        if 200 <= response.status_code < 300:
            return

        error_body = self._error_body(response)
        message = error_body.get('message') or response.text[:400]

        if response.status_code == 429 or self._is_quota_error(error_body):
            retry_after = self._retry_after(response)
            warning(f"[CLIENT] Rate limit reported by service (status {response.status_code})")
            raise RateLimitError(f"Rate limit exceeded: {message}", retry_after=retry_after)

        raise ServiceError(
            f"Summarization service returned status {response.status_code}: {message}",
            status_code=response.status_code,
        )

    @staticmethod
    def _error_body(response: requests.Response) -> dict:
        try:
            body = response.json()
        except ValueError:
            return {}
        if isinstance(body, dict) and isinstance(body.get('error'), dict):
            return body['error']
        return {}

    @staticmethod
    def _is_quota_error(error_body: dict) -> bool:
        return (
            error_body.get('code') in RATE_LIMIT_CODES
            or error_body.get('type') in RATE_LIMIT_TYPES
        )

    @staticmethod
    def _retry_after(response: requests.Response) -> float | None:
        value = response.headers.get('Retry-After')
        if value is None:
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _parse_content(response: requests.Response) -> str:
        """Pull the first choice's message content out of a completion payload."""
        try:
            data = response.json()
        except ValueError as e:
            raise ServiceError("Summarization service returned a non-JSON payload") from e

        try:
            message = data["choices"][0]["message"]
        except (KeyError, IndexError, TypeError) as e:
            raise ServiceError(f"Malformed completion payload: {str(data)[:400]}") from e

        content = message.get("content") if isinstance(message, dict) else None
        if content is None:
            return ""
        if not isinstance(content, str):
            raise ServiceError(f"Unexpected completion content type: {type(content).__name__}")
        return content
