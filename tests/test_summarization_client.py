"""
Tests for the summarization clients and prompt templates.

requests.post is patched throughout; no network access is needed.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from scholarnotes.ai import (
    ChatCompletionClient,
    PromptKind,
    StubSummarizationClient,
    build_prompt,
)
from scholarnotes.errors import RateLimitError, ServiceError


def make_response(status_code=200, body=None, headers=None, json_error=False):
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.text = str(body)
    if json_error:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = body
    return response


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def client():
    return ChatCompletionClient(api_key="sk-test", api_base="https://llm.example/v1",
                                model_name="test-model", timeout=30)


class TestPrompts:
    """Exact prompt wording for each level."""

    def test_base_prompt(self):
        prompt = build_prompt("Photosynthesis converts light.", PromptKind.BASE_SUMMARY, {'page': 3})
        assert prompt == "Summarize the following text from page 3:\n\nPhotosynthesis converts light."

    def test_section_prompt(self):
        assert build_prompt("x", PromptKind.SECTION_SUMMARY) == (
            "Create a concise summary of the following section:\n\nx"
        )

    def test_chapter_prompt(self):
        assert build_prompt("x", PromptKind.CHAPTER_SUMMARY) == (
            "Provide a comprehensive summary of this chapter:\n\nx"
        )

    def test_executive_prompt(self):
        assert build_prompt("x", PromptKind.EXECUTIVE_SUMMARY) == (
            "Create an executive summary of the entire document based on these chapter summaries:\n\nx"
        )

    def test_base_prompt_requires_page(self):
        with pytest.raises(ValueError):
            build_prompt("x", PromptKind.BASE_SUMMARY)


class TestChatCompletionClient:
    """Request shape and error mapping."""

    @patch('scholarnotes.ai.summarization_client.requests.post')
    def test_request_payload(self, mock_post, client):
        mock_post.return_value = make_response(body=completion("A summary."))

        result = client.summarize("Page text", PromptKind.BASE_SUMMARY, {'page': 1})

        assert result == "A summary."
        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        assert args[0] == "https://llm.example/v1/chat/completions"
        payload = kwargs['json']
        assert payload['model'] == "test-model"
        assert payload['temperature'] == 0.5
        assert payload['max_tokens'] == 500
        assert payload['messages'] == [
            {"role": "user", "content": "Summarize the following text from page 1:\n\nPage text"}
        ]
        assert kwargs['headers']['Authorization'] == "Bearer sk-test"
        assert kwargs['timeout'] == 30

    def test_trailing_slash_trimmed(self):
        client = ChatCompletionClient(api_key="k", api_base="https://llm.example/v1/")
        assert client.endpoint == "https://llm.example/v1/chat/completions"

    @patch('scholarnotes.ai.summarization_client.requests.post')
    def test_429_is_rate_limit(self, mock_post, client):
        mock_post.return_value = make_response(
            status_code=429,
            body={"error": {"message": "Slow down"}},
            headers={"Retry-After": "12"},
        )

        with pytest.raises(RateLimitError) as exc_info:
            client.summarize("x", PromptKind.SECTION_SUMMARY)

        assert exc_info.value.retry_after == 12.0

    @patch('scholarnotes.ai.summarization_client.requests.post')
    def test_quota_error_body_is_rate_limit(self, mock_post, client):
        mock_post.return_value = make_response(
            status_code=400,
            body={"error": {"message": "Quota", "type": "tokens", "code": "rate_limit_exceeded"}},
        )

        with pytest.raises(RateLimitError):
            client.summarize("x", PromptKind.CHAPTER_SUMMARY)

    @patch('scholarnotes.ai.summarization_client.requests.post')
    def test_server_error_is_service_error(self, mock_post, client):
        mock_post.return_value = make_response(status_code=500, body={"error": {"message": "down"}})

        with pytest.raises(ServiceError) as exc_info:
            client.summarize("x", PromptKind.SECTION_SUMMARY)

        assert exc_info.value.status_code == 500
        assert not isinstance(exc_info.value, RateLimitError)

    @patch('scholarnotes.ai.summarization_client.requests.post')
    def test_timeout_is_service_error(self, mock_post, client):
        mock_post.side_effect = requests.exceptions.Timeout()

        with pytest.raises(ServiceError) as exc_info:
            client.summarize("x", PromptKind.SECTION_SUMMARY)

        assert isinstance(exc_info.value.__cause__, requests.exceptions.Timeout)

    @patch('scholarnotes.ai.summarization_client.requests.post')
    def test_connection_error_is_service_error(self, mock_post, client):
        mock_post.side_effect = requests.exceptions.ConnectionError()

        with pytest.raises(ServiceError):
            client.summarize("x", PromptKind.SECTION_SUMMARY)

    @patch('scholarnotes.ai.summarization_client.requests.post')
    def test_null_content_is_empty_summary(self, mock_post, client):
        mock_post.return_value = make_response(body=completion(None))
        assert client.summarize("x", PromptKind.EXECUTIVE_SUMMARY) == ""

    @patch('scholarnotes.ai.summarization_client.requests.post')
    def test_missing_choices_is_service_error(self, mock_post, client):
        mock_post.return_value = make_response(body={"id": "cmpl-1"})

        with pytest.raises(ServiceError):
            client.summarize("x", PromptKind.SECTION_SUMMARY)

    @patch('scholarnotes.ai.summarization_client.requests.post')
    def test_non_json_is_service_error(self, mock_post, client):
        mock_post.return_value = make_response(json_error=True)

        with pytest.raises(ServiceError):
            client.summarize("x", PromptKind.SECTION_SUMMARY)

    @patch('scholarnotes.ai.summarization_client.requests.post')
    def test_missing_api_key(self, mock_post, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        client = ChatCompletionClient(api_base="https://llm.example/v1")

        with pytest.raises(ServiceError):
            client.summarize("x", PromptKind.SECTION_SUMMARY)

        mock_post.assert_not_called()


class TestStubSummarizationClient:
    """The offline client used by tests and --offline."""

    def test_default_response_truncates_words(self):
        stub = StubSummarizationClient(max_words=3)
        assert stub.summarize("one two three four", PromptKind.SECTION_SUMMARY) == "one two three"

    def test_failure_recorded_before_raising(self):
        stub = StubSummarizationClient(fail_at={1: ServiceError("nope")})

        with pytest.raises(ServiceError):
            stub.summarize("x", PromptKind.SECTION_SUMMARY)

        assert len(stub.calls) == 1
