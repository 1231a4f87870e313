"""
ScholarNotes AI Module
Summarization capability used by the hierarchical reducer.

- SummarizationClient: the interface the pipeline depends on
- ChatCompletionClient: OpenAI-compatible HTTP client (requests)
- StubSummarizationClient: deterministic offline client for tests and --offline
"""

from .prompts import PROMPT_TEMPLATES, PromptKind, build_prompt
from .stub_client import RecordedCall, StubSummarizationClient
from .summarization_client import ChatCompletionClient, SummarizationClient

__all__ = [
    'PROMPT_TEMPLATES',
    'PromptKind',
    'build_prompt',
    'SummarizationClient',
    'ChatCompletionClient',
    'StubSummarizationClient',
    'RecordedCall',
]
