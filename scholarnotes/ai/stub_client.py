"""
Deterministic, offline SummarizationClient.

Used by the test-suite and by `scholarnotes --offline`. It never touches the
network: the "summary" is the leading words of the input, or whatever a
caller-supplied responder returns. Every call is recorded so tests can
inspect exact prompts and inputs.
"""

from dataclasses import dataclass
from typing import Callable

from .prompts import PromptKind, build_prompt
from .summarization_client import SummarizationClient


@dataclass(frozen=True)
class RecordedCall:
    """One summarize() invocation as seen by the stub."""
    text: str
    kind: PromptKind
    metadata: dict | None
    prompt: str


class StubSummarizationClient(SummarizationClient):
    """
    Stand-in for the network client.

    Args:
        responder: Optional callable(text, kind, metadata) -> str. Defaults to
                   the first `max_words` words of the input.
        fail_at: Optional map of 1-based call number -> exception to raise on
                 that call (after it has been recorded).
        max_words: Word budget for the default responder.
    """

    def __init__(
        self,
        responder: Callable[[str, PromptKind, dict | None], str] | None = None,
        fail_at: dict[int, Exception] | None = None,
        max_words: int = 40,
    ):
        self.responder = responder
        self.fail_at = dict(fail_at or {})
        self.max_words = max_words
        self.calls: list[RecordedCall] = []

    def summarize(self, text: str, kind: PromptKind, metadata: dict | None = None) -> str:
        prompt = build_prompt(text, kind, metadata)
        self.calls.append(RecordedCall(text=text, kind=kind, metadata=metadata, prompt=prompt))

        failure = self.fail_at.get(len(self.calls))
        if failure is not None:
            raise failure

        if self.responder is not None:
            return self.responder(text, kind, metadata)
        return " ".join(text.split()[:self.max_words])

    def calls_for(self, kind: PromptKind) -> list[RecordedCall]:
        """All recorded calls of one summary level, in call order."""
        return [call for call in self.calls if call.kind is kind]
