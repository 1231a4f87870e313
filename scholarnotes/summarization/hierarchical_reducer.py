"""
Hierarchical Reducer - Four-Level Summary Reduction

Reduces page text to a single executive summary in four strictly sequential
stages:

    Stage 1  Base       one summary per page            (BASE_SUMMARY, page metadata)
    Stage 2  Section    one summary per 3 base items    (SECTION_SUMMARY)
    Stage 3  Chapter    one summary per 3 section items (CHAPTER_SUMMARY)
    Stage 4  Executive  one summary over all chapters   (EXECUTIVE_SUMMARY)

Groups are consecutive and positional: group k covers items [3k, 3k+3) of the
level below, and members are joined with a blank line. Only one call is ever
in flight. The throttle pauses after every stage 1-3 call; stage 4 is
terminal and does not pause.

Each stage is a plain function over an injected SummarizationClient, so the
stages can be exercised one at a time. Errors from the client are not caught
here: the first failure aborts the whole reduction.

Usage:
    reducer = HierarchicalReducer(client, FixedIntervalThrottle())
    content = reducer.reduce(chunks, progress_reporter)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

from scholarnotes.ai import PromptKind
from scholarnotes.config import FAN_IN, SUMMARY_SEPARATOR
from scholarnotes.logging_config import Timer, debug_log, info
from scholarnotes.models import ContentChunk, ProcessedContent

from .assembler import assemble_processed_content
from .throttle import FixedIntervalThrottle

if TYPE_CHECKING:
    from scholarnotes.ai import SummarizationClient

    from .progress import ProgressReporter

StepCallback = Callable[[], None]


def group_summaries(summaries: Sequence[str]) -> list[list[str]]:
    """
    Split a summary level into consecutive groups of at most FAN_IN.

    Example:
        7 summaries -> group sizes [3, 3, 1]
    """
    return [list(summaries[start:start + FAN_IN]) for start in range(0, len(summaries), FAN_IN)]


def join_summaries(summaries: Sequence[str]) -> str:
    """Join summaries with a blank line between them."""
    return SUMMARY_SEPARATOR.join(summaries)


def summarize_base_level(
    chunks: Sequence[ContentChunk],
    client: SummarizationClient,
    throttle: FixedIntervalThrottle,
    on_step: StepCallback | None = None,
) -> list[str]:
    """Stage 1: one base summary per page, in page order."""
    summaries = []
    for chunk in chunks:
        summary = client.summarize(chunk.text, PromptKind.BASE_SUMMARY, {'page': chunk.page})
        summaries.append(summary)
        debug_log(f"[REDUCER] Base summary for page {chunk.page}: {len(summary)} chars")
        if on_step:
            on_step()
        throttle.pause()
    return summaries


def summarize_grouped_level(
    summaries: Sequence[str],
    kind: PromptKind,
    client: SummarizationClient,
    throttle: FixedIntervalThrottle,
    on_step: StepCallback | None = None,
) -> list[str]:
    """Stages 2 and 3: one summary per group of up to FAN_IN lower-level summaries."""
    results = []
    groups = group_summaries(summaries)
    for index, group in enumerate(groups, 1):
        summary = client.summarize(join_summaries(group), kind)
        results.append(summary)
        debug_log(f"[REDUCER] {kind.value} {index}/{len(groups)} from {len(group)} inputs")
        if on_step:
            on_step()
        throttle.pause()
    return results


def summarize_executive(
    chapter_summaries: Sequence[str],
    client: SummarizationClient,
    on_step: StepCallback | None = None,
) -> str:
    """Stage 4: exactly one call over every chapter summary (even if there are none)."""
    summary = client.summarize(join_summaries(chapter_summaries), PromptKind.EXECUTIVE_SUMMARY)
    if on_step:
        on_step()
    return summary


class HierarchicalReducer:
    """
    Drives the four reduction stages and reports a step after every call.

    Attributes:
        client: Summarization capability (network client or stub).
        throttle: Pause taken after each stage 1-3 call.
    """

    def __init__(self, client: SummarizationClient, throttle: FixedIntervalThrottle | None = None):
        self.client = client
        self.throttle = throttle or FixedIntervalThrottle.from_config()

    def reduce(
        self,
        chunks: Sequence[ContentChunk],
        progress: ProgressReporter | None = None,
    ) -> ProcessedContent:
        """
        Run all four stages over `chunks`.

        Args:
            chunks: Page chunks in page order.
            progress: Optional reporter; sized here and stepped after each call.

        Returns:
            ProcessedContent with every summary level.

        Raises:
            RateLimitError, ServiceError: Propagated from the client unchanged.
        """
        on_step = None
        if progress is not None:
            progress.begin_reduction(len(chunks))
            on_step = progress.step

        info(f"[REDUCER] Reducing {len(chunks)} pages")

        with Timer("Base stage"):
            base = summarize_base_level(chunks, self.client, self.throttle, on_step)

        with Timer("Section stage"):
            sections = summarize_grouped_level(
                base, PromptKind.SECTION_SUMMARY, self.client, self.throttle, on_step
            )

        with Timer("Chapter stage"):
            chapters = summarize_grouped_level(
                sections, PromptKind.CHAPTER_SUMMARY, self.client, self.throttle, on_step
            )

        with Timer("Executive stage"):
            executive = summarize_executive(chapters, self.client, on_step)

        info(
            f"[REDUCER] Produced {len(base)} base, {len(sections)} section, "
            f"{len(chapters)} chapter summaries and 1 executive summary"
        )
        return assemble_processed_content(base, sections, chapters, executive)
