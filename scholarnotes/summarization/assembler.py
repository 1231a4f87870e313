"""Packages the four summary levels into the final ProcessedContent."""

from typing import Sequence

from scholarnotes.models import KnowledgeBase, ProcessedContent


def assemble_processed_content(
    base_summaries: Sequence[str],
    section_summaries: Sequence[str],
    chapter_summaries: Sequence[str],
    executive_summary: str,
) -> ProcessedContent:
    """Combine the summary levels with an empty KnowledgeBase. No I/O."""
    return ProcessedContent(
        base_summaries=tuple(base_summaries),
        section_summaries=tuple(section_summaries),
        chapter_summaries=tuple(chapter_summaries),
        executive_summary=executive_summary,
        knowledge_base=KnowledgeBase(),
    )
