"""
Data types passed between the pipeline stages.

Key Types:
    ContentChunk - text of one PDF page
    KnowledgeBase - reserved concept/theme/reference store (always empty for now)
    ProcessedContent - every summary level of one document

All are frozen: nothing a caller receives can be mutated after the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ContentChunk:
    """
    Text extracted from a single PDF page.

    Attributes:
        text: Page text fragments joined with single spaces.
        page: 1-based page number.
    """
    text: str
    page: int

    def __post_init__(self):
        if self.page < 1:
            raise ValueError(f"Page numbers start at 1, got {self.page}")


def _empty_concepts() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class KnowledgeBase:
    """
    Placeholder for concept extraction.

    Always present in ProcessedContent so consumers can rely on its shape;
    nothing populates it yet.
    """
    concepts: Mapping[str, str] = field(default_factory=_empty_concepts)
    themes: tuple[str, ...] = ()
    references: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.concepts or self.themes or self.references)

    def to_dict(self) -> dict:
        return {
            'concepts': dict(self.concepts),
            'themes': list(self.themes),
            'references': list(self.references),
        }


@dataclass(frozen=True)
class ProcessedContent:
    """
    Final artifact of one successful pipeline run.

    Attributes:
        base_summaries: One summary per page, in page order.
        section_summaries: One summary per group of up to 3 base summaries.
        chapter_summaries: One summary per group of up to 3 section summaries.
        executive_summary: Single summary over all chapter summaries.
        knowledge_base: Reserved, empty.
    """
    base_summaries: tuple[str, ...]
    section_summaries: tuple[str, ...]
    chapter_summaries: tuple[str, ...]
    executive_summary: str
    knowledge_base: KnowledgeBase = field(default_factory=KnowledgeBase)

    def to_dict(self) -> dict:
        """JSON-ready representation for export."""
        return {
            'base_summaries': list(self.base_summaries),
            'section_summaries': list(self.section_summaries),
            'chapter_summaries': list(self.chapter_summaries),
            'executive_summary': self.executive_summary,
            'knowledge_base': self.knowledge_base.to_dict(),
        }
