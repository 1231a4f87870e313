"""
Summarization Package for ScholarNotes - hierarchical notes pipeline.

    from scholarnotes.summarization import get_processed_content

Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │  NotesPipeline / get_processed_content                   │
    ├──────────────────────────────────────────────────────────┤
    │  PdfTextExtractor          pages -> ContentChunks  0-20%  │
    │            ↓                                             │
    │  HierarchicalReducer       base -> section -> chapter    │
    │            ↓                    -> executive     20-100% │
    │  assemble_processed_content -> ProcessedContent          │
    └──────────────────────────────────────────────────────────┘
"""

from .assembler import assemble_processed_content
from .hierarchical_reducer import (
    HierarchicalReducer,
    group_summaries,
    join_summaries,
    summarize_base_level,
    summarize_executive,
    summarize_grouped_level,
)
from .pipeline import NotesPipeline, get_processed_content
from .progress import ProgressReporter, ProgressState
from .throttle import FixedIntervalThrottle

__all__ = [
    'NotesPipeline',
    'get_processed_content',
    'HierarchicalReducer',
    'group_summaries',
    'join_summaries',
    'summarize_base_level',
    'summarize_grouped_level',
    'summarize_executive',
    'assemble_processed_content',
    'ProgressReporter',
    'ProgressState',
    'FixedIntervalThrottle',
]
