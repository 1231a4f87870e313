"""
ScholarNotes UI Package

Only the toolkit-free pieces are imported here so they can be used headless.
MainWindow is imported from scholarnotes.ui.main_window when the GUI starts.
"""

from scholarnotes.ui.note_formatter import (
    MarkupSegment,
    NoteTab,
    format_html,
    parse_markup,
    render_html_report,
    tab_entries,
)
from scholarnotes.ui.note_view import CollapsibleNotes
from scholarnotes.ui.queue_message_handler import QueueMessageHandler
from scholarnotes.ui.workers import PipelineWorker

__all__ = [
    'MarkupSegment',
    'NoteTab',
    'format_html',
    'parse_markup',
    'render_html_report',
    'tab_entries',
    'CollapsibleNotes',
    'QueueMessageHandler',
    'PipelineWorker',
]
