"""
Note Formatter

Light markup applied to summary text before display:

    **x**                  -> bold
    *x*                    -> italic
    "- item" (line start)  -> list item
    "Discussion Question:" -> emphasised line

format_html() produces HTML for exported reports. parse_markup() produces
styled segments for the Tk text widget in the main window. tab_entries()
decides which summaries go in which viewer tab and how each one is titled.
"""

import html
import re
from dataclasses import dataclass

from scholarnotes.models import ProcessedContent

BOLD_PATTERN = re.compile(r'\*\*(.*?)\*\*')
ITALIC_PATTERN = re.compile(r'\*(.*?)\*')
LIST_ITEM_PATTERN = re.compile(r'^- (.*)', re.MULTILINE)
DISCUSSION_PATTERN = re.compile(r'^(Discussion Question:.*)', re.MULTILINE)
INLINE_PATTERN = re.compile(r'\*\*(.+?)\*\*|\*(.+?)\*')

LIST_ITEM_PREFIX = "- "
DISCUSSION_PREFIX = "Discussion Question:"
BULLET = "• "


@dataclass(frozen=True)
class MarkupSegment:
    """A run of text sharing the same display tags."""
    text: str
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class NoteTab:
    """One viewer tab: a name and its (title, summary) entries."""
    name: str
    entries: tuple[tuple[str, str], ...]


def format_html(text: str) -> str:
    """
    Render summary markup as an HTML fragment.

    Text is HTML-escaped first; the substitutions run in the order bold,
    italic, list item, discussion question.
    """
    formatted = html.escape(text, quote=False)
    formatted = BOLD_PATTERN.sub(r'<strong>\1</strong>', formatted)
    formatted = ITALIC_PATTERN.sub(r'<em>\1</em>', formatted)
    formatted = LIST_ITEM_PATTERN.sub(r'<li>\1</li>', formatted)
    formatted = DISCUSSION_PATTERN.sub(r'<p class="discussion-question">\1</p>', formatted)
    return formatted


def parse_markup(text: str) -> list[MarkupSegment]:
    """
    Split summary text into tagged segments for a Tk text widget.

    Line tags ('list_item', 'discussion') apply to every segment of the line;
    inline tags ('bold', 'italic') apply to the marked run only. List markers
    are replaced with a bullet.
    """
    segments: list[MarkupSegment] = []
    lines = text.split('\n')

    for line_number, line in enumerate(lines):
        line_tags: tuple[str, ...] = ()
        if line.startswith(LIST_ITEM_PREFIX):
            line = BULLET + line[len(LIST_ITEM_PREFIX):]
            line_tags += ('list_item',)
        elif line.startswith(DISCUSSION_PREFIX):
            line_tags += ('discussion',)

        position = 0
        for match in INLINE_PATTERN.finditer(line):
            if match.start() > position:
                segments.append(MarkupSegment(line[position:match.start()], line_tags))
            if match.group(1) is not None:
                segments.append(MarkupSegment(match.group(1), line_tags + ('bold',)))
            else:
                segments.append(MarkupSegment(match.group(2), line_tags + ('italic',)))
            position = match.end()
        if position < len(line):
            segments.append(MarkupSegment(line[position:], line_tags))

        if line_number < len(lines) - 1:
            segments.append(MarkupSegment('\n', line_tags))

    return segments


def tab_entries(content: ProcessedContent) -> list[NoteTab]:
    """Viewer tabs in display order, each with titled summaries."""
    return [
        NoteTab("Executive Summary", (("Executive Summary", content.executive_summary),)),
        NoteTab("Chapter Summaries", tuple(
            (f"Chapter {i} Summary", summary)
            for i, summary in enumerate(content.chapter_summaries, 1)
        )),
        NoteTab("Section Summaries", tuple(
            (f"Section {i} Summary", summary)
            for i, summary in enumerate(content.section_summaries, 1)
        )),
        NoteTab("Detailed Notes", tuple(
            (f"Detailed Notes {i}", summary)
            for i, summary in enumerate(content.base_summaries, 1)
        )),
    ]


def render_html_report(content: ProcessedContent, title: str = "Interactive Notes") -> str:
    """A standalone HTML page with one section per viewer tab."""
    parts = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{html.escape(title)}</title>",
        "<style>",
        "body { font-family: sans-serif; max-width: 60em; margin: 2em auto; }",
        "h2 { color: #3730a3; }",
        "h3 { color: #4338ca; }",
        ".discussion-question { color: #4f46e5; font-weight: 600; }",
        ".note { white-space: pre-wrap; border-left: 2px solid #c7d2fe; padding-left: 1em; }",
        "</style>",
        "</head>",
        "<body>",
        f"<h1>{html.escape(title)}</h1>",
    ]
    for tab in tab_entries(content):
        parts.append(f"<h2>{html.escape(tab.name)}</h2>")
        for entry_title, summary in tab.entries:
            parts.append(f"<h3>{html.escape(entry_title)}</h3>")
            parts.append(f'<div class="note">{format_html(summary)}</div>')
    parts.extend(["</body>", "</html>"])
    return "\n".join(parts)
