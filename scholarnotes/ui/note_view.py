"""
Collapsible notes list for one viewer tab.

Each entry is a clickable title; clicking it shows or hides the summary
underneath. Entries start collapsed, with a ▸ marker that turns into ▾ when
expanded. The widget only needs the tk.Text methods used below, so any
Text-like object works.
"""

from scholarnotes.ui.note_formatter import parse_markup

COLLAPSED_MARKER = "▸ "
EXPANDED_MARKER = "▾ "


class CollapsibleNotes:
    """
    Renders (title, summary) entries into a read-only text widget.

    Attributes:
        view: tk.Text (or compatible) widget to draw into.
        entries: (title, summary) pairs in display order.
        expanded: Titles currently showing their summary.
    """

    def __init__(self, view, entries=()):
        self.view = view
        self.entries = tuple(entries)
        self.expanded: set[str] = set()

    def set_entries(self, entries):
        """Replace the entries; everything starts collapsed again."""
        self.entries = tuple(entries)
        self.expanded.clear()
        self.render()

    def toggle(self, title: str):
        if title in self.expanded:
            self.expanded.discard(title)
        else:
            self.expanded.add(title)
        self.render()

    def is_expanded(self, title: str) -> bool:
        return title in self.expanded

    def render(self):
        view = self.view
        view.configure(state="normal")
        view.delete("1.0", "end")

        for index, (title, summary) in enumerate(self.entries):
            title_tag = f"entry-{index}"
            marker = EXPANDED_MARKER if title in self.expanded else COLLAPSED_MARKER
            view.insert("end", marker + title + "\n", ("heading", title_tag))
            view.tag_bind(title_tag, "<Button-1>", lambda _event, t=title: self.toggle(t))

            if title in self.expanded:
                for segment in parse_markup(summary):
                    view.insert("end", segment.text, segment.tags + ("body",))
                view.insert("end", "\n\n", ("body",))

        view.configure(state="disabled")
