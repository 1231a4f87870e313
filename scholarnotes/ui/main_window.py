"""
ScholarNotes - Main Window (CustomTkinter)

Main application window with:
- Header: title + "Select PDF" button
- Progress bar with percentage label
- Error label (hidden until a run fails)
- Tabbed notes viewer: Executive Summary, Chapter Summaries,
  Section Summaries, Detailed Notes. Click an entry title to expand it.

Business logic lives in the pipeline; this window only starts a
PipelineWorker and renders what QueueMessageHandler hands it.
"""

import tkinter as tk
from queue import Empty, Queue
from tkinter import filedialog, messagebox

import customtkinter as ctk

from scholarnotes.config import APP_NAME
from scholarnotes.errors import UploadRejectedError
from scholarnotes.extraction import validate_upload
from scholarnotes.logging_config import debug_log, info
from scholarnotes.models import ProcessedContent
from scholarnotes.ui.note_formatter import tab_entries
from scholarnotes.ui.note_view import CollapsibleNotes
from scholarnotes.ui.queue_message_handler import QueueMessageHandler
from scholarnotes.ui.workers import PipelineWorker

QUEUE_POLL_MS = 100
TAB_NAMES = ("Executive Summary", "Chapter Summaries", "Section Summaries", "Detailed Notes")


class MainWindow(ctk.CTk):
    """
    Main application window for ScholarNotes.

    Layout:
    - Header row: app heading, "Select PDF" button
    - Progress row: progress bar + percentage label
    - Error label
    - Tabview with one list of collapsible entries per summary level
    """

    def __init__(self, pipeline_factory=None):
        """
        Args:
            pipeline_factory: Optional zero-argument callable returning a
                              NotesPipeline; each run gets a fresh one.
        """
        super().__init__()

        self.title(APP_NAME)
        self.geometry("1000x720")
        self.minsize(720, 520)

        self.pipeline_factory = pipeline_factory
        self._worker: PipelineWorker | None = None
        self._ui_queue: Queue | None = None
        self._queue_poll_id: str | None = None
        self.message_handler = QueueMessageHandler(self)

        self._create_header()
        self._create_progress_row()
        self._create_notes_viewer()

    # =========================================================================
    # Layout
    # =========================================================================

    def _create_header(self):
        self.header_frame = ctk.CTkFrame(self, corner_radius=0)
        self.header_frame.pack(fill="x")

        self.title_label = ctk.CTkLabel(
            self.header_frame,
            text="Interactive Notes Generator",
            font=ctk.CTkFont(size=20, weight="bold")
        )
        self.title_label.pack(side="left", padx=15, pady=10)

        self.select_btn = ctk.CTkButton(
            self.header_frame,
            text="Select PDF",
            width=120,
            command=self._select_file
        )
        self.select_btn.pack(side="right", padx=15, pady=10)

    def _create_progress_row(self):
        self.progress_frame = ctk.CTkFrame(self, fg_color="transparent")
        self.progress_frame.pack(fill="x", padx=15, pady=(10, 0))

        self.progress_bar = ctk.CTkProgressBar(self.progress_frame)
        self.progress_bar.set(0)
        self.progress_bar.pack(side="left", fill="x", expand=True, pady=5)

        self.progress_label = ctk.CTkLabel(self.progress_frame, text="", width=110)
        self.progress_label.pack(side="right", padx=(10, 0))

        self.error_label = ctk.CTkLabel(self, text="", text_color="#dc2626", anchor="w")
        self.error_label.pack(fill="x", padx=15)

    def _create_notes_viewer(self):
        self.tabview = ctk.CTkTabview(self)
        self.tabview.pack(fill="both", expand=True, padx=15, pady=(5, 15))

        self.note_views: dict[str, CollapsibleNotes] = {}
        for name in TAB_NAMES:
            tab = self.tabview.add(name)
            self.note_views[name] = CollapsibleNotes(self._create_text_view(tab))

    def _create_text_view(self, parent) -> tk.Text:
        """
        Read-only text widget with markup tags.

        tk.Text is used instead of CTkTextbox because tag fonts are needed
        for the bold, italic and heading styles.
        """
        base_size = 12
        view = tk.Text(parent, wrap="word", relief="flat", padx=10, pady=10,
                       font=("Helvetica", base_size))
        scrollbar = ctk.CTkScrollbar(parent, command=view.yview)
        view.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        view.pack(side="left", fill="both", expand=True)

        view.tag_configure("heading", font=("Helvetica", base_size + 3, "bold"),
                           foreground="#3730a3", spacing1=12, spacing3=6)
        view.tag_configure("bold", font=("Helvetica", base_size, "bold"))
        view.tag_configure("italic", font=("Helvetica", base_size, "italic"))
        view.tag_configure("body", lmargin1=20, lmargin2=20)
        view.tag_configure("list_item", lmargin1=15, lmargin2=30)
        view.tag_configure("discussion", foreground="#4f46e5",
                           font=("Helvetica", base_size, "bold"))
        view.tag_bind("heading", "<Enter>", lambda _event: view.configure(cursor="hand2"))
        view.tag_bind("heading", "<Leave>", lambda _event: view.configure(cursor=""))
        view.configure(state="disabled")
        return view

    # =========================================================================
    # File Selection & Processing
    # =========================================================================

    def _select_file(self):
        """Ask for one PDF, validate it, and start processing."""
        file_path = filedialog.askopenfilename(
            title="Select a PDF",
            filetypes=[("PDF files", "*.pdf")]
        )
        if not file_path:
            return

        try:
            path = validate_upload(file_path)
        except UploadRejectedError as e:
            messagebox.showerror("Invalid File", str(e))
            return

        self._start_processing(path)

    def _start_processing(self, path):
        info(f"[UI] Processing {path.name}")
        self.set_busy(True)
        self.clear_notes()
        self.error_label.configure(text="")
        self.message_handler.handle_progress(0.0)

        self._ui_queue = Queue()
        pipeline = self.pipeline_factory() if self.pipeline_factory else None
        self._worker = PipelineWorker(path, self._ui_queue, pipeline=pipeline)
        self._worker.start()
        self._poll_queue()

    def _poll_queue(self):
        """Drain worker messages; keep polling until the run ends."""
        self._queue_poll_id = None
        try:
            while True:
                msg_type, data = self._ui_queue.get_nowait()
                if self.message_handler.process_message(msg_type, data):
                    return
        except Empty:
            pass

        if self._worker and self._worker.is_alive():
            self._queue_poll_id = self.after(QUEUE_POLL_MS, self._poll_queue)
        elif not self._ui_queue.empty():
            # Worker exited between the drain and the liveness check
            self._queue_poll_id = self.after(0, self._poll_queue)

    # =========================================================================
    # Called by QueueMessageHandler
    # =========================================================================

    def set_busy(self, busy: bool):
        self.select_btn.configure(state="disabled" if busy else "normal")

    def show_error(self, message: str):
        debug_log(f"[UI] Showing error: {message}")
        self.error_label.configure(text=message)

    def show_notes(self, content: ProcessedContent):
        """Fill every tab with its collapsible entries."""
        for tab in tab_entries(content):
            self.note_views[tab.name].set_entries(tab.entries)
        self.tabview.set(TAB_NAMES[0])

    def clear_notes(self):
        for notes in self.note_views.values():
            notes.set_entries(())

    # =========================================================================
    # Cleanup
    # =========================================================================

    def destroy(self):
        """Stop queue polling before destroying the window."""
        if self._queue_poll_id:
            self.after_cancel(self._queue_poll_id)
            self._queue_poll_id = None
        # Worker is a daemon thread and stops with the main thread
        super().destroy()
