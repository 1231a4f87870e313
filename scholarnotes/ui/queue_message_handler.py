"""
Queue Message Handler Module

Routes messages from PipelineWorker to widget updates on the main window.
This module does UI updates only; it never starts or stops work.

Message Types Handled:
- progress: update progress bar and percentage label
- finished: show the generated notes
- error: show the user-facing error and leave the busy state
"""

from scholarnotes.logging_config import debug_log


class QueueMessageHandler:
    """
    Routes queue messages to the main window.

    The window is expected to provide:
        progress_bar.set(fraction), progress_label.configure(text=...),
        show_notes(content), show_error(message), set_busy(bool)

    Attributes:
        main_window: Reference to MainWindow instance
    """

    def __init__(self, main_window):
        self.main_window = main_window
        self._handlers = {
            'progress': self.handle_progress,
            'finished': self.handle_finished,
            'error': self.handle_error,
        }

    def handle_progress(self, percent: float):
        """Handle 'progress' message; the value is clamped for display."""
        percent = min(max(percent, 0.0), 100.0)
        self.main_window.progress_bar.set(percent / 100.0)
        self.main_window.progress_label.configure(text=f"{percent:.0f}% complete")

    def handle_finished(self, content):
        """Handle 'finished' message with the ProcessedContent."""
        self.handle_progress(100.0)
        self.main_window.set_busy(False)
        self.main_window.show_notes(content)

    def handle_error(self, message: str):
        """Handle 'error' message with a user-facing explanation."""
        self.main_window.set_busy(False)
        self.main_window.show_error(message)

    def process_message(self, message_type: str, data) -> bool:
        """
        Dispatch one queue message.

        Returns:
            True when the message ends the run ('finished' or 'error').
        """
        handler = self._handlers.get(message_type)
        if handler is None:
            debug_log(f"[UI] Ignoring unknown queue message: {message_type}")
            return False
        handler(data)
        return message_type in ('finished', 'error')
