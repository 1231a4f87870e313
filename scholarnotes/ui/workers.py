"""
Background Worker Module

PipelineWorker runs one notes pipeline off the Tk main thread and reports
back through a Queue. The main window polls the queue and hands messages to
QueueMessageHandler.

Messages:
    ('progress', percent: float)
    ('finished', ProcessedContent)
    ('error', user_message: str)
"""

import threading
from pathlib import Path
from queue import Queue

from scholarnotes.config import GENERIC_ERROR_MESSAGE
from scholarnotes.errors import NotesPipelineError, user_facing_message
from scholarnotes.logging_config import debug_log, error
from scholarnotes.summarization import NotesPipeline


class PipelineWorker(threading.Thread):
    """
    Background thread for a single document.

    Attributes:
        file_path: PDF to process (already validated).
        ui_queue: Queue for communication with the main UI thread.
        pipeline: Injectable NotesPipeline; built from config when omitted.
    """

    def __init__(self, file_path, ui_queue: Queue, pipeline: NotesPipeline | None = None):
        super().__init__(daemon=True)
        self.file_path = Path(file_path)
        self.ui_queue = ui_queue
        self.pipeline = pipeline

    def _post_progress(self, percent: float):
        self.ui_queue.put(('progress', percent))

    def run(self):
        debug_log(f"[UI] Starting pipeline for {self.file_path.name}")
        try:
            pipeline = self.pipeline or NotesPipeline()
            content = pipeline.run(self.file_path, on_progress=self._post_progress)
        except NotesPipelineError as e:
            self.ui_queue.put(('error', user_facing_message(e)))
        except Exception as e:
            error(f"[UI] Unexpected failure processing {self.file_path.name}: {e}", exc_info=True)
            self.ui_queue.put(('error', GENERIC_ERROR_MESSAGE))
        else:
            debug_log(f"[UI] Finished {self.file_path.name}")
            self.ui_queue.put(('finished', content))
