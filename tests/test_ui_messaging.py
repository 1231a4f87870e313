"""
Tests for PipelineWorker and QueueMessageHandler.

The worker's run() is called directly (no thread start) and the main window
is a MagicMock, so no display is needed.
"""

from queue import Queue
from unittest.mock import MagicMock

import pytest

from scholarnotes.config import GENERIC_ERROR_MESSAGE, RATE_LIMIT_MESSAGE
from scholarnotes.errors import ExtractionError, RateLimitError, ServiceError
from scholarnotes.models import ProcessedContent
from scholarnotes.ui import PipelineWorker, QueueMessageHandler


def drain(queue):
    messages = []
    while not queue.empty():
        messages.append(queue.get_nowait())
    return messages


def content():
    return ProcessedContent((), (), (), "exec")


class FakePipeline:
    """Reports two progress values, then returns or raises."""

    def __init__(self, result=None, failure=None):
        self.result = result
        self.failure = failure

    def run(self, document, on_progress=None):
        on_progress(20.0)
        on_progress(60.0)
        if self.failure:
            raise self.failure
        return self.result


class TestPipelineWorker:
    """Messages posted by the worker thread."""

    def test_success_messages(self):
        queue = Queue()
        result = content()
        PipelineWorker("lecture.pdf", queue, pipeline=FakePipeline(result=result)).run()

        assert drain(queue) == [('progress', 20.0), ('progress', 60.0), ('finished', result)]

    def test_worker_is_daemon(self):
        assert PipelineWorker("lecture.pdf", Queue(), pipeline=FakePipeline()).daemon

    @pytest.mark.parametrize("failure, expected", [
        (RateLimitError("quota"), RATE_LIMIT_MESSAGE),
        (ServiceError("500"), GENERIC_ERROR_MESSAGE),
        (ExtractionError("bad pdf"), GENERIC_ERROR_MESSAGE),
        (RuntimeError("unexpected"), GENERIC_ERROR_MESSAGE),
    ])
    def test_error_messages(self, failure, expected):
        queue = Queue()
        PipelineWorker("lecture.pdf", queue, pipeline=FakePipeline(failure=failure)).run()

        assert drain(queue)[-1] == ('error', expected)


class TestQueueMessageHandler:
    """Routing of queue messages to the window."""

    @pytest.fixture
    def window(self):
        return MagicMock()

    def test_progress_updates_bar_and_label(self, window):
        QueueMessageHandler(window).process_message('progress', 45.0)

        window.progress_bar.set.assert_called_once_with(0.45)
        window.progress_label.configure.assert_called_once_with(text="45% complete")

    def test_finished_shows_notes(self, window):
        result = content()
        done = QueueMessageHandler(window).process_message('finished', result)

        assert done is True
        window.show_notes.assert_called_once_with(result)
        window.set_busy.assert_called_once_with(False)

    def test_error_shows_message(self, window):
        done = QueueMessageHandler(window).process_message('error', RATE_LIMIT_MESSAGE)

        assert done is True
        window.show_error.assert_called_once_with(RATE_LIMIT_MESSAGE)
        window.set_busy.assert_called_once_with(False)

    def test_unknown_message_ignored(self, window):
        assert QueueMessageHandler(window).process_message('mystery', None) is False
        window.show_notes.assert_not_called()
