"""
Notes Pipeline - Entry Point

    get_processed_content(file, on_progress) -> ProcessedContent

Runs text extraction (0-20% of progress) followed by hierarchical reduction
(20-100%). A run either returns a complete ProcessedContent or raises one of
ExtractionError, RateLimitError or ServiceError; partial results never leave
this module. Runs share no state, so two documents can be processed back to
back (or from separate threads) without interfering.

Retries, backoff and cancellation are not handled here; callers that want
them wrap get_processed_content.
"""

from __future__ import annotations

from typing import Callable

from scholarnotes.ai import ChatCompletionClient, SummarizationClient
from scholarnotes.errors import NotesPipelineError
from scholarnotes.extraction import PdfTextExtractor
from scholarnotes.extraction.pdf_text_extractor import PdfSource
from scholarnotes.logging_config import Timer, error, info
from scholarnotes.models import ProcessedContent

from .hierarchical_reducer import HierarchicalReducer
from .progress import ProgressReporter
from .throttle import FixedIntervalThrottle

ProgressCallback = Callable[[float], None]


class NotesPipeline:
    """
    Extraction followed by hierarchical reduction.

    Attributes:
        extractor: PdfTextExtractor for page text.
        reducer: HierarchicalReducer over the configured client.
    """

    def __init__(
        self,
        client: SummarizationClient | None = None,
        throttle: FixedIntervalThrottle | None = None,
        extractor: PdfTextExtractor | None = None,
    ):
        """
        Args:
            client: Summarization capability. Defaults to ChatCompletionClient
                    built from config and environment.
            throttle: Inter-call throttle. Defaults to the configured interval.
            extractor: Text extractor. Defaults to PdfTextExtractor.
        """
        self.extractor = extractor or PdfTextExtractor()
        self.reducer = HierarchicalReducer(
            client or ChatCompletionClient(),
            throttle or FixedIntervalThrottle.from_config(),
        )

    def run(self, document: PdfSource, on_progress: ProgressCallback | None = None) -> ProcessedContent:
        """
        Process one document end to end.

        Args:
            document: Path, bytes or binary file object of a PDF.
            on_progress: Optional callback(percent) with non-decreasing values
                         in [0, 100]; the last call of a successful run is 100.

        Returns:
            ProcessedContent for the document.

        Raises:
            ExtractionError: Document unreadable (no summarization calls made).
            RateLimitError: Service quota hit; the run is abandoned.
            ServiceError: Any other service failure; the run is abandoned.
        """
        progress = ProgressReporter(on_progress)

        try:
            with Timer("Notes pipeline"):
                chunks = self.extractor.extract(document, progress.report_extraction)
                content = self.reducer.reduce(chunks, progress)
        except NotesPipelineError as e:
            error(f"[PIPELINE] Run failed at {progress.percent:.0f}%: {type(e).__name__}: {e}")
            raise

        progress.finish()
        info("[PIPELINE] Run complete")
        return content


def get_processed_content(
    file: PdfSource,
    on_progress: ProgressCallback | None = None,
    client: SummarizationClient | None = None,
    throttle: FixedIntervalThrottle | None = None,
) -> ProcessedContent:
    """Build a fresh NotesPipeline and run it over `file`."""
    return NotesPipeline(client=client, throttle=throttle).run(file, on_progress)
