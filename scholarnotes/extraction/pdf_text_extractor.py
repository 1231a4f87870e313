"""
PDF Text Extraction Module

Turns a PDF into one ContentChunk per page, in page order. Page text is the
page's word fragments joined by single spaces, in the order the PDF content
stream delivers them (no layout reflow).

Any failure to open or read the document is an ExtractionError. It is raised
before the pipeline makes a single summarization call.
"""

import io
from pathlib import Path
from typing import BinaryIO, Callable

import pdfplumber

from scholarnotes.errors import ExtractionError
from scholarnotes.logging_config import Timer, debug_log, error, info
from scholarnotes.models import ContentChunk

PdfSource = str | Path | bytes | BinaryIO


class PdfTextExtractor:
    """
    Extracts page-indexed text from PDF documents with pdfplumber.

    Stateless; one instance can serve any number of documents.
    """

    def extract(
        self,
        document: PdfSource,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> list[ContentChunk]:
        """
        Extract one chunk per page.

        Args:
            document: Path, raw bytes, or binary file object of a PDF.
            progress_callback: Optional callback(pages_done, total_pages),
                               invoked after each page.

        Returns:
            ContentChunks in page order (empty for a PDF without pages).

        Raises:
            ExtractionError: The document is not a readable PDF.
        """
        name = self._describe(document)
        info(f"[EXTRACT] Extracting text from {name}")

        try:
            pdf = pdfplumber.open(self._as_source(document))
        except Exception as e:
            error(f"[EXTRACT] Cannot open {name}: {e}")
            raise ExtractionError(self._explain(e)) from e

        chunks: list[ContentChunk] = []
        with pdf, Timer(f"Text extraction ({name})"):
            try:
                pages = pdf.pages
            except Exception as e:
                error(f"[EXTRACT] Cannot read page tree of {name}: {e}")
                raise ExtractionError(self._explain(e)) from e

            page_count = len(pages)
            debug_log(f"[EXTRACT] {name} has {page_count} pages")

            for page_num, page in enumerate(pages, 1):
                text = self._page_text(page, page_num)
                chunks.append(ContentChunk(text=text, page=page_num))
                debug_log(f"[EXTRACT] Page {page_num}/{page_count}: {len(text)} chars")

                if progress_callback:
                    progress_callback(page_num, page_count)

        info(f"[EXTRACT] Extracted {len(chunks)} pages from {name}")
        return chunks

    def _page_text(self, page, page_num: int) -> str:
        try:
            words = page.extract_words(use_text_flow=True)
        except Exception as e:
            error(f"[EXTRACT] Failed to read page {page_num}: {e}")
            raise ExtractionError(f"Page {page_num} could not be read: {e}") from e
        return " ".join(word['text'] for word in words)

    @staticmethod
    def _as_source(document: PdfSource):
        if isinstance(document, (bytes, bytearray)):
            return io.BytesIO(document)
        if isinstance(document, Path):
            return str(document)
        return document

    @staticmethod
    def _describe(document: PdfSource) -> str:
        if isinstance(document, (str, Path)):
            return Path(document).name
        if isinstance(document, (bytes, bytearray)):
            return f"<{len(document)} bytes>"
        return getattr(document, 'name', '<stream>')

    @staticmethod
    def _explain(exc: Exception) -> str:
        """Turn a parser exception into a user-readable reason."""
        message = str(exc).lower()
        if "password" in message or "encrypted" in message:
            return "PDF is password-protected or encrypted"
        if isinstance(exc, FileNotFoundError):
            return f"PDF not found: {exc}"
        return f"File could not be parsed as a PDF: {exc}"
