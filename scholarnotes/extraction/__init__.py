"""
Extraction Package

Step 1 of the notes pipeline: validate the upload, then split the PDF into
page-indexed ContentChunks.
"""

from scholarnotes.extraction.pdf_text_extractor import PdfTextExtractor
from scholarnotes.extraction.upload_validator import MAX_FILE_SIZE_BYTES, validate_upload

__all__ = ['PdfTextExtractor', 'validate_upload', 'MAX_FILE_SIZE_BYTES']
