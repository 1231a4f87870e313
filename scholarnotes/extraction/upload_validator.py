"""
Upload checks applied before a file reaches the pipeline.

Only single PDF files up to MAX_FILE_SIZE_MB are accepted. Rejections happen
here so no extraction or API work is spent on unusable input.
"""

import mimetypes
from pathlib import Path

from scholarnotes.config import ACCEPTED_MIME_TYPE, MAX_FILE_SIZE_MB
from scholarnotes.errors import UploadRejectedError
from scholarnotes.logging_config import debug_log, warning

MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024


def validate_upload(file_path) -> Path:
    """
    Check that `file_path` is an existing PDF within the size limit.

    Args:
        file_path: Path (or str) of the selected file.

    Returns:
        The file path as a Path.

    Raises:
        UploadRejectedError: File missing, wrong type, or too large.
    """
    path = Path(file_path)

    if not path.is_file():
        raise UploadRejectedError(f"File not found: {path}")

    mime_type, _ = mimetypes.guess_type(path.name)
    if mime_type != ACCEPTED_MIME_TYPE:
        warning(f"[UPLOAD] Rejected {path.name}: type {mime_type or 'unknown'}")
        raise UploadRejectedError(f"Only PDF files are supported. '{path.name}' is not a PDF.")

    size_bytes = path.stat().st_size
    if size_bytes > MAX_FILE_SIZE_BYTES:
        size_mb = size_bytes / (1024 * 1024)
        warning(f"[UPLOAD] Rejected {path.name}: {size_mb:.1f}MB exceeds {MAX_FILE_SIZE_MB}MB")
        raise UploadRejectedError(
            f"File is too large. Please upload a PDF smaller than {MAX_FILE_SIZE_MB} MB "
            f"(selected file is {size_mb:.1f} MB)."
        )

    debug_log(f"[UPLOAD] Accepted {path.name} ({size_bytes} bytes)")
    return path
