"""
CSV upload ingestion.

Handles reading uploaded CSV files: reads at most one byte past the size limit,
runs the admissibility checks on those bytes and decodes them into the
``AnalyzeRequest`` payload a client sends to ``POST /api/analyze``.
"""
import logging

from fastapi import UploadFile

from chartbrief import config
from chartbrief.exceptions import FileRejectedError
from chartbrief.models import AnalyzeRequest
from chartbrief.services.file_validator import validate_file

logger = logging.getLogger(__name__)


def decode_csv_bytes(content: bytes) -> str:
    """
    Decode uploaded bytes as UTF-8.

    errors="replace" keeps "dirty" files parseable; a leading BOM is dropped
    so it does not end up in the first header.
    """
    return content.decode("utf-8-sig", errors="replace")


def admit_csv_bytes(name: str, media_type: str, content: bytes) -> str:
    """
    Check an upload and return its decoded text.

    Raises:
        FileRejectedError: if the file fails the admissibility checks
    """
    verdict = validate_file(name, media_type or "", len(content))
    if not verdict.valid:
        logger.info("Rejected upload %r: %s", name, verdict.error)
        raise FileRejectedError(verdict.error)
    return decode_csv_bytes(content)


def read_upload_request(file: UploadFile) -> AnalyzeRequest:
    """
    Read an uploaded CSV file into an analysis request.

    At most one byte past the size limit is read, which is enough for the
    size check to reject oversized uploads without buffering them.

    Args:
        file: FastAPI UploadFile object containing the CSV file

    Returns:
        AnalyzeRequest with the full decoded CSV text and the upload's file name

    Raises:
        FileRejectedError: if the file fails the admissibility checks
    """
    content = file.file.read(config.MAX_FILE_SIZE_BYTES + 1)
    # Reset file pointer so the file can be re-read if needed
    file.file.seek(0)
    return build_analyze_request(file.filename or "", file.content_type or "", content)


def build_analyze_request(name: str, media_type: str, content: bytes) -> AnalyzeRequest:
    """
    Build the payload for ``POST /api/analyze`` from a selected file.

    The payload carries the full CSV text and the original file name. Row
    truncation and name sanitization happen later, when the server builds
    the prompt.

    Raises:
        FileRejectedError: if the file fails the admissibility checks
    """
    text = admit_csv_bytes(name, media_type, content)
    return AnalyzeRequest(csv_text=text, file_name=name)
