"""
Upload admissibility checks.

Runs before any parsing: the file must look like a CSV (extension and, when
declared, media type) and fit within the size limit. The same checks are
re-applied by the API on the server side, so this is never the only gate.
"""
from typing import Iterable

from chartbrief import config
from chartbrief.models import ValidationResult


def has_csv_extension(name: str) -> bool:
    """Case-insensitive ``.csv`` suffix check."""
    return name.lower().endswith(config.ALLOWED_EXTENSION)


def validate_file(
    name: str,
    media_type: str,
    size_bytes: int,
    max_size_bytes: int = config.MAX_FILE_SIZE_BYTES,
    allowed_mime_types: Iterable[str] = config.ALLOWED_MIME_TYPES,
) -> ValidationResult:
    """
    Decide whether a candidate upload may be parsed.

    Rules are evaluated in order and the first failure wins:
    1. The name must end with ``.csv`` (any case)
    2. A non-empty media type must be in the allow-list
    3. The size must not exceed ``max_size_bytes`` (inclusive limit)

    Extension and media type failures share one message on purpose.

    Args:
        name: File name as chosen by the user
        media_type: Declared MIME type, may be empty
        size_bytes: File size in bytes
        max_size_bytes: Size limit (default: 3MB)
        allowed_mime_types: Accepted declared media types

    Returns:
        ValidationResult with ``valid`` and, on failure, a displayable ``error``
    """
    if not has_csv_extension(name):
        return ValidationResult(valid=False, error=config.INVALID_FILE_TYPE_MESSAGE)

    if media_type and media_type not in allowed_mime_types:
        return ValidationResult(valid=False, error=config.INVALID_FILE_TYPE_MESSAGE)

    if size_bytes > max_size_bytes:
        return ValidationResult(valid=False, error=config.FILE_TOO_LARGE_MESSAGE)

    return ValidationResult(valid=True)
