"""Write document stage: store the encoded GeoJSON at the destination path."""

from __future__ import annotations

import logging
from pathlib import Path

from csv_geojson.core.exceptions import ResourceError

logger = logging.getLogger("csv_geojson.activities.write_document")


class DocumentWriteError(ResourceError):
    """Raised when the output document cannot be written."""

    default_stage = "write_document"
    default_code = "DOCUMENT_WRITE_FAILED"


def write_document(payload: bytes, path: Path | str) -> int:
    """Write ``payload`` to ``path``, replacing any existing file.

    The parent directory must already exist.

    Returns:
        Number of bytes written.

    Raises:
        DocumentWriteError: If the destination cannot be opened or written.
    """
    path = Path(path)
    try:
        written = path.write_bytes(payload)
    except OSError as exc:
        msg = f"Cannot write output file {path}: {exc}"
        raise DocumentWriteError(msg, path=str(path)) from exc

    logger.info("Document written | path=%s | bytes=%d", path, written)
    return written
