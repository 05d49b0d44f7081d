import logging
from pathlib import Path
from typing import Optional, Union

import chardet

from ..analyzers.base import Document
from ..errors import DocumentReadError, ResultWriteError

logger = logging.getLogger(__name__)

MIN_DETECTION_CONFIDENCE = 0.5


def _guess_encoding(raw_bytes: bytes) -> Optional[str]:
    """Best-effort chardet guess used only to explain decode failures."""
    detected = chardet.detect(raw_bytes)
    if detected["encoding"] and detected["confidence"] >= MIN_DETECTION_CONFIDENCE:
        return detected["encoding"]
    return None


def read_document(file_path: Union[str, Path], encoding: str = "utf-8") -> Document:
    """
    Load a text file as a Document.

    Content is decoded strictly and a trailing newline is appended. Any
    OS or decode failure is raised as DocumentReadError chained to the
    original exception.
    """
    path = Path(file_path)
    try:
        raw_bytes = path.read_bytes()
    except OSError as e:
        raise DocumentReadError(f"Cannot read {path}: {e.strerror or e}") from e

    try:
        text = raw_bytes.decode(encoding)
    except UnicodeDecodeError as e:
        guess = _guess_encoding(raw_bytes)
        hint = f" (looks like {guess})" if guess else ""
        raise DocumentReadError(
            f"Cannot decode {path} as {encoding}{hint}: {e.reason} at byte {e.start}"
        ) from e

    logger.debug(f"Loaded {path} ({len(raw_bytes)} bytes)")
    return Document(source_path=str(path), raw_text=text + "\n")


def write_result(file_path: Union[str, Path], text: str, encoding: str = "utf-8") -> Path:
    """Write text as the entire content of file_path, without a trailing newline."""
    path = Path(file_path)
    try:
        path.write_bytes(text.encode(encoding))
    except OSError as e:
        raise ResultWriteError(f"Cannot write {path}: {e.strerror or e}") from e

    logger.debug(f"Wrote result to {path}")
    return path
