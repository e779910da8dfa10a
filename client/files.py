"""Transcript file input.

Files are decoded as plain text only. ``.doc`` and ``.docx`` are accepted
but not parsed, so binary content comes through with replacement characters.
"""
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

ACCEPTED_EXTENSIONS = (".txt", ".md", ".doc", ".docx")


class UnsupportedFileError(ValueError):
    """The file extension is not one of ACCEPTED_EXTENSIONS."""


def is_accepted_file(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower() in ACCEPTED_EXTENSIONS


def read_transcript_file(path: Union[str, Path]) -> str:
    """Read a transcript file's full text content.

    Args:
        path: Path to a .txt, .md, .doc or .docx file

    Returns:
        The decoded text; undecodable bytes become U+FFFD

    Raises:
        UnsupportedFileError: If the extension is not accepted
        OSError: If the file cannot be read
    """
    path = Path(path)
    if not is_accepted_file(path):
        raise UnsupportedFileError(
            f"Unsupported file type: {path.suffix or path.name}. "
            f"Supports {', '.join(ACCEPTED_EXTENSIONS)} files"
        )

    raw = path.read_bytes()
    text = raw.decode("utf-8-sig", errors="replace")
    logger.info(f"Transcript file read: name={path.name}, length={len(text)} chars")
    return text
