"""Encoding detection utilities for LAS files.

Well-log files commonly use:
- UTF-8 / ASCII (modern files)
- CP1252 / Latin-1 (Western European)
- CP1251 (Russian Windows encoding)
"""

from __future__ import annotations

from pathlib import Path

import chardet

from .exceptions import LASEncodingError, LASReadError

FALLBACK_ENCODINGS = ["utf-8", "cp1252", "cp1251", "latin-1"]

# Bytes sampled for detection
DETECT_SAMPLE_SIZE = 50_000


def detect_encoding(raw: bytes) -> str:
    """Detect encoding of raw file bytes using chardet.

    Returns:
        Detected encoding name, or 'utf-8' when detection is not confident.
    """
    result = chardet.detect(raw[:DETECT_SAMPLE_SIZE])
    if result["confidence"] and result["confidence"] > 0.7:
        return result["encoding"] or "utf-8"
    return "utf-8"


def read_with_encoding(
    file_path: Path,
    encoding: str | None = None,
    max_file_size: int | None = None,
) -> tuple[str, str]:
    """Read file content with encoding detection and fallback chain.

    The file is opened once and its handle released on every exit path.

    Args:
        file_path: Path to the file.
        encoding: Explicit encoding override. If None, auto-detected.
        max_file_size: Optional maximum file size in bytes. If the file
            exceeds this limit, a ValueError is raised.

    Returns:
        Tuple of (encoding, file_content).

    Raises:
        LASReadError: If the file cannot be opened or read.
        LASEncodingError: If the explicit encoding cannot decode the file.
        ValueError: If file exceeds max_file_size.
    """
    try:
        if max_file_size is not None:
            file_size = file_path.stat().st_size
            if file_size > max_file_size:
                raise ValueError(
                    f"File size ({file_size} bytes) exceeds maximum allowed "
                    f"({max_file_size} bytes): {file_path}"
                )
        with open(file_path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise LASReadError(f"Cannot read {file_path}: {e}") from e

    if encoding is not None:
        try:
            return encoding, raw.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise LASEncodingError(
                f"Cannot decode {file_path} as {encoding}: {e}"
            ) from e

    detected = detect_encoding(raw)
    for enc in [detected, *FALLBACK_ENCODINGS]:
        try:
            return enc, raw.decode(enc)
        except (UnicodeDecodeError, LookupError):
            continue

    # latin-1 decodes any byte sequence, so this is only reached if the
    # fallback chain is changed
    return "utf-8", raw.decode("utf-8", errors="replace")
