"""LAS file reader - main entry point."""

from __future__ import annotations

import dataclasses
import warnings
from pathlib import Path

from .encoding import read_with_encoding
from .exceptions import LASReadError
from .models import LASDocument
from .parser import LASParser


def read_las_file(
    file_path: str | Path,
    encoding: str | None = None,
    max_file_size: int | None = None,
) -> LASDocument:
    """Read a LAS 2.0 file and return the parsed document.

    Args:
        file_path: Path to LAS file.
        encoding: Optional encoding override. If None, auto-detected.
        max_file_size: Optional maximum file size in bytes. If the file
            exceeds this limit, a ValueError is raised.

    Returns:
        Immutable LASDocument with source_file and encoding filled in.

    Raises:
        LASReadError: If file cannot be read.
        LASEncodingError: If the explicit encoding cannot decode the file.
        LASParseError: If file content cannot be parsed.
        ValueError: If file exceeds max_file_size.

    Warns:
        UserWarning: If the declared LAS version is not 2.x.

    Example:
        >>> las = read_las_file("example1.las")
        >>> las.headers()
        ['DEPT', 'DT', 'RHOB', 'NPHI', 'SFLU', 'SFLA', 'ILM', 'ILD']
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise LASReadError(f"File not found: {file_path}")

    if not file_path.is_file():
        raise LASReadError(f"Not a file: {file_path}")

    detected_encoding, content = read_with_encoding(file_path, encoding, max_file_size)

    las = LASParser().parse(content)
    _check_version(las)
    return dataclasses.replace(las, source_file=str(file_path), encoding=detected_encoding)


def read_las_string(content: str) -> LASDocument:
    """Parse LAS 2.0 content already held in memory.

    Raises:
        LASParseError: If content cannot be parsed.

    Warns:
        UserWarning: If the declared LAS version is not 2.x.
    """
    las = LASParser().parse(content)
    _check_version(las)
    return las


def _check_version(las: LASDocument) -> None:
    """Warn on versions other than 2.x but keep the parsed result."""
    vers = las.version_number
    if vers is not None and int(vers) != 2:
        warnings.warn(
            f"LAS version {las.version['VERS'].value} is not supported. "
            "Only LAS 2.0 is supported. Parsed as LAS 2.0 anyway.",
            stacklevel=3,
        )
