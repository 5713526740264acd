"""pylaslog - Python library for LAS 2.0 (Log ASCII Standard) well log files.

Public API:
    read_las_file()     - Read a LAS file from disk, returns LASDocument
    read_las_string()   - Parse LAS content held in memory
    compare_documents() - Compare two parsed documents with tolerance
    LASParser           - Single-pass parser over LAS text
    LASDocument         - Immutable parsed document
    HeaderSection       - Ordered header fields of one section
    Field               - One MNEMONIC.UNIT VALUE : DESCRIPTION line
"""

from .compare import compare_documents
from .exceptions import (
    ColumnCountMismatchError,
    FieldSyntaxError,
    LASEncodingError,
    LASParseError,
    LASReadError,
    MissingSectionError,
    NumericParseError,
    PylaslogError,
)
from .models import Field, HeaderSection, LASDocument
from .parser import LASParser
from .reader import read_las_file, read_las_string

__all__ = [
    # Core functions
    "read_las_file",
    "read_las_string",
    "compare_documents",
    # Parser and data models
    "LASParser",
    "LASDocument",
    "HeaderSection",
    "Field",
    # Exceptions
    "PylaslogError",
    "LASReadError",
    "LASEncodingError",
    "LASParseError",
    "FieldSyntaxError",
    "MissingSectionError",
    "NumericParseError",
    "ColumnCountMismatchError",
]
