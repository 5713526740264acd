"""Line classification for LAS content.

Every raw line is categorized before any semantic parsing happens.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

SECTION_PATTERN = re.compile(r"^\s*~(.?)")
COMMENT_PATTERN = re.compile(r"^\s*#")
EMPTY_PATTERN = re.compile(r"^\s*$")


class LineKind(Enum):
    """Kinds of raw LAS lines."""

    COMMENT = "COMMENT"
    SECTION_HEADER = "SECTION_HEADER"
    CONTENT = "CONTENT"


class ClassifiedLine(NamedTuple):
    kind: LineKind
    code: str = ""


def classify_line(line: str, in_data: bool = False) -> ClassifiedLine:
    """Classify a single raw line.

    Args:
        line: Raw text line without its terminator.
        in_data: True when the ~A section is active. Blank lines there are
            content with no cells rather than comments.

    Returns:
        ClassifiedLine with the kind and, for section headers, the
        upper-cased section code ('' if the '~' stands alone).
    """
    if COMMENT_PATTERN.match(line):
        return ClassifiedLine(LineKind.COMMENT)

    section_match = SECTION_PATTERN.match(line)
    if section_match:
        return ClassifiedLine(LineKind.SECTION_HEADER, section_match.group(1).upper())

    if EMPTY_PATTERN.match(line) and not in_data:
        return ClassifiedLine(LineKind.COMMENT)

    return ClassifiedLine(LineKind.CONTENT)
