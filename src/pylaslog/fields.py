"""Header field tokenizer for ~V, ~W, ~C and ~P lines.

The LAS line layout is:
  MNEMONIC.UNIT  VALUE : DESCRIPTION

Values and descriptions may themselves contain '.' and ':', so the split
uses fixed tie-break rules instead of a generic delimiter split:
the first '.' ends the mnemonic, the last ':' starts the description.
"""

from __future__ import annotations

import re

from .exceptions import FieldSyntaxError
from .models import Field

WHITESPACE_PATTERN = re.compile(r"\s")


def parse_header_field(line: str, line_number: int = 0) -> Field:
    """Split one header content line into a Field.

    Args:
        line: Raw content line from a header section.
        line_number: 1-based line number, used in error messages.

    Returns:
        Field with trimmed mnemonic, unit, value and description.

    Raises:
        FieldSyntaxError: If the line has no '.' separator.
    """
    dot = line.find(".")
    if dot < 0:
        raise FieldSyntaxError("header field has no '.' separator", line_number, line)

    mnemonic = line[:dot].strip()
    rest = line[dot + 1 :]
    last_colon = rest.rfind(":")

    # Whitespace right after the dot means no unit; a leading '.' in the
    # value (e.g. "STRT.   .0000") is never read as the unit.
    if not rest or rest[0].isspace():
        unit_end = 0
    else:
        space = WHITESPACE_PATTERN.search(rest)
        unit_end = space.start() if space else len(rest)
        if 0 <= last_colon < unit_end:
            unit_end = last_colon
    unit = rest[:unit_end]
    remainder = rest[unit_end:]

    colon = remainder.rfind(":")
    if colon < 0:
        value = remainder
        description = ""
    else:
        value = remainder[:colon]
        description = remainder[colon + 1 :]

    return Field(
        mnemonic=mnemonic,
        unit=unit.strip(),
        value=value.strip(),
        description=description.strip(),
        line_number=line_number,
    )
