"""Single-pass LAS 2.0 parser.

The LAS format is line-based with a simple structure:
  ~SECTION
  MNEMONIC.UNIT  VALUE : DESCRIPTION
  ...
  ~A
  <numeric data>

Each line is classified, routed by the active section, and handed to the
field tokenizer or buffered for the Other/Data sections. The document is
assembled once all lines are consumed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import ClassVar

from .assembler import assemble_document
from .fields import parse_header_field
from .lines import LineKind, classify_line
from .models import Field, LASDocument
from .router import HEADER_STATES, SectionState, next_state

logger = logging.getLogger(__name__)

# Only CR, LF and CRLF end a line; form feeds and similar stay inside it
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


@dataclass
class _ParseState:
    """Mutable state of one parse pass, local to a parse() call."""

    section: SectionState = SectionState.NONE
    headers: dict[SectionState, list[Field]] = field(
        default_factory=lambda: {state: [] for state in HEADER_STATES}
    )
    seen: set[SectionState] = field(default_factory=set)
    other_lines: list[str] = field(default_factory=list)
    data_lines: list[tuple[int, str]] = field(default_factory=list)


class LASParser:
    """LAS 2.0 parser.

    Holds no state between calls: each parse() threads its own
    _ParseState through the line loop, so one instance can be reused
    and called reentrantly.
    """

    CONTENT_HANDLERS: ClassVar[dict[SectionState, str]] = {
        SectionState.VERSION: "_parse_header",
        SectionState.WELL: "_parse_header",
        SectionState.CURVE: "_parse_header",
        SectionState.PARAMETER: "_parse_header",
        SectionState.OTHER: "_parse_other",
        SectionState.DATA: "_parse_ascii_data",
    }

    def parse(self, content: str) -> LASDocument:
        """Parse LAS file content string.

        Raises:
            LASParseError: Any of its subclasses on malformed content.
        """
        state = _ParseState()

        for line_number, line in enumerate(LINE_BREAK_PATTERN.split(content), 1):
            self._parse_line(state, line_number, line)

        return assemble_document(
            version_fields=state.headers[SectionState.VERSION],
            well_fields=state.headers[SectionState.WELL],
            curve_fields=state.headers[SectionState.CURVE],
            parameter_fields=(
                state.headers[SectionState.PARAMETER]
                if SectionState.PARAMETER in state.seen
                else None
            ),
            other_lines=state.other_lines if SectionState.OTHER in state.seen else None,
            data_lines=state.data_lines,
        )

    def _parse_line(self, state: _ParseState, line_number: int, line: str) -> None:
        """Route a single line to the appropriate section handler."""
        kind, code = classify_line(line, in_data=state.section is SectionState.DATA)

        if kind is LineKind.COMMENT:
            return

        if kind is LineKind.SECTION_HEADER:
            if state.section is SectionState.DATA:
                logger.debug("Line %d: ignoring section ~%s after ~A", line_number, code)
                return
            new_section = next_state(state.section, code)
            if new_section is SectionState.DISCARD:
                logger.debug("Line %d: skipping unknown section ~%s", line_number, code)
            state.section = new_section
            state.seen.add(new_section)
            return

        handler_name = self.CONTENT_HANDLERS.get(state.section)
        if handler_name is None:
            logger.debug("Line %d: ignoring content outside a known section", line_number)
            return
        handler: Callable[[_ParseState, int, str], None] = getattr(self, handler_name)
        handler(state, line_number, line)

    def _parse_header(self, state: _ParseState, line_number: int, line: str) -> None:
        """Parse a ~V, ~W, ~C or ~P field line."""
        state.headers[state.section].append(parse_header_field(line, line_number))

    def _parse_other(self, state: _ParseState, line_number: int, line: str) -> None:
        """Collect ~O free text verbatim."""
        state.other_lines.append(line)

    def _parse_ascii_data(self, state: _ParseState, line_number: int, line: str) -> None:
        """Collect ~A lines; they are read once the ~W settings are known."""
        state.data_lines.append((line_number, line))
