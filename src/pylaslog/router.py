"""Section state machine for the LAS parse pass."""

from __future__ import annotations

from enum import Enum


class SectionState(Enum):
    """Active section while scanning a LAS file."""

    NONE = "NONE"
    VERSION = "V"
    WELL = "W"
    CURVE = "C"
    PARAMETER = "P"
    OTHER = "O"
    DATA = "A"
    DISCARD = "DISCARD"  # unrecognized section code, content is ignored


SECTION_CODES: dict[str, SectionState] = {
    "V": SectionState.VERSION,
    "W": SectionState.WELL,
    "C": SectionState.CURVE,
    "P": SectionState.PARAMETER,
    "O": SectionState.OTHER,
    "A": SectionState.DATA,
}

HEADER_STATES = frozenset(
    {
        SectionState.VERSION,
        SectionState.WELL,
        SectionState.CURVE,
        SectionState.PARAMETER,
    }
)


def next_state(state: SectionState, code: str) -> SectionState:
    """Return the state entered on a section header with the given code.

    ~A is the last section in LAS 2.0, so DATA never transitions away.
    """
    if state is SectionState.DATA:
        return state
    return SECTION_CODES.get(code.upper(), SectionState.DISCARD)
