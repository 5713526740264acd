"""Tests for the section state machine."""

from __future__ import annotations

import pytest

from pylaslog.router import HEADER_STATES, SectionState, next_state


class TestNextState:
    """Tests for next_state transitions."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("V", SectionState.VERSION),
            ("W", SectionState.WELL),
            ("C", SectionState.CURVE),
            ("P", SectionState.PARAMETER),
            ("O", SectionState.OTHER),
            ("A", SectionState.DATA),
            ("a", SectionState.DATA),
        ],
    )
    def test_known_codes(self, code: str, expected: SectionState) -> None:
        """Test each section letter maps to its state."""
        assert next_state(SectionState.NONE, code) is expected

    def test_unknown_code_discards(self) -> None:
        """Test unknown letters enter the discard state."""
        assert next_state(SectionState.WELL, "T") is SectionState.DISCARD
        assert next_state(SectionState.NONE, "") is SectionState.DISCARD

    def test_recover_from_discard(self) -> None:
        """Test a known section after a discarded one."""
        assert next_state(SectionState.DISCARD, "C") is SectionState.CURVE

    def test_data_is_terminal(self) -> None:
        """Test no header leaves the data state."""
        for code in ("V", "W", "C", "P", "O", "A", "X"):
            assert next_state(SectionState.DATA, code) is SectionState.DATA

    def test_header_states(self) -> None:
        """Test only the four field sections are header states."""
        assert SectionState.OTHER not in HEADER_STATES
        assert SectionState.DATA not in HEADER_STATES
        assert len(HEADER_STATES) == 4
