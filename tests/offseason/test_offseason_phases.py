"""
Unit Tests for OffseasonPhase
"""

import pytest

from offseason.offseason_phases import OffseasonPhase


class TestOffseasonPhase:
    """Test offseason phase ordering and lookup."""

    def test_twelve_phases_in_order(self):
        assert [phase.value for phase in OffseasonPhase] == list(range(1, 13))

    def test_next_phase(self):
        assert OffseasonPhase.SEASON_END.next_phase() is OffseasonPhase.COACHING_DECISIONS
        assert OffseasonPhase.SEASON_START.next_phase() is None
        assert OffseasonPhase.SEASON_START.is_last

    def test_from_number(self):
        assert OffseasonPhase.from_number(6) is OffseasonPhase.DRAFT
        assert OffseasonPhase.from_number(None) is None

    def test_from_number_out_of_range(self):
        with pytest.raises(ValueError):
            OffseasonPhase.from_number(13)

    def test_display_names(self):
        assert str(OffseasonPhase.FREE_AGENCY) == "Free Agency"
        assert str(OffseasonPhase.OTAS) == "OTAs"
