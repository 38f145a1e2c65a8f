"""Tests for party size bounds."""

import pytest

from apps.web.reservations.guests import (
    MAX_GUESTS,
    MIN_GUESTS,
    can_decrease,
    can_increase,
    clamp_guests,
    decrease_guests,
    increase_guests,
)


class TestGuestBounds:
    """Tests for guest count clamping."""

    @pytest.mark.parametrize(
        ("guests", "expected"),
        [(-3, 1), (0, 1), (1, 1), (6, 6), (12, 12), (13, 12), (40, 12)],
    )
    def test_clamp(self, guests, expected):
        """Test that counts are pulled into range."""
        assert clamp_guests(guests) == expected

    def test_increase_stops_at_max(self):
        """Test that increasing never exceeds the maximum."""
        assert increase_guests(MAX_GUESTS - 1) == MAX_GUESTS
        assert increase_guests(MAX_GUESTS) == MAX_GUESTS

    def test_decrease_stops_at_min(self):
        """Test that decreasing never drops below the minimum."""
        assert decrease_guests(MIN_GUESTS + 1) == MIN_GUESTS
        assert decrease_guests(MIN_GUESTS) == MIN_GUESTS

    def test_button_states(self):
        """Test the enabled state of the +/- controls at the edges."""
        assert not can_decrease(MIN_GUESTS)
        assert can_increase(MIN_GUESTS)
        assert can_decrease(MAX_GUESTS)
        assert not can_increase(MAX_GUESTS)
