"""Reservation flow helpers - guest bounds and time formatting."""

from apps.web.reservations.guests import (
    MAX_GUESTS,
    MIN_GUESTS,
    can_decrease,
    can_increase,
    clamp_guests,
    decrease_guests,
    increase_guests,
)
from apps.web.reservations.times import format_time_12_to_24, format_time_24_to_12

__all__ = [
    "MAX_GUESTS",
    "MIN_GUESTS",
    "can_decrease",
    "can_increase",
    "clamp_guests",
    "decrease_guests",
    "format_time_12_to_24",
    "format_time_24_to_12",
    "increase_guests",
]
