"""Party size bounds for online reservations."""

# Parties larger than this are asked to call the restaurant
MIN_GUESTS = 1
MAX_GUESTS = 12


def clamp_guests(guests: int) -> int:
    """Pull a guest count back inside [MIN_GUESTS, MAX_GUESTS]."""
    return max(MIN_GUESTS, min(MAX_GUESTS, guests))


def increase_guests(guests: int) -> int:
    return clamp_guests(guests + 1)


def decrease_guests(guests: int) -> int:
    return clamp_guests(guests - 1)


def can_increase(guests: int) -> bool:
    return guests < MAX_GUESTS


def can_decrease(guests: int) -> bool:
    return guests > MIN_GUESTS
