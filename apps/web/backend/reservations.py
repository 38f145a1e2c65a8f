"""Reservation API functions - availability lookups and bookings."""

from datetime import date

from aperture_schemas import (
    AvailabilityResponse,
    CreateReservationRequest,
    ReservationResponse,
)

from apps.web.backend.client import BackendClient, BackendSession


async def check_availability(
    client: BackendClient, reservation_date: date, party_size: int
) -> AvailabilityResponse:
    """Check which time slots are free for a date and party size."""
    return await client.request(
        "GET",
        client.endpoints.reservation_availability,
        "check availability",
        AvailabilityResponse,
        params={"date": reservation_date.isoformat(), "partySize": party_size},
    )


async def create_reservation(
    client: BackendClient,
    session: BackendSession,
    request: CreateReservationRequest,
) -> ReservationResponse:
    """Book a table for a signed-in member."""
    return await client.request(
        "POST",
        client.endpoints.reservation_create,
        "create reservation",
        ReservationResponse,
        session=session,
        payload=request,
    )


async def create_guest_reservation(
    client: BackendClient, request: CreateReservationRequest
) -> ReservationResponse:
    """Book a table without an account; guest contact fields are required."""
    return await client.request(
        "POST",
        client.endpoints.reservation_create_guest,
        "create reservation",
        ReservationResponse,
        payload=request,
    )


async def get_my_reservations(
    client: BackendClient, session: BackendSession
) -> list[ReservationResponse]:
    """Get the current member's reservations."""
    return await client.request(
        "GET",
        client.endpoints.reservation_my_reservations,
        "fetch reservations",
        list[ReservationResponse],
        session=session,
    )
