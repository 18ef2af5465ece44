# tests/conftest.py
"""
Shared fixtures: the demo dataset, a repository over it, and a small
hand-made dataset for edge cases.
"""

from __future__ import annotations

import pytest

from repository.accounting_repository import AccountingRepository
from repository.mock_data import load_mock_data
from repository.types import (
    AccountingData,
    Booking,
    BookingRoom,
    BookingRoomPrice,
    ExternalAccommodationBooking,
    Instructor,
    Lesson,
)


@pytest.fixture
def data() -> AccountingData:
    return load_mock_data()


@pytest.fixture
def repo() -> AccountingRepository:
    return AccountingRepository(load_mock_data())


@pytest.fixture
def tiny() -> AccountingData:
    """One zero-night booking and one lesson given by an unknown instructor."""
    return AccountingData(
        bookings=[
            Booking("z1", 1, "c1", "2026-02-10", "2026-02-10"),
            Booking("z2", 2, "c1", "2026-02-10", "2026-02-12"),
        ],
        booking_rooms=[BookingRoom("z1", "r1"), BookingRoom("z2", "r1"), BookingRoom("z2", "r2")],
        booking_room_prices=[BookingRoomPrice("z1", "r1", 70.0), BookingRoomPrice("z2", "r1", 70.0)],
        external_accommodation_bookings=[
            ExternalAccommodationBooking("x1", "z1", "ea1", "2026-02-10", "2026-02-13", 30.0, 45.0),
        ],
        instructors=[Instructor("i1", "Lucas", "Ferreira", 50.0, 35.0, 25.0)],
        lessons=[
            Lesson("lz1", "z2", "i1", "2026-02-11", 2.0, "group"),
            Lesson("lz2", "z2", "ghost", "2026-02-11", 3.0, "private"),
        ],
    )
