"""
Module Mock Data (Repository)
=============================

Fixtures the accounting page starts from. There is no database: the arrays
below are copied into a fresh `AccountingRepository` at every session start,
so edits made in the UI last until the browser session ends.

Use `load_mock_data()` to obtain an independent `AccountingData` (lists are
new objects on every call, so two sessions never share a list).
"""

from __future__ import annotations

from repository.types import (
    AccountingData,
    Booking,
    BookingRoom,
    BookingRoomPrice,
    Client,
    EquipmentRental,
    Expense,
    ExternalAccommodation,
    ExternalAccommodationBooking,
    Instructor,
    InstructorDebt,
    InstructorPayment,
    Lesson,
    LessonRateOverride,
    PalmeirasRent,
    PalmeirasReversal,
    Payment,
    Room,
    Season,
    TaxiTrip,
)


def load_mock_data() -> AccountingData:
    """Builds the demo dataset of the 2025-2026 season."""
    clients = [
        Client("c1", "Jean", "Dupont", email="jean@mail.com"),
        Client("c2", "Marie", "Martin", phone="+33612345678"),
        Client("c3", "Pierre", "Durand", email="pierre@mail.com", notes="Client régulier"),
    ]

    rooms = [
        Room("r1", "h1", "Chambre 1", 2),
        Room("r2", "h1", "Chambre 2", 2),
        Room("r3", "h2", "Chambre 1", 2),
        Room("r4", "h2", "Chambre 2", 3),
        Room("r5", "h3", "Chambre 1", 2),
        Room("r6", "h3", "Chambre 2", 2),
        Room("r7", "b1", "Chambre", 2),
        Room("r8", "b2", "Chambre", 2),
        Room("r9", "b3", "Chambre", 3),
    ]

    bookings = [
        Booking("bk1", 1, "c1", "2026-02-05", "2026-02-12", "confirmed"),
        Booking("bk2", 2, "c2", "2026-02-10", "2026-02-18", "provisional"),
        Booking("bk3", 3, "c3", "2026-02-15", "2026-02-22", "confirmed"),
        Booking("bk4", 4, "c1", "2026-02-20", "2026-02-28", "cancelled", notes="Annulé par le client"),
        Booking("bk5", 5, "c2", "2026-02-01", "2026-02-08", "confirmed"),
        Booking("bk6", 6, "c3", "2026-03-01", "2026-03-10", "provisional"),
        Booking("bk7", 7, "c1", "2026-01-10", "2026-01-17", "confirmed"),
    ]

    booking_rooms = [
        BookingRoom("bk1", "r1"),
        BookingRoom("bk2", "r3"),
        BookingRoom("bk3", "r5"),
        BookingRoom("bk3", "r6"),
        BookingRoom("bk4", "r7"),
        BookingRoom("bk5", "r8"),
        BookingRoom("bk6", "r9"),
        BookingRoom("bk7", "r2"),
    ]

    booking_room_prices = [
        BookingRoomPrice("bk1", "r1", 60.0),
        BookingRoomPrice("bk2", "r3", 60.0),
        BookingRoomPrice("bk3", "r5", 55.0, override_note="Repeat client -5 €"),
        BookingRoomPrice("bk3", "r6", 60.0),
        BookingRoomPrice("bk4", "r7", 45.0),
        BookingRoomPrice("bk5", "r8", 45.0),
        BookingRoomPrice("bk6", "r9", 50.0),
        BookingRoomPrice("bk7", "r2", 60.0),
    ]

    external_accommodations = [
        ExternalAccommodation("ea1", "Palmeiras bungalow", "palmeiras", 35.0, 50.0),
        ExternalAccommodation("ea2", "Casa Tofo", "other", 40.0, 55.0),
    ]

    external_accommodation_bookings = [
        ExternalAccommodationBooking("eab1", "bk2", "ea1", "2026-02-10", "2026-02-14", 35.0, 50.0),
        ExternalAccommodationBooking("eab2", "bk6", "ea2", "2026-03-01", "2026-03-04", 40.0, 55.0),
    ]

    instructors = [
        Instructor("i1", "Lucas", "Ferreira", 50.0, 35.0, 25.0),
        Instructor("i2", "Ana", "Mondlane", 45.0, 30.0, 20.0),
        Instructor("i3", "Tom", "Baker", 55.0, 40.0, 25.0),
    ]

    lessons = [
        Lesson("l1", "bk1", "i1", "2026-02-06", 2.0, "private"),
        Lesson("l2", "bk1", "i1", "2026-02-08", 2.0, "private"),
        Lesson("l3", "bk1", "i2", "2026-02-10", 1.5, "supervision"),
        Lesson("l4", "bk2", "i2", "2026-02-11", 3.0, "group"),
        Lesson("l5", "bk2", "i2", "2026-02-13", 3.0, "group"),
        Lesson("l6", "bk3", "i3", "2026-02-16", 2.0, "private"),
        Lesson("l7", "bk3", "i3", "2026-02-17", 2.0, "private"),
        Lesson("l8", "bk3", "i1", "2026-02-19", 2.0, "group"),
        Lesson("l9", "bk5", "i1", "2026-02-02", 2.0, "private"),
        Lesson("l10", "bk5", "i2", "2026-02-04", 1.0, "supervision"),
        Lesson("l11", "bk7", "i3", "2026-01-12", 2.0, "private"),
        Lesson("l12", "bk7", "i3", "2026-01-14", 2.0, "supervision"),
    ]

    equipment_rentals = [
        EquipmentRental("er1", "bk1", "2026-02-09", "full_day", 60.0),
        EquipmentRental("er2", "bk1", "2026-02-11", "morning", 35.0),
        EquipmentRental("er3", "bk3", "2026-02-20", "afternoon", 35.0),
        EquipmentRental("er4", "bk5", "2026-02-05", "full_day", 60.0),
        EquipmentRental("er5", "bk7", "2026-01-15", "full_day", 60.0),
        EquipmentRental("er6", None, "2026-02-14", "morning", 35.0),
    ]

    taxi_trips = [
        TaxiTrip("t1", "bk1", "2026-02-05", "aero-to-center", 1, 80.0, 15.0),
        TaxiTrip("t2", "bk1", "2026-02-12", "center-to-aero", 1, 80.0, 15.0),
        TaxiTrip("t3", "bk3", "2026-02-15", "aero-to-center", 2, 100.0, 20.0),
        TaxiTrip("t4", "bk5", "2026-02-01", "aero-to-center", 2, 100.0, 20.0),
        TaxiTrip("t5", None, "2026-02-18", "center-to-town", 3, 30.0, 6.0),
    ]

    seasons = [
        Season("s1", "2024-2025", "2024-09-15", "2025-03-15"),
        Season("s2", "2025-2026", "2025-09-15", "2026-03-15"),
    ]

    payments = [
        Payment("pay1", "bk1", "2026-01-12", 300.0, "transfer", True),
        Payment("pay2", "bk1", "2026-02-12", 745.0, "cash_eur", False, "Balance on departure"),
        Payment("pay3", "bk3", "2026-01-20", 250.0, "transfer", True),
        Payment("pay4", "bk5", "2026-01-05", 150.0, "transfer", True),
        Payment("pay5", "bk5", "2026-02-08", 360.0, "card_palmeiras", False),
        Payment("pay6", "bk7", "2025-12-15", 200.0, "transfer", True),
        Payment("pay7", "bk7", "2026-01-17", 470.0, "cash_mzn", False),
    ]

    instructor_debts = [
        InstructorDebt("debt1", "i1", "2026-02-07", 25.0, "Dinner Al-Farouk"),
        InstructorDebt("debt2", "i3", "2026-01-20", 60.0, "Boat trip advance"),
    ]

    instructor_payments = [
        InstructorPayment("ipay1", "i3", "2026-01-31", 150.0, "cash_eur"),
        InstructorPayment("ipay2", "i1", "2026-02-15", 200.0, "transfer", "Mid-month advance"),
    ]

    lesson_rate_overrides = [
        LessonRateOverride("lro1", "l8", 30.0, "Shared group with Ana's students"),
    ]

    expenses = [
        Expense("e1", "2025-12-10", "equipment", 1200.0, "Two 9 m kites"),
        Expense("e2", "2026-01-08", "maintenance", 85.0, "Compressor repair"),
        Expense("e3", "2026-01-22", "transport", 45.0, "Fuel quad bike"),
        Expense("e4", "2026-02-03", "accommodation", 120.0, "Bungalow cleaning", palmeiras_related=True),
        Expense("e5", "2026-02-16", "other", 30.0, "Office supplies"),
        Expense("e6", "2026-02-20", "maintenance", 65.0, "Bladder patch kit"),
    ]

    palmeiras_rents = [
        PalmeirasRent("pr1", "2025-12", 850.0),
        PalmeirasRent("pr2", "2026-01", 850.0),
        PalmeirasRent("pr3", "2026-02", 850.0, notes="Paid in cash"),
    ]

    palmeiras_reversals = [
        PalmeirasReversal("prev1", "2025-12", 4200.0, 15.0, 630.0),
        PalmeirasReversal("prev2", "2026-01", 5800.0, 15.0, 870.0),
    ]

    return AccountingData(
        bookings=bookings,
        clients=clients,
        rooms=rooms,
        booking_rooms=booking_rooms,
        booking_room_prices=booking_room_prices,
        external_accommodation_bookings=external_accommodation_bookings,
        external_accommodations=external_accommodations,
        lessons=lessons,
        instructors=instructors,
        equipment_rentals=equipment_rentals,
        taxi_trips=taxi_trips,
        seasons=seasons,
        payments=payments,
        instructor_debts=instructor_debts,
        instructor_payments=instructor_payments,
        lesson_rate_overrides=lesson_rate_overrides,
        expenses=expenses,
        palmeiras_rents=palmeiras_rents,
        palmeiras_reversals=palmeiras_reversals,
    )


__all__ = ["load_mock_data"]
