# services/accounting/revenue.py
"""
Service: booking revenue

Derivation rules:
- Accommodation
    • own rooms  → snapshot price (BookingRoomPrice) × booking nights;
      a room without snapshot is priced 0.
    • external   → sell_price_per_night × nights of the external stay
      (the external stay has its own dates).
    • a booking with 0 nights has no accommodation revenue at all.
- Lessons   → instructor base rate for the lesson type × duration_hours.
  Rate overrides are a payroll matter and do NOT change what the client is
  billed. Lessons whose instructor is unknown contribute 0.
- Rentals   → Σ price of the booking's equipment rentals.
- Taxi      → Σ price_paid_by_client of the booking's trips.
- Total     → accommodation + lessons + rentals + taxi.

All functions are pure: they read the `AccountingData` snapshot and never
modify it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

import pandas as pd

from repository.types import (
    DEPOSIT_MIN,
    DEPOSIT_RATIO,
    AccountingData,
    Booking,
    Payment,
)
from services.accounting.payroll import find_instructor, get_base_rate
from utils.utils import fmt_eur, round_eur

logger = logging.getLogger(__name__)


# ------------------------------- nights / rates -------------------------------

def _day(value: str) -> Optional[pd.Timestamp]:
    """Calendar day of a date string (time and timezone dropped), None if unreadable."""
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.normalize()


def count_nights(check_in: Optional[str], check_out: Optional[str]) -> int:
    """Nights between two ISO dates (never negative, 0 if a date is missing)."""
    if not check_in or not check_out:
        return 0
    d_in, d_out = _day(check_in), _day(check_out)
    if d_in is None or d_out is None:
        return 0
    return max(0, (d_out - d_in).days)


def get_room_nightly_rate(booking_id: str, room_id: str, data: AccountingData) -> float:
    """Nightly rate of a room within a booking (snapshot, 0 when missing)."""
    snap = next(
        (p for p in data.booking_room_prices if p.booking_id == booking_id and p.room_id == room_id),
        None,
    )
    return float(snap.price_per_night) if snap is not None else 0.0


# ------------------------------- sub-totals -------------------------------

def compute_accommodation_revenue(booking: Booking, data: AccountingData) -> float:
    """Own rooms + external accommodation sold within the booking."""
    nights = count_nights(booking.check_in, booking.check_out)
    if nights == 0:
        return 0.0

    own_rooms = sum(
        get_room_nightly_rate(booking.id, br.room_id, data) * nights
        for br in data.booking_rooms
        if br.booking_id == booking.id
    )
    external = sum(
        e.sell_price_per_night * count_nights(e.check_in, e.check_out)
        for e in data.external_accommodation_bookings
        if e.booking_id == booking.id
    )
    return own_rooms + external


def compute_lessons_revenue(booking: Booking, data: AccountingData) -> float:
    """Lessons billed to the booking at the instructor base rates."""
    total = 0.0
    for lesson in data.lessons:
        if lesson.booking_id != booking.id:
            continue
        instructor = find_instructor(lesson.instructor_id, data)
        if instructor is None:
            logger.debug("lesson %s: unknown instructor %s", lesson.id, lesson.instructor_id)
            continue
        total += get_base_rate(lesson.type, instructor) * lesson.duration_hours
    return total


def compute_rentals_revenue(booking: Booking, data: AccountingData) -> float:
    return sum(r.price for r in data.equipment_rentals if r.booking_id == booking.id)


def compute_taxi_revenue(booking: Booking, data: AccountingData) -> float:
    return sum(t.price_paid_by_client for t in data.taxi_trips if t.booking_id == booking.id)


def compute_booking_total(booking: Booking, data: AccountingData) -> float:
    """Full computed total of a booking."""
    return (
        compute_accommodation_revenue(booking, data)
        + compute_lessons_revenue(booking, data)
        + compute_rentals_revenue(booking, data)
        + compute_taxi_revenue(booking, data)
    )


def compute_booking_paid(booking_id: str, payments: Iterable[Payment]) -> float:
    """Total amount already paid for a booking."""
    return sum(p.amount for p in payments if p.booking_id == booking_id)


def suggest_deposit(total: float) -> int:
    """Suggested deposit: 30 % of the total, never below 120 €."""
    return max(DEPOSIT_MIN, round_eur(total * DEPOSIT_RATIO))


# ------------------------------- booking list / detail -------------------------------

@dataclass
class BookingRow:
    """One line of the booking finances table.

    Attributes:
        booking: The booking itself.
        client_name: "First Last" or "–" when the client is unknown.
        total: Computed total.
        paid: Sum of payments.
        due: total − paid (negative when over-paid).
    """
    booking: Booking
    client_name: str
    total: float
    paid: float
    due: float

    @property
    def is_cancelled(self) -> bool:
        return self.booking.status == "cancelled"

    @property
    def is_settled(self) -> bool:
        return self.due <= 0


def booking_rows(data: AccountingData, *, include_cancelled: bool = False) -> List[BookingRow]:
    """Booking finance rows sorted by check-in date."""
    rows: List[BookingRow] = []
    for b in data.bookings:
        if b.status == "cancelled" and not include_cancelled:
            continue
        client = next((c for c in data.clients if c.id == b.client_id), None)
        total = compute_booking_total(b, data)
        paid = compute_booking_paid(b.id, data.payments)
        rows.append(BookingRow(b, client.full_name if client else "–", total, paid, total - paid))
    rows.sort(key=lambda r: r.booking.check_in)
    return rows


def booking_totals(rows: Iterable[BookingRow]) -> dict:
    """Billed / collected / outstanding over the non-cancelled rows."""
    active = [r for r in rows if not r.is_cancelled]
    return {
        "billed": sum(r.total for r in active),
        "collected": sum(r.paid for r in active),
        "outstanding": sum(r.due for r in active),
    }


@dataclass
class BreakdownLine:
    """Detail line of the price breakdown (label + amount)."""
    category: str
    label: str
    amount: float
    note: Optional[str] = None


def booking_breakdown(booking: Booking, data: AccountingData) -> List[BreakdownLine]:
    """
    Detail lines of a booking total, in display order:
    accommodation, lessons, rentals, taxis.
    """
    lines: List[BreakdownLine] = []
    nights = count_nights(booking.check_in, booking.check_out)

    if nights > 0:
        for br in (x for x in data.booking_rooms if x.booking_id == booking.id):
            room = next((r for r in data.rooms if r.id == br.room_id), None)
            rate = get_room_nightly_rate(booking.id, br.room_id, data)
            snap = next(
                (p for p in data.booking_room_prices
                 if p.booking_id == booking.id and p.room_id == br.room_id),
                None,
            )
            lines.append(BreakdownLine(
                "accommodation",
                f"Room {room.name if room else br.room_id} × {nights}n @ {fmt_eur(rate)}/n",
                rate * nights,
                snap.override_note if snap else None,
            ))
        for e in (x for x in data.external_accommodation_bookings if x.booking_id == booking.id):
            acc = next((a for a in data.external_accommodations if a.id == e.external_accommodation_id), None)
            n = count_nights(e.check_in, e.check_out)
            lines.append(BreakdownLine(
                "accommodation",
                f"{acc.name if acc else 'External'} × {n}n @ {fmt_eur(e.sell_price_per_night)}/n",
                e.sell_price_per_night * n,
            ))

    for lesson in (x for x in data.lessons if x.booking_id == booking.id):
        instructor = find_instructor(lesson.instructor_id, data)
        rate = get_base_rate(lesson.type, instructor) if instructor else 0.0
        who = instructor.first_name if instructor else "?"
        lines.append(BreakdownLine(
            "lessons",
            f"{lesson.type} · {lesson.duration_hours:g}h · {lesson.date} ({who})",
            rate * lesson.duration_hours,
        ))

    for r in (x for x in data.equipment_rentals if x.booking_id == booking.id):
        lines.append(BreakdownLine("rentals", f"{r.date} · {r.slot}", r.price))

    for t in (x for x in data.taxi_trips if x.booking_id == booking.id):
        lines.append(BreakdownLine("taxis", f"{t.date} · {t.type} · {t.nb_persons}p", t.price_paid_by_client))

    return lines


__all__ = [
    "count_nights",
    "get_room_nightly_rate",
    "compute_accommodation_revenue",
    "compute_lessons_revenue",
    "compute_rentals_revenue",
    "compute_taxi_revenue",
    "compute_booking_total",
    "compute_booking_paid",
    "suggest_deposit",
    "BookingRow",
    "booking_rows",
    "booking_totals",
    "BreakdownLine",
    "booking_breakdown",
]
