# tests/test_revenue.py
import pytest

from services.accounting.revenue import (
    booking_breakdown,
    booking_rows,
    booking_totals,
    compute_accommodation_revenue,
    compute_booking_paid,
    compute_booking_total,
    compute_lessons_revenue,
    compute_rentals_revenue,
    compute_taxi_revenue,
    count_nights,
    get_room_nightly_rate,
    suggest_deposit,
)


def _booking(data, booking_id):
    return next(b for b in data.bookings if b.id == booking_id)


# ------------------ nights / rates ------------------

def test_count_nights():
    assert count_nights("2026-02-05", "2026-02-12") == 7
    assert count_nights("2026-02-12", "2026-02-05") == 0
    assert count_nights("", "2026-02-05") == 0
    assert count_nights("not a date", "2026-02-05") == 0


def test_room_rate_uses_snapshot_or_zero(data):
    assert get_room_nightly_rate("bk3", "r5", data) == 55.0
    assert get_room_nightly_rate("bk3", "r1", data) == 0.0


# ------------------ sub-totals ------------------

@pytest.mark.parametrize(
    "booking_id, accommodation, lessons, rentals, taxis, total",
    [
        ("bk1", 420.0, 230.0, 95.0, 160.0, 905.0),
        ("bk2", 680.0, 180.0, 0.0, 0.0, 860.0),
        ("bk3", 805.0, 290.0, 35.0, 100.0, 1230.0),
        ("bk5", 315.0, 120.0, 60.0, 100.0, 595.0),
        ("bk6", 615.0, 0.0, 0.0, 0.0, 615.0),
        ("bk7", 420.0, 160.0, 60.0, 0.0, 640.0),
    ],
)
def test_booking_subtotals(data, booking_id, accommodation, lessons, rentals, taxis, total):
    b = _booking(data, booking_id)
    assert compute_accommodation_revenue(b, data) == accommodation
    assert compute_lessons_revenue(b, data) == lessons
    assert compute_rentals_revenue(b, data) == rentals
    assert compute_taxi_revenue(b, data) == taxis
    assert compute_booking_total(b, data) == total


def test_total_is_sum_of_parts_for_every_booking(data):
    for b in data.bookings:
        parts = (
            compute_accommodation_revenue(b, data)
            + compute_lessons_revenue(b, data)
            + compute_rentals_revenue(b, data)
            + compute_taxi_revenue(b, data)
        )
        assert compute_booking_total(b, data) == pytest.approx(parts)


def test_lesson_revenue_ignores_rate_overrides(data):
    # l8 has a 30 €/h override; the client is still billed the 35 €/h group rate
    assert compute_lessons_revenue(_booking(data, "bk3"), data) == 290.0


def test_zero_night_booking_has_no_accommodation(tiny):
    z1 = _booking(tiny, "z1")
    assert compute_accommodation_revenue(z1, tiny) == 0.0


def test_room_without_snapshot_priced_zero(tiny):
    # r2 has no price snapshot: only r1 counts
    assert compute_accommodation_revenue(_booking(tiny, "z2"), tiny) == 140.0


def test_unknown_instructor_contributes_nothing(tiny):
    assert compute_lessons_revenue(_booking(tiny, "z2"), tiny) == 70.0


def test_booking_paid(data):
    assert compute_booking_paid("bk1", data.payments) == 1045.0
    assert compute_booking_paid("bk2", data.payments) == 0.0


def test_suggest_deposit():
    assert suggest_deposit(1000) == 300
    assert suggest_deposit(1230) == 369
    assert suggest_deposit(100) == 120
    assert suggest_deposit(0) == 120


# ------------------ rows / breakdown ------------------

def test_booking_rows_hide_cancelled_and_sort_by_check_in(data):
    rows = booking_rows(data)
    assert [r.booking.id for r in rows] == ["bk7", "bk5", "bk1", "bk2", "bk3", "bk6"]
    assert len(booking_rows(data, include_cancelled=True)) == 7


def test_booking_row_fields(data):
    row = next(r for r in booking_rows(data) if r.booking.id == "bk1")
    assert row.client_name == "Jean Dupont"
    assert (row.total, row.paid, row.due) == (905.0, 1045.0, -140.0)
    assert row.is_settled


def test_booking_totals_skip_cancelled(data):
    totals = booking_totals(booking_rows(data, include_cancelled=True))
    assert totals == {"billed": 4845.0, "collected": 2475.0, "outstanding": 2370.0}


def test_breakdown_lines_add_up_to_total(data):
    b = _booking(data, "bk3")
    lines = booking_breakdown(b, data)
    assert [ln.category for ln in lines] == [
        "accommodation", "accommodation", "lessons", "lessons", "lessons", "rentals", "taxis",
    ]
    assert lines[0].note == "Repeat client -5 €"
    assert lines[0].label == "Room Chambre 1 × 7n @ 55 €/n"
    assert sum(ln.amount for ln in lines) == compute_booking_total(b, data)


def test_breakdown_external_accommodation(data):
    lines = booking_breakdown(_booking(data, "bk2"), data)
    ext = [ln for ln in lines if ln.label.startswith("Palmeiras bungalow")]
    assert len(ext) == 1
    assert ext[0].amount == 200.0


def test_count_nights_ignores_time_and_timezone():
    assert count_nights("2026-02-01T00:00:00Z", "2026-02-03") == 2
    assert count_nights("2026-02-01", "2026-02-03T23:30:00+02:00") == 2
    assert count_nights("2026-02-01T18:00:00", "2026-02-02T09:00:00") == 1
