# tests/test_utils.py
from datetime import date, datetime
from decimal import Decimal

import pytest

from utils.utils import (
    coerce_data,
    fmt_booking_number,
    fmt_eur,
    fmt_month,
    fmt_percent,
    fmt_signed_eur,
    parse_amount,
    round_eur,
    to_iso,
    to_month,
)


def test_round_eur_half_up():
    assert round_eur(2.5) == 3
    assert round_eur("1234.49") == 1234
    assert round_eur(-2.5) == -3
    assert round_eur("garbage") == 0


@pytest.mark.parametrize(
    "value, expected",
    [(0, "0 €"), (1234.5, "1 235 €"), (-56.4, "-56 €"), (1234567, "1 234 567 €")],
)
def test_fmt_eur(value, expected):
    assert fmt_eur(value) == expected


def test_fmt_signed_eur():
    assert fmt_signed_eur(0) == "+0 €"
    assert fmt_signed_eur(20) == "+20 €"
    assert fmt_signed_eur(-1050) == "-1 050 €"


def test_fmt_percent():
    assert fmt_percent(15) == "15%"
    assert fmt_percent(12.5, casas=1) == "12.5%"


def test_fmt_month():
    assert fmt_month("2026-02") == "Feb 2026"
    assert fmt_month("2025-12-15") == "Dec 2025"
    assert fmt_month("garbage") == "garbage"


def test_fmt_booking_number():
    assert fmt_booking_number(7) == "#007"
    assert fmt_booking_number(None) == "#---"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1234.56", 1234.56),
        ("1 234,56", 1234.56),
        ("1,234.56", 1234.56),
        ("1.234,56", 1234.56),
        ("€ 80", 80.0),
        (80, 80.0),
        (Decimal("12.5"), 12.5),
        ("abc", 0.0),
        ("-", 0.0),
        (None, 0.0),
        (True, 0.0),
    ],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == pytest.approx(expected)


def test_coerce_data():
    assert coerce_data("2026-02-14") == date(2026, 2, 14)
    assert coerce_data("14/02/2026") == date(2026, 2, 14)
    assert coerce_data(datetime(2026, 2, 14, 10, 30)) == date(2026, 2, 14)
    assert coerce_data("") == date.today()
    with pytest.raises(ValueError):
        coerce_data("nope")


def test_to_iso_and_to_month():
    assert to_iso("14-02-2026") == "2026-02-14"
    assert to_month(date(2026, 2, 14)) == "2026-02"
    assert to_month("2026-02-14") == "2026-02"
    assert to_month(None) == ""


@pytest.mark.parametrize(
    "raw",
    [float("inf"), float("-inf"), float("nan"), Decimal("NaN"), 10 ** 400, "1e400", "12abc", "inf", "nan"],
)
def test_parse_amount_rejects_non_finite_and_letters(raw):
    assert parse_amount(raw) == 0.0
