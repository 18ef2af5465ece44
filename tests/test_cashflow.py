# tests/test_cashflow.py
import pytest

from services.accounting.cashflow import (
    build_month_rows,
    chart_frame,
    current_season,
    filter_period,
    period_totals,
    rows_to_frame,
    running_balance,
)
from repository.types import AccountingData


@pytest.fixture
def rows(data):
    return build_month_rows(data)


def test_rows_newest_first(rows):
    assert [r.month for r in rows] == ["2026-03", "2026-02", "2026-01", "2025-12"]


def test_row_values(rows):
    by_month = {r.month: r for r in rows}

    feb = by_month["2026-02"]
    assert (feb.billed, feb.collected, feb.palm_in) == (3590.0, 1105.0, 0.0)
    assert (feb.expenses, feb.rent, feb.instr_paid) == (215.0, 850.0, 200.0)
    assert feb.net == -160.0
    assert feb.total_out == 1265.0

    jan = by_month["2026-01"]
    assert (jan.billed, jan.collected, jan.palm_in) == (640.0, 1170.0, 870.0)
    assert jan.net == 910.0

    dec = by_month["2025-12"]
    assert (dec.collected, dec.palm_in, dec.expenses, dec.rent) == (200.0, 630.0, 1200.0, 850.0)
    assert dec.net == -1220.0

    mar = by_month["2026-03"]
    assert mar.billed == 615.0
    assert mar.net == 0.0


def test_billed_excludes_cancelled_and_not_in_net(rows):
    assert sum(r.billed for r in rows) == 4845.0


def test_empty_data_has_no_rows():
    assert build_month_rows(AccountingData()) == []


def test_running_balance_accumulates_from_oldest(rows):
    assert running_balance(rows) == {
        "2025-12": -1220.0,
        "2026-01": -310.0,
        "2026-02": -470.0,
        "2026-03": -470.0,
    }


def test_period_totals(rows):
    t = period_totals(rows)
    assert t["collected"] == 2475.0
    assert t["palm_in"] == 1500.0
    assert t["total_out"] == 1545.0 + 2550.0 + 350.0
    assert t["net"] == -470.0


def test_filter_by_season(data, rows):
    current = current_season(data)
    assert current.id == "s2"
    assert len(filter_period(rows, "season", season=current)) == 4
    assert filter_period(rows, "season", season=data.seasons[0]) == []


def test_filter_custom_bounds_inclusive(rows):
    kept = filter_period(rows, "custom", month_from="2026-01", month_to="2026-02")
    assert [r.month for r in kept] == ["2026-02", "2026-01"]
    assert period_totals(kept)["net"] == 750.0


def test_filter_without_bounds_keeps_everything(rows):
    assert len(filter_period(rows, "custom", month_from="2026-01")) == 4
    assert len(filter_period(rows, "season")) == 4
    assert len(filter_period(rows)) == 4


def test_current_season_none_without_seasons():
    assert current_season(AccountingData()) is None


def test_chart_frames(rows):
    bars = chart_frame(rows, "bars")
    assert list(bars.index) == ["2025-12", "2026-01", "2026-02", "2026-03"]
    assert list(bars["Positive"]) == [0.0, 910.0, 0.0, 0.0]
    assert list(bars["Negative"]) == [1220.0, 0.0, 160.0, 0.0]

    diverging = chart_frame(rows, "diverging")
    assert list(diverging["Negative"]) == [-1220.0, 0.0, -160.0, 0.0]

    line = chart_frame(rows, "line")
    assert list(line.columns) == ["Net"]
    assert list(line["Net"]) == [-1220.0, 910.0, -160.0, 0.0]


def test_rows_to_frame_keeps_order_and_adds_balance(rows):
    df = rows_to_frame(rows)
    assert list(df["month"]) == ["2026-03", "2026-02", "2026-01", "2025-12"]
    assert list(df["balance"]) == [-470.0, -470.0, -310.0, -1220.0]


def test_net_identity_every_month(rows):
    for r in rows:
        assert r.net == pytest.approx(r.collected + r.palm_in - r.expenses - r.rent - r.instr_paid)
