# tests/test_palmeiras.py
from datetime import date

from services.accounting.palmeiras import (
    compute_reversal_net,
    palmeiras_months,
    palmeiras_totals,
    render_monthly_report_html,
)


def test_reversal_net_rounds_to_cents():
    assert compute_reversal_net(4200, 15) == 630.0
    assert compute_reversal_net(1001, 15.5) == 155.16
    assert compute_reversal_net(0, 15) == 0.0


def test_months_newest_first_with_missing_side(data):
    months = palmeiras_months(data)
    assert [m.month for m in months] == ["2026-02", "2026-01", "2025-12"]

    feb, jan, dec = months
    assert feb.reversal is None
    assert feb.net == -850.0
    assert jan.net == 20.0
    assert dec.net == -220.0


def test_totals(data):
    assert palmeiras_totals(data) == {
        "rent": 2550.0,
        "gross": 10000.0,
        "reversals": 1500.0,
        "net": -1050.0,
    }


def test_monthly_report_html(data):
    html = render_monthly_report_html(data, generated_on=date(2026, 3, 1))
    assert html.startswith("<!DOCTYPE html>")
    assert "<h1>Palmeiras — Monthly Report</h1>" in html
    assert "Generated 01 March 2026" in html
    for label in ("Feb 2026", "Jan 2026", "Dec 2025"):
        assert label in html
    assert "+20 €" in html
    assert "-1 050 €" in html
    # newest month first
    assert html.index("Feb 2026") < html.index("Dec 2025")


def test_report_builder_used_by_the_page(data):
    from kitedash_pages.palmeiras.page_palmeiras import _report_html

    assert "<h1>Palmeiras — Monthly Report</h1>" in _report_html(data)
