# services/accounting/palmeiras.py
"""
Service: Palmeiras ledger

Two monthly series:
- Rent     → what the center pays Palmeiras for the house (outflow).
- Reversal → % of Palmeiras' own bookings owed to the center (inflow);
  net_amount = gross × percent / 100, rounded to cents.

Monthly net = reversal net − rent; a month present in only one series counts
the other side as 0. Months are listed newest first.

The same rows feed the on-screen table and the printable HTML report.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from html import escape
from typing import Dict, List, Optional

from repository.types import AccountingData, PalmeirasRent, PalmeirasReversal
from utils.utils import fmt_eur, fmt_month, fmt_signed_eur


def compute_reversal_net(gross_amount: float, percent: float) -> float:
    """Share owed to the center, rounded to cents (half up)."""
    raw = Decimal(str(gross_amount or 0)) * Decimal(str(percent or 0)) / Decimal("100")
    return float(raw.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass
class PalmeirasMonth:
    month: str
    rent: Optional[PalmeirasRent]
    reversal: Optional[PalmeirasReversal]

    @property
    def net(self) -> float:
        return (self.reversal.net_amount if self.reversal else 0.0) - (self.rent.amount if self.rent else 0.0)


def palmeiras_months(data: AccountingData) -> List[PalmeirasMonth]:
    """Every month present in rents or reversals, newest first."""
    months = sorted(
        {r.month for r in data.palmeiras_rents} | {r.month for r in data.palmeiras_reversals},
        reverse=True,
    )
    return [
        PalmeirasMonth(
            month=m,
            rent=next((r for r in data.palmeiras_rents if r.month == m), None),
            reversal=next((r for r in data.palmeiras_reversals if r.month == m), None),
        )
        for m in months
    ]


def palmeiras_totals(data: AccountingData) -> Dict[str, float]:
    """Totals over all records: rent, gross, reversals (net received) and net."""
    total_rent = sum(r.amount for r in data.palmeiras_rents)
    total_reversals = sum(r.net_amount for r in data.palmeiras_reversals)
    return {
        "rent": total_rent,
        "gross": sum(r.gross_amount for r in data.palmeiras_reversals),
        "reversals": total_reversals,
        "net": total_reversals - total_rent,
    }


# ------------------------------- printable report -------------------------------

_REPORT_CSS = """
body { font-family: Arial, sans-serif; font-size: 13px; padding: 24px; color: #1f2937; }
h1 { font-size: 20px; margin-bottom: 4px; }
p.sub { color: #6b7280; margin-bottom: 24px; }
table { width: 100%; border-collapse: collapse; }
th { background: #f3f4f6; padding: 8px 12px; text-align: left; font-size: 11px; text-transform: uppercase; color: #6b7280; }
td { padding: 8px 12px; border-bottom: 1px solid #f3f4f6; }
tfoot td { background: #f9fafb; font-weight: bold; border-top: 2px solid #e5e7eb; }
.pos { color: #059669; } .neg { color: #dc2626; }
.right { text-align: right; }
"""


def _pct(value: float) -> str:
    return f"{value:g}%"


def render_monthly_report_html(data: AccountingData, generated_on: Optional[date] = None) -> str:
    """
    Builds the "Palmeiras — Monthly Report" HTML page (same rows and totals
    as the on-screen table).

    Args:
        data: Current accounting snapshot.
        generated_on: Date printed under the title (default: today).

    Returns:
        A standalone HTML document.
    """
    generated_on = generated_on or date.today()
    totals = palmeiras_totals(data)

    body_rows = []
    for row in palmeiras_months(data):
        rent, rev = row.rent, row.reversal
        body_rows.append(
            "<tr>"
            f"<td>{escape(fmt_month(row.month))}</td>"
            f"<td class=\"right neg\">{'− ' + fmt_eur(rent.amount) if rent else '–'}</td>"
            f"<td class=\"right\">{fmt_eur(rev.gross_amount) if rev else '–'}</td>"
            f"<td class=\"right\">{_pct(rev.percent) if rev else '–'}</td>"
            f"<td class=\"right pos\">{'+ ' + fmt_eur(rev.net_amount) if rev else '–'}</td>"
            f"<td class=\"right {'pos' if row.net >= 0 else 'neg'}\">{fmt_signed_eur(row.net)}</td>"
            "</tr>"
        )

    net = totals["net"]
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        "<title>Palmeiras — Monthly Report</title>"
        f"<style>{_REPORT_CSS}</style></head><body>"
        "<h1>Palmeiras — Monthly Report</h1>"
        f"<p class=\"sub\">Generated {generated_on.strftime('%d %B %Y')}</p>"
        "<table><thead><tr>"
        "<th>Month</th><th class=\"right\">Rent paid</th>"
        "<th class=\"right\">Gross (Palmeiras)</th><th class=\"right\">%</th>"
        "<th class=\"right\">Reversal received</th><th class=\"right\">Monthly net</th>"
        "</tr></thead><tbody>"
        + "".join(body_rows)
        + "</tbody><tfoot><tr>"
        "<td>Total</td>"
        f"<td class=\"right neg\">− {fmt_eur(totals['rent'])}</td>"
        f"<td class=\"right\">{fmt_eur(totals['gross'])}</td>"
        "<td></td>"
        f"<td class=\"right pos\">+ {fmt_eur(totals['reversals'])}</td>"
        f"<td class=\"right {'pos' if net >= 0 else 'neg'}\">{fmt_signed_eur(net)}</td>"
        "</tr></tfoot></table></body></html>"
    )


__all__ = [
    "compute_reversal_net",
    "PalmeirasMonth",
    "palmeiras_months",
    "palmeiras_totals",
    "render_monthly_report_html",
]
