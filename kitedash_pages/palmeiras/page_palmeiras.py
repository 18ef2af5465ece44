# ===================== Page: Palmeiras =====================
"""
Palmeiras page — summary cards, monthly breakdown, add/edit forms and the
printable HTML report (download).
"""

from __future__ import annotations

from datetime import date

import streamlit as st

from repository.types import AccountingData
from services.accounting.palmeiras import palmeiras_months, palmeiras_totals, render_monthly_report_html
from shared.debug_trace import debug_wrap
from utils.utils import fmt_eur, fmt_month, fmt_signed_eur

from ..common import get_data, get_repository, run_action, show_flash
from ..shared_ui import render_card_row
from .actions_palmeiras import save_rent, save_reversal
from .state_palmeiras import close_form, open_form, toggle_form
from .ui_forms_palmeiras import render_rent_form, render_reversal_form

__all__ = ["render_palmeiras"]


# ----------------- helpers -----------------
@debug_wrap("Could not build the Palmeiras report")
def _report_html(data: AccountingData) -> str:
    return render_monthly_report_html(data)


def _render_open_form(data: AccountingData) -> None:
    token = open_form()
    if not token:
        return
    kind, _, ref = token.partition(":")
    repo = get_repository()

    if kind == "rent":
        existing = next((r for r in data.palmeiras_rents if r.id == ref), None)
        form = render_rent_form(existing)
        if form.get("submit"):
            run_action(
                "Could not save rent", save_rent, repo, form["month"], form["amount"], form["notes"],
                existing.id if existing else None,
                on_success=close_form,
            )
    elif kind == "reversal":
        existing = next((r for r in data.palmeiras_reversals if r.id == ref), None)
        form = render_reversal_form(existing)
        if form.get("submit"):
            run_action(
                "Could not save reversal", save_reversal, repo, form["month"], form["gross"], form["percent"],
                form["notes"], existing.id if existing else None,
                on_success=close_form,
            )


def _render_month_table(data: AccountingData) -> None:
    months = palmeiras_months(data)
    if not months:
        st.caption("No Palmeiras records yet.")
        return

    head = st.columns([2, 2, 2, 1, 2, 2, 1, 1])
    for col, title in zip(head, ["Month", "Rent", "Gross (Palmeiras)", "%", "We receive", "Monthly net", "", ""]):
        col.markdown(f"**{title}**")

    for row in months:
        rent, rev = row.rent, row.reversal
        c = st.columns([2, 2, 2, 1, 2, 2, 1, 1])
        c[0].write(fmt_month(row.month))
        c[1].write(f"− {fmt_eur(rent.amount)}" if rent else "–")
        c[2].write(fmt_eur(rev.gross_amount) if rev else "–")
        c[3].write(f"{rev.percent:g}%" if rev else "–")
        c[4].write(f"+ {fmt_eur(rev.net_amount)}" if rev else "–")
        c[5].write(f"**{fmt_signed_eur(row.net)}**")
        if rent and c[6].button("🏠", key=f"edit_rent_{rent.id}", help="Edit rent"):
            toggle_form(f"rent:{rent.id}")
            st.rerun()
        if rev and c[7].button("💸", key=f"edit_rev_{rev.id}", help="Edit reversal"):
            toggle_form(f"reversal:{rev.id}")
            st.rerun()


# ----------------- page -----------------
def render_palmeiras(data: AccountingData | None = None) -> None:
    """Renders the Palmeiras tab."""
    data = data if data is not None else get_data()
    show_flash()
    st.subheader("🌴 Palmeiras")

    totals = palmeiras_totals(data)
    render_card_row(
        "Palmeiras",
        [
            ("Rent paid (total)", -totals["rent"], f"{len(data.palmeiras_rents)} months recorded"),
            ("Reversals received", totals["reversals"], f"{len(data.palmeiras_reversals)} months recorded"),
            ("Net balance", totals["net"], "reversals − rent"),
        ],
    )

    b1, b2, b3 = st.columns(3)
    if b1.button("➕ Rent", use_container_width=True):
        toggle_form("rent:new")
    if b2.button("➕ Reversal", use_container_width=True):
        toggle_form("reversal:new")
    b3.download_button(
        "🖨 Export report",
        data=_report_html(data),
        file_name=f"palmeiras_report_{date.today().isoformat()}.html",
        mime="text/html",
        use_container_width=True,
    )

    _render_open_form(data)
    st.markdown("#### Monthly breakdown")
    _render_month_table(data)
