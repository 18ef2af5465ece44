# ===================== Page: Bookings =====================
"""
Booking finances page — lays out the table and calls forms/actions.

Keeps:
- KPIs billed / collected / outstanding over the non-cancelled bookings
- Cancelled bookings hidden by default (toggle)
- One expander per booking: price breakdown, payments, payment form
- `st.rerun()` after every successful mutation
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from repository.types import METHOD_LABELS, AccountingData
from services.accounting.revenue import (
    BookingRow,
    booking_breakdown,
    booking_rows,
    booking_totals,
    suggest_deposit,
)
from utils.utils import fmt_booking_number, fmt_eur

from ..common import get_data, get_repository, run_action, show_flash
from ..shared_ui import render_card_row
from .actions_bookings import delete_payment, record_payment
from .state_bookings import (
    close_payment_form,
    payment_form_open,
    show_cancelled,
    toggle_cancelled,
    toggle_payment_form,
)
from .ui_forms_bookings import render_payment_form

__all__ = ["render_bookings"]

_STATUS_ICON = {"confirmed": "🟢", "provisional": "🟡", "cancelled": "⚪"}


# ----------------- helpers -----------------
def _rows_frame(rows: list[BookingRow]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "#": fmt_booking_number(r.booking.booking_number),
                "Client": r.client_name,
                "Dates": f"{r.booking.check_in} → {r.booking.check_out}",
                "Total": fmt_eur(r.total),
                "Paid": fmt_eur(r.paid),
                "Balance": "✔ settled" if r.is_settled else fmt_eur(r.due),
                "Status": f"{_STATUS_ICON.get(r.booking.status, '')} {r.booking.status}",
            }
            for r in rows
        ]
    )


def _render_detail(row: BookingRow, data: AccountingData) -> None:
    b = row.booking

    # Breakdown
    lines = booking_breakdown(b, data)
    if lines:
        st.dataframe(
            pd.DataFrame(
                [
                    {
                        "Category": ln.category.capitalize(),
                        "Detail": ln.label + (f" ({ln.note})" if ln.note else ""),
                        "Amount": fmt_eur(ln.amount),
                    }
                    for ln in lines
                ]
            ),
            use_container_width=True,
            hide_index=True,
        )
    else:
        st.caption("No billable items.")
    st.markdown(f"**Total: {fmt_eur(row.total)}** · Paid {fmt_eur(row.paid)} · Due {fmt_eur(row.due)}")

    # Payments
    st.markdown("##### Payments")
    payments = sorted((p for p in data.payments if p.booking_id == b.id), key=lambda p: p.date)
    if not payments:
        st.caption("No payment yet.")
    for p in payments:
        c1, c2, c3, c4 = st.columns([2, 2, 4, 1])
        c1.write(p.date)
        c2.write(f"**{fmt_eur(p.amount)}**" + (" · deposit" if p.is_deposit else ""))
        c3.write(f"{METHOD_LABELS.get(p.method, p.method)}" + (f" — {p.notes}" if p.notes else ""))
        if c4.button("🗑️", key=f"del_pay_{p.id}", help="Delete payment"):
            run_action("Could not delete payment", delete_payment, get_repository(), p.id)

    # Payment form
    if st.button("➕ Add payment", key=f"btn_pay_{b.id}"):
        toggle_payment_form(b.id)
    if not payment_form_open(b.id):
        return

    form = render_payment_form(b.id, suggest_deposit(row.total))
    if not form.get("submit"):
        return
    run_action(
        "Could not record payment",
        record_payment,
        get_repository(),
        b.id,
        form["date"],
        form["amount"],
        form["method"],
        form["is_deposit"],
        form["notes"],
        on_success=close_payment_form,
    )


# ----------------- page -----------------
def render_bookings(data: AccountingData | None = None) -> None:
    """Renders the booking finances tab."""
    data = data if data is not None else get_data()
    show_flash()
    st.subheader("🏄 Booking finances")

    rows = booking_rows(data, include_cancelled=show_cancelled())
    totals = booking_totals(rows)
    render_card_row(
        "Bookings",
        [
            ("Total billed", totals["billed"], None),
            ("Total collected", totals["collected"], None),
            ("Total outstanding", totals["outstanding"], None),
        ],
    )

    if not rows:
        st.info("No bookings.")
    else:
        st.dataframe(_rows_frame(rows), use_container_width=True, hide_index=True)

        for row in rows:
            b = row.booking
            header = (
                f"{fmt_booking_number(b.booking_number)} · {row.client_name} · "
                f"{b.check_in} → {b.check_out} · {fmt_eur(row.total)}"
            )
            with st.expander(header):
                _render_detail(row, data)

    label = "Hide cancelled bookings" if show_cancelled() else "Show cancelled bookings"
    if st.button(label, key="btn_toggle_cancelled"):
        toggle_cancelled()
        st.rerun()
