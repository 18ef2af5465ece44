# ===================== Page: Instructors =====================
"""
Instructor payroll page — summary table and one detail panel per instructor.

Panel:
- KPIs earned / debts / paid / to pay
- Lessons with base rate, effective rate and override form
- Debts & advances (add / delete)
- Payments (add / delete, amount defaults to the balance)
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from repository.types import METHOD_LABELS, AccountingData, Instructor
from services.accounting.payroll import PayrollRow, instructor_lesson_lines, payroll_rows, total_to_pay
from utils.utils import fmt_eur

from ..common import get_data, get_repository, run_action, show_flash
from ..shared_ui import render_card_row
from .actions_instructors import (
    add_debt,
    delete_debt,
    delete_instructor_payment,
    pay_instructor,
    remove_override,
    set_override,
    suggested_payment,
)
from .state_instructors import close_form, open_form, toggle_form
from .ui_forms_instructors import render_debt_form, render_override_form, render_payment_form

__all__ = ["render_instructors"]


# ----------------- helpers -----------------
def _fmt_out(v: float) -> str:
    return f"− {fmt_eur(v)}" if v > 0 else "–"


def _summary_frame(rows: list[PayrollRow]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Instructor": r.instructor.full_name,
                "Rates (P / G / S €/h)": (
                    f"{r.instructor.rate_private:g} / {r.instructor.rate_group:g} / {r.instructor.rate_supervision:g}"
                ),
                "Earned": fmt_eur(r.earned),
                "Debts": _fmt_out(r.debts),
                "Paid": _fmt_out(r.paid),
                "Balance": "✓" if r.balance == 0 else fmt_eur(r.balance),
            }
            for r in rows
        ]
    )


def _render_lessons(instructor: Instructor, data: AccountingData) -> None:
    st.markdown("##### Lessons")
    lines = instructor_lesson_lines(instructor, data)
    if not lines:
        st.caption("No lessons recorded.")
        return

    for ln in lines:
        lesson = ln.lesson
        c1, c2, c3, c4, c5 = st.columns([2, 2, 3, 2, 1])
        c1.write(lesson.date)
        c2.write(f"{lesson.type} · {lesson.duration_hours:g}h")
        if ln.override is not None:
            c3.write(f"~~{ln.base_rate:g} €~~ **{ln.effective_rate:g} €/h** — {ln.override.note}")
        else:
            c3.write(f"{ln.base_rate:g} €/h")
        c4.write(f"**{fmt_eur(ln.total)}**")
        if c5.button("✏️", key=f"ovr_btn_{lesson.id}", help="Override rate"):
            toggle_form(instructor.id, f"override:{lesson.id}")

        if open_form() != f"{instructor.id}:override:{lesson.id}":
            continue
        form = render_override_form(lesson.id, ln.effective_rate, ln.override is not None)
        if form.get("remove"):
            run_action(
                "Could not remove override", remove_override, get_repository(), lesson.id,
                on_success=close_form,
            )
        elif form.get("submit"):
            run_action(
                "Could not save override", set_override, get_repository(), lesson.id, form["rate"], form["note"],
                on_success=close_form,
            )


def _render_debts(instructor: Instructor, data: AccountingData) -> None:
    h1, h2 = st.columns([4, 1])
    h1.markdown("##### Debts & advances")
    if h2.button("➕ Add", key=f"debt_btn_{instructor.id}"):
        toggle_form(instructor.id, "debt")

    if open_form() == f"{instructor.id}:debt":
        form = render_debt_form(instructor.id)
        if form.get("submit"):
            run_action(
                "Could not add debt", add_debt, get_repository(), instructor.id,
                form["date"], form["amount"], form["description"],
                on_success=close_form,
            )

    debts = sorted((d for d in data.instructor_debts if d.instructor_id == instructor.id), key=lambda d: d.date)
    if not debts:
        st.caption("No debts.")
    for d in debts:
        c1, c2, c3, c4 = st.columns([2, 4, 2, 1])
        c1.write(d.date)
        c2.write(d.description)
        c3.write(f"− {fmt_eur(d.amount)}")
        if c4.button("🗑️", key=f"del_debt_{d.id}", help="Delete debt"):
            run_action("Could not delete debt", delete_debt, get_repository(), d.id)


def _render_payments(instructor: Instructor, data: AccountingData) -> None:
    h1, h2 = st.columns([4, 1])
    h1.markdown("##### Payments")
    if h2.button("➕ Pay", key=f"ipay_btn_{instructor.id}"):
        toggle_form(instructor.id, "payment")

    if open_form() == f"{instructor.id}:payment":
        form = render_payment_form(instructor.id, suggested_payment(get_repository(), instructor.id))
        if form.get("submit"):
            run_action(
                "Could not record payment", pay_instructor, get_repository(), instructor.id,
                form["date"], form["amount"], form["method"], form["notes"],
                on_success=close_form,
            )

    payments = sorted(
        (p for p in data.instructor_payments if p.instructor_id == instructor.id), key=lambda p: p.date
    )
    if not payments:
        st.caption("No payments yet.")
    for p in payments:
        c1, c2, c3, c4 = st.columns([2, 4, 2, 1])
        c1.write(p.date)
        c2.write(METHOD_LABELS.get(p.method, p.method) + (f" — {p.notes}" if p.notes else ""))
        c3.write(f"− {fmt_eur(p.amount)}")
        if c4.button("🗑️", key=f"del_ipay_{p.id}", help="Delete payment"):
            run_action("Could not delete payment", delete_instructor_payment, get_repository(), p.id)


def _render_detail(row: PayrollRow, data: AccountingData) -> None:
    render_card_row(
        row.instructor.full_name,
        [
            ("Lessons earned", row.earned, None),
            ("Debts / advances", -row.debts, None),
            ("Already paid", -row.paid, None),
            ("To pay", row.balance, None),
        ],
    )
    _render_lessons(row.instructor, data)
    _render_debts(row.instructor, data)
    _render_payments(row.instructor, data)


# ----------------- page -----------------
def render_instructors(data: AccountingData | None = None) -> None:
    """Renders the instructor payroll tab."""
    data = data if data is not None else get_data()
    show_flash()
    st.subheader("🪁 Instructor payroll")

    rows = payroll_rows(data)
    render_card_row(
        "Payroll",
        [
            ("Total lessons", sum(r.earned for r in rows), None),
            ("Already paid", sum(r.paid for r in rows), None),
            ("To pay (total)", total_to_pay(rows), None),
        ],
    )

    if not rows:
        st.info("No instructors.")
        return

    st.dataframe(_summary_frame(rows), use_container_width=True, hide_index=True)
    for row in rows:
        with st.expander(f"{row.instructor.full_name} · balance {fmt_eur(row.balance)}"):
            _render_detail(row, data)
