# ===================== Page: Expenses =====================
"""
Expenses page — category breakdown (all time), filters, list and add form.
"""

from __future__ import annotations

import streamlit as st

from repository.types import CATEGORY_LABELS, AccountingData
from services.accounting.expenses import expense_months, expenses_total, filter_expenses, totals_by_category
from utils.utils import fmt_eur, fmt_month, fmt_percent

from ..common import get_data, get_repository, run_action, show_flash
from .actions_expenses import add_expense, delete_expense
from .state_expenses import category_filter, close_form, form_visivel, toggle_category, toggle_form
from .ui_forms_expenses import render_form

__all__ = ["render_expenses"]

_PALM_FILTERS = {"all": "All (Palmeiras or not)", "yes": "Palmeiras-related", "no": "Non-Palmeiras"}


def _render_breakdown(data: AccountingData) -> None:
    st.markdown("#### Expenses by category (all time)")
    selected = category_filter()
    items = totals_by_category(data.expenses)
    for item in items:
        c1, c2, c3 = st.columns([2, 5, 2])
        label = f"● {item.label}" if selected == item.category else item.label
        if c1.button(label, key=f"cat_{item.category}", use_container_width=True):
            toggle_category(item.category)
            st.rerun()
        c2.progress(min(1.0, item.share / 100), text=fmt_percent(item.share))
        c3.markdown(f"**{fmt_eur(item.amount)}**")
    st.caption(f"Total all time: **{fmt_eur(sum(i.amount for i in items))}**")


def render_expenses(data: AccountingData | None = None) -> None:
    """Renders the expenses tab."""
    data = data if data is not None else get_data()
    show_flash()
    st.subheader("🧾 Expenses")

    _render_breakdown(data)

    # Form
    if st.button("➕ New expense", key="btn_expense_toggle"):
        toggle_form()
    if form_visivel():
        form = render_form()
        if form.get("submit"):
            run_action(
                "Could not add expense", add_expense, get_repository(),
                form["date"], form["category"], form["amount"], form["description"], form["palmeiras_related"],
                on_success=close_form,
            )

    # Filters
    f1, f2, f3 = st.columns(3)
    search = f1.text_input("Search", placeholder="Search description…", key="exp_search")
    palm = f2.selectbox("Palmeiras", options=list(_PALM_FILTERS), format_func=_PALM_FILTERS.get, key="exp_palm")
    months = [""] + expense_months(data.expenses)
    month = f3.selectbox(
        "Month", options=months, format_func=lambda m: fmt_month(m) if m else "All months", key="exp_month"
    )
    category = category_filter()
    if category != "all":
        st.caption(f"Category: **{CATEGORY_LABELS.get(category, category)}** (click it again to clear)")

    filtered = filter_expenses(data.expenses, category=category, palmeiras=palm, month=month, search=search)
    if not filtered:
        st.info("No expenses match the filters.")
        return

    head = st.columns([2, 2, 5, 1, 2, 1])
    for col, title in zip(head, ["Date", "Category", "Description", "Palm.", "Amount", ""]):
        col.markdown(f"**{title}**")
    for e in filtered:
        c = st.columns([2, 2, 5, 1, 2, 1])
        c[0].write(e.date)
        c[1].write(CATEGORY_LABELS.get(e.category, e.category))
        c[2].write(e.description)
        c[3].write("🌴" if e.palmeiras_related else "")
        c[4].write(f"− {fmt_eur(e.amount)}")
        if c[5].button("🗑️", key=f"del_exp_{e.id}", help="Delete expense"):
            run_action("Could not delete expense", delete_expense, get_repository(), e.id)
    st.markdown(f"**{len(filtered)} expenses · {fmt_eur(expenses_total(filtered))}**")
