# kitedash_pages/expenses/ui_forms_expenses.py
"""
UI: Expenses

Summary:
    New expense form: date, category, amount, description, Palmeiras flag.

Output:
    dict:
        date, category, amount, description, palmeiras_related
        submit (bool): True only when "Save expense" was clicked
"""

from __future__ import annotations

from datetime import date

import streamlit as st

from repository.types import CATEGORY_LABELS

__all__ = ["render_form"]


def render_form() -> dict:
    """Draws the new-expense form and returns the submission."""
    st.markdown("#### ➕ New expense")
    with st.form("expense_form", clear_on_submit=True):
        c1, c2, c3 = st.columns(3)
        dt = c1.date_input("Date", value=date.today())
        category = c2.selectbox("Category", options=list(CATEGORY_LABELS), format_func=CATEGORY_LABELS.get)
        amount = c3.number_input("Amount (€)", min_value=0.0, step=5.0, format="%.2f")
        description = st.text_input("Description", placeholder="What was this expense for?")
        palmeiras = st.checkbox("Palmeiras-related")
        submitted = st.form_submit_button("💾 Save expense", use_container_width=True)
    return {
        "date": dt,
        "category": category,
        "amount": float(amount or 0.0),
        "description": description,
        "palmeiras_related": bool(palmeiras),
        "submit": bool(submitted),
    }
