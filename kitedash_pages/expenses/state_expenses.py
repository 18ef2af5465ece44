# ===================== State: Expenses =====================
"""
Manages the transient state of the Expenses tab (form visibility and the
category filter, which the breakdown buttons also toggle).
"""

import streamlit as st

__all__ = ["toggle_form", "form_visivel", "close_form", "category_filter", "toggle_category"]


def _ensure_keys():
    st.session_state.setdefault("form_expense", False)
    st.session_state.setdefault("exp_filter_cat", "all")


def toggle_form():
    _ensure_keys()
    st.session_state.form_expense = not st.session_state.form_expense


def form_visivel() -> bool:
    _ensure_keys()
    return bool(st.session_state.form_expense)


def close_form():
    _ensure_keys()
    st.session_state.form_expense = False


def category_filter() -> str:
    _ensure_keys()
    return st.session_state.exp_filter_cat


def toggle_category(category: str):
    """Selects a category, or back to 'all' when it was already selected."""
    _ensure_keys()
    current = st.session_state.exp_filter_cat
    st.session_state.exp_filter_cat = "all" if current == category else category
