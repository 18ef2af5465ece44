# ===================== State: Bookings =====================
"""
Manages the transient state of the Bookings tab (session_state helpers).
"""

from typing import Optional

import streamlit as st

__all__ = [
    "show_cancelled",
    "toggle_cancelled",
    "payment_form_open",
    "toggle_payment_form",
    "close_payment_form",
]


def _ensure_keys():
    st.session_state.setdefault("bookings_show_cancelled", False)
    st.session_state.setdefault("bookings_payment_form", None)


def show_cancelled() -> bool:
    _ensure_keys()
    return bool(st.session_state.bookings_show_cancelled)


def toggle_cancelled():
    """Shows / hides the cancelled bookings."""
    _ensure_keys()
    st.session_state.bookings_show_cancelled = not st.session_state.bookings_show_cancelled


def payment_form_open(booking_id: str) -> bool:
    """True when the payment form of this booking is open (one at a time)."""
    _ensure_keys()
    return st.session_state.bookings_payment_form == booking_id


def toggle_payment_form(booking_id: Optional[str]):
    _ensure_keys()
    current = st.session_state.bookings_payment_form
    st.session_state.bookings_payment_form = None if current == booking_id else booking_id


def close_payment_form():
    _ensure_keys()
    st.session_state.bookings_payment_form = None
