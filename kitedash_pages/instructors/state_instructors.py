# ===================== State: Instructors =====================
"""
Manages the transient state of the Instructors tab.

One form open at a time per instructor: `debt`, `payment`, or the override
form of a lesson (`override:<lesson_id>`).
"""

from typing import Optional

import streamlit as st

__all__ = ["open_form", "toggle_form", "close_form"]

_KEY = "instructors_open_form"


def _ensure_keys():
    st.session_state.setdefault(_KEY, None)


def open_form() -> Optional[str]:
    """`<instructor_id>:<form>` of the open form, or None."""
    _ensure_keys()
    return st.session_state[_KEY]


def toggle_form(instructor_id: str, form: str):
    _ensure_keys()
    token = f"{instructor_id}:{form}"
    st.session_state[_KEY] = None if st.session_state[_KEY] == token else token


def close_form():
    _ensure_keys()
    st.session_state[_KEY] = None
