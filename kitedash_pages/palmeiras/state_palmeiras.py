# ===================== State: Palmeiras =====================
"""
Manages the transient state of the Palmeiras tab: which form is open.

Form tokens: `rent:new`, `reversal:new`, `rent:<id>`, `reversal:<id>`.
"""

from typing import Optional

import streamlit as st

__all__ = ["open_form", "toggle_form", "close_form"]

_KEY = "palmeiras_open_form"


def _ensure_keys():
    st.session_state.setdefault(_KEY, None)


def open_form() -> Optional[str]:
    _ensure_keys()
    return st.session_state[_KEY]


def toggle_form(token: str):
    _ensure_keys()
    st.session_state[_KEY] = None if st.session_state[_KEY] == token else token


def close_form():
    _ensure_keys()
    st.session_state[_KEY] = None
