"""
Module Common (pages)
=====================

Session helpers shared by every tab.

- `get_repository()`: the `AccountingRepository` of the browser session,
  created from the mock fixtures on first access.
- `get_data()`: current `AccountingData` snapshot.
- `flash_ok` / `show_flash`: success message kept across the `st.rerun()`
  that follows a mutation.
- `run_action(title, fn, ...)`: calls an action; a `ValueError` becomes an
  info message, any other failure is reported by `debug_wrap_ctx`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import streamlit as st

from repository.accounting_repository import AccountingRepository
from repository.mock_data import load_mock_data
from repository.types import AccountingData
from shared.debug_trace import debug_wrap_ctx

logger = logging.getLogger(__name__)

_REPO_KEY = "accounting_repo"
_FLASH_KEY = "msg_ok"


def get_repository() -> AccountingRepository:
    if _REPO_KEY not in st.session_state:
        st.session_state[_REPO_KEY] = AccountingRepository(load_mock_data())
        logger.info("session repository initialised from mock data")
    return st.session_state[_REPO_KEY]


def get_data() -> AccountingData:
    return get_repository().data


def flash_ok(msg: str) -> None:
    st.session_state[_FLASH_KEY] = msg


def show_flash() -> None:
    """Shows (once) the message left by the previous action."""
    if _FLASH_KEY in st.session_state:
        st.success(st.session_state.pop(_FLASH_KEY))


def run_action(
    title: str,
    fn: Callable[..., Any],
    *args: Any,
    on_success: Optional[Callable[[], None]] = None,
    **kwargs: Any,
) -> Optional[Any]:
    """
    Runs an action with the pages' error policy.

    On success the action message is flashed and the page reruns, so this
    only returns when the action failed.

    Args:
        title: Error title shown above the traceback.
        fn: Action to call with `*args` / `**kwargs`.
        on_success: State reset run before the rerun (e.g. close the form).

    Returns:
        None (the action raised).
    """
    try:
        with debug_wrap_ctx(title):
            res = fn(*args, **kwargs)
    except ValueError as ve:
        st.info(f"ℹ️ {ve}")
        return None
    except Exception as e:
        logger.warning("%s: %s", title, e)
        return None

    if on_success is not None:
        on_success()
    flash_ok(res.get("msg", "Saved."))
    st.rerun()


__all__ = ["get_repository", "get_data", "flash_ok", "show_flash", "run_action"]
