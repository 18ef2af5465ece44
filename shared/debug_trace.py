# shared/debug_trace.py
"""
Debug helpers for UI handlers.

Goal
----
Log the traceback of a failing handler and show it in the page as well.

Usage
-----
1) As a *decorator* (function run by a button):
    from shared.debug_trace import debug_wrap

    @debug_wrap("Could not record payment")
    def on_click():
        ...

2) As a *context manager* (inline block):
    from shared.debug_trace import debug_wrap_ctx

    with debug_wrap_ctx("Could not build the report"):
        ...

Notes
-----
- The exception is always re-raised after logging.
- `ValueError` is the form-validation channel: it is re-raised without a
  traceback so the page can show it as an info message.
"""

from __future__ import annotations

import logging
import traceback
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, TypeVar

import streamlit as st

__all__ = ["debug_wrap", "debug_wrap_ctx"]

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _report_exc(title: str) -> None:
    """Logs the current traceback and echoes it in the page."""
    tb = traceback.format_exc()
    logger.error("%s\n%s", title, tb)
    st.error(title)
    st.code(tb)


def debug_wrap(title: str = "Handler error") -> Callable[[Callable[..., R]], Callable[..., R]]:
    """Decorator: logs the traceback and re-raises."""
    def deco(fn: Callable[..., R]) -> Callable[..., R]:
        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> R:
            try:
                return fn(*args, **kwargs)
            except ValueError:
                raise
            except Exception:
                _report_exc(title)
                raise
        return wrapper
    return deco


@contextmanager
def debug_wrap_ctx(title: str = "Handler error") -> Generator[None, None, None]:
    """Context manager: logs the traceback and re-raises."""
    try:
        yield
    except ValueError:
        raise
    except Exception:
        _report_exc(title)
        raise
