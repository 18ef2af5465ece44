# shared/ids.py
"""
Module IDs (Shared)
===================

Id generators and text sanitizers for the records created by the forms.

Main features
-------------
- `new_id(prefix)`: unique record id such as `pay_1f3a9c0d2b7e`.
- `sanitize` / `sanitize_plus`: trims text typed by the user, normalizes
  Unicode and strips control characters.
- `resolve_user`: operator name (argument, `KITEDASH_USER`, or "system").

Technical details
-----------------
- Ids are random (`uuid4`, first 12 hex chars); the in-memory lists only need
  uniqueness within a session.
"""

from __future__ import annotations

import os
import re
import unicodedata
import uuid
from typing import Any

_CTRL_RE = re.compile(r"[\x00-\x1F\x7F]")


def _to_str(x: Any) -> str:
    """Safe string (None -> ''), NFKC-normalized, without control characters."""
    if x is None:
        return ""
    s = unicodedata.normalize("NFKC", str(x))
    return _CTRL_RE.sub("", s)


def sanitize(s: Any) -> str:
    """Plain trim of any value + Unicode normalization."""
    return _to_str(s).strip()


def sanitize_plus(s: Any, upper: bool = False) -> str:
    """Collapses inner whitespace and optionally upper-cases."""
    base = " ".join(_to_str(s).strip().split())
    return base.upper() if upper else base


def resolve_user(u: Any = None) -> str:
    """
    Operator name recorded in action messages.

    Accepts a plain string or a user dict (`name`, `username`, `email`); falls
    back to `KITEDASH_USER` and then to `"system"`.
    """
    if isinstance(u, dict):
        u = next((u.get(k) for k in ("name", "username", "user", "email") if u.get(k)), None)
    return sanitize(u) or sanitize(os.getenv("KITEDASH_USER")) or "system"


def new_id(prefix: str) -> str:
    """New record id: `<prefix>_<12 hex chars>`."""
    return f"{sanitize_plus(prefix).lower()}_{uuid.uuid4().hex[:12]}"


# Explicit public API
__all__ = ["sanitize", "sanitize_plus", "resolve_user", "new_id"]
