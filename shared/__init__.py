"""
Package Shared
==============

Components used across the whole app.

Submodules
----------
- ids ........... record ids, text sanitizers and operator name
- debug_trace ... traceback helpers for UI handlers
"""

from shared.ids import new_id, resolve_user, sanitize, sanitize_plus

__all__ = [
    "new_id",
    "resolve_user",
    "sanitize",
    "sanitize_plus",
]
