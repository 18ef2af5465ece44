"""
Package utils
=============

Re-exports the common KiteDash helpers to simplify imports.
"""

from .utils import (
    round_eur,
    fmt_eur,
    fmt_signed_eur,
    fmt_percent,
    fmt_month,
    fmt_booking_number,
    parse_amount,
    coerce_data,
    to_iso,
    to_month,
)

__all__ = [
    "round_eur",
    "fmt_eur",
    "fmt_signed_eur",
    "fmt_percent",
    "fmt_month",
    "fmt_booking_number",
    "parse_amount",
    "coerce_data",
    "to_iso",
    "to_month",
]
