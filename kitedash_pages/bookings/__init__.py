"""
Page: Accounting / Bookings
===========================

Booking finances: per-booking totals, price breakdown and client payments.
"""

from .page_bookings import render_bookings

__all__ = ["render_bookings"]
