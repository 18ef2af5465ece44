"""
Page: Accounting / Palmeiras
============================

Rent paid to Palmeiras and reversal received from Palmeiras, month by month,
with the printable monthly report.
"""

from .page_palmeiras import render_palmeiras

__all__ = ["render_palmeiras"]
