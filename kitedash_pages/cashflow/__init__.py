"""
Page: Accounting / Cash Flow
============================

Monthly cash in / cash out with period selector, chart and running balance.
"""

from .page_cashflow import render_cashflow

__all__ = ["render_cashflow"]
