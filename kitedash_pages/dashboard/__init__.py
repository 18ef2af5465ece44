"""
Page: Accounting / Dashboard
============================

Read-only overview: KPI cards, revenue by category and booking status counts.
"""

from .page_dashboard import render_dashboard

__all__ = ["render_dashboard"]
