"""
Page: Accounting / Expenses
===========================

Expense tracker: category breakdown, filters, add form and delete.
"""

from .page_expenses import render_expenses

__all__ = ["render_expenses"]
