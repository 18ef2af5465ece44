"""
Package services.accounting
===========================

Pure functions over `AccountingData`. No module here mutates the snapshot or
imports Streamlit.

Modules
-------
- revenue ..... booking totals (accommodation, lessons, rentals, taxis) and payments.
- payroll ..... instructor rates, overrides, earned / debts / paid / balance.
- dashboard ... global KPIs and revenue split.
- palmeiras ... rent / reversal ledger and printable report.
- cashflow .... monthly cash flow, period filters, running balance.
- expenses .... expense filters and category totals.
"""

from __future__ import annotations

from . import cashflow, dashboard, expenses, palmeiras, payroll, revenue

__all__ = ["cashflow", "dashboard", "expenses", "palmeiras", "payroll", "revenue"]
