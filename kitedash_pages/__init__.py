"""
Package kitedash_pages
======================

Streamlit pages of the accounting module, one subpackage per tab:

- dashboard ..... global KPIs and revenue split
- bookings ...... booking finances and client payments
- instructors ... payroll, debts, payments and lesson rate overrides
- palmeiras ..... rent / reversal ledger and printable report
- cashflow ...... monthly cash flow
- expenses ...... expense tracker

Tabs with mutations follow `page_*` → `ui_forms_*` → `actions_*` → `state_*`.
"""
