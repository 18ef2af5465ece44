"""
Package Services
================

Domain services of KiteDash.

Subpackages
-----------
- accounting ... pure derivations over the accounting snapshot (revenue,
  payroll, dashboard, Palmeiras ledger, cash flow, expenses).
"""

from __future__ import annotations

from . import accounting

__all__ = ["accounting"]
