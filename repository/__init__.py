"""
Package repository
==================

Holds the accounting records and the in-memory repository the tabs mutate.

Modules
-------
- types .................. record dataclasses, Literals and business constants
- accounting_repository .. `AccountingRepository` (add / update / delete handlers)
- mock_data .............. fixtures loaded when a session starts
"""

from repository.accounting_repository import AccountingRepository
from repository.mock_data import load_mock_data
from repository.types import AccountingData

__all__ = [
    "AccountingRepository",
    "AccountingData",
    "load_mock_data",
]
