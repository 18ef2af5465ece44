"""
Page: Accounting / Instructors
==============================

Instructor payroll: earned / debts / paid / balance, advances, payments and
per-lesson rate overrides.
"""

from .page_instructors import render_instructors

__all__ = ["render_instructors"]
