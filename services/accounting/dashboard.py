# services/accounting/dashboard.py
"""
Service: accounting dashboard

KPIs:
- revenue       → Σ booking totals of the non-cancelled bookings.
- collected     → Σ payments of every booking (a cancelled booking may keep
                  its deposit, so its payments still count as collected).
- outstanding   → revenue − collected.
- instructor    → Σ effective lesson rate × hours over all lessons.
- taxi margin   → Σ center_margin of every trip.
- expenses      → Σ expense amounts.
- palmeiras net → Σ reversal net − Σ rent.
- net result    → revenue + taxi margin + palmeiras net − instructor − expenses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from repository.types import BOOKING_STATUSES, AccountingData
from services.accounting.palmeiras import palmeiras_totals
from services.accounting.payroll import compute_instructor_costs
from services.accounting.revenue import (
    compute_accommodation_revenue,
    compute_booking_paid,
    compute_booking_total,
    compute_lessons_revenue,
    compute_rentals_revenue,
    compute_taxi_revenue,
)

logger = logging.getLogger(__name__)


@dataclass
class DashboardKpis:
    total_revenue: float
    total_paid: float
    total_due: float
    instructor_costs: float
    taxi_margin: float
    total_expenses: float
    palmeiras_net: float
    net_result: float

    def as_cards(self) -> List[tuple]:
        """(label, value) pairs in display order; costs are shown negative."""
        return [
            ("Total revenue", self.total_revenue),
            ("Amount collected", self.total_paid),
            ("Outstanding", self.total_due),
            ("Instructor costs", -self.instructor_costs),
            ("Taxi margin", self.taxi_margin),
            ("Expenses", -self.total_expenses),
            ("Palmeiras net", self.palmeiras_net),
            ("Net result", self.net_result),
        ]


def compute_dashboard_kpis(data: AccountingData) -> DashboardKpis:
    total_revenue = sum(
        compute_booking_total(b, data) for b in data.bookings if b.status != "cancelled"
    )
    total_paid = sum(compute_booking_paid(b.id, data.payments) for b in data.bookings)
    instructor_costs = compute_instructor_costs(data)
    taxi_margin = sum(t.center_margin for t in data.taxi_trips)
    total_expenses = sum(e.amount for e in data.expenses)
    palmeiras_net = palmeiras_totals(data)["net"]

    net_result = total_revenue + taxi_margin + palmeiras_net - instructor_costs - total_expenses
    logger.debug("dashboard: revenue=%.2f net=%.2f", total_revenue, net_result)

    return DashboardKpis(
        total_revenue=total_revenue,
        total_paid=total_paid,
        total_due=total_revenue - total_paid,
        instructor_costs=instructor_costs,
        taxi_margin=taxi_margin,
        total_expenses=total_expenses,
        palmeiras_net=palmeiras_net,
        net_result=net_result,
    )


@dataclass
class RevenueCategory:
    label: str
    value: float
    share: float  # 0..100


def revenue_by_category(data: AccountingData) -> List[RevenueCategory]:
    """
    Revenue of the non-cancelled bookings split into accommodation, lessons,
    rentals and taxis. The four values add up to the dashboard revenue.
    """
    active = [b for b in data.bookings if b.status != "cancelled"]
    values = [
        ("Accommodation", sum(compute_accommodation_revenue(b, data) for b in active)),
        ("Lessons", sum(compute_lessons_revenue(b, data) for b in active)),
        ("Rentals", sum(compute_rentals_revenue(b, data) for b in active)),
        ("Taxis", sum(compute_taxi_revenue(b, data) for b in active)),
    ]
    total = sum(v for _, v in values) or 1
    return [RevenueCategory(label, value, value / total * 100) for label, value in values]


def booking_status_counts(data: AccountingData) -> Dict[str, int]:
    counts = {s: 0 for s in BOOKING_STATUSES}
    for b in data.bookings:
        if b.status in counts:
            counts[b.status] += 1
    return counts


__all__ = [
    "DashboardKpis",
    "compute_dashboard_kpis",
    "RevenueCategory",
    "revenue_by_category",
    "booking_status_counts",
]
