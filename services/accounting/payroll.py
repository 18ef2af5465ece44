# services/accounting/payroll.py
"""
Service: instructor payroll

Rules:
- Base rate  → instructor hourly rate for the lesson type
  (private / group / supervision).
- Effective rate → the LessonRateOverride of the lesson when there is one,
  otherwise the base rate.
- Earned  → Σ effective rate × duration_hours over the instructor's lessons.
- Debts   → Σ advances owed back by the instructor.
- Paid    → Σ payments already made to the instructor.
- Balance → earned − debts − paid (negative when the instructor owes us).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from repository.types import (
    AccountingData,
    Instructor,
    Lesson,
    LessonRateOverride,
)


def find_instructor(instructor_id: str, data: AccountingData) -> Optional[Instructor]:
    return next((i for i in data.instructors if i.id == instructor_id), None)


def find_override(lesson_id: str, overrides: Iterable[LessonRateOverride]) -> Optional[LessonRateOverride]:
    return next((o for o in overrides if o.lesson_id == lesson_id), None)


def get_base_rate(lesson_type: str, instructor: Instructor) -> float:
    """Hourly rate of the instructor for a lesson type (anything else = supervision)."""
    if lesson_type == "private":
        return instructor.rate_private
    if lesson_type == "group":
        return instructor.rate_group
    return instructor.rate_supervision


def get_lesson_rate(
    lesson: Lesson,
    instructor: Instructor,
    overrides: Iterable[LessonRateOverride],
) -> float:
    """Effective rate of a lesson (override or base)."""
    override = find_override(lesson.id, overrides)
    if override is not None:
        return override.rate
    return get_base_rate(lesson.type, instructor)


def compute_instructor_earned(instructor_id: str, data: AccountingData) -> float:
    """Total earned by an instructor (lessons × rates, after overrides)."""
    instructor = find_instructor(instructor_id, data)
    if instructor is None:
        return 0.0
    return sum(
        get_lesson_rate(lesson, instructor, data.lesson_rate_overrides) * lesson.duration_hours
        for lesson in data.lessons
        if lesson.instructor_id == instructor_id
    )


def compute_instructor_debts(instructor_id: str, data: AccountingData) -> float:
    return sum(d.amount for d in data.instructor_debts if d.instructor_id == instructor_id)


def compute_instructor_paid(instructor_id: str, data: AccountingData) -> float:
    return sum(p.amount for p in data.instructor_payments if p.instructor_id == instructor_id)


def compute_instructor_balance(instructor_id: str, data: AccountingData) -> float:
    """Balance owed to an instructor: earned − debts − already paid."""
    return (
        compute_instructor_earned(instructor_id, data)
        - compute_instructor_debts(instructor_id, data)
        - compute_instructor_paid(instructor_id, data)
    )


def compute_instructor_costs(data: AccountingData) -> float:
    """Cost of every lesson at its effective rate (lessons of unknown instructors are skipped)."""
    total = 0.0
    for lesson in data.lessons:
        instructor = find_instructor(lesson.instructor_id, data)
        if instructor is None:
            continue
        total += get_lesson_rate(lesson, instructor, data.lesson_rate_overrides) * lesson.duration_hours
    return total


# ------------------------------- table rows -------------------------------

@dataclass
class PayrollRow:
    instructor: Instructor
    earned: float
    debts: float
    paid: float
    balance: float


def payroll_rows(data: AccountingData) -> List[PayrollRow]:
    """One summary row per instructor, in the instructors' order."""
    return [
        PayrollRow(
            instructor=i,
            earned=compute_instructor_earned(i.id, data),
            debts=compute_instructor_debts(i.id, data),
            paid=compute_instructor_paid(i.id, data),
            balance=compute_instructor_balance(i.id, data),
        )
        for i in data.instructors
    ]


def total_to_pay(rows: Iterable[PayrollRow]) -> float:
    """Σ of the positive balances (instructors who owe us do not offset the others)."""
    return sum(max(0.0, r.balance) for r in rows)


@dataclass
class LessonLine:
    """A lesson as shown in the instructor detail panel.

    Attributes:
        lesson: The lesson.
        base_rate: Instructor rate for the lesson type.
        effective_rate: Override rate or base rate.
        override: The override record, if any.
        total: effective_rate × duration_hours.
    """
    lesson: Lesson
    base_rate: float
    effective_rate: float
    override: Optional[LessonRateOverride]
    total: float


def instructor_lesson_lines(instructor: Instructor, data: AccountingData) -> List[LessonLine]:
    """Lessons of an instructor sorted by date, with their rates."""
    lines = []
    for lesson in sorted(
        (x for x in data.lessons if x.instructor_id == instructor.id),
        key=lambda x: x.date,
    ):
        override = find_override(lesson.id, data.lesson_rate_overrides)
        effective = get_lesson_rate(lesson, instructor, data.lesson_rate_overrides)
        lines.append(LessonLine(
            lesson=lesson,
            base_rate=get_base_rate(lesson.type, instructor),
            effective_rate=effective,
            override=override,
            total=effective * lesson.duration_hours,
        ))
    return lines


__all__ = [
    "find_instructor",
    "find_override",
    "get_base_rate",
    "get_lesson_rate",
    "compute_instructor_earned",
    "compute_instructor_debts",
    "compute_instructor_paid",
    "compute_instructor_balance",
    "compute_instructor_costs",
    "PayrollRow",
    "payroll_rows",
    "total_to_pay",
    "LessonLine",
    "instructor_lesson_lines",
]
