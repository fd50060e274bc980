"""Filtering and totals over an in-memory list of expenses.

Every function here is pure: inputs are never mutated and the same inputs
always give the same result.
"""
from datetime import date, datetime
from typing import Iterable, Mapping

from models.expense import Expense
from models.summary import ChartSegment, ExpenseSummary
from utils.constants import (
    CHART_PALETTE, FILTER_ALL, FILTER_MONTH, FILTER_WEEK, OTHER_CATEGORY,
)
from utils.date_helpers import as_date, parse_date, start_of_month, start_of_week


def filter_expenses(
    expenses: list[Expense],
    filter_mode: str,
    now: date | datetime,
) -> list[Expense]:
    """Return the expenses that fall inside the filter's date range.

    'all' keeps everything. 'week' keeps Monday of now's week through now;
    'month' keeps the 1st of now's month through now. Both ends are inclusive
    and only the calendar date is compared. Survivors keep their input order.
    Rows with an unparseable date are dropped by 'week' and 'month'.
    """
    if filter_mode == FILTER_ALL:
        return list(expenses)
    if filter_mode == FILTER_WEEK:
        start = start_of_week(now)
    elif filter_mode == FILTER_MONTH:
        start = start_of_month(now)
    else:
        raise ValueError(f"Invalid filter: {filter_mode}")

    end = as_date(now)
    result = []
    for e in expenses:
        d = parse_date(e.date)
        if d is not None and start <= d <= end:
            result.append(e)
    return result


def total_spending(expenses: Iterable[Expense]) -> float:
    return sum((float(e.amount) for e in expenses), 0.0)


def totals_by_category(expenses: Iterable[Expense]) -> dict[str, float]:
    """Sum amounts per category, keyed in first-seen order."""
    totals: dict[str, float] = {}
    for e in expenses:
        cat = (e.category or "").strip() or OTHER_CATEGORY
        totals[cat] = totals.get(cat, 0.0) + float(e.amount)
    return totals


def chart_segments(category_totals: Mapping[str, float]) -> list[ChartSegment]:
    """One pie slice per category.

    Colours cycle through the five-colour palette, so from the sixth category
    on slices share colours with earlier ones.
    """
    return [
        ChartSegment(
            label=cat,
            value=total,
            color=CHART_PALETTE[i % len(CHART_PALETTE)],
        )
        for i, (cat, total) in enumerate(category_totals.items())
    ]


def summarize(
    expenses: list[Expense],
    filter_mode: str,
    now: date | datetime,
) -> ExpenseSummary:
    filtered = filter_expenses(expenses, filter_mode, now)
    by_category = totals_by_category(filtered)
    return ExpenseSummary(
        filter_mode=filter_mode,
        expenses=filtered,
        total=total_spending(filtered),
        by_category=by_category,
        segments=chart_segments(by_category),
    )
