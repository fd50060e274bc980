from datetime import date

import pytest

from services.expense_service import parse_amount
from utils.currency import format_amount_input
from utils.date_helpers import today_str


@pytest.mark.parametrize("raw, expected", [("12.50", 12.5), (" 3 ", 3.0), (7, 7.0)])
def test_parse_amount_accepts_positive_numbers(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "0", "-5", "nan", "inf", None])
def test_parse_amount_rejects_bad_input(raw):
    with pytest.raises(ValueError, match="positive number"):
        parse_amount(raw)


def test_add_trims_and_defaults_date(expense_service):
    e = expense_service.add("12.50", "  Food ", "  ")
    assert e.amount == 12.5
    assert e.category == "Food"
    assert e.note is None
    assert e.date == today_str()


def test_add_rejects_blank_category(expense_service, expense_dao):
    with pytest.raises(ValueError, match="Category is required"):
        expense_service.add("5", "   ", "")
    assert expense_dao.get_all() == []


def test_add_rejects_bad_amount_without_writing(expense_service, expense_dao):
    with pytest.raises(ValueError):
        expense_service.add("-1", "Food")
    assert expense_dao.get_all() == []


def test_update_validates_date(expense_service, expense_dao):
    e = expense_service.add("5", "Food", date="2024-01-10")
    with pytest.raises(ValueError, match="Date is required"):
        expense_service.update(e.id, "5", "Food", "", "  ")
    with pytest.raises(ValueError, match="Invalid date"):
        expense_service.update(e.id, "5", "Food", "", "10th of Jan")
    assert expense_dao.get_by_id(e.id).date == "2024-01-10"


def test_update_rejects_blank_category(expense_service, expense_dao):
    e = expense_service.add("5", "Food", date="2024-01-10")
    with pytest.raises(ValueError, match="Category is required"):
        expense_service.update(e.id, "5", "", "", "2024-01-10")
    assert expense_dao.get_by_id(e.id).category == "Food"


def test_update_normalizes_date(expense_service):
    e = expense_service.add("5", "Food", date="2024-01-10")
    updated = expense_service.update(e.id, "8.25", " Books ", " used ", "2024/01/12")
    assert updated.amount == 8.25
    assert updated.category == "Books"
    assert updated.note == "used"
    assert updated.date == "2024-01-12"


def test_summary_reloads_after_mutations(expense_service):
    expense_service.add("10", "Food", date="2024-01-01")
    food = expense_service.add("20", "Food", date="2024-01-10")
    expense_service.add("5", "Books", date="2024-01-15")
    now = date(2024, 1, 17)

    summary = expense_service.get_summary("all", now)
    assert summary.total == 35
    assert summary.by_category == {"Books": 5, "Food": 30}
    assert [e.date for e in summary.expenses] == ["2024-01-15", "2024-01-10", "2024-01-01"]

    week = expense_service.get_summary("week", now)
    assert week.total == 5
    assert list(week.by_category) == ["Books"]

    expense_service.delete(food.id)
    assert expense_service.get_summary("all", now).by_category == {"Books": 5, "Food": 10}


def test_summary_of_empty_store(expense_service):
    summary = expense_service.get_summary("month")
    assert summary.total == 0
    assert summary.segments == []


def test_update_keeps_full_precision_amount(expense_service, expense_dao):
    e = expense_service.add("12.345", "Food", date="2024-01-10")
    expense_service.update(
        e.id, format_amount_input(e.amount), e.category, "edited note only", e.date
    )
    saved = expense_dao.get_by_id(e.id)
    assert saved.amount == 12.345
    assert saved.note == "edited note only"


@pytest.mark.parametrize("raw", ["2024-01-15junk", "2024-01-150"])
def test_update_rejects_dates_with_trailing_text(expense_service, expense_dao, raw):
    e = expense_service.add("5", "Food", date="2024-01-10")
    with pytest.raises(ValueError, match="Invalid date"):
        expense_service.update(e.id, "5", "Food", "", raw)
    assert expense_dao.get_by_id(e.id).date == "2024-01-10"
