import logging
import math
from typing import Optional

from database.expense_dao import ExpenseDAO
from models.expense import Expense
from models.summary import ExpenseSummary
from services.aggregation import summarize
from utils.date_helpers import format_date, parse_date, today, today_str

logger = logging.getLogger(__name__)


def parse_amount(value) -> float:
    """Accept a number or numeric text; anything not a finite positive number raises."""
    try:
        amount = float(str(value).strip())
    except (TypeError, ValueError):
        raise ValueError("Amount must be a positive number.") from None
    if not math.isfinite(amount) or amount <= 0:
        logger.info("Rejected expense amount %r", value)
        raise ValueError("Amount must be a positive number.")
    return amount


class ExpenseService:
    def __init__(self, expense_dao: ExpenseDAO):
        self._dao = expense_dao

    def get_summary(self, filter_mode: str, now=None) -> ExpenseSummary:
        """Reload every expense and run it through the filter and totals."""
        return summarize(self._dao.get_all(), filter_mode, now or today())

    def add(
        self,
        amount,
        category: str,
        note: str | None = "",
        date: str | None = None,
    ) -> Expense:
        amount_value = parse_amount(amount)
        category = self._clean_category(category)
        if date:
            date = self._clean_date(date)
        else:
            date = today_str()
        return self._dao.create(amount_value, category, self._clean_note(note), date)

    def update(
        self,
        expense_id: int,
        amount,
        category: str,
        note: str | None,
        date: str,
    ) -> Optional[Expense]:
        amount_value = parse_amount(amount)
        category = self._clean_category(category)
        date = self._clean_date(date)
        return self._dao.update(
            expense_id, amount_value, category, self._clean_note(note), date
        )

    def delete(self, expense_id: int):
        self._dao.delete(expense_id)

    def _clean_category(self, category: str | None) -> str:
        category = (category or "").strip()
        if not category:
            logger.info("Rejected expense without a category")
            raise ValueError("Category is required.")
        return category

    def _clean_note(self, note: str | None) -> str | None:
        return (note or "").strip() or None

    def _clean_date(self, date_str: str | None) -> str:
        date_str = (date_str or "").strip()
        if not date_str:
            raise ValueError("Date is required (YYYY-MM-DD).")
        d = parse_date(date_str)
        if d is None:
            logger.info("Rejected expense date %r", date_str)
            raise ValueError("Invalid date format. Use YYYY-MM-DD.")
        return format_date(d)
