import logging
from typing import Optional

from database.db_manager import DatabaseManager
from models.expense import Expense

logger = logging.getLogger(__name__)


class ExpenseDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Expense:
        return Expense(
            id=row["id"],
            amount=row["amount"],
            category=row["category"],
            note=row["note"],
            date=row["date"],
        )

    def get_all(self) -> list[Expense]:
        """Newest first; same-day rows by descending id."""
        conn = self._db.get_connection()
        rows = conn.execute(
            "SELECT * FROM expenses ORDER BY date DESC, id DESC"
        ).fetchall()
        return [self._row_to_model(r) for r in rows]

    def get_by_id(self, expense_id: int) -> Optional[Expense]:
        conn = self._db.get_connection()
        row = conn.execute(
            "SELECT * FROM expenses WHERE id = ?", (expense_id,)
        ).fetchone()
        return self._row_to_model(row) if row else None

    def create(
        self,
        amount: float,
        category: str,
        note: str | None,
        date: str,
    ) -> Expense:
        conn = self._db.get_connection()
        cursor = conn.execute(
            "INSERT INTO expenses (amount, category, note, date) VALUES (?, ?, ?, ?)",
            (amount, category, note, date),
        )
        conn.commit()
        logger.debug("Inserted expense %s", cursor.lastrowid)
        return self.get_by_id(cursor.lastrowid)

    def update(
        self,
        expense_id: int,
        amount: float,
        category: str,
        note: str | None,
        date: str,
    ) -> Optional[Expense]:
        conn = self._db.get_connection()
        conn.execute(
            """UPDATE expenses
               SET amount=?, category=?, note=?, date=?
               WHERE id=?""",
            (amount, category, note, date, expense_id),
        )
        conn.commit()
        logger.debug("Updated expense %s", expense_id)
        return self.get_by_id(expense_id)

    def delete(self, expense_id: int):
        conn = self._db.get_connection()
        conn.execute("DELETE FROM expenses WHERE id = ?", (expense_id,))
        conn.commit()
        logger.debug("Deleted expense %s", expense_id)
