import pytest

from database.db_manager import DatabaseManager
from database.expense_dao import ExpenseDAO
from models.expense import Expense
from services.expense_service import ExpenseService


@pytest.fixture
def db(tmp_path):
    manager = DatabaseManager(str(tmp_path / "expenses.db"))
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def expense_dao(db):
    return ExpenseDAO(db)


@pytest.fixture
def expense_service(expense_dao):
    return ExpenseService(expense_dao)


@pytest.fixture
def sample_expenses():
    """Store order: newest date first."""
    return [
        Expense(id=3, amount=5, category="Books", note=None, date="2024-01-15"),
        Expense(id=2, amount=20, category="Food", note="groceries", date="2024-01-10"),
        Expense(id=1, amount=10, category="Food", note=None, date="2024-01-01"),
    ]
