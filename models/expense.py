from dataclasses import dataclass
from typing import Optional


@dataclass
class Expense:
    id: int
    amount: float
    category: str
    note: Optional[str]
    date: str               # 'YYYY-MM-DD'
