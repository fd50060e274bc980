from dataclasses import dataclass, field

from models.expense import Expense


@dataclass(frozen=True)
class ChartSegment:
    label: str
    value: float
    color: str          # '#rrggbb'


@dataclass
class ExpenseSummary:
    filter_mode: str
    expenses: list[Expense] = field(default_factory=list)
    total: float = 0.0
    by_category: dict[str, float] = field(default_factory=dict)
    segments: list[ChartSegment] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.by_category
