from dataclasses import dataclass, replace
from typing import Optional

from utils.constants import FILTER_ALL, FILTER_LABELS, FILTER_MODES


@dataclass(frozen=True)
class ViewState:
    """What the screen is showing. Replaced, never mutated, on every change."""

    filter_mode: str = FILTER_ALL
    editing_id: Optional[int] = None

    def __post_init__(self):
        if self.filter_mode not in FILTER_MODES:
            raise ValueError(f"Invalid filter: {self.filter_mode}")

    @property
    def filter_label(self) -> str:
        return FILTER_LABELS[self.filter_mode]

    def with_filter(self, filter_mode: str) -> "ViewState":
        return replace(self, filter_mode=filter_mode)

    def start_editing(self, expense_id: int) -> "ViewState":
        return replace(self, editing_id=expense_id)

    def stop_editing(self) -> "ViewState":
        return replace(self, editing_id=None)
