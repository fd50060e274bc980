import customtkinter as ctk
from models.expense import Expense
from utils.constants import ACCENT_COLOR, DELETE_COLOR
from utils.currency import format_currency


_MAX_RENDERED_ROWS = 200


class ExpenseList(ctk.CTkScrollableFrame):
    """Scrollable list of expenses. Click a row to edit it; ✕ deletes it."""

    def __init__(
        self,
        master,
        on_edit,          # callable(Expense)
        on_delete,        # callable(Expense)
        currency_symbol: str = "$",
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._on_edit = on_edit
        self._on_delete = on_delete
        self._symbol = currency_symbol
        self.grid_columnconfigure(0, weight=1)

    def show(self, expenses: list[Expense]):
        for w in self.winfo_children():
            w.destroy()

        if not expenses:
            ctk.CTkLabel(
                self, text="No expenses yet.", text_color="gray60",
            ).grid(row=0, column=0, pady=24)
            return

        for idx, expense in enumerate(expenses[:_MAX_RENDERED_ROWS]):
            self._add_row(idx, expense)

        if len(expenses) > _MAX_RENDERED_ROWS:
            ctk.CTkLabel(
                self,
                text=f"Showing {_MAX_RENDERED_ROWS} of {len(expenses)} expenses.",
                text_color="gray60",
                font=ctk.CTkFont(size=11),
            ).grid(row=_MAX_RENDERED_ROWS, column=0, pady=6)

    def _add_row(self, idx: int, expense: Expense):
        bg = ("gray90", "gray20") if idx % 2 == 0 else ("gray86", "gray24")
        row = ctk.CTkFrame(self, fg_color=bg, corner_radius=8)
        row.grid(row=idx, column=0, sticky="ew", pady=2)
        row.grid_columnconfigure(0, weight=1)

        info = ctk.CTkFrame(row, fg_color="transparent")
        info.grid(row=0, column=0, sticky="ew", padx=10, pady=6)
        labels = [
            ctk.CTkLabel(
                info, text=format_currency(float(expense.amount), self._symbol),
                text_color=ACCENT_COLOR, font=ctk.CTkFont(size=16, weight="bold"),
                anchor="w",
            ),
            ctk.CTkLabel(info, text=expense.category, anchor="w"),
        ]
        if expense.note:
            labels.append(ctk.CTkLabel(
                info, text=expense.note, text_color="gray60",
                font=ctk.CTkFont(size=11), anchor="w",
            ))
        if expense.date:
            labels.append(ctk.CTkLabel(
                info,
                text=f"Date: {expense.date}",
                text_color="gray60", font=ctk.CTkFont(size=11), anchor="w",
            ))
        for lbl in labels:
            lbl.pack(fill="x")

        for w in [row, info, *labels]:
            w.bind("<Button-1>", lambda e, x=expense: self._on_edit(x))

        ctk.CTkButton(
            row, text="✕", width=32, fg_color="transparent",
            text_color=DELETE_COLOR, hover_color=("gray80", "gray30"),
            command=lambda x=expense: self._on_delete(x),
        ).grid(row=0, column=1, padx=(4, 10))
