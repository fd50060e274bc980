from tkinter import messagebox

import customtkinter as ctk
from models.expense import Expense
from models.view_state import ViewState
from services.expense_service import ExpenseService
from ui.components.expense_form import ExpenseForm
from ui.components.expense_list import ExpenseList
from ui.components.summary_panel import SummaryPanel
from utils.constants import (
    ACCENT_COLOR, APP_HEIGHT, APP_NAME, APP_WIDTH, FILTER_LABELS, FILTER_MODES,
)


class AppWindow(ctk.CTk):
    def __init__(
        self,
        expense_service: ExpenseService,
        currency_symbol: str = "$",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._svc = expense_service
        self._currency_symbol = currency_symbol
        self._state = ViewState()

        self.title(APP_NAME)
        self.minsize(640, 600)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(4, weight=1)

        self._build_header()
        self._build_filter_bar()
        self._build_summary()
        self._build_add_form()
        self._build_list()
        self._build_footer()
        self.refresh()

    # ── Layout ───────────────────────────────────────────────────────────────
    def _build_header(self):
        ctk.CTkLabel(
            self, text=APP_NAME,
            font=ctk.CTkFont(size=24, weight="bold"), anchor="w",
        ).grid(row=0, column=0, sticky="ew", padx=16, pady=(16, 8))

    def _build_filter_bar(self):
        label_to_mode = {FILTER_LABELS[m]: m for m in FILTER_MODES}
        self._filter_var = ctk.StringVar(value=self._state.filter_label)
        ctk.CTkSegmentedButton(
            self,
            values=[FILTER_LABELS[m] for m in FILTER_MODES],
            variable=self._filter_var,
            selected_color=ACCENT_COLOR,
            selected_hover_color="#f59e0b",
            text_color=("gray10", "gray90"),
            command=lambda label: self._set_filter(label_to_mode[label]),
        ).grid(row=1, column=0, sticky="ew", padx=16, pady=(0, 8))

    def _build_summary(self):
        self._summary = SummaryPanel(self, currency_symbol=self._currency_symbol)
        self._summary.grid(row=2, column=0, sticky="ew", padx=16, pady=(0, 8))

    def _build_add_form(self):
        form = ctk.CTkFrame(self, fg_color="transparent")
        form.grid(row=3, column=0, sticky="ew", padx=16, pady=(0, 8))
        form.grid_columnconfigure((0, 1, 2), weight=1)

        # Placeholders only render on entries without a textvariable
        self._add_entries: list[ctk.CTkEntry] = []
        for col, placeholder in enumerate([
            "Amount (e.g. 12.50)",
            "Category (Food, Books, Rent...)",
            "Note (optional)",
        ]):
            entry = ctk.CTkEntry(form, placeholder_text=placeholder)
            entry.grid(row=0, column=col, sticky="ew", padx=(0, 6))
            entry.bind("<Return>", lambda e: self._add_expense())
            self._add_entries.append(entry)

        ctk.CTkButton(
            form, text="Add Expense", width=120, command=self._add_expense,
        ).grid(row=0, column=3)

    def _build_list(self):
        self._list = ExpenseList(
            self,
            on_edit=self._open_edit,
            on_delete=self._delete_expense,
            currency_symbol=self._currency_symbol,
        )
        self._list.grid(row=4, column=0, sticky="nsew", padx=16, pady=(0, 4))

    def _build_footer(self):
        ctk.CTkLabel(
            self,
            text="Enter your expenses and they'll be saved locally with SQLite.",
            text_color="gray50", font=ctk.CTkFont(size=11),
        ).grid(row=5, column=0, pady=(4, 10))

    # ── Actions ──────────────────────────────────────────────────────────────
    def _set_filter(self, filter_mode: str):
        self._state = self._state.with_filter(filter_mode)
        self.refresh()

    def _add_expense(self):
        amount, category, note = (entry.get() for entry in self._add_entries)
        try:
            self._svc.add(amount, category, note)
        except ValueError as e:
            messagebox.showerror("Add Expense", str(e), parent=self)
            return
        for entry in self._add_entries:
            entry.delete(0, "end")
        self.focus_set()
        self.refresh()

    def _delete_expense(self, expense: Expense):
        self._svc.delete(expense.id)
        self.refresh()

    def _open_edit(self, expense: Expense):
        self._state = self._state.start_editing(expense.id)
        form = ExpenseForm(self, self._svc, expense)
        self.wait_window(form)
        self._state = self._state.stop_editing()
        if form.saved:
            self.refresh()

    # ── Refresh ──────────────────────────────────────────────────────────────
    def refresh(self):
        """Reload everything from the store and redraw the summary and list."""
        summary = self._svc.get_summary(self._state.filter_mode)
        self._summary.show(summary)
        self._list.show(summary.expenses)
