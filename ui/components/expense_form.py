from tkinter import messagebox

import customtkinter as ctk
from models.expense import Expense
from services.expense_service import ExpenseService
from ui.components.date_picker import DatePickerWidget
from utils.currency import format_amount_input


class ExpenseForm(ctk.CTkToplevel):
    """Modal editor for one expense: amount, category, note and date."""

    def __init__(
        self,
        master,
        expense_service: ExpenseService,
        expense: Expense,
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._svc = expense_service
        self._expense = expense
        self.saved = False

        self.title("Edit Expense")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            self, text="Edit Expense",
            font=ctk.CTkFont(size=18, weight="bold"),
        ).grid(row=0, column=0, columnspan=2, padx=16, pady=(16, 8), sticky="w")

        self._amount_var = ctk.StringVar(value=format_amount_input(expense.amount))
        self._category_var = ctk.StringVar(value=expense.category)
        self._note_var = ctk.StringVar(value=expense.note or "")

        for r, (label, var) in enumerate([
            ("Amount:", self._amount_var),
            ("Category:", self._category_var),
            ("Note:", self._note_var),
        ], start=1):
            self._label(label, r)
            ctk.CTkEntry(self, textvariable=var, width=220).grid(
                row=r, column=1, padx=(0, 16), pady=4, sticky="ew"
            )

        self._label("Date:", 4)
        self._date_picker = DatePickerWidget(self, initial_date=expense.date)
        self._date_picker.grid(row=4, column=1, padx=(0, 16), pady=4, sticky="w")

        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=5, column=0, columnspan=2, padx=16, pady=(8, 16), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="#f87171", hover_color="#ef4444",
            command=self.destroy,
        ).pack(side="left")
        ctk.CTkButton(
            btn_frame, text="Save", width=110,
            command=self._on_save,
        ).pack(side="right")

        self.bind("<Escape>", lambda e: self.destroy())
        self.transient(master)
        self.grab_set()
        self._center()

    def _label(self, text, row):
        ctk.CTkLabel(self, text=text).grid(
            row=row, column=0, padx=(16, 8), pady=4, sticky="e"
        )

    def _on_save(self):
        try:
            self._svc.update(
                self._expense.id,
                self._amount_var.get(),
                self._category_var.get(),
                self._note_var.get(),
                self._date_picker.get(),
            )
        except ValueError as e:
            messagebox.showerror("Edit Expense", str(e), parent=self)
            return
        self.saved = True
        self.destroy()

    def _center(self):
        self.update_idletasks()
        mw = self.master.winfo_x() + self.master.winfo_width() // 2
        mh = self.master.winfo_y() + self.master.winfo_height() // 2
        w, h = self.winfo_reqwidth(), self.winfo_reqheight()
        self.geometry(f"+{mw - w//2}+{mh - h//2}")
