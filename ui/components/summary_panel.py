import customtkinter as ctk
import tkinter as tk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from models.summary import ExpenseSummary
from utils.constants import ACCENT_COLOR, FILTER_LABELS
from utils.currency import format_currency


class SummaryPanel(ctk.CTkFrame):
    """Total spending, per-category breakdown and the category pie chart."""

    def __init__(self, master, currency_symbol: str = "$", **kwargs):
        super().__init__(master, fg_color=("gray90", "gray20"), corner_radius=8, **kwargs)
        self._symbol = currency_symbol
        self.grid_columnconfigure(0, weight=1)
        self.grid_columnconfigure(1, weight=1)

        self._total_heading = ctk.CTkLabel(
            self, text="", font=ctk.CTkFont(weight="bold"), anchor="w"
        )
        self._total_heading.grid(row=0, column=0, padx=12, pady=(10, 0), sticky="w")
        self._total_label = ctk.CTkLabel(
            self, text="", text_color=ACCENT_COLOR,
            font=ctk.CTkFont(size=20, weight="bold"), anchor="w",
        )
        self._total_label.grid(row=1, column=0, padx=12, pady=(2, 6), sticky="w")

        self._category_heading = ctk.CTkLabel(
            self, text="", font=ctk.CTkFont(weight="bold"), anchor="w"
        )
        self._category_heading.grid(row=2, column=0, padx=12, sticky="w")
        self._category_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._category_frame.grid(row=3, column=0, padx=12, pady=(0, 10), sticky="nw")

        self._chart_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._chart_title = ctk.CTkLabel(
            self._chart_frame, text="", font=ctk.CTkFont(size=13, weight="bold"),
        )
        self._chart_title.pack(pady=(6, 0))
        self._fig = Figure(figsize=(3, 2.4), dpi=80, tight_layout=True)
        self._ax = self._fig.add_subplot(111)
        self._mpl = FigureCanvasTkAgg(self._fig, master=self._chart_frame)
        self._mpl.get_tk_widget().pack(fill="both", expand=True, padx=4, pady=4)

    def show(self, summary: ExpenseSummary):
        label = FILTER_LABELS[summary.filter_mode]
        self._total_heading.configure(text=f"Total Spending ({label}):")
        self._total_label.configure(text=format_currency(summary.total, self._symbol))
        self._category_heading.configure(text=f"By Category ({label}):")

        for w in self._category_frame.winfo_children():
            w.destroy()
        if summary.is_empty:
            ctk.CTkLabel(
                self._category_frame, text="No expenses in this range.",
                text_color="gray60",
            ).pack(anchor="w")
        colors = {s.label: s.color for s in summary.segments}
        for cat, total in summary.by_category.items():
            row = ctk.CTkFrame(self._category_frame, fg_color="transparent")
            row.pack(fill="x", pady=1)
            tk.Label(row, bg=colors[cat], width=2).pack(side="left", padx=(0, 6))
            ctk.CTkLabel(
                row, text=f"{cat}: {format_currency(total, self._symbol)}",
                anchor="w", font=ctk.CTkFont(size=12),
            ).pack(side="left")

        # No categories, no chart
        if not summary.segments:
            self._chart_frame.grid_remove()
            return
        self._chart_title.configure(text=f"Spending by Category ({label})")
        self._chart_frame.grid(row=0, column=1, rowspan=4, padx=8, pady=8, sticky="nsew")
        self.after(50, lambda s=summary: self._draw_pie_chart(s))

    def _draw_pie_chart(self, summary: ExpenseSummary):
        ax = self._ax
        ax.clear()
        is_dark = ctk.get_appearance_mode() == "Dark"
        bg = "#2b2b2b" if is_dark else "#e4e4e4"
        self._fig.patch.set_facecolor(bg)
        ax.set_facecolor(bg)

        ax.pie(
            [s.value for s in summary.segments],
            colors=[s.color for s in summary.segments],
            startangle=90,
        )
        ax.set_aspect("equal")
        self._mpl.draw_idle()
