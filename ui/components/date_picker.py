import customtkinter as ctk
from tkcalendar import Calendar
import tkinter as tk
from tkinter import ttk
from utils.date_helpers import parse_date, format_date
from datetime import date


class DatePickerWidget(ctk.CTkFrame):
    """Date entry with a calendar popup button.

    .get() returns a YYYY-MM-DD string when the text parses as a date.
    """

    def __init__(
        self,
        master,
        initial_date: str | None = None,
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)

        self._popup: ctk.CTkToplevel | None = None
        self._var = tk.StringVar()

        self._entry = ctk.CTkEntry(self, textvariable=self._var, width=130)
        self._entry.grid(row=0, column=0, sticky="ew")
        self._entry.bind("<FocusOut>", self._on_focus_out)
        self._entry.bind("<Return>", self._on_focus_out)

        ctk.CTkButton(
            self, text="📅", width=32, command=self._toggle_popup
        ).grid(row=0, column=1, padx=(4, 0))

        self.set(initial_date or "")

    def _parse_raw(self) -> date | None:
        return parse_date(self._var.get())

    def get(self) -> str:
        """Return date as YYYY-MM-DD, the raw text if unparseable, or '' if empty."""
        d = self._parse_raw()
        if d:
            return format_date(d)
        return self._var.get().strip()

    def set(self, date_str: str):
        self._var.set(date_str or "")
        self._reset_border()

    def _on_focus_out(self, _event=None):
        if not self._var.get().strip():
            self._reset_border()
            return
        d = self._parse_raw()
        if d:
            self.set(format_date(d))
        else:
            self._entry.configure(border_color="#F44336")

    def _reset_border(self):
        self._entry.configure(border_color=("gray65", "gray35"))

    def _toggle_popup(self):
        if self._popup and self._popup.winfo_exists():
            self._close_popup()
            return

        popup = ctk.CTkToplevel(self)
        popup.overrideredirect(True)
        popup.resizable(False, False)
        self._popup = popup

        is_dark = ctk.get_appearance_mode() == "Dark"
        bg = "#1f2937" if is_dark else "#ffffff"
        fg = "#e5e7eb" if is_dark else "#111827"
        style = ttk.Style(popup)
        style.theme_use("default")
        style.configure("Calendar.Treeview", background=bg, foreground=fg, fieldbackground=bg)

        current = self._parse_raw() or date.today()

        cal = Calendar(
            popup,
            selectmode="day",
            year=current.year,
            month=current.month,
            day=current.day,
            date_pattern="yyyy-mm-dd",
            firstweekday="monday",
            background=bg,
            foreground=fg,
            headersbackground=bg,
            headersforeground=fg,
            selectbackground="#fbbf24",
            weekendbackground=bg,
            weekendforeground=fg,
            othermonthforeground="gray60",
            bordercolor=bg,
        )
        cal.pack(padx=4, pady=4)
        cal.bind("<<CalendarSelected>>", lambda e: self._on_date_selected(cal))

        self._entry.update_idletasks()
        x = self._entry.winfo_rootx()
        y = self._entry.winfo_rooty() + self._entry.winfo_height() + 2
        popup.geometry(f"+{x}+{y}")
        popup.bind("<Escape>", lambda e: self._close_popup())

    def _on_date_selected(self, cal: Calendar):
        self.set(cal.get_date())
        self._close_popup()

    def _close_popup(self):
        if self._popup is not None:
            self._popup.destroy()
            self._popup = None
