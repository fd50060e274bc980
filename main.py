import logging
import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.db_manager import DatabaseManager
from database.expense_dao import ExpenseDAO
from services.expense_service import ExpenseService
from ui.app_window import AppWindow
from utils.app_config import get_db_folder, get_log_level


def main():
    # ── Bootstrap: logging and DB folder from pre-DB config ──────────────────
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    db_folder = get_db_folder()

    # ── Database ─────────────────────────────────────────────────────────────
    db = DatabaseManager.open(db_folder=db_folder)

    # ── DAO / service ────────────────────────────────────────────────────────
    expense_svc = ExpenseService(ExpenseDAO(db))

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(db.get_setting("appearance_mode", "system"))
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        expense_service=expense_svc,
        currency_symbol=db.get_setting("currency_symbol", "$"),
    )

    def on_close():
        db.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    app.mainloop()


if __name__ == "__main__":
    main()
