"""Bootstrap settings read before the database is opened.

~/.student_expenses/config.json may hold:
    db_folder   directory for expenses.db (default: working directory)
    log_level   DEBUG, INFO, WARNING, ERROR or CRITICAL (default: WARNING)
The file is optional and edited by hand; the app only reads it.
"""
import json
from pathlib import Path

CONFIG_FILE = Path.home() / ".student_expenses" / "config.json"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> dict:
    """Returns {} on a missing, unreadable or non-object file."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def get_db_folder() -> str | None:
    return load_config().get("db_folder") or None


def get_log_level() -> str:
    """Return config["log_level"] upper-cased, or WARNING if unset or unknown."""
    level = str(load_config().get("log_level") or DEFAULT_LOG_LEVEL).upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL
