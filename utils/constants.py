APP_NAME = "Student Expense Tracker"
APP_WIDTH = 900
APP_HEIGHT = 820
DB_FILE = "expenses.db"
DATE_FORMAT = "%Y-%m-%d"

FILTER_ALL = "all"
FILTER_WEEK = "week"
FILTER_MONTH = "month"
FILTER_MODES = [FILTER_ALL, FILTER_WEEK, FILTER_MONTH]
FILTER_LABELS = {
    FILTER_ALL:   "All",
    FILTER_WEEK:  "This Week",
    FILTER_MONTH: "This Month",
}

# Bucket for records whose category is blank
OTHER_CATEGORY = "Other"

# Pie slices take these in order and wrap around after the fifth category
CHART_PALETTE = ["#fbbf24", "#3b82f6", "#10b981", "#f97316", "#a855f7"]

ACCENT_COLOR = "#fbbf24"
DELETE_COLOR = "#f87171"

DEFAULT_SETTINGS = [
    ("appearance_mode", "system"),
    ("currency_symbol", "$"),
]
