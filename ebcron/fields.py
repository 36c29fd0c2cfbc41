"""Field configuration for ebcron."""

from enum import Enum

MONTH_NAMES = {
    "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4, "MAY": 5, "JUN": 6,
    "JUL": 7, "AUG": 8, "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12,
}

# Unix numbering: Sunday is 0
DAY_NAMES = {"SUN": 0, "MON": 1, "TUE": 2, "WED": 3, "THU": 4, "FRI": 5, "SAT": 6}

# EventBridge numbering: Sunday is 1
EVENTBRIDGE_DAYS = {"SUN": 1, "MON": 2, "TUE": 3, "WED": 4, "THU": 5, "FRI": 6, "SAT": 7}

YEAR_WILDCARD = "*"


class CronField(Enum):
    MINUTE = ("minute", 0, 59)
    HOUR = ("hour", 0, 23)
    DAY_OF_MONTH = ("day-of-month", 1, 31)
    MONTH = ("month", 1, 12)
    DAY_OF_WEEK = ("day-of-week", 0, 7)

    def __init__(self, label: str, min_val: int, max_val: int) -> None:
        self.label = label
        self.min_val = min_val
        self.max_val = max_val

    @property
    def names(self) -> dict[str, int]:
        if self is CronField.MONTH:
            return MONTH_NAMES
        if self is CronField.DAY_OF_WEEK:
            return DAY_NAMES
        return {}

    @property
    def unsupported(self) -> str:
        """Characters that only EventBridge understands in this field."""
        if self is CronField.DAY_OF_MONTH:
            return "LW"
        if self is CronField.DAY_OF_WEEK:
            return "#L"
        return ""


FIELD_ORDER = (
    CronField.MINUTE,
    CronField.HOUR,
    CronField.DAY_OF_MONTH,
    CronField.MONTH,
    CronField.DAY_OF_WEEK,
)
