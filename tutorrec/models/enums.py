# File: tutorrec/models/enums.py

from enum import Enum
from typing import Dict


class Weekday(Enum):
    """Days an appointment can recur on, keyed by their 3-letter abbreviation."""
    MONDAY = "MON"
    TUESDAY = "TUE"
    WEDNESDAY = "WED"
    THURSDAY = "THU"
    FRIDAY = "FRI"
    SATURDAY = "SAT"
    SUNDAY = "SUN"

    @property
    def number(self) -> int:
        """Display order of the day, Monday=1 through Sunday=7."""
        return DAY_NUMBERS[self]

    @property
    def python_weekday(self) -> int:
        """Index used by datetime.weekday(), Monday=0 through Sunday=6."""
        return DAY_NUMBERS[self] - 1


DAY_ABBREVIATIONS: Dict[str, Weekday] = {day.value: day for day in Weekday}

DAY_NUMBERS: Dict[Weekday, int] = {day: index for index, day in enumerate(Weekday, start=1)}
