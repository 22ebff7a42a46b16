# File: tutorrec/models/appointment.py

import re
from functools import total_ordering
from dataclasses import dataclass, field
from datetime import time
from typing import Iterable, Optional, Tuple

from .enums import Weekday, DAY_ABBREVIATIONS
from .exceptions import NullInputError, InvalidAppointmentError

MESSAGE_CONSTRAINTS = (
    "Appointment should be of the format 'HH:MM-HH:MM DAY' "
    "and adhere to the following constraints:\n"
    "1. HH:MM follows 24 hour time; "
    "HH is from 00 to 23, "
    "MM is from 00 to 59.\n"
    "2. This is followed by a DAY. "
    "DAY must be one of: 'MON', 'TUE', 'WED', 'THU', 'FRI', 'SAT','SUN'\n"
)

VALIDATION_REGEX = re.compile(
    r"(?P<start>[0-9]{2}:[0-9]{2})-(?P<end>[0-9]{2}:[0-9]{2})\s+(?P<day>[A-Za-z]{3})",
    re.ASCII,
)


def _parse_time(text: str) -> Optional[time]:
    """Parse 'HH:MM' into a time, or None when hour or minute is out of range."""
    hour, minute = int(text[:2]), int(text[3:5])
    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)


def _parse(text: str) -> Optional[Tuple[time, time, Weekday]]:
    """Split appointment text into (start, end, day), or None if it is invalid."""
    if not isinstance(text, str):
        return None

    match = VALIDATION_REGEX.fullmatch(text)
    if not match:
        return None

    start_time = _parse_time(match.group('start'))
    end_time = _parse_time(match.group('end'))
    if start_time is None or end_time is None:
        return None
    if not start_time < end_time:
        return None

    day = DAY_ABBREVIATIONS.get(match.group('day').upper())
    if day is None:
        return None

    return start_time, end_time, day


@total_ordering
@dataclass(frozen=True)
class Appointment:
    """
    A weekly recurring time slot, e.g. '13:30-14:00 SUN'.

    Immutable. Equality and hashing use the canonical text only; the parsed
    times and day are derived from it once at construction.
    """
    value: str
    start_time: time = field(init=False, compare=False, repr=False)
    end_time: time = field(init=False, compare=False, repr=False)
    day: Weekday = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        """Validate the text and derive times and day."""
        if self.value is None:
            raise NullInputError("Appointment text must not be None")

        parsed = _parse(self.value)
        if parsed is None:
            raise InvalidAppointmentError(MESSAGE_CONSTRAINTS)

        start_time, end_time, day = parsed
        object.__setattr__(self, 'value', self.value.upper())
        object.__setattr__(self, 'start_time', start_time)
        object.__setattr__(self, 'end_time', end_time)
        object.__setattr__(self, 'day', day)

    @staticmethod
    def is_valid_appointment(text: str) -> bool:
        """Returns true if a given string is a valid appointment."""
        if text is None:
            raise NullInputError("Appointment text must not be None")
        return _parse(text) is not None

    @staticmethod
    def find_overlapping_pair(
        appointments: Iterable['Appointment']
    ) -> Optional[Tuple['Appointment', 'Appointment']]:
        """Return the first pair of distinct overlapping appointments, if any."""
        # Equal appointments count once
        unique = list(dict.fromkeys(appointments))
        for i, appointment in enumerate(unique):
            for other in unique[i + 1:]:
                if appointment.overlaps_with(other):
                    return appointment, other
        return None

    @staticmethod
    def has_overlapping(appointments: Iterable['Appointment']) -> bool:
        """Returns true if any two appointments in the collection overlap."""
        return Appointment.find_overlapping_pair(appointments) is not None

    def overlaps_with(self, other: 'Appointment') -> bool:
        """Check if this appointment overlaps with another on the same day."""
        if self.day != other.day:
            return False
        return self.start_time < other.end_time and other.start_time < self.end_time

    def duration_minutes(self) -> int:
        """Calculate appointment duration in minutes."""
        start = self.start_time.hour * 60 + self.start_time.minute
        end = self.end_time.hour * 60 + self.end_time.minute
        return end - start

    @property
    def sort_key(self) -> Tuple[int, time]:
        """Day of week first, then start time."""
        return self.day.number, self.start_time

    def __lt__(self, other: 'Appointment') -> bool:
        if not isinstance(other, Appointment):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return self.value

    def to_dict(self) -> dict:
        """Convert to dictionary for display and export."""
        return {
            'value': self.value,
            'day': self.day.value,
            'start_time': self.start_time.strftime('%H:%M'),
            'end_time': self.end_time.strftime('%H:%M'),
        }
