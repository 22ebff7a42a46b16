# File: tutorrec/processors/schedule_processor.py
"""
Weekly schedule processing.
Groups appointments by weekday and resolves them to concrete,
timezone-aware datetimes for "what's next" views.
"""

import datetime
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import pytz

from tutorrec.core.address_book import AddressBook
from tutorrec.core.config_manager import Config
from tutorrec.models import Appointment, Weekday
from tutorrec.utils.logger import setup_logger


@dataclass
class UpcomingSession:
    """A concrete occurrence of a weekly appointment."""
    person_name: Optional[str]
    appointment: Appointment
    starts_at: datetime.datetime
    ends_at: datetime.datetime

    def to_dict(self) -> dict:
        """Convert to dictionary for display."""
        return {
            'person': self.person_name,
            'appointment': str(self.appointment),
            'starts_at': self.starts_at.isoformat(),
            'ends_at': self.ends_at.isoformat(),
            'duration_minutes': self.appointment.duration_minutes(),
        }


class ScheduleProcessor:
    """Turns weekly appointments into day groups and dated sessions."""

    def __init__(self, timezone: str = Config.TARGET_TIMEZONE):
        """
        Initialize schedule processor.

        Args:
            timezone: Timezone name (e.g., 'Europe/Amsterdam')
        """
        self.timezone = pytz.timezone(timezone)
        self.logger = setup_logger(__name__)

    def group_by_day(self, appointments: Iterable[Appointment]) -> Dict[Weekday, List[Appointment]]:
        """Group appointments by weekday, each day sorted by start time."""
        grouped: Dict[Weekday, List[Appointment]] = defaultdict(list)
        for appointment in sorted(appointments, key=lambda a: a.sort_key):
            grouped[appointment.day].append(appointment)
        return {day: grouped[day] for day in Weekday if day in grouped}

    def _localize(self, moment: Optional[datetime.datetime]) -> datetime.datetime:
        """Express `moment` (default: now) in the processor's timezone."""
        if moment is None:
            return datetime.datetime.now(self.timezone)
        if moment.tzinfo is None:
            return self.timezone.localize(moment)
        return moment.astimezone(self.timezone)

    def _at(self, date: datetime.date, clock: datetime.time) -> datetime.datetime:
        return self.timezone.localize(datetime.datetime.combine(date, clock))

    def next_occurrence(
        self,
        appointment: Appointment,
        after: Optional[datetime.datetime] = None
    ) -> datetime.datetime:
        """
        First start of `appointment` at or after `after`.

        Args:
            appointment: Weekly appointment
            after: Reference moment; naive values are taken as local time

        Returns:
            Timezone-aware start datetime
        """
        now = self._localize(after)
        days_ahead = (appointment.day.python_weekday - now.weekday()) % 7
        date = now.date() + datetime.timedelta(days=days_ahead)

        start = self._at(date, appointment.start_time)
        if start < now:
            start = self._at(date + datetime.timedelta(days=7), appointment.start_time)
        return start

    def upcoming_sessions(
        self,
        address_book: AddressBook,
        after: Optional[datetime.datetime] = None,
        limit: Optional[int] = None
    ) -> List[UpcomingSession]:
        """
        Next occurrence of every appointment in the book, soonest first.

        Args:
            address_book: Book whose aggregate appointments are listed
            after: Reference moment (default: now)
            limit: Maximum number of sessions to return

        Returns:
            List of UpcomingSession objects
        """
        sessions: List[UpcomingSession] = []
        for appointment in address_book.get_appointment_list():
            starts_at = self.next_occurrence(appointment, after)
            ends_at = self._at(starts_at.date(), appointment.end_time)
            owner = address_book.find_owner(appointment)
            sessions.append(UpcomingSession(
                person_name=owner.name if owner else None,
                appointment=appointment,
                starts_at=starts_at,
                ends_at=ends_at,
            ))

        sessions.sort(key=lambda s: s.starts_at)
        if limit is not None:
            sessions = sessions[:limit]

        self.logger.info(f"Resolved {len(sessions)} upcoming sessions")
        return sessions
