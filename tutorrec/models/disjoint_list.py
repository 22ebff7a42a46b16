# File: tutorrec/models/disjoint_list.py
"""
A list of appointments in which no two appointments overlap.

Used for a single person's appointments and for the address-book-wide
aggregate. Every mutation validates first and only then changes the list,
so a rejected call leaves the contents untouched.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from tutorrec.utils.logger import setup_logger
from .appointment import Appointment
from .exceptions import (
    AppointmentNotFoundError,
    DuplicateAppointmentError,
    OverlappingAppointmentError,
)

logger = setup_logger(__name__)


class DisjointAppointmentList:
    """Ordered container enforcing that no two members overlap."""

    def __init__(self, appointments: Optional[Iterable[Appointment]] = None):
        self._internal_list: List[Appointment] = []
        if appointments is not None:
            self.set_appointments(appointments)

    def contains(self, appointment: Appointment) -> bool:
        """Returns true if an equal appointment is in the list."""
        return appointment in self._internal_list

    def find_overlapping(
        self,
        candidate: Appointment,
        exclude: Optional[Appointment] = None
    ) -> Optional[Appointment]:
        """Return the first member overlapping the candidate, skipping `exclude`."""
        for appointment in self._internal_list:
            if exclude is not None and appointment == exclude:
                continue
            if appointment.overlaps_with(candidate):
                return appointment
        return None

    def overlaps(self, candidate: Appointment) -> bool:
        """Returns true if the candidate overlaps any appointment in the list."""
        return self.find_overlapping(candidate) is not None

    def add(self, appointment: Appointment) -> None:
        """
        Add an appointment. Call sort() afterwards to restore display order.

        Raises:
            DuplicateAppointmentError: an equal appointment is already present
            OverlappingAppointmentError: it overlaps an existing appointment
        """
        if self.contains(appointment):
            logger.warning(f"Rejected duplicate appointment {appointment}")
            raise DuplicateAppointmentError(appointment)

        conflicting = self.find_overlapping(appointment)
        if conflicting is not None:
            logger.warning(f"Rejected appointment {appointment}: overlaps {conflicting}")
            raise OverlappingAppointmentError(appointment, conflicting)

        self._internal_list.append(appointment)
        logger.debug(f"Added appointment {appointment}")

    def remove(self, appointment: Appointment) -> None:
        """Remove an equal appointment from the list."""
        if not self.contains(appointment):
            raise AppointmentNotFoundError(appointment)
        self._internal_list.remove(appointment)
        logger.debug(f"Removed appointment {appointment}")

    def set_appointment(self, target: Appointment, edited: Appointment) -> None:
        """
        Replace `target` with `edited` in place.

        `target` is left out of the overlap check since it is the slot being
        replaced, so editing an appointment to itself is allowed.
        """
        if not self.contains(target):
            raise AppointmentNotFoundError(target)

        conflicting = self.find_overlapping(edited, exclude=target)
        if conflicting is not None:
            logger.warning(f"Rejected edit {target} -> {edited}: overlaps {conflicting}")
            raise OverlappingAppointmentError(edited, conflicting)

        index = self._internal_list.index(target)
        self._internal_list[index] = edited
        logger.debug(f"Replaced appointment {target} with {edited}")

    def set_appointments(self, appointments: Iterable[Appointment]) -> None:
        """Replace the whole contents. The new appointments must be disjoint."""
        replacement = list(appointments)

        seen = set()
        for appointment in replacement:
            if appointment in seen:
                logger.warning(f"Rejected appointment list: {appointment} appears twice")
                raise DuplicateAppointmentError(appointment)
            seen.add(appointment)

        pair = Appointment.find_overlapping_pair(replacement)
        if pair is not None:
            logger.warning(f"Rejected appointment list: {pair[0]} overlaps {pair[1]}")
            raise OverlappingAppointmentError(*pair)

        self._internal_list = replacement
        logger.debug(f"Replaced appointment list with {len(replacement)} appointments")

    def sort(self) -> None:
        """Sort by day of week, then start time."""
        self._internal_list.sort(key=lambda appointment: appointment.sort_key)

    def as_unmodifiable_list(self) -> Tuple[Appointment, ...]:
        """Read-only snapshot in the current list order."""
        return tuple(self._internal_list)

    def __contains__(self, appointment: object) -> bool:
        return appointment in self._internal_list

    def __iter__(self) -> Iterator[Appointment]:
        return iter(tuple(self._internal_list))

    def __len__(self) -> int:
        return len(self._internal_list)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, DisjointAppointmentList):
            return NotImplemented
        return set(self._internal_list) == set(other._internal_list)

    __hash__ = None

    def __repr__(self) -> str:
        return f"DisjointAppointmentList({[str(a) for a in self._internal_list]})"
