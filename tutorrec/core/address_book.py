# File: tutorrec/core/address_book.py
"""
Address book aggregate.

Wraps the person roster and the address-book-wide appointment list, and keeps
the appointment list equal to the union of every person's appointments.
Persons are unique by Person.is_same_person; appointments never overlap, not
even across different persons.
"""

from dataclasses import replace
from typing import Iterable, List, Optional, Tuple, Union

from tutorrec.models import (
    Appointment,
    DisjointAppointmentList,
    DuplicatePersonError,
    OverlappingAppointmentError,
    Person,
    PersonNotFoundError,
    UniquePersonList,
)
from tutorrec.utils.logger import LoggerMixin


class AddressBook(LoggerMixin):
    """
    Wraps all data at the address-book level.

    Every person-level operation validates the whole change before touching
    either container, so a rejected change leaves the book as it was.
    """

    def __init__(self, to_be_copied: Optional['AddressBook'] = None):
        """
        Initialize an empty address book, or a copy of `to_be_copied`.

        Args:
            to_be_copied: Address book whose persons are copied in
        """
        self._persons = UniquePersonList()
        self._appointments = DisjointAppointmentList()

        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    # ==================== List overwrite operations ====================

    def set_persons(self, persons: Iterable[Person]) -> None:
        """
        Replace the roster with `persons` and rebuild the appointment list.

        The rebuilt list is validated as a whole: appointments of different
        persons must not overlap or repeat each other.
        """
        persons = list(persons)

        new_persons = UniquePersonList()
        new_persons.set_persons(persons)

        new_appointments = DisjointAppointmentList(
            appointment
            for person in persons
            for appointment in person.get_appointments()
        )
        new_appointments.sort()

        self._persons = new_persons
        self._appointments = new_appointments
        self.logger.debug(
            f"Roster reset: {len(new_persons)} persons, {len(new_appointments)} appointments"
        )

    def reset_data(self, new_data: 'AddressBook') -> None:
        """Resets the existing data of this address book with `new_data`."""
        if new_data is None:
            raise TypeError("new_data must not be None")
        self.set_persons(new_data.get_person_list())

    # ==================== Person-level operations ====================

    def has_person(self, person: Person) -> bool:
        """Returns true if a person with the same identity exists in the book."""
        return self._persons.contains(person)

    def find_near_duplicates(self, person: Person) -> List[str]:
        """Returns names of persons with a similar name to `person`."""
        return self._persons.find_near_duplicates(person)

    def find_owner(self, appointment: Appointment) -> Optional[Person]:
        """Returns the person holding `appointment`, if any."""
        for person in self._persons:
            if person.appointments.contains(appointment):
                return person
        return None

    def add_person(self, person: Person) -> None:
        """
        Adds a person and all of their appointments.

        The person must not already exist, and none of their appointments may
        overlap an appointment already in the book.
        """
        if self._persons.contains(person):
            self.logger.warning(f"Rejected new person '{person.name}': already exists")
            raise DuplicatePersonError(person)
        self._check_no_conflicts(person.get_appointments())

        self._persons.add(person)
        for appointment in person.get_appointments():
            self._appointments.add(appointment)
        self._appointments.sort()
        self.logger.debug(f"Added person '{person.name}'")

    def set_person(self, target: Person, edited: Person) -> None:
        """
        Replaces `target` with `edited`.

        `target`'s appointments are released before `edited`'s are checked, so
        an edit that keeps or shifts the same slots is not reported as an
        overlap with itself.
        """
        if edited is None:
            raise TypeError("edited person must not be None")
        if not self._persons.contains(target):
            raise PersonNotFoundError(target)
        if not target.is_same_person(edited) and self._persons.contains(edited):
            self.logger.warning(f"Rejected edit of '{target.name}': '{edited.name}' already exists")
            raise DuplicatePersonError(edited)

        released = self._appointments_of(target)
        self._check_no_conflicts(edited.get_appointments(), excluded=released)

        self._persons.set_person(target, edited)
        for appointment in released:
            self._appointments.remove(appointment)
        for appointment in edited.get_appointments():
            self._appointments.add(appointment)
        self._appointments.sort()
        self.logger.debug(f"Replaced person '{target.name}' with '{edited.name}'")

    def remove_person(self, key: Person) -> None:
        """Removes `key` and their appointments from the book."""
        released = self._appointments_of(key)
        self._persons.remove(key)

        for appointment in released:
            self._appointments.remove(appointment)
        self._appointments.sort()
        self.logger.debug(f"Removed person '{key.name}'")

    # ==================== Appointment-level operations ====================

    def add_appointment(self, appointment: Appointment) -> None:
        """Adds an appointment. It must not overlap existing appointments."""
        self._appointments.add(appointment)
        self._appointments.sort()

    def set_appointment(self, target: Appointment, edited: Appointment) -> None:
        """
        Replaces the appointment `target` with `edited`.

        `edited` must not overlap any appointment other than `target`. The
        person holding `target`, if any, gets `edited` in its place.
        """
        if edited is None:
            raise TypeError("edited appointment must not be None")

        owner = self.find_owner(target)
        updated_owner = None
        if owner is not None:
            updated_owner = replace(owner, appointments=[
                edited if appointment == target else appointment
                for appointment in owner.get_appointments()
            ])

        self._appointments.set_appointment(target, edited)
        self._appointments.sort()
        if updated_owner is not None:
            self._persons.set_person(owner, updated_owner)

    def remove_appointment(self, appointment: Appointment) -> None:
        """Removes an appointment from the book and from the person holding it."""
        owner = self.find_owner(appointment)

        self._appointments.remove(appointment)
        self._appointments.sort()
        if owner is not None:
            self._persons.set_person(owner, replace(owner, appointments=[
                a for a in owner.get_appointments() if a != appointment
            ]))

    def appointments_overlap(
        self,
        appointments: Union[Appointment, Iterable[Appointment]]
    ) -> bool:
        """Returns true if the appointment, or any in a collection, overlaps the book's."""
        if appointments is None:
            raise TypeError("appointments must not be None")
        if isinstance(appointments, Appointment):
            return self._appointments.overlaps(appointments)
        return any(self._appointments.overlaps(a) for a in appointments)

    # ==================== Helpers ====================

    def _appointments_of(self, person: Person) -> List[Appointment]:
        """Book-wide appointments that belong to the stored version of `person`."""
        for existing in self._persons:
            if existing.is_same_person(person):
                return [a for a in existing.get_appointments() if self._appointments.contains(a)]
        return []

    def _check_no_conflicts(
        self,
        appointments: Iterable[Appointment],
        excluded: Iterable[Appointment] = ()
    ) -> None:
        """Raise if any of `appointments` overlaps a book appointment not in `excluded`."""
        excluded = set(excluded)
        for appointment in appointments:
            for existing in self._appointments:
                if existing in excluded:
                    continue
                if existing.overlaps_with(appointment):
                    self.logger.warning(f"Rejected appointment {appointment}: overlaps {existing}")
                    raise OverlappingAppointmentError(appointment, existing)

    # ==================== Read views ====================

    def get_person_list(self) -> Tuple[Person, ...]:
        return self._persons.as_unmodifiable_list()

    def get_appointment_list(self) -> Tuple[Appointment, ...]:
        """Appointments sorted by day, then start time."""
        return self._appointments.as_unmodifiable_list()

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons and self._appointments == other._appointments

    __hash__ = None

    def __repr__(self) -> str:
        names = [person.name for person in self._persons]
        return f"{self.__class__.__module__}.{self.__class__.__name__}{{persons={names}}}"
