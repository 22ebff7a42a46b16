# File: tutorrec/models/exceptions.py
"""
Error types raised by the TutorRec models.
"""


class TutorRecError(Exception):
    """Base class for domain errors raised by the address book."""


class NullInputError(TypeError):
    """A required text argument was None."""


class InvalidAppointmentError(ValueError):
    """Appointment text failed format or range validation."""


class DuplicateAppointmentError(TutorRecError):
    """An equal appointment is already in the list."""

    def __init__(self, appointment):
        self.appointment = appointment
        super().__init__(f"Appointment already exists: {appointment}")


class OverlappingAppointmentError(TutorRecError):
    """An appointment would overlap another one in the same list."""

    def __init__(self, appointment, conflicting):
        self.appointment = appointment
        self.conflicting = conflicting
        super().__init__(f"Appointment {appointment} overlaps with {conflicting}")


class AppointmentNotFoundError(TutorRecError):
    """The referenced appointment is not in the list."""

    def __init__(self, appointment):
        self.appointment = appointment
        super().__init__(f"Appointment not found: {appointment}")


class DuplicatePersonError(TutorRecError):
    """A person with the same identity is already in the list."""

    def __init__(self, person):
        self.person = person
        super().__init__(f"Person already exists: {person.name}")


class PersonNotFoundError(TutorRecError):
    """The referenced person is not in the list."""

    def __init__(self, person):
        self.person = person
        super().__init__(f"Person not found: {person.name}")
