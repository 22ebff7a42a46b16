from .enums import Weekday, DAY_ABBREVIATIONS, DAY_NUMBERS
from .exceptions import (
    TutorRecError,
    NullInputError,
    InvalidAppointmentError,
    DuplicateAppointmentError,
    OverlappingAppointmentError,
    AppointmentNotFoundError,
    DuplicatePersonError,
    PersonNotFoundError,
)
from .appointment import Appointment, MESSAGE_CONSTRAINTS
from .disjoint_list import DisjointAppointmentList
from .person import Person, person_from_dict
from .person_list import UniquePersonList

__all__ = [
    "Weekday",
    "DAY_ABBREVIATIONS",
    "DAY_NUMBERS",
    "TutorRecError",
    "NullInputError",
    "InvalidAppointmentError",
    "DuplicateAppointmentError",
    "OverlappingAppointmentError",
    "AppointmentNotFoundError",
    "DuplicatePersonError",
    "PersonNotFoundError",
    "Appointment",
    "MESSAGE_CONSTRAINTS",
    "DisjointAppointmentList",
    "Person",
    "person_from_dict",
    "UniquePersonList",
]
