# File: tutorrec/models/person.py

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple

from .appointment import Appointment
from .disjoint_list import DisjointAppointmentList


def normalize_name(name: str) -> str:
    """Collapse whitespace and case so 'amy  BEE' and 'Amy Bee' match."""
    return ' '.join(name.split()).lower()


@dataclass
class Person:
    """Represents a contact and the weekly appointments booked with them."""
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    note: Optional[str] = None
    tags: FrozenSet[str] = field(default_factory=frozenset)
    appointments: DisjointAppointmentList = field(default_factory=DisjointAppointmentList)

    def __post_init__(self):
        """Validate the name and copy appointments into this person's own list."""
        if not self.name or not self.name.strip():
            raise ValueError("Person name cannot be blank")

        self.tags = frozenset(self.tags)

        # Always take a private copy so edited persons never share a list
        own = DisjointAppointmentList(self.appointments)
        own.sort()
        self.appointments = own

    def is_same_person(self, other: Optional['Person']) -> bool:
        """Two persons are the same contact when their names match."""
        if other is self:
            return True
        return other is not None and normalize_name(other.name) == normalize_name(self.name)

    def get_appointments(self) -> Tuple[Appointment, ...]:
        """Appointments sorted by day, then start time."""
        return self.appointments.as_unmodifiable_list()

    def to_dict(self) -> dict:
        """Convert to a plain dictionary, appointments as canonical text."""
        return {
            'name': self.name,
            'phone': self.phone,
            'email': self.email,
            'address': self.address,
            'note': self.note,
            'tags': sorted(self.tags),
            'appointments': [str(a) for a in self.get_appointments()],
        }


def person_from_dict(data: dict) -> Person:
    """Create Person from dictionary, parsing appointment text."""
    raw_appointments: Iterable[str] = data.get('appointments') or []
    return Person(
        name=str(data.get('name', '')),
        phone=data.get('phone'),
        email=data.get('email'),
        address=data.get('address'),
        note=data.get('note'),
        tags=frozenset(data.get('tags') or []),
        appointments=[Appointment(text) for text in raw_appointments],
    )
