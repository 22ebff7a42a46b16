# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable appointments, persons and address books for all tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Keep test runs from writing daily log files
os.environ.setdefault("TUTORREC_LOG_TO_FILE", "false")

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tutorrec.core.address_book import AddressBook
from tutorrec.models import Appointment, DisjointAppointmentList, Person


# ==================== Appointment Fixtures ====================

@pytest.fixture
def monday_appointments():
    """Three disjoint Monday appointments with gaps between them."""
    return [
        Appointment("10:00-11:00 MON"),
        Appointment("12:00-13:00 MON"),
        Appointment("14:00-15:00 MON"),
    ]


@pytest.fixture
def monday_list(monday_appointments):
    """DisjointAppointmentList holding the three Monday appointments."""
    appointments = DisjointAppointmentList()
    for appointment in monday_appointments:
        appointments.add(appointment)
    appointments.sort()
    return appointments


# ==================== Person Fixtures ====================

@pytest.fixture
def amy():
    """Student with two weekday sessions."""
    return Person(
        name="Amy Bee",
        phone="85355255",
        email="amy@gmail.com",
        address="123, Jurong West Ave 6, #08-111",
        note="She likes aardvarks.",
        tags=frozenset({"math"}),
        appointments=[Appointment("09:00-10:00 MON"), Appointment("16:00-17:30 WED")],
    )


@pytest.fixture
def bob():
    """Student with a Monday and a Friday session."""
    return Person(
        name="Bob Choo",
        phone="22222222",
        email="bob@example.com",
        tags=frozenset({"physics", "sec4"}),
        appointments=[Appointment("10:00-11:00 MON"), Appointment("13:00-14:00 FRI")],
    )


@pytest.fixture
def carl():
    """Student without appointments."""
    return Person(name="Carl Kurz", phone="95352563")


@pytest.fixture
def address_book(amy, bob):
    """Address book holding Amy and Bob."""
    book = AddressBook()
    book.add_person(amy)
    book.add_person(bob)
    return book
