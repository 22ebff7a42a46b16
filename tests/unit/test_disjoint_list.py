# File: tests/unit/test_disjoint_list.py
"""
Unit tests for DisjointAppointmentList.
Every rejected mutation must leave the list unchanged.
"""

import pytest

from tutorrec.models import (
    Appointment,
    AppointmentNotFoundError,
    DisjointAppointmentList,
    DuplicateAppointmentError,
    OverlappingAppointmentError,
)


def texts(appointments):
    return [str(a) for a in appointments]


# ==================== add ====================

class TestAdd:
    """Tests for adding single appointments."""

    def test_add_disjoint_appointments(self, monday_list):
        assert len(monday_list) == 3
        assert Appointment.has_overlapping(monday_list) is False

    def test_add_overlapping_raises_and_leaves_list_unchanged(self, monday_list):
        before = monday_list.as_unmodifiable_list()
        intruder = Appointment("10:30-10:45 MON")

        with pytest.raises(OverlappingAppointmentError) as excinfo:
            monday_list.add(intruder)

        assert excinfo.value.appointment == intruder
        assert excinfo.value.conflicting == Appointment("10:00-11:00 MON")
        assert len(monday_list) == 3
        assert monday_list.as_unmodifiable_list() == before

    def test_add_duplicate_raises(self, monday_list):
        with pytest.raises(DuplicateAppointmentError):
            monday_list.add(Appointment("12:00-13:00 mon"))
        assert len(monday_list) == 3

    def test_add_touching_appointment(self, monday_list):
        monday_list.add(Appointment("11:00-12:00 MON"))
        assert len(monday_list) == 4

    def test_add_same_time_other_day(self, monday_list):
        monday_list.add(Appointment("10:00-11:00 TUE"))
        assert Appointment("10:00-11:00 TUE") in monday_list

    def test_add_does_not_sort_until_asked(self):
        appointments = DisjointAppointmentList()
        appointments.add(Appointment("10:00-11:00 WED"))
        appointments.add(Appointment("10:00-11:00 MON"))

        assert texts(appointments.as_unmodifiable_list()) == ["10:00-11:00 WED", "10:00-11:00 MON"]

        appointments.sort()
        assert texts(appointments.as_unmodifiable_list()) == ["10:00-11:00 MON", "10:00-11:00 WED"]


# ==================== remove ====================

class TestRemove:
    """Tests for removing appointments."""

    def test_remove_existing(self, monday_list):
        monday_list.remove(Appointment("12:00-13:00 MON"))

        assert len(monday_list) == 2
        assert not monday_list.contains(Appointment("12:00-13:00 MON"))

    def test_remove_missing_raises(self, monday_list):
        with pytest.raises(AppointmentNotFoundError):
            monday_list.remove(Appointment("12:00-13:00 TUE"))
        assert len(monday_list) == 3

    def test_removed_slot_can_be_reused(self, monday_list):
        monday_list.remove(Appointment("10:00-11:00 MON"))
        monday_list.add(Appointment("10:30-10:45 MON"))
        assert Appointment.has_overlapping(monday_list) is False


# ==================== set_appointment ====================

class TestSetAppointment:
    """Tests for replacing one appointment in place."""

    def test_edit_overlapping_its_own_slot(self):
        target = Appointment("09:00-10:00 MON")
        edited = Appointment("09:30-10:30 MON")
        appointments = DisjointAppointmentList([target])

        appointments.set_appointment(target, edited)

        assert texts(appointments) == ["09:30-10:30 MON"]

    def test_edit_to_itself_is_allowed(self, monday_list):
        target = Appointment("12:00-13:00 MON")
        monday_list.set_appointment(target, Appointment("12:00-13:00 MON"))
        assert len(monday_list) == 3

    def test_edit_keeps_position(self, monday_list):
        monday_list.set_appointment(Appointment("12:00-13:00 MON"), Appointment("08:00-09:00 SUN"))

        assert texts(monday_list) == ["10:00-11:00 MON", "08:00-09:00 SUN", "14:00-15:00 MON"]

    def test_edit_missing_target_raises(self, monday_list):
        with pytest.raises(AppointmentNotFoundError):
            monday_list.set_appointment(Appointment("12:00-13:00 TUE"), Appointment("12:00-13:00 WED"))

    def test_edit_overlapping_other_raises_and_leaves_list_unchanged(self, monday_list):
        before = monday_list.as_unmodifiable_list()

        with pytest.raises(OverlappingAppointmentError) as excinfo:
            monday_list.set_appointment(Appointment("12:00-13:00 MON"), Appointment("12:30-14:30 MON"))

        assert excinfo.value.conflicting == Appointment("14:00-15:00 MON")
        assert monday_list.as_unmodifiable_list() == before

    def test_edit_onto_another_member_raises(self, monday_list):
        with pytest.raises(OverlappingAppointmentError):
            monday_list.set_appointment(Appointment("12:00-13:00 MON"), Appointment("14:00-15:00 MON"))


# ==================== set_appointments ====================

class TestSetAppointments:
    """Tests for bulk replacement."""

    def test_replaces_contents(self, monday_list):
        monday_list.set_appointments([Appointment("10:00-11:00 FRI")])
        assert texts(monday_list) == ["10:00-11:00 FRI"]

    def test_empty_clears(self, monday_list):
        monday_list.set_appointments([])
        assert len(monday_list) == 0

    def test_overlapping_input_raises_and_leaves_list_unchanged(self, monday_list):
        before = monday_list.as_unmodifiable_list()

        with pytest.raises(OverlappingAppointmentError):
            monday_list.set_appointments([
                Appointment("10:00-11:00 FRI"),
                Appointment("10:59-11:30 FRI"),
            ])

        assert monday_list.as_unmodifiable_list() == before

    def test_duplicate_input_raises(self):
        appointments = DisjointAppointmentList()

        with pytest.raises(DuplicateAppointmentError):
            appointments.set_appointments([
                Appointment("10:00-11:00 FRI"),
                Appointment("10:00-11:00 fri"),
            ])

        assert len(appointments) == 0

    def test_constructor_validates(self):
        with pytest.raises(OverlappingAppointmentError):
            DisjointAppointmentList([Appointment("10:00-12:00 SAT"), Appointment("11:00-13:00 SAT")])


# ==================== Queries ====================

class TestQueries:
    """Tests for overlap queries, sorting and equality."""

    def test_overlaps(self, monday_list):
        assert monday_list.overlaps(Appointment("10:30-10:45 MON")) is True
        assert monday_list.overlaps(Appointment("11:00-12:00 MON")) is False
        assert monday_list.overlaps(Appointment("10:30-10:45 TUE")) is False

    def test_overlaps_does_not_mutate(self, monday_list):
        monday_list.overlaps(Appointment("10:30-10:45 MON"))
        assert len(monday_list) == 3

    def test_find_overlapping_with_exclude(self, monday_list):
        candidate = Appointment("10:30-12:30 MON")
        assert monday_list.find_overlapping(candidate) == Appointment("10:00-11:00 MON")
        assert monday_list.find_overlapping(
            candidate, exclude=Appointment("10:00-11:00 MON")
        ) == Appointment("12:00-13:00 MON")

    def test_sort_is_idempotent(self):
        appointments = DisjointAppointmentList([
            Appointment("09:00-10:00 SUN"),
            Appointment("14:00-15:00 MON"),
            Appointment("07:00-08:00 MON"),
        ])
        appointments.sort()
        once = appointments.as_unmodifiable_list()
        appointments.sort()

        assert appointments.as_unmodifiable_list() == once
        assert texts(once) == ["07:00-08:00 MON", "14:00-15:00 MON", "09:00-10:00 SUN"]

    def test_equality_ignores_order(self, monday_appointments):
        forward = DisjointAppointmentList(monday_appointments)
        backward = DisjointAppointmentList(reversed(monday_appointments))

        assert forward == backward
        assert forward != DisjointAppointmentList(monday_appointments[:2])
        assert forward != monday_appointments

    def test_read_view_is_a_snapshot(self, monday_list):
        view = monday_list.as_unmodifiable_list()
        monday_list.add(Appointment("18:00-19:00 MON"))

        assert isinstance(view, tuple)
        assert len(view) == 3

    def test_invariant_holds_after_mixed_operations(self, monday_list):
        operations = [
            lambda: monday_list.add(Appointment("11:00-12:00 MON")),
            lambda: monday_list.add(Appointment("11:30-12:30 MON")),
            lambda: monday_list.remove(Appointment("14:00-15:00 MON")),
            lambda: monday_list.set_appointment(Appointment("12:00-13:00 MON"),
                                                Appointment("12:00-15:00 MON")),
            lambda: monday_list.set_appointment(Appointment("10:00-11:00 MON"),
                                                Appointment("10:00-12:30 MON")),
            lambda: monday_list.add(Appointment("15:00-16:00 MON")),
        ]
        for operation in operations:
            try:
                operation()
            except (OverlappingAppointmentError, DuplicateAppointmentError, AppointmentNotFoundError):
                pass

        assert Appointment.has_overlapping(monday_list) is False
        assert len(monday_list) == 4
