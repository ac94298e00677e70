"""Tests for the relationship joiner."""

from datetime import datetime, timedelta, timezone


def test_joins_on_empty_store_return_empty_lists(joiner):
    assert joiner.events_with_college_and_count() == []
    assert joiner.students_with_college() == []
    assert joiner.registrations_with_event_and_student() == []
    assert joiner.attendance_for_event("missing") == []
    assert joiner.feedback_for_event("missing") == []


def test_events_carry_college_and_registration_count(joiner, factory):
    college = factory.college("MIT")
    busy = factory.event(college=college, name="Busy", days=1)
    quiet = factory.event(college=college, name="Quiet", days=2)
    for _ in range(3):
        factory.register(busy, factory.student(college=college))

    rows = {row['id']: row for row in joiner.events_with_college_and_count()}

    assert rows[busy.id]['registrationCount'] == 3
    assert rows[quiet.id]['registrationCount'] == 0
    assert rows[busy.id]['college']['name'] == "MIT"
    assert rows[busy.id]['maxCapacity'] == busy.max_capacity


def test_events_ordered_by_date_descending(joiner, factory):
    early = factory.event(days=1)
    late = factory.event(days=10)
    middle = factory.event(days=5)

    ids = [row['id'] for row in joiner.events_with_college_and_count()]

    assert ids == [late.id, middle.id, early.id]


def test_event_dates_with_offsets_order_by_instant(joiner, factory):
    # 09:00 in UTC+05:00 is 04:00 UTC, before 08:00 UTC
    plus_five = timezone(timedelta(hours=5))
    earlier = factory.event(date=datetime(2025, 3, 1, 9, 0, tzinfo=plus_five))
    later = factory.event(date=datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc))

    rows = joiner.events_with_college_and_count()

    assert [row['id'] for row in rows] == [later.id, earlier.id]
    assert rows[1]['date'] == "2025-03-01T04:00:00+00:00"


def test_students_ordered_by_name_with_college(joiner, factory):
    college = factory.college("Stanford")
    factory.student(college=college, name="Zoe")
    factory.student(college=college, name="Adam")
    factory.student(college=college, name="Maya")

    rows = joiner.students_with_college()

    assert [row['name'] for row in rows] == ["Adam", "Maya", "Zoe"]
    assert all(row['college']['name'] == "Stanford" for row in rows)


def test_registrations_carry_event_and_student_newest_first(joiner, factory):
    event = factory.event(name="Hackathon")
    students = [factory.student() for _ in range(3)]
    for student in students:
        factory.register(event, student)

    rows = joiner.registrations_with_event_and_student()

    assert len(rows) == 3
    assert all(row['event']['name'] == "Hackathon" for row in rows)
    assert {row['student']['id'] for row in rows} == {s.id for s in students}
    timestamps = [row['registeredAt'] for row in rows]
    assert timestamps == sorted(timestamps, reverse=True)


def test_attendance_for_event_is_restricted_to_that_event(joiner, factory):
    event, other = factory.event(), factory.event()
    student = factory.student(name="Lena")
    registration = factory.register(event, student)
    factory.attend(registration)
    factory.attend(factory.register(other, factory.student()))

    rows = joiner.attendance_for_event(event.id)

    assert len(rows) == 1
    assert rows[0]['attended'] is True
    assert rows[0]['registration']['id'] == registration.id
    assert rows[0]['registration']['student']['name'] == "Lena"


def test_feedback_for_event_includes_registration_and_student(joiner, factory):
    event = factory.event()
    registration = factory.register(event, factory.student(name="Omar"))
    factory.rate(registration, 5, "Great talk")
    factory.register(event, factory.student())

    rows = joiner.feedback_for_event(event.id)

    assert len(rows) == 1
    assert rows[0]['rating'] == 5
    assert rows[0]['comment'] == "Great talk"
    assert rows[0]['registration']['student']['name'] == "Omar"
