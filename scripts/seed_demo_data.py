#!/usr/bin/env python3
"""Fill an empty database with demo colleges, events, students and activity.

Usage:
    ENVIRONMENT=development python scripts/seed_demo_data.py
    python scripts/seed_demo_data.py --database-url sqlite:///data/demo.db
"""

import argparse
import logging
import sys
from datetime import timedelta
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from campus_events.db import Database, DatabaseConfig, EntityStore
from campus_events.models.schemas import (
    AttendanceCreate,
    CollegeCreate,
    EventCreate,
    FeedbackCreate,
    RegistrationCreate,
    StudentCreate,
)
from campus_events.reports import ReportService
from campus_events.utils.timezone import now_utc

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

COLLEGES = [
    "Massachusetts Institute of Technology",
    "Stanford University",
    "University of California, Berkeley",
]

# (college index, name, type, description, days from now, capacity, created by)
EVENTS = [
    (0, "AI & Machine Learning Workshop", "Workshop",
     "Learn the fundamentals of AI and ML with hands-on projects", 7, 50, "Dr. Sarah Johnson"),
    (1, "Tech Career Fair", "Career",
     "Meet with top tech companies and explore career opportunities", 14, 200, "Career Services"),
    (2, "Innovation Exhibition", "Exhibition",
     "Showcase of student projects and innovative solutions", 21, 100, "Prof. Michael Chen"),
    (0, "Cultural Fest", "Cultural",
     "Celebrate diversity with music, dance, and food from around the world", 30, 300, "Student Council"),
]

# (college index, name, email)
STUDENTS = [
    (0, "Alex Thompson", "alex.thompson@mit.edu"),
    (1, "Emma Rodriguez", "emma.rodriguez@stanford.edu"),
    (2, "James Wilson", "james.wilson@berkeley.edu"),
    (0, "Sophia Chen", "sophia.chen@mit.edu"),
    (1, "Michael Brown", "michael.brown@stanford.edu"),
]

# (event index, student index, attended or None for unmarked, rating or None, comment)
ACTIVITY = [
    (0, 0, True, 5, "Excellent workshop, learned a lot!"),
    (0, 1, True, 4, "Great content, could use more hands-on time"),
    (0, 3, False, None, None),
    (1, 1, True, 5, "Met several recruiters"),
    (1, 2, True, 3, None),
    (1, 4, None, None, None),
    (2, 2, True, 4, "Impressive projects"),
    (2, 3, True, None, None),
]


def seed(database: Database) -> None:
    """Insert the demo data through the entity store."""
    database.ensure_tables_exist()
    store = EntityStore(database)

    if store.list_colleges():
        logger.warning("Database already contains colleges, skipping seed")
        return

    colleges = [store.create_college(CollegeCreate(name=name)) for name in COLLEGES]
    logger.info(f"Created {len(colleges)} colleges")

    now = now_utc()
    events = [
        store.create_event(EventCreate(
            college_id=colleges[college].id,
            name=name,
            type=event_type,
            description=description,
            date=now + timedelta(days=days),
            max_capacity=capacity,
            created_by=created_by,
        ))
        for college, name, event_type, description, days, capacity, created_by in EVENTS
    ]
    logger.info(f"Created {len(events)} events")

    students = [
        store.create_student(StudentCreate(college_id=colleges[college].id, name=name, email=email))
        for college, name, email in STUDENTS
    ]
    logger.info(f"Created {len(students)} students")

    for event, student, attended, rating, comment in ACTIVITY:
        registration = store.create_registration(RegistrationCreate(
            event_id=events[event].id,
            student_id=students[student].id,
        ))
        if attended is not None:
            store.mark_attendance(AttendanceCreate(registration_id=registration.id, attended=attended))
        if rating is not None:
            store.submit_feedback(FeedbackCreate(
                registration_id=registration.id,
                rating=rating,
                comment=comment,
            ))
    logger.info(f"Created {len(ACTIVITY)} registrations with attendance and feedback")

    summary = ReportService(database).dashboard_summary()
    logger.info(f"Seeded database: {summary.to_dict()}")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--database-url', help="Override DATABASE_URL")
    args = parser.parse_args()

    database = Database(DatabaseConfig(url=args.database_url))
    try:
        seed(database)
    except Exception as e:
        logger.error(f"Seeding failed: {e}")
        return 1
    finally:
        database.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
