"""
university/admin/seed_university.py

Dev/test harness - bulk-populate a UniversityFacade.

THIS MODULE IS DEV-ONLY. It exists so tests and demos can build a known
set of records in one call.

No business logic lives here. Every write goes through the facade:
  - add_student / add_faculty / add_course
  - assign_course
  - enroll_in_course

Errors from the facade (NotFoundError, AlreadyExistsError) propagate
unchanged; records written before the failing step are kept.
"""

from collections.abc import Iterable

from university.config import UNASSIGNED_FACULTY_ID
from university.records.university_facade import UniversityFacade


def seed_university(
    facade: UniversityFacade,
    *,
    students: Iterable[tuple[int, str]] = (),
    faculty: Iterable[tuple[int, str]] = (),
    courses: Iterable[tuple] = (),
    assignments: Iterable[tuple[int, int]] = (),
    enrollments: Iterable[tuple[int, int]] = (),
) -> dict:
    """Add records and relationships to *facade* in dependency order.

    Order: students, faculty, courses, assignments, enrollments. Courses are
    added after faculty so a course naming an existing faculty member is
    linked to that member's taught set.

    Args:
        facade:      Target facade.
        students:    (student_id, name) pairs.
        faculty:     (faculty_id, name) pairs.
        courses:     (course_id, name) or (course_id, name, faculty_id).
        assignments: (faculty_id, course_id) pairs.
        enrollments: (student_id, course_id) pairs.

    Returns:
        dict with keys:
            ok           (bool) Always True on success.
            students     (int)  Students added.
            faculty      (int)  Faculty members added.
            courses      (int)  Courses added.
            assignments  (int)  assign_course calls made.
            enrollments  (int)  enroll_in_course calls made.
    """
    counts = {
        "students": 0,
        "faculty": 0,
        "courses": 0,
        "assignments": 0,
        "enrollments": 0,
    }

    for student_id, name in students:
        facade.add_student(student_id, name)
        counts["students"] += 1

    for faculty_id, name in faculty:
        facade.add_faculty(faculty_id, name)
        counts["faculty"] += 1

    for course in courses:
        course_id, name, *rest = course
        faculty_id = rest[0] if rest else UNASSIGNED_FACULTY_ID
        facade.add_course(course_id, name, faculty_id)
        counts["courses"] += 1

    for faculty_id, course_id in assignments:
        facade.assign_course(faculty_id, course_id)
        counts["assignments"] += 1

    for student_id, course_id in enrollments:
        facade.enroll_in_course(student_id, course_id)
        counts["enrollments"] += 1

    return {"ok": True, **counts}
