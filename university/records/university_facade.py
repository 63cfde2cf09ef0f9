"""
university/records/university_facade.py

Single entry point over the student, faculty and course registries.

Lookups and adds are forwarded to one registry. Enrollment and assignment
touch two registries and are applied under both registries' write locks so
the two sides of the relationship never disagree once the call returns.

Lock order is always students -> faculty -> courses. Registries never take
each other's locks, so holding them in this order cannot deadlock.
"""

import logging

from university.config import UNASSIGNED_FACULTY_ID
from university.records.course_registry import CourseRegistry
from university.records.errors import NotFoundError
from university.records.faculty_registry import FacultyRegistry
from university.records.student_registry import StudentRegistry

logger = logging.getLogger(__name__)


class UniversityFacade:
    """Composes the three registries; owns no records of its own.

    Registries may be passed in (e.g. to share one between facades in a
    test); otherwise each facade builds fresh, independent ones.
    """

    def __init__(
        self,
        students: StudentRegistry | None = None,
        faculty: FacultyRegistry | None = None,
        courses: CourseRegistry | None = None,
    ) -> None:
        self.students = students if students is not None else StudentRegistry()
        self.faculty = faculty if faculty is not None else FacultyRegistry()
        self.courses = courses if courses is not None else CourseRegistry()

    # ------------------------------------------------------------------
    # Students
    # ------------------------------------------------------------------

    def add_student(self, student_id: int, name: str) -> None:
        self.students.add_student(student_id, name)

    def enroll_in_course(self, student_id: int, course_id: int) -> None:
        """Enroll a student in a course, updating both records.

        Both ids are checked before anything is written, so a failed call
        leaves every registry unchanged. Repeating the call is a no-op.

        Raises:
            NotFoundError: When the student or the course does not exist.
        """
        with self.students.lock.write_locked(), self.courses.lock.write_locked():
            if not self.students.has_student(student_id):
                logger.warning("enroll_in_course: student %s not found", student_id)
                raise NotFoundError("student", student_id)
            if not self.courses.has_course(course_id):
                logger.warning("enroll_in_course: course %s not found", course_id)
                raise NotFoundError("course", course_id)
            self.students.enroll_in_course(student_id, course_id)
            self.courses.enroll_student(course_id, student_id)
        logger.info("Student %s enrolled in course %s", student_id, course_id)

    def enroll_student(self, course_id: int, student_id: int) -> None:
        """Course-first spelling of enroll_in_course(); same effect."""
        self.enroll_in_course(student_id, course_id)

    def get_student_courses(self, student_id: int) -> set[int]:
        return self.students.get_student_courses(student_id)

    def get_student(self, student_id: int) -> dict:
        return self.students.get_student(student_id)

    # ------------------------------------------------------------------
    # Faculty
    # ------------------------------------------------------------------

    def add_faculty(self, faculty_id: int, name: str) -> None:
        """Register a faculty member and claim the courses already naming them.

        Any course added earlier with this faculty_id is put in the new
        member's taught set, so both sides agree from the start.

        Raises:
            AlreadyExistsError: When faculty_id is already registered.
        """
        with self.faculty.lock.write_locked(), self.courses.lock.write_locked():
            self.faculty.add_faculty(faculty_id, name)
            for course_id in self.courses.course_ids_taught_by(faculty_id):
                self.faculty.assign_course(faculty_id, course_id)

    def assign_course(self, faculty_id: int, course_id: int) -> None:
        """Make faculty_id the teacher of course_id.

        Updates the course's faculty_id and the faculty member's taught set.
        If the course was taught by someone else, it is removed from that
        member's taught set so each course has exactly one teacher.

        Raises:
            NotFoundError: When the faculty member or the course does not exist.
        """
        with self.faculty.lock.write_locked(), self.courses.lock.write_locked():
            if not self.faculty.has_faculty(faculty_id):
                logger.warning("assign_course: faculty %s not found", faculty_id)
                raise NotFoundError("faculty", faculty_id)
            if not self.courses.has_course(course_id):
                logger.warning("assign_course: course %s not found", course_id)
                raise NotFoundError("course", course_id)

            previous = self.courses.set_faculty(course_id, faculty_id)
            if previous != faculty_id and self.faculty.has_faculty(previous):
                self.faculty.release_course(previous, course_id)
            self.faculty.assign_course(faculty_id, course_id)
        logger.info("Faculty %s assigned to course %s", faculty_id, course_id)

    def get_faculty_courses(self, faculty_id: int) -> set[int]:
        return self.faculty.get_faculty_courses(faculty_id)

    def get_faculty(self, faculty_id: int) -> dict:
        return self.faculty.get_faculty(faculty_id)

    # ------------------------------------------------------------------
    # Courses
    # ------------------------------------------------------------------

    def add_course(
        self,
        course_id: int,
        name: str,
        faculty_id: int | None = UNASSIGNED_FACULTY_ID,
    ) -> None:
        """Register a course taught by faculty_id.

        An unknown faculty_id is stored as given and not reported as an error.
        When faculty_id names a registered faculty member, the course is also
        added to that member's taught set.

        Raises:
            AlreadyExistsError: When course_id is already registered.
        """
        with self.faculty.lock.write_locked(), self.courses.lock.write_locked():
            self.courses.add_course(course_id, name, faculty_id)
            if faculty_id is not UNASSIGNED_FACULTY_ID and self.faculty.has_faculty(faculty_id):
                self.faculty.assign_course(faculty_id, course_id)

    def get_course_students(self, course_id: int) -> set[int]:
        return self.courses.get_course_students(course_id)

    def get_course_faculty(self, course_id: int) -> int | None:
        return self.courses.get_course_faculty(course_id)

    def get_course(self, course_id: int) -> dict:
        return self.courses.get_course(course_id)
