"""
university/records/course_registry.py

In-memory store of course records keyed by course id.

Record shape:
    {
        "id":                   int,
        "name":                 str,
        "faculty_id":           int | None,  # UNASSIGNED_FACULTY_ID when nobody teaches it
        "enrolled_student_ids": set[int],
    }

faculty_id is stored as given; it is never checked against the faculty
registry here.
"""

import logging

from university.config import UNASSIGNED_FACULTY_ID
from university.records.errors import AlreadyExistsError, NotFoundError
from university.sync.rw_lock import ReadWriteLock

logger = logging.getLogger(__name__)

_ENTITY = "course"


class CourseRegistry:
    """Owns every course record; guarded by a single ReadWriteLock."""

    def __init__(self) -> None:
        self._records: dict[int, dict] = {}
        self.lock = ReadWriteLock()

    def __len__(self) -> int:
        with self.lock.read_locked():
            return len(self._records)

    def __contains__(self, course_id: int) -> bool:
        return self.has_course(course_id)

    def _require(self, course_id: int) -> dict:
        record = self._records.get(course_id)
        if record is None:
            logger.warning("course %s not found", course_id)
            raise NotFoundError(_ENTITY, course_id)
        return record

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_course(
        self,
        course_id: int,
        name: str,
        faculty_id: int | None = UNASSIGNED_FACULTY_ID,
    ) -> None:
        """Register a new course with no enrolled students.

        Args:
            course_id:  Unique identifier for the course.
            name:       Course title, e.g. "CS101".
            faculty_id: Id of the teaching faculty member. Not validated;
                        defaults to UNASSIGNED_FACULTY_ID.

        Raises:
            AlreadyExistsError: When course_id is already registered.
        """
        with self.lock.write_locked():
            if course_id in self._records:
                logger.warning("add_course: id=%s already exists", course_id)
                raise AlreadyExistsError(_ENTITY, course_id)
            self._records[course_id] = {
                "id": course_id,
                "name": name,
                "faculty_id": faculty_id,
                "enrolled_student_ids": set(),
            }
        logger.debug("add_course: id=%s name=%r faculty=%s", course_id, name, faculty_id)

    def enroll_student(self, course_id: int, student_id: int) -> None:
        """Add student_id to the course's enrolled students (idempotent).

        Raises:
            NotFoundError: When the course does not exist.
        """
        with self.lock.write_locked():
            self._require(course_id)["enrolled_student_ids"].add(student_id)
        logger.debug("enroll_student: course=%s student=%s", course_id, student_id)

    def set_faculty(self, course_id: int, faculty_id: int) -> int | None:
        """Record faculty_id as the course's teacher.

        Returns:
            The faculty id stored before this call.

        Raises:
            NotFoundError: When the course does not exist.
        """
        with self.lock.write_locked():
            record = self._require(course_id)
            previous = record["faculty_id"]
            record["faculty_id"] = faculty_id
        logger.debug(
            "set_faculty: course=%s faculty=%s (was %s)", course_id, faculty_id, previous
        )
        return previous

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_course_students(self, course_id: int) -> set[int]:
        """Return a copy of the course's enrolled student ids.

        Raises:
            NotFoundError: When the course does not exist.
        """
        with self.lock.read_locked():
            return set(self._require(course_id)["enrolled_student_ids"])

    def get_course_faculty(self, course_id: int) -> int | None:
        """Return the stored faculty id (UNASSIGNED_FACULTY_ID when unset)."""
        with self.lock.read_locked():
            return self._require(course_id)["faculty_id"]

    def get_course(self, course_id: int) -> dict:
        """Return a copy of the full course record.

        Raises:
            NotFoundError: When the course does not exist.
        """
        with self.lock.read_locked():
            record = self._require(course_id)
            return {**record, "enrolled_student_ids": set(record["enrolled_student_ids"])}

    def course_ids_taught_by(self, faculty_id: int) -> set[int]:
        """Return the ids of every course whose stored faculty_id equals faculty_id."""
        with self.lock.read_locked():
            return {
                course_id
                for course_id, record in self._records.items()
                if record["faculty_id"] == faculty_id
            }

    def has_course(self, course_id: int) -> bool:
        with self.lock.read_locked():
            return course_id in self._records
