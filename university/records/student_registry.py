"""
university/records/student_registry.py

In-memory store of student records keyed by student id.

Each student record is a plain dict:
    {"id": int, "name": str, "enrolled_course_ids": set[int]}

This registry only maintains the student side of an enrollment. Keeping the
course side in step is the facade's job (see university_facade.py).
"""

import logging

from university.records.errors import AlreadyExistsError, NotFoundError
from university.sync.rw_lock import ReadWriteLock

logger = logging.getLogger(__name__)

_ENTITY = "student"


class StudentRegistry:
    """Owns every student record; guarded by a single ReadWriteLock."""

    def __init__(self) -> None:
        self._records: dict[int, dict] = {}
        self.lock = ReadWriteLock()

    def __len__(self) -> int:
        with self.lock.read_locked():
            return len(self._records)

    def __contains__(self, student_id: int) -> bool:
        return self.has_student(student_id)

    def _require(self, student_id: int) -> dict:
        # Caller holds the lock.
        record = self._records.get(student_id)
        if record is None:
            logger.warning("student %s not found", student_id)
            raise NotFoundError(_ENTITY, student_id)
        return record

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_student(self, student_id: int, name: str) -> None:
        """Register a new student with no enrolled courses.

        Args:
            student_id: Unique identifier for the student.
            name:       Display name.

        Raises:
            AlreadyExistsError: When student_id is already registered. The
                                existing record is left untouched.
        """
        with self.lock.write_locked():
            if student_id in self._records:
                logger.warning("add_student: id=%s already exists", student_id)
                raise AlreadyExistsError(_ENTITY, student_id)
            self._records[student_id] = {
                "id": student_id,
                "name": name,
                "enrolled_course_ids": set(),
            }
        logger.debug("add_student: id=%s name=%r", student_id, name)

    def enroll_in_course(self, student_id: int, course_id: int) -> None:
        """Add course_id to the student's enrolled courses.

        Idempotent: enrolling twice in the same course has no further effect.
        The course itself is not checked here.

        Raises:
            NotFoundError: When the student does not exist.
        """
        with self.lock.write_locked():
            record = self._require(student_id)
            record["enrolled_course_ids"].add(course_id)
        logger.debug("enroll_in_course: student=%s course=%s", student_id, course_id)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_student_courses(self, student_id: int) -> set[int]:
        """Return a copy of the student's enrolled course ids.

        Raises:
            NotFoundError: When the student does not exist.
        """
        with self.lock.read_locked():
            return set(self._require(student_id)["enrolled_course_ids"])

    def get_student(self, student_id: int) -> dict:
        """Return a copy of the full student record.

        Raises:
            NotFoundError: When the student does not exist.
        """
        with self.lock.read_locked():
            record = self._require(student_id)
            return {**record, "enrolled_course_ids": set(record["enrolled_course_ids"])}

    def has_student(self, student_id: int) -> bool:
        with self.lock.read_locked():
            return student_id in self._records
