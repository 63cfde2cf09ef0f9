"""
university/records/faculty_registry.py

In-memory store of faculty records keyed by faculty id.

Record shape:
    {"id": int, "name": str, "taught_course_ids": set[int]}
"""

import logging

from university.records.errors import AlreadyExistsError, NotFoundError
from university.sync.rw_lock import ReadWriteLock

logger = logging.getLogger(__name__)

_ENTITY = "faculty"


class FacultyRegistry:
    """Owns every faculty record; guarded by a single ReadWriteLock."""

    def __init__(self) -> None:
        self._records: dict[int, dict] = {}
        self.lock = ReadWriteLock()

    def __len__(self) -> int:
        with self.lock.read_locked():
            return len(self._records)

    def __contains__(self, faculty_id: int) -> bool:
        return self.has_faculty(faculty_id)

    def _require(self, faculty_id: int) -> dict:
        record = self._records.get(faculty_id)
        if record is None:
            logger.warning("faculty %s not found", faculty_id)
            raise NotFoundError(_ENTITY, faculty_id)
        return record

    def add_faculty(self, faculty_id: int, name: str) -> None:
        """Register a new faculty member teaching no courses.

        Raises:
            AlreadyExistsError: When faculty_id is already registered.
        """
        with self.lock.write_locked():
            if faculty_id in self._records:
                logger.warning("add_faculty: id=%s already exists", faculty_id)
                raise AlreadyExistsError(_ENTITY, faculty_id)
            self._records[faculty_id] = {
                "id": faculty_id,
                "name": name,
                "taught_course_ids": set(),
            }
        logger.debug("add_faculty: id=%s name=%r", faculty_id, name)

    def assign_course(self, faculty_id: int, course_id: int) -> None:
        """Add course_id to the courses this faculty member teaches.

        Raises:
            NotFoundError: When the faculty member does not exist.
        """
        with self.lock.write_locked():
            self._require(faculty_id)["taught_course_ids"].add(course_id)
        logger.debug("assign_course: faculty=%s course=%s", faculty_id, course_id)

    def release_course(self, faculty_id: int, course_id: int) -> None:
        """Drop course_id from the taught set; a no-op if it was not there.

        Raises:
            NotFoundError: When the faculty member does not exist.
        """
        with self.lock.write_locked():
            self._require(faculty_id)["taught_course_ids"].discard(course_id)
        logger.debug("release_course: faculty=%s course=%s", faculty_id, course_id)

    def get_faculty_courses(self, faculty_id: int) -> set[int]:
        """Return a copy of the course ids taught by this faculty member.

        Raises:
            NotFoundError: When the faculty member does not exist.
        """
        with self.lock.read_locked():
            return set(self._require(faculty_id)["taught_course_ids"])

    def get_faculty(self, faculty_id: int) -> dict:
        """Return a copy of the full faculty record.

        Raises:
            NotFoundError: When the faculty member does not exist.
        """
        with self.lock.read_locked():
            record = self._require(faculty_id)
            return {**record, "taught_course_ids": set(record["taught_course_ids"])}

    def has_faculty(self, faculty_id: int) -> bool:
        with self.lock.read_locked():
            return faculty_id in self._records
