"""
university/admin/simulate_scenario.py

Dev/test harness - Simulate Scenario.

Places a UniversityFacade into one of five named, deterministic states by
delegating to seed_university. No business logic.

THIS MODULE IS DEV-ONLY.

Scenarios:
  EMPTY            - no records.
  ENROLL_BASIC     - Alice (1) enrolled in CS101 (101); faculty 9 named on
                     the course but never registered.
  ASSIGN_BASIC     - Dr. Smith (9) assigned to CS101 (101).
  REASSIGN_COURSE  - CS101 created under Dr. Smith (9), then reassigned to
                     Dr. Jones (10).
  FULL_TERM        - three students, two faculty, three courses, mixed
                     enrollments.
"""

import logging

from university.admin.seed_university import seed_university
from university.records.university_facade import UniversityFacade

logger = logging.getLogger(__name__)


class OperationNotConfirmedError(Exception):
    """Raised when a harness operation that writes records is called without confirm=True."""


# ---------------------------------------------------------------------------
# Scenario registry - keyword arguments passed straight to seed_university.
# ---------------------------------------------------------------------------
_SCENARIOS: dict[str, dict] = {
    "EMPTY": {},
    "ENROLL_BASIC": {
        "students": [(1, "Alice")],
        "courses": [(101, "CS101", 9)],
        "enrollments": [(1, 101)],
    },
    "ASSIGN_BASIC": {
        "faculty": [(9, "Dr. Smith")],
        "courses": [(101, "CS101", 9)],
        "assignments": [(9, 101)],
    },
    "REASSIGN_COURSE": {
        "faculty": [(9, "Dr. Smith"), (10, "Dr. Jones")],
        "courses": [(101, "CS101", 9)],
        "assignments": [(10, 101)],
    },
    "FULL_TERM": {
        "students": [(1, "Alice"), (2, "Bob"), (3, "Chandra")],
        "faculty": [(9, "Dr. Smith"), (10, "Dr. Jones")],
        "courses": [(101, "CS101", 9), (102, "CS102", 10), (201, "MAT201")],
        "assignments": [(10, 201)],
        "enrollments": [(1, 101), (1, 102), (2, 101), (3, 201)],
    },
}

KNOWN_SCENARIOS: frozenset[str] = frozenset(_SCENARIOS)


def simulate_scenario(
    *,
    scenario_id: str,
    confirm: bool,
    facade: UniversityFacade | None = None,
) -> dict:
    """Apply a named scenario to *facade* (or to a fresh one).

    Validation order (each check fires before any write):
        1. scenario_id unknown → ValueError
        2. confirm not True    → OperationNotConfirmedError

    Args:
        scenario_id: One of KNOWN_SCENARIOS.
        confirm:     Must be True or OperationNotConfirmedError is raised.
        facade:      Target facade. A new, empty one is built when None.
                     Ids used by the scenario must not already exist in it.

    Returns:
        dict with keys:
            ok       (bool)              True on success.
            message  (str)               e.g. "Scenario ASSIGN_BASIC applied."
            facade   (UniversityFacade)  The populated facade.
            counts   (dict)              The counts returned by seed_university.

    Raises:
        ValueError: When scenario_id is unknown.
        OperationNotConfirmedError: When confirm is not True.
    """
    if scenario_id not in _SCENARIOS:
        raise ValueError(f"Unknown scenario: {scenario_id}.")

    if confirm is not True:
        raise OperationNotConfirmedError("Scenario requires confirm=True.")

    if facade is None:
        facade = UniversityFacade()

    result = seed_university(facade, **_SCENARIOS[scenario_id])
    logger.info("Scenario %s applied: %s", scenario_id, result)

    return {
        "ok": True,
        "message": f"Scenario {scenario_id} applied.",
        "facade": facade,
        "counts": {k: v for k, v in result.items() if k != "ok"},
    }
