"""
university/records/errors.py

Exceptions raised by the registries and the facade.
"""


class RecordError(Exception):
    """Base class for record-layer errors.

    Attributes:
        entity:    Kind of record involved ("student", "faculty", "course").
        record_id: The id that triggered the error.
    """

    def __init__(self, entity: str, record_id: int, message: str) -> None:
        super().__init__(message)
        self.entity = entity
        self.record_id = record_id

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message; keep it readable.
        return self.args[0]


class NotFoundError(RecordError, KeyError):
    """Raised when an operation references an id that was never added."""

    def __init__(self, entity: str, record_id: int) -> None:
        super().__init__(entity, record_id, f"{entity.capitalize()} {record_id} not found.")


class AlreadyExistsError(RecordError, ValueError):
    """Raised when an add operation reuses an id that is already registered."""

    def __init__(self, entity: str, record_id: int) -> None:
        super().__init__(entity, record_id, f"{entity.capitalize()} {record_id} already exists.")
