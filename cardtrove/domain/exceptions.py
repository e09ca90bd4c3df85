"""Domain-specific exceptions — framework-independent."""

from collections.abc import Iterable


class PersistenceError(Exception):
    """Base class for failures reading or writing an entity collection."""

    def __init__(self, entity_type: str, path: str, reason: str):
        self.entity_type = entity_type
        self.path = path
        self.reason = reason
        super().__init__(f"{entity_type} collection at '{path}': {reason}")


class RecordLoadError(PersistenceError):
    """Raised when a persisted collection is missing, unreadable or undecodable."""


class RecordSaveError(PersistenceError):
    """Raised when a collection cannot be written to its backing file."""


class RecordValidationError(Exception):
    """Raised when editor input is missing required fields or has unparseable numbers."""

    def __init__(self, entity_type: str, fields: Iterable[str]):
        self.entity_type = entity_type
        self.fields = tuple(fields)
        super().__init__(
            f"{entity_type} has missing or invalid fields: {', '.join(self.fields)}"
        )
