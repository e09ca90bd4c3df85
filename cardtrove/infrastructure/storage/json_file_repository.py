"""JSON file persistence for entity collections.

Storage layout:
    <data_dir>/<file_name>    — one JSON array per entity kind, rewritten in full
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from cardtrove.application.interfaces import RecordRepository
from cardtrove.domain.exceptions import RecordLoadError, RecordSaveError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonFileRepository(RecordRepository[T], Generic[T]):
    """Implements the RecordRepository port on top of a single JSON file.

    Records are dataclasses; pydantic's TypeAdapter handles encoding and
    decoding, including datetimes and enums. ``None`` fields are left out
    of the file.
    """

    def __init__(self, entity_type: type[T], path: str | Path):
        self._entity_name = entity_type.__name__
        self._path = Path(path)
        self._adapter: TypeAdapter[list[T]] = TypeAdapter(list[entity_type])

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def load_all(self) -> list[T]:
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            raise RecordLoadError(self._entity_name, self.location, str(exc)) from exc

        try:
            return self._adapter.validate_json(raw)
        except ValidationError as exc:
            raise RecordLoadError(
                self._entity_name, self.location, f"undecodable content ({exc.error_count()} errors)"
            ) from exc

    def save_all(self, records: Sequence[T]) -> None:
        try:
            payload = self._adapter.dump_json(list(records), indent=2, exclude_none=True)
        except (TypeError, ValueError) as exc:
            raise RecordSaveError(self._entity_name, self.location, f"encoding failed: {exc}") from exc

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(payload)
        except OSError as exc:
            raise RecordSaveError(self._entity_name, self.location, str(exc)) from exc

        logger.debug("Wrote %d %s records to %s", len(records), self._entity_name, self._path)
