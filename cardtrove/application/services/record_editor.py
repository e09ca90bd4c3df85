"""Application service (use case) turning an editor draft into a stored record."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Generic, TypeVar

from cardtrove.application.schemas.base import RecordForm, RecordInput
from cardtrove.application.services.entity_store import EntityStore
from cardtrove.domain.exceptions import RecordValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordEditor(Generic[T]):
    """Add/edit workflow for one record.

    The draft lives in ``form`` and can be changed freely between submits.
    A rejected submit raises no error: it sets the alert state and leaves
    the draft untouched so the user can correct it.

    Usage:
        editor = RecordEditor(client_store, ClientProfileInput)
        editor.form.business_name = "Acme Prints"
        editor.form.phone_number = "5550001"
        profile = editor.submit()
    """

    def __init__(
        self,
        store: EntityStore[T],
        input_type: type[RecordInput],
        existing: T | None = None,
        *,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._store = store
        self._input_type = input_type
        self._existing = existing
        self._clock = clock
        self.form: RecordForm = (
            input_type.form_type.from_entity(existing)
            if existing is not None
            else input_type.form_type()
        )
        self.show_alert = False
        self.invalid_fields: tuple[str, ...] = ()
        self.dismissed = False

    @property
    def is_editing(self) -> bool:
        return self._existing is not None

    @property
    def title(self) -> str:
        return "Edit" if self.is_editing else "Add"

    @property
    def alert_title(self) -> str:
        return self._input_type.alert_title

    @property
    def alert_message(self) -> str:
        return self._input_type.alert_message

    def dismiss_alert(self) -> None:
        self.show_alert = False

    def submit(self) -> T | None:
        """Validate the draft and add or update the record.

        Returns the saved record, or None when validation failed.
        """
        try:
            validated = self._input_type.parse(self.form)
        except RecordValidationError as exc:
            logger.debug("Rejected %s draft: %s", exc.entity_type, ", ".join(exc.fields))
            self.invalid_fields = exc.fields
            self.show_alert = True
            return None

        record = validated.build(self._existing, self._clock())
        if self.is_editing:
            self._store.update(record)
        else:
            self._store.add(record)

        self.show_alert = False
        self.invalid_fields = ()
        self.dismissed = True
        return record
