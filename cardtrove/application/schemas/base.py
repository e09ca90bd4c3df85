"""Shared building blocks for editor DTOs.

Forms hold what the user typed, as strings. Inputs are the validated view
of a form; parsing a form into its Input is the editor's single validation
step.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, Field, StringConstraints, ValidationError

from cardtrove.domain.exceptions import RecordValidationError


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _blank_to_none(value: Any) -> Any:
    value = _strip(value)
    return None if value == "" else value


def _decimal_text(value: Any) -> Any:
    value = _strip(value)
    if isinstance(value, str):
        return value.replace(",", ".")
    return value


def _whole_number(value: Any) -> Any:
    """Digits only: signs, decimals and exponents are rejected."""
    value = _strip(value)
    if isinstance(value, str) and not value.isdigit():
        raise ValueError("expected a whole number")
    return value


def _count_or_zero(value: Any) -> int:
    """Lenient counter parsing: blank or unparseable input counts as zero."""
    try:
        count = int(_strip(value))
    except (TypeError, ValueError):
        return 0
    return max(count, 0)


def _rating_or_none(value: Any) -> int | None:
    """Lenient 1–5 rating parsing: anything else means 'not rated'."""
    try:
        rating = int(_strip(value))
    except (TypeError, ValueError):
        return None
    return rating if 1 <= rating <= 5 else None


def _split_tags(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    tags = [tag.strip() for tag in value.split(",")]
    return [tag for tag in tags if tag] or None


RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
OptionalText = Annotated[str | None, BeforeValidator(_blank_to_none)]
WholeNumber = Annotated[int, BeforeValidator(_whole_number), Field(ge=0)]
Amount = Annotated[float, BeforeValidator(_decimal_text), Field(ge=0, allow_inf_nan=False)]
Counter = Annotated[int, BeforeValidator(_count_or_zero)]
Rating = Annotated[int | None, BeforeValidator(_rating_or_none)]
Tags = Annotated[list[str] | None, BeforeValidator(_split_tags)]


def text_or_blank(value: str | None) -> str:
    """Render an optional value for a text field."""
    return "" if value is None else str(value)


class RecordForm(BaseModel, ABC):
    """Editable draft of a record; every typed-in value is kept as raw text."""

    @classmethod
    @abstractmethod
    def from_entity(cls, entity: Any) -> "RecordForm":
        """Render an existing record into an editable draft."""
        ...


class RecordInput(BaseModel, ABC):
    """Validated editor input for one entity kind."""

    entity_type: ClassVar[str] = "Record"
    form_type: ClassVar[type[RecordForm]] = RecordForm
    alert_title: ClassVar[str] = "Missing Info"
    alert_message: ClassVar[str] = "Please enter required fields."

    @classmethod
    def parse(cls, form: RecordForm) -> "RecordInput":
        """Validate ``form``.

        Raises RecordValidationError naming every missing or invalid field.
        """
        try:
            return cls.model_validate(form.model_dump())
        except ValidationError as exc:
            fields = dict.fromkeys(str(err["loc"][0]) for err in exc.errors() if err["loc"])
            raise RecordValidationError(cls.entity_type, fields) from exc

    @abstractmethod
    def build(self, existing: Any | None, now: datetime) -> Any:
        """Create the record, keeping ``existing``'s identity when editing."""
        ...
