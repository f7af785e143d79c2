"""Input validation — turns raw request data into typed values.

Every function here is pure. Failures raise the domain ``ValidationError``
listing all violated constraints, so callers can report them in one response.
"""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

import pydantic
from pydantic import TypeAdapter

from app.application.schemas.user import UserCreate, UserListQuery, UserUpdate
from app.domain.entities import UserQuery
from app.domain.exceptions import FieldError, ValidationError

EMPTY_UPDATE_MESSAGE = "At least one field must be provided for update"
INVALID_ID_MESSAGE = "Invalid UUID format"

_uuid_adapter = TypeAdapter(UUID)


def _field_errors(exc: pydantic.ValidationError) -> list[FieldError]:
    """Flatten Pydantic errors into field/message pairs."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        errors.append(FieldError(field=field, message=error["msg"]))
    return errors


def parse_create_payload(raw: Any) -> UserCreate:
    try:
        return UserCreate.model_validate(raw)
    except pydantic.ValidationError as exc:
        raise ValidationError(_field_errors(exc)) from None


def parse_update_payload(raw: Any) -> UserUpdate:
    """Validate a partial update; an update that sets nothing is rejected."""
    try:
        data = UserUpdate.model_validate(raw)
    except pydantic.ValidationError as exc:
        raise ValidationError(_field_errors(exc)) from None
    if not data.model_fields_set:
        raise ValidationError([FieldError(field="body", message=EMPTY_UPDATE_MESSAGE)])
    return data


def parse_list_query(raw: Mapping[str, str]) -> UserQuery:
    """Validate listing parameters. Empty values count as absent."""
    params = {key: value for key, value in raw.items() if value != ""}
    try:
        return UserListQuery.model_validate(params).to_query()
    except pydantic.ValidationError as exc:
        raise ValidationError(_field_errors(exc)) from None


def parse_user_id(raw: str) -> str:
    """Return the canonical form of a user id, or reject it as malformed."""
    try:
        return str(_uuid_adapter.validate_python(raw))
    except pydantic.ValidationError:
        raise ValidationError([FieldError(field="id", message=INVALID_ID_MESSAGE)]) from None
