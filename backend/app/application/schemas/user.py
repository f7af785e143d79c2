"""Pydantic DTOs (Data Transfer Objects) for the User feature."""

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StrictInt,
    StringConstraints,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.domain.entities import MAX_SCORE, SortOrder, UserQuery, UserSortField

UserName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
]
Score = Annotated[StrictInt, Field(ge=0, le=MAX_SCORE)]

_INTEGER_STRING = re.compile(r"-?[0-9]+")

# Responses are emitted with camelCase keys (createdAt, totalPages, ...).
_CAMEL_OUTPUT = ConfigDict(
    from_attributes=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class UserCreate(BaseModel):
    """Schema for creating a new user."""

    name: UserName = Field(..., examples=["Alice"])
    email: EmailStr = Field(..., examples=["alice@example.com"])
    score: Score = Field(0, examples=[42])


class UserUpdate(BaseModel):
    """Schema for updating an existing user — all fields optional, none nullable."""

    name: UserName | None = None
    email: EmailStr | None = None
    score: Score | None = None

    @field_validator("name", "email", "score", mode="before")
    @classmethod
    def _reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise PydanticCustomError(
                "null_value", "{field} cannot be null", {"field": info.field_name}
            )
        return value

    def changes(self) -> dict[str, Any]:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class UserListQuery(BaseModel):
    """Query-string parameters for listing users.

    Numeric fields must be plain decimal integer strings; ``1.0`` or ``1e3``
    are rejected, not coerced. Only the camelCase keys are accepted.
    """

    name: str | None = None
    min_score: StrictInt | None = Field(None, alias="minScore", ge=0)
    page: StrictInt = Field(1, ge=1)
    limit: StrictInt = Field(10, ge=1, le=100)
    sort_by: UserSortField = Field(UserSortField.CREATED_AT, alias="sortBy")
    sort_order: SortOrder = Field(SortOrder.DESC, alias="sortOrder")

    @field_validator("min_score", "page", "limit", mode="before")
    @classmethod
    def _parse_integer(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not _INTEGER_STRING.fullmatch(value.strip()):
                raise PydanticCustomError("int_parsing", "Input should be a valid integer")
            return int(value)
        return value

    @field_validator("min_score")
    @classmethod
    def _clamp_min_score(cls, value: int | None) -> int | None:
        # No score exceeds MAX_SCORE, so any larger bound selects nothing.
        if value is not None and value > MAX_SCORE:
            return MAX_SCORE + 1
        return value

    def to_query(self) -> UserQuery:
        return UserQuery(
            name=self.name,
            min_score=self.min_score,
            page=self.page,
            limit=self.limit,
            sort_by=self.sort_by,
            sort_order=self.sort_order,
        )


class UserResponse(BaseModel):
    """Schema returned to the client."""

    model_config = _CAMEL_OUTPUT

    id: str
    name: str
    email: str
    score: int
    created_at: datetime
    updated_at: datetime


class PaginationResponse(BaseModel):
    model_config = _CAMEL_OUTPUT

    total: int
    page: int
    limit: int
    total_pages: int


class UserListResponse(BaseModel):
    """A page of users plus pagination metadata."""

    data: list[UserResponse]
    pagination: PaginationResponse
