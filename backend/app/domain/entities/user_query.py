"""Domain value objects for listing users — filters, sort and pagination."""

import math
from dataclasses import dataclass
from enum import Enum

from .user import User


class UserSortField(str, Enum):
    """Fields a user listing may be sorted by (values are the public query keys)."""

    NAME = "name"
    EMAIL = "email"
    SCORE = "score"
    CREATED_AT = "createdAt"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class UserQuery:
    """Validated listing parameters.

    Filters compose with AND. ``name`` is a case-insensitive substring match,
    ``min_score`` an inclusive lower bound. Ties in the sort key are broken by
    id ascending so consecutive pages never overlap.
    """

    name: str | None = None
    min_score: int | None = None
    page: int = 1
    limit: int = 10
    sort_by: UserSortField = UserSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to hold ``total`` items, ``limit`` per page."""
    if total <= 0:
        return 0
    return math.ceil(total / limit)


@dataclass
class UserPage:
    """One page of a listing plus the size of the whole filtered set."""

    items: list[User]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return total_pages(self.total, self.limit)
