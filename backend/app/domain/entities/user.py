"""Domain entity — pure Python business object for a user record."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

MAX_SCORE = 100


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """Core domain entity representing a user record.

    The id is generated once at creation and never changes. Email uniqueness
    is not checked here; the persistence layer owns that constraint.
    """

    name: str
    email: str
    score: int = 0
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        # A fresh record has never been modified.
        if self.updated_at is None:
            self.updated_at = self.created_at

    def update(
        self,
        name: str | None = None,
        email: str | None = None,
        score: int | None = None,
    ) -> None:
        """Update mutable fields and refresh the updated_at timestamp."""
        if name is not None:
            self.name = name
        if email is not None:
            self.email = email
        if score is not None:
            self.score = score
        self.updated_at = _utcnow()
