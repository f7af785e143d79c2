"""Application service (use case) for User operations."""

import logging

from app.application.interfaces import UserRepository
from app.application.schemas import UserCreate, UserUpdate
from app.application.validation import EMPTY_UPDATE_MESSAGE
from app.domain.entities import User, UserPage, UserQuery
from app.domain.exceptions import (
    ConflictError,
    DuplicateEntityError,
    FieldError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user CRUD logic. Depends on the repository port (DI).

    Existence is checked with a lookup before every update or delete.
    Email uniqueness is never pre-checked: the write is attempted and a
    duplicate-key signal from the repository becomes a ConflictError.
    """

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_user(self, user_id: str) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def list_users(self, query: UserQuery) -> UserPage:
        items, total = await self._repository.search(query)
        return UserPage(items=items, total=total, page=query.page, limit=query.limit)

    async def create_user(self, data: UserCreate) -> User:
        user = User(name=data.name, email=data.email, score=data.score)
        try:
            created = await self._repository.create(user)
        except DuplicateEntityError as exc:
            raise _conflict(exc) from exc
        logger.info("Created user %s", created.id)
        return created

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        user = await self.get_user(user_id)

        changes = data.changes()
        if not changes:
            raise ValidationError([FieldError(field="body", message=EMPTY_UPDATE_MESSAGE)])

        user.update(**changes)
        try:
            updated = await self._repository.update(user)
        except DuplicateEntityError as exc:
            raise _conflict(exc) from exc
        logger.info("Updated user %s (fields: %s)", user_id, ", ".join(sorted(changes)))
        return updated

    async def delete_user(self, user_id: str) -> bool:
        exists = await self._repository.get_by_id(user_id)
        if exists is None:
            raise NotFoundError("User", user_id)
        deleted = await self._repository.delete(user_id)
        if not deleted:
            # Removed by a concurrent request between the lookup and the delete.
            raise NotFoundError("User", user_id)
        logger.info("Deleted user %s", user_id)
        return deleted


def _conflict(exc: DuplicateEntityError) -> ConflictError:
    return ConflictError(f"{exc.field.capitalize()} already exists")
