"""Concrete repository implementation for User backed by SQLAlchemy."""

import logging
from datetime import datetime, timezone

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import UserRepository
from app.domain.entities import SortOrder, User, UserQuery, UserSortField
from app.domain.exceptions import DuplicateEntityError, NotFoundError
from app.infrastructure.database.models import UserModel

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    UserSortField.NAME: UserModel.name,
    UserSortField.EMAIL: UserModel.email,
    UserSortField.SCORE: UserModel.score,
    UserSortField.CREATED_AT: UserModel.created_at,
}


def _as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on read; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        """Map ORM model → domain entity."""
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            score=model.score,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, entity: User) -> UserModel:
        """Map domain entity → ORM model (for creation)."""
        return UserModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            score=entity.score,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _apply_filters(self, stmt: Select, query: UserQuery) -> Select:
        if query.name is not None:
            stmt = stmt.where(UserModel.name.icontains(query.name, autoescape=True))
        if query.min_score is not None:
            stmt = stmt.where(UserModel.score >= query.min_score)
        return stmt

    async def _flush(self, email: str) -> None:
        """Flush pending writes, translating a unique-email violation."""
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.debug("Integrity error on users write: %s", exc.orig)
            raise DuplicateEntityError("User", "email", email) from exc

    async def get_by_id(self, user_id: str) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def search(self, query: UserQuery) -> tuple[list[User], int]:
        count_stmt = self._apply_filters(
            select(func.count()).select_from(UserModel), query
        )
        total = (await self._session.execute(count_stmt)).scalar_one()
        if query.offset >= total:
            # Past the last page; the offset may not even fit a SQL integer.
            return [], total

        column = _SORT_COLUMNS[query.sort_by]
        ordering = column.asc() if query.sort_order is SortOrder.ASC else column.desc()
        stmt = (
            self._apply_filters(select(UserModel), query)
            .order_by(ordering, UserModel.id.asc())
            .offset(query.offset)
            .limit(query.limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()], total

    async def create(self, user: User) -> User:
        model = self._to_model(user)
        self._session.add(model)
        await self._flush(user.email)
        return self._to_entity(model)

    async def update(self, user: User) -> User:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            raise NotFoundError("User", user.id)
        model.name = user.name
        model.email = user.email
        model.score = user.score
        model.updated_at = user.updated_at
        await self._flush(user.email)
        return self._to_entity(model)

    async def delete(self, user_id: str) -> bool:
        model = await self._session.get(UserModel, user_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
