"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import UserService
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import SQLAlchemyUserRepository


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService instance with its repository wired up."""
    repository = SQLAlchemyUserRepository(session)
    yield UserService(repository)
