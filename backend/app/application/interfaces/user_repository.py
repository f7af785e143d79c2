"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import User, UserQuery


class UserRepository(ABC):
    """Port for user persistence — implemented in the infrastructure layer.

    Implementations raise ``DuplicateEntityError`` when the store rejects a
    write because the email is already taken.
    """

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None:
        """Retrieve a single user by its UUID."""
        ...

    @abstractmethod
    async def search(self, query: UserQuery) -> tuple[list[User], int]:
        """Return one page of users matching the query and the total match count."""
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return it."""
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update an existing user."""
        ...

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete a user. Returns True if deleted, False if not found."""
        ...
