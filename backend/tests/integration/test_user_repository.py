"""Integration tests for SQLAlchemyUserRepository against SQLite."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities import SortOrder, User, UserQuery, UserSortField
from app.domain.exceptions import DuplicateEntityError, NotFoundError
from app.infrastructure.database.repositories import SQLAlchemyUserRepository


async def _seed(session: AsyncSession, *users: User) -> SQLAlchemyUserRepository:
    repository = SQLAlchemyUserRepository(session)
    for user in users:
        await repository.create(user)
    await session.commit()
    return repository


@pytest.mark.asyncio
async def test_create_then_get_round_trip(session: AsyncSession):
    repository = await _seed(session, User(name="Alice", email="alice@example.com", score=7))

    page, total = await repository.search(UserQuery())
    fetched = await repository.get_by_id(page[0].id)

    assert total == 1
    assert fetched is not None
    assert (fetched.name, fetched.email, fetched.score) == ("Alice", "alice@example.com", 7)


@pytest.mark.asyncio
async def test_get_missing_returns_none(session: AsyncSession):
    repository = SQLAlchemyUserRepository(session)
    assert await repository.get_by_id("550e8400-e29b-41d4-a716-446655440000") is None


@pytest.mark.asyncio
async def test_duplicate_email_raises_duplicate_entity(session: AsyncSession):
    repository = await _seed(session, User(name="Alice", email="a@x.com"))

    with pytest.raises(DuplicateEntityError) as exc_info:
        await repository.create(User(name="Bob", email="a@x.com"))

    assert exc_info.value.field == "email"
    # The session is usable again after the failed write.
    await repository.create(User(name="Bob", email="b@x.com"))
    _, total = await repository.search(UserQuery())
    assert total == 2


@pytest.mark.asyncio
async def test_update_to_taken_email_raises_duplicate_entity(session: AsyncSession):
    alice = User(name="Alice", email="alice@example.com")
    bob = User(name="Bob", email="bob@example.com")
    repository = await _seed(session, alice, bob)

    bob.update(email="alice@example.com")
    with pytest.raises(DuplicateEntityError):
        await repository.update(bob)

    stored = await repository.get_by_id(bob.id)
    assert stored is not None
    assert stored.email == "bob@example.com"


@pytest.mark.asyncio
async def test_update_persists_fields_and_timestamp(session: AsyncSession):
    carol = User(name="Carol", email="carol@example.com")
    repository = await _seed(session, carol)

    carol.update(name="Caroline", score=99)
    updated = await repository.update(carol)
    await session.commit()

    assert updated.name == "Caroline"
    assert updated.score == 99
    stored = await repository.get_by_id(carol.id)
    assert stored is not None
    assert stored.updated_at == carol.updated_at
    assert stored.updated_at > stored.created_at


@pytest.mark.asyncio
async def test_update_missing_raises_not_found(session: AsyncSession):
    repository = SQLAlchemyUserRepository(session)
    with pytest.raises(NotFoundError):
        await repository.update(User(name="Ghost", email="ghost@example.com"))


@pytest.mark.asyncio
async def test_delete(session: AsyncSession):
    dave = User(name="Dave", email="dave@example.com")
    repository = await _seed(session, dave)

    assert await repository.delete(dave.id) is True
    assert await repository.delete(dave.id) is False
    assert await repository.get_by_id(dave.id) is None


@pytest.mark.asyncio
async def test_name_filter_is_case_insensitive_substring(session: AsyncSession):
    repository = await _seed(
        session,
        User(name="Alice Smith", email="alice@example.com"),
        User(name="Bob Johnson", email="bob@example.com"),
        User(name="MALICE", email="malice@example.com"),
    )

    users, total = await repository.search(
        UserQuery(name="alice", sort_by=UserSortField.NAME, sort_order=SortOrder.ASC)
    )

    assert total == 2
    assert [u.name for u in users] == ["Alice Smith", "MALICE"]


@pytest.mark.asyncio
async def test_name_filter_matches_wildcards_literally(session: AsyncSession):
    repository = await _seed(
        session,
        User(name="100% real", email="real@example.com"),
        User(name="1000 real", email="fake@example.com"),
        User(name="snake_case", email="snake@example.com"),
        User(name="snakeXcase", email="other@example.com"),
    )

    percent, _ = await repository.search(UserQuery(name="0%"))
    underscore, _ = await repository.search(UserQuery(name="e_c"))

    assert [u.name for u in percent] == ["100% real"]
    assert [u.name for u in underscore] == ["snake_case"]


@pytest.mark.asyncio
async def test_filters_compose_and_count_ignores_pagination(session: AsyncSession):
    repository = await _seed(
        session,
        *[
            User(name=f"Team {i}", email=f"team{i}@example.com", score=i * 10)
            for i in range(10)
        ],
        User(name="Solo", email="solo@example.com", score=95),
    )

    users, total = await repository.search(
        UserQuery(
            name="team",
            min_score=40,
            limit=2,
            sort_by=UserSortField.SCORE,
            sort_order=SortOrder.DESC,
        )
    )

    assert total == 6
    assert [u.score for u in users] == [90, 80]


@pytest.mark.asyncio
async def test_min_score_scenario(session: AsyncSession):
    repository = await _seed(
        session,
        User(name="Low", email="low@example.com", score=10),
        User(name="Mid", email="mid@example.com", score=50),
        User(name="High", email="high@example.com", score=90),
    )

    users, total = await repository.search(
        UserQuery(min_score=40, sort_by=UserSortField.SCORE, sort_order=SortOrder.ASC)
    )

    assert total == 2
    assert [u.score for u in users] == [50, 90]


@pytest.mark.asyncio
@pytest.mark.parametrize("sort_order", [SortOrder.ASC, SortOrder.DESC])
async def test_pages_partition_despite_sort_ties(session: AsyncSession, sort_order: SortOrder):
    seeded = [
        User(name=f"User {i}", email=f"user{i}@example.com", score=[20, 20, 50][i % 3])
        for i in range(11)
    ]
    repository = await _seed(session, *seeded)

    seen: list[str] = []
    page_number = 1
    while True:
        users, total = await repository.search(
            UserQuery(
                page=page_number,
                limit=3,
                sort_by=UserSortField.SCORE,
                sort_order=sort_order,
            )
        )
        if not users:
            break
        seen.extend(u.id for u in users)
        page_number += 1

    assert total == 11
    assert page_number - 1 == 4
    assert len(seen) == len(set(seen)) == 11
    assert set(seen) == {u.id for u in seeded}


@pytest.mark.asyncio
async def test_page_past_the_end_is_empty_with_true_total(session: AsyncSession):
    repository = await _seed(session, User(name="Only", email="only@example.com"))

    users, total = await repository.search(UserQuery(page=10**19, limit=10))

    assert users == []
    assert total == 1
