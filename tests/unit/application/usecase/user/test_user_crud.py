"""Unit tests for the user CRUD use cases."""

import asyncio

import pytest

from board.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    DeleteUserRequest,
    DeleteUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
)
from board.domain.error import NotFoundError
from board.domain.repository import UserRepository
from board.domain.value import UserId
from board.persistence.repository.inmemory import InMemoryStore, InMemoryUserRepository
from tests.harness import create_app_container_fixture, create_env_fixture

unit_env = create_env_fixture()
app_container = create_app_container_fixture()


class TestUserCrud:
    """Tests for free-form user records."""

    @pytest.mark.asyncio
    async def test_create_then_get(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateUserUseCase)
        get = await unit_env.get(GetUserUseCase)

        # Act
        created = await create.execute(
            CreateUserRequest(fields={"email": "a@x.io", "name": "Ann"})
        )
        record = await get.execute(GetUserRequest(user_id=created.id))

        # Assert
        assert record.model_dump(by_alias=True) == {
            "id": created.id,
            "email": "a@x.io",
            "upvotedOn": [],
            "name": "Ann",
        }

    @pytest.mark.asyncio
    async def test_reserved_keys_dropped(self, unit_env):
        """Clients cannot pick the id or seed upvotedOn."""
        # Arrange
        create = await unit_env.get(CreateUserUseCase)
        get = await unit_env.get(GetUserUseCase)

        # Act
        created = await create.execute(
            CreateUserRequest(
                fields={"id": "chosen", "upvotedOn": ["r1"], "upvoted_on": ["r2"]}
            )
        )
        record = await get.execute(GetUserRequest(user_id=created.id))

        # Assert
        assert created.id != "chosen"
        assert record.upvoted_on == []
        assert record.model_extra == {}

    @pytest.mark.asyncio
    async def test_update_merges(self, unit_env):
        # Arrange
        created = await (await unit_env.get(CreateUserUseCase)).execute(
            CreateUserRequest(fields={"name": "Ann", "city": "Oslo"})
        )
        update = await unit_env.get(UpdateUserUseCase)

        # Act
        record = await update.execute(
            UpdateUserRequest(user_id=created.id, fields={"city": "Bergen"})
        )

        # Assert
        dumped = record.model_dump(by_alias=True)
        assert dumped["name"] == "Ann"
        assert dumped["city"] == "Bergen"

    @pytest.mark.asyncio
    async def test_update_sets_email_column(self, unit_env):
        # Arrange
        created = await (await unit_env.get(CreateUserUseCase)).execute(
            CreateUserRequest(fields={"email": "old@x.io", "name": "Ann"})
        )
        update = await unit_env.get(UpdateUserUseCase)

        # Act
        record = await update.execute(
            UpdateUserRequest(user_id=created.id, fields={"email": "new@x.io"})
        )

        # Assert
        assert record.model_dump(by_alias=True) == {
            "id": created.id,
            "email": "new@x.io",
            "upvotedOn": [],
            "name": "Ann",
        }

    @pytest.mark.asyncio
    async def test_update_missing_does_not_create(self, unit_env):
        # Arrange
        update = await unit_env.get(UpdateUserUseCase)
        users = await unit_env.get(UserRepository)

        # Act
        with pytest.raises(NotFoundError):
            await update.execute(
                UpdateUserRequest(user_id="nobody", fields={"name": "Ghost"})
            )

        # Assert
        assert await users.find_by_id(UserId("nobody")) is None

    @pytest.mark.asyncio
    async def test_writes_are_committed(self, unit_env):
        # Arrange
        store = await unit_env.get(InMemoryStore)
        create = await unit_env.get(CreateUserUseCase)

        # Act
        created = await create.execute(CreateUserRequest(fields={"name": "a"}))
        await (await unit_env.get(UpdateUserUseCase)).execute(
            UpdateUserRequest(user_id=created.id, fields={"name": "b"})
        )
        await (await unit_env.get(DeleteUserUseCase)).execute(
            DeleteUserRequest(user_id=created.id)
        )

        # Assert
        assert store.commits == 3

    @pytest.mark.asyncio
    async def test_get_missing(self, unit_env):
        get = await unit_env.get(GetUserUseCase)

        with pytest.raises(NotFoundError):
            await get.execute(GetUserRequest(user_id="nobody"))

    @pytest.mark.asyncio
    async def test_list_and_delete(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateUserUseCase)
        first = await create.execute(CreateUserRequest(fields={"name": "a"}))
        second = await create.execute(CreateUserRequest(fields={"name": "b"}))
        delete = await unit_env.get(DeleteUserUseCase)

        # Act
        deleted = await delete.execute(DeleteUserRequest(user_id=first.id))

        # Assert
        assert deleted.deleted is True
        records = await (await unit_env.get(ListUsersUseCase)).execute()
        assert [r.id for r in records] == [second.id]


async def _update_in_own_scope(container, user_id: str, fields: dict):
    async with container() as request_container:
        use_case = await request_container.get(UpdateUserUseCase)
        return await use_case.execute(UpdateUserRequest(user_id=user_id, fields=fields))


class TestConcurrentUpdates:
    """Overlapping merges into one record keep each other's fields."""

    @pytest.mark.asyncio
    async def test_concurrent_merges_keep_both_fields(
        self, app_container, monkeypatch
    ):
        # Arrange - yield on every read so a read-then-write merge would
        # interleave and drop one of the fields
        original_find = InMemoryUserRepository.find_by_id

        async def yielding_find(self, user_id):
            user = await original_find(self, user_id)
            await asyncio.sleep(0)
            return user

        monkeypatch.setattr(InMemoryUserRepository, "find_by_id", yielding_find)
        async with app_container() as request_container:
            created = await (await request_container.get(CreateUserUseCase)).execute(
                CreateUserRequest(fields={})
            )

        # Act
        await asyncio.gather(
            _update_in_own_scope(app_container, created.id, {"a": 1}),
            _update_in_own_scope(app_container, created.id, {"b": 2}),
        )

        # Assert
        async with app_container() as request_container:
            users = await request_container.get(UserRepository)
            user = await users.find_by_id(UserId(created.id))
        assert user.attributes == {"a": 1, "b": 2}
