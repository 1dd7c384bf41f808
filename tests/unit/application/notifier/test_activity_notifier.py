"""Unit tests for ActivityNotifier."""

import pytest

from board.application.notifier import ActivityNotifier
from board.application.usecase.activity import LogActivityUseCase
from board.domain.service import ActivityService
from board.domain.value import CollectionName
from tests.harness import create_app_container_fixture

app_container = create_app_container_fixture()


async def _activity_texts(container) -> list[str]:
    async with container() as request_container:
        service = await request_container.get(ActivityService)
        return [a.text for a in await service.list_activities()]


class TestActivityNotifier:
    """Tests for best-effort activity logging."""

    @pytest.mark.asyncio
    async def test_logs_in_its_own_scope(self, app_container):
        # Arrange
        notifier = ActivityNotifier(app_container)

        # Act
        logged = await notifier.record_created(CollectionName.REQUESTS, "r1")

        # Assert
        assert logged is True
        assert await _activity_texts(app_container) == [
            "A new request has been added."
        ]

    @pytest.mark.asyncio
    async def test_accepts_plain_collection_names(self, app_container):
        notifier = ActivityNotifier(app_container)

        assert await notifier.record_created("users", "u1") is True
        assert await notifier.record_created("activities", "a1") is False

        assert await _activity_texts(app_container) == ["A new user has signed up."]

    @pytest.mark.asyncio
    async def test_failure_is_swallowed(self, app_container, monkeypatch):
        """A broken activity log never propagates to the caller."""

        # Arrange
        async def broken_execute(self, request):
            raise RuntimeError("activity store unavailable")

        monkeypatch.setattr(LogActivityUseCase, "execute", broken_execute)
        notifier = ActivityNotifier(app_container)

        # Act
        logged = await notifier.record_created(CollectionName.USERS, "u1")

        # Assert
        assert logged is False
        assert await _activity_texts(app_container) == []
