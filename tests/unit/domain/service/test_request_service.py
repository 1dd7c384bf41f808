"""Unit tests for RequestService."""

from uuid import uuid4

import pytest

from board.config import RequestSettings
from board.domain.error import NotFoundError, ValidationError
from board.domain.repository import RequestRepository
from board.domain.service import RequestService
from board.domain.value import RequestId
from board.persistence.repository.inmemory import InMemoryRequestRepository
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateRequest:
    """Tests for RequestService.create_request."""

    @pytest.mark.asyncio
    async def test_create_request_at_limit(self, unit_env):
        """Text of exactly 30 characters is accepted with zero upvotes."""
        # Arrange
        service = await unit_env.get(RequestService)

        # Act
        request = await service.create_request("a" * 30)

        # Assert
        assert request.upvotes == 0
        stored = await (await unit_env.get(RequestRepository)).find_by_id(request.id)
        assert stored is not None
        assert stored.text == "a" * 30

    @pytest.mark.asyncio
    async def test_create_request_over_limit_writes_nothing(self, unit_env):
        """Text of 31 characters is rejected and nothing is stored."""
        # Arrange
        service = await unit_env.get(RequestService)

        # Act & Assert
        with pytest.raises(
            ValidationError, match="no more than 30 characters long"
        ):
            await service.create_request("a" * 31)

        assert await (await unit_env.get(RequestRepository)).find_all() == []

    @pytest.mark.asyncio
    async def test_length_counted_in_code_points(self, unit_env):
        """Multibyte characters count once each."""
        # Arrange
        service = await unit_env.get(RequestService)
        text = "é" * 30  # 60 bytes in UTF-8

        # Act
        request = await service.create_request(text)

        # Assert
        assert request.text == text

    @pytest.mark.asyncio
    async def test_empty_text_allowed(self, unit_env):
        """There is no minimum length."""
        service = await unit_env.get(RequestService)

        request = await service.create_request("")

        assert request.text == ""

    @pytest.mark.asyncio
    async def test_limit_is_configurable(self):
        """The limit comes from RequestSettings."""
        # Arrange
        service = RequestService(
            request_repository=InMemoryRequestRepository(),
            request_settings=RequestSettings(max_text_length=5),
        )

        # Act & Assert
        await service.create_request("12345")
        with pytest.raises(ValidationError):
            await service.create_request("123456")


class TestGetAndList:
    """Tests for lookups."""

    @pytest.mark.asyncio
    async def test_get_missing_request(self, unit_env):
        service = await unit_env.get(RequestService)

        with pytest.raises(NotFoundError):
            await service.get_by_id(RequestId(uuid4()))

    @pytest.mark.asyncio
    async def test_list_orders_by_upvotes(self, unit_env):
        """Most upvoted requests come first."""
        # Arrange
        service = await unit_env.get(RequestService)
        low = await service.create_request("low")
        high = await service.create_request("high")
        await service.increment_upvotes(high.id)
        await service.increment_upvotes(high.id)
        await service.increment_upvotes(low.id)

        # Act
        listed = await service.list_requests()

        # Assert
        assert [r.id for r in listed] == [high.id, low.id]
        assert [r.upvotes for r in listed] == [2, 1]
