"""Integration tests for the upvote flow against PostgreSQL.

Require a migrated database reachable at DATABASE__URL; skipped otherwise.
"""

import asyncio
import os
from uuid import uuid4

import pytest

from board.domain.error import AlreadyVotedError, NotFoundError
from board.domain.repository import (
    RequestRepository,
    Transaction,
    UserRepository,
    VoteRepository,
)
from board.domain.service import RequestService, UserService, VoteService
from board.domain.value import RequestId, UserId
from tests.harness import create_app_container_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="DATABASE__URL not set"
)

integration_container = create_app_container_fixture(unmock={"persistence"})


async def _seed(container, uids: list[UserId]) -> RequestId:
    async with container() as request_container:
        user_service = await request_container.get(UserService)
        for uid in uids:
            await user_service.ensure_user(uid, f"{uid}@x.io")
        request = await (await request_container.get(RequestService)).create_request(
            "integration"
        )
        await (await request_container.get(Transaction)).commit()
    return request.id


async def _upvote(container, uid: UserId, request_id: RequestId):
    async with container() as request_container:
        service = await request_container.get(VoteService)
        vote = await service.upvote(uid, request_id)
        await (await request_container.get(Transaction)).commit()
        return vote


class TestVoteFlowPostgres:
    """Upvote invariants with real transactions."""

    @pytest.mark.asyncio
    async def test_upvote_and_duplicate(self, integration_container):
        # Arrange
        uid = UserId(f"it-{uuid4().hex}")
        request_id = await _seed(integration_container, [uid])

        # Act
        await _upvote(integration_container, uid, request_id)
        with pytest.raises(AlreadyVotedError):
            await _upvote(integration_container, uid, request_id)

        # Assert
        async with integration_container() as request_container:
            user = await (await request_container.get(UserRepository)).find_by_id(uid)
            request = await (
                await request_container.get(RequestRepository)
            ).find_by_id(request_id)
            votes = await (await request_container.get(VoteRepository)).count_by_request(
                request_id
            )
        assert user.upvoted_on == [request_id]
        assert request.upvotes == 1
        assert votes == 1

    @pytest.mark.asyncio
    async def test_uncommitted_vote_is_discarded(self, integration_container):
        """A scope that fails before committing leaves no partial vote."""
        # Arrange
        uid = UserId(f"it-{uuid4().hex}")
        request_id = await _seed(integration_container, [uid])

        # Act
        with pytest.raises(RuntimeError):
            async with integration_container() as request_container:
                service = await request_container.get(VoteService)
                await service.upvote(uid, request_id)
                raise RuntimeError("aborted before commit")

        # Assert
        async with integration_container() as request_container:
            user = await (await request_container.get(UserRepository)).find_by_id(uid)
            request = await (
                await request_container.get(RequestRepository)
            ).find_by_id(request_id)
            votes = await (await request_container.get(VoteRepository)).count_by_request(
                request_id
            )
        assert user.upvoted_on == []
        assert request.upvotes == 0
        assert votes == 0

    @pytest.mark.asyncio
    async def test_concurrent_same_user(self, integration_container):
        """Overlapping transactions for one user commit exactly one vote."""
        # Arrange
        uid = UserId(f"it-{uuid4().hex}")
        request_id = await _seed(integration_container, [uid])

        # Act
        results = await asyncio.gather(
            *(_upvote(integration_container, uid, request_id) for _ in range(5)),
            return_exceptions=True,
        )

        # Assert
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(results) - len(failures) == 1
        assert all(isinstance(f, AlreadyVotedError) for f in failures)

        async with integration_container() as request_container:
            request = await (
                await request_container.get(RequestRepository)
            ).find_by_id(request_id)
            user = await (await request_container.get(UserRepository)).find_by_id(uid)
        assert request.upvotes == 1
        assert user.upvoted_on == [request_id]

    @pytest.mark.asyncio
    async def test_identity_retry_preserves_upvoted_on(self, integration_container):
        # Arrange
        uid = UserId(f"it-{uuid4().hex}")
        request_id = await _seed(integration_container, [uid])
        await _upvote(integration_container, uid, request_id)

        # Act
        async with integration_container() as request_container:
            created = await (await request_container.get(UserService)).ensure_user(
                uid, "changed@x.io"
            )
            await (await request_container.get(Transaction)).commit()

        # Assert
        async with integration_container() as request_container:
            user = await (await request_container.get(UserRepository)).find_by_id(uid)
        assert created is False
        assert user.upvoted_on == [request_id]


async def _merge(container, uid: UserId, fields: dict):
    async with container() as request_container:
        user = await (await request_container.get(UserService)).update_user(
            uid, fields
        )
        await (await request_container.get(Transaction)).commit()
        return user


class TestUserMergePostgres:
    """Attribute merges are single atomic updates."""

    @pytest.mark.asyncio
    async def test_concurrent_merges_keep_both_fields(self, integration_container):
        # Arrange
        uid = UserId(f"it-{uuid4().hex}")
        await _seed(integration_container, [uid])

        # Act
        await asyncio.gather(
            _merge(integration_container, uid, {"a": 1}),
            _merge(integration_container, uid, {"b": 2}),
        )

        # Assert
        async with integration_container() as request_container:
            user = await (await request_container.get(UserRepository)).find_by_id(uid)
        assert user.attributes == {"a": 1, "b": 2}
        assert user.email == f"{uid}@x.io"

    @pytest.mark.asyncio
    async def test_merge_into_missing_user_inserts_nothing(
        self, integration_container
    ):
        uid = UserId(f"it-{uuid4().hex}")

        with pytest.raises(NotFoundError):
            await _merge(integration_container, uid, {"a": 1})

        async with integration_container() as request_container:
            user = await (await request_container.get(UserRepository)).find_by_id(uid)
        assert user is None
