"""Unit tests for UpvoteUseCase, including concurrent calls."""

import asyncio
from uuid import UUID

import pytest

from board.application.usecase.account import (
    IdentityCreatedRequest,
    IdentityCreatedUseCase,
)
from board.application.usecase.request import AddRequestRequest, AddRequestUseCase
from board.application.usecase.vote import UpvoteRequest, UpvoteUseCase
from board.domain.error import (
    AlreadyVotedError,
    NotAuthenticatedError,
    NotFoundError,
)
from board.domain.repository import RequestRepository, UserRepository
from board.domain.value import RequestId, UserId
from board.persistence.repository.inmemory import (
    InMemoryRequestRepository,
    InMemoryStore,
    InMemoryTransaction,
    InMemoryVoteRepository,
)
from tests.harness import create_app_container_fixture, create_env_fixture, make_identity

unit_env = create_env_fixture()
app_container = create_app_container_fixture()


async def _signup_and_add(container, uids: list[str]) -> str:
    """Create users through the signup hook and one request; return its id."""
    async with container() as request_container:
        hook = await request_container.get(IdentityCreatedUseCase)
        for uid in uids:
            await hook.execute(IdentityCreatedRequest(uid=uid, email=f"{uid}@x.io"))

        add = await request_container.get(AddRequestUseCase)
        response = await add.execute(
            AddRequestRequest(caller=make_identity(uids[0]), text="fix bug")
        )
    return response.id


async def _upvote_in_own_scope(container, uid: str, request_id: str):
    async with container() as request_container:
        use_case = await request_container.get(UpvoteUseCase)
        return await use_case.execute(
            UpvoteRequest(caller=make_identity(uid), request_id=request_id)
        )


async def _state(container, uid: str, request_id: str):
    async with container() as request_container:
        user = await (await request_container.get(UserRepository)).find_by_id(
            UserId(uid)
        )
        request = await (await request_container.get(RequestRepository)).find_by_id(
            RequestId(UUID(request_id))
        )
    return user, request


class TestUpvoteUseCase:
    """Tests for the upvote entry point."""

    @pytest.mark.asyncio
    async def test_upvote_returns_vote(self, app_container):
        # Arrange
        request_id = await _signup_and_add(app_container, ["u1"])

        # Act
        response = await _upvote_in_own_scope(app_container, "u1", request_id)

        # Assert
        assert response.request_id == request_id
        assert response.user_id == "u1"
        _, request = await _state(app_container, "u1", request_id)
        assert request.upvotes == 1

    @pytest.mark.asyncio
    async def test_upvote_commits_after_all_writes(self, app_container, monkeypatch):
        # Arrange
        request_id = await _signup_and_add(app_container, ["u1"])
        events: list[str] = []
        original_increment = InMemoryRequestRepository.increment_upvotes
        original_commit = InMemoryTransaction.commit

        async def recording_increment(self, rid):
            events.append("increment")
            await original_increment(self, rid)

        async def recording_commit(self):
            events.append("commit")
            await original_commit(self)

        monkeypatch.setattr(
            InMemoryRequestRepository, "increment_upvotes", recording_increment
        )
        monkeypatch.setattr(InMemoryTransaction, "commit", recording_commit)

        # Act
        await _upvote_in_own_scope(app_container, "u1", request_id)

        # Assert
        assert events == ["increment", "commit"]

    @pytest.mark.asyncio
    async def test_rejected_vote_is_not_committed(self, app_container):
        # Arrange
        request_id = await _signup_and_add(app_container, ["u1"])
        await _upvote_in_own_scope(app_container, "u1", request_id)
        async with app_container() as request_container:
            store = await request_container.get(InMemoryStore)
        commits_before = store.commits

        # Act
        with pytest.raises(AlreadyVotedError):
            await _upvote_in_own_scope(app_container, "u1", request_id)

        # Assert
        assert store.commits == commits_before

    @pytest.mark.asyncio
    async def test_unauthenticated_caller_rejected(self, unit_env):
        use_case = await unit_env.get(UpvoteUseCase)

        with pytest.raises(
            NotAuthenticatedError, match="only authenticated users can vote up requests"
        ):
            await use_case.execute(UpvoteRequest(caller=None, request_id="anything"))

    @pytest.mark.asyncio
    async def test_malformed_request_id_not_found(self, unit_env):
        use_case = await unit_env.get(UpvoteUseCase)

        with pytest.raises(NotFoundError, match="Request not found: not-a-uuid"):
            await use_case.execute(
                UpvoteRequest(caller=make_identity(), request_id="not-a-uuid")
            )


class TestConcurrentUpvotes:
    """The single-vote rule holds when calls overlap."""

    @pytest.mark.asyncio
    async def test_same_user_concurrent_calls_count_once(self, app_container):
        # Arrange
        request_id = await _signup_and_add(app_container, ["u1"])

        # Act
        results = await asyncio.gather(
            *(_upvote_in_own_scope(app_container, "u1", request_id) for _ in range(10)),
            return_exceptions=True,
        )

        # Assert
        successes = [r for r in results if not isinstance(r, Exception)]
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(successes) == 1
        assert len(failures) == 9
        assert all(isinstance(f, AlreadyVotedError) for f in failures)

        user, request = await _state(app_container, "u1", request_id)
        assert request.upvotes == 1
        assert [str(r) for r in user.upvoted_on] == [request_id]

    @pytest.mark.asyncio
    async def test_interleaved_calls_stopped_by_ledger(
        self, app_container, monkeypatch
    ):
        """Calls that all pass the upvoted_on check still count once."""
        # Arrange - yield before every ledger insert so all calls read the
        # user first, as overlapping transactions would
        original_save = InMemoryVoteRepository.save

        async def yielding_save(self, vote):
            await asyncio.sleep(0)
            return await original_save(self, vote)

        monkeypatch.setattr(InMemoryVoteRepository, "save", yielding_save)
        request_id = await _signup_and_add(app_container, ["u1"])

        # Act
        results = await asyncio.gather(
            *(_upvote_in_own_scope(app_container, "u1", request_id) for _ in range(5)),
            return_exceptions=True,
        )

        # Assert
        assert sum(1 for r in results if not isinstance(r, Exception)) == 1
        assert all(
            isinstance(r, AlreadyVotedError) for r in results if isinstance(r, Exception)
        )
        user, request = await _state(app_container, "u1", request_id)
        assert request.upvotes == 1
        assert len(user.upvoted_on) == 1

    @pytest.mark.asyncio
    async def test_distinct_users_concurrent_calls_all_count(self, app_container):
        # Arrange
        voters = [f"u{i}" for i in range(8)]
        request_id = await _signup_and_add(app_container, voters)

        # Act
        results = await asyncio.gather(
            *(_upvote_in_own_scope(app_container, uid, request_id) for uid in voters),
            return_exceptions=True,
        )

        # Assert
        assert not [r for r in results if isinstance(r, Exception)]
        _, request = await _state(app_container, voters[0], request_id)
        assert request.upvotes == len(voters)
