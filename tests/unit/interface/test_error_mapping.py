"""Unit tests for the domain error to HTTP mapping."""

import pytest

from board.domain.error import (
    AlreadyVotedError,
    BusinessRuleViolationError,
    DomainError,
    NotAuthenticatedError,
    NotFoundError,
    ValidationError,
)
from board.interface.error import classify


@pytest.mark.parametrize(
    ("error", "code", "status_code"),
    [
        (NotAuthenticatedError("add requests"), "unauthenticated", 401),
        (ValidationError("too long"), "invalid-argument", 400),
        (AlreadyVotedError("u1", "r1"), "failed-precondition", 400),
        (BusinessRuleViolationError("nope"), "failed-precondition", 400),
        (NotFoundError("User", "u1"), "not-found", 404),
        (DomainError("unmapped"), "internal", 500),
        (RuntimeError("boom"), "internal", 500),
    ],
)
def test_classify(error, code, status_code):
    assert classify(error) == (code, status_code)
