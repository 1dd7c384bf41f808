"""Test configuration and fixtures."""

import logfire
import pytest

from tests.harness import bearer, make_token

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers authenticating as ``user-1``."""
    return bearer(make_token("user-1"))
