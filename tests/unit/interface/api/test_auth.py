"""Unit tests for caller token extraction."""

from board.interface.api.auth import extract_token


class TestExtractToken:
    """Header takes precedence over the cookie."""

    def test_bearer_header(self):
        assert extract_token("Bearer abc.def", None) == "abc.def"

    def test_scheme_is_case_insensitive(self):
        assert extract_token("bearer abc", None) == "abc"

    def test_cookie_fallback(self):
        assert extract_token(None, "from-cookie") == "from-cookie"

    def test_header_wins_over_cookie(self):
        assert extract_token("Bearer from-header", "from-cookie") == "from-header"

    def test_non_bearer_header_ignored(self):
        assert extract_token("Basic dXNlcjpwYXNz", None) is None

    def test_empty_bearer_falls_back(self):
        assert extract_token("Bearer ", "from-cookie") == "from-cookie"

    def test_nothing(self):
        assert extract_token(None, None) is None
        assert extract_token(None, "") is None
