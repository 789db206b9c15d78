"""Tests for minimvc.http.cookies — Cookie header parsing."""

from minimvc.http.cookies import parse_cookies


class TestParseCookies:
    def test_empty_string(self) -> None:
        assert parse_cookies("") == {}

    def test_session_cookie(self) -> None:
        assert parse_cookies("SESSION-ID=s3cr3t") == {"SESSION-ID": "s3cr3t"}

    def test_multiple_cookies(self) -> None:
        result = parse_cookies("SESSION-ID=abc; theme=dark")
        assert result == {"SESSION-ID": "abc", "theme": "dark"}

    def test_whitespace_handling(self) -> None:
        assert parse_cookies("  a = 1 ;  b = 2  ") == {"a": "1", "b": "2"}

    def test_value_with_equals(self) -> None:
        assert parse_cookies("token=abc=def=") == {"token": "abc=def="}

    def test_no_equals_ignored(self) -> None:
        assert parse_cookies("a=1; broken; b=2") == {"a": "1", "b": "2"}

    def test_duplicate_keys_last_wins(self) -> None:
        assert parse_cookies("a=1; a=2") == {"a": "2"}
