"""Unit tests for URL and key=value argument parsing."""

import pytest
import typer

from httpie_lite.cli.parsing import kv_pair_param, parse_kv_pair, parse_url, url_param
from httpie_lite.cli.schemas import KvPair
from httpie_lite.core.exceptions import InvalidKvPairError, InvalidUrlError


class TestParseUrl:
    """Tests for parse_url."""

    @pytest.mark.parametrize("url", ["https://abc.xyz", "https://abc.org/xyz", "http://localhost:8000/a?b=c"])
    def test_accepts_absolute_urls(self, url: str) -> None:
        assert parse_url(url) == url

    def test_rejects_bare_word(self) -> None:
        with pytest.raises(InvalidUrlError) as exc_info:
            parse_url("abc")
        assert "abc" in exc_info.value.message

    def test_rejects_relative_path(self) -> None:
        with pytest.raises(InvalidUrlError):
            parse_url("/api/v1/items")

    def test_rejects_malformed_url(self) -> None:
        with pytest.raises(InvalidUrlError) as exc_info:
            parse_url("https://abc.xyz/\x01")
        assert "abc.xyz" in exc_info.value.message

    def test_typer_wrapper_raises_bad_parameter(self) -> None:
        with pytest.raises(typer.BadParameter) as exc_info:
            url_param("abc")
        assert "abc" in str(exc_info.value)


class TestParseKvPair:
    """Tests for parse_kv_pair."""

    def test_key_and_value(self) -> None:
        assert parse_kv_pair("a=1") == KvPair(key="a", value="1")

    def test_empty_value(self) -> None:
        assert parse_kv_pair("b=") == KvPair(key="b", value="")

    def test_splits_on_first_equals(self) -> None:
        assert parse_kv_pair("q=x=y") == KvPair(key="q", value="x=y")

    def test_missing_equals_fails(self) -> None:
        with pytest.raises(InvalidKvPairError) as exc_info:
            parse_kv_pair("a")
        assert exc_info.value.token == "a"
        assert "a" in exc_info.value.message

    def test_typer_wrapper_raises_bad_parameter(self) -> None:
        with pytest.raises(typer.BadParameter) as exc_info:
            kv_pair_param("novalue")
        assert "Failed to parse novalue" in str(exc_info.value)
