"""Unit tests for application exceptions."""

from httpie_lite.core.exceptions import (
    ApplicationError,
    BodyReadError,
    HeaderDecodeError,
    InvalidKvPairError,
    InvalidUrlError,
    TransportError,
)


class TestApplicationErrors:
    """Tests for error codes and messages."""

    def test_invalid_url_names_the_input(self):
        error = InvalidUrlError("abc", "relative URL without a base")
        assert "abc" in error.message
        assert error.code == "VAL_INVALID_URL"
        assert error.url == "abc"

    def test_invalid_url_without_reason(self):
        assert InvalidUrlError("abc").message == "Invalid URL 'abc'"

    def test_invalid_kv_pair_names_the_token(self):
        error = InvalidKvPairError("novalue")
        assert error.message == "Failed to parse novalue"
        assert error.code == "VAL_INVALID_KV_PAIR"

    def test_header_decode_error_shows_raw_bytes(self):
        error = HeaderDecodeError("content-type", b"text/\xff")
        assert "content-type" in error.message
        assert "\\xff" in error.message

    def test_all_errors_share_the_base_class(self):
        for error in (TransportError(), BodyReadError(), InvalidKvPairError("x")):
            assert isinstance(error, ApplicationError)
            assert str(error) == error.message
