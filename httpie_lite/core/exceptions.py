"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when bundled configuration cannot be loaded or validated."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="SYS_CONFIG_ERROR")


class InvalidUrlError(ApplicationError):
    """Raised when a URL argument is not a well-formed absolute URL."""

    def __init__(self, url: str, reason: str | None = None) -> None:
        self.url = url
        message = f"Invalid URL '{url}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, code="VAL_INVALID_URL")


class InvalidKvPairError(ApplicationError):
    """Raised when a body token is not of the form key=value."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Failed to parse {token}", code="VAL_INVALID_KV_PAIR")


class TransportError(ApplicationError):
    """Raised when the request cannot be delivered (DNS, connect, TLS, timeout)."""

    def __init__(self, message: str = "Transport error") -> None:
        super().__init__(message, code="NET_TRANSPORT_ERROR")


class BodyReadError(ApplicationError):
    """Raised when the response body cannot be read."""

    def __init__(self, message: str = "Failed to read response body") -> None:
        super().__init__(message, code="NET_BODY_READ_ERROR")


class HeaderDecodeError(ApplicationError):
    """Raised when a response header value cannot be decoded."""

    def __init__(self, name: str, value: bytes) -> None:
        self.name = name
        self.value = value
        super().__init__(
            f"Cannot decode header {name}: {value!r}",
            code="HTTP_HEADER_DECODE_ERROR",
        )
