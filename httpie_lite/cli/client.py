"""
HTTP Client for CLI.

Wraps a single httpx.AsyncClient built from the immutable client settings.
Every request carries the configured default headers (X-Powered-By and
User-Agent). Exactly one request is issued per invocation.
"""

from typing import Any

import httpx

from httpie_lite.cli.schemas import Command, GetCommand, KvPair, PostCommand
from httpie_lite.core.config import get_app_config
from httpie_lite.core.config_schema import ClientSchema
from httpie_lite.core.exceptions import BodyReadError, TransportError
from httpie_lite.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


def build_json_body(pairs: list[KvPair] | tuple[KvPair, ...]) -> dict[str, str]:
    """
    Build the POST body mapping from ordered pairs.

    Duplicate keys collapse to the last value.
    """
    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body


class HttpClient:
    """
    HTTP client for one-shot requests.

    Features:
    - Default headers fixed at construction from ClientSchema
    - Response body read fully into memory before it is returned
    - httpx failures mapped to TransportError / BodyReadError

    Usage:
        client = HttpClient(get_app_config().client)
        response = await client.get("https://httpbin.org/get")
        response = await client.post("https://httpbin.org/post", pairs)
    """

    def __init__(
        self,
        config: ClientSchema,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the HTTP client.

        Args:
            config: Immutable client settings (default headers, timeout).
            transport: Optional httpx transport, used by tests.
        """
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self.config.headers,
                timeout=self.config.timeout,
                follow_redirects=self.config.follow_redirects,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """
        Send a request and read the whole response body.

        Args:
            method: HTTP method (GET or POST)
            url: Absolute request URL
            **kwargs: Additional arguments for httpx.AsyncClient.build_request

        Returns:
            httpx.Response with its content loaded

        Raises:
            TransportError: If the request could not be delivered
            BodyReadError: If the response body could not be read
        """
        client = self._get_client()
        request = client.build_request(method, url, **kwargs)

        log_with_source(logger, "http", "debug", "Request sent", method=method, url=url)

        try:
            response = await client.send(request, stream=True)
        except httpx.HTTPError as e:
            log_with_source(
                logger, "http", "error", "Request failed",
                method=method, url=url, error=str(e),
            )
            raise TransportError(f"{method} {url} failed: {str(e) or type(e).__name__}") from e

        try:
            await response.aread()
        except httpx.HTTPError as e:
            log_with_source(
                logger, "http", "error", "Body read failed",
                method=method, url=url, error=str(e),
            )
            raise BodyReadError(f"Failed to read response body from {url}: {str(e) or type(e).__name__}") from e
        finally:
            await response.aclose()

        log_with_source(
            logger, "http", "debug", "Response received",
            method=method, url=url, status_code=response.status_code,
        )
        return response

    async def get(self, url: str) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", url)

    async def post(self, url: str, pairs: list[KvPair] | tuple[KvPair, ...]) -> httpx.Response:
        """Make a POST request with a JSON body built from ``pairs``."""
        return await self.request("POST", url, json=build_json_body(pairs))

    async def execute(self, command: Command) -> httpx.Response:
        """Dispatch a parsed command to the matching request method."""
        if isinstance(command, GetCommand):
            return await self.get(command.url)
        if isinstance(command, PostCommand):
            return await self.post(command.url, command.body)
        raise TypeError(f"Unsupported command: {type(command).__name__}")


# Module-level client instance
_client: HttpClient | None = None


def get_http_client() -> HttpClient:
    """Get or create the HTTP client singleton."""
    global _client
    if _client is None:
        _client = HttpClient(get_app_config().client)
    return _client


async def close_http_client() -> None:
    """Close the HTTP client."""
    global _client
    if _client:
        await _client.close()
        _client = None
