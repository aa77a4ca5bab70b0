"""Shared HTTP client configuration and the default request transport."""

from typing import Any, Protocol

import httpx
from pydantic_core import to_jsonable_python

from trello_sdk._version import __version__
from trello_sdk.exceptions import TrelloAPIError, TrelloTransportError

DEFAULT_BASE_URL = "https://api.trello.com"
DEFAULT_TIMEOUT = 30.0
ERROR_BODY_MAX_LENGTH = 200


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        base_url=base_url or "",
        headers={"User-Agent": f"trello-sdk/{__version__}"},
    )


class Transport(Protocol):
    """Verb-specific operations the dispatcher sends requests through.

    Each coroutine returns the decoded response payload or raises.
    """

    async def get(
        self, url: str, *, query: dict[str, Any], data: dict[str, Any] | None = None
    ) -> Any: ...

    async def post(
        self, url: str, *, query: dict[str, Any], data: dict[str, Any] | None = None
    ) -> Any: ...

    async def put(
        self, url: str, *, query: dict[str, Any], data: dict[str, Any] | None = None
    ) -> Any: ...

    async def delete(
        self, url: str, *, query: dict[str, Any], data: dict[str, Any] | None = None
    ) -> Any: ...


class HttpxTransport:
    """Transport backed by httpx.

    Query values are sent as URL parameters and data as a JSON body. Dates are
    serialized to ISO 8601. Unless a client is supplied, a short-lived
    AsyncClient is opened for every request.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout = timeout
        self._client = client

    async def get(
        self, url: str, *, query: dict[str, Any], data: dict[str, Any] | None = None
    ) -> Any:
        return await self._send("GET", url, query=query, data=data)

    async def post(
        self, url: str, *, query: dict[str, Any], data: dict[str, Any] | None = None
    ) -> Any:
        return await self._send("POST", url, query=query, data=data)

    async def put(
        self, url: str, *, query: dict[str, Any], data: dict[str, Any] | None = None
    ) -> Any:
        return await self._send("PUT", url, query=query, data=data)

    async def delete(
        self, url: str, *, query: dict[str, Any], data: dict[str, Any] | None = None
    ) -> Any:
        return await self._send("DELETE", url, query=query, data=data)

    async def _send(
        self,
        verb: str,
        url: str,
        *,
        query: dict[str, Any],
        data: dict[str, Any] | None,
    ) -> Any:
        params = {k: v for k, v in to_jsonable_python(query).items() if v is not None}
        body = to_jsonable_python(data) if data else None

        try:
            if self._client is not None:
                response = await self._client.request(verb, url, params=params, json=body)
            else:
                async with create_http_client(timeout=self._timeout) as client:
                    response = await client.request(verb, url, params=params, json=body)
        except httpx.TimeoutException as e:
            raise TrelloTransportError(f"{verb} request timed out") from e
        except httpx.HTTPError as e:
            raise TrelloTransportError(f"{verb} request failed: {e}") from e

        return decode_response(response)


def decode_response(response: httpx.Response) -> Any:
    """Decode a Trello response body.

    Args:
        response: The completed HTTP response.

    Returns:
        The decoded JSON payload, the raw text for non-JSON bodies, or None
        for an empty body.

    Raises:
        TrelloAPIError: The status code is not 2xx.
        TrelloTransportError: The body claims to be JSON but cannot be parsed.
    """
    if not response.is_success:
        text = response.text
        raise TrelloAPIError(
            f"Trello API returned {response.status_code}: {text[:ERROR_BODY_MAX_LENGTH]}",
            status_code=response.status_code,
            body=text,
        )

    if not response.content:
        return None

    if "json" not in response.headers.get("content-type", ""):
        return response.text

    try:
        return response.json()
    except ValueError as e:
        raise TrelloTransportError(
            "Malformed JSON response",
            status_code=response.status_code,
            body=response.text,
        ) from e
