"""Request dispatcher shared by every Trello endpoint method."""

import asyncio
import os
import sys
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any

from pydantic import ValidationError

from trello_sdk._internal.dispatch.models import (
    SUPPORTED_VERBS,
    Credentials,
    OutboundRequest,
    RequestOptions,
)
from trello_sdk._internal.dispatch.redaction import redact_payload, redact_text
from trello_sdk._internal.http import DEFAULT_BASE_URL, HttpxTransport, Transport
from trello_sdk.exceptions import (
    TrelloConfigError,
    TrelloTransportError,
    TrelloTypeMismatchError,
    TrelloUnsupportedVerbError,
)

DEFAULT_TIMEOUT_MS = 30000

Callback = Callable[[TrelloTransportError | None, Any], Any]


class RequestDispatcher:
    """Validates, authenticates and sends a single Trello API request.

    Every call goes through `request`, which either returns an asyncio.Task
    resolving to the decoded payload, or, when a callback is supplied,
    returns None and reports the outcome as `callback(error, result)`.

    Use `from_env()` to create a dispatcher from environment variables.
    """

    def __init__(
        self,
        key: str,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        transport: Transport | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            key: Trello application key.
            token: Trello user token.
            base_url: Service URL every request path is appended to.
            transport: Object performing the HTTP exchange. Defaults to
                an HttpxTransport using `timeout_ms`.
            timeout_ms: Request timeout in milliseconds for the default transport.
            debug: Enable debug logging to stderr.
        """
        self._credentials = Credentials(key=key, token=token)
        self._base_url = base_url
        self._transport: Transport = transport or HttpxTransport(timeout=timeout_ms / 1000)
        self._timeout_ms = timeout_ms
        self._debug = debug
        # Strong references so callback-mode tasks are not collected mid-flight.
        self._in_flight: set[asyncio.Task[Any]] = set()

    @classmethod
    def from_env(cls, **kwargs: Any) -> "RequestDispatcher":
        """Create a client from environment variables.

        Required environment variables:
            TRELLO_API_KEY: The application key.
            TRELLO_API_TOKEN: The user token.

        Optional environment variables:
            TRELLO_BASE_URL: Service URL (default: https://api.trello.com).
            TRELLO_TIMEOUT_MS: Request timeout in milliseconds.
            TRELLO_DEBUG: Set to "1" to enable debug logging.

        Args:
            **kwargs: Extra constructor arguments, e.g. a custom transport.

        Returns:
            A configured client.

        Raises:
            TrelloConfigError: The key or token is not set.
        """
        key = os.environ.get("TRELLO_API_KEY")
        token = os.environ.get("TRELLO_API_TOKEN")
        if not key or not token:
            raise TrelloConfigError("TRELLO_API_KEY and TRELLO_API_TOKEN must be set")

        base_url = os.environ.get("TRELLO_BASE_URL") or DEFAULT_BASE_URL
        debug = os.environ.get("TRELLO_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("TRELLO_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(
            key,
            token,
            base_url=base_url,
            timeout_ms=timeout_ms,
            debug=debug,
            **kwargs,
        )

    @property
    def key(self) -> str:
        return self._credentials.key

    @property
    def token(self) -> str:
        return self._credentials.token

    @property
    def base_url(self) -> str:
        return self._base_url

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[trello-sdk] {message}", file=sys.stderr)

    def request(
        self,
        method: str,
        path: str,
        options: Mapping[str, Any] | RequestOptions | None = None,
        callback: Callback | None = None,
    ) -> "asyncio.Task[Any] | None":
        """Send one request to the Trello API.

        Arguments are validated synchronously; nothing is sent if they are
        invalid. Must be called while an asyncio event loop is running.

        Args:
            method: HTTP verb, one of GET, POST, PUT, DELETE (any case).
            path: Path appended verbatim to the base URL, e.g. "/1/cards".
            options: Optional mapping with "query" and "data" mappings. Never mutated.
            callback: Optional `callback(error, result)`. When given, it is
                invoked exactly once and this method returns None.

        Returns:
            An asyncio.Task resolving to the decoded payload (raising
            TrelloTransportError on failure), or None in callback mode.

        Raises:
            TrelloTypeMismatchError: method or path is not a string, or
                options is not a mapping.
            TrelloUnsupportedVerbError: method is not a supported verb.
        """
        verb = _normalize_verb(method)
        if not isinstance(path, str):
            raise TrelloTypeMismatchError(f"path must be a string, got {type(path).__name__}")
        outbound = self._build_request(verb, path, options)

        self._log_debug(
            f"{outbound.verb} {self._redact_url(outbound.url)} "
            f"query={redact_payload(outbound.query)}"
        )

        task = asyncio.get_running_loop().create_task(self._perform(outbound))
        if callback is None:
            return task

        self._in_flight.add(task)
        task.add_done_callback(partial(self._complete, callback))
        return None

    def _build_request(
        self,
        verb: str,
        path: str,
        options: Mapping[str, Any] | RequestOptions | None,
    ) -> OutboundRequest:
        """Validate options and merge them into a fresh working copy."""
        if options is None:
            source: dict[str, Any] = {}
        elif isinstance(options, RequestOptions):
            source = options.model_dump()
        elif isinstance(options, Mapping):
            source = dict(options)
        else:
            raise TrelloTypeMismatchError(
                f"options must be a mapping, got {type(options).__name__}"
            )

        try:
            parsed = RequestOptions.model_validate(source)
        except ValidationError as e:
            raise TrelloTypeMismatchError(f"Invalid request options: {e}") from e

        query = self._credentials.as_query()
        query.update(parsed.query or {})

        return OutboundRequest(
            verb=verb,
            url=self._base_url + path,
            query=query,
            data=dict(parsed.data) if parsed.data is not None else None,
        )

    async def _perform(self, outbound: OutboundRequest) -> Any:
        """Run the single transport call and normalize its outcome."""
        try:
            send = getattr(self._transport, outbound.verb.lower())
            result = await send(outbound.url, query=outbound.query, data=outbound.data)
        except TrelloTransportError as e:
            self._log_debug(f"{outbound.verb} failed: {e}")
            raise
        except Exception as e:
            self._log_debug(f"{outbound.verb} failed: {e}")
            raise TrelloTransportError(f"{outbound.verb} request failed: {e}") from e

        if isinstance(result, BaseException):
            self._log_debug(f"{outbound.verb} failed: {result}")
            raise _normalize_error(result, outbound.verb)

        self._log_debug(f"{outbound.verb} succeeded")
        return result

    def _complete(self, callback: Callback, task: "asyncio.Task[Any]") -> None:
        """Deliver a finished task to an error-first callback."""
        self._in_flight.discard(task)

        if task.cancelled():
            callback(TrelloTransportError("Request was cancelled"), None)
            return

        error = task.exception()
        if error is not None:
            callback(error, None)
        else:
            callback(None, task.result())

    def _redact_url(self, url: str) -> str:
        return redact_text(url, (self._credentials.token, self._credentials.key))


def _normalize_verb(method: object) -> str:
    """Return the upper-cased verb or raise if it is not supported."""
    if not isinstance(method, str):
        raise TrelloTypeMismatchError(f"method must be a string, got {type(method).__name__}")

    verb = method.upper()
    if verb not in SUPPORTED_VERBS:
        raise TrelloUnsupportedVerbError(
            f"method must be one of {', '.join(sorted(SUPPORTED_VERBS))}, got {method!r}"
        )
    return verb


def _normalize_error(error: BaseException, verb: str) -> TrelloTransportError:
    if isinstance(error, TrelloTransportError):
        return error
    normalized = TrelloTransportError(f"{verb} request failed: {error}")
    normalized.__cause__ = error
    return normalized
