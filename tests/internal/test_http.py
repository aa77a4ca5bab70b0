"""Tests for the httpx transport."""

import asyncio
import json
from datetime import datetime

import httpx
import pytest
import respx

from trello_sdk._internal.http import HttpxTransport, create_http_client, decode_response
from trello_sdk._version import __version__
from trello_sdk.exceptions import TrelloAPIError, TrelloTransportError

BASE = "https://api.trello.com"


def _run(coro):
    return asyncio.run(coro)


class TestCreateHttpClient:
    """Tests for create_http_client()."""

    def test_sets_user_agent(self):
        """Should identify the SDK in the User-Agent header."""
        client = create_http_client()
        assert client.headers["User-Agent"] == f"trello-sdk/{__version__}"
        _run(client.aclose())

    def test_sets_timeout(self):
        """Should apply the configured timeout."""
        client = create_http_client(timeout=2.5)
        assert client.timeout.read == 2.5
        _run(client.aclose())


class TestHttpxTransport:
    """Tests for HttpxTransport request handling."""

    @respx.mock
    def test_get_sends_query_params(self):
        """Should send query values as URL parameters."""
        route = respx.get(f"{BASE}/1/boards/b1/lists").mock(
            return_value=httpx.Response(200, json=[{"id": "l1"}])
        )

        result = _run(
            HttpxTransport().get(
                f"{BASE}/1/boards/b1/lists",
                query={"key": "k", "token": "t", "filter": "open"},
            )
        )

        assert result == [{"id": "l1"}]
        params = route.calls.last.request.url.params
        assert params["key"] == "k"
        assert params["token"] == "t"
        assert params["filter"] == "open"

    @respx.mock
    def test_post_sends_json_body(self):
        """Should send data as a JSON body."""
        route = respx.post(f"{BASE}/1/labels").mock(
            return_value=httpx.Response(200, json={"id": "label-1"})
        )

        _run(
            HttpxTransport().post(
                f"{BASE}/1/labels",
                query={"key": "k", "token": "t"},
                data={"idBoard": "b1", "name": "urgent", "color": "red"},
            )
        )

        request = route.calls.last.request
        assert json.loads(request.content) == {"idBoard": "b1", "name": "urgent", "color": "red"}
        assert "idBoard" not in request.url.params

    @respx.mock
    def test_put_and_delete_use_their_verbs(self):
        """Should map each operation to its HTTP verb."""
        put_route = respx.put(f"{BASE}/1/cards/c1/idList").mock(
            return_value=httpx.Response(200, json={})
        )
        delete_route = respx.delete(f"{BASE}/1/webhooks/w1").mock(
            return_value=httpx.Response(200, json={"_value": None})
        )

        transport = HttpxTransport()
        _run(transport.put(f"{BASE}/1/cards/c1/idList", query={"value": "l2"}))
        _run(transport.delete(f"{BASE}/1/webhooks/w1", query={}))

        assert put_route.calls.last.request.url.params["value"] == "l2"
        assert delete_route.called

    @respx.mock
    def test_serializes_dates(self):
        """Should send datetime values as ISO 8601 strings."""
        route = respx.get(f"{BASE}/1/lists/l1/cards").mock(
            return_value=httpx.Response(200, json=[])
        )

        _run(
            HttpxTransport().get(
                f"{BASE}/1/lists/l1/cards",
                query={"before": datetime(2015, 3, 25)},
            )
        )

        assert route.calls.last.request.url.params["before"] == "2015-03-25T00:00:00"

    @respx.mock
    def test_serializes_dates_in_body(self):
        """Should serialize datetime values in the JSON body."""
        route = respx.post(f"{BASE}/1/cards").mock(return_value=httpx.Response(200, json={}))

        _run(
            HttpxTransport().post(
                f"{BASE}/1/cards",
                query={},
                data={"due": datetime(2015, 3, 25, 12, 30)},
            )
        )

        assert json.loads(route.calls.last.request.content) == {"due": "2015-03-25T12:30:00"}

    @respx.mock
    def test_skips_none_query_values(self):
        """Should not send parameters whose value is None."""
        route = respx.get(f"{BASE}/1/cards/c1").mock(return_value=httpx.Response(200, json={}))

        _run(HttpxTransport().get(f"{BASE}/1/cards/c1", query={"fields": None, "key": "k"}))

        params = route.calls.last.request.url.params
        assert "fields" not in params
        assert params["key"] == "k"

    @respx.mock
    def test_error_status_raises_api_error(self):
        """Should raise TrelloAPIError on non-2xx responses."""
        respx.get(f"{BASE}/1/boards/b1").mock(
            return_value=httpx.Response(401, text="invalid token")
        )

        with pytest.raises(TrelloAPIError) as exc_info:
            _run(HttpxTransport().get(f"{BASE}/1/boards/b1", query={}))

        assert exc_info.value.status_code == 401
        assert exc_info.value.body == "invalid token"
        assert "invalid token" in str(exc_info.value)

    @respx.mock
    def test_server_error_raises_api_error(self):
        """Should raise TrelloAPIError on server errors."""
        respx.post(f"{BASE}/1/cards").mock(return_value=httpx.Response(500))

        with pytest.raises(TrelloAPIError) as exc_info:
            _run(HttpxTransport().post(f"{BASE}/1/cards", query={}))
        assert exc_info.value.status_code == 500

    @respx.mock
    def test_timeout_raises_transport_error(self):
        """Should raise TrelloTransportError on timeout."""
        respx.get(f"{BASE}/1/cards").mock(side_effect=httpx.TimeoutException("timeout"))

        with pytest.raises(TrelloTransportError) as exc_info:
            _run(HttpxTransport(timeout=0.1).get(f"{BASE}/1/cards", query={}))
        assert isinstance(exc_info.value.__cause__, httpx.TimeoutException)
        assert exc_info.value.status_code is None

    @respx.mock
    def test_network_error_raises_transport_error(self):
        """Should raise TrelloTransportError on connection failure."""
        respx.get(f"{BASE}/1/cards").mock(side_effect=httpx.ConnectError("connection failed"))

        with pytest.raises(TrelloTransportError) as exc_info:
            _run(HttpxTransport().get(f"{BASE}/1/cards", query={}))
        assert "connection failed" in str(exc_info.value)

    @respx.mock
    def test_uses_supplied_client(self):
        """Should send through a caller-supplied AsyncClient."""
        route = respx.get(f"{BASE}/1/members/me").mock(
            return_value=httpx.Response(200, json={"id": "me"})
        )

        async def scenario():
            async with httpx.AsyncClient(headers={"X-Test": "1"}) as client:
                return await HttpxTransport(client=client).get(f"{BASE}/1/members/me", query={})

        assert _run(scenario()) == {"id": "me"}
        assert route.calls.last.request.headers["x-test"] == "1"


class TestDecodeResponse:
    """Tests for decode_response()."""

    def test_decodes_json(self):
        response = httpx.Response(200, json={"id": "abc"})
        assert decode_response(response) == {"id": "abc"}

    def test_empty_body_returns_none(self):
        """Should return None for empty bodies."""
        assert decode_response(httpx.Response(200)) is None

    def test_text_body_returned_as_text(self):
        """Should return non-JSON bodies as text."""
        response = httpx.Response(200, text="ok")
        assert decode_response(response) == "ok"

    def test_malformed_json_raises(self):
        """Should raise TrelloTransportError when a JSON body cannot be parsed."""
        response = httpx.Response(
            200, content=b"{not json", headers={"content-type": "application/json"}
        )
        with pytest.raises(TrelloTransportError, match="Malformed"):
            decode_response(response)

    def test_error_body_truncated_in_message(self):
        """Should keep the full body but truncate the message."""
        body = "x" * 1000
        with pytest.raises(TrelloAPIError) as exc_info:
            decode_response(httpx.Response(400, text=body))
        assert exc_info.value.body == body
        assert len(str(exc_info.value)) < 300
