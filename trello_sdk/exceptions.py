"""Public exceptions for the Trello SDK."""


class TrelloError(Exception):
    """Base exception for all Trello SDK errors."""


class TrelloConfigError(TrelloError):
    """Configuration error (missing env vars, invalid config)."""


class TrelloInvalidArgumentError(TrelloError):
    """Invalid argument passed to a request, detected before any I/O."""


class TrelloTypeMismatchError(TrelloInvalidArgumentError, TypeError):
    """Argument has the wrong type (e.g. non-string method, non-mapping options)."""


class TrelloUnsupportedVerbError(TrelloInvalidArgumentError, ValueError):
    """HTTP verb is not one of GET, POST, PUT, DELETE."""


class TrelloTransportError(TrelloError):
    """Request failed in the network layer or the service rejected it."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TrelloAPIError(TrelloTransportError):
    """Error status returned by the Trello API."""
