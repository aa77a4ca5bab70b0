"""Pydantic models for requests flowing through the dispatcher."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

# =============================================================================
# Constants
# =============================================================================

Verb = Literal["GET", "POST", "PUT", "DELETE"]

SUPPORTED_VERBS: frozenset[str] = frozenset({"GET", "POST", "PUT", "DELETE"})

# =============================================================================
# Models
# =============================================================================


class Credentials(BaseModel):
    """Application key and user token sent with every request."""

    key: str
    token: str

    model_config = ConfigDict(frozen=True)

    def as_query(self) -> dict[str, str]:
        """Return a fresh query mapping holding the credential pair."""
        return {"key": self.key, "token": self.token}


class RequestOptions(BaseModel):
    """Per-call options accepted by `RequestDispatcher.request`.

    Fields:
        query: Values merged over the credentials into the query string.
        data: Values sent as the JSON request body.

    Other keys are accepted and ignored.
    """

    query: dict[str, Any] | None = None
    data: dict[str, Any] | None = None

    model_config = ConfigDict(extra="allow")


class OutboundRequest(BaseModel):
    """Working copy of a single request, handed to the transport."""

    verb: Verb
    url: str
    query: dict[str, Any]
    data: dict[str, Any] | None = None
