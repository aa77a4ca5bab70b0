"""Request dispatch for the Trello SDK.

Every endpoint method on TrelloClient funnels through RequestDispatcher.request.
"""

from trello_sdk._internal.dispatch.dispatcher import RequestDispatcher
from trello_sdk._internal.dispatch.models import (
    SUPPORTED_VERBS,
    Credentials,
    OutboundRequest,
    RequestOptions,
)

__all__ = [
    "RequestDispatcher",
    "Credentials",
    "OutboundRequest",
    "RequestOptions",
    "SUPPORTED_VERBS",
]
