"""Trello SDK for Python.

This SDK exposes the Trello REST API as Python method calls.

Public API:
    TrelloClient - Client with one method per endpoint
    get_client - TrelloClient configured from environment variables

Every method returns an asyncio.Task resolving to the decoded response, or
accepts a trailing `callback(error, result)` and returns None.
"""

from trello_sdk._internal.dispatch import RequestOptions
from trello_sdk._version import __version__
from trello_sdk.client import TrelloClient, get_client

__all__ = ["__version__", "TrelloClient", "RequestOptions", "get_client"]
