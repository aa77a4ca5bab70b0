"""Internal modules for Trello SDK.

WARNING: This package contains the machinery behind TrelloClient.
These are not intended for direct use in application code.

Modules:
    dispatch - Request validation and dispatch
    http - Shared HTTP client configuration and transport
"""
