"""Redaction of credentials from debug output."""

from collections.abc import Iterable
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "key",
    "token",
    "api_key",
    "secret",
    "password",
    "authorization",
    "oauth_token",
    "oauth_secret",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Recursively redact sensitive keys from a query or body mapping.

    Creates a copy - the original payload is never mutated.

    Args:
        payload: The dictionary to redact sensitive values from.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    return _redact_recursive(payload)


def redact_text(text: str, secrets: Iterable[str]) -> str:
    """Replace every occurrence of the given secrets in a string.

    Used for URLs, since some paths embed the user token.
    """
    for secret in secrets:
        if secret:
            text = text.replace(secret, REDACTED_VALUE)
    return text


def _redact_recursive(obj: Any) -> Any:
    """Recursively redact sensitive keys."""
    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = _redact_recursive(value)
        return result
    elif isinstance(obj, list):
        return [_redact_recursive(item) for item in obj]
    else:
        return obj
