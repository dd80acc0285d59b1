# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Custom exceptions for the Kafka REST proxy client.

All exceptions inherit from KafkaRestError, making it easy to catch every
client error with a single except clause:

    try:
        client.topic("events").metadata()
    except KafkaRestError as e:
        print(f"Kafka REST error: {e}")

Errors reported by the proxy are raised as ResponseError. Instead of one class
per error code, every ResponseError carries a ``kind`` resolved from its code,
so callers can branch on it:

    try:
        client.topic("events").metadata()
    except ResponseError as e:
        if e.kind is ErrorKind.TOPIC_NOT_FOUND:
            print(f"No such topic ({e.code}): {e.message}")
"""

from __future__ import annotations

from .error_codes import ErrorKind, error_kind_for


class KafkaRestError(Exception):
    """
    Base exception for all Kafka REST client errors.

    All client exceptions inherit from this class, allowing you to catch
    them with a single except clause.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        self.hint = hint
        if hint:
            message = f"{message}\n\n  Hint: {hint}"
        super().__init__(message)


class UnsupportedMethod(KafkaRestError, ValueError):
    """Raised when a request uses an HTTP method other than GET, POST, PUT or DELETE."""

    def __init__(self, method: object) -> None:
        self.method = method
        super().__init__(
            f"Unsupported request method: {method!r}",
            hint="Use one of GET, POST, PUT or DELETE",
        )


class InvalidResponse(KafkaRestError):
    """
    Raised when the proxy answers with a body that is not valid JSON.

    The parser's message is kept in ``parse_error``.
    """

    def __init__(self, parse_error: str) -> None:
        self.parse_error = parse_error
        super().__init__(f"Invalid JSON in response: {parse_error}")


class ConnectionError(KafkaRestError):
    """
    Raised when the proxy cannot be reached.

    Common causes:
    - Proxy is not running
    - Wrong endpoint URL
    - TLS handshake failure
    """

    def __init__(self, message: str, endpoint: str | None = None) -> None:
        self.endpoint = endpoint
        hint = f"Check that the REST proxy is reachable at {endpoint}" if endpoint else None
        super().__init__(message, hint=hint)


class ResponseError(KafkaRestError):
    """
    Raised when the proxy answers with an error.

    Every response error carries the proxy's numeric ``code``, its
    ``message`` and the ``kind`` resolved from the code.
    """

    def __init__(self, code: int | None, message: str | None) -> None:
        self.code = code
        self.message = message
        self.kind = self._resolve_kind(code)
        super().__init__(f"[{code}] {message}")

    @staticmethod
    def _resolve_kind(code: int | None) -> ErrorKind:
        return error_kind_for(code)


class UnauthorizedRequest(ResponseError):
    """
    Raised when the proxy rejects the request with HTTP 403.

    Common causes:
    - No credentials configured on the client
    - Invalid username or password
    """

    @staticmethod
    def _resolve_kind(code: int | None) -> ErrorKind:
        return ErrorKind.UNAUTHORIZED
