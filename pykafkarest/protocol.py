# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Kafka REST proxy protocol constants.

Content Negotiation:
    Every request carries ``Accept`` and ``Content-Type`` headers with one of
    the proxy's versioned media types:

    - application/vnd.kafka.v1+json         - plain API requests (default)
    - application/vnd.kafka.binary.v1+json  - records with base64 keys/values
    - application/vnd.kafka.avro.v1+json    - records encoded with an avro schema
    - application/vnd.kafka.json.v1+json    - records with JSON keys/values

The record formats are called "embedded formats" by the proxy.
"""

from __future__ import annotations

from enum import Enum

JSON_REQUEST_CONTENT_TYPE: str = "application/vnd.kafka.v1+json"
BINARY_MESSAGE_CONTENT_TYPE: str = "application/vnd.kafka.binary.v1+json"
AVRO_MESSAGE_CONTENT_TYPE: str = "application/vnd.kafka.avro.v1+json"
JSON_MESSAGE_CONTENT_TYPE: str = "application/vnd.kafka.json.v1+json"

DEFAULT_ACCEPT_HEADER: str = JSON_REQUEST_CONTENT_TYPE
DEFAULT_CONTENT_TYPE_HEADER: str = JSON_REQUEST_CONTENT_TYPE


class Method(str, Enum):
    """HTTP methods understood by the proxy."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, method: Method | str) -> Method:
        """
        Normalize a method given as enum member or string.

        Raises:
            ValueError: If the method is not supported.
        """
        if isinstance(method, cls):
            return method
        if isinstance(method, str):
            return cls(method.upper())
        raise ValueError(f"{method!r} is not a valid {cls.__name__}")


class EmbeddedFormat(str, Enum):
    """Wire encodings for record keys and values."""

    BINARY = "binary"
    AVRO = "avro"
    JSON = "json"

    @property
    def media_type(self) -> str:
        """Media type used for produce and consume requests in this format."""
        return _MEDIA_TYPES[self]


_MEDIA_TYPES: dict[EmbeddedFormat, str] = {
    EmbeddedFormat.BINARY: BINARY_MESSAGE_CONTENT_TYPE,
    EmbeddedFormat.AVRO: AVRO_MESSAGE_CONTENT_TYPE,
    EmbeddedFormat.JSON: JSON_MESSAGE_CONTENT_TYPE,
}
