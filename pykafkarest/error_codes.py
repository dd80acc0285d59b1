# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Error codes published by the Kafka REST proxy (v1 API).

Failing responses carry a JSON body with an ``error_code`` and a ``message``.
The code is resolved to an :class:`ErrorKind` through ``RESPONSE_ERROR_CODES``;
codes missing from the table resolve to ``ErrorKind.RESPONSE_ERROR``.

To support a new code, add a member to ``ErrorKind`` and an entry to the table.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of errors reported by the proxy."""

    RESPONSE_ERROR = "response_error"
    UNAUTHORIZED = "unauthorized"

    # 404xx - resource not found
    TOPIC_NOT_FOUND = "topic_not_found"
    PARTITION_NOT_FOUND = "partition_not_found"
    CONSUMER_INSTANCE_NOT_FOUND = "consumer_instance_not_found"
    LEADER_NOT_AVAILABLE = "leader_not_available"

    # 406xx - not acceptable
    CONSUMER_FORMAT_MISMATCH = "consumer_format_mismatch"

    # 409xx - conflict
    CONSUMER_ALREADY_SUBSCRIBED = "consumer_already_subscribed"
    CONSUMER_ALREADY_EXISTS = "consumer_already_exists"
    ILLEGAL_STATE = "illegal_state"

    # 422xx - unprocessable entity
    KEY_SCHEMA_MISSING = "key_schema_missing"
    VALUE_SCHEMA_MISSING = "value_schema_missing"
    JSON_AVRO_CONVERSION = "json_avro_conversion"
    INVALID_CONSUMER_CONFIG = "invalid_consumer_config"
    INVALID_SCHEMA = "invalid_schema"

    # 5xxxx - server side
    ZOOKEEPER_ERROR = "zookeeper_error"
    KAFKA_ERROR = "kafka_error"
    KAFKA_RETRIABLE_ERROR = "kafka_retriable_error"
    NO_SSL_SUPPORT = "no_ssl_support"
    NO_SIMPLE_CONSUMER_AVAILABLE = "no_simple_consumer_available"
    SCHEMA_REGISTRY_ERROR = "schema_registry_error"


RESPONSE_ERROR_CODES: dict[int, ErrorKind] = {
    40401: ErrorKind.TOPIC_NOT_FOUND,
    40402: ErrorKind.PARTITION_NOT_FOUND,
    40403: ErrorKind.CONSUMER_INSTANCE_NOT_FOUND,
    40404: ErrorKind.LEADER_NOT_AVAILABLE,
    40601: ErrorKind.CONSUMER_FORMAT_MISMATCH,
    40901: ErrorKind.CONSUMER_ALREADY_SUBSCRIBED,
    40902: ErrorKind.CONSUMER_ALREADY_EXISTS,
    40903: ErrorKind.ILLEGAL_STATE,
    42201: ErrorKind.KEY_SCHEMA_MISSING,
    42202: ErrorKind.VALUE_SCHEMA_MISSING,
    42203: ErrorKind.JSON_AVRO_CONVERSION,
    42204: ErrorKind.INVALID_CONSUMER_CONFIG,
    42205: ErrorKind.INVALID_SCHEMA,
    50001: ErrorKind.ZOOKEEPER_ERROR,
    50002: ErrorKind.KAFKA_ERROR,
    50003: ErrorKind.KAFKA_RETRIABLE_ERROR,
    50101: ErrorKind.NO_SSL_SUPPORT,
    50301: ErrorKind.NO_SIMPLE_CONSUMER_AVAILABLE,
    50302: ErrorKind.SCHEMA_REGISTRY_ERROR,
}


def error_kind_for(code: int | None) -> ErrorKind:
    """Resolve a proxy error code to its kind."""
    if not isinstance(code, int) or isinstance(code, bool):
        return ErrorKind.RESPONSE_ERROR
    return RESPONSE_ERROR_CODES.get(code, ErrorKind.RESPONSE_ERROR)
