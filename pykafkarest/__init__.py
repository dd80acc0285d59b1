# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
PyKafkaRest - Python client for the Kafka REST proxy.

A small synchronous client with support for:
- Content negotiation with the proxy's versioned media types
- HTTP basic authentication and virtual host routing
- Typed errors for every proxy error code
- Binary, JSON and avro record encodings

Quick Start:
    >>> from pykafkarest import connect, Record
    >>>
    >>> client = connect("http://localhost:8082")
    >>> records = client.topic("events").produce(Record(value=b"Hello!"))
    >>> print(records[0].offset)

Context Manager (Recommended for applications):
    >>> from pykafkarest import KafkaRestClient
    >>>
    >>> with KafkaRestClient.open("http://localhost:8082") as client:
    ...     print(client.brokers())
    # Connection closes when exiting the block

Consumers:
    >>> with client.consumer("my-group", auto_offset_reset="smallest") as consumer:
    ...     for record in consumer.read("events"):
    ...         print(record.value.decode())

Authentication:
    >>> client = connect(
    ...     "https://proxy:8082",
    ...     username="alice",
    ...     password="secret"
    ... )

Error Handling:
    >>> from pykafkarest import ErrorKind, ResponseError
    >>>
    >>> try:
    ...     client.topic("missing").metadata()
    ... except ResponseError as e:
    ...     if e.kind is ErrorKind.TOPIC_NOT_FOUND:
    ...         print(e.code, e.message)
"""

from .client import KafkaRestClient, connect
from .consumer import Consumer
from .error_codes import RESPONSE_ERROR_CODES, ErrorKind, error_kind_for
from .exceptions import (
    ConnectionError,
    InvalidResponse,
    KafkaRestError,
    ResponseError,
    UnauthorizedRequest,
    UnsupportedMethod,
)
from .models import (
    ClientConfig,
    CommittedOffset,
    ConsumerConfig,
    ConsumerInstance,
    OffsetReset,
    PartitionMetadata,
    PartitionOffset,
    ProduceResponse,
    ReplicaInfo,
    TopicMetadata,
)
from .protocol import (
    AVRO_MESSAGE_CONTENT_TYPE,
    BINARY_MESSAGE_CONTENT_TYPE,
    JSON_MESSAGE_CONTENT_TYPE,
    JSON_REQUEST_CONTENT_TYPE,
    EmbeddedFormat,
    Method,
)
from .record import Record, RecordPayload, encode_record, encode_records
from .tls import TLSConfig
from .topic import Partition, Topic

__version__ = "1.0.0"
__author__ = "Firefly Software Solutions Inc."
__license__ = "Apache-2.0"

__all__ = [
    # Client
    "KafkaRestClient",
    "connect",
    # TLS
    "TLSConfig",
    # Handles
    "Topic",
    "Partition",
    "Consumer",
    # Records
    "Record",
    "RecordPayload",
    "encode_record",
    "encode_records",
    # Protocol
    "Method",
    "EmbeddedFormat",
    "JSON_REQUEST_CONTENT_TYPE",
    "BINARY_MESSAGE_CONTENT_TYPE",
    "AVRO_MESSAGE_CONTENT_TYPE",
    "JSON_MESSAGE_CONTENT_TYPE",
    # Configuration
    "ClientConfig",
    "ConsumerConfig",
    "OffsetReset",
    # Types (Pydantic models)
    "ProduceResponse",
    "PartitionOffset",
    "TopicMetadata",
    "PartitionMetadata",
    "ReplicaInfo",
    "ConsumerInstance",
    "CommittedOffset",
    # Error codes
    "ErrorKind",
    "RESPONSE_ERROR_CODES",
    "error_kind_for",
    # Exceptions
    "KafkaRestError",
    "UnsupportedMethod",
    "InvalidResponse",
    "ConnectionError",
    "ResponseError",
    "UnauthorizedRequest",
]
