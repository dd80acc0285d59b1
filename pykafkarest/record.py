# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Record encoding for produce requests.

A Record is encoded into the wire shape of one embedded format:

    binary: {"value": base64(value), "key": base64(key), "partition": p}
    json:   {"value": json.loads(value), "key": key, "partition": p}
    avro:   {"value": value, "key": key, "partition": p}

``key`` and ``partition`` are only present when set on the record.

Note that in json format the record value is expected to hold an already
serialized JSON document, which is parsed before it is embedded.
"""

from __future__ import annotations

import base64
import json
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .protocol import EmbeddedFormat


@dataclass
class Record:
    """A single message, either to be produced or received from the proxy."""

    topic: str | None = None
    partition: int | None = None
    key: Any = None
    value: Any = None
    offset: int | None = None
    error: str | None = None
    error_code: int | None = None

    @property
    def failed(self) -> bool:
        """True when the proxy reported an error for this record."""
        return self.error_code is not None

    def as_binary(self) -> RecordPayload:
        """Encode this record for the binary format."""
        return encode_binary(self)

    def as_json(self) -> RecordPayload:
        """Encode this record for the json format."""
        return encode_json(self)

    def as_avro(self) -> RecordPayload:
        """Encode this record for the avro format."""
        return encode_avro(self)

    def apply_offset(self, entry: dict[str, Any]) -> Record:
        """Copy partition, offset and error fields from a produce acknowledgement."""
        if entry.get("partition") is not None:
            self.partition = entry["partition"]
        self.offset = entry.get("offset")
        self.error = entry.get("error")
        self.error_code = entry.get("error_code")
        return self

    @classmethod
    def from_message(
        cls,
        topic: str,
        entry: dict[str, Any],
        fmt: EmbeddedFormat = EmbeddedFormat.BINARY,
    ) -> Record:
        """
        Build a record from a message returned by a consume request.

        Binary keys and values are base64-decoded to bytes. JSON values are
        serialized back to a string so that the record can be produced again.
        """
        key = entry.get("key")
        value = entry.get("value")
        if fmt is EmbeddedFormat.BINARY:
            key = _b64decode(key)
            value = _b64decode(value)
        elif fmt is EmbeddedFormat.JSON and value is not None:
            value = json.dumps(value)

        return cls(
            topic=entry.get("topic", topic),
            partition=entry.get("partition"),
            key=key,
            value=value,
            offset=entry.get("offset"),
        )


@dataclass(frozen=True)
class RecordPayload:
    """Wire shape of one record inside a produce request."""

    value: Any
    key: Any = None
    partition: int | None = None

    def to_dict(self, with_partition: bool = True) -> dict[str, Any]:
        """Convert to the JSON-serializable dict sent to the proxy."""
        data: dict[str, Any] = {"value": self.value}
        if self.key is not None:
            data["key"] = self.key
        if with_partition and self.partition is not None:
            data["partition"] = self.partition
        return data


def _require_value(record: Record) -> Any:
    if record.value is None:
        raise ValueError("Record value is required for encoding")
    return record.value


def _to_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _b64encode(data: bytes | str) -> str:
    return base64.b64encode(_to_bytes(data)).decode("ascii")


def _b64decode(data: str | None) -> bytes | None:
    if data is None:
        return None
    return base64.b64decode(data)


def encode_binary(record: Record) -> RecordPayload:
    """Base64-encode key and value."""
    value = _b64encode(_require_value(record))
    key = _b64encode(record.key) if record.key is not None else None
    return RecordPayload(value=value, key=key, partition=record.partition)


def encode_json(record: Record) -> RecordPayload:
    """Parse the JSON document held in the value; the key is embedded as-is."""
    value = json.loads(_require_value(record))
    return RecordPayload(value=value, key=record.key, partition=record.partition)


def encode_avro(record: Record) -> RecordPayload:
    """Embed key and value as-is; they must already match the avro schemas."""
    value = _require_value(record)
    return RecordPayload(value=value, key=record.key, partition=record.partition)


RECORD_ENCODERS: dict[EmbeddedFormat, Callable[[Record], RecordPayload]] = {
    EmbeddedFormat.BINARY: encode_binary,
    EmbeddedFormat.JSON: encode_json,
    EmbeddedFormat.AVRO: encode_avro,
}


def encode_record(record: Record, fmt: EmbeddedFormat | str) -> RecordPayload:
    """Encode a record in the given embedded format."""
    return RECORD_ENCODERS[EmbeddedFormat(fmt)](record)


def encode_records(
    records: Iterable[Record],
    fmt: EmbeddedFormat | str = EmbeddedFormat.BINARY,
    *,
    key_schema: str | None = None,
    value_schema: str | None = None,
    key_schema_id: int | None = None,
    value_schema_id: int | None = None,
    with_partition: bool = True,
) -> dict[str, Any]:
    """
    Build the body of a produce request.

    Args:
        records: Records to produce.
        fmt: Embedded format of keys and values.
        key_schema: Avro schema for keys (avro only).
        value_schema: Avro schema for values (avro only).
        key_schema_id: Registered key schema id, instead of key_schema.
        value_schema_id: Registered value schema id, instead of value_schema.
        with_partition: False when producing to a partition endpoint, whose
            records carry no partition field.

    Returns:
        JSON-serializable request body.
    """
    fmt = EmbeddedFormat(fmt)
    body: dict[str, Any] = {
        "records": [encode_record(record, fmt).to_dict(with_partition) for record in records],
    }

    if fmt is EmbeddedFormat.AVRO:
        schemas = {
            "key_schema": key_schema,
            "key_schema_id": key_schema_id,
            "value_schema": value_schema,
            "value_schema_id": value_schema_id,
        }
        body.update({name: value for name, value in schemas.items() if value is not None})

    return body
