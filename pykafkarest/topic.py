# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Topic and partition handles.

Handles are cheap: creating one makes no request. Every method issues one
request through the owning client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from .models import PartitionMetadata, ProduceResponse, TopicMetadata
from .protocol import EmbeddedFormat, Method
from .record import Record, encode_records

if TYPE_CHECKING:
    from .client import KafkaRestClient


class Topic:
    """
    A topic on the proxy.

    Example:
        >>> topic = client.topic("events")
        >>> records = topic.produce(Record(key=b"user-1", value=b"signed up"))
        >>> print(records[0].partition, records[0].offset)
    """

    def __init__(self, client: KafkaRestClient, name: str) -> None:
        self._client = client
        self._name = name

    @property
    def client(self) -> KafkaRestClient:
        return self._client

    @property
    def name(self) -> str:
        """Get topic name."""
        return self._name

    @property
    def path(self) -> str:
        return f"/topics/{quote(self._name, safe='')}"

    def metadata(self) -> TopicMetadata:
        """Fetch the topic's configuration and partition layout."""
        return TopicMetadata.model_validate(self._client.request(Method.GET, self.path))

    def partitions(self) -> list[Partition]:
        """List the topic's partitions."""
        entries = self._client.request(Method.GET, f"{self.path}/partitions")
        return [Partition(self, entry["partition"]) for entry in entries]

    def partition(self, partition: int) -> Partition:
        """Get a handle for one partition. No request is made."""
        return Partition(self, partition)

    def produce(
        self,
        *records: Record,
        format: EmbeddedFormat | str = EmbeddedFormat.BINARY,
        **schemas: Any,
    ) -> list[Record]:
        """
        Produce records to the topic.

        The proxy picks the partition unless a record sets one.

        Args:
            *records: Records to produce.
            format: Embedded format of keys and values.
            **schemas: key_schema, value_schema, key_schema_id and
                value_schema_id for avro.

        Returns:
            The given records, updated with topic, partition, offset and any
            per-record error reported by the proxy.
        """
        return _produce(self._client, self.path, self._name, records, format, schemas)

    def __repr__(self) -> str:
        return f"Topic({self._name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Topic):
            return NotImplemented
        return self._client is other._client and self._name == other._name

    def __hash__(self) -> int:
        return hash((id(self._client), self._name))


class Partition:
    """A single partition of a topic."""

    def __init__(self, topic: Topic, partition: int) -> None:
        self._topic = topic
        self._partition = partition

    @property
    def topic(self) -> Topic:
        return self._topic

    @property
    def partition(self) -> int:
        """Get partition number."""
        return self._partition

    @property
    def path(self) -> str:
        return f"{self._topic.path}/partitions/{self._partition}"

    def metadata(self) -> PartitionMetadata:
        """Fetch the partition's leader and replicas."""
        return PartitionMetadata.model_validate(self._topic.client.request(Method.GET, self.path))

    def produce(
        self,
        *records: Record,
        format: EmbeddedFormat | str = EmbeddedFormat.BINARY,
        **schemas: Any,
    ) -> list[Record]:
        """Produce records to this partition. See Topic.produce()."""
        result = _produce(
            self._topic.client, self.path, self._topic.name, records, format, schemas,
            with_partition=False,
        )
        for record in result:
            record.partition = self._partition
        return result

    def __repr__(self) -> str:
        return f"Partition({self._topic.name!r}, {self._partition})"


def _produce(
    client: KafkaRestClient,
    path: str,
    topic: str,
    records: tuple[Record, ...],
    fmt: EmbeddedFormat | str,
    schemas: dict[str, Any],
    with_partition: bool = True,
) -> list[Record]:
    fmt = EmbeddedFormat(fmt)
    body = encode_records(records, fmt, with_partition=with_partition, **schemas)
    response = ProduceResponse.model_validate(
        client.request(Method.POST, path, body=body, content_type=fmt)
    )

    # Offsets are returned in request order
    for record, offset in zip(records, response.offsets):
        record.topic = topic
        record.apply_offset(offset.model_dump())
    return list(records)
