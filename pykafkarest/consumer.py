# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Consumer instance handle.

A consumer instance lives on the proxy: it is created in a consumer group,
read from topic by topic, and deleted when no longer needed. Each method on
this handle is a single request; there is no background polling.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from .models import CommittedOffset, ConsumerConfig, ConsumerInstance
from .protocol import Method
from .record import Record

if TYPE_CHECKING:
    from .client import KafkaRestClient

logger = logging.getLogger(__name__)


class Consumer:
    """
    A consumer instance in a consumer group.

    Example:
        >>> with client.consumer("my-group", auto_offset_reset="smallest") as consumer:
        ...     for record in consumer.read("events"):
        ...         print(record.offset, record.value)
        ...     consumer.commit()
        # The instance is deleted when exiting the block
    """

    def __init__(
        self,
        client: KafkaRestClient,
        group: str,
        *,
        config: ConsumerConfig | None = None,
        **options: Any,
    ) -> None:
        """
        Initialize consumer handle. No request is made.

        Args:
            client: REST proxy client.
            group: Consumer group name.
            config: Consumer configuration.
            **options: Override config options.
        """
        if config is None:
            config = ConsumerConfig(**options)
        else:
            config = config.model_copy()
            for key, value in options.items():
                setattr(config, key, value)

        self._client = client
        self._group = group
        self._config = config
        self._instance: ConsumerInstance | None = None

    @property
    def group(self) -> str:
        """Get consumer group name."""
        return self._group

    @property
    def config(self) -> ConsumerConfig:
        return self._config

    @property
    def instance(self) -> ConsumerInstance | None:
        """The registered instance, or None before create() and after close()."""
        return self._instance

    @property
    def instance_id(self) -> str | None:
        return self._instance.instance_id if self._instance else None

    @property
    def group_path(self) -> str:
        return f"/consumers/{quote(self._group, safe='')}"

    @property
    def path(self) -> str:
        instance = self._ensure_instance()
        return f"{self.group_path}/instances/{quote(instance.instance_id, safe='')}"

    def create(self) -> ConsumerInstance:
        """
        Register the instance with the proxy.

        Calling create() on a registered instance returns it unchanged.
        """
        if self._instance is None:
            response = self._client.request(
                Method.POST, self.group_path, body=self._config.to_request()
            )
            self._instance = ConsumerInstance.model_validate(response)
            logger.debug(
                "Created consumer instance %s in group %s", self._instance.instance_id, self._group
            )
        return self._instance

    def _ensure_instance(self) -> ConsumerInstance:
        if self._instance is None:
            return self.create()
        return self._instance

    def read(self, topic: str, *, max_bytes: int | None = None) -> list[Record]:
        """
        Read the next batch of messages for a topic.

        Args:
            topic: Topic to read from.
            max_bytes: Upper bound on the response size.

        Returns:
            Records in the consumer's embedded format. Binary keys and values
            are decoded to bytes.
        """
        path = f"{self.path}/topics/{quote(topic, safe='')}"
        if max_bytes is not None:
            path = f"{path}?max_bytes={max_bytes}"

        fmt = self._config.format
        entries = self._client.request(Method.GET, path, accept=fmt)
        return [Record.from_message(topic, entry, fmt) for entry in entries]

    def commit(self) -> list[CommittedOffset]:
        """Commit the offsets of all messages read so far."""
        entries = self._client.request(Method.POST, f"{self.path}/offsets")
        return [CommittedOffset.model_validate(entry) for entry in entries]

    def close(self) -> None:
        """Delete the instance from the proxy. Closing twice is a no-op."""
        if self._instance is None:
            return
        path = self.path
        self._client.request(Method.DELETE, path)
        self._instance = None
        logger.debug("Deleted consumer instance at %s", path)

    def __enter__(self) -> Consumer:
        """Context manager entry."""
        self.create()
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"Consumer(group={self._group!r}, instance_id={self.instance_id!r})"
