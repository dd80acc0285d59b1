# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Pydantic models for the Kafka REST proxy client.

Provides validated configuration and the response documents returned by the
proxy's topic, partition and consumer endpoints.
"""

from __future__ import annotations

from enum import Enum
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .protocol import DEFAULT_ACCEPT_HEADER, DEFAULT_CONTENT_TYPE_HEADER, EmbeddedFormat


class OffsetReset(str, Enum):
    """Where a new consumer instance starts when the group has no committed offset."""
    SMALLEST = "smallest"
    LARGEST = "largest"


# ============================================================================
# Configuration Models
# ============================================================================


class ClientConfig(BaseModel):
    """Configuration for the REST proxy client."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    endpoint: str = Field(
        default="http://localhost:8082",
        description="Base URL of the REST proxy",
    )

    # Basic authentication, only used when both are set
    username: str | None = None
    password: str | None = None

    # Virtual host override sent as the Host header
    host: str | None = None

    # Default content negotiation
    accept: str = DEFAULT_ACCEPT_HEADER
    content_type: str = DEFAULT_CONTENT_TYPE_HEADER

    # Client identification
    client_id: str = "pykafkarest-client"

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https"):
            raise ValueError("Endpoint must be an http:// or https:// URL")
        if not parts.hostname:
            raise ValueError("Endpoint must include a host")
        return v

    def has_credentials(self) -> bool:
        """Basic auth is sent only when both username and password are set."""
        return self.username is not None and self.password is not None


class ConsumerConfig(BaseModel):
    """Options for creating a consumer instance."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: str | None = None
    format: EmbeddedFormat = EmbeddedFormat.BINARY
    auto_offset_reset: OffsetReset | None = None
    auto_commit_enable: bool | None = None

    def to_request(self) -> dict[str, Any]:
        """Body of the create-instance request."""
        body: dict[str, Any] = {"format": self.format.value}
        if self.name is not None:
            body["name"] = self.name
        if self.auto_offset_reset is not None:
            body["auto.offset.reset"] = self.auto_offset_reset.value
        if self.auto_commit_enable is not None:
            body["auto.commit.enable"] = "true" if self.auto_commit_enable else "false"
        return body


# ============================================================================
# Response Models
# ============================================================================


class PartitionOffset(BaseModel):
    """Acknowledgement of one produced record."""

    model_config = ConfigDict(frozen=True)

    partition: int | None = None
    offset: int | None = None
    error_code: int | None = None
    error: str | None = None


class ProduceResponse(BaseModel):
    """Response to a produce request."""

    model_config = ConfigDict(frozen=True)

    offsets: list[PartitionOffset] = Field(default_factory=list)
    key_schema_id: int | None = None
    value_schema_id: int | None = None


class ReplicaInfo(BaseModel):
    """A replica of a partition."""

    model_config = ConfigDict(frozen=True)

    broker: int
    leader: bool = False
    in_sync: bool = False


class PartitionMetadata(BaseModel):
    """Metadata about a partition."""

    model_config = ConfigDict(frozen=True)

    partition: int
    leader: int | None = None
    replicas: list[ReplicaInfo] = Field(default_factory=list)


class TopicMetadata(BaseModel):
    """Metadata about a topic."""

    model_config = ConfigDict(frozen=True)

    name: str
    configs: dict[str, Any] = Field(default_factory=dict)
    partitions: list[PartitionMetadata] = Field(default_factory=list)


class ConsumerInstance(BaseModel):
    """A consumer instance registered in a consumer group."""

    model_config = ConfigDict(frozen=True)

    instance_id: str
    base_uri: str


class CommittedOffset(BaseModel):
    """Offsets committed for one partition by a consumer instance."""

    model_config = ConfigDict(frozen=True)

    topic: str
    partition: int
    consumed: int
    committed: int
