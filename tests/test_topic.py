# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Tests for topic and partition handles."""

import json

from conftest import ENDPOINT, make_response
from pykafkarest import EmbeddedFormat, KafkaRestClient, Partition, Record, TopicMetadata
from pykafkarest.protocol import AVRO_MESSAGE_CONTENT_TYPE, BINARY_MESSAGE_CONTENT_TYPE

TOPIC_METADATA = {
    "name": "events",
    "configs": {"cleanup.policy": "delete"},
    "partitions": [
        {
            "partition": 0,
            "leader": 1,
            "replicas": [{"broker": 1, "leader": True, "in_sync": True}],
        },
        {"partition": 1, "leader": 2, "replicas": []},
    ],
}


class TestTopic:
    """Tests for Topic."""

    def test_metadata(self, client: KafkaRestClient, session_request) -> None:
        """Test metadata is parsed into a model."""
        session_request.return_value = make_response(200, TOPIC_METADATA)

        metadata = client.topic("events").metadata()

        assert isinstance(metadata, TopicMetadata)
        assert metadata.name == "events"
        assert metadata.configs == {"cleanup.policy": "delete"}
        assert metadata.partitions[0].replicas[0].in_sync
        assert session_request.call_args.args == ("GET", f"{ENDPOINT}/topics/events")

    def test_name_is_quoted(self, client: KafkaRestClient, session_request) -> None:
        """Test topic names are escaped in paths."""
        session_request.return_value = make_response(200, TOPIC_METADATA)
        client.topic("a/b").metadata()
        assert session_request.call_args.args[1] == f"{ENDPOINT}/topics/a%2Fb"

    def test_partitions(self, client: KafkaRestClient, session_request) -> None:
        """Test partitions() returns partition handles."""
        session_request.return_value = make_response(200, TOPIC_METADATA["partitions"])

        partitions = client.topic("events").partitions()

        assert [p.partition for p in partitions] == [0, 1]
        assert all(isinstance(p, Partition) for p in partitions)
        assert session_request.call_args.args[1] == f"{ENDPOINT}/topics/events/partitions"

    def test_produce_binary(self, client: KafkaRestClient, session_request) -> None:
        """Test producing records sends a binary body and copies offsets back."""
        session_request.return_value = make_response(
            200,
            {
                "key_schema_id": None,
                "value_schema_id": None,
                "offsets": [
                    {"partition": 0, "offset": 10, "error_code": None, "error": None},
                    {"partition": None, "offset": None, "error_code": 2, "error": "failed"},
                ],
            },
        )
        first = Record(key=b"k", value=b"hello")
        second = Record(value=b"world")

        records = client.topic("events").produce(first, second)

        args, kwargs = session_request.call_args
        assert args == ("POST", f"{ENDPOINT}/topics/events")
        assert kwargs["headers"]["Content-Type"] == BINARY_MESSAGE_CONTENT_TYPE
        assert json.loads(kwargs["data"]) == {
            "records": [{"value": "aGVsbG8=", "key": "aw=="}, {"value": "d29ybGQ="}]
        }

        assert records == [first, second]
        assert first.topic == "events"
        assert first.partition == 0
        assert first.offset == 10
        assert not first.failed
        assert second.failed
        assert second.error == "failed"

    def test_produce_avro(self, client: KafkaRestClient, session_request) -> None:
        """Test avro produce uses the avro media type and schema id."""
        session_request.return_value = make_response(
            200, {"offsets": [{"partition": 0, "offset": 1}], "value_schema_id": 5}
        )

        client.topic("events").produce(
            Record(value={"f": 1}), format=EmbeddedFormat.AVRO, value_schema_id=5
        )

        kwargs = session_request.call_args.kwargs
        assert kwargs["headers"]["Content-Type"] == AVRO_MESSAGE_CONTENT_TYPE
        assert json.loads(kwargs["data"])["value_schema_id"] == 5


class TestPartition:
    """Tests for Partition."""

    def test_metadata(self, client: KafkaRestClient, session_request) -> None:
        """Test partition metadata."""
        session_request.return_value = make_response(200, TOPIC_METADATA["partitions"][1])

        metadata = client.topic("events").partition(1).metadata()

        assert metadata.partition == 1
        assert metadata.leader == 2
        assert session_request.call_args.args[1] == f"{ENDPOINT}/topics/events/partitions/1"

    def test_produce(self, client: KafkaRestClient, session_request) -> None:
        """Test producing to a partition fills in the partition number."""
        session_request.return_value = make_response(200, {"offsets": [{"offset": 3}]})

        (record,) = client.topic("events").partition(2).produce(Record(value=b"x"))

        assert session_request.call_args.args == ("POST", f"{ENDPOINT}/topics/events/partitions/2")
        assert record.partition == 2
        assert record.offset == 3

    def test_produce_omits_record_partition(self, client: KafkaRestClient, session_request) -> None:
        """Test records sent to a partition endpoint carry no partition field."""
        session_request.return_value = make_response(200, {"offsets": [{"offset": 3}]})

        (record,) = client.topic("events").partition(2).produce(Record(value=b"x", partition=5))

        body = json.loads(session_request.call_args.kwargs["data"])
        assert body == {"records": [{"value": "eA=="}]}
        assert record.partition == 2
