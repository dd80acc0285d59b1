# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Tests for record encoding."""

import base64

import pytest

from pykafkarest import EmbeddedFormat, Record, encode_record, encode_records
from pykafkarest.protocol import (
    AVRO_MESSAGE_CONTENT_TYPE,
    BINARY_MESSAGE_CONTENT_TYPE,
    JSON_MESSAGE_CONTENT_TYPE,
)


class TestBinaryEncoding:
    """Tests for the binary format."""

    @pytest.mark.parametrize("key", [None, b"k"])
    @pytest.mark.parametrize("partition", [None, 0, 3])
    def test_optional_fields(self, key, partition) -> None:
        """Test key and partition appear only when set."""
        record = Record(topic="t", key=key, value=b"hello", partition=partition)
        payload = record.as_binary().to_dict()

        assert payload["value"] == "aGVsbG8="
        if key is None:
            assert "key" not in payload
        else:
            assert payload["key"] == "aw=="
        if partition is None:
            assert "partition" not in payload
        else:
            assert payload["partition"] == partition

    def test_str_value(self) -> None:
        """Test strings are UTF-8 encoded before base64."""
        payload = Record(value="héllo").as_binary()
        assert base64.b64decode(payload.value) == "héllo".encode("utf-8")

    def test_no_line_breaks(self) -> None:
        """Test long values are encoded without newlines."""
        payload = Record(value=b"x" * 1000).as_binary()
        assert "\n" not in payload.value

    def test_missing_value(self) -> None:
        """Test encoding a record without a value fails."""
        with pytest.raises(ValueError, match="value is required"):
            Record(key=b"k").as_binary()


class TestJsonEncoding:
    """Tests for the json format."""

    def test_value_is_parsed(self) -> None:
        """Test the JSON string value is decoded before embedding."""
        record = Record(value='{"id": 1, "tags": ["a"]}')
        assert record.as_json().to_dict() == {"value": {"id": 1, "tags": ["a"]}}

    def test_key_and_partition(self) -> None:
        """Test key is embedded as-is and partition when set."""
        record = Record(key="user-1", value="42", partition=1)
        assert record.as_json().to_dict() == {"value": 42, "key": "user-1", "partition": 1}

    def test_null_document(self) -> None:
        """Test a JSON null document still produces a value field."""
        assert Record(value="null").as_json().to_dict() == {"value": None}

    def test_invalid_json_value(self) -> None:
        """Test a value that is not a JSON document fails."""
        with pytest.raises(ValueError):
            Record(value="not json").as_json()

    def test_missing_value(self) -> None:
        """Test encoding a record without a value fails."""
        with pytest.raises(ValueError, match="value is required"):
            Record().as_json()


class TestAvroEncoding:
    """Tests for the avro format."""

    def test_structured_data_is_embedded(self) -> None:
        """Test avro keys and values pass through unchanged."""
        record = Record(key={"id": 1}, value={"name": "x"}, partition=0)
        assert record.as_avro().to_dict() == {
            "value": {"name": "x"},
            "key": {"id": 1},
            "partition": 0,
        }


class TestEncodeRecords:
    """Tests for produce body assembly."""

    def test_encode_record_dispatch(self) -> None:
        """Test the format tag selects the encoder."""
        record = Record(value='"hi"')
        assert encode_record(record, EmbeddedFormat.JSON).value == "hi"
        assert encode_record(record, "binary").value == base64.b64encode(b'"hi"').decode()

    def test_unknown_format(self) -> None:
        """Test unknown format names are rejected."""
        with pytest.raises(ValueError):
            encode_record(Record(value=b"x"), "protobuf")

    def test_binary_body(self) -> None:
        """Test a binary produce body."""
        body = encode_records([Record(value=b"a"), Record(value=b"b", partition=1)])
        assert body == {"records": [{"value": "YQ=="}, {"value": "Yg==", "partition": 1}]}

    def test_avro_schemas(self) -> None:
        """Test avro schema fields are added when given."""
        body = encode_records(
            [Record(value={"f": 1})],
            EmbeddedFormat.AVRO,
            value_schema='{"type": "record"}',
            key_schema_id=7,
        )
        assert body == {
            "records": [{"value": {"f": 1}}],
            "value_schema": '{"type": "record"}',
            "key_schema_id": 7,
        }

    def test_schemas_ignored_for_binary(self) -> None:
        """Test schema fields only apply to avro."""
        body = encode_records([Record(value=b"a")], value_schema_id=3)
        assert "value_schema_id" not in body


class TestRecordFromResponse:
    """Tests for building records from proxy responses."""

    def test_apply_offset(self) -> None:
        """Test produce acknowledgements are copied onto the record."""
        record = Record(value=b"a")
        record.apply_offset({"partition": 2, "offset": 100, "error_code": None, "error": None})
        assert record.partition == 2
        assert record.offset == 100
        assert not record.failed

    def test_apply_offset_error(self) -> None:
        """Test per-record errors are kept on the record."""
        record = Record(value=b"a", partition=1)
        record.apply_offset({"partition": None, "offset": None, "error_code": 2, "error": "boom"})
        assert record.partition == 1
        assert record.failed
        assert record.error == "boom"

    def test_from_binary_message(self) -> None:
        """Test binary messages are base64-decoded."""
        entry = {"key": "aw==", "value": "aGVsbG8=", "partition": 0, "offset": 5}
        record = Record.from_message("t", entry)
        assert record == Record(topic="t", partition=0, key=b"k", value=b"hello", offset=5)

    def test_from_json_message(self) -> None:
        """Test JSON messages can be produced again."""
        entry = {"key": None, "value": {"a": 1}, "partition": 0, "offset": 5}
        record = Record.from_message("t", entry, EmbeddedFormat.JSON)
        assert record.key is None
        assert record.as_json().value == {"a": 1}


class TestEmbeddedFormat:
    """Tests for EmbeddedFormat enum."""

    def test_media_types(self) -> None:
        """Test each format maps to its media type."""
        assert EmbeddedFormat.BINARY.media_type == BINARY_MESSAGE_CONTENT_TYPE
        assert EmbeddedFormat.AVRO.media_type == AVRO_MESSAGE_CONTENT_TYPE
        assert EmbeddedFormat.JSON.media_type == JSON_MESSAGE_CONTENT_TYPE
