#!/usr/bin/env python3
"""
02_error_handling.py - Error Handling Patterns

This example demonstrates:
- Connection error handling
- Branching on the kind of a proxy error
- Per-record produce errors

Prerequisites:
    - Kafka REST proxy running on localhost:8082
    - pykafkarest installed

Run with:
    python 02_error_handling.py
"""

from pykafkarest import KafkaRestClient, Record
from pykafkarest.error_codes import ErrorKind
from pykafkarest.exceptions import ConnectionError, ResponseError, UnauthorizedRequest


def connection_error_handling():
    """Handling connection errors"""
    print("Connection Error Handling")
    print("-" * 50)

    with KafkaRestClient("http://localhost:19999") as client:
        try:
            print("Requesting from an unavailable proxy...")
            client.brokers()
        except ConnectionError as e:
            print(f"✓ Caught connection error: {e}")


def response_error_handling():
    """Handling errors reported by the proxy"""
    print("\nResponse Error Handling")
    print("-" * 50)

    with KafkaRestClient.open("http://localhost:8082") as client:
        try:
            client.topic("non-existent-topic").metadata()
        except UnauthorizedRequest as e:
            print(f"✓ Not allowed: {e.message}")
        except ResponseError as e:
            if e.kind is ErrorKind.TOPIC_NOT_FOUND:
                print(f"✓ Topic does not exist ({e.code}): {e.message}")
            else:
                print(f"✓ Caught {e.kind.value} ({e.code}): {e.message}")


def record_error_handling():
    """Per-record errors are reported on the records, not raised"""
    print("\nRecord Error Handling")
    print("-" * 50)

    with KafkaRestClient.open("http://localhost:8082") as client:
        records = client.topic("test-errors").produce(
            Record(value=b"first"),
            Record(value=b"second", partition=99),
        )
        for record in records:
            if record.failed:
                print(f"✗ Record failed [{record.error_code}]: {record.error}")
            else:
                print(f"✓ Record stored at offset {record.offset}")


def main():
    connection_error_handling()
    response_error_handling()
    record_error_handling()


if __name__ == "__main__":
    main()
