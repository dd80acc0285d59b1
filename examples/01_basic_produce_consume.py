#!/usr/bin/env python3
"""
01_basic_produce_consume.py - Kafka REST Proxy Basic Producer and Consumer Example

What this example demonstrates:
- Using connect() for one-liner client creation
- Producing binary records to a topic
- Reading them back through a consumer instance
- Proper resource cleanup with context managers

Key Concepts:
- Record: One message with optional key and partition
- Offset: The position of a record in a topic partition
- Consumer instance: Lives on the proxy until it is closed

Prerequisites:
    - Kafka REST proxy running on localhost:8082
    - Topic 'hello-world' exists
    - pykafkarest installed: pip install pykafkarest

Run with:
    python 01_basic_produce_consume.py
"""

from pykafkarest import Record, connect


def main():
    print("Connecting to Kafka REST proxy at http://localhost:8082...")
    client = connect("http://localhost:8082")

    try:
        print(f"Brokers: {client.brokers()}")

        # === Produce ===
        print("\n=== Producing ===")
        records = client.topic("hello-world").produce(
            Record(key=b"user-123", value=b"Hello, Kafka! This is my first message."),
        )
        for record in records:
            if record.failed:
                print(f"✗ Failed: {record.error}")
            else:
                print(f"✓ Sent to {record.topic}[{record.partition}] @ offset {record.offset}")

        # === Consume ===
        print("\n=== Consuming ===")
        with client.consumer("demo-group", auto_offset_reset="smallest") as consumer:
            for record in consumer.read("hello-world"):
                print(f"Received: Key={record.key}, Value={record.value.decode()}")
            consumer.commit()

        print("\n✓ Successfully produced and consumed a message!")

    finally:
        # Always close the client
        client.close()


if __name__ == "__main__":
    main()
