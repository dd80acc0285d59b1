#!/usr/bin/env python3
"""
03_tls_authentication.py - HTTPS, Basic Authentication and Virtual Hosts

This example demonstrates:
- Connecting to an https endpoint with a custom CA
- Mutual TLS with a client certificate
- HTTP basic authentication
- Routing through a virtual host

Prerequisites:
    - Kafka REST proxy behind TLS on proxy.example.com:8443
    - CA and client certificates in ./certs

Run with:
    python 03_tls_authentication.py
"""

from pykafkarest import KafkaRestClient, TLSConfig, connect
from pykafkarest.exceptions import UnauthorizedRequest


def custom_ca():
    """Verify the proxy against a private CA"""
    with connect("https://proxy.example.com:8443", tls_ca_file="certs/ca.crt") as client:
        print(f"Brokers: {client.brokers()}")


def mutual_tls():
    """Present a client certificate"""
    tls = TLSConfig(
        ca_file="certs/ca.crt",
        cert_file="certs/client.crt",
        key_file="certs/client.key",
    )
    with KafkaRestClient.open("https://proxy.example.com:8443", tls=tls) as client:
        print(f"Topics: {list(client.topics())}")


def basic_auth():
    """Authenticate with username and password"""
    client = connect(
        "https://proxy.example.com:8443",
        username="alice",
        password="secret",
        tls_ca_file="certs/ca.crt",
    )
    try:
        print(f"Topics: {list(client.topics())}")
    except UnauthorizedRequest as e:
        # "User `alice` failed to authenticate"
        print(f"✗ {e.message}")
    finally:
        client.close()


def virtual_host():
    """Send requests to a load balancer that routes on the Host header"""
    with connect("http://10.0.0.5:8082", host="kafka-rest.internal") as client:
        print(f"Brokers: {client.brokers()}")


if __name__ == "__main__":
    custom_ca()
    mutual_tls()
    basic_auth()
    virtual_host()
