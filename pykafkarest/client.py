# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Kafka REST proxy client.

Every operation is a single synchronous HTTP request over one persistent
connection, with no retries.

Usage Patterns:

    # Pattern 1: Simple usage (recommended for scripts)
    from pykafkarest import connect
    client = connect("http://localhost:8082")
    print(client.brokers())

    # Pattern 2: Context manager (recommended for applications)
    from pykafkarest import KafkaRestClient
    with KafkaRestClient("http://localhost:8082") as client:
        topics = client.topics()
    # Connection closes when exiting the block

    # Pattern 3: Scoped helper
    with KafkaRestClient.open("http://localhost:8082", username="alice", password="secret") as client:
        client.topic("events").produce(Record(value=b"hello"))

    # Pattern 4: Explicit lifecycle management
    client = KafkaRestClient("http://localhost:8082")
    try:
        client.request("GET", "/topics")
    finally:
        client.close()
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Iterator
from urllib.parse import urlsplit

import requests

from .consumer import Consumer
from .exceptions import (
    ConnectionError,
    InvalidResponse,
    ResponseError,
    UnauthorizedRequest,
    UnsupportedMethod,
)
from .models import ClientConfig, ConsumerConfig
from .protocol import EmbeddedFormat, Method
from .tls import TLSConfig
from .topic import Topic

logger = logging.getLogger(__name__)


class KafkaRestClient:
    """
    Client for a Kafka REST proxy.

    The client handles:
    - Content negotiation with the proxy's versioned media types
    - HTTP basic authentication
    - Virtual host routing through the Host header
    - Classification of error responses into typed exceptions

    The underlying connection is opened on the first request and reused
    until close() is called. A closed client reopens its connection on the
    next request.

    The client is not thread-safe; use one client per thread.

    Example:
        >>> client = KafkaRestClient("http://localhost:8082")
        >>> client.request("GET", "/topics")
        ['events', 'logs']
        >>> client.close()
    """

    def __init__(
        self,
        endpoint: str | None = None,
        *,
        username: str | None = None,
        password: str | None = None,
        host: str | None = None,
        config: ClientConfig | None = None,
        tls: TLSConfig | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the client. No connection is made until the first request.

        Args:
            endpoint: Base URL of the proxy, e.g. "https://proxy:8082".
            username: Username for HTTP basic authentication.
            password: Password for HTTP basic authentication.
            host: Value for the Host header, overriding the endpoint's host.
            config: Optional ClientConfig object.
            tls: Optional TLSConfig for https endpoints.
            **kwargs: Override config options (accept, content_type, client_id).
        """
        overrides = {"username": username, "password": password, "host": host, **kwargs}
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if endpoint is not None:
            overrides["endpoint"] = endpoint

        if config is None:
            config = ClientConfig(**overrides)
        else:
            config = config.model_copy()
            for key, value in overrides.items():
                setattr(config, key, value)

        parts = urlsplit(config.endpoint)

        self._config = config
        self._tls = tls
        self._scheme = parts.scheme
        self._base_url = f"{parts.scheme}://{parts.netloc}"
        self._session: requests.Session | None = None

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def config(self) -> ClientConfig:
        """Client configuration."""
        return self._config

    @property
    def endpoint(self) -> str:
        """Base URL requests are sent to."""
        return self._base_url

    @property
    def username(self) -> str | None:
        return self._config.username

    @property
    def password(self) -> str | None:
        return self._config.password

    @property
    def host(self) -> str | None:
        """Virtual host override, if any."""
        return self._config.host

    @property
    def is_open(self) -> bool:
        """Check if the client currently holds an open connection."""
        return self._session is not None

    # =========================================================================
    # Connection Lifecycle
    # =========================================================================

    def _ensure_session(self) -> requests.Session:
        """Return the open session, creating it on first use."""
        if self._session is None:
            session = requests.Session()
            session.headers["User-Agent"] = self._config.client_id
            if self._scheme == "https" and self._tls is not None:
                session.verify = self._tls.verify()
                session.cert = self._tls.cert()
            self._session = session
            logger.debug("Opened connection to %s", self._base_url)
        return self._session

    def close(self) -> None:
        """Close the connection. Closing an already closed client is a no-op."""
        if self._session is not None:
            self._session.close()
            self._session = None
            logger.debug("Closed connection to %s", self._base_url)

    def __enter__(self) -> KafkaRestClient:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    @classmethod
    @contextmanager
    def open(cls, endpoint: str | None = None, **kwargs: Any) -> Iterator[KafkaRestClient]:
        """
        Create a client for the duration of a block.

        The connection is closed when the block exits, including when it
        raises.

        Example:
            >>> with KafkaRestClient.open("http://localhost:8082") as client:
            ...     client.brokers()
        """
        client = cls(endpoint, **kwargs)
        try:
            yield client
        finally:
            client.close()

    # =========================================================================
    # Request Executor
    # =========================================================================

    def request(
        self,
        method: Method | str,
        path: str,
        *,
        body: Any = None,
        content_type: EmbeddedFormat | str | None = None,
        accept: EmbeddedFormat | str | None = None,
    ) -> Any:
        """
        Send one request to the proxy and decode its JSON response.

        Args:
            method: GET, POST, PUT or DELETE.
            path: Absolute path on the proxy, e.g. "/topics".
            body: JSON-serializable request body, or None for no payload.
            content_type: Content-Type override (media type or EmbeddedFormat).
            accept: Accept override (media type or EmbeddedFormat).

        Returns:
            The decoded JSON document, or an empty dict when the response
            has no body.

        Raises:
            UnsupportedMethod: If the method is not supported. No request is sent.
            UnauthorizedRequest: If the proxy answers with HTTP 403.
            ResponseError: If the proxy answers with any other error status.
            InvalidResponse: If the response body is not valid JSON.
            ConnectionError: If the proxy cannot be reached.
        """
        try:
            verb = Method.parse(method)
        except ValueError:
            raise UnsupportedMethod(method) from None

        headers = {
            "Accept": _media_type(accept) or self._config.accept,
            "Content-Type": _media_type(content_type) or self._config.content_type,
        }
        if self._config.host:
            headers["Host"] = self._config.host

        auth = None
        if self._config.has_credentials():
            auth = (self._config.username, self._config.password)

        data = json.dumps(body) if body is not None else None
        url = self._base_url + path

        session = self._ensure_session()
        logger.debug("%s %s", verb.value, url)
        try:
            response = session.request(
                verb.value,
                url,
                data=data,
                headers=headers,
                auth=auth,
                allow_redirects=False,
            )
        except requests.RequestException as e:
            raise ConnectionError(f"{verb.value} {url} failed: {e}", self._base_url) from e

        logger.debug("%s %s -> %d", verb.value, url, response.status_code)
        return self._handle_response(response)

    def _handle_response(self, response: requests.Response) -> Any:
        """Decode a successful response or raise the matching error."""
        status = response.status_code

        if 200 <= status < 300:
            if not response.content:
                return {}
            return _decode_json(response)

        if status == 403:
            if self._config.username is None:
                message = "Unauthorized"
            else:
                message = f"User `{self._config.username}` failed to authenticate"
            logger.warning("Request to %s rejected: %s", response.url, message)
            raise UnauthorizedRequest(status, message)

        if not response.content:
            logger.warning("Request to %s failed with HTTP %d", response.url, status)
            raise ResponseError(status, response.reason)

        data = _decode_json(response)
        code = message = None
        if isinstance(data, dict):
            code = data.get("error_code")
            message = data.get("message")

        error = ResponseError(code, message)
        logger.warning(
            "Request to %s failed with HTTP %d: %s (%s)", response.url, status, message, error.kind.value
        )
        raise error

    # =========================================================================
    # Topics, Brokers and Consumers
    # =========================================================================

    def topics(self) -> dict[str, Topic]:
        """
        List the topics of the cluster.

        Returns:
            Mapping of topic name to Topic handle.
        """
        return {name: Topic(self, name) for name in self.request(Method.GET, "/topics")}

    def brokers(self) -> list[int]:
        """List the broker ids of the cluster."""
        return self.request(Method.GET, "/brokers").get("brokers", [])

    def topic(self, name: str) -> Topic:
        """Get a handle for a topic. No request is made."""
        return Topic(self, name)

    def consumer(
        self,
        group: str,
        *,
        config: ConsumerConfig | None = None,
        **options: Any,
    ) -> Consumer:
        """
        Get a handle for a consumer instance in a consumer group.

        The instance is registered with the proxy on Consumer.create(), or
        on first use.

        Args:
            group: Consumer group name.
            config: Optional ConsumerConfig.
            **options: ConsumerConfig fields (name, format, auto_offset_reset,
                auto_commit_enable).
        """
        return Consumer(self, group, config=config, **options)


def _media_type(value: EmbeddedFormat | str | None) -> str | None:
    if isinstance(value, EmbeddedFormat):
        return value.media_type
    return value


def _decode_json(response: requests.Response) -> Any:
    try:
        return json.loads(response.content)
    except ValueError as e:
        raise InvalidResponse(str(e)) from e


# =============================================================================
# Module-level convenience functions
# =============================================================================

def connect(
    endpoint: str = "http://localhost:8082",
    *,
    username: str | None = None,
    password: str | None = None,
    host: str | None = None,
    tls: TLSConfig | None = None,
    tls_ca_file: str | None = None,
    tls_cert_file: str | None = None,
    tls_key_file: str | None = None,
    tls_insecure_skip_verify: bool = False,
    **kwargs: Any,
) -> KafkaRestClient:
    """
    Create a REST proxy client.

    Args:
        endpoint: Base URL of the proxy.
        username: Optional username for basic authentication.
        password: Optional password for basic authentication.
        host: Optional Host header override for virtual hosting.
        tls: TLSConfig object for https endpoints.
        tls_ca_file: Path to CA bundle (alternative to tls parameter).
        tls_cert_file: Path to client certificate file (for mutual TLS).
        tls_key_file: Path to client private key file (for mutual TLS).
        tls_insecure_skip_verify: Skip certificate verification (not for production).
        **kwargs: Additional configuration options.

    Returns:
        KafkaRestClient instance.

    Examples:
        >>> client = connect("http://localhost:8082")
        >>> client = connect("https://proxy:8082", username="alice", password="secret")
        >>> client = connect("https://proxy:8082", tls_ca_file="ca.crt")

    Note:
        Remember to call client.close() when done, or use the context manager:
        >>> with connect() as client:
        ...     client.brokers()
    """
    if tls is None and (tls_ca_file or tls_cert_file or tls_insecure_skip_verify):
        tls = TLSConfig(
            ca_file=tls_ca_file,
            cert_file=tls_cert_file,
            key_file=tls_key_file,
            insecure_skip_verify=tls_insecure_skip_verify,
        )

    return KafkaRestClient(
        endpoint,
        username=username,
        password=password,
        host=host,
        tls=tls,
        **kwargs,
    )
