# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Shared fixtures: a client whose HTTP requests are answered by a mock."""

import json
from typing import Any
from unittest.mock import patch

import pytest
import requests

from pykafkarest import KafkaRestClient

ENDPOINT = "http://localhost:8082"


def make_response(
    status: int = 200,
    body: Any = None,
    *,
    reason: str = "OK",
    url: str = ENDPOINT,
    encoding: str | None = "utf-8",
) -> requests.Response:
    """Build a requests.Response with the given status and body.

    Dicts and lists are JSON-encoded; str and bytes are sent verbatim.
    """
    if body is None:
        content = b""
    elif isinstance(body, bytes):
        content = body
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = json.dumps(body).encode("utf-8")

    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response.url = url
    response.encoding = encoding
    response._content = content
    return response


@pytest.fixture
def session_request():
    """Patch requests.Session.request; calls are recorded without self."""
    with patch("requests.Session.request") as request:
        request.return_value = make_response(200, {})
        yield request


@pytest.fixture
def client(session_request) -> KafkaRestClient:
    """Client pointed at a mocked proxy."""
    c = KafkaRestClient(ENDPOINT)
    yield c
    c.close()
