"""Text-generation client tests with an in-memory HTTP session."""

from __future__ import annotations

from typing import Any

import pytest
import requests
from scenario_suite_generator.configuration.runtime_settings import ServiceSettings
from scenario_suite_generator.service_client import (
    MalformedReplyError,
    ServiceState,
    ServiceUnavailableError,
    TextGenerationClient,
    sanitize,
)


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, *, invalid_json: bool = False):
        self.status_code = status_code
        self._body = body
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeSession:
    def __init__(self, *, get=None, post=None):
        self._get = get
        self._post = post
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append(("GET", url, kwargs))
        return _answer(self._get)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append(("POST", url, kwargs))
        return _answer(self._post)


def _answer(outcome: Any) -> FakeResponse:
    if isinstance(outcome, Exception):
        raise outcome
    return outcome


SETTINGS = ServiceSettings(
    base_url="http://localhost:11434", model="mistral:latest", probe_timeout_seconds=5
)


def test_probe_marks_service_available() -> None:
    session = FakeSession(get=FakeResponse(200, {"models": []}))
    client = TextGenerationClient(SETTINGS, session=session)

    assert client.state is ServiceState.UNKNOWN
    assert client.probe() is True
    assert client.state is ServiceState.AVAILABLE
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "http://localhost:11434/api/tags")
    assert kwargs["timeout"] == 5


@pytest.mark.parametrize(
    "outcome",
    [
        requests.ConnectionError("connection refused"),
        requests.Timeout("timed out"),
        FakeResponse(503),
    ],
)
def test_probe_failure_marks_service_unavailable(outcome: Any) -> None:
    client = TextGenerationClient(SETTINGS, session=FakeSession(get=outcome))

    assert client.probe() is False
    assert client.state is ServiceState.UNAVAILABLE


def test_generate_posts_single_non_streaming_request() -> None:
    session = FakeSession(post=FakeResponse(200, {"response": "public class A {}"}))
    client = TextGenerationClient(SETTINGS, session=session)

    text = client.generate("Write a class")

    assert text == "public class A {}"
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", "http://localhost:11434/api/generate")
    assert kwargs["json"]["model"] == "mistral:latest"
    assert kwargs["json"]["prompt"] == "Write a class"
    assert kwargs["json"]["stream"] is False
    assert kwargs["json"]["options"]["temperature"] == 0.1
    assert kwargs["timeout"] == 120


def test_generate_transport_failure_is_unavailable() -> None:
    client = TextGenerationClient(
        SETTINGS, session=FakeSession(post=requests.ConnectionError("reset"))
    )

    with pytest.raises(ServiceUnavailableError):
        client.generate("prompt")


def test_generate_http_error_is_unavailable() -> None:
    client = TextGenerationClient(SETTINGS, session=FakeSession(post=FakeResponse(500, {})))

    with pytest.raises(ServiceUnavailableError, match="HTTP 500"):
        client.generate("prompt")


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(200, {"done": True}),
        FakeResponse(200, {"response": "   "}),
        FakeResponse(200, ["not", "an", "object"]),
        FakeResponse(200, invalid_json=True),
    ],
)
def test_generate_malformed_reply(response: FakeResponse) -> None:
    client = TextGenerationClient(SETTINGS, session=FakeSession(post=response))

    with pytest.raises(MalformedReplyError):
        client.generate("prompt")


def test_list_models_returns_names() -> None:
    body = {"models": [{"name": "mistral:latest"}, {"name": "llama3"}, {"size": 1}]}
    client = TextGenerationClient(SETTINGS, session=FakeSession(get=FakeResponse(200, body)))

    assert client.list_models() == ("mistral:latest", "llama3")


def test_sanitize_strips_fences_and_adds_package() -> None:
    raw = "```java\npublic class LoginPage extends BasePage {}\n```\n"

    assert sanitize(raw, package="pages") == (
        "package pages;\n\npublic class LoginPage extends BasePage {}\n"
    )


def test_sanitize_keeps_existing_package_declaration() -> None:
    raw = "  package com.acme.tests;\n\npublic class A {}  "

    assert sanitize(raw, package="tests") == "package com.acme.tests;\n\npublic class A {}\n"


def test_sanitize_rejects_text_that_is_only_fences() -> None:
    with pytest.raises(MalformedReplyError):
        sanitize("```java\n```")
