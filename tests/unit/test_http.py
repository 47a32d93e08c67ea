from __future__ import annotations

import pytest
import requests

from biis_import.common.http import HttpClient, HttpRequestError, RetryConfig, RetryableHttpError, is_http_url


class FakeResponse:
    def __init__(self, status_code: int, content: bytes = b""):
        self.status_code = status_code
        self.content = content


def test_http_get_bytes_success(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=1))
    monkeypatch.setattr(client.session, "request", lambda **_kwargs: FakeResponse(200, b"<ValXML/>"))

    assert client.get_bytes("https://example.com/report.xml") == b"<ValXML/>"


def test_http_retryable_status_raises_retryable_error(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=1))
    monkeypatch.setattr(client.session, "request", lambda **_kwargs: FakeResponse(503))

    with pytest.raises(RetryableHttpError):
        client.get_bytes("https://example.com/report.xml")


def test_http_client_error_is_not_retried(monkeypatch):
    calls = []

    def fake_request(**_kwargs):
        calls.append(1)
        return FakeResponse(404)

    client = HttpClient(retry=RetryConfig(max_attempts=3, multiplier=0.0, max_wait=0.0))
    monkeypatch.setattr(client.session, "request", fake_request)

    with pytest.raises(HttpRequestError):
        client.get_bytes("https://example.com/report.xml")
    assert len(calls) == 1


def test_http_retries_transport_failures(monkeypatch):
    responses = [requests.ConnectionError("down"), FakeResponse(200, b"ok")]

    def fake_request(**_kwargs):
        item = responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    client = HttpClient(retry=RetryConfig(max_attempts=2, multiplier=0.0, max_wait=0.0))
    monkeypatch.setattr(client.session, "request", fake_request)

    assert client.get_bytes("https://example.com/report.xml") == b"ok"


def test_is_http_url():
    assert is_http_url("https://example.com/a.xml")
    assert not is_http_url("tests/fixtures/biis/valuation_report.xml")
