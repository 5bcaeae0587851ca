"""Tests for the best-effort admin notification sink."""

import httpx
import pytest

from localpros.services import notifications

URL = "https://notify.example.com/admins"


@pytest.fixture
def configured(test_settings, monkeypatch):
    monkeypatch.setattr(test_settings, "notification_url", URL)
    monkeypatch.setattr(test_settings, "notification_api_key", "secret")
    return test_settings


def respond_with(status_code, calls):
    def fake_post(url, json=None, headers=None, timeout=None):
        calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        return httpx.Response(status_code, request=httpx.Request("POST", url), text="body")

    return fake_post


def test_without_url_only_logs(monkeypatch):
    calls = []
    monkeypatch.setattr(notifications.httpx, "post", respond_with(200, calls))
    assert notifications.notify_admins("title", "content") is False
    assert calls == []


def test_posts_title_and_content(configured, monkeypatch):
    calls = []
    monkeypatch.setattr(notifications.httpx, "post", respond_with(200, calls))

    assert notifications.notify_admins("New provider awaiting approval", "Jo signed up") is True
    assert calls[0]["url"] == URL
    assert calls[0]["json"] == {"title": "New provider awaiting approval", "content": "Jo signed up"}
    assert calls[0]["headers"]["Authorization"] == "Bearer secret"
    assert calls[0]["timeout"] == configured.notification_timeout_seconds


def test_error_status_is_reported_not_raised(configured, monkeypatch):
    monkeypatch.setattr(notifications.httpx, "post", respond_with(502, []))
    assert notifications.notify_admins("title", "content") is False


def test_transport_failure_is_reported_not_raised(configured, monkeypatch):
    def unreachable(*args, **kwargs):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(notifications.httpx, "post", unreachable)
    assert notifications.notify_admins("title", "content") is False
