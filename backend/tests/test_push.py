import json

import pytest
import requests
from pywebpush import WebPushException

from fitlog.core import push
from fitlog.core.exceptions import PushDeliveryError, SubscriptionGone


def _response(status_code):
    r = requests.Response()
    r.status_code = status_code
    return r


def _failing_webpush(response):
    def fake(**kwargs):
        raise WebPushException("push service said no", response=response)
    return fake


@pytest.mark.parametrize("status", [404, 410])
def test_gone_endpoints_raise_subscription_gone(monkeypatch, status):
    monkeypatch.setattr(push, "webpush", _failing_webpush(_response(status)))
    with pytest.raises(SubscriptionGone) as exc:
        push.send_push("https://push.example/x", "k", "a", push.build_payload("t", "b"))
    assert exc.value.status_code == status


@pytest.mark.parametrize("response", [_response(500), _response(429), None])
def test_other_failures_raise_delivery_error(monkeypatch, response):
    monkeypatch.setattr(push, "webpush", _failing_webpush(response))
    with pytest.raises(PushDeliveryError) as exc:
        push.send_push("https://push.example/x", "k", "a", push.build_payload("t", "b"))
    assert not isinstance(exc.value, SubscriptionGone)
    assert exc.value.status_code == (response.status_code if response is not None else None)


def test_send_push_passes_subscription_and_payload(monkeypatch):
    calls = []
    monkeypatch.setattr(push, "webpush", lambda **kwargs: calls.append(kwargs))
    payload = push.build_payload("Morning Reminder", "log today", "/dashboard")
    push.send_push("https://push.example/x", "key", "secret", payload)

    sent = calls[0]
    assert sent["subscription_info"] == {
        "endpoint": "https://push.example/x",
        "keys": {"p256dh": "key", "auth": "secret"},
    }
    assert json.loads(sent["data"]) == {
        "title": "Morning Reminder",
        "body": "log today",
        "icon": "/pwa-192x192.png",
        "badge": "/pwa-192x192.png",
        "url": "/dashboard",
    }
