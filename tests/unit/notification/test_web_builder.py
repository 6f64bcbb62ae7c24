"""Unit tests for WebNotificationBuilder."""

from __future__ import annotations

import json

import pytest

from apns_payload.kernel.errors import BuilderConsumedError
from apns_payload.notification import (
    NotificationBuilder,
    NotificationOptions,
    WebNotificationBuilder,
    WebPushAlert,
)
from apns_payload.payload import Payload


@pytest.fixture
def alert() -> WebPushAlert:
    return WebPushAlert(title="Hello", body="world", action="View")


class TestWebNotificationBuilder:
    def test_webpush_notification(self, alert: WebPushAlert) -> None:
        payload = WebNotificationBuilder(alert, ["arg1"]).build("device-token", NotificationOptions())
        assert json.loads(payload.to_json_string().unwrap()) == {
            "aps": {
                "alert": {"title": "Hello", "body": "world", "action": "View"},
                "url-args": ["arg1"],
            }
        }

    def test_exact_text(self, alert: WebPushAlert) -> None:
        payload = WebNotificationBuilder(alert, ["arg1"]).build("token")
        assert payload.to_json_string().unwrap() == (
            '{"aps":{"alert":{"title":"Hello","body":"world","action":"View"},"url-args":["arg1"]}}'
        )

    def test_sound_between_alert_and_url_args(self, alert: WebPushAlert) -> None:
        builder = WebNotificationBuilder(alert, ["arg1"])
        builder.set_sound("meow")
        assert builder.build("token").to_json_string().unwrap() == (
            '{"aps":{"alert":{"title":"Hello","body":"world","action":"View"},'
            '"sound":"meow","url-args":["arg1"]}}'
        )

    def test_sound_last_write_wins(self, alert: WebPushAlert) -> None:
        builder = WebNotificationBuilder(alert, []).set_sound("a").set_sound("b")
        assert json.loads(builder.build("t").to_json_string().unwrap())["aps"]["sound"] == "b"

    def test_empty_url_args_always_present(self, alert: WebPushAlert) -> None:
        payload = WebNotificationBuilder(alert, []).build("t")
        assert json.loads(payload.to_json_string().unwrap())["aps"]["url-args"] == []

    def test_url_args_converted_to_strings(self, alert: WebPushAlert) -> None:
        payload = WebNotificationBuilder(alert, ("a", 2)).build("t")
        assert json.loads(payload.to_json_string().unwrap())["aps"]["url-args"] == ["a", "2"]

    def test_never_carries_default_only_fields(self, alert: WebPushAlert) -> None:
        aps = json.loads(WebNotificationBuilder(alert, ["x"]).set_sound("s").build("t").to_json_string().unwrap())["aps"]
        for key in ("badge", "content-available", "category", "mutable-content"):
            assert key not in aps

    def test_no_custom_data(self, alert: WebPushAlert) -> None:
        payload = WebNotificationBuilder(alert, ["x"]).build("t")
        assert payload.data == {}
        assert list(payload.to_dict()) == ["aps"]

    def test_round_trip(self, alert: WebPushAlert) -> None:
        text = WebNotificationBuilder(alert, ["x"]).set_sound("s").build("t").to_json_string().unwrap()
        again = Payload.from_json(text, "t").to_json_string().unwrap()
        assert json.loads(again) == json.loads(text)

    def test_implements_capability(self, alert: WebPushAlert) -> None:
        assert isinstance(WebNotificationBuilder(alert, []), NotificationBuilder)

    def test_single_use(self, alert: WebPushAlert) -> None:
        builder = WebNotificationBuilder(alert, [])
        builder.build("t")
        with pytest.raises(BuilderConsumedError):
            builder.build("t")
        with pytest.raises(BuilderConsumedError):
            builder.set_sound("late")

    def test_builders_are_independent(self, alert: WebPushAlert) -> None:
        first = WebNotificationBuilder(alert, ["1"]).set_sound("one").build("a")
        second = WebNotificationBuilder(alert, ["2"]).build("b")
        assert "sound" not in second.to_dict()["aps"]
        assert first.to_dict()["aps"]["url-args"] == ["1"]
