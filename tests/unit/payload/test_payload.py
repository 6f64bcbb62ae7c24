"""Unit tests for APS and the Payload envelope."""

from __future__ import annotations

import json

import pytest

from apns_payload.kernel.errors import SerializationError, ValidationError
from apns_payload.kernel.types import Nothing, Some
from apns_payload.payload import (
    APS,
    CriticalSound,
    NotificationOptions,
    Payload,
    PayloadLike,
    PlainAlert,
    SimpleSound,
    WebPushAlert,
)


# ---------------------------------------------------------------------------
# APS
# ---------------------------------------------------------------------------


class TestAPS:
    def test_empty_aps_is_empty_object(self) -> None:
        assert APS().to_dict() == {}

    def test_all_members_default_to_nothing(self) -> None:
        aps = APS()
        assert aps.alert == Nothing()
        assert aps.url_args == Nothing()

    def test_wire_order(self) -> None:
        aps = APS(
            url_args=Some(("a",)),
            mutable_content=Some(1),
            category=Some("cat"),
            content_available=Some(1),
            sound=Some(SimpleSound("s")),
            badge=Some(2),
            alert=Some(PlainAlert("hi")),
        )
        assert list(aps.to_dict()) == [
            "alert",
            "badge",
            "sound",
            "content-available",
            "category",
            "mutable-content",
            "url-args",
        ]
        assert aps.present_keys() == list(aps.to_dict())

    def test_zero_badge_is_present(self) -> None:
        assert APS(badge=Some(0)).to_dict() == {"badge": 0}

    def test_empty_url_args_are_present(self) -> None:
        assert APS(url_args=Some(())).to_dict() == {"url-args": []}

    def test_from_dict_rejects_unknown_keys(self) -> None:
        with pytest.raises(SerializationError):
            APS.from_dict({"alert": "x", "priority": 10})

    def test_from_dict_rejects_non_object(self) -> None:
        with pytest.raises(SerializationError):
            APS.from_dict("alert")


# ---------------------------------------------------------------------------
# Payload
# ---------------------------------------------------------------------------


class TestPayload:
    def test_device_token_and_options_stay_out_of_body(self) -> None:
        opts = NotificationOptions(apns_topic="com.example.app")
        payload = Payload(device_token="tok", aps=APS(alert=Some(PlainAlert("Hi"))), options=opts)
        assert payload.to_json_string().unwrap() == '{"aps":{"alert":"Hi"}}'
        assert payload.get_device_token() == "tok"
        assert payload.get_options() is opts

    def test_custom_data_flattened_after_aps_sorted(self) -> None:
        payload = Payload(
            device_token="tok",
            aps=APS(alert=Some(PlainAlert("Hi"))),
            data={"zeta": 1, "alpha": {"nested": True}},
        )
        assert payload.to_json_string().unwrap() == (
            '{"aps":{"alert":"Hi"},"alpha":{"nested":true},"zeta":1}'
        )

    def test_reserved_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Payload(device_token="tok", aps=APS(), data={"aps": {}})

    def test_data_is_read_only(self) -> None:
        payload = Payload(device_token="tok", aps=APS(), data={"k": "v"})
        with pytest.raises(TypeError):
            payload.data["k"] = "other"  # type: ignore[index]

    def test_is_frozen(self) -> None:
        payload = Payload(device_token="tok", aps=APS())
        with pytest.raises(Exception):
            payload.device_token = "other"  # type: ignore[misc]

    def test_unserialisable_data_is_err(self) -> None:
        payload = Payload(device_token="tok", aps=APS(), data={"when": object()})
        result = payload.to_json_string()
        assert result.is_err()
        assert isinstance(result.error, SerializationError)
        assert result.error.payload_type == "payload"

    def test_nan_is_err(self) -> None:
        payload = Payload(device_token="tok", aps=APS(), data={"v": float("nan")})
        assert payload.to_json_string().is_err()

    def test_non_ascii_kept(self) -> None:
        payload = Payload(device_token="tok", aps=APS(alert=Some(PlainAlert("prööt"))))
        assert payload.to_json_string().unwrap() == '{"aps":{"alert":"prööt"}}'

    def test_compared_by_value_but_unhashable(self) -> None:
        first = Payload(device_token="t", aps=APS(), data={"k": [1]})
        second = Payload(device_token="t", aps=APS(), data={"k": [1]})
        assert first == second
        assert Payload.__hash__ is None
        with pytest.raises(TypeError):
            hash(first)

    def test_is_payload_like(self) -> None:
        assert isinstance(Payload(device_token="t", aps=APS()), PayloadLike)


class TestPayloadFromJson:
    def test_round_trip(self) -> None:
        original = Payload(
            device_token="tok",
            aps=APS(
                alert=Some(WebPushAlert(title="Hello", body="world", action="View")),
                sound=Some(CriticalSound(name="alarm", volume=0.8)),
                url_args=Some(("a", "b")),
            ),
            data={"custom": [1, 2, {"x": None}]},
        )
        text = original.to_json_string().unwrap()
        parsed = Payload.from_json(text, "tok")
        assert parsed == original
        assert json.loads(parsed.to_json_string().unwrap()) == json.loads(text)

    def test_options_attached(self) -> None:
        opts = NotificationOptions(apns_id="id-1")
        parsed = Payload.from_json('{"aps":{"alert":"Hi"}}', "tok", opts)
        assert parsed.options is opts
        assert parsed.aps.alert == Some(PlainAlert("Hi"))

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(SerializationError):
            Payload.from_json("{not json", "tok")

    def test_missing_aps_raises(self) -> None:
        with pytest.raises(SerializationError):
            Payload.from_json('{"alert":"Hi"}', "tok")
