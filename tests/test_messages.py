from __future__ import annotations

from pushclient import Priority, PushMessage


def test_string_recipient_is_wrapped() -> None:
    assert PushMessage(to="ExponentPushToken[a]").to == ["ExponentPushToken[a]"]


def test_recipients_not_validated_on_construction() -> None:
    assert PushMessage(to=[]).to == []
    assert PushMessage().to == []
    assert PushMessage(to=[""]).to == [""]


def test_payload_uses_wire_aliases_and_drops_unset_fields() -> None:
    msg = PushMessage(
        to=["ExponentPushToken[a]"],
        title="Hello",
        channel_id="alerts",
        category_id="reply",
        mutable_content=True,
        priority=Priority.HIGH,
        ttl=60,
    )

    assert msg.to_payload() == {
        "to": ["ExponentPushToken[a]"],
        "title": "Hello",
        "channelId": "alerts",
        "categoryId": "reply",
        "mutableContent": True,
        "priority": "high",
        "ttl": 60,
    }


def test_wire_names_accepted_on_input() -> None:
    msg = PushMessage(to="t", channelId="alerts", mutableContent=False)
    assert msg.channel_id == "alerts"
    assert msg.mutable_content is False


def test_unknown_fields_pass_through_verbatim() -> None:
    msg = PushMessage(
        to="t",
        body="b",
        interruptionLevel="time-sensitive",
        richContent={"image": "https://example.com/i.png"},
    )

    payload = msg.to_payload()
    assert payload["interruptionLevel"] == "time-sensitive"
    assert payload["richContent"] == {"image": "https://example.com/i.png"}


def test_sound_accepts_string_or_object() -> None:
    assert PushMessage(to="t", sound="default").to_payload()["sound"] == "default"
    critical = {"critical": True, "name": "default", "volume": 1}
    assert PushMessage(to="t", sound=critical).to_payload()["sound"] == critical
