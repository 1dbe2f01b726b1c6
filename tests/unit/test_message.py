"""Tests for keyword highlighting and payload construction."""
from __future__ import annotations

import pytest

from lark_notifier.message import (
    STYLE_LINK,
    Segment,
    build_payload,
    highlight_segments,
    highlight_text,
    serialize_payload,
)
from lark_notifier.signing import SignedEnvelope


def test_no_keywords_is_identity():
    assert highlight_segments("disk usage high", []) == [Segment("disk usage high")]
    assert highlight_text("disk usage high", ()) == "disk usage high"
    assert highlight_segments("", ["disk"]) == []


def test_alert_scenario_preserves_order():
    segments = highlight_segments("disk usage high", ["disk", "high"])

    assert segments == [
        Segment("disk", emphasised=True),
        Segment(" usage "),
        Segment("high", emphasised=True),
    ]
    assert "".join(s.text for s in segments) == "disk usage high"
    assert highlight_text("disk usage high", ["disk", "high"]) == "**disk** usage **high**"


def test_every_occurrence_is_highlighted():
    text = highlight_text("error: error again, then error", ["error"], marker="__")

    assert text == "__error__: __error__ again, then __error__"


def test_match_is_case_sensitive_and_literal():
    assert highlight_text("Disk disk d.sk", ["disk", "d.sk"]) == "Disk **disk** **d.sk**"


def test_blank_keywords_are_ignored():
    assert highlight_text("abc", ["", "b"]) == "a**b**c"


def test_overlapping_keywords_do_not_rematch_emphasised_text():
    segments = highlight_segments("database", ["data", "base", "tab"])

    assert segments == [Segment("data", True), Segment("base", True)]


def test_payload_shape_without_secret():
    payload = build_payload("Alert", "disk usage high", ["disk"])

    assert payload == {
        "msg_type": "post",
        "content": {
            "post": {
                "zh_cn": {
                    "title": "Alert",
                    "content": [
                        [
                            {"tag": "text", "text": "disk", "style": ["bold"]},
                            {"tag": "text", "text": " usage high"},
                        ]
                    ],
                }
            }
        },
    }
    assert "timestamp" not in payload
    assert "sign" not in payload


def test_payload_with_envelope_carries_both_fields():
    envelope = SignedEnvelope(timestamp=1700000000, signature="c2lnbg==")

    payload = build_payload("Alert", "disk usage high", envelope=envelope)

    assert payload["timestamp"] == "1700000000"
    assert payload["sign"] == "c2lnbg=="


def test_link_style_matches_anchor_elements():
    payload = build_payload("t", "a high b", ["high"], style=STYLE_LINK)
    paragraph = payload["content"]["post"]["zh_cn"]["content"][0]

    assert paragraph[1] == {"tag": "a", "text": "high", "href": ""}


def test_unknown_style_rejected():
    with pytest.raises(ValueError):
        build_payload("t", "c", style="italic")


def test_serialization_is_stable():
    envelope = SignedEnvelope(timestamp=1700000000, signature="abc=")
    first = serialize_payload(build_payload("告警", "磁盘 disk", ["disk"], envelope))
    second = serialize_payload(build_payload("告警", "磁盘 disk", ["disk"], envelope))

    assert first == second
    assert "告警" in first
    assert first.startswith('{"msg_type":"post"')


def test_empty_content_keeps_one_text_element():
    payload = build_payload("Alert", "", ["disk"])

    assert payload["content"]["post"]["zh_cn"]["content"] == [[{"tag": "text", "text": ""}]]
