"""Keyword highlighting and payload construction for Lark ``post`` messages."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .signing import SignedEnvelope

STYLE_BOLD = "bold"
STYLE_LINK = "link"
HIGHLIGHT_STYLES = (STYLE_BOLD, STYLE_LINK)
DEFAULT_LOCALE = "zh_cn"


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of content text, optionally emphasised."""

    text: str
    emphasised: bool = False


def highlight_segments(content: str, keywords: Sequence[str]) -> List[Segment]:
    """Split ``content`` so every keyword occurrence becomes an emphasised segment.

    Keywords are applied in order and only plain segments are searched, so a
    keyword that overlaps an earlier match is not found inside it. Joining the
    segment texts always gives back ``content``.
    """

    if not content:
        return []

    segments = [Segment(content)]
    for keyword in keywords:
        if not keyword:
            continue
        split: List[Segment] = []
        for segment in segments:
            if segment.emphasised or keyword not in segment.text:
                split.append(segment)
                continue
            parts = segment.text.split(keyword)
            for index, part in enumerate(parts):
                if index:
                    split.append(Segment(keyword, emphasised=True))
                if part:
                    split.append(Segment(part))
        segments = split
    return segments


def highlight_text(content: str, keywords: Sequence[str], marker: str = "**") -> str:
    """Return ``content`` with every keyword occurrence wrapped in ``marker``."""

    return "".join(
        f"{marker}{segment.text}{marker}" if segment.emphasised else segment.text
        for segment in highlight_segments(content, keywords)
    )


def _element(segment: Segment, style: str) -> Dict[str, Any]:
    if not segment.emphasised:
        return {"tag": "text", "text": segment.text}
    if style == STYLE_LINK:
        # An empty href renders the text as a link without navigating anywhere
        return {"tag": "a", "text": segment.text, "href": ""}
    return {"tag": "text", "text": segment.text, "style": ["bold"]}


def build_payload(
    title: str,
    content: str,
    keywords: Sequence[str] = (),
    envelope: Optional[SignedEnvelope] = None,
    style: str = STYLE_BOLD,
    locale: str = DEFAULT_LOCALE,
) -> Dict[str, Any]:
    """Assemble the JSON body for a rich-text bot message.

    ``timestamp`` and ``sign`` are added together when ``envelope`` is given;
    the timestamp is sent as a string, as the bot API documents it.
    """

    if style not in HIGHLIGHT_STYLES:
        raise ValueError(f"Unknown highlight style {style!r}")

    segments = highlight_segments(content, keywords) or [Segment("")]
    paragraph = [_element(segment, style) for segment in segments]
    payload: Dict[str, Any] = {
        "msg_type": "post",
        "content": {
            "post": {
                locale: {
                    "title": title,
                    "content": [paragraph],
                }
            }
        },
    }
    if envelope is not None:
        payload["timestamp"] = str(envelope.timestamp)
        payload["sign"] = envelope.signature
    return payload


def serialize_payload(payload: Dict[str, Any]) -> str:
    """Encode a payload as compact JSON, keeping non-ASCII text readable."""

    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
