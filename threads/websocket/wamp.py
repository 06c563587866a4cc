#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
WAMP 1.0 framing used by the LCU WebSocket
Frames are JSON arrays whose first element is the opcode
"""

import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional


class WampOpcode(IntEnum):
    WELCOME = 0
    PREFIX = 1
    CALL = 2
    CALL_RESULT = 3
    CALL_ERROR = 4
    SUBSCRIBE = 5
    UNSUBSCRIBE = 6
    PUBLISH = 7
    EVENT = 8


# Topics published by the LCU
ON_JSON_API_EVENT = "OnJsonApiEvent"
ON_LCDS_EVENT = "OnLcdsEvent"
ON_LOG = "OnLog"
ON_REGION_LOCALE_CHANGED = "OnRegionLocaleChanged"
ON_SERVICE_PROXY_ASYNC_EVENT = "OnServiceProxyAsyncEvent"
ON_SERVICE_PROXY_METHOD_EVENT = "OnServiceProxyMethodEvent"
ON_SERVICE_PROXY_UUID_EVENT = "OnServiceProxyUuidEvent"


def json_api_event(path: str) -> str:
    """Topic for JSON API events under one endpoint path

    "/lol-gameflow/v1/gameflow-phase" -> "OnJsonApiEvent_lol-gameflow_v1_gameflow-phase"
    """
    if not path.startswith("/"):
        path = "/" + path
    return ON_JSON_API_EVENT + path.replace("/", "_")


def subscribe_message(topic: str) -> str:
    return json.dumps([int(WampOpcode.SUBSCRIBE), topic])


def unsubscribe_message(topic: str) -> str:
    return json.dumps([int(WampOpcode.UNSUBSCRIBE), topic])


@dataclass
class LCUEvent:
    """An event frame pushed by the LCU"""
    topic: str
    uri: Optional[str] = None
    event_type: Optional[str] = None
    data: Any = None
    raw: Any = field(default=None, repr=False)


def parse_message(msg) -> Optional[LCUEvent]:
    """Parse an incoming frame, returning None for anything but an event

    Event frames look like ``[8, "<topic>", payload]``. JSON API payloads
    carry ``data``, ``eventType`` and ``uri``; other topics are passed
    through as ``data``.
    """
    if isinstance(msg, (bytes, bytearray)):
        try:
            msg = msg.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if not msg:
        return None
    try:
        frame = json.loads(msg)
    except ValueError:
        return None

    if not isinstance(frame, list) or len(frame) < 3:
        return None
    if frame[0] != WampOpcode.EVENT or not isinstance(frame[1], str):
        return None

    topic, payload = frame[1], frame[2]
    if isinstance(payload, dict) and "uri" in payload:
        return LCUEvent(
            topic=topic,
            data=payload.get("data"),
            uri=payload.get("uri"),
            event_type=payload.get("eventType"),
            raw=payload,
        )
    return LCUEvent(topic=topic, data=payload, raw=payload)
