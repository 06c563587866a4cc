#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Threads WebSocket Package
WAMP framing and subscription dispatch for the LCU WebSocket
"""

from .wamp import (
    LCUEvent,
    WampOpcode,
    json_api_event,
    parse_message,
    subscribe_message,
    unsubscribe_message,
)
from .websocket_event_handler import WebSocketEventHandler

__all__ = [
    'LCUEvent',
    'WampOpcode',
    'WebSocketEventHandler',
    'json_api_event',
    'parse_message',
    'subscribe_message',
    'unsubscribe_message',
]
