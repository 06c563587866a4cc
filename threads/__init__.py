#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Threads Package
Background thread functionality (LCU WebSocket event subscriptions)
"""

from .websocket_thread import LCUWebSocket
from .websocket.wamp import LCUEvent, json_api_event

__all__ = [
    'LCUWebSocket',
    'LCUEvent',
    'json_api_event',
]
