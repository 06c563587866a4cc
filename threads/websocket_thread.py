#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
WebSocket event thread
"""

import threading
from typing import Callable, Optional

from config import WS_PING_INTERVAL_DEFAULT, WS_PING_TIMEOUT_DEFAULT, WS_THREAD_JOIN_TIMEOUT_S
from lcu.core.client import LCU
from utils.core.logging import get_logger

from .websocket_connection import WebSocketConnection
from .websocket.websocket_event_handler import EventCallback, WebSocketEventHandler
from .websocket.wamp import json_api_event, subscribe_message, unsubscribe_message

log = get_logger()


class LCUWebSocket(threading.Thread):
    """LCU WebSocket event thread with WAMP subscriptions

    Subscriptions can be added before or after start(); they are re-sent
    every time the socket (re)connects.

    Example:
        ws = LCUWebSocket(LCU())
        ws.subscribe_path("/lol-gameflow/v1/gameflow-phase", lambda e: print(e.data))
        ws.start()
    """

    def __init__(
        self,
        lcu: LCU,
        ping_interval: int = WS_PING_INTERVAL_DEFAULT,
        ping_timeout: int = WS_PING_TIMEOUT_DEFAULT,
        on_connect: Optional[Callable[[], None]] = None,
        on_disconnect: Optional[Callable[[], None]] = None,
    ):
        super().__init__(daemon=True, name="LCUWebSocket")
        self.lcu = lcu
        self.event_handler = WebSocketEventHandler()
        self.connection = WebSocketConnection(
            lcu,
            self.event_handler,
            ping_interval,
            ping_timeout,
            on_connect=on_connect,
            on_disconnect=on_disconnect,
        )
        # Serializes registry changes with the frames they imply
        self._sub_lock = threading.Lock()

    def run(self):
        """Main WebSocket loop"""
        self.connection.run()

    def subscribe(self, topic: str, callback: EventCallback) -> int:
        """Call ``callback(event)`` for every event published on ``topic``

        Returns:
            Handle for unsubscribe()
        """
        with self._sub_lock:
            is_new = not self.event_handler.has_topic(topic)
            handle = self.event_handler.add(topic, callback)
            if is_new and self.connection.is_connected:
                self.connection.send(subscribe_message(topic))
        log.debug(f"[ws] subscribe {topic} (handle={handle})")
        return handle

    def subscribe_path(self, path: str, callback: EventCallback) -> int:
        """Subscribe to JSON API events of a single endpoint path"""
        return self.subscribe(json_api_event(path), callback)

    def unsubscribe(self, topic: str, handle: int) -> bool:
        """Remove a callback; the topic is unsubscribed when none remain

        Returns:
            True if the topic was unsubscribed from the LCU
        """
        with self._sub_lock:
            emptied = self.event_handler.remove(topic, handle)
            if emptied and self.connection.is_connected:
                self.connection.send(unsubscribe_message(topic))
        log.debug(f"[ws] unsubscribe {topic} (handle={handle}, emptied={emptied})")
        return emptied

    def unsubscribe_path(self, path: str, handle: int) -> bool:
        return self.unsubscribe(json_api_event(path), handle)

    def wait_connected(self, timeout: Optional[float] = None) -> bool:
        """Block until the socket is open; False on timeout"""
        return self.connection.connected_event.wait(timeout)

    def stop(self, join: bool = True):
        """Stop the WebSocket thread gracefully"""
        self.connection.stop()
        if join and self.is_alive() and threading.current_thread() is not self:
            self.join(WS_THREAD_JOIN_TIMEOUT_S)

    @property
    def is_connected(self) -> bool:
        """Get WebSocket connection status"""
        return self.connection.is_connected

    @property
    def ws(self):
        """Get the underlying WebSocketApp"""
        return self.connection.ws

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False
