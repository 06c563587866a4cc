#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
WebSocket Connection Management
Handles WebSocket connection lifecycle and callbacks
"""

import threading
from typing import Callable, Optional

import websocket  # websocket-client

from config import (
    LCU_HOST,
    WS_PING_INTERVAL_DEFAULT,
    WS_PING_TIMEOUT_DEFAULT,
    WS_RECONNECT_DELAY,
    WS_SUBPROTOCOL,
)
from lcu import LCU
from utils.core.logging import get_logger, log_section

from .websocket.websocket_event_handler import WebSocketEventHandler
from .websocket.wamp import subscribe_message

log = get_logger()


class WebSocketConnection:
    """Manages WebSocket connection lifecycle"""

    def __init__(
        self,
        lcu: LCU,
        handler: WebSocketEventHandler,
        ping_interval: int = WS_PING_INTERVAL_DEFAULT,
        ping_timeout: int = WS_PING_TIMEOUT_DEFAULT,
        on_connect: Optional[Callable[[], None]] = None,
        on_disconnect: Optional[Callable[[], None]] = None,
    ):
        """Initialize WebSocket connection manager

        Args:
            lcu: LCU client instance (provides credentials and TLS settings)
            handler: Subscription registry receiving the messages
            ping_interval: WebSocket ping interval
            ping_timeout: WebSocket ping timeout
            on_connect: Called after the socket opens and subscriptions are sent
            on_disconnect: Called after the socket closes
        """
        self.lcu = lcu
        self.handler = handler
        self.ping_interval = ping_interval
        self.ping_timeout = ping_timeout
        self.on_connect = on_connect
        self.on_disconnect = on_disconnect

        self.ws = None
        self.is_connected = False
        self.connected_event = threading.Event()
        self._stop_event = threading.Event()
        self._send_lock = threading.Lock()
        # Guards assigning self.ws against a concurrent stop()
        self._ws_lock = threading.Lock()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def run(self):
        """Main WebSocket connection loop (reconnects until stop())"""
        while not self._stop_event.is_set():
            self.lcu.refresh_if_needed()
            credentials = self.lcu.credentials
            if not self.lcu.ok or credentials is None:
                self._stop_event.wait(WS_RECONNECT_DELAY)
                continue

            with self._ws_lock:
                if self._stop_event.is_set():
                    break
                ws = websocket.WebSocketApp(
                    credentials.ws_url,
                    header=[f"Authorization: {credentials.auth_header}"],
                    subprotocols=[WS_SUBPROTOCOL],
                    on_open=self._on_open,
                    on_message=self._on_message,
                    on_error=self._on_error,
                    on_close=self._on_close,
                )
                self.ws = ws

            try:
                ws.run_forever(
                    origin=f"https://{LCU_HOST}:{credentials.port}",
                    sslopt={"context": self.lcu.connection.ssl_context()},
                    http_no_proxy=[LCU_HOST],
                    ping_interval=self.ping_interval,
                    ping_timeout=self.ping_timeout,
                )
            except websocket.WebSocketException as e:
                log.debug(f"[ws] exception: {e}")
            except OSError as e:
                log.debug(f"[ws] socket error: {e}")

            self._mark_disconnected()
            if self._stop_event.is_set():
                break
            # The client may have restarted on a new port
            self.lcu.refresh_if_needed(force=True)
            self._stop_event.wait(WS_RECONNECT_DELAY)

        self._close_socket()

    def send(self, text: str) -> bool:
        """Send a raw frame; False when not connected or the send fails"""
        ws = self.ws
        if not self.is_connected or ws is None:
            return False
        try:
            with self._send_lock:
                ws.send(text)
            return True
        except (websocket.WebSocketException, OSError) as e:
            log.debug(f"[ws] send failed: {e}")
            return False

    def _on_open(self, ws):
        """WebSocket connection opened"""
        if self._stop_event.is_set():
            # stop() raced with run_forever() starting up
            ws.close()
            return
        log_section(log, "WebSocket Connected", "🔌", {"Port": self.lcu.port, "Status": "Active"})
        self.is_connected = True
        self.connected_event.set()

        for topic in self.handler.topics():
            try:
                with self._send_lock:
                    ws.send(subscribe_message(topic))
                log.debug(f"[ws] subscribed to {topic}")
            except (websocket.WebSocketException, OSError) as e:
                log.debug(f"[ws] subscribe to {topic} failed: {e}")

        if self.on_connect:
            self.on_connect()

    def _on_message(self, ws, msg):
        """WebSocket message received"""
        self.handler.handle_message(ws, msg)

    def _on_error(self, ws, err):
        """WebSocket error"""
        log.debug(f"[ws] error: {err}")

    def _on_close(self, ws, status, msg):
        """WebSocket connection closed"""
        log_section(log, "WebSocket Disconnected", "🔌", {"Status Code": status, "Message": msg})
        self._mark_disconnected()

    def _mark_disconnected(self):
        was_connected = self.is_connected
        self.is_connected = False
        self.connected_event.clear()
        if was_connected and self.on_disconnect:
            self.on_disconnect()

    def _close_socket(self):
        with self._ws_lock:
            ws = self.ws
        if ws is None:
            return
        try:
            ws.close()
            log.debug("[ws] WebSocket closed")
        except (websocket.WebSocketException, OSError) as e:
            log.debug(f"[ws] close failed: {e}")

    def stop(self):
        """Stop the WebSocket connection"""
        self._stop_event.set()
        self._close_socket()
