#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
WebSocket Event Handler
Keeps the subscription registry and routes incoming events to callbacks
"""

import itertools
import threading
from typing import Callable, Dict, List, Tuple

from utils.core.logging import get_logger

from .wamp import LCUEvent, parse_message

log = get_logger()

EventCallback = Callable[[LCUEvent], None]


class WebSocketEventHandler:
    """Thread-safe topic -> callbacks registry with dispatch"""

    def __init__(self):
        self._lock = threading.Lock()
        self._subscribers: Dict[str, List[Tuple[int, EventCallback]]] = {}
        self._handles = itertools.count(1)

    def add(self, topic: str, callback: EventCallback) -> int:
        """Register a callback for a topic

        Returns:
            Handle used to unsubscribe
        """
        if not callable(callback):
            raise TypeError("callback must be callable")
        with self._lock:
            handle = next(self._handles)
            self._subscribers.setdefault(topic, []).append((handle, callback))
        return handle

    def remove(self, topic: str, handle: int) -> bool:
        """Remove a callback

        Returns:
            True when the topic has no callbacks left (and should be unsubscribed)
        """
        with self._lock:
            subs = self._subscribers.get(topic)
            if not subs:
                return False
            remaining = [(h, cb) for h, cb in subs if h != handle]
            if len(remaining) == len(subs):
                return False
            if remaining:
                self._subscribers[topic] = remaining
                return False
            del self._subscribers[topic]
            return True

    def has_topic(self, topic: str) -> bool:
        with self._lock:
            return topic in self._subscribers

    def topics(self) -> List[str]:
        with self._lock:
            return list(self._subscribers)

    def handle_message(self, ws, msg):
        """Handle incoming WebSocket message"""
        event = parse_message(msg)
        if event is None:
            log.trace(f"[ws] ignored frame: {str(msg)[:120]}")
            return
        self.dispatch(event)

    def dispatch(self, event: LCUEvent):
        """Call every callback registered for the event's topic, in order"""
        with self._lock:
            callbacks = [cb for _, cb in self._subscribers.get(event.topic, ())]

        for callback in callbacks:
            try:
                callback(event)
            except Exception as e:  # noqa: BLE001
                log.warning(f"[ws] subscriber for {event.topic} raised {type(e).__name__}: {e}")
